"""Document data models.

Created: 2026-10-18

The four persisted documents and the records inside them:
- links               {"links": [Link, ...]}
- links_order         {"order": [link id, ...]}
- dashboard_settings  DashboardSettings
- auth_settings       AuthSettings

Design notes:
- Dataclasses with to_dict()/from_dict(); the JSON wire/disk shape is camelCase
- IDs are UUID4 strings, assigned once
- Timestamps are integer epoch milliseconds
"""

import time
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# Placeholder returned instead of a stored password; sent back it means "unchanged"
PASSWORD_MASK = "********"

# Token handed out by login while auth is disabled
AUTH_DISABLED_TOKEN = "disabled"


# ============================================================================
# Enums
# ============================================================================


class DocumentType(str, Enum):
    """The named documents the store knows about."""

    LINKS = "links"
    LINKS_ORDER = "links_order"
    DASHBOARD_SETTINGS = "dashboard_settings"
    AUTH_SETTINGS = "auth_settings"


# ============================================================================
# Helper Functions
# ============================================================================


def generate_id() -> str:
    """Generate a unique ID."""
    return str(uuid.uuid4())


def now_ms() -> int:
    """Current time as integer epoch milliseconds."""
    return time.time_ns() // 1_000_000


def next_timestamp(previous: int) -> int:
    """A timestamp strictly later than *previous*, normally just now."""
    return max(now_ms(), previous + 1)


# ============================================================================
# Data Models
# ============================================================================


@dataclass
class Link:
    """A single dashboard entry.

    Attributes:
        id: Stable identifier, never reassigned
        name: Display name (e.g., "Router")
        url: Where the card points
        description: Free text shown under the name
        image_url: Optional data URL for the card image
        created_at: Creation time, epoch ms, fixed
        updated_at: Last modification time, epoch ms
    """

    id: str = field(default_factory=generate_id)
    name: str = ""
    url: str = ""
    description: str = ""
    image_url: str | None = None
    created_at: int = field(default_factory=now_ms)
    updated_at: int = 0

    def __post_init__(self) -> None:
        if not self.updated_at:
            self.updated_at = self.created_at

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "url": self.url,
            "description": self.description,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }
        if self.image_url:
            data["imageUrl"] = self.image_url
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Link":
        """Create from dictionary."""
        created_at = int(data.get("createdAt") or now_ms())
        return cls(
            id=data.get("id") or generate_id(),
            name=data.get("name", ""),
            url=data.get("url", ""),
            description=data.get("description", ""),
            image_url=data.get("imageUrl") or None,
            created_at=created_at,
            updated_at=int(data.get("updatedAt") or created_at),
        )


@dataclass
class DashboardSettings:
    """Dashboard appearance. Singleton document."""

    title: str = "Services Dashboard"
    subtitle: str = "Access all your local services in one place"
    primary_color: str = "#2563eb"
    background_color: str = "#ffffff"

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "subtitle": self.subtitle,
            "primaryColor": self.primary_color,
            "backgroundColor": self.background_color,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DashboardSettings":
        defaults = cls()
        return cls(
            title=data.get("title", defaults.title),
            subtitle=data.get("subtitle", defaults.subtitle),
            primary_color=data.get("primaryColor", defaults.primary_color),
            background_color=data.get("backgroundColor", defaults.background_color),
        )


@dataclass
class AuthSettings:
    """Single shared login. Singleton document.

    The password is stored in plaintext; see DESIGN.md.
    """

    is_enabled: bool = False
    username: str = ""
    password: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "isEnabled": self.is_enabled,
            "username": self.username,
            "password": self.password,
        }

    def masked(self) -> dict[str, Any]:
        """Wire form for reads: the password is replaced by the mask."""
        data = self.to_dict()
        data["password"] = PASSWORD_MASK if self.password else ""
        return data

    def check_credentials(self, username: str, password: str) -> bool:
        """Strict equality on both fields."""
        return username == self.username and password == self.password

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AuthSettings":
        return cls(
            is_enabled=bool(data.get("isEnabled", False)),
            username=data.get("username", ""),
            password=data.get("password", ""),
        )
