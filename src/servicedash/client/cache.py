# Local cache: durable key/value store the client falls back to offline.
# Created: 2026-10-18
#
# One JSON file per key at <cache_dir>/<key>.json, chmod 0600 since the auth
# entries can hold a plaintext password. Nothing here is ever reconciled with
# the server; it only mirrors what the client last saw or wrote.

from __future__ import annotations

import copy
import json
import logging
import os
import stat
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

# Keys, one per document plus the session token
LINKS_KEY = "dashboard_links"
LINKS_ORDER_KEY = "dashboard_links_order"
DASHBOARD_SETTINGS_KEY = "dashboard_settings"
AUTH_SETTINGS_KEY = "dashboard_auth_settings"
AUTH_TOKEN_KEY = "dashboard_auth_token"


@runtime_checkable
class LocalCacheProtocol(Protocol):
    def load(self, key: str) -> Any | None:
        """Return the cached value, or None if missing or unreadable."""
        ...

    def save(self, key: str, value: Any) -> None:
        """Store *value*. Raises OSError on failure."""
        ...

    def delete(self, key: str) -> bool:
        """Remove *key*. Returns True if something was removed."""
        ...


class FileLocalCache:
    """File-based cache at ``<base_path>/<key>.json``."""

    def __init__(self, base_path: Path | None = None):
        if base_path is None:
            from servicedash.config import get_settings

            base_path = get_settings().cache_dir
        self.base_path = Path(base_path)
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        return self.base_path / f"{key}.json"

    def load(self, key: str) -> Any | None:
        path = self._path(key)
        if not path.exists():
            return None

        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Error parsing cached %s: %s", key, e)
            return None

    def save(self, key: str, value: Any) -> None:
        path = self._path(key)
        path.write_text(json.dumps(value, indent=2, ensure_ascii=False), encoding="utf-8")
        os.chmod(path, stat.S_IRUSR | stat.S_IWUSR)

    def delete(self, key: str) -> bool:
        path = self._path(key)
        if path.exists():
            path.unlink()
            return True
        return False


class MemoryLocalCache:
    """Dict-backed cache; values are deep-copied like a JSON round trip."""

    def __init__(self, initial: dict[str, Any] | None = None):
        self._data: dict[str, Any] = copy.deepcopy(initial or {})

    def load(self, key: str) -> Any | None:
        value = self._data.get(key)
        return copy.deepcopy(value) if value is not None else None

    def save(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)

    def delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None
