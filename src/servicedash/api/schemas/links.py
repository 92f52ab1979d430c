# Link and link-order schemas.
# Created: 2026-10-18

from __future__ import annotations

from pydantic import Field

from servicedash.api.schemas.common import APIModel
from servicedash.documents.models import Link, generate_id, next_timestamp, now_ms


class LinkModel(APIModel):
    """A stored link as returned by the API."""

    id: str
    name: str
    url: str
    description: str = ""
    image_url: str | None = Field(default=None, alias="imageUrl")
    created_at: int = Field(alias="createdAt")
    updated_at: int = Field(alias="updatedAt")


class LinkCreateRequest(APIModel):
    """New link. ``id`` and timestamps may be supplied by the caller."""

    id: str | None = None
    name: str
    url: str
    description: str = ""
    image_url: str | None = Field(default=None, alias="imageUrl")
    created_at: int | None = Field(default=None, alias="createdAt")
    updated_at: int | None = Field(default=None, alias="updatedAt")

    def to_link(self) -> Link:
        """Fill in whatever the caller left out: id, createdAt, updatedAt."""
        created_at = self.created_at if self.created_at is not None else now_ms()
        return Link(
            id=self.id or generate_id(),
            name=self.name,
            url=self.url,
            description=self.description,
            image_url=self.image_url or None,
            created_at=created_at,
            updated_at=self.updated_at if self.updated_at is not None else created_at,
        )


class LinkUpdateRequest(APIModel):
    """Replacement for an existing link.

    ``id``, ``createdAt`` and ``updatedAt`` are accepted but server-controlled.
    """

    id: str | None = None
    name: str
    url: str
    description: str = ""
    image_url: str | None = Field(default=None, alias="imageUrl")
    created_at: int | None = Field(default=None, alias="createdAt")
    updated_at: int | None = Field(default=None, alias="updatedAt")

    def apply_to(self, existing: Link) -> Link:
        """The replacement element: same id and createdAt, fresh updatedAt."""
        return Link(
            id=existing.id,
            name=self.name,
            url=self.url,
            description=self.description,
            image_url=self.image_url or None,
            created_at=existing.created_at,
            updated_at=next_timestamp(max(existing.updated_at, self.updated_at or 0)),
        )


class LinksResponse(APIModel):
    links: list[LinkModel]


class LinkOrderModel(APIModel):
    """Manual sort order: a list of link ids."""

    order: list[str] = Field(default_factory=list)
