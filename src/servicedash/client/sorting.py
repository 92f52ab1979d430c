"""Display-order helpers: sort, search and drag-reorder staging.

All functions are pure and return new lists.
"""

from __future__ import annotations

from enum import Enum

from servicedash.documents.models import Link


class SortOption(str, Enum):
    CUSTOM = "custom"  # manual order from links_order
    NAME = "name"
    CREATED = "created"  # newest first
    UPDATED = "updated"  # most recently changed first


def sort_links(
    links: list[Link],
    option: SortOption | str = SortOption.CUSTOM,
    order: list[str] | None = None,
) -> list[Link]:
    """Sort *links* for display.

    With ``custom``, links follow their position in *order*; links whose id
    is missing from it keep their relative order and go last.
    """
    option = SortOption(option)

    if option is SortOption.CUSTOM:
        positions = {link_id: i for i, link_id in reversed(list(enumerate(order or [])))}
        last = len(order or [])
        return sorted(links, key=lambda link: positions.get(link.id, last))
    if option is SortOption.NAME:
        return sorted(links, key=lambda link: link.name.casefold())
    if option is SortOption.CREATED:
        return sorted(links, key=lambda link: link.created_at, reverse=True)
    return sorted(links, key=lambda link: link.updated_at, reverse=True)


def filter_links(links: list[Link], query: str) -> list[Link]:
    """Case-insensitive substring search over name and description."""
    needle = query.strip().casefold()
    if not needle:
        return list(links)
    return [
        link
        for link in links
        if needle in link.name.casefold() or needle in link.description.casefold()
    ]


def move_link(links: list[Link], dragged_id: str, target_id: str) -> list[Link]:
    """Move the dragged link into the target's slot.

    Unknown ids (or dropping a link on itself) return an unchanged copy.
    """
    ids = [link.id for link in links]
    if dragged_id == target_id or dragged_id not in ids or target_id not in ids:
        return list(links)

    result = list(links)
    dragged = result.pop(ids.index(dragged_id))
    result.insert(ids.index(target_id), dragged)
    return result
