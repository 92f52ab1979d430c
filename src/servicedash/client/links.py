# Link service: links and manual order, server first, local cache second.
# Created: 2026-10-18
#
# Every method succeeds from the caller's point of view. When the API is
# unreachable, reads come from the cache and writes land only in the cache.

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable
from dataclasses import replace

from servicedash.client.cache import LINKS_KEY, LINKS_ORDER_KEY
from servicedash.client.fallback import FallbackService, with_fallback
from servicedash.client.sorting import SortOption, filter_links, sort_links
from servicedash.documents.models import Link, next_timestamp, now_ms

logger = logging.getLogger(__name__)

LINKS_ENDPOINT = "/links"
LINKS_ORDER_ENDPOINT = "/links/order"

OrderTransform = Callable[[list[str]], list[str] | Awaitable[list[str]]]


class LinkService(FallbackService):
    """Client-side operations on the links and links_order documents."""

    # =========================================================================
    # Cache helpers
    # =========================================================================

    def _cached_links(self) -> list[Link]:
        raw = self._cached(LINKS_KEY, [])
        if not isinstance(raw, list):
            logger.warning("Ignoring malformed cached links")
            return []
        links = []
        for item in raw:
            try:
                links.append(Link.from_dict(item))
            except (AttributeError, TypeError, ValueError) as e:
                logger.warning("Skipping malformed cached link %r: %s", item, e)
        return links

    def _cache_links(self, links: list[Link]) -> None:
        self._store(LINKS_KEY, [link.to_dict() for link in links])

    def _cached_order(self) -> list[str]:
        raw = self._cached(LINKS_ORDER_KEY, [])
        if not isinstance(raw, list):
            logger.warning("Ignoring malformed cached links order")
            return []
        order = []
        for link_id in raw:
            if not isinstance(link_id, str):
                logger.warning("Skipping malformed cached order entry %r", link_id)
                continue
            order.append(link_id)
        return order

    def _cache_order(self, order: list[str]) -> None:
        self._store(LINKS_ORDER_KEY, list(order))

    # =========================================================================
    # Links
    # =========================================================================

    async def get_links(self) -> list[Link]:
        """All links: server copy if reachable, else the cached copy (or [])."""

        async def fetch() -> list[Link]:
            response = await self.api.get(LINKS_ENDPOINT)
            return [Link.from_dict(item) for item in response["links"]]

        return await with_fallback(
            fetch,
            self._cached_links,
            self._cache_links,
            description="fetching links",
        )

    async def add_link(
        self,
        name: str,
        url: str,
        description: str = "",
        image_url: str | None = None,
    ) -> Link:
        """Create a link with a fresh id and createdAt == updatedAt."""
        now = now_ms()
        new_link = Link(
            name=name,
            url=url,
            description=description,
            image_url=image_url or None,
            created_at=now,
            updated_at=now,
        )

        async def create() -> Link:
            return Link.from_dict(await self.api.post(LINKS_ENDPOINT, new_link.to_dict()))

        async def mirror(created: Link) -> None:
            links = await self.get_links()
            if all(link.id != created.id for link in links):
                self._cache_links([*links, created])
            await self.update_links_order(
                lambda order: order if created.id in order else [*order, created.id]
            )

        def offline() -> Link:
            links = [link for link in self._cached_links() if link.id != new_link.id]
            self._cache_links([*links, new_link])
            order = self._cached_order()
            if new_link.id not in order:
                self._cache_order([*order, new_link.id])
            return new_link

        return await with_fallback(create, offline, mirror, description="adding link")

    async def update_link(self, link: Link) -> Link:
        """Replace a link, bumping updatedAt past its previous value."""
        updated_link = replace(link, updated_at=next_timestamp(link.updated_at))

        async def update() -> Link:
            response = await self.api.put(
                f"{LINKS_ENDPOINT}/{link.id}", updated_link.to_dict()
            )
            return Link.from_dict(response)

        async def mirror(saved: Link) -> None:
            links = await self.get_links()
            self._cache_links(
                [saved if existing.id == saved.id else existing for existing in links]
            )

        def offline() -> Link:
            links = self._cached_links()
            self._cache_links(
                [updated_link if existing.id == link.id else existing for existing in links]
            )
            return updated_link

        return await with_fallback(update, offline, mirror, description="updating link")

    async def delete_link(self, link_id: str) -> None:
        """Delete a link and drop it from the manual order."""

        async def delete() -> None:
            await self.api.delete(f"{LINKS_ENDPOINT}/{link_id}")

        async def mirror(_: None) -> None:
            links = await self.get_links()
            self._cache_links([link for link in links if link.id != link_id])
            await self.update_links_order(
                lambda order: [i for i in order if i != link_id]
            )

        def offline() -> None:
            self._cache_links([link for link in self._cached_links() if link.id != link_id])
            self._cache_order([i for i in self._cached_order() if i != link_id])

        await with_fallback(delete, offline, mirror, description="deleting link")

    # =========================================================================
    # Order
    # =========================================================================

    async def get_links_order(self) -> list[str]:
        """Manual order: server copy if reachable, else cached (or [])."""

        async def fetch() -> list[str]:
            response = await self.api.get(LINKS_ORDER_ENDPOINT)
            return [str(link_id) for link_id in response["order"]]

        return await with_fallback(
            fetch,
            self._cached_order,
            self._cache_order,
            description="fetching links order",
        )

    async def save_links_order(self, order: list[str]) -> None:
        """Overwrite the manual order on the server (if reachable) and in the cache."""
        order = list(order)

        async def save() -> None:
            await self.api.put(LINKS_ORDER_ENDPOINT, {"order": order})

        await with_fallback(
            save,
            lambda: self._cache_order(order),
            lambda _: self._cache_order(order),
            description="saving links order",
        )

    async def update_links_order(self, transform: OrderTransform) -> list[str] | None:
        """Fetch the current order, apply *transform*, save the result.

        Returns the saved order, or None if the transform itself failed.
        """
        try:
            current = await self.get_links_order()
            new_order = transform(list(current))
            if inspect.isawaitable(new_order):
                new_order = await new_order
            await self.save_links_order(new_order)
        except Exception:
            logger.exception("Error updating links order")
            return None
        return list(new_order)

    # =========================================================================
    # Display
    # =========================================================================

    async def get_sorted_links(
        self,
        option: SortOption | str = SortOption.CUSTOM,
        query: str = "",
    ) -> list[Link]:
        """Links filtered by *query* and sorted for display."""
        links = filter_links(await self.get_links(), query)
        order = None
        if SortOption(option) is SortOption.CUSTOM:
            order = await self.get_links_order()
        return sort_links(links, option, order)
