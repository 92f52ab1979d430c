# Tests for LinkService, online against the ASGI app and offline
# Created: 2026-10-18

from dataclasses import replace

import httpx
import pytest

from servicedash.api.serve import create_api_app
from servicedash.client.api_client import ApiClient
from servicedash.client.cache import LINKS_KEY, LINKS_ORDER_KEY, MemoryLocalCache
from servicedash.client.links import LinkService
from servicedash.client.sorting import SortOption
from servicedash.config import Settings
from servicedash.documents import DocumentType, InMemoryDocumentStore

# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def store():
    return InMemoryDocumentStore()


@pytest.fixture
def online_api(store, tmp_path):
    settings = Settings(data_dir=tmp_path / "data", cache_dir=tmp_path / "cache")
    app = create_api_app(store=store, settings=settings)
    return ApiClient(
        base_url="http://dash.test/api",
        timeout=5.0,
        transport=httpx.ASGITransport(app=app),
    )


@pytest.fixture
def offline_api():
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    return ApiClient(
        base_url="http://dash.test/api",
        timeout=5.0,
        transport=httpx.MockTransport(refuse),
    )


@pytest.fixture
def cache():
    return MemoryLocalCache()


@pytest.fixture
def online(online_api, cache):
    return LinkService(online_api, cache)


@pytest.fixture
def offline(offline_api, cache):
    return LinkService(offline_api, cache)


# ============================================================================
# Online
# ============================================================================


class TestOnline:
    async def test_add_link_round_trip(self, online, store, cache):
        link = await online.add_link("Router", "http://192.168.1.1", "admin")

        assert link.created_at == link.updated_at
        assert [item.id for item in await online.get_links()] == [link.id]

        # server keeps exactly one order entry despite the client-side append
        assert (await store.read(DocumentType.LINKS_ORDER))["order"] == [link.id]
        assert await online.get_links_order() == [link.id]

        assert [item["id"] for item in cache.load(LINKS_KEY)] == [link.id]
        assert cache.load(LINKS_ORDER_KEY) == [link.id]

    async def test_update_link(self, online):
        link = await online.add_link("NAS", "http://nas")
        updated = await online.update_link(
            replace(link, description="files")
        )
        assert updated.description == "files"
        assert updated.created_at == link.created_at
        assert updated.updated_at > link.updated_at

        stored = await online.get_links()
        assert stored[0].description == "files"

    async def test_delete_link(self, online, cache):
        keep = await online.add_link("Keep", "http://keep")
        gone = await online.add_link("Gone", "http://gone")

        await online.delete_link(gone.id)

        assert [link.id for link in await online.get_links()] == [keep.id]
        assert await online.get_links_order() == [keep.id]
        assert cache.load(LINKS_ORDER_KEY) == [keep.id]

    async def test_update_links_order(self, online):
        a = await online.add_link("A", "http://a")
        b = await online.add_link("B", "http://b")

        result = await online.update_links_order(lambda order: list(reversed(order)))

        assert result == [b.id, a.id]
        assert await online.get_links_order() == [b.id, a.id]

    async def test_update_links_order_transform_failure(self, online):
        def explode(order):
            raise RuntimeError("bad transform")

        assert await online.update_links_order(explode) is None

    async def test_sorted_links_follow_custom_order(self, online):
        a = await online.add_link("Alpha", "http://a")
        b = await online.add_link("beta", "http://b")
        await online.save_links_order([b.id, a.id])

        custom = await online.get_sorted_links(SortOption.CUSTOM)
        assert [link.id for link in custom] == [b.id, a.id]

        by_name = await online.get_sorted_links("name")
        assert [link.id for link in by_name] == [a.id, b.id]

        searched = await online.get_sorted_links("custom", "BET")
        assert [link.id for link in searched] == [b.id]


# ============================================================================
# Offline
# ============================================================================


class TestOffline:
    async def test_get_links_empty_cache(self, offline):
        assert await offline.get_links() == []
        assert await offline.get_links_order() == []

    async def test_add_link_lands_in_cache(self, offline, cache):
        link = await offline.add_link("Printer", "http://printer", "office")

        assert link.created_at == link.updated_at
        assert [item.id for item in await offline.get_links()] == [link.id]
        assert cache.load(LINKS_ORDER_KEY) == [link.id]

    async def test_online_then_offline_reads_cached_copy(self, online, offline):
        link = await online.add_link("NAS", "http://nas")
        assert [item.id for item in await offline.get_links()] == [link.id]

    async def test_update_and_delete_offline(self, offline, cache):
        link = await offline.add_link("Old", "http://old")

        updated = await offline.update_link(replace(link, name="New"))
        assert updated.updated_at > link.updated_at
        assert [item.name for item in await offline.get_links()] == ["New"]

        await offline.delete_link(link.id)
        assert await offline.get_links() == []
        assert cache.load(LINKS_ORDER_KEY) == []

    async def test_save_order_offline(self, offline, cache):
        await offline.save_links_order(["x", "y"])
        assert cache.load(LINKS_ORDER_KEY) == ["x", "y"]
        assert await offline.update_links_order(lambda order: [*order, "z"]) == ["x", "y", "z"]

    async def test_malformed_cache_is_ignored(self, offline_api):
        service = LinkService(offline_api, MemoryLocalCache({LINKS_KEY: {"oops": 1}}))
        assert await service.get_links() == []

    async def test_entries_with_bad_fields_are_skipped(self, offline_api):
        cache = MemoryLocalCache(
            {
                LINKS_KEY: [
                    {"id": "a", "name": "n", "url": "u", "createdAt": "yesterday"},
                    "not a link",
                    {"id": "b", "name": "NAS", "url": "http://nas", "createdAt": 5},
                ],
                LINKS_ORDER_KEY: ["b", {"id": "a"}, None],
            }
        )
        service = LinkService(offline_api, cache)

        assert [link.id for link in await service.get_links()] == ["b"]
        assert await service.get_links_order() == ["b"]


# ============================================================================
# Server errors and timeouts
# ============================================================================


def _server_error(request):
    return httpx.Response(500, json={"error": "Failed to get links"})


def _timeout(request):
    raise httpx.ReadTimeout("timed out", request=request)


@pytest.fixture(params=[_server_error, _timeout], ids=["server-error", "timeout"])
def failing_api(request):
    return ApiClient(
        base_url="http://dash.test/api",
        timeout=5.0,
        transport=httpx.MockTransport(request.param),
    )


class TestDegradedServer:
    async def test_get_links_uses_cache(self, failing_api):
        cache = MemoryLocalCache(
            {LINKS_KEY: [{"id": "a", "name": "NAS", "url": "http://nas", "createdAt": 5}]}
        )
        links = await LinkService(failing_api, cache).get_links()
        assert [link.id for link in links] == ["a"]

    async def test_add_link_lands_in_cache(self, failing_api, cache):
        service = LinkService(failing_api, cache)
        link = await service.add_link("Printer", "http://printer")

        assert [item["id"] for item in cache.load(LINKS_KEY)] == [link.id]
        assert cache.load(LINKS_ORDER_KEY) == [link.id]
