# Tests for the local cache and the remote-or-cache fallback
# Created: 2026-10-18

import stat

import pytest

from servicedash.client.api_client import ApiError
from servicedash.client.cache import FileLocalCache, LocalCacheProtocol, MemoryLocalCache
from servicedash.client.fallback import FallbackService, with_fallback

# ============================================================================
# Caches
# ============================================================================


class TestFileLocalCache:
    @pytest.fixture
    def cache(self, tmp_path):
        return FileLocalCache(tmp_path / "cache")

    def test_implements_protocol(self, cache):
        assert isinstance(cache, LocalCacheProtocol)

    def test_missing_key(self, cache):
        assert cache.load("dashboard_links") is None

    def test_save_load(self, cache):
        cache.save("dashboard_links_order", ["a", "b"])
        assert cache.load("dashboard_links_order") == ["a", "b"]

    def test_file_is_owner_only(self, cache, tmp_path):
        cache.save("dashboard_auth_settings", {"password": "pw"})
        path = tmp_path / "cache" / "dashboard_auth_settings.json"
        assert stat.S_IMODE(path.stat().st_mode) == 0o600

    def test_corrupt_entry_reads_as_missing(self, cache, tmp_path):
        (tmp_path / "cache" / "dashboard_settings.json").write_text("{nope")
        assert cache.load("dashboard_settings") is None

    def test_delete(self, cache):
        cache.save("dashboard_auth_token", "123")
        assert cache.delete("dashboard_auth_token") is True
        assert cache.delete("dashboard_auth_token") is False
        assert cache.load("dashboard_auth_token") is None


class TestMemoryLocalCache:
    def test_values_are_copied(self):
        cache = MemoryLocalCache({"k": [1]})
        value = cache.load("k")
        value.append(2)
        assert cache.load("k") == [1]

    def test_delete(self):
        cache = MemoryLocalCache()
        cache.save("k", "v")
        assert cache.delete("k") is True
        assert cache.load("k") is None


# ============================================================================
# with_fallback
# ============================================================================


class TestWithFallback:
    async def test_success_mirrors_into_cache(self):
        written = []

        async def operation():
            return [1, 2]

        result = await with_fallback(operation, lambda: [], written.append)
        assert result == [1, 2]
        assert written == [[1, 2]]

    async def test_failure_uses_cache(self):
        async def operation():
            raise ApiError("down", 0)

        result = await with_fallback(operation, lambda: ["cached"], description="fetching")
        assert result == ["cached"]

    async def test_async_cache_read(self):
        async def operation():
            raise RuntimeError("boom")

        async def cache_read():
            return "from cache"

        assert await with_fallback(operation, cache_read) == "from cache"

    async def test_cache_write_errors_are_swallowed(self):
        async def operation():
            return "ok"

        def cache_write(_):
            raise OSError("read-only")

        assert await with_fallback(operation, lambda: None, cache_write) == "ok"


class TestFallbackService:
    def test_store_is_best_effort(self):
        class ReadOnlyCache(MemoryLocalCache):
            def save(self, key, value):
                raise OSError("read-only")

        service = FallbackService(api=object(), cache=ReadOnlyCache())
        service._store("k", "v")
        assert service._cached("k", "default") == "default"
