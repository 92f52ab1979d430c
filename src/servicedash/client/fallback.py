# Remote-or-cache fallback shared by every client service.
# Created: 2026-10-18
#
# with_fallback(operation, cache_read, cache_write):
#   operation succeeds -> cache_write(result) (best-effort) -> result
#   operation fails    -> cache_read() -> its value
# Failures are logged, never raised. The server and the cache are not
# reconciled afterwards; whichever was written last wins on the next read.

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from servicedash.client.api_client import ApiClient
from servicedash.client.cache import FileLocalCache, LocalCacheProtocol

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def _maybe_await(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


async def with_fallback(
    operation: Callable[[], Awaitable[T]],
    cache_read: Callable[[], T | Awaitable[T]],
    cache_write: Callable[[T], Any] | None = None,
    *,
    description: str = "calling the server",
) -> T:
    """Try *operation*; fall back to *cache_read* on any failure.

    Args:
        operation: The remote call.
        cache_read: Produces the degraded result (may also mutate the cache,
            for write operations that have to land somewhere).
        cache_write: Mirrors a successful result into the cache. Errors here
            are logged and ignored.
        description: For log messages, e.g. "fetching links".
    """
    try:
        result = await operation()
    except Exception as e:
        logger.warning("Error %s from server, using local storage: %s", description, e)
        return await _maybe_await(cache_read())

    if cache_write is not None:
        try:
            await _maybe_await(cache_write(result))
        except Exception as e:
            logger.warning("Could not update local storage after %s: %s", description, e)
    return result


class FallbackService:
    """Base for services that own one or more cached documents.

    Args:
        api: Transport client. Defaults to one built from settings.
        cache: Local fallback cache. Defaults to the file cache in cache_dir.
    """

    def __init__(
        self,
        api: ApiClient | None = None,
        cache: LocalCacheProtocol | None = None,
    ):
        self.api = api or ApiClient()
        self.cache = cache if cache is not None else FileLocalCache()

    def _cached(self, key: str, default: Any) -> Any:
        """Cached value for *key*, or *default* when absent."""
        value = self.cache.load(key)
        return default if value is None else value

    def _store(self, key: str, value: Any) -> None:
        """Best-effort cache write."""
        try:
            self.cache.save(key, value)
        except OSError as e:
            logger.warning("Could not write %s to local storage: %s", key, e)
