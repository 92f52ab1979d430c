"""Client for the servicedash API with a local offline cache.

Usage:
    from servicedash.client import LinkService

    links = LinkService()
    await links.add_link("Router", "http://192.168.1.1", "admin")
    for link in await links.get_sorted_links("custom"):
        print(link.name, link.url)
"""

from servicedash.client.api_client import REQUEST_TIMEOUT, ApiClient, ApiError
from servicedash.client.auth import AuthService
from servicedash.client.cache import FileLocalCache, LocalCacheProtocol, MemoryLocalCache
from servicedash.client.dashboard_settings import DashboardSettingsService
from servicedash.client.fallback import FallbackService, with_fallback
from servicedash.client.links import LinkService
from servicedash.client.sorting import SortOption, filter_links, move_link, sort_links

__all__ = [
    "REQUEST_TIMEOUT",
    "ApiClient",
    "ApiError",
    "AuthService",
    "DashboardSettingsService",
    "FallbackService",
    "FileLocalCache",
    "LinkService",
    "LocalCacheProtocol",
    "MemoryLocalCache",
    "SortOption",
    "filter_links",
    "move_link",
    "sort_links",
    "with_fallback",
]
