# Dashboard settings service: appearance settings with offline fallback.
# Created: 2026-10-18

from __future__ import annotations

import logging

from servicedash.client.cache import DASHBOARD_SETTINGS_KEY
from servicedash.client.fallback import FallbackService, with_fallback
from servicedash.documents.models import DashboardSettings

logger = logging.getLogger(__name__)

SETTINGS_ENDPOINT = "/dashboard/settings"


class DashboardSettingsService(FallbackService):
    def _cached_settings(self) -> DashboardSettings:
        raw = self._cached(DASHBOARD_SETTINGS_KEY, None)
        if not isinstance(raw, dict):
            return DashboardSettings()
        return DashboardSettings.from_dict(raw)

    def _cache_settings(self, settings: DashboardSettings) -> None:
        self._store(DASHBOARD_SETTINGS_KEY, settings.to_dict())

    async def get_settings(self) -> DashboardSettings:
        """Server settings if reachable, else cached, else defaults."""

        async def fetch() -> DashboardSettings:
            return DashboardSettings.from_dict(await self.api.get(SETTINGS_ENDPOINT))

        return await with_fallback(
            fetch,
            self._cached_settings,
            self._cache_settings,
            description="fetching dashboard settings",
        )

    async def save_settings(self, settings: DashboardSettings) -> None:
        """Save to the server if reachable; the cache is written either way."""

        async def save() -> None:
            await self.api.put(SETTINGS_ENDPOINT, settings.to_dict())

        await with_fallback(
            save,
            lambda: self._cache_settings(settings),
            lambda _: self._cache_settings(settings),
            description="saving dashboard settings",
        )

    async def initialize(self) -> DashboardSettings:
        """Load settings and make sure the cache holds something usable."""
        settings = await self.get_settings()
        if self.cache.load(DASHBOARD_SETTINGS_KEY) is None:
            self._cache_settings(settings)
        return settings
