# Auth service: shared login with offline fallback.
# Created: 2026-10-18
#
# Offline, login and the "is authenticated" check use the cached auth
# settings and the locally stored token with the server's rules. The cached
# settings normally come from GET /auth/settings, whose password is masked;
# a masked password never matches offline.

from __future__ import annotations

import logging

from servicedash.client.api_client import ApiError
from servicedash.client.cache import AUTH_SETTINGS_KEY, AUTH_TOKEN_KEY
from servicedash.client.fallback import FallbackService, with_fallback
from servicedash.documents.models import PASSWORD_MASK, AuthSettings, now_ms

logger = logging.getLogger(__name__)

AUTH_SETTINGS_ENDPOINT = "/auth/settings"
AUTH_LOGIN_ENDPOINT = "/auth/login"
AUTH_VERIFY_ENDPOINT = "/auth/verify"


class AuthService(FallbackService):
    """Client side of the single shared username/password gate."""

    def _cached_auth_settings(self) -> AuthSettings | None:
        raw = self.cache.load(AUTH_SETTINGS_KEY)
        if not isinstance(raw, dict):
            return None
        return AuthSettings.from_dict(raw)

    def _cache_auth_settings(self, settings: AuthSettings) -> None:
        self._store(AUTH_SETTINGS_KEY, settings.to_dict())

    # =========================================================================
    # Settings
    # =========================================================================

    async def get_auth_settings(self) -> AuthSettings:
        """Server settings (password masked) if reachable, else cached, else disabled."""

        async def fetch() -> AuthSettings:
            return AuthSettings.from_dict(await self.api.get(AUTH_SETTINGS_ENDPOINT))

        return await with_fallback(
            fetch,
            lambda: self._cached_auth_settings() or AuthSettings(),
            self._cache_auth_settings,
            description="fetching auth settings",
        )

    async def save_auth_settings(self, settings: AuthSettings) -> None:
        """Save to the server if reachable; the cache is written either way."""

        async def save() -> None:
            await self.api.put(AUTH_SETTINGS_ENDPOINT, settings.to_dict())

        await with_fallback(
            save,
            lambda: self._cache_auth_settings(settings),
            lambda _: self._cache_auth_settings(settings),
            description="saving auth settings",
        )

    async def initialize(self) -> AuthSettings:
        """Load settings and seed the cache with defaults if it is empty."""
        settings = await self.get_auth_settings()
        if self.cache.load(AUTH_SETTINGS_KEY) is None:
            self._cache_auth_settings(AuthSettings())
        return settings

    # =========================================================================
    # Session
    # =========================================================================

    def get_token(self) -> str | None:
        token = self.cache.load(AUTH_TOKEN_KEY)
        return str(token) if token else None

    async def logout(self) -> None:
        """Forget the local token."""
        self.cache.delete(AUTH_TOKEN_KEY)

    async def login(self, username: str, password: str) -> bool:
        """Log in. Always succeeds while auth is disabled."""
        settings = await self.get_auth_settings()
        if not settings.is_enabled:
            return True

        try:
            response = await self.api.post(
                AUTH_LOGIN_ENDPOINT, {"username": username, "password": password}
            )
            success, token = response.get("success"), response.get("token")
        except ApiError as e:
            if e.status == 401:
                return False
            logger.warning("Error logging in through server, using local fallback: %s", e)
            return self._login_offline(username, password)
        except (AttributeError, TypeError) as e:
            logger.warning("Unexpected login response, using local fallback: %s", e)
            return self._login_offline(username, password)

        if success and token:
            self._store(AUTH_TOKEN_KEY, str(token))
            return True
        return False

    def _login_offline(self, username: str, password: str) -> bool:
        settings = self._cached_auth_settings()
        if settings is None or not settings.is_enabled:
            # Nothing cached to check against
            return True
        if settings.password == PASSWORD_MASK:
            return False
        if settings.check_credentials(username, password):
            self._store(AUTH_TOKEN_KEY, str(now_ms()))
            return True
        return False

    async def is_authenticated(self) -> bool:
        """True with auth disabled, otherwise when the stored token verifies."""
        settings = await self.get_auth_settings()
        if not settings.is_enabled:
            return True

        token = self.get_token()
        if not token:
            return False

        try:
            response = await self.api.post(AUTH_VERIFY_ENDPOINT, {"token": token})
            return bool(response["valid"])
        except (ApiError, KeyError, TypeError) as e:
            logger.warning(
                "Error verifying authentication through server, using local fallback: %s", e
            )
            return self._is_authenticated_offline()

    def _is_authenticated_offline(self) -> bool:
        settings = self._cached_auth_settings()
        if settings is None or not settings.is_enabled:
            return True
        return self.get_token() is not None
