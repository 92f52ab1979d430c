# API client: one request path over httpx with a fixed timeout.
# Created: 2026-10-18
#
# Every failure leaves this module as ApiError:
#   non-2xx            -> status of the response, message = body text
#   timeout            -> 408 "Request timed out" (never sent by the server)
#   anything else      -> 0, message from the underlying error

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {"Content-Type": "application/json"}

# Seconds
REQUEST_TIMEOUT = 10.0


class ApiError(Exception):
    """A request that did not produce a usable response."""

    def __init__(self, message: str, status: int):
        super().__init__(message)
        self.status = status

    def __repr__(self) -> str:
        return f"ApiError({self.status}, {str(self)!r})"


class ApiClient:
    """Thin JSON client for the servicedash REST API.

    Args:
        base_url: API root including the ``/api`` prefix.
        timeout: Per-request timeout in seconds.
        transport: Optional httpx transport (tests mount the ASGI app here).
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        if base_url is None or timeout is None:
            from servicedash.config import get_settings

            settings = get_settings()
            base_url = base_url or settings.api_url
            timeout = timeout if timeout is not None else settings.request_timeout

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout if timeout is not None else REQUEST_TIMEOUT
        self._transport = transport

    async def request(
        self,
        endpoint: str,
        method: str = "GET",
        data: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Send a request and return the decoded JSON body (None for 204)."""
        url = f"{self.base_url}{endpoint}"

        async def send() -> httpx.Response:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                return await client.request(
                    method,
                    url,
                    json=data,
                    headers={**DEFAULT_HEADERS, **(headers or {})},
                )

        # httpx times each phase separately; wait_for bounds the whole request
        try:
            resp = await asyncio.wait_for(send(), timeout=self.timeout)
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            raise ApiError("Request timed out", 408) from e
        except httpx.HTTPError as e:
            raise ApiError(str(e) or "Network error", 0) from e

        if not resp.is_success:
            raise ApiError(
                resp.text or f"Request failed with status {resp.status_code}",
                resp.status_code,
            )

        if resp.status_code == 204:
            return None

        try:
            return resp.json()
        except ValueError as e:
            raise ApiError(f"Invalid JSON from {method} {endpoint}: {e}", 0) from e

    async def get(self, endpoint: str, headers: dict[str, str] | None = None) -> Any:
        return await self.request(endpoint, "GET", headers=headers)

    async def post(
        self, endpoint: str, data: Any = None, headers: dict[str, str] | None = None
    ) -> Any:
        return await self.request(endpoint, "POST", data, headers)

    async def put(
        self, endpoint: str, data: Any = None, headers: dict[str, str] | None = None
    ) -> Any:
        return await self.request(endpoint, "PUT", data, headers)

    async def delete(self, endpoint: str, headers: dict[str, str] | None = None) -> Any:
        return await self.request(endpoint, "DELETE", headers=headers)
