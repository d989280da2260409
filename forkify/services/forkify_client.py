"""
HTTP client for the Forkify recipe API.

Every request races a timeout: whichever settles first wins, so a hung
connection surfaces as RequestTimeout instead of a spinner that never ends.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from forkify.config import settings

logger = logging.getLogger(__name__)


class RequestTimeout(Exception):
    """The API did not answer within the configured timeout."""

    def __init__(self, seconds: float) -> None:
        super().__init__(f"Request took too long! Timeout after {seconds:g} second")
        self.seconds = seconds


class ApiError(Exception):
    """The API answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(f"{message} ({status_code})")
        self.status_code = status_code


class ForkifyClient:
    """Async client for the recipe API."""

    def __init__(
        self,
        api_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_url = (api_url or settings.FORKIFY_API_URL).rstrip("/")
        self.api_key = api_key if api_key is not None else settings.FORKIFY_API_KEY
        self.timeout = timeout or settings.TIMEOUT_SEC
        # The timeout race in _race() is the only timeout
        self.client = httpx.AsyncClient(transport=transport, timeout=None)

    def _params(self, **params: str) -> dict[str, str]:
        if self.api_key:
            params["key"] = self.api_key
        return params

    async def get_json(self, url: str, params: dict[str, str] | None = None) -> dict[str, Any]:
        """GET url and return the decoded JSON body."""
        return await self._race(self.client.get(url, params=params or {}))

    async def send_json(self, url: str, data: dict[str, Any], params: dict[str, str] | None = None) -> dict[str, Any]:
        """POST data as JSON and return the decoded JSON body."""
        return await self._race(self.client.post(url, json=data, params=params or {}))

    async def _race(self, request) -> dict[str, Any]:
        try:
            res = await asyncio.wait_for(request, timeout=self.timeout)
        except TimeoutError:
            logger.warning("forkify_client: timeout after %ss", self.timeout)
            raise RequestTimeout(self.timeout) from None

        data = res.json()
        if not res.is_success:
            message = data.get("message", res.reason_phrase) if isinstance(data, dict) else res.reason_phrase
            raise ApiError(message, res.status_code)
        return data

    # -- endpoints ----------------------------------------------------------

    async def get_recipe(self, recipe_id: str) -> dict[str, Any]:
        return await self.get_json(f"{self.api_url}/{recipe_id}", self._params())

    async def search(self, query: str) -> dict[str, Any]:
        return await self.get_json(self.api_url, self._params(search=query))

    async def upload(self, recipe: dict[str, Any]) -> dict[str, Any]:
        return await self.send_json(self.api_url, recipe, self._params())

    async def aclose(self) -> None:
        await self.client.aclose()
