"""Thin JSON client for the taskboard REST backend."""

import logging
from typing import Any

import httpx

from taskboard.errors import ApiError

logger = logging.getLogger(__name__)


class ApiClient:
    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            headers={"Content-Type": "application/json", "Accept": "application/json"},
            transport=transport,
        )

    async def request(self, method: str, endpoint: str, json: Any = None) -> Any:
        """Send a request and return the decoded JSON body.

        Raises ApiError on transport errors, non-2xx responses and
        non-JSON bodies. Empty bodies (e.g. 204) decode to None.
        """
        url = f"{self.base_url}{endpoint}"
        logger.debug("API request: %s %s", method, url)
        try:
            resp = await self._client.request(method, endpoint, json=json)
        except httpx.HTTPError as e:
            logger.warning("API request failed for %s %s: %s", method, url, e)
            raise ApiError(f"Request failed: {e}", url=url) from e

        if not resp.is_success:
            logger.warning("API request failed for %s %s: HTTP %d", method, url, resp.status_code)
            raise ApiError(
                f"HTTP error! status: {resp.status_code}",
                status_code=resp.status_code,
                url=url,
            )

        if not resp.content:
            return None
        try:
            data = resp.json()
        except ValueError as e:
            raise ApiError("Response body is not valid JSON", status_code=resp.status_code, url=url) from e
        logger.debug("API response received from %s", url)
        return data

    async def get(self, endpoint: str) -> Any:
        return await self.request("GET", endpoint)

    async def post(self, endpoint: str, json: Any) -> Any:
        return await self.request("POST", endpoint, json=json)

    async def put(self, endpoint: str, json: Any) -> Any:
        return await self.request("PUT", endpoint, json=json)

    async def patch(self, endpoint: str, json: Any) -> Any:
        return await self.request("PATCH", endpoint, json=json)

    async def delete(self, endpoint: str) -> Any:
        return await self.request("DELETE", endpoint)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
