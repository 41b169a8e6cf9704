"""
Thin HTTP client for the Adamik API.

Every call returns an ``ApiResponse``; upstream HTTP errors, timeouts and
network failures are folded into ``success=False`` outcomes instead of being
raised, so the tool layer only has to inspect the result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional

import httpx

from adamik_mcp.config import AdamikConfig, default_config

logger = logging.getLogger(__name__)

ApiMethod = Literal["GET", "POST"]

NETWORK_FAILURE_STATUS = 500


@dataclass(slots=True)
class ApiResponse:
    """Normalized outcome of a single Adamik API call."""

    data: Any
    status_code: int
    success: bool
    error: Optional[str] = None


def _join_url(base_url: str, path: str) -> str:
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


def _upstream_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message:
            return message
    return f"Request failed with status code {response.status_code}"


class AdamikApiClient:
    """Async client for the Adamik REST API."""

    def __init__(
        self,
        config: AdamikConfig | None = None,
        *,
        async_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.config = config or default_config
        self._client: Optional[httpx.AsyncClient] = async_client
        self._owns_client = async_client is None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.config.timeout)
            self._owns_client = True
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def _build_headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            "Authorization": self.config.api_key or "",
            "Content-Type": "application/json",
            "User-Agent": self.config.user_agent,
        }

    async def _send(self, url: str, method: ApiMethod, body: Any = None) -> ApiResponse:
        client = await self._get_client()
        kwargs: Dict[str, Any] = {"headers": self._build_headers(), "timeout": self.config.timeout}
        if body is not None:
            kwargs["json"] = body
        try:
            response = await client.request(method, url, **kwargs)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("Adamik API unreachable for %s %s: %s", method, url, type(exc).__name__)
            return ApiResponse(
                data=None,
                status_code=NETWORK_FAILURE_STATUS,
                success=False,
                error=str(exc) or type(exc).__name__,
            )

        if response.status_code >= 400:
            error = _upstream_message(response)
            logger.debug("Adamik API error status=%s path=%s", response.status_code, url)
            return ApiResponse(data=None, status_code=response.status_code, success=False, error=error)

        try:
            data: Any = response.json()
        except ValueError:
            data = response.text
        return ApiResponse(data=data, status_code=response.status_code, success=True)

    async def request(self, path: str, method: ApiMethod = "GET", body: Any = None) -> ApiResponse:
        """Call ``path`` relative to the configured base URL."""
        return await self._send(_join_url(self.config.base_url, path), method, body)

    async def get(self, path: str) -> ApiResponse:
        return await self.request(path, "GET")

    async def post(self, path: str, body: Any) -> ApiResponse:
        return await self.request(path, "POST", body)

    async def fetch_openapi_spec(self) -> ApiResponse:
        """Retrieve the OpenAPI document published next to the API."""
        return await self._send(self.config.openapi_url, "GET")


default_client = AdamikApiClient()
