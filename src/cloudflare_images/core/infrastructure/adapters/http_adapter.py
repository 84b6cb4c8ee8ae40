"""Thin adapter for talking HTTP to the Cloudflare API."""

from collections.abc import Mapping
from typing import Any, Protocol

import httpx

from cloudflare_images.core.models.options import CloudflareClientOptions
from cloudflare_images.core.utils.constants import DEFAULT_CONTENT_TYPE


class HttpAdapterProtocol(Protocol):
    """Minimal HTTP adapter protocol (API-facing)."""

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
        data: Mapping[str, Any] | None = None,
        files: Mapping[str, Any] | None = None,
    ) -> httpx.Response: ...

    async def aclose(self) -> None: ...


class HttpAdapter:
    """Low-level HTTP operations (mechanical, no error handling).

    This adapter:
    - Wraps one httpx.AsyncClient per client instance
    - Attaches the bearer token to every request
    - Does NOT handle errors (lets them bubble up)
    - Domain implementations catch and translate errors
    """

    def __init__(
        self,
        options: CloudflareClientOptions,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Create the underlying HTTP client from client options."""
        self._client = httpx.AsyncClient(
            base_url=options.base_url.rstrip("/"),
            headers={
                "Authorization": f"Bearer {options.api_key}",
                "Accept": DEFAULT_CONTENT_TYPE,
            },
            timeout=options.timeout,
            transport=transport,
        )

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
        data: Mapping[str, Any] | None = None,
        files: Mapping[str, Any] | None = None,
    ) -> httpx.Response:
        """Send one request.
        Raises httpx exceptions - caught by domain implementation.
        """
        return await self._client.request(
            method,
            path,
            params=params,
            json=json,
            data=data,
            files=files,
        )

    async def aclose(self) -> None:
        """Release pooled connections."""
        await self._client.aclose()
