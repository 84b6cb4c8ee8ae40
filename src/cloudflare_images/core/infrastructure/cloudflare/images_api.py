"""Cloudflare Images API access built on the HTTP adapter."""

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

import httpx
from aws_lambda_powertools import Logger

from cloudflare_images.core.infrastructure.adapters.http_adapter import HttpAdapterProtocol
from cloudflare_images.core.models.envelope import Response
from cloudflare_images.core.models.errors import ResponseFormatError, TransportError
from cloudflare_images.core.utils.constants import DEFAULT_CONTENT_TYPE
from cloudflare_images.core.utils.response import parse_envelope

logger = Logger(UTC=True)


class CloudflareImagesAPI:
    """Sends requests for one account and turns replies into envelopes.

    Transport failures are translated into TransportError; remote
    rejections come back as envelopes with ``success=False``.
    """

    def __init__(self, adapter: HttpAdapterProtocol, *, account_id: str) -> None:
        self._http = adapter
        self.account_id = account_id

    def path(self, template: str, **params: str) -> str:
        """Render an endpoint path for this account."""
        quoted = {name: quote(value, safe="") for name, value in params.items()}
        return template.format(account_id=quote(self.account_id, safe=""), **quoted)

    async def _send(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
        data: Mapping[str, Any] | None = None,
        files: Mapping[str, Any] | None = None,
    ) -> httpx.Response:
        logger.debug("Sending request", extra={"method": method, "path": path})

        try:
            response = await self._http.request(
                method,
                path,
                params=params,
                json=json,
                data=data,
                files=files,
            )
        except httpx.TimeoutException as exc:
            logger.warning("Request timed out", extra={"method": method, "path": path})
            raise TransportError(
                message="Request to Cloudflare Images timed out",
                details={"method": method, "path": path},
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning(
                "Request failed",
                extra={"method": method, "path": path, "error": str(exc)},
            )
            raise TransportError(
                message="Unable to reach Cloudflare Images",
                details={"method": method, "path": path, "error_type": type(exc).__name__},
            ) from exc

        logger.debug(
            "Received response",
            extra={"method": method, "path": path, "status": response.status_code},
        )
        return response

    async def call(
        self,
        method: str,
        path: str,
        result_type: Any,
        *,
        unwrap: str | None = None,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
        data: Mapping[str, Any] | None = None,
        files: Mapping[str, Any] | None = None,
    ) -> Response[Any]:
        """Perform one operation and return its typed envelope.

        Raises:
            TransportError: If the exchange itself fails
            ResponseFormatError: If the reply is not a valid envelope
        """
        response = await self._send(
            method,
            path,
            params=params,
            json=json,
            data=data,
            files=files,
        )
        return parse_envelope(response, result_type, unwrap=unwrap)

    async def fetch_bytes(self, path: str) -> Response[bytes]:
        """Fetch a binary resource.

        Successful replies carry raw bytes; failures still carry a JSON
        envelope, which is returned with an empty result.
        """
        response = await self._send("GET", path)

        content_type = response.headers.get("content-type", "")
        is_json = content_type.startswith(DEFAULT_CONTENT_TYPE)

        if response.is_success and not is_json:
            return Response[bytes](result=response.content, success=True)

        envelope = parse_envelope(response, None)
        if envelope.success:
            raise ResponseFormatError(
                message="Expected image bytes but received a JSON envelope",
                details={"path": path, "status": response.status_code},
            )

        return envelope
