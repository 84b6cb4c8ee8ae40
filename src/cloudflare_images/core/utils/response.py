"""
Centralized parsing of Cloudflare API response envelopes.
"""

from __future__ import annotations

from typing import Any, TypeVar

import httpx
from pydantic import ValidationError as PydanticValidationError

from cloudflare_images.core.models.envelope import Response
from cloudflare_images.core.models.errors import ResponseFormatError
from cloudflare_images.core.utils.validators import sanitize_validation_errors

T = TypeVar("T")

JsonDict = dict[str, Any]

BODY_PREVIEW_LENGTH = 200


def _body_preview(response: httpx.Response) -> str:
    return response.text[:BODY_PREVIEW_LENGTH]


def read_payload(response: httpx.Response) -> JsonDict:
    """Decode a response body into an envelope dictionary.

    Raises:
        ResponseFormatError: If the body is not a JSON object with ``success``
    """
    try:
        payload = response.json()
    except ValueError as exc:
        raise ResponseFormatError(
            message="Response body is not valid JSON",
            details={
                "status": response.status_code,
                "body": _body_preview(response),
            },
        ) from exc

    if not isinstance(payload, dict) or "success" not in payload:
        raise ResponseFormatError(
            message="Response body is not a Cloudflare API envelope",
            details={
                "status": response.status_code,
                "body": _body_preview(response),
            },
        )

    return payload


def parse_envelope(
    response: httpx.Response,
    result_type: Any,
    *,
    unwrap: str | None = None,
) -> Response[Any]:
    """Validate an HTTP response as ``Response[result_type]``.

    Args:
        response: Raw HTTP response
        result_type: Type of the ``result`` field; ``None`` discards the result
        unwrap: Key under which the remote nests the result, if any

    Returns:
        The typed envelope. Failed operations are returned, not raised.

    Raises:
        ResponseFormatError: If the body is not a consistent envelope
    """
    payload = dict(read_payload(response))

    # A failure without errors is completed from the HTTP status
    if payload.get("success") is False and not payload.get("errors"):
        payload["errors"] = [
            {
                "code": response.status_code,
                "message": response.reason_phrase or "Request failed",
            }
        ]

    result = payload.get("result")
    if result_type is None or payload.get("success") is False:
        payload["result"] = None
    elif unwrap and isinstance(result, dict) and unwrap in result:
        payload["result"] = result[unwrap]

    try:
        return Response[result_type].model_validate(payload)
    except PydanticValidationError as exc:
        raise ResponseFormatError(
            message="Response envelope failed validation",
            details={
                "status": response.status_code,
                "errors": sanitize_validation_errors(list(exc.errors())),
            },
        ) from exc
