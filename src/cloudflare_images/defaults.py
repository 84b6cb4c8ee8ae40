"""Default request payloads per operation.

Each call returns a fresh dictionary that callers complete and pass to the
matching client method, e.g.::

    request = default_request(Operation.UPLOAD_IMAGE)
    request.update(id="img1", file_name="a.png", file_data=data)
    await client.upload_image(request)
"""

from typing import Any

from cloudflare_images.core.models.operation import Operation
from cloudflare_images.core.utils.constants import DEFAULT_PAGE, DEFAULT_PER_PAGE
from cloudflare_images.core.utils.time import utc_now_iso


def _stamped_metadata() -> dict[str, Any]:
    return {"updatedAt": utc_now_iso()}


def default_request(operation: Operation | str) -> dict[str, Any]:
    """Return the default request fields for ``operation``.

    Raises:
        ValueError: If ``operation`` is not a known operation name
    """
    operation = Operation(operation)

    if operation is Operation.UPLOAD_IMAGE:
        return {"metadata": _stamped_metadata(), "require_signed_urls": False}

    if operation is Operation.UPDATE_IMAGE:
        return {"metadata": _stamped_metadata()}

    if operation is Operation.LIST_IMAGES:
        return {"page": DEFAULT_PAGE, "per_page": DEFAULT_PER_PAGE}

    return {}


def default_requests() -> dict[Operation, dict[str, Any]]:
    """Defaults for every operation."""
    return {operation: default_request(operation) for operation in Operation}
