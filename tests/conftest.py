"""
Pytest configuration and fixtures for Cloudflare Images client tests.
Provides an in-memory fake of the Cloudflare Images API served through
httpx.MockTransport, plus client and sample data fixtures.
"""

import base64
import json
import re
from collections.abc import AsyncIterator, Callable
from typing import Any

import httpx
import pytest
import pytest_asyncio

from cloudflare_images import CloudflareClient

TEST_API_KEY = "test-api-key"
TEST_ACCOUNT_ID = "acct-123"
API_PREFIX = f"/client/v4/accounts/{TEST_ACCOUNT_ID}/images/v1"
DELIVERY_URL = "https://imagedelivery.net/test-hash/{image_id}/{variant}"
UPLOADED_AT = "2024-01-01T10:00:00.000Z"

JsonDict = dict[str, Any]


def envelope(result: Any = None, *, status: int = 200, **extra: Any) -> httpx.Response:
    """Build a successful API envelope response."""
    body: JsonDict = {
        "result": result,
        "result_info": extra.get("result_info"),
        "success": True,
        "errors": [],
        "messages": [],
    }
    return httpx.Response(status, json=body)


def failure(code: int, message: str, *, status: int) -> httpx.Response:
    """Build a failed API envelope response."""
    body: JsonDict = {
        "result": None,
        "result_info": None,
        "success": False,
        "errors": [{"code": code, "message": message}],
        "messages": [],
    }
    return httpx.Response(status, json=body)


def parse_multipart(request: httpx.Request) -> tuple[dict[str, str], dict[str, tuple[str, bytes, str]]]:
    """Split a multipart/form-data request into form fields and files."""
    match = re.search(r"boundary=([^;]+)", request.headers["content-type"])
    assert match, "multipart request without boundary"
    delimiter = b"--" + match.group(1).strip('"').encode()

    fields: dict[str, str] = {}
    files: dict[str, tuple[str, bytes, str]] = {}

    for chunk in request.content.split(delimiter)[1:]:
        if chunk.startswith(b"--"):
            break

        head, _, body = chunk.removeprefix(b"\r\n").partition(b"\r\n\r\n")
        body = body.removesuffix(b"\r\n")
        headers = head.decode("utf-8")

        name = re.search(r'name="([^"]*)"', headers)
        filename = re.search(r'filename="([^"]*)"', headers)
        part_type = re.search(r"Content-Type: (\S+)", headers, re.IGNORECASE)
        assert name, "multipart part without a name"

        if filename is not None:
            files[name.group(1)] = (
                filename.group(1),
                body,
                part_type.group(1) if part_type else "application/octet-stream",
            )
        else:
            fields[name.group(1)] = body.decode("utf-8")

    return fields, files


class FakeCloudflareAPI:
    """In-memory stand-in for the Cloudflare Images API.

    Mirrors the wire behavior the client relies on: bearer authentication,
    the response envelope, variant details nested under ``variant`` and the
    signed URL flag reported next to ``options``.
    """

    def __init__(self, *, allowed: int = 100_000) -> None:
        self.images: dict[str, JsonDict] = {}
        self.blobs: dict[str, tuple[bytes, str]] = {}
        self.variants: dict[str, JsonDict] = {}
        self.allowed = allowed
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if request.headers.get("authorization") != f"Bearer {TEST_API_KEY}":
            return failure(10000, "Authentication error", status=401)

        path = request.url.path
        if not path.startswith(API_PREFIX):
            return failure(7003, "Could not route to the requested resource", status=404)

        parts = [part for part in path[len(API_PREFIX):].split("/") if part]
        method = request.method

        if not parts:
            if method == "POST":
                return self._upload(request)
            if method == "GET":
                return self._list_images(request)
        elif parts == ["stats"] and method == "GET":
            return envelope({"count": {"current": len(self.images), "allowed": self.allowed}})
        elif parts[0] == "variants":
            return self._route_variants(request, parts[1:])
        elif len(parts) == 2 and parts[1] == "blob" and method == "GET":
            return self._blob(parts[0])
        elif len(parts) == 1:
            return self._route_image(request, parts[0])

        return failure(7001, "Method not allowed", status=405)

    # ------------------------------------------------------------------
    # Images
    # ------------------------------------------------------------------

    def _upload(self, request: httpx.Request) -> httpx.Response:
        fields, files = parse_multipart(request)
        image_id = fields.get("id", "")

        if "file" not in files:
            return failure(5400, "Bad request: file is required", status=400)
        if image_id in self.images:
            return failure(5409, "Resource already exists", status=409)
        if len(self.images) >= self.allowed:
            return failure(5403, "Image storage limit reached", status=403)

        filename, data, content_type = files["file"]
        record: JsonDict = {
            "id": image_id,
            "filename": filename,
            "uploaded": UPLOADED_AT,
            "requireSignedURLs": fields.get("requireSignedURLs") == "true",
            "variants": self._delivery_urls(image_id),
        }
        if "metadata" in fields:
            record["metadata"] = json.loads(fields["metadata"])

        self.images[image_id] = record
        self.blobs[image_id] = (data, content_type)
        return envelope(record)

    def _list_images(self, request: httpx.Request) -> httpx.Response:
        page = int(request.url.params.get("page", "1"))
        per_page = int(request.url.params.get("per_page", "100"))
        start = (page - 1) * per_page
        images = list(self.images.values())[start : start + per_page]
        return envelope({"images": images})

    def _route_image(self, request: httpx.Request, image_id: str) -> httpx.Response:
        record = self.images.get(image_id)
        if record is None:
            return failure(5404, "Image not found", status=404)

        if request.method == "GET":
            return envelope(record)

        if request.method == "PATCH":
            body = json.loads(request.content)
            if "metadata" in body:
                record["metadata"] = body["metadata"]
            if "requireSignedURLs" in body:
                record["requireSignedURLs"] = body["requireSignedURLs"]
            return envelope(record)

        if request.method == "DELETE":
            del self.images[image_id]
            self.blobs.pop(image_id, None)
            return envelope({})

        return failure(7001, "Method not allowed", status=405)

    def _blob(self, image_id: str) -> httpx.Response:
        if image_id not in self.blobs:
            return failure(5404, "Image not found", status=404)

        data, content_type = self.blobs[image_id]
        return httpx.Response(200, content=data, headers={"content-type": content_type})

    def _delivery_urls(self, image_id: str) -> list[str]:
        names = list(self.variants) or ["public"]
        return [DELIVERY_URL.format(image_id=image_id, variant=name) for name in names]

    # ------------------------------------------------------------------
    # Variants
    # ------------------------------------------------------------------

    def _route_variants(self, request: httpx.Request, parts: list[str]) -> httpx.Response:
        method = request.method

        if not parts:
            if method == "GET":
                return envelope({"variants": dict(self.variants)})
            if method == "POST":
                body = json.loads(request.content)
                variant_id = body.get("id")
                if variant_id in self.variants:
                    return failure(5409, "Variant already exists", status=409)
                record = self._variant_record(variant_id, body)
                if record is None:
                    return failure(5400, "Invalid variant options", status=400)
                self.variants[variant_id] = record
                return envelope({"variant": record})
            return failure(7001, "Method not allowed", status=405)

        variant_id = parts[0]
        record = self.variants.get(variant_id)
        if record is None:
            return failure(5404, "Variant not found", status=404)

        if method == "GET":
            return envelope({"variant": record})

        if method == "PATCH":
            updated = self._variant_record(variant_id, json.loads(request.content))
            if updated is None:
                return failure(5400, "Invalid variant options", status=400)
            self.variants[variant_id] = updated
            return envelope({"variant": updated})

        if method == "DELETE":
            del self.variants[variant_id]
            return envelope({})

        return failure(7001, "Method not allowed", status=405)

    @staticmethod
    def _variant_record(variant_id: str, body: JsonDict) -> JsonDict | None:
        options = body.get("options") or {}
        if options.get("width", 0) <= 0 or options.get("height", 0) <= 0:
            return None

        return {
            "id": variant_id,
            "options": options,
            "neverRequireSignedURLs": bool(body.get("neverRequireSignedURLs", False)),
        }


class RecordingLogger:
    """LoggerProtocol implementation that keeps every call."""

    def __init__(self) -> None:
        self.records: list[tuple[str, Any, tuple[Any, ...]]] = []

    def _record(self, level: str, message: Any, params: tuple[Any, ...]) -> None:
        self.records.append((level, message, params))

    def trace(self, message: Any = None, *optional_params: Any) -> None:
        self._record("trace", message, optional_params)

    def debug(self, message: Any = None, *optional_params: Any) -> None:
        self._record("debug", message, optional_params)

    def info(self, message: Any = None, *optional_params: Any) -> None:
        self._record("info", message, optional_params)

    def warn(self, message: Any = None, *optional_params: Any) -> None:
        self._record("warn", message, optional_params)

    def error(self, message: Any = None, *optional_params: Any) -> None:
        self._record("error", message, optional_params)

    def levels(self) -> list[str]:
        return [level for level, _, _ in self.records]


@pytest.fixture
def fake_api() -> FakeCloudflareAPI:
    return FakeCloudflareAPI()


@pytest.fixture
def make_client() -> Callable[..., CloudflareClient]:
    """
    Factory for clients talking to an arbitrary request handler.

    Usage:
        client = make_client(lambda request: httpx.Response(500), log_errors=True)
    """

    def _make(handler: Callable[[httpx.Request], httpx.Response], **options: Any) -> CloudflareClient:
        values: dict[str, Any] = {"api_key": TEST_API_KEY, "account_id": TEST_ACCOUNT_ID}
        values.update(options)
        return CloudflareClient(transport=httpx.MockTransport(handler), **values)

    return _make


@pytest_asyncio.fixture
async def client(fake_api: FakeCloudflareAPI) -> AsyncIterator[CloudflareClient]:
    """Client bound to the in-memory fake API."""
    async with CloudflareClient(
        api_key=TEST_API_KEY,
        account_id=TEST_ACCOUNT_ID,
        transport=httpx.MockTransport(fake_api),
    ) as _client:
        yield _client


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def sample_image_binary() -> bytes:
    """Sample binary image data (1x1 PNG)."""
    png_base64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk+M9QDwADhgGAWjR9awAAAABJRU5ErkJggg=="
    return base64.b64decode(png_base64)


@pytest.fixture
def sample_jpeg_binary() -> bytes:
    """Sample binary JPEG data (minimal valid JPEG)."""
    return (
        b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00"
        b"\xff\xdb\x00C\x00\x08\x06\x06\x07\x06\x05\x08\x07\x07\x07\t\t\x08\n\x0c"
        b"\xff\xda\x00\x08\x01\x01\x00\x00?\x00\x7f\x00\xff\xd9"
    )


@pytest.fixture
def sample_upload(sample_image_binary) -> dict[str, Any]:
    return {
        "id": "img1",
        "file_name": "a.png",
        "file_data": sample_image_binary,
        "metadata": {"owner": "john", "tags": ["alpha", "beta"], "rank": 3},
        "require_signed_urls": False,
    }


@pytest.fixture
def thumb_variant() -> dict[str, Any]:
    return {
        "id": "thumb",
        "options": {"fit": "cover", "width": 200, "height": 200},
    }
