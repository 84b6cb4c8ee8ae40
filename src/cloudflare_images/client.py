"""Asynchronous client for the Cloudflare Images API."""

from collections.abc import Mapping
from types import TracebackType
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel

from cloudflare_images.core.infrastructure.adapters.http_adapter import HttpAdapter
from cloudflare_images.core.infrastructure.cloudflare.images_api import CloudflareImagesAPI
from cloudflare_images.core.models.envelope import Response
from cloudflare_images.core.models.errors import ConfigurationError, ValidationError
from cloudflare_images.core.models.image import Image, ImageList
from cloudflare_images.core.models.operation import Operation
from cloudflare_images.core.models.options import CloudflareClientOptions
from cloudflare_images.core.models.stats import UsageStats
from cloudflare_images.core.models.variant import Variant, VariantList
from cloudflare_images.core.utils.decorators import logged_operation
from cloudflare_images.core.utils.loggers import LoggerProtocol, PowertoolsLogger
from cloudflare_images.core.utils.validators import require_identifier, validate_request
from cloudflare_images.handlers.images.models import (
    ImageUploadRequest,
    ListImagesRequest,
    UpdateImageRequest,
)
from cloudflare_images.handlers.images.service import ImagesService
from cloudflare_images.handlers.stats.service import StatsService
from cloudflare_images.handlers.variants.models import CreateVariantRequest, UpdateVariantRequest
from cloudflare_images.handlers.variants.service import VariantsService

ModelT = TypeVar("ModelT", bound=BaseModel)

RequestLike = BaseModel | Mapping[str, Any] | None


def _build_request(
    model: type[ModelT],
    request: RequestLike,
    fields: Mapping[str, Any],
    *,
    defaults: Mapping[str, Any] | None = None,
) -> ModelT:
    """Validate a request given as a model, a mapping, keyword fields, or a mix."""
    if isinstance(request, model) and not fields:
        return request

    data: dict[str, Any] = dict(defaults or {})
    if isinstance(request, BaseModel):
        data.update(request.model_dump(exclude_none=True))
    elif request is not None:
        data.update(request)
    data.update(fields)

    return validate_request(model, data)


class CloudflareClient:
    """Typed client for one Cloudflare account.

    Every operation performs exactly one HTTP exchange and returns the API's
    response envelope. Remote rejections are returned with ``success=False``;
    invalid input raises ValidationError before anything is sent, and
    network failures raise TransportError. Nothing is retried or cached.

    Each instance owns its credentials and connection pool, so instances are
    independent. Use as an async context manager or call ``aclose()``.
    """

    def __init__(
        self,
        options: CloudflareClientOptions | Mapping[str, Any] | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        **fields: Any,
    ) -> None:
        try:
            self.options = _build_request(CloudflareClientOptions, options, fields)
        except ValidationError as exc:
            raise ConfigurationError(
                message="Invalid client options",
                details=exc.details,
            ) from exc

        self._request_logger: LoggerProtocol | None = self.options.logger
        if self._request_logger is None and (self.options.log_requests or self.options.log_errors):
            self._request_logger = PowertoolsLogger()

        self._http = HttpAdapter(self.options, transport=transport)
        api = CloudflareImagesAPI(self._http, account_id=self.options.account_id)

        self.images = ImagesService(api)
        self.variants = VariantsService(api)
        self.stats = StatsService(api)

    @classmethod
    def from_env(
        cls,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        **overrides: Any,
    ) -> "CloudflareClient":
        """Create a client from ``CLOUDFLARE_API_KEY`` / ``CLOUDFLARE_ACCOUNT_ID``."""
        return cls(CloudflareClientOptions.from_env(**overrides), transport=transport)

    # ------------------------------------------------------------------
    # Logging configuration
    # ------------------------------------------------------------------

    @property
    def request_logger(self) -> LoggerProtocol | None:
        return self._request_logger

    @property
    def log_requests(self) -> bool:
        return self.options.log_requests

    @property
    def log_errors(self) -> bool:
        return self.options.log_errors

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "CloudflareClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # Images
    # ------------------------------------------------------------------

    @logged_operation(Operation.UPLOAD_IMAGE)
    async def upload_image(self, request: RequestLike = None, **fields: Any) -> Response[Image]:
        """Upload an image of up to 10MB using a single multipart POST.

        Raises:
            ValidationError: If id, file name or metadata are invalid
            FileSizeError: If the file is empty or larger than 10MB
        """
        upload = _build_request(ImageUploadRequest, request, fields)
        return await self.images.upload_image(upload)

    @logged_operation(Operation.LIST_IMAGES)
    async def list_images(self, request: RequestLike = None, **fields: Any) -> Response[ImageList]:
        """List up to 100 images with one request.

        ``page`` must be at least 1 and ``per_page`` between 10 and 100;
        anything else raises ValidationError without contacting the API.
        """
        listing = _build_request(ListImagesRequest, request, fields)
        return await self.images.list_images(listing)

    @logged_operation(Operation.GET_IMAGE)
    async def get_image(self, image_id: str) -> Response[Image]:
        """Fetch details for a single image."""
        return await self.images.get_image(require_identifier(image_id, field="image_id"))

    @logged_operation(Operation.GET_IMAGE_BASE)
    async def get_image_base(self, image_id: str) -> bytes:
        """Fetch the base image, usually the originally uploaded file.

        For larger images this can be a near-lossless version of the original.

        Raises:
            RemoteError: If the API rejects the request (e.g. unknown id)
        """
        return await self.images.get_image_base(require_identifier(image_id, field="image_id"))

    @logged_operation(Operation.UPDATE_IMAGE)
    async def update_image(
        self,
        image_id: str,
        request: RequestLike = None,
        **fields: Any,
    ) -> Response[Image]:
        """Update image metadata or access control.

        On access control change, all copies of the image are purged from cache.
        """
        image_id = require_identifier(image_id, field="image_id")
        update = _build_request(UpdateImageRequest, request, fields)
        return await self.images.update_image(image_id, update)

    @logged_operation(Operation.DELETE_IMAGE)
    async def delete_image(self, image_id: str) -> Response[None]:
        """Delete an image. On success all copies are deleted and purged from cache."""
        return await self.images.delete_image(require_identifier(image_id, field="image_id"))

    # ------------------------------------------------------------------
    # Variants
    # ------------------------------------------------------------------

    @logged_operation(Operation.CREATE_VARIANT)
    async def create_variant(self, request: RequestLike = None, **fields: Any) -> Response[Variant]:
        """Create a variant that resizes images for a specific use case."""
        variant = _build_request(CreateVariantRequest, request, fields)
        return await self.variants.create_variant(variant)

    @logged_operation(Operation.LIST_VARIANTS)
    async def list_variants(self) -> Response[VariantList]:
        """List existing variants."""
        return await self.variants.list_variants()

    @logged_operation(Operation.GET_VARIANT)
    async def get_variant(self, variant_id: str) -> Response[Variant]:
        """Fetch details for a single variant."""
        return await self.variants.get_variant(require_identifier(variant_id, field="variant_id"))

    @logged_operation(Operation.UPDATE_VARIANT)
    async def update_variant(
        self,
        variant_id: str,
        request: RequestLike = None,
        **fields: Any,
    ) -> Response[Variant]:
        """Update an existing variant.

        Updating a variant purges the cache for all images associated with it.

        Raises:
            ValidationError: If the request names a different variant id
        """
        variant_id = require_identifier(variant_id, field="variant_id")

        update = _build_request(
            UpdateVariantRequest,
            request,
            fields,
            defaults={"id": variant_id},
        )
        if update.id != variant_id:
            raise ValidationError(
                message="Variant id does not match the request body",
                details={"errors": [{"field": "id", "message": f"Expected '{variant_id}'"}]},
            )

        return await self.variants.update_variant(variant_id, update)

    @logged_operation(Operation.DELETE_VARIANT)
    async def delete_variant(self, variant_id: str) -> Response[None]:
        """Delete a variant.

        Deleting a variant purges the cache for all images associated with it.
        """
        return await self.variants.delete_variant(require_identifier(variant_id, field="variant_id"))

    # ------------------------------------------------------------------
    # Misc.
    # ------------------------------------------------------------------

    @logged_operation(Operation.GET_STATS)
    async def get_stats(self) -> Response[UsageStats]:
        """Fetch usage statistics for the account."""
        return await self.stats.get_stats()
