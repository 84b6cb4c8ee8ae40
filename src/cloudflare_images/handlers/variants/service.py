"""Business logic for variant operations.

Updating or deleting a variant purges the cache for every image delivered
through it. That purge happens remotely; nothing is cached here.
"""

from aws_lambda_powertools import Logger

from cloudflare_images.core.infrastructure.cloudflare.images_api import CloudflareImagesAPI
from cloudflare_images.core.models.envelope import Response
from cloudflare_images.core.models.variant import Variant, VariantList
from cloudflare_images.core.utils.constants import VARIANT_PATH, VARIANTS_PATH

from .models import CreateVariantRequest, UpdateVariantRequest

logger = Logger(UTC=True)

# Variant details are nested under this key by the API
VARIANT_RESULT_KEY = "variant"


class VariantsService:
    """Application service responsible for account variants."""

    def __init__(self, api: CloudflareImagesAPI) -> None:
        self.api = api

    async def create_variant(self, request: CreateVariantRequest) -> Response[Variant]:
        logger.debug("Creating variant", extra={"variant_id": request.id})

        return await self.api.call(
            "POST",
            self.api.path(VARIANTS_PATH),
            Variant,
            unwrap=VARIANT_RESULT_KEY,
            json=request.to_body(),
        )

    async def list_variants(self) -> Response[VariantList]:
        return await self.api.call("GET", self.api.path(VARIANTS_PATH), VariantList)

    async def get_variant(self, variant_id: str) -> Response[Variant]:
        return await self.api.call(
            "GET",
            self.api.path(VARIANT_PATH, variant_id=variant_id),
            Variant,
            unwrap=VARIANT_RESULT_KEY,
        )

    async def update_variant(
        self,
        variant_id: str,
        request: UpdateVariantRequest,
    ) -> Response[Variant]:
        logger.debug("Updating variant", extra={"variant_id": variant_id})

        return await self.api.call(
            "PATCH",
            self.api.path(VARIANT_PATH, variant_id=variant_id),
            Variant,
            unwrap=VARIANT_RESULT_KEY,
            json=request.to_body(),
        )

    async def delete_variant(self, variant_id: str) -> Response[None]:
        response = await self.api.call(
            "DELETE",
            self.api.path(VARIANT_PATH, variant_id=variant_id),
            None,
        )

        if response.success:
            logger.info("Variant deleted", extra={"variant_id": variant_id})
        return response
