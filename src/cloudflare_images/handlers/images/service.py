"""Business logic for image operations.

This module maps image requests onto Cloudflare Images endpoints and
returns the typed envelopes produced by the API layer.
"""

from aws_lambda_powertools import Logger

from cloudflare_images.core.infrastructure.cloudflare.images_api import CloudflareImagesAPI
from cloudflare_images.core.models.envelope import Response
from cloudflare_images.core.models.errors import RemoteError
from cloudflare_images.core.models.image import Image, ImageList
from cloudflare_images.core.utils.constants import IMAGE_BLOB_PATH, IMAGE_PATH, IMAGES_PATH
from cloudflare_images.core.utils.mime import guess_content_type

from .models import ImageUploadRequest, ListImagesRequest, UpdateImageRequest

logger = Logger(UTC=True)


class ImagesService:
    """Application service responsible for stored images."""

    def __init__(self, api: CloudflareImagesAPI) -> None:
        self.api = api

    async def upload_image(self, request: ImageUploadRequest) -> Response[Image]:
        """Upload an image of up to 10MB with one multipart POST.

        The content type of the file part is detected from magic bytes,
        falling back to the file name extension.
        """
        content_type = guess_content_type(request.file_data, request.file_name)

        logger.debug(
            "Starting image upload",
            extra={
                "image_id": request.id,
                "size": len(request.file_data),
                "content_type": content_type,
            },
        )

        response = await self.api.call(
            "POST",
            self.api.path(IMAGES_PATH),
            Image,
            data=request.to_form_data(),
            files={"file": (request.file_name, request.file_data, content_type)},
        )

        if response.success:
            logger.info("Image uploaded successfully", extra={"image_id": request.id})
        return response

    async def list_images(self, request: ListImagesRequest) -> Response[ImageList]:
        """List up to ``per_page`` images of one page."""
        return await self.api.call(
            "GET",
            self.api.path(IMAGES_PATH),
            ImageList,
            params=request.to_params(),
        )

    async def get_image(self, image_id: str) -> Response[Image]:
        """Fetch details for a single image."""
        return await self.api.call(
            "GET",
            self.api.path(IMAGE_PATH, image_id=image_id),
            Image,
        )

    async def get_image_base(self, image_id: str) -> bytes:
        """Fetch the original (or near-lossless) bytes of an image.

        Raises:
            RemoteError: If the remote rejects the request
        """
        response = await self.api.fetch_bytes(self.api.path(IMAGE_BLOB_PATH, image_id=image_id))

        try:
            response.raise_for_errors()
        except RemoteError:
            logger.warning("Image base fetch rejected", extra={"image_id": image_id})
            raise

        return response.result or b""

    async def update_image(self, image_id: str, request: UpdateImageRequest) -> Response[Image]:
        """Update metadata or access control.

        Changing access control purges all copies of the image from cache.
        """
        return await self.api.call(
            "PATCH",
            self.api.path(IMAGE_PATH, image_id=image_id),
            Image,
            json=request.to_payload(),
        )

    async def delete_image(self, image_id: str) -> Response[None]:
        """Delete an image; all copies are purged from cache."""
        response = await self.api.call(
            "DELETE",
            self.api.path(IMAGE_PATH, image_id=image_id),
            None,
        )

        if response.success:
            logger.info("Image deleted successfully", extra={"image_id": image_id})
        return response
