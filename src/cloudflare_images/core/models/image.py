"""Shared image models."""

from typing import Any

from pydantic import Field, StrictBool, StrictStr

from cloudflare_images.core.models.base import CloudflareModel

Metadata = dict[str, Any]


class Image(CloudflareModel):
    """Image details returned by the Cloudflare Images API."""

    id: StrictStr = Field(..., description="Image unique identifier (read only)")
    filename: StrictStr = Field(..., description="Image file name (read only)")
    uploaded: StrictStr = Field(..., description="ISO-8601 upload timestamp")
    require_signed_urls: StrictBool = Field(
        False,
        alias="requireSignedURLs",
        description="Whether a signed token is needed to view the image",
    )
    variants: list[StrictStr] = Field(
        default_factory=list,
        description="Delivery URLs of the variants available for the image (read only)",
    )
    metadata: Metadata | None = Field(None, description="User modifiable key-value store")


class ImageList(CloudflareModel):
    """One page of images."""

    images: list[Image] = Field(default_factory=list, description="List of images")
