"""Pydantic models for image requests."""

import json
from typing import Any

from pydantic import Field, StrictBool, StrictBytes, StrictStr, field_validator, model_validator

from cloudflare_images.core.models.base import CloudflareModel
from cloudflare_images.core.models.errors import FileSizeError
from cloudflare_images.core.models.image import Metadata
from cloudflare_images.core.utils.constants import (
    DEFAULT_PAGE,
    DEFAULT_PER_PAGE,
    MAX_FILE_NAME_LENGTH,
    MAX_FILE_SIZE,
    MAX_IMAGE_ID_LENGTH,
    MAX_PER_PAGE,
    MIN_PAGE,
    MIN_PER_PAGE,
    format_file_size,
    get_max_file_size_mb,
)
from cloudflare_images.core.utils.validators import ensure_json_encodable


class ImageUploadRequest(CloudflareModel):
    """Validation model for a single-request multipart upload."""

    id: StrictStr = Field(
        ...,
        min_length=1,
        max_length=MAX_IMAGE_ID_LENGTH,
        description="Custom image identifier",
    )
    file_name: StrictStr = Field(
        ...,
        min_length=1,
        max_length=MAX_FILE_NAME_LENGTH,
        alias="fileName",
        description="Image file name",
    )
    file_data: StrictBytes = Field(..., alias="fileData", repr=False)
    metadata: Metadata | None = Field(None, description="User modifiable key-value store")
    require_signed_urls: StrictBool = Field(
        False,
        alias="requireSignedURLs",
        description="Whether the image requires a signature token for access",
    )

    @field_validator("metadata")
    @classmethod
    def validate_metadata(cls, value: Metadata | None) -> Metadata | None:
        return ensure_json_encodable(value)

    @field_validator("file_data", mode="before")
    @classmethod
    def coerce_buffer(cls, value: Any) -> Any:
        if isinstance(value, (bytearray, memoryview)):
            return bytes(value)
        return value

    @field_validator("file_data")
    @classmethod
    def validate_file_data(cls, value: bytes) -> bytes:
        """
        Validate the payload:
        - must have non-zero size
        - must not exceed MAX_FILE_SIZE
        """
        if not value:
            raise FileSizeError(message="File must not be empty", details={"size": 0})

        if len(value) > MAX_FILE_SIZE:
            raise FileSizeError(
                message=f"File size exceeds {get_max_file_size_mb()}MB limit",
                details={
                    "size": len(value),
                    "max_size": MAX_FILE_SIZE,
                    "size_readable": format_file_size(len(value)),
                },
            )

        return value

    def to_form_data(self) -> dict[str, str]:
        """Non-file multipart fields."""
        form: dict[str, str] = {
            "id": self.id,
            "requireSignedURLs": "true" if self.require_signed_urls else "false",
        }
        if self.metadata is not None:
            form["metadata"] = json.dumps(self.metadata)
        return form


class ListImagesRequest(CloudflareModel):
    """Validation model for listing images."""

    page: int = Field(default=DEFAULT_PAGE, ge=MIN_PAGE, description="Page number")
    per_page: int = Field(
        default=DEFAULT_PER_PAGE,
        ge=MIN_PER_PAGE,
        le=MAX_PER_PAGE,
        description="Results per page (10-100)",
    )

    def to_params(self) -> dict[str, int]:
        return {"page": self.page, "per_page": self.per_page}


class UpdateImageRequest(CloudflareModel):
    """Validation model for updating image metadata or access control."""

    metadata: Metadata | None = Field(None, description="Replacement key-value store")
    require_signed_urls: StrictBool | None = Field(None, alias="requireSignedURLs")

    @field_validator("metadata")
    @classmethod
    def validate_metadata(cls, value: Metadata | None) -> Metadata | None:
        return ensure_json_encodable(value)

    @model_validator(mode="after")
    def validate_not_empty(self) -> "UpdateImageRequest":
        """At least one property has to change."""
        if self.metadata is None and self.require_signed_urls is None:
            raise ValueError("metadata or requireSignedURLs must be provided")
        return self
