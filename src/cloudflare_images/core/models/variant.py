"""Variant models.

A variant is an account-scoped resizing profile applied to stored images at
delivery time. The ``fit`` property describes how ``width`` and ``height``
are interpreted:

- ``scale-down``: shrunk to fit within width/height, never enlarged.
- ``contain``: resized (shrunk or enlarged) to be as large as possible within
  width/height while preserving the aspect ratio.
- ``cover``: resized to exactly fill width x height, cropped if necessary.
- ``crop``: shrunk and cropped to fit width x height, never enlarged.
- ``pad``: as ``contain``, with the remaining area filled with a background
  color (white by default).
"""

from typing import Any, Literal

from pydantic import BaseModel, Field, PositiveInt, StrictBool, StrictStr, model_validator

from cloudflare_images.core.models.base import CloudflareModel

VariantFit = Literal["scale-down", "contain", "cover", "crop", "pad"]
VariantMetadataPolicy = Literal["keep", "copyright", "none"]

NEVER_REQUIRE_SIGNED_URLS = "neverRequireSignedURLs"


class VariantOptions(CloudflareModel):
    """Resizing options of a variant."""

    fit: VariantFit = Field(..., description="How width and height should be interpreted")
    metadata: VariantMetadataPolicy | None = Field(
        None, description="What EXIF data should be preserved in the output image"
    )
    width: PositiveInt = Field(..., description="Maximum width in image pixels")
    height: PositiveInt = Field(..., description="Maximum height in image pixels")
    never_require_signed_urls: StrictBool | None = Field(
        None,
        alias=NEVER_REQUIRE_SIGNED_URLS,
        description="Serve without a signature regardless of image access control",
    )


class Variant(CloudflareModel):
    """A named variant."""

    id: StrictStr = Field(..., min_length=1, description="Variant identifier")
    options: VariantOptions

    @model_validator(mode="before")
    @classmethod
    def hoist_signed_url_flag(cls, data: Any) -> Any:
        """Move a top-level ``neverRequireSignedURLs`` into ``options``.

        The API reports the flag next to ``options`` rather than inside it.
        """
        if not isinstance(data, dict) or NEVER_REQUIRE_SIGNED_URLS not in data:
            return data

        data = dict(data)
        flag = data.pop(NEVER_REQUIRE_SIGNED_URLS)
        options = data.get("options")
        if isinstance(options, BaseModel):
            options = options.model_dump(by_alias=True, exclude_none=True)
            data["options"] = options
        if isinstance(options, dict) and NEVER_REQUIRE_SIGNED_URLS not in options:
            data["options"] = {**options, NEVER_REQUIRE_SIGNED_URLS: flag}

        return data


class VariantList(CloudflareModel):
    """All variants of the account, keyed by variant id."""

    variants: dict[str, Variant] = Field(default_factory=dict)
