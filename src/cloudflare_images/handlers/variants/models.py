"""
Pydantic models for variant requests.
"""

from typing import Any

from cloudflare_images.core.models.variant import NEVER_REQUIRE_SIGNED_URLS, Variant


class CreateVariantRequest(Variant):
    """Validation model for creating a variant."""

    def to_body(self) -> dict[str, Any]:
        """Wire body: the signed URL flag travels next to ``options``."""
        body = self.to_payload()
        flag = body["options"].pop(NEVER_REQUIRE_SIGNED_URLS, None)
        if flag is not None:
            body[NEVER_REQUIRE_SIGNED_URLS] = flag
        return body


class UpdateVariantRequest(CreateVariantRequest):
    """Validation model for updating a variant; the id is taken from the path."""

    def to_body(self) -> dict[str, Any]:
        body = super().to_body()
        body.pop("id", None)
        return body
