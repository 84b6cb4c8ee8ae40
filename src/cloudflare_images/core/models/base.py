"""Base model shared by all Cloudflare Images wire models."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class CloudflareModel(BaseModel):
    """Model accepting both Python attribute names and camelCase wire aliases."""

    model_config = ConfigDict(populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        """Serialize using wire aliases, dropping unset optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)
