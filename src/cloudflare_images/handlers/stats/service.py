"""Business logic for account usage statistics."""

from cloudflare_images.core.infrastructure.cloudflare.images_api import CloudflareImagesAPI
from cloudflare_images.core.models.envelope import Response
from cloudflare_images.core.models.stats import UsageStats
from cloudflare_images.core.utils.constants import STATS_PATH


class StatsService:
    """Application service for usage statistics."""

    def __init__(self, api: CloudflareImagesAPI) -> None:
        self.api = api

    async def get_stats(self) -> Response[UsageStats]:
        return await self.api.call("GET", self.api.path(STATS_PATH), UsageStats)
