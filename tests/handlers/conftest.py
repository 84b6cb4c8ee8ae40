import httpx
import pytest

from cloudflare_images.core.infrastructure.adapters.http_adapter import HttpAdapter
from cloudflare_images.core.infrastructure.cloudflare.images_api import CloudflareImagesAPI
from cloudflare_images.core.models.options import CloudflareClientOptions


@pytest.fixture
def images_api(fake_api) -> CloudflareImagesAPI:
    """API layer bound to the in-memory fake, for exercising services directly."""
    options = CloudflareClientOptions(api_key="test-api-key", account_id="acct-123")
    adapter = HttpAdapter(options, transport=httpx.MockTransport(fake_api))
    return CloudflareImagesAPI(adapter, account_id=options.account_id)
