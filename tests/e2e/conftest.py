"""
Fixtures for tests against the live Cloudflare Images API.

These tests run only when CLOUDFLARE_API_KEY and CLOUDFLARE_ACCOUNT_ID are
set (a .env file at the repository root is honoured). They create and
delete resources prefixed with ``e2e-``.
"""

import logging
import os
import uuid
from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from dotenv import load_dotenv

from cloudflare_images import CloudflareClient

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)

load_dotenv()

REQUIRED_ENV = ("CLOUDFLARE_API_KEY", "CLOUDFLARE_ACCOUNT_ID")


def pytest_collection_modifyitems(config, items) -> None:
    missing = [name for name in REQUIRED_ENV if not os.getenv(name)]
    if not missing:
        return

    skip = pytest.mark.skip(reason=f"Live API credentials not set: {', '.join(missing)}")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip)


# ============================================================================
# Client Fixture
# ============================================================================


@pytest_asyncio.fixture
async def live_client() -> AsyncIterator[CloudflareClient]:
    async with CloudflareClient.from_env(log_errors=True) as client:
        yield client


# ============================================================================
# Unique Identifier Fixtures
# ============================================================================


@pytest.fixture
def unique_image_id() -> str:
    return f"e2e-{uuid.uuid4().hex[:12]}"


@pytest.fixture
def unique_variant_id() -> str:
    # Variant ids are alphanumeric only
    return f"e2e{uuid.uuid4().hex[:8]}"


# ============================================================================
# Cleanup Fixtures
# ============================================================================


@pytest_asyncio.fixture
async def cleanup_image(live_client, unique_image_id) -> AsyncIterator[str]:
    """Yield an image id and delete the image afterwards if it still exists."""
    yield unique_image_id

    response = await live_client.delete_image(unique_image_id)
    if response.success:
        logger.info("Cleaned up image %s", unique_image_id)


@pytest_asyncio.fixture
async def cleanup_variant(live_client, unique_variant_id) -> AsyncIterator[str]:
    """Yield a variant id and delete the variant afterwards if it still exists."""
    yield unique_variant_id

    response = await live_client.delete_variant(unique_variant_id)
    if response.success:
        logger.info("Cleaned up variant %s", unique_variant_id)
