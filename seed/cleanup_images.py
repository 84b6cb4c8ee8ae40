#!/usr/bin/env python3
"""
Cleanup script to remove seeded images through the Cloudflare Images client.

Only images whose metadata carries ``"seed": true`` are deleted.

Run:
    python seed/cleanup_images.py \
      --api-key <API-KEY> \
      --account-id <ACCOUNT-ID>
"""

import argparse
import asyncio
import os
import sys

from aws_lambda_powertools import Logger
from dotenv import load_dotenv

from cloudflare_images import CloudflareClient, Image
from cloudflare_images.core.models.errors import CloudflareImagesError
from cloudflare_images.core.utils.constants import (
    ENV_ACCOUNT_ID,
    ENV_API_KEY,
    MAX_PER_PAGE,
)

logger = Logger(service="cleanup")

SEED_MARKER = "seed"


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Cleanup seeded images via Cloudflare Images API")

    parser.add_argument(
        "--api-key",
        default=os.getenv(ENV_API_KEY),
        help=f"API token (default: ${ENV_API_KEY})",
    )
    parser.add_argument(
        "--account-id",
        default=os.getenv(ENV_ACCOUNT_ID),
        help=f"Cloudflare account ID (default: ${ENV_ACCOUNT_ID})",
    )

    return parser.parse_args()


def is_seeded(image: Image) -> bool:
    return bool((image.metadata or {}).get(SEED_MARKER))


async def collect_seeded(client: CloudflareClient) -> list[str]:
    """Walk every page and return the ids of seeded images."""
    seeded: list[str] = []
    page = 1

    while True:
        response = await client.list_images(page=page, per_page=MAX_PER_PAGE)
        if not response.success or response.result is None:
            logger.error(
                "Failed to list images",
                extra={"page": page, "errors": [e.model_dump() for e in response.errors]},
            )
            raise SystemExit(1)

        images = response.result.images
        seeded.extend(image.id for image in images if is_seeded(image))

        if len(images) < MAX_PER_PAGE:
            return seeded
        page += 1


async def cleanup_images(args: argparse.Namespace) -> None:
    async with CloudflareClient(
        api_key=args.api_key,
        account_id=args.account_id,
        log_errors=True,
    ) as client:
        logger.info("Starting cleanup process", extra={"account_id": args.account_id})

        image_ids = await collect_seeded(client)
        if not image_ids:
            logger.info("No images found for cleanup")
            return

        for image_id in image_ids:
            response = await client.delete_image(image_id)

            if response.success:
                logger.info("Deleted image", extra={"image_id": image_id})
            else:
                logger.error(
                    "Failed to delete image",
                    extra={
                        "image_id": image_id,
                        "errors": [error.model_dump() for error in response.errors],
                    },
                )

        logger.info("Cleanup completed successfully")


def main() -> None:
    load_dotenv()

    try:
        asyncio.run(cleanup_images(parse_args()))
    except CloudflareImagesError as exc:
        logger.exception("Cleanup failed", extra={"error_code": exc.error_code})
        sys.exit(1)


if __name__ == "__main__":
    main()
