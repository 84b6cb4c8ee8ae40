#!/usr/bin/env python3
"""
Seed script to upload sample images through the Cloudflare Images client.

Run:
    python seed/seed_images.py \
      --api-key <API-KEY> \
      --account-id <ACCOUNT-ID>

Credentials default to CLOUDFLARE_API_KEY / CLOUDFLARE_ACCOUNT_ID, which
may also come from a .env file.
"""

import argparse
import asyncio
import json
import os
from pathlib import Path
import sys
from typing import Any, cast

from aws_lambda_powertools import Logger
from dotenv import load_dotenv

from cloudflare_images import CloudflareClient, Operation, default_request
from cloudflare_images.core.models.errors import CloudflareImagesError
from cloudflare_images.core.utils.constants import ENV_ACCOUNT_ID, ENV_API_KEY

logger = Logger(service="seed")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed images via Cloudflare Images API")

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
    parser.add_argument(
        "--limit",
        type=int,
        default=3,
        help="Number of images to seed",
    )

    return parser.parse_args()


def load_sample_data() -> dict[str, Any]:
    data_file = Path(__file__).parent / "data" / "images.json"
    with open(data_file, encoding="utf-8") as f:
        return cast(dict[str, Any], json.load(f))


async def seed_images(args: argparse.Namespace) -> None:
    data = load_sample_data()
    images_dir = Path(__file__).parent / "images"

    async with CloudflareClient(
        api_key=args.api_key,
        account_id=args.account_id,
        log_errors=True,
    ) as client:
        logger.info("Starting seeding process", extra={"account_id": args.account_id})

        for item in cast(list[dict[str, Any]], data.get("images", []))[: args.limit]:
            image_path = images_dir / item["file_name"]

            if not image_path.exists():
                logger.warning("Image file not found", extra={"path": str(image_path)})
                continue

            request = default_request(Operation.UPLOAD_IMAGE)
            request["metadata"].update(item.get("metadata") or {})
            request.update(
                id=item["id"],
                file_name=item["file_name"],
                file_data=image_path.read_bytes(),
                require_signed_urls=item.get("require_signed_urls", False),
            )

            response = await client.upload_image(request)

            if response.success:
                logger.info(
                    "Seeded image",
                    extra={"image": item["file_name"], "image_id": item["id"]},
                )
            else:
                logger.error(
                    "Failed to seed image",
                    extra={
                        "image": item["file_name"],
                        "errors": [error.model_dump() for error in response.errors],
                    },
                )

        logger.info("Seeding completed")

        listing = await client.list_images(default_request(Operation.LIST_IMAGES))
        logger.info(
            "List images response",
            extra={
                "success": listing.success,
                "count": len(listing.result.images) if listing.result else 0,
            },
        )


def main() -> None:
    load_dotenv()

    try:
        asyncio.run(seed_images(parse_args()))
    except CloudflareImagesError as exc:
        logger.exception("Seeding failed", extra={"error_code": exc.error_code})
        sys.exit(1)


if __name__ == "__main__":
    main()
