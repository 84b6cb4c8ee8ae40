"""Global constants used throughout the client.

This module centralizes endpoint paths, request limits, error codes and
environment variable names shared across the client modules.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================


# Validation Errors
ERROR_CODE_VALIDATION_FAILED = "VALIDATION_FAILED"
ERROR_CODE_FILE_SIZE_EXCEEDED = "FILE_SIZE_EXCEEDED"

# Configuration Errors
ERROR_CODE_CONFIGURATION = "CONFIGURATION_ERROR"

# Transport / Response Errors
ERROR_CODE_TRANSPORT = "TRANSPORT_ERROR"
ERROR_CODE_INVALID_RESPONSE = "INVALID_RESPONSE"

# Remote Errors
ERROR_CODE_REMOTE = "REMOTE_ERROR"


# ============================================================================
# API Endpoints
# ============================================================================

DEFAULT_BASE_URL = "https://api.cloudflare.com/client/v4"
DEFAULT_TIMEOUT_SECONDS = 30.0

IMAGES_PATH = "/accounts/{account_id}/images/v1"
IMAGE_PATH = IMAGES_PATH + "/{image_id}"
IMAGE_BLOB_PATH = IMAGE_PATH + "/blob"
VARIANTS_PATH = IMAGES_PATH + "/variants"
VARIANT_PATH = VARIANTS_PATH + "/{variant_id}"
STATS_PATH = IMAGES_PATH + "/stats"

DEFAULT_CONTENT_TYPE = "application/json"
BINARY_CONTENT_TYPE = "application/octet-stream"


# ============================================================================
# Image Constraints
# ============================================================================

MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB in bytes
MAX_IMAGE_ID_LENGTH = 32
MAX_FILE_NAME_LENGTH = 32


MIME_TYPE_EXTENSION_MAP: Final[dict[str, tuple[str, ...]]] = {
    "image/jpeg": ("jpg", "jpeg"),
    "image/png": ("png",),
    "image/gif": ("gif",),
    "image/webp": ("webp",),
    "image/svg+xml": ("svg",),
}

EXTENSION_MIME_TYPE_MAP: Final[dict[str, str]] = {
    ext: mime for mime, extensions in MIME_TYPE_EXTENSION_MAP.items() for ext in extensions
}


# ============================================================================
# Pagination Constraints
# ============================================================================

DEFAULT_PAGE = 1
MIN_PAGE = 1
DEFAULT_PER_PAGE = 100
MIN_PER_PAGE = 10
MAX_PER_PAGE = 100


# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_API_KEY = "CLOUDFLARE_API_KEY"
ENV_ACCOUNT_ID = "CLOUDFLARE_ACCOUNT_ID"
ENV_BASE_URL = "CLOUDFLARE_API_BASE_URL"


# ============================================================================
# Helper Functions
# ============================================================================


def get_max_file_size_mb() -> int:
    """Get maximum upload size in megabytes."""
    return MAX_FILE_SIZE // (1024 * 1024)


def format_file_size(size_bytes: int) -> str:
    """Format file size in human-readable format.

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted file size string
    """
    size: float = float(size_bytes)

    for unit in ("B", "KB", "MB", "GB"):
        if size < 1024.0:
            return f"{size:.1f} {unit}"
        size /= 1024.0

    return f"{size:.1f} TB"
