from collections.abc import Mapping
from pathlib import PurePath

from cloudflare_images.core.utils.constants import BINARY_CONTENT_TYPE, EXTENSION_MIME_TYPE_MAP

MAGIC_BYTES: Mapping[bytes, str] = {
    b"\xff\xd8\xff": "image/jpeg",
    b"\x89PNG\r\n\x1a\n": "image/png",
    b"GIF87a": "image/gif",
    b"GIF89a": "image/gif",
    b"RIFF": "image/webp",
}


def detect_mime_type(file_data: bytes) -> str:
    for signature, mime in MAGIC_BYTES.items():
        if file_data.startswith(signature):
            return mime

    raise ValueError("Unsupported or unknown file type")


def guess_content_type(file_data: bytes, file_name: str) -> str:
    """Content type for a multipart upload part.

    Magic bytes win over the file extension; the remote makes the final call
    on whether the format is accepted.
    """
    try:
        return detect_mime_type(file_data)
    except ValueError:
        suffix = PurePath(file_name).suffix.lower().lstrip(".")
        return EXTENSION_MIME_TYPE_MAP.get(suffix, BINARY_CONTENT_TYPE)
