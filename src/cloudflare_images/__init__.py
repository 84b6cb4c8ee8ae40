"""Cloudflare Images client package."""

from cloudflare_images.client import CloudflareClient
from cloudflare_images.core.models.envelope import Response, ResponseMessage
from cloudflare_images.core.models.errors import (
    CloudflareImagesError,
    ConfigurationError,
    FileSizeError,
    RemoteError,
    ResponseFormatError,
    TransportError,
    ValidationError,
)
from cloudflare_images.core.models.image import Image, ImageList
from cloudflare_images.core.models.operation import Operation
from cloudflare_images.core.models.options import CloudflareClientOptions, Credentials
from cloudflare_images.core.models.stats import ImageCount, UsageStats
from cloudflare_images.core.models.variant import Variant, VariantList, VariantOptions
from cloudflare_images.core.utils.loggers import LoggerProtocol, PowertoolsLogger
from cloudflare_images.defaults import default_request, default_requests

__version__ = "1.0.0"
__description__ = "Typed async client for the Cloudflare Images API"

__all__ = [
    "CloudflareClient",
    "CloudflareClientOptions",
    "CloudflareImagesError",
    "ConfigurationError",
    "Credentials",
    "FileSizeError",
    "Image",
    "ImageCount",
    "ImageList",
    "LoggerProtocol",
    "Operation",
    "PowertoolsLogger",
    "RemoteError",
    "Response",
    "ResponseFormatError",
    "ResponseMessage",
    "TransportError",
    "UsageStats",
    "ValidationError",
    "Variant",
    "VariantList",
    "VariantOptions",
    "default_request",
    "default_requests",
]
