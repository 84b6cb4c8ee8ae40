"""Custom exception classes for the Cloudflare Images client."""

from typing import Any

from cloudflare_images.core.utils.constants import (
    ERROR_CODE_CONFIGURATION,
    ERROR_CODE_FILE_SIZE_EXCEEDED,
    ERROR_CODE_INVALID_RESPONSE,
    ERROR_CODE_REMOTE,
    ERROR_CODE_TRANSPORT,
    ERROR_CODE_VALIDATION_FAILED,
)


class CloudflareImagesError(Exception):
    """
    Base exception for all client errors.

    All custom errors must inherit from this class.
    Callers must explicitly provide a message and error code.
    Optional contextual information can be supplied via `details`.
    """

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(self.message)


class ValidationError(CloudflareImagesError):
    """Raised when a request is rejected before it is sent."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_VALIDATION_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class FileSizeError(ValidationError):
    """Raised when an upload payload is empty or exceeds the allowed limit."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_FILE_SIZE_EXCEEDED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class ConfigurationError(CloudflareImagesError):
    """Raised when client credentials or options are missing."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_CONFIGURATION,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class TransportError(CloudflareImagesError):
    """Raised when the HTTP exchange itself fails (network, timeout, protocol)."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_TRANSPORT,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class ResponseFormatError(CloudflareImagesError):
    """Raised when the remote returns something that is not a valid envelope."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_INVALID_RESPONSE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class RemoteError(CloudflareImagesError):
    """Raised when a failure envelope has to be surfaced as an exception."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_REMOTE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )
