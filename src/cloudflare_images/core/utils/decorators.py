"""
Logging decorator for client operations.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, Protocol, TypeVar

from aws_lambda_powertools import Logger

from cloudflare_images.core.models.envelope import Response
from cloudflare_images.core.models.operation import Operation
from cloudflare_images.core.utils.loggers import LoggerProtocol

logger = Logger(service="cloudflare-images", UTC=True)

ResultT = TypeVar("ResultT")


class LoggingClientProtocol(Protocol):
    """What the decorator needs from the decorated object."""

    @property
    def request_logger(self) -> LoggerProtocol | None: ...

    @property
    def log_requests(self) -> bool: ...

    @property
    def log_errors(self) -> bool: ...


def _safe_log(
    request_logger: LoggerProtocol | None,
    level: str,
    message: str,
    fields: dict[str, Any],
) -> None:
    """Invoke the caller's logger without letting it affect the operation."""
    if request_logger is None:
        return

    try:
        getattr(request_logger, level)(message, fields)
    except Exception as exc:  # noqa: BLE001
        logger.warning(
            "Request logger raised",
            extra={
                "level": level,
                "error": str(exc),
                "error_type": type(exc).__name__,
            },
        )


def logged_operation(
    operation: Operation,
) -> Callable[[Callable[..., Awaitable[ResultT]]], Callable[..., Awaitable[ResultT]]]:
    """
    Decorator for client operations.

    Provides:
    - Request logging before dispatch and after the response (``log_requests``)
    - Error logging for failure envelopes and raised errors (``log_errors``)

    Logging is a side channel: the decorated call's return value and
    exceptions pass through unchanged.

    Example:
        @logged_operation(Operation.GET_STATS)
        async def get_stats(self):
            ...
    """

    def decorator(
        func: Callable[..., Awaitable[ResultT]],
    ) -> Callable[..., Awaitable[ResultT]]:
        @wraps(func)
        async def wrapper(self: LoggingClientProtocol, *args: Any, **kwargs: Any) -> ResultT:
            fields: dict[str, Any] = {"operation": operation.value}

            if self.log_requests:
                _safe_log(
                    self.request_logger,
                    "info",
                    f"Cloudflare Images {operation.value} request",
                    fields,
                )

            try:
                result = await func(self, *args, **kwargs)
            except Exception as exc:
                if self.log_errors:
                    _safe_log(
                        self.request_logger,
                        "error",
                        f"Cloudflare Images {operation.value} failed",
                        {
                            **fields,
                            "error": str(exc),
                            "error_type": type(exc).__name__,
                            "error_code": getattr(exc, "error_code", None),
                        },
                    )
                raise

            if isinstance(result, Response) and not result.success:
                if self.log_errors:
                    _safe_log(
                        self.request_logger,
                        "error",
                        f"Cloudflare Images {operation.value} rejected",
                        {
                            **fields,
                            "errors": [error.model_dump() for error in result.errors],
                        },
                    )
            elif self.log_requests:
                _safe_log(
                    self.request_logger,
                    "debug",
                    f"Cloudflare Images {operation.value} completed",
                    fields,
                )

            return result

        return wrapper

    return decorator
