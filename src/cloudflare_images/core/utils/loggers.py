"""Logger capability accepted by the client, and its default implementation."""

from typing import Any, Protocol, runtime_checkable

from aws_lambda_powertools import Logger


@runtime_checkable
class LoggerProtocol(Protocol):
    """Any object exposing these five leveled functions can be used as a logger."""

    def trace(self, message: Any = None, *optional_params: Any) -> None: ...

    def debug(self, message: Any = None, *optional_params: Any) -> None: ...

    def info(self, message: Any = None, *optional_params: Any) -> None: ...

    def warn(self, message: Any = None, *optional_params: Any) -> None: ...

    def error(self, message: Any = None, *optional_params: Any) -> None: ...


class PowertoolsLogger:
    """LoggerProtocol backed by a structured powertools Logger.

    Optional parameters that are mappings are merged into the log record as
    structured fields; anything else is attached under ``params``.
    """

    def __init__(self, logger: Logger | None = None) -> None:
        self._logger = logger or Logger(service="cloudflare-images", UTC=True)

    @staticmethod
    def _extra(optional_params: tuple[Any, ...]) -> dict[str, Any]:
        extra: dict[str, Any] = {}
        leftovers: list[Any] = []

        for param in optional_params:
            if isinstance(param, dict):
                extra.update(param)
            else:
                leftovers.append(param)

        if leftovers:
            extra["params"] = leftovers

        return extra

    def trace(self, message: Any = None, *optional_params: Any) -> None:
        # powertools has no trace level
        self._logger.debug(message, extra=self._extra(optional_params))

    def debug(self, message: Any = None, *optional_params: Any) -> None:
        self._logger.debug(message, extra=self._extra(optional_params))

    def info(self, message: Any = None, *optional_params: Any) -> None:
        self._logger.info(message, extra=self._extra(optional_params))

    def warn(self, message: Any = None, *optional_params: Any) -> None:
        self._logger.warning(message, extra=self._extra(optional_params))

    def error(self, message: Any = None, *optional_params: Any) -> None:
        self._logger.error(message, extra=self._extra(optional_params))
