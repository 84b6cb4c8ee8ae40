"""Client construction options."""

import os
from typing import Any

from pydantic import ConfigDict, Field, PositiveFloat, StrictBool, StrictStr, field_validator
from pydantic import ValidationError as PydanticValidationError

from cloudflare_images.core.models.base import CloudflareModel
from cloudflare_images.core.models.errors import ConfigurationError
from cloudflare_images.core.utils.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    ENV_ACCOUNT_ID,
    ENV_API_KEY,
    ENV_BASE_URL,
)
from cloudflare_images.core.utils.loggers import LoggerProtocol
from cloudflare_images.core.utils.validators import sanitize_validation_errors


class Credentials(CloudflareModel):
    """Account credentials, fixed for the lifetime of a client."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, str_strip_whitespace=True)

    api_key: StrictStr = Field(
        ...,
        min_length=1,
        alias="apiKey",
        description="API token generated on the My Account page",
        repr=False,
    )
    account_id: StrictStr = Field(..., min_length=1, alias="accountId")


class CloudflareClientOptions(Credentials):
    """Credentials plus logging and transport settings."""

    logger: Any = Field(None, repr=False, description="Optional LoggerProtocol implementation")
    log_requests: StrictBool = Field(False, alias="logRequests")
    log_errors: StrictBool = Field(False, alias="logErrors")

    base_url: StrictStr = Field(DEFAULT_BASE_URL, alias="baseUrl")
    timeout: PositiveFloat = Field(DEFAULT_TIMEOUT_SECONDS, description="Seconds")

    @field_validator("logger")
    @classmethod
    def validate_logger(cls, value: Any) -> LoggerProtocol | None:
        if value is not None and not isinstance(value, LoggerProtocol):
            raise ValueError("logger must provide trace, debug, info, warn and error")
        return value

    @classmethod
    def from_env(cls, **overrides: Any) -> "CloudflareClientOptions":
        """Build options from environment variables.

        Raises:
            ConfigurationError: If the API key or account id is not set, or
                an override is invalid
        """
        api_key = os.getenv(ENV_API_KEY)
        account_id = os.getenv(ENV_ACCOUNT_ID)

        missing = [
            name
            for name, value in ((ENV_API_KEY, api_key), (ENV_ACCOUNT_ID, account_id))
            if not value
        ]
        if missing:
            raise ConfigurationError(
                message=f"Missing environment variables: {', '.join(missing)}",
                details={"missing": missing},
            )

        values: dict[str, Any] = {"api_key": api_key, "account_id": account_id}
        base_url = os.getenv(ENV_BASE_URL)
        if base_url:
            values["base_url"] = base_url

        values.update(overrides)

        try:
            return cls.model_validate(values)
        except PydanticValidationError as exc:
            raise ConfigurationError(
                message="Invalid client options",
                details={"errors": sanitize_validation_errors(list(exc.errors()))},
            ) from exc
