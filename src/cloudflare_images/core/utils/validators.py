"""Request validation utilities."""

import json
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from cloudflare_images.core.models.errors import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def sanitize_validation_errors(errors: list[dict[str, Any]]) -> list[dict[str, str]]:
    """Sanitize Pydantic validation errors for error details.

    Removes noisy or sensitive fields like:
    - url
    - ctx
    - input (may contain the raw image bytes)
    """
    sanitized: list[dict[str, str]] = []

    for err in errors:
        field = ".".join(str(x) for x in err.get("loc", [])) or "body"
        raw_msg = err.get("msg", "Invalid value")

        # Remove noisy prefixes
        msg = raw_msg.replace("Value error,", "").strip()

        if "field required" in msg.lower():
            msg = "This field is required"

        sanitized.append(
            {
                "field": field,
                "message": msg,
            }
        )

    return sanitized


def validate_request(model: type[ModelT], data: dict[str, Any]) -> ModelT:
    """Validate request data against a Pydantic model.

    Args:
        model: Pydantic model class
        data: Input data to validate

    Returns:
        The validated model instance

    Raises:
        ValidationError: If the data does not satisfy the model
    """
    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        sanitized_errors = sanitize_validation_errors(list(exc.errors()))
        raise ValidationError(
            message="Invalid request payload",
            details={"errors": sanitized_errors},
        ) from exc


def require_identifier(value: str, *, field: str) -> str:
    """Reject empty identifiers and identifiers with surrounding whitespace.

    The value is returned unchanged.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(
            message=f"Missing {field}",
            details={"errors": [{"field": field, "message": "This field is required"}]},
        )

    if value != value.strip():
        raise ValidationError(
            message=f"Invalid {field}",
            details={
                "errors": [
                    {"field": field, "message": "Must not start or end with whitespace"}
                ]
            },
        )

    return value


def ensure_json_encodable(value: Any) -> Any:
    """Raise ValueError unless ``value`` can be sent as JSON."""
    try:
        json.dumps(value, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"must be JSON-encodable ({exc})") from exc
    return value
