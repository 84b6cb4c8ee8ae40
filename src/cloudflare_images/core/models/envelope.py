"""Generic response envelope returned by every API operation."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator, model_validator

from cloudflare_images.core.models.errors import RemoteError

T = TypeVar("T")


class ResponseMessage(BaseModel):
    """Single entry of an envelope's ``errors`` or ``messages`` list."""

    model_config = ConfigDict(extra="allow")

    code: int | None = Field(None, description="Cloudflare error or message code")
    message: str = Field("", description="Human-readable text")


class Response(BaseModel, Generic[T]):
    """Envelope wrapping the result of a remote operation.

    Callers branch on ``success``: a failed operation is a normal value with
    a populated ``errors`` list, not an exception.
    """

    result: T | None = None
    result_info: Any = None
    success: StrictBool
    errors: list[ResponseMessage] = Field(default_factory=list)
    messages: list[ResponseMessage] = Field(default_factory=list)

    @field_validator("errors", "messages", mode="before")
    @classmethod
    def wrap_plain_entries(cls, value: Any) -> Any:
        """Accept non-object entries by wrapping them as messages."""
        if not isinstance(value, list):
            return value

        wrapped: list[Any] = []
        for entry in value:
            if isinstance(entry, (dict, ResponseMessage)):
                wrapped.append(entry)
            elif isinstance(entry, int) and not isinstance(entry, bool):
                wrapped.append({"code": entry})
            else:
                wrapped.append({"message": str(entry)})
        return wrapped

    @model_validator(mode="after")
    def check_consistency(self) -> "Response[T]":
        """Ensure ``success`` and ``errors`` agree."""
        if self.success and self.errors:
            raise ValueError("successful response must not carry errors")
        if not self.success and not self.errors:
            raise ValueError("failed response must carry at least one error")
        return self

    def raise_for_errors(self) -> "Response[T]":
        """Raise RemoteError for a failed envelope, return self otherwise."""
        if self.success:
            return self

        first = self.errors[0]
        raise RemoteError(
            message=first.message or "Cloudflare Images request failed",
            details={"errors": [error.model_dump() for error in self.errors]},
        )
