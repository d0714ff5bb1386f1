"""API request/response schemas."""
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_validator


def null_as_default(model: type[BaseModel], value: Any, info: ValidationInfo) -> Any:
    """A JSON null stands for an absent field, so it takes the field's default."""
    if value is None:
        return model.model_fields[info.field_name].default
    return value


class PromptRequest(BaseModel):
    # Reject type mismatches instead of coercing them.
    model_config = ConfigDict(strict=True)

    prompt: str = ""
    max_tokens: int = Field(default=0, ge=0, description="0 leaves the backend default in place.")
    temperature: float = 0.0

    @field_validator("prompt", "max_tokens", "temperature", mode="before")
    @classmethod
    def _null_is_absent(cls, value: Any, info: ValidationInfo) -> Any:
        return null_as_default(cls, value, info)


class APIResponse(BaseModel):
    generated: str


def describe_validation_error(exc: ValidationError) -> str:
    """One-line summary of a pydantic error, e.g. "max_tokens: Input should be a valid integer"."""
    parts = []
    for err in exc.errors(include_url=False):
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)
