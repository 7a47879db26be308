"""Shared API request/response models.

Domain models (Viewer, StripeConnectResponse, ...) live in shared.models.
This module only holds HTTP layer concerns: the validation error envelope.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from shared.models.errors import ErrorCode, ErrorResponse

__all__ = [
    "ErrorCode",
    "ErrorResponse",
    "ValidationErrorDetail",
    "ValidationErrorResponse",
    "format_validation_errors",
]


class ValidationErrorDetail(BaseModel):
    """One failed field."""

    model_config = ConfigDict(strict=True)

    loc: list[str] = Field(
        ...,
        description="Path to the field that failed validation",
        examples=[["body", "code"]],
    )
    msg: str = Field(..., examples=["Field required"])
    type: str = Field(..., examples=["missing"])


class ValidationErrorResponse(BaseModel):
    """Body of HTTP 422 responses, shaped like ErrorResponse."""

    model_config = ConfigDict(strict=True)

    success: bool = False
    error_code: str = "ERR_VALIDATION"
    message: str = "Request validation failed"
    recovery: str = "Check the request body and try again"
    details: list[ValidationErrorDetail] = Field(default_factory=list)


def format_validation_errors(errors: list[dict[str, Any]]) -> ValidationErrorResponse:
    """Convert pydantic/FastAPI error dicts into a ValidationErrorResponse."""
    return ValidationErrorResponse(
        details=[
            ValidationErrorDetail(
                loc=[str(part) for part in error.get("loc", ())],
                msg=str(error.get("msg", "")),
                type=str(error.get("type", "")),
            )
            for error in errors
        ]
    )
