"""Standard error codes for the TinyHouse server.

All server endpoints use these error codes for consistent error responses.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ErrorCode(str, Enum):
    """Standard error codes returned by the API."""

    # Request errors (ERR_001-ERR_002)
    INVALID_AUTHORIZATION_CODE = "ERR_001"
    VIEWER_REQUIRED = "ERR_002"

    # Stripe error codes (ERR_STRIPE_001-ERR_STRIPE_003)
    STRIPE_CONNECT_FAILED = "ERR_STRIPE_001"
    STRIPE_NOT_CONFIGURED = "ERR_STRIPE_002"
    STRIPE_API_ERROR = "ERR_STRIPE_003"


# Human-readable error messages
ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.INVALID_AUTHORIZATION_CODE: "The Stripe authorization code is missing or malformed",
    ErrorCode.VIEWER_REQUIRED: "A signed in viewer is required to perform this action",
    ErrorCode.STRIPE_CONNECT_FAILED: "Failed to connect the Stripe account",
    ErrorCode.STRIPE_NOT_CONFIGURED: "Stripe credentials are not configured",
    ErrorCode.STRIPE_API_ERROR: "Stripe API error occurred",
}

# Recovery suggestions for clients
ERROR_RECOVERY: dict[ErrorCode, str] = {
    ErrorCode.INVALID_AUTHORIZATION_CODE: "Restart the Stripe Connect flow from the profile page",
    ErrorCode.VIEWER_REQUIRED: "Sign in and try again",
    ErrorCode.STRIPE_CONNECT_FAILED: "Restart the Stripe Connect flow from the profile page",
    ErrorCode.STRIPE_NOT_CONFIGURED: "Verify the Stripe secret key configuration",
    ErrorCode.STRIPE_API_ERROR: "Try again or contact support",
}


class ErrorResponse(BaseModel):
    """Standard error response body for API failures."""

    model_config = ConfigDict(strict=True)

    success: bool = False
    error_code: ErrorCode
    message: str
    recovery: str
    details: Optional[dict[str, str]] = None

    @classmethod
    def from_code(
        cls,
        code: ErrorCode,
        details: Optional[dict[str, str]] = None,
    ) -> "ErrorResponse":
        """Create an ErrorResponse from an error code.

        Args:
            code: The error code
            details: Optional additional context about the error

        Returns:
            An ErrorResponse with the message and recovery hint for the code.
        """
        return cls(
            error_code=code,
            message=ERROR_MESSAGES[code],
            recovery=ERROR_RECOVERY[code],
            details=details,
        )


class TinyHouseError(Exception):
    """Exception raised by server operations.

    Converted to an ErrorResponse by the API exception handlers.
    """

    def __init__(
        self,
        code: ErrorCode,
        details: Optional[dict[str, str]] = None,
    ):
        self.code = code
        self.message = ERROR_MESSAGES[code]
        self.recovery = ERROR_RECOVERY[code]
        self.details = details
        super().__init__(self.message)

    def to_error_response(self) -> ErrorResponse:
        """Convert this exception to an ErrorResponse."""
        return ErrorResponse.from_code(self.code, self.details)


# Stripe OAuth error codes mapped to messages suitable for end users
STRIPE_OAUTH_ERROR_MESSAGES: dict[str, str] = {
    "invalid_grant": "The authorization code has expired or was already used.",
    "invalid_request": "The Stripe Connect request was malformed.",
    "unsupported_grant_type": "The Stripe Connect request used an unsupported grant type.",
    "invalid_client": "The platform Stripe account is not configured for Connect.",
}


def get_user_friendly_stripe_message(
    stripe_error_code: Optional[str],
    default_message: str = "We weren't able to connect your Stripe account. Please try again.",
) -> str:
    """Get a user-friendly message for a Stripe OAuth error code.

    Args:
        stripe_error_code: The Stripe error code (e.g., 'invalid_grant').
        default_message: Message to use if error code is unknown.

    Returns:
        User-friendly error message.
    """
    if stripe_error_code and stripe_error_code in STRIPE_OAUTH_ERROR_MESSAGES:
        return STRIPE_OAUTH_ERROR_MESSAGES[stripe_error_code]
    return default_message
