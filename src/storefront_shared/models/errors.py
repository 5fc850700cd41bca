"""Standard error codes and exceptions for the storefront server.

Every failure a request handler can report is a ``StorefrontError`` carrying
an ``ErrorCode``. The API layer maps codes to HTTP statuses and renders
``ErrorResponse`` bodies.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ErrorCode(str, Enum):
    """Standard error codes."""

    # Configuration error codes
    PAYMENTS_NOT_CONFIGURED = "ERR_CONFIG_001"

    # Stripe error codes
    INVALID_WEBHOOK_SIGNATURE = "ERR_STRIPE_001"
    STRIPE_API_ERROR = "ERR_STRIPE_002"
    INVALID_WEBHOOK_PAYLOAD = "ERR_STRIPE_004"

    # Request validation
    INVALID_ORDER = "ERR_VALIDATION"


# Human-readable error messages
ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.PAYMENTS_NOT_CONFIGURED: (
        "Stripe not configured. Add STRIPE_SECRET_KEY to the environment variables."
    ),
    ErrorCode.INVALID_WEBHOOK_SIGNATURE: "Invalid webhook signature",
    ErrorCode.STRIPE_API_ERROR: "Stripe API error occurred",
    ErrorCode.INVALID_WEBHOOK_PAYLOAD: "Invalid webhook payload",
    ErrorCode.INVALID_ORDER: "Request validation failed",
}


class ErrorResponse(BaseModel):
    """Error body returned by every failing API endpoint."""

    model_config = ConfigDict(strict=True)

    success: bool = False
    error: str
    error_code: str
    details: Optional[dict[str, str]] = None


class StorefrontError(Exception):
    """Base exception for expected, client-visible failures."""

    def __init__(
        self,
        code: ErrorCode,
        message: Optional[str] = None,
        details: Optional[dict[str, str]] = None,
    ):
        self.code = code
        self.message = message or ERROR_MESSAGES[code]
        self.details = details
        super().__init__(self.message)

    def to_response(self) -> ErrorResponse:
        """Convert this exception to an ErrorResponse body."""
        return ErrorResponse(
            error=self.message,
            error_code=self.code.value,
            details=self.details,
        )


class ConfigurationError(StorefrontError):
    """A required credential or secret is missing."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(ErrorCode.PAYMENTS_NOT_CONFIGURED, message)


class ProviderError(StorefrontError):
    """Stripe rejected or failed a request.

    The message is Stripe's own, passed through verbatim.
    """

    def __init__(self, message: str, stripe_error_code: Optional[str] = None):
        details = {"stripe_error_code": stripe_error_code} if stripe_error_code else None
        super().__init__(ErrorCode.STRIPE_API_ERROR, message, details)
        self.stripe_error_code = stripe_error_code


class VerificationError(StorefrontError):
    """An inbound webhook could not be authenticated or parsed."""

    def __init__(
        self,
        code: ErrorCode = ErrorCode.INVALID_WEBHOOK_SIGNATURE,
        reason: Optional[str] = None,
    ):
        super().__init__(code)
        self.reason = reason
