"""Data models for the storefront checkout server."""

from .catalog import PRODUCT_NAMES, get_display_name, is_known_product, line_item_name
from .checkout import CheckoutSessionResponse, OrderRequest
from .errors import (
    ConfigurationError,
    ErrorCode,
    ErrorResponse,
    ProviderError,
    StorefrontError,
    VerificationError,
)
from .stripe_webhook import EventKind, StripeWebhookEvent, WebhookAck

__all__ = [
    "PRODUCT_NAMES",
    "get_display_name",
    "is_known_product",
    "line_item_name",
    "CheckoutSessionResponse",
    "OrderRequest",
    "ConfigurationError",
    "ErrorCode",
    "ErrorResponse",
    "ProviderError",
    "StorefrontError",
    "VerificationError",
    "EventKind",
    "StripeWebhookEvent",
    "WebhookAck",
]
