"""Backend services for the storefront checkout server."""

from .stripe_service import StripeService
from .webhook_handler import WebhookHandler

__all__ = [
    "StripeService",
    "WebhookHandler",
]
