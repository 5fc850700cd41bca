"""FastAPI dependency providers.

Settings and services are built once by ``create_app`` and kept on
``app.state``; these providers hand them to routes. Tests get isolated
instances simply by building their own app with ``create_app(settings)``.
"""

from fastapi import Request

from storefront_shared.config import Settings
from storefront_shared.services.stripe_service import StripeService
from storefront_shared.services.webhook_handler import WebhookHandler


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_stripe_service(request: Request) -> StripeService:
    return request.app.state.stripe_service


def get_webhook_handler(request: Request) -> WebhookHandler:
    return request.app.state.webhook_handler
