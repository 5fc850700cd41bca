"""Stripe webhook endpoint.

Receives signed event notifications from Stripe. The raw body is verified
against the Stripe-Signature header before it is parsed. When no webhook
secret is configured, deliveries are acknowledged and ignored.
"""

from fastapi import APIRouter, Depends, Request, Response
from starlette.status import HTTP_200_OK

from storefront_api.dependencies import (
    get_settings,
    get_stripe_service,
    get_webhook_handler,
)
from storefront_shared.config import Settings
from storefront_shared.models.errors import ErrorResponse
from storefront_shared.models.stripe_webhook import WebhookAck
from storefront_shared.services.stripe_service import StripeService
from storefront_shared.services.webhook_handler import WebhookHandler
from storefront_shared.utils.logging import get_logger, log_webhook_event

logger = get_logger(__name__)

router = APIRouter(tags=["webhooks"])

SIGNATURE_HEADER = "Stripe-Signature"


@router.post(
    "/webhook",
    summary="Receive Stripe webhook events",
    description="""
Endpoint for Stripe webhook events. Handles:
- checkout.session.completed: logs the completed order
- payment_intent.succeeded: logged
- anything else: logged as unhandled and acknowledged

**No authentication required** - signature is verified using the Stripe webhook secret.

**Not deduplicated**: a redelivered event is processed again.
""",
    response_model=WebhookAck,
    responses={
        200: {"description": "Event received (or ignored when no secret is set)"},
        400: {"description": "Invalid signature or payload", "model": ErrorResponse},
    },
)
async def handle_stripe_webhook(
    request: Request,
    settings: Settings = Depends(get_settings),
    stripe_service: StripeService = Depends(get_stripe_service),
    handler: WebhookHandler = Depends(get_webhook_handler),
) -> WebhookAck | Response:
    """Verify and dispatch a Stripe webhook event."""
    if not settings.webhook_configured:
        log_webhook_event(
            logger,
            "unverified",
            "-",
            result="ignored",
            reason="webhook secret not configured",
        )
        return Response(status_code=HTTP_200_OK)

    payload = await request.body()
    event = stripe_service.verify_webhook_signature(
        payload, request.headers.get(SIGNATURE_HEADER)
    )

    log_webhook_event(logger, event.type, event.id, result="received")
    handler.dispatch(event)

    return WebhookAck()
