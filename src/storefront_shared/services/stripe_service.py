"""Stripe payment service for checkout sessions and webhook verification.

Provides integration with Stripe using the v8+ StripeClient pattern.
Credentials come from the injected ``Settings``; nothing here reads the
environment.
"""

import stripe
from pydantic import ValidationError
from stripe import StripeClient

from storefront_shared.config import Settings
from storefront_shared.models.catalog import line_item_name
from storefront_shared.models.checkout import OrderRequest
from storefront_shared.models.errors import (
    ConfigurationError,
    ErrorCode,
    ProviderError,
    VerificationError,
)
from storefront_shared.models.stripe_webhook import StripeWebhookEvent
from storefront_shared.utils.logging import get_logger, log_checkout_operation, truncate

logger = get_logger(__name__)

CURRENCY = "usd"
PRODUCT_DESCRIPTION = "Pre-Order - Ships March 2026"
ORDER_TYPE = "pre-order"
DELIVERY_DATE = "March 2026"
SHIPPING_COUNTRIES = ("US", "CA", "GB", "AU", "NZ", "IE")

SUCCESS_PATH = "/success.html?session_id={CHECKOUT_SESSION_ID}"
CANCEL_PATH = "/"


class StripeService:
    """Service for Stripe payment operations.

    Handles:
    - Checkout session creation
    - Webhook signature validation

    The storefront declares the unit price itself and it is sent to Stripe
    as-is; only the product identifier is checked against the catalog.

    Usage:
        stripe_svc = StripeService(Settings.from_env())
        session_id = stripe_svc.create_checkout_session(
            OrderRequest(product="karma", size="M", price=2500)
        )
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._client: StripeClient | None = None

    def _get_client(self) -> StripeClient:
        """Get or create the Stripe client (lazy initialization).

        Raises:
            ConfigurationError: If no secret key is configured.
        """
        if self._client is None:
            secret_key = self._settings.stripe_secret_key
            if secret_key is None:
                logger.error("Checkout requested but STRIPE_SECRET_KEY is not set")
                raise ConfigurationError()
            self._client = StripeClient(secret_key.get_secret_value())
            logger.info("Stripe client initialized")
        return self._client

    def build_session_params(self, order: OrderRequest) -> dict:
        """Build the Checkout Session parameters for an order."""
        base_url = self._settings.base_url
        return {
            "mode": "payment",
            "payment_method_types": ["card"],
            "line_items": [
                {
                    "price_data": {
                        "currency": CURRENCY,
                        "unit_amount": order.price,
                        "product_data": {
                            "name": line_item_name(order.product, order.size),
                            "description": PRODUCT_DESCRIPTION,
                        },
                    },
                    "quantity": 1,
                }
            ],
            "success_url": f"{base_url}{SUCCESS_PATH}",
            "cancel_url": f"{base_url}{CANCEL_PATH}",
            "shipping_address_collection": {
                "allowed_countries": list(SHIPPING_COUNTRIES),
            },
            "metadata": {
                "product": order.product,
                "size": order.size,
                "order_type": ORDER_TYPE,
                "delivery_date": DELIVERY_DATE,
            },
        }

    def create_checkout_session(self, order: OrderRequest) -> str:
        """Create a Stripe Checkout session.

        Args:
            order: Validated order request.

        Returns:
            The Stripe checkout session ID.

        Raises:
            ConfigurationError: If Stripe is not configured. No request is made.
            ProviderError: If Stripe rejects or fails the request.
        """
        client = self._get_client()
        params = self.build_session_params(order)

        try:
            session = client.checkout.sessions.create(params=params)
        except stripe.StripeError as e:
            error_code = getattr(e, "code", None)
            message = e.user_message or str(e)
            logger.error(
                "Stripe checkout session creation failed: %r (code: %s, request: %s)",
                e,
                error_code,
                getattr(e, "request_id", None),
            )
            raise ProviderError(message, stripe_error_code=error_code) from e

        log_checkout_operation(
            logger,
            "create_checkout_session",
            session_id=session.id,
            product=order.product,
            size=order.size,
            amount_cents=order.price,
        )
        return session.id

    def verify_webhook_signature(
        self, payload: bytes, signature: str | None
    ) -> StripeWebhookEvent:
        """Verify a webhook signature, then parse the event.

        Verification runs against the exact bytes received; the body is only
        parsed once the signature checks out.

        Args:
            payload: Raw request body bytes.
            signature: Stripe-Signature header value.

        Returns:
            Parsed webhook event.

        Raises:
            ConfigurationError: If no webhook secret is configured.
            VerificationError: If the signature is missing or invalid, or the
                verified body is not a Stripe event.
        """
        webhook_secret = self._settings.stripe_webhook_secret
        if webhook_secret is None:
            raise ConfigurationError("Webhook secret not configured")

        if not signature:
            logger.warning("Webhook request missing Stripe-Signature header")
            raise VerificationError(reason="Missing Stripe-Signature header")

        try:
            body = payload.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.warning("Webhook payload is not valid UTF-8")
            raise VerificationError(
                ErrorCode.INVALID_WEBHOOK_PAYLOAD, reason="Payload is not UTF-8"
            ) from e

        try:
            stripe.WebhookSignature.verify_header(
                body,
                signature,
                webhook_secret.get_secret_value(),
                tolerance=stripe.Webhook.DEFAULT_TOLERANCE,
            )
        except stripe.SignatureVerificationError as e:
            reason = truncate(str(e))
            logger.warning("Webhook signature verification failed: %s", reason)
            raise VerificationError(reason=reason) from e

        try:
            event = StripeWebhookEvent.model_validate_json(payload)
        except ValidationError as e:
            reason = truncate(str(e))
            logger.warning("Verified webhook payload is not a Stripe event: %s", reason)
            raise VerificationError(
                ErrorCode.INVALID_WEBHOOK_PAYLOAD, reason=reason
            ) from e

        logger.info("Webhook signature verified for event: %s", event.id)
        return event
