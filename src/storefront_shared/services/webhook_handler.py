"""Webhook handler for dispatching verified Stripe events.

Keeps event handling separate from HTTP routing so it can be unit tested
without a request. Nothing is persisted: a redelivered event is simply
dispatched (and logged) again, with the same event ID.
"""

from collections.abc import Callable

from storefront_shared.models.stripe_webhook import EventKind, StripeWebhookEvent
from storefront_shared.utils.logging import get_logger, log_webhook_event

logger = get_logger(__name__)

HANDLED = "handled"
UNHANDLED = "unhandled"


class WebhookHandler:
    """Dispatches verified Stripe events by kind.

    Every call returns a processing result; unknown event types are logged
    and acknowledged, never raised.
    """

    def __init__(self) -> None:
        self._handlers: dict[EventKind, Callable[[StripeWebhookEvent], str]] = {
            EventKind.CHECKOUT_SESSION_COMPLETED: self.process_checkout_completed,
            EventKind.PAYMENT_INTENT_SUCCEEDED: self.process_payment_intent_succeeded,
        }

    def dispatch(self, event: StripeWebhookEvent) -> str:
        """Route an event to its handler.

        Args:
            event: Verified Stripe webhook event

        Returns:
            Processing result ("handled" or "unhandled")
        """
        kind = event.kind
        if kind is None:
            return self.process_unhandled(event)
        return self._handlers[kind](event)

    def process_checkout_completed(self, event: StripeWebhookEvent) -> str:
        """Process checkout.session.completed.

        Logs the completed order. There is no order store, so nothing else
        happens here.
        """
        session = event.object
        metadata = session.get("metadata") or {}

        log_webhook_event(
            logger,
            event.type,
            event.id,
            result=HANDLED,
            session_id=session.get("id"),
            amount_total=session.get("amount_total"),
            customer=session.get("customer_details"),
            product=metadata.get("product"),
            size=metadata.get("size"),
        )
        return HANDLED

    def process_payment_intent_succeeded(self, event: StripeWebhookEvent) -> str:
        log_webhook_event(
            logger,
            event.type,
            event.id,
            result=HANDLED,
            payment_intent=event.object.get("id"),
        )
        return HANDLED

    def process_unhandled(self, event: StripeWebhookEvent) -> str:
        log_webhook_event(logger, event.type, event.id, result=UNHANDLED)
        return UNHANDLED
