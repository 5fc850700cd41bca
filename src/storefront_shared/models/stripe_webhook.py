"""Stripe webhook event model and known event kinds."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class EventKind(str, Enum):
    """Stripe event types this server reacts to."""

    CHECKOUT_SESSION_COMPLETED = "checkout.session.completed"
    PAYMENT_INTENT_SUCCEEDED = "payment_intent.succeeded"

    @classmethod
    def parse(cls, event_type: str) -> Optional["EventKind"]:
        """Return the matching kind, or None for types we do not handle."""
        try:
            return cls(event_type)
        except ValueError:
            return None


class StripeEventData(BaseModel):
    """The ``data`` envelope of a Stripe event."""

    model_config = ConfigDict(extra="allow")

    object: dict[str, Any] = Field(default_factory=dict)


class StripeWebhookEvent(BaseModel):
    """A verified Stripe webhook event.

    Only the fields used for dispatch are typed; everything else Stripe sends
    is kept but ignored.
    """

    model_config = ConfigDict(extra="allow")

    id: str = Field(
        default="",
        description="Stripe event ID (evt_xxx)",
        examples=["evt_1ABC123DEF456"],
    )
    type: str = Field(
        ...,
        description="Stripe event type",
        examples=["checkout.session.completed", "payment_intent.succeeded"],
    )
    data: StripeEventData = Field(default_factory=StripeEventData)

    @property
    def kind(self) -> Optional[EventKind]:
        return EventKind.parse(self.type)

    @property
    def object(self) -> dict[str, Any]:
        return self.data.object


class WebhookAck(BaseModel):
    """Acknowledgment returned to Stripe for a dispatched event."""

    received: bool = True
