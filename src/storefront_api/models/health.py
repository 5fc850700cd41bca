"""Health check response model."""

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    """Server liveness plus whether Stripe checkout can work."""

    model_config = ConfigDict(populate_by_name=True)

    status: str = Field(
        ...,
        description="Human-readable server status",
        examples=["Server is running!"],
    )
    stripe_configured: bool = Field(
        ...,
        alias="stripeConfigured",
        description="Whether a Stripe secret key is configured",
    )
