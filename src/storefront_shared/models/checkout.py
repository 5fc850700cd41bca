"""Checkout request and response schemas."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .catalog import PRODUCT_NAMES, is_known_product

# Stripe caps metadata values at 500 characters; size is echoed into metadata.
METADATA_VALUE_MAX_LENGTH = 500


class OrderRequest(BaseModel):
    """Order submitted by the storefront when the buyer clicks checkout.

    ``price`` is whatever the storefront declares; it is forwarded to Stripe
    unchanged.
    """

    model_config = ConfigDict(
        strict=True,
        str_strip_whitespace=True,
        json_schema_extra={
            "examples": [
                {"product": "karma", "size": "M", "price": 2500},
            ]
        },
    )

    product: str = Field(
        ...,
        description="Catalog product identifier",
        examples=sorted(PRODUCT_NAMES),
    )
    size: str = Field(
        ...,
        min_length=1,
        max_length=METADATA_VALUE_MAX_LENGTH,
        description="Garment size label, passed through as-is",
        examples=["M"],
    )
    price: int = Field(
        ...,
        gt=0,
        description="Unit price in USD cents",
        examples=[2500],
    )

    @field_validator("product")
    @classmethod
    def product_must_exist(cls, value: str) -> str:
        if not is_known_product(value):
            raise ValueError(f"Unknown product '{value}'")
        return value


class CheckoutSessionResponse(BaseModel):
    """Successful checkout response: only the Stripe session ID."""

    id: str = Field(
        ...,
        description="Stripe Checkout Session ID",
        examples=["cs_test_a1B2c3D4"],
    )
