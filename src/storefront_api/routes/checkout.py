"""Checkout endpoint.

Creates a Stripe Checkout Session for a single pre-order item and returns
its ID; the storefront then redirects the buyer to Stripe's hosted page.
"""

from fastapi import APIRouter, Depends

from storefront_api.dependencies import get_stripe_service
from storefront_shared.models.checkout import CheckoutSessionResponse, OrderRequest
from storefront_shared.models.errors import ErrorResponse
from storefront_shared.services.stripe_service import StripeService

router = APIRouter(tags=["checkout"])


@router.post(
    "/create-checkout-session",
    summary="Create Stripe checkout session",
    description="""
Create a Stripe Checkout Session for one item.

**Notes:**
- `product` must be a catalog identifier
- `price` is in USD cents and is sent to Stripe as given
- Ships to US, CA, GB, AU, NZ and IE only
""",
    response_model=CheckoutSessionResponse,
    responses={
        200: {"description": "Session created"},
        400: {"description": "Invalid order", "model": ErrorResponse},
        500: {
            "description": "Stripe not configured or Stripe error",
            "model": ErrorResponse,
        },
    },
)
def create_checkout_session(
    body: OrderRequest,
    stripe_service: StripeService = Depends(get_stripe_service),
) -> CheckoutSessionResponse:
    # Sync route: FastAPI runs the blocking Stripe call in its threadpool.
    session_id = stripe_service.create_checkout_session(body)
    return CheckoutSessionResponse(id=session_id)
