"""API routes package.

- health: Health check endpoint
- checkout: Stripe Checkout Session creation
- webhooks: Stripe webhook receiver
- static: Front-end files with index.html fallback

API routers are registered in main.py with the /api prefix; the static
router is registered last, without a prefix, so it only sees paths nothing
else matched.
"""

from storefront_api.routes.checkout import router as checkout_router
from storefront_api.routes.health import router as health_router
from storefront_api.routes.static import router as static_router
from storefront_api.routes.webhooks import router as webhooks_router

__all__ = [
    "checkout_router",
    "health_router",
    "static_router",
    "webhooks_router",
]
