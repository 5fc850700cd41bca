"""FastAPI application for the storefront checkout server.

Serves the static storefront and brokers Stripe Checkout:
- GET  /api/health
- POST /api/create-checkout-session
- POST /api/webhook
- GET  /* (front-end files, index.html fallback)
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront_api.exceptions import register_exception_handlers
from storefront_api.middleware.correlation import CorrelationIdMiddleware
from storefront_api.routes.checkout import router as checkout_router
from storefront_api.routes.health import router as health_router
from storefront_api.routes.static import router as static_router
from storefront_api.routes.webhooks import router as webhooks_router
from storefront_shared.config import Settings
from storefront_shared.services.stripe_service import StripeService
from storefront_shared.services.webhook_handler import WebhookHandler
from storefront_shared.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def log_startup_banner(settings: Settings) -> None:
    """Log where the server listens and what is configured."""
    logger.info("Server running on port %d", settings.port)
    logger.info("Visit: http://localhost:%d", settings.port)
    logger.info(
        "Stripe: %s",
        "configured" if settings.stripe_configured else "missing (add STRIPE_SECRET_KEY)",
    )
    logger.info(
        "Webhooks: %s",
        "verified" if settings.webhook_configured else "unverified (add STRIPE_WEBHOOK_SECRET)",
    )
    logger.info("Domain: %s", settings.public_domain or "localhost")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    log_startup_banner(app.state.settings)
    yield


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application.

    Args:
        settings: Settings to use. Read from the environment when omitted.

    Returns:
        Configured FastAPI app with services attached to ``app.state``.
    """
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Storefront Checkout API",
        description="Static storefront with Stripe Checkout and webhooks",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.stripe_service = StripeService(settings)
    app.state.webhook_handler = WebhookHandler()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(CorrelationIdMiddleware)

    register_exception_handlers(app)

    app.include_router(health_router, prefix="/api")
    app.include_router(checkout_router, prefix="/api")
    app.include_router(webhooks_router, prefix="/api")
    # Catch-all, must come last
    app.include_router(static_router)

    return app


app = create_app()


def run_server(host: str = "0.0.0.0", reload: bool = False) -> None:
    """Run the server with uvicorn on the configured port.

    Args:
        host: Host to bind to (default: 0.0.0.0)
        reload: Enable hot reload for development (default: False)
    """
    import uvicorn

    port = app.state.settings.port
    if reload:
        # Use string reference for reload mode (uvicorn requirement)
        uvicorn.run("storefront_api.main:app", host=host, port=port, reload=True)
    else:
        uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run_server()
