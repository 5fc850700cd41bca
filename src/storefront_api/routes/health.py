"""Health check endpoint."""

from fastapi import APIRouter, Depends

from storefront_api.dependencies import get_settings
from storefront_api.models.health import HealthResponse
from storefront_shared.config import Settings

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    summary="Health check",
    response_model=HealthResponse,
)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(
        status="Server is running!",
        stripe_configured=settings.stripe_configured,
    )
