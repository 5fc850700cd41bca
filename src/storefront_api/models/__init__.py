"""API-specific request/response models.

Order and webhook schemas live in storefront_shared.models and are reused
by the routes directly. This package holds HTTP-layer-only models.
"""

from storefront_api.models.health import HealthResponse

__all__ = ["HealthResponse"]
