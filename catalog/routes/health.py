"""
Health check route.

This endpoint is PUBLIC and does not touch Supabase, so it keeps answering
even when the database configuration is missing.
"""

from fastapi import APIRouter

from catalog.schemas.health import HealthResponse
from catalog.utils.logging import get_logger

logger = get_logger(__name__)

# Create router with no prefix (mounted at root level in main.py)
router = APIRouter(tags=["system"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check endpoint",
    status_code=200,
)
async def health_check() -> HealthResponse:
    """
    Public health check endpoint.

    Example response:
        {
            "status": "ok",
            "service": "parts-catalog-backend"
        }
    """
    logger.debug("Health check endpoint called")

    return HealthResponse(status="ok")
