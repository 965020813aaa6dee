"""Health check endpoints.

Provides endpoints for monitoring service health and readiness.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from storefront.api.products import get_service
from storefront.catalog.service import CatalogService
from storefront.infrastructure.config import settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    service: str
    version: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check service health.

    Returns:
        Health status with service name and version.
    """
    return HealthResponse(
        status="healthy",
        service="storefront",
        version=settings.api_version,
    )


@router.get("/ready")
async def readiness_check(
    service: Annotated[CatalogService, Depends(get_service)],
) -> JSONResponse:
    """Check if the catalog loaded.

    Listing keeps working with an empty catalog, so a failed load is
    reported here rather than on the listing endpoints.

    Returns:
        Readiness status; 503 when the catalog could not be loaded.
    """
    if service.is_available():
        return JSONResponse({"status": "ready"})
    return JSONResponse(
        {"status": "degraded", "reason": service.store.load_result().error},
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
    )
