"""
Health check API endpoints.

Routes: GET /health

Dependencies: showcase.api.deps
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from showcase.api.deps import ServiceRegistry, get_service_registry


class HealthResponse(BaseModel):
    """Health check response model."""

    model_config = ConfigDict(populate_by_name=True)

    status: str
    message: str
    services_ready: bool = Field(alias="servicesReady")


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check(
    registry: ServiceRegistry = Depends(get_service_registry),
) -> HealthResponse:
    """Liveness plus whether backend clients initialized."""
    registry.bootstrap()
    if registry.ready:
        return HealthResponse(
            status="healthy", message="Server Healthy", services_ready=True
        )
    return HealthResponse(
        status="degraded", message=registry.init_error or "", services_ready=False
    )
