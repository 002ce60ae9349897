"""Health check endpoint for service monitoring."""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from creditra import __version__
from creditra.core.dependencies import get_horizon_listener
from creditra.infrastructure.clients import HorizonListener

health_router = APIRouter()


class HealthResponse(BaseModel):
    status: str = "healthy"
    version: str
    horizon_listener_running: bool


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Returns the health status of the service.",
)
async def health_check(
    listener: Annotated[HorizonListener, Depends(get_horizon_listener)],
) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        horizon_listener_running=listener.is_running,
    )
