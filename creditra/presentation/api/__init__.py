"""API routers."""

from fastapi import APIRouter

from .routes.health import health_router
from .routes.router import router

api_router = APIRouter()
api_router.include_router(health_router, tags=["Health"])
api_router.include_router(router)

__all__ = ["api_router"]
