"""
Creditra Backend - Main Application Entry Point

Serves the credit line lifecycle API, the placeholder wallet risk
evaluator, and runs the Horizon contract-event listener.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
import uvicorn
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from creditra import __version__
from creditra.core.config import settings
from creditra.core.dependencies import get_horizon_listener
from creditra.core.logging import setup_logging
from creditra.core.metrics import get_metrics, get_metrics_content_type
from creditra.presentation.api import api_router
from creditra.presentation.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    error_handler_middleware,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Handles startup and shutdown events:
    - Set up logging
    - Start the Horizon listener when enabled
    - Stop it on shutdown
    """
    setup_logging()

    logger = structlog.get_logger(__name__)
    logger.info("application_started", version=__version__)

    listener = get_horizon_listener()
    if settings.horizon_listener_enabled:
        await listener.start()

    yield

    if listener.is_running:
        await listener.stop()
    logger.info("application_stopped")


app = FastAPI(
    title="Creditra Backend",
    description="Credit line lifecycle and wallet risk service",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(LoggingMiddleware)
app.add_middleware(RequestContextMiddleware)

error_handler_middleware(app)

app.include_router(api_router)


@app.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    """Prometheus metrics endpoint."""
    return Response(
        content=get_metrics(),
        media_type=get_metrics_content_type(),
    )


@app.get("/", include_in_schema=False)
async def root():
    """Redirect to API documentation."""

    return RedirectResponse(url="/docs")


def run() -> None:
    """Serve the app with uvicorn using the configured host and port."""
    uvicorn.run("creditra.main:app", host=settings.host, port=settings.port)
