"""
FastAPI Main Application - HTTP entry point.

Run with: uvicorn dataops.interfaces.api.main:app --reload
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from dataops import __version__
from dataops.config import get_settings

from .middleware import ErrorHandlerMiddleware, RequestContextMiddleware
from .routes import health, operations

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    settings = get_settings()
    logger.info("Starting dataops API...")
    logger.info("  Max sequence length: %d", settings.api_max_length)

    yield

    logger.info("Shutting down dataops API...")


def create_app() -> FastAPI:
    """Create FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="dataops API",
        description="In-place integer sorting and searching",
        version=__version__,
        lifespan=lifespan,
        debug=settings.api_debug,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (last added = outermost)
    # 1. Error translation (innermost, wraps the routes)
    app.add_middleware(ErrorHandlerMiddleware)

    # 2. Request ID, latency and access log (sees the translated status)
    app.add_middleware(RequestContextMiddleware)

    # Include routers
    app.include_router(health.router, tags=["Health"])
    app.include_router(operations.router, prefix="/api/operations", tags=["Operations"])

    return app


# Create app instance
app = create_app()
