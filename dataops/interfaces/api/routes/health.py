"""
Health Routes - System health and status endpoints.
"""

from typing import Any

from fastapi import APIRouter

from dataops import __version__

router = APIRouter()


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy", "service": "dataops"}


@router.get("/api")
async def api_info() -> dict[str, Any]:
    """API info endpoint."""
    return {
        "name": "dataops API",
        "version": __version__,
        "description": "In-place integer sorting and searching",
        "docs": "/docs",
    }
