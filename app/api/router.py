"""API router composition."""
from fastapi import APIRouter

from app.api.endpoints import analyze

# All scoring endpoints are versioned to ensure future backwards-compatible changes.
api_v1_router = APIRouter(prefix="/v1")
api_v1_router.include_router(analyze.router, tags=["analyze"])

__all__ = ["api_v1_router"]
