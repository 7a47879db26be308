"""Health check endpoint."""

from fastapi import APIRouter

from shared.config import get_settings

router = APIRouter(tags=["health"])

API_VERSION = "0.1.0"


@router.get("/health", summary="Health check")
async def health() -> dict[str, str]:
    return {
        "status": "healthy",
        "version": API_VERSION,
        "environment": get_settings().environment,
    }
