"""Health check endpoints."""
from fastapi import APIRouter

from ...core.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """Basic health check."""
    return {
        "status": "OK",
        "message": f"{settings.APP_NAME} is running",
        "provider_configured": settings.provider_configured,
    }
