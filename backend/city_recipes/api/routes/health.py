"""Health Probe - liveness endpoint for container orchestration.

Invariants:
    - GET /health always returns 200 if the process is up
    - Never calls the upstream APIs
"""

from fastapi import APIRouter, status

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness check. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "city-recipes-api",
        "version": "1.0.0",
    }
