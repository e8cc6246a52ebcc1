"""Health check endpoints."""

from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
async def health_check() -> dict[str, str]:
    """
    Liveness probe.

    Returns:
        Simple OK response if the service is running
    """
    return {"status": "ok"}
