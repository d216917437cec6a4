"""
Health check route.
"""
from fastapi import APIRouter

from ephemeral_paste.models import HealthCheck

router = APIRouter()


@router.get("/api/healthz", response_model=HealthCheck)
async def health_check() -> HealthCheck:
    """Returns 200 with status=ok while the process is serving requests."""
    return HealthCheck(status="ok")
