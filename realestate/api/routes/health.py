"""Health check route."""

from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Report service liveness."""
    return {"status": "healthy", "service": "realestate"}
