"""Health check endpoints for load balancers and monitoring."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.deps import get_manager
from app.services.record_manager import RecordManager

router = APIRouter()


@router.get("")
async def health():
    """Simple liveness check."""
    return {"status": "healthy"}


@router.get("/ready")
async def readiness(manager: RecordManager = Depends(get_manager)):
    """Readiness: app + DB connectivity."""
    if await manager.test_connection():
        return {"status": "healthy", "database": "connected"}
    return JSONResponse(
        status_code=500,
        content={"status": "error", "database": "unreachable"},
    )
