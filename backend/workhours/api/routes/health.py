"""Health Routes: liveness for the process, readiness for the database.

Invariants:
    - GET /api/v1/health/ answers 200 whenever the process can serve requests
    - GET /api/v1/health/ready answers 503 until the database answers SELECT 1
    - The session manager is looked up per request (tests swap it)
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from workhours import __version__
from workhours.infrastructure import database

SERVICE_NAME = "workhours-api"

router = APIRouter(prefix="/api/v1/health", tags=["health"])


async def _database_ready() -> bool:
    manager = database.db_manager
    if manager is None:
        return False
    return await manager.health_check()


@router.get("/")
async def liveness():
    return {"status": "healthy", "service": SERVICE_NAME, "version": __version__}


@router.get("/ready")
async def readiness():
    """503 with reason "database_unavailable" while the store is unreachable."""
    if await _database_ready():
        return {"status": "ready", "checks": {"database": "healthy"}}
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "status": "not_ready",
            "reason": "database_unavailable",
            "checks": {"database": "unavailable"},
        },
    )
