"""Status & Stats Routes: read-only dashboard view models.

Invariants:
    - group_id query values that are absent, malformed or unknown fall back to
      the first group by name (never an error)
    - Open rounds are measured up to the request time
"""

from fastapi import APIRouter, Depends, Query

from workhours.api.dependencies import get_status_service, parse_group_id
from workhours.infrastructure.clock import utc_now
from workhours.schemas.status import StatsResponse, StatusResponse
from workhours.services.status_view import StatusService

router = APIRouter(prefix="/api/v1", tags=["status"])


@router.get("/status", response_model=StatusResponse)
async def get_status(
    group_id: str | None = Query(None),
    service: StatusService = Depends(get_status_service),
):
    """Current state of the selected group plus the all-groups total."""
    context = await service.build_status(parse_group_id(group_id), utc_now())
    return StatusResponse.model_validate(context)


@router.get("/stats", response_model=StatsResponse)
async def get_stats(
    group_id: str | None = Query(None),
    service: StatusService = Depends(get_status_service),
):
    """Daily breakdown for the selected group and totals for every group."""
    context = await service.build_stats(parse_group_id(group_id), utc_now())
    return StatsResponse.model_validate(context)
