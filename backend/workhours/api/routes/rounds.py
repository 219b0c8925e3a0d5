"""Round Routes: start and stop a group's round, answering with the fresh status.

Invariants:
    - start on a running group -> 409 ROUND_ALREADY_RUNNING, nothing created
    - stop on an idle group -> 409 ROUND_NOT_RUNNING, nothing changed
    - unknown group -> 404
"""

from fastapi import APIRouter, Depends

from workhours.api.dependencies import get_lifecycle, get_status_service
from workhours.core.domain_types import GroupId
from workhours.infrastructure.clock import utc_now
from workhours.schemas.round import RoundAction
from workhours.schemas.status import StatusResponse
from workhours.services.round_lifecycle import RoundLifecycle
from workhours.services.status_view import StatusService

router = APIRouter(prefix="/api/v1/rounds", tags=["rounds"])


@router.post("/start", response_model=StatusResponse)
async def start_round(
    body: RoundAction,
    lifecycle: RoundLifecycle = Depends(get_lifecycle),
    service: StatusService = Depends(get_status_service),
):
    group_id = GroupId(body.group_id)
    await lifecycle.start(group_id)
    context = await service.build_status(group_id, utc_now())
    return StatusResponse.model_validate(context)


@router.post("/stop", response_model=StatusResponse)
async def stop_round(
    body: RoundAction,
    lifecycle: RoundLifecycle = Depends(get_lifecycle),
    service: StatusService = Depends(get_status_service),
):
    group_id = GroupId(body.group_id)
    await lifecycle.stop(group_id)
    context = await service.build_status(group_id, utc_now())
    return StatusResponse.model_validate(context)
