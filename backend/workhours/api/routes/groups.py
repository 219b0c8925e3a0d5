"""Working Group Routes: management view, create, rename, delete and reset.

Invariants:
    - Names are validated by the registry (400 INVALID_GROUP_NAME, 409 DUPLICATE_GROUP_NAME)
    - Delete answers 400 LAST_GROUP / GROUP_HAS_ROUNDS instead of cascading
    - Reset deletes the group's rounds only and answers with its fresh status
"""

from fastapi import APIRouter, Depends, Response, status

from workhours.api.dependencies import (
    get_lifecycle, get_registry, get_status_service,
)
from workhours.core.domain_types import GroupId
from workhours.infrastructure.clock import utc_now
from workhours.schemas.group import (
    GroupListResponse, GroupNameBody, GroupOverviewResponse, GroupResponse,
)
from workhours.schemas.status import StatusResponse
from workhours.services.group_registry import GroupRegistry
from workhours.services.round_lifecycle import RoundLifecycle
from workhours.services.status_view import StatusService

router = APIRouter(prefix="/api/v1/groups", tags=["groups"])


@router.get("", response_model=GroupListResponse)
async def list_groups(service: StatusService = Depends(get_status_service)):
    """Groups ordered by name, with totals and whether they own rounds."""
    overview = await service.build_group_overview(utc_now())
    return GroupListResponse(
        groups=[GroupOverviewResponse.model_validate(g) for g in overview],
    )


@router.post(
    "", response_model=GroupResponse, status_code=status.HTTP_201_CREATED,
)
async def create_group(
    body: GroupNameBody, registry: GroupRegistry = Depends(get_registry),
):
    group = await registry.create_group(body.name)
    return GroupResponse.model_validate(group)


@router.put("/{group_id}", response_model=GroupResponse)
async def rename_group(
    group_id: int,
    body: GroupNameBody,
    registry: GroupRegistry = Depends(get_registry),
):
    group = await registry.rename_group(GroupId(group_id), body.name)
    return GroupResponse.model_validate(group)


@router.delete("/{group_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_group(
    group_id: int, registry: GroupRegistry = Depends(get_registry),
):
    await registry.delete_group(GroupId(group_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{group_id}/reset", response_model=StatusResponse)
async def reset_group(
    group_id: int,
    lifecycle: RoundLifecycle = Depends(get_lifecycle),
    service: StatusService = Depends(get_status_service),
):
    """Delete every round of the group (open or completed)."""
    await lifecycle.reset(GroupId(group_id))
    context = await service.build_status(GroupId(group_id), utc_now())
    return StatusResponse.model_validate(context)
