"""CSV Export Route: downloads rounds of one group, or of all groups.

Invariants:
    - group_id, when given, must be a positive int (400) naming an existing group (404)
    - Response is text/csv with an attachment Content-Disposition
"""

from datetime import tzinfo

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from workhours.api.dependencies import get_local_timezone, get_round_store
from workhours.core.domain_types import GroupId
from workhours.infrastructure.clock import utc_now
from workhours.services.export_csv import export_rounds_csv
from workhours.services.round_store import RoundStore

router = APIRouter(prefix="/api/v1/export", tags=["export"])


@router.get("/csv")
async def export_csv(
    group_id: int | None = Query(None, ge=1),
    store: RoundStore = Depends(get_round_store),
    tz: tzinfo = Depends(get_local_timezone),
):
    export = await export_rounds_csv(
        store, tz, GroupId(group_id) if group_id is not None else None,
        utc_now(),
    )
    return Response(
        content=export.content,
        media_type="text/csv",
        headers={
            "Content-Disposition": f'attachment; filename="{export.filename}"',
        },
    )
