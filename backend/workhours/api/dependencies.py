"""Request Dependencies: per-request store and services wired from the DB session.

Invariants:
    - One RoundStore per request, bound to the request's AsyncSession
    - The local timezone comes from settings; unset means host local time
"""

from datetime import tzinfo

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from workhours.config import get_settings
from workhours.core.domain_types import GroupId
from workhours.infrastructure.clock import resolve_timezone
from workhours.infrastructure.database import get_db
from workhours.services.group_registry import GroupRegistry
from workhours.services.round_lifecycle import RoundLifecycle
from workhours.services.round_store import RoundStore
from workhours.services.status_view import StatusService


def parse_group_id(value: str | None) -> GroupId | None:
    """Lenient group_id query parsing: absent or malformed means "no preference"."""
    if value is None or not value.strip().isdecimal():
        return None
    parsed = int(value.strip())
    return GroupId(parsed) if parsed > 0 else None


def get_local_timezone() -> tzinfo:
    return resolve_timezone(get_settings().local_timezone)


async def get_round_store(db: AsyncSession = Depends(get_db)) -> RoundStore:
    return RoundStore(db)


async def get_lifecycle(
    store: RoundStore = Depends(get_round_store),
) -> RoundLifecycle:
    return RoundLifecycle(store)


async def get_registry(
    store: RoundStore = Depends(get_round_store),
) -> GroupRegistry:
    return GroupRegistry(store)


async def get_status_service(
    store: RoundStore = Depends(get_round_store),
    tz: tzinfo = Depends(get_local_timezone),
) -> StatusService:
    return StatusService(store, tz)
