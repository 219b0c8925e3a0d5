"""Round Store: persistence for working groups and rounds behind snapshot results.

Invariants:
    - Every mutation commits before returning (durable on success)
    - Callers only ever receive frozen snapshots, never live ORM instances
    - "No row" lookups return None; every other SQLAlchemy failure is a StorageError
    - A violation of the one-open-round index surfaces as RoundAlreadyRunningError
    - Deleting a group never touches its rounds (the registry guards emptiness)

Design Decisions:
    - Constructed with an AsyncSession (one per request); no module-level handle
    - Group and round persistence share one store: both live in the same
      transaction scope and the registry needs round counts for its guards
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncIterator

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from workhours.core.domain_types import (
    GroupId, GroupSnapshot, RoundId, RoundSnapshot,
)
from workhours.core.errors import (
    DuplicateGroupNameError, GroupNotFoundError, RoundAlreadyRunningError,
    RoundNotFoundError, RoundNotRunningError,
)
from workhours.infrastructure.database import map_storage_error
from workhours.models.round import Round
from workhours.models.working_group import WorkingGroup

logger = logging.getLogger(__name__)


def _round_snapshot(row: Round) -> RoundSnapshot:
    return RoundSnapshot(
        id=RoundId(row.id),
        working_group_id=(
            GroupId(row.working_group_id)
            if row.working_group_id is not None else None
        ),
        start_time=row.start_time,
        end_time=row.end_time,
    )


def _group_snapshot(row: WorkingGroup) -> GroupSnapshot:
    return GroupSnapshot(
        id=GroupId(row.id),
        name=row.name,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class RoundStore:
    """Lookup/insert/update/delete over WorkingGroup and Round."""

    def __init__(self, db: AsyncSession):
        self.db = db

    @asynccontextmanager
    async def _storage(self, operation: str) -> AsyncIterator[None]:
        """Roll back and re-raise SQLAlchemy failures as StorageError."""
        try:
            yield
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise map_storage_error(e, operation) from e

    # ─── Rounds: queries ─────────────────────────────────────────

    async def find_open_round(self, group_id: GroupId) -> RoundSnapshot | None:
        """The group's round without an end time (latest start if several)."""
        async with self._storage("find_open_round"):
            result = await self.db.execute(
                select(Round)
                .where(Round.working_group_id == group_id)
                .where(Round.end_time.is_(None))
                .order_by(Round.start_time.desc(), Round.id.desc())
                .limit(1)
            )
            row = result.scalar_one_or_none()
        return _round_snapshot(row) if row else None

    async def find_last_completed_round(
        self, group_id: GroupId,
    ) -> RoundSnapshot | None:
        async with self._storage("find_last_completed_round"):
            result = await self.db.execute(
                select(Round)
                .where(Round.working_group_id == group_id)
                .where(Round.end_time.is_not(None))
                .order_by(Round.end_time.desc(), Round.id.desc())
                .limit(1)
            )
            row = result.scalar_one_or_none()
        return _round_snapshot(row) if row else None

    async def list_rounds(
        self, group_id: GroupId | None = None,
    ) -> list[RoundSnapshot]:
        """Rounds ordered by start time ascending; every group when group_id is None."""
        query = select(Round).order_by(Round.start_time.asc(), Round.id.asc())
        if group_id is not None:
            query = query.where(Round.working_group_id == group_id)
        async with self._storage("list_rounds"):
            result = await self.db.execute(query)
            rows = result.scalars().all()
        return [_round_snapshot(r) for r in rows]

    async def list_completed_rounds(
        self, group_id: GroupId,
    ) -> list[RoundSnapshot]:
        async with self._storage("list_completed_rounds"):
            result = await self.db.execute(
                select(Round)
                .where(Round.working_group_id == group_id)
                .where(Round.end_time.is_not(None))
                .order_by(Round.start_time.desc(), Round.id.desc())
            )
            rows = result.scalars().all()
        return [_round_snapshot(r) for r in rows]

    async def count_rounds_for_group(self, group_id: GroupId) -> int:
        async with self._storage("count_rounds_for_group"):
            result = await self.db.execute(
                select(func.count(Round.id))
                .where(Round.working_group_id == group_id)
            )
            return int(result.scalar_one())

    async def count_rounds_by_group(self) -> dict[GroupId, int]:
        """Round counts keyed by group id (groups without rounds are absent)."""
        async with self._storage("count_rounds_by_group"):
            result = await self.db.execute(
                select(Round.working_group_id, func.count(Round.id))
                .where(Round.working_group_id.is_not(None))
                .group_by(Round.working_group_id)
            )
            rows = result.all()
        return {GroupId(group_id): int(count) for group_id, count in rows}

    # ─── Rounds: mutations ───────────────────────────────────────

    async def create_round(
        self, group_id: GroupId, start_time: datetime,
    ) -> RoundSnapshot:
        """Insert an open round. RoundAlreadyRunningError if one is already open."""
        row = Round(working_group_id=group_id, start_time=start_time)
        self.db.add(row)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            if await self.find_open_round(group_id) is not None:
                logger.warning(
                    "Concurrent start rejected by open-round index",
                    extra={"group_id": group_id},
                )
                raise RoundAlreadyRunningError(group_id) from e
            raise map_storage_error(e, "create_round") from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise map_storage_error(e, "create_round") from e
        async with self._storage("create_round"):
            await self.db.refresh(row)
        return _round_snapshot(row)

    async def close_round(
        self, round_id: RoundId, end_time: datetime,
    ) -> RoundSnapshot:
        """Set the end time of an open round. Closed rounds are immutable."""
        async with self._storage("close_round"):
            row = await self.db.get(Round, round_id)
            if row is None:
                raise RoundNotFoundError(round_id)
            if row.end_time is not None:
                raise RoundNotRunningError(row.working_group_id)
            row.end_time = end_time
            await self.db.commit()
            await self.db.refresh(row)
        return _round_snapshot(row)

    async def delete_rounds_for_group(self, group_id: GroupId) -> int:
        """Delete every round (open or completed) of one group. Returns the count."""
        async with self._storage("delete_rounds_for_group"):
            result = await self.db.execute(
                delete(Round).where(Round.working_group_id == group_id)
            )
            await self.db.commit()
        return result.rowcount or 0

    async def attach_orphan_rounds(self, group_id: GroupId) -> int:
        """Assign rounds that have no working group to `group_id`."""
        async with self._storage("attach_orphan_rounds"):
            result = await self.db.execute(
                update(Round)
                .where(Round.working_group_id.is_(None))
                .values(working_group_id=group_id)
            )
            await self.db.commit()
        return result.rowcount or 0

    # ─── Working groups ──────────────────────────────────────────

    async def get_group(self, group_id: GroupId) -> GroupSnapshot | None:
        async with self._storage("get_group"):
            row = await self.db.get(WorkingGroup, group_id)
        return _group_snapshot(row) if row else None

    async def get_group_by_name(self, name: str) -> GroupSnapshot | None:
        async with self._storage("get_group_by_name"):
            result = await self.db.execute(
                select(WorkingGroup).where(WorkingGroup.name == name)
            )
            row = result.scalar_one_or_none()
        return _group_snapshot(row) if row else None

    async def list_groups(self) -> list[GroupSnapshot]:
        """All groups ordered by name ascending."""
        async with self._storage("list_groups"):
            result = await self.db.execute(
                select(WorkingGroup).order_by(
                    WorkingGroup.name.asc(), WorkingGroup.id.asc(),
                )
            )
            rows = result.scalars().all()
        return [_group_snapshot(g) for g in rows]

    async def first_group_by_id(self) -> GroupSnapshot | None:
        """The oldest group (lowest id), which acts as the default group."""
        async with self._storage("first_group_by_id"):
            result = await self.db.execute(
                select(WorkingGroup).order_by(WorkingGroup.id.asc()).limit(1)
            )
            row = result.scalar_one_or_none()
        return _group_snapshot(row) if row else None

    async def count_groups(self) -> int:
        async with self._storage("count_groups"):
            result = await self.db.execute(select(func.count(WorkingGroup.id)))
            return int(result.scalar_one())

    async def create_group(self, name: str) -> GroupSnapshot:
        row = WorkingGroup(name=name)
        self.db.add(row)
        await self._commit_group_name(name, "create_group")
        async with self._storage("create_group"):
            await self.db.refresh(row)
        return _group_snapshot(row)

    async def rename_group(self, group_id: GroupId, name: str) -> GroupSnapshot:
        async with self._storage("rename_group"):
            row = await self.db.get(WorkingGroup, group_id)
        if row is None:
            raise GroupNotFoundError(group_id)
        row.name = name
        await self._commit_group_name(name, "rename_group")
        async with self._storage("rename_group"):
            await self.db.refresh(row)
        return _group_snapshot(row)

    async def delete_group(self, group_id: GroupId) -> None:
        async with self._storage("delete_group"):
            result = await self.db.execute(
                delete(WorkingGroup).where(WorkingGroup.id == group_id)
            )
            await self.db.commit()
        if not result.rowcount:
            raise GroupNotFoundError(group_id)

    async def _commit_group_name(self, name: str, operation: str) -> None:
        """Commit a pending name change; the unique constraint means DuplicateGroupNameError."""
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            raise DuplicateGroupNameError(name) from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise map_storage_error(e, operation) from e
