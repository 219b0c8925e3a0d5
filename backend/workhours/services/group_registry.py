"""Working Group Registry: CRUD over named groups with bootstrap and delete guards.

Invariants:
    - Names are trimmed; empty names raise InvalidGroupNameError
    - Names are unique; collisions raise DuplicateGroupNameError
    - delete_group checks "last group" before "has rounds": the last group can
      never be deleted, with or without rounds
    - ensure_default_group is idempotent and backfills rounds that have no group
"""

import logging

from workhours.core.domain_types import DEFAULT_GROUP_NAME, GroupId, GroupSnapshot
from workhours.core.errors import (
    DuplicateGroupNameError, GroupHasRoundsError, GroupNotFoundError,
    LastGroupError,
)
from workhours.core.validate_names import normalize_group_name
from workhours.services.round_store import RoundStore

logger = logging.getLogger(__name__)


class GroupRegistry:
    """Working group management on top of the RoundStore."""

    def __init__(self, store: RoundStore):
        self.store = store

    async def list_groups(self) -> list[GroupSnapshot]:
        return await self.store.list_groups()

    async def get_group(self, group_id: GroupId) -> GroupSnapshot:
        group = await self.store.get_group(group_id)
        if group is None:
            raise GroupNotFoundError(group_id)
        return group

    async def ensure_default_group(self) -> GroupSnapshot:
        """Return the default (oldest) group, creating "General" if none exist.

        Rounds recorded before working groups existed have no group; they are
        attached to the default group on every call (a no-op once backfilled).
        """
        group = await self.store.first_group_by_id()
        if group is None:
            group = await self.store.create_group(DEFAULT_GROUP_NAME)
            logger.info(
                f"Created default working group '{group.name}'",
                extra={"group_id": group.id},
            )

        attached = await self.store.attach_orphan_rounds(group.id)
        if attached:
            logger.info(
                f"Backfilled {attached} round(s) into working group '{group.name}'",
                extra={"group_id": group.id},
            )
        return group

    async def resolve_group(self, requested_id: GroupId | None) -> GroupSnapshot:
        """Requested group if it exists, else the first group by name."""
        groups = await self.store.list_groups()
        if not groups:
            return await self.ensure_default_group()
        for group in groups:
            if group.id == requested_id:
                return group
        return groups[0]

    async def create_group(self, name: str) -> GroupSnapshot:
        name = normalize_group_name(name)
        if await self.store.get_group_by_name(name) is not None:
            raise DuplicateGroupNameError(name)
        group = await self.store.create_group(name)
        logger.info(
            f"Created working group '{group.name}'", extra={"group_id": group.id},
        )
        return group

    async def rename_group(self, group_id: GroupId, name: str) -> GroupSnapshot:
        name = normalize_group_name(name)
        await self.get_group(group_id)
        existing = await self.store.get_group_by_name(name)
        if existing is not None and existing.id != group_id:
            raise DuplicateGroupNameError(name)
        group = await self.store.rename_group(group_id, name)
        logger.info(
            f"Renamed working group #{group_id} to '{group.name}'",
            extra={"group_id": group_id},
        )
        return group

    async def delete_group(self, group_id: GroupId) -> None:
        group = await self.get_group(group_id)
        if await self.store.count_groups() <= 1:
            raise LastGroupError(group_id)
        round_count = await self.store.count_rounds_for_group(group_id)
        if round_count > 0:
            raise GroupHasRoundsError(group_id, round_count)
        await self.store.delete_group(group_id)
        logger.info(
            f"Deleted working group '{group.name}'", extra={"group_id": group_id},
        )
