"""Round Lifecycle: the per-group Idle/Active state machine (start, stop, reset).

Invariants:
    - State is derived on every call from "does an open round exist"; no stored flag
    - start on Active raises RoundAlreadyRunningError and creates nothing
    - stop on Idle raises RoundNotRunningError and mutates nothing
    - reset deletes every round of one group and leaves other groups untouched
    - Unknown group ids raise GroupNotFoundError before any state check

Design Decisions:
    - Clock injected as a callable so tests pin "now"
"""

import logging
from collections.abc import Callable
from datetime import datetime

from workhours.core.aggregation import elapsed_seconds
from workhours.core.domain_types import (
    GroupId, GroupSnapshot, RoundSnapshot, RoundState,
)
from workhours.core.errors import (
    GroupNotFoundError, RoundAlreadyRunningError, RoundNotRunningError,
)
from workhours.core.format_duration import TIMESTAMP_FORMAT, format_duration
from workhours.infrastructure.clock import utc_now
from workhours.services.round_store import RoundStore

logger = logging.getLogger(__name__)


class RoundLifecycle:
    """Start/stop/reset transitions for a working group's rounds."""

    def __init__(
        self, store: RoundStore, clock: Callable[[], datetime] = utc_now,
    ):
        self.store = store
        self.clock = clock

    async def _require_group(self, group_id: GroupId) -> GroupSnapshot:
        group = await self.store.get_group(group_id)
        if group is None:
            raise GroupNotFoundError(group_id)
        return group

    async def state(self, group_id: GroupId) -> RoundState:
        open_round = await self.store.find_open_round(group_id)
        return RoundState.IDLE if open_round is None else RoundState.ACTIVE

    async def is_running(self, group_id: GroupId) -> bool:
        return await self.state(group_id) is RoundState.ACTIVE

    async def start(self, group_id: GroupId) -> RoundSnapshot:
        """Idle -> Active: open a new round starting now."""
        group = await self._require_group(group_id)
        if await self.store.find_open_round(group_id) is not None:
            raise RoundAlreadyRunningError(group_id)

        round_ = await self.store.create_round(group_id, self.clock())
        logger.info(
            f"Started new round #{round_.id} for group '{group.name}' "
            f"at {round_.start_time.strftime(TIMESTAMP_FORMAT)}",
            extra={"group_id": group_id, "round_id": round_.id},
        )
        return round_

    async def stop(self, group_id: GroupId) -> RoundSnapshot:
        """Active -> Idle: set the open round's end time to now."""
        group = await self._require_group(group_id)
        open_round = await self.store.find_open_round(group_id)
        if open_round is None:
            raise RoundNotRunningError(group_id)

        round_ = await self.store.close_round(open_round.id, self.clock())
        duration = elapsed_seconds(round_, round_.end_time)
        logger.info(
            f"Stopped round #{round_.id} for group '{group.name}' "
            f"at {round_.end_time.strftime(TIMESTAMP_FORMAT)} "
            f"(duration: {format_duration(duration)})",
            extra={
                "group_id": group_id, "round_id": round_.id,
                "duration_seconds": duration,
            },
        )
        return round_

    async def reset(self, group_id: GroupId) -> int:
        """Any state -> Idle with zero history. Returns the number of rounds deleted."""
        group = await self._require_group(group_id)
        deleted = await self.store.delete_rounds_for_group(group_id)
        logger.info(
            f"Reset all rounds for working group '{group.name}' ({deleted} deleted)",
            extra={"group_id": group_id},
        )
        return deleted
