"""Domain Types: identity aliases, round state and the snapshots handed to callers.

Invariants:
    - GroupId and RoundId wrap ints; never pass bare ints through domain logic
    - RoundSnapshot / GroupSnapshot are frozen: callers cannot mutate persisted state
    - end_time is None for an open round; there is no sentinel date

Design Decisions:
    - NewType over wrapper classes: zero runtime cost, full type-checker support
    - RoundState is derived from data (is there an open round?), never persisted
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

GroupId = NewType("GroupId", int)
RoundId = NewType("RoundId", int)


DEFAULT_GROUP_NAME = "General"


# ─── Enums ───────────────────────────────────────────────────────

class RoundState(str, Enum):
    """Per-group lifecycle state, recomputed from the store on every call."""
    IDLE = "idle"
    ACTIVE = "active"


class RoundStatus(str, Enum):
    """Display status of a single round (CSV export, API payloads)."""
    COMPLETED = "Completed"
    IN_PROGRESS = "In Progress"


# ─── Snapshots ───────────────────────────────────────────────────

@dataclass(frozen=True)
class RoundSnapshot:
    """Immutable copy of a persisted round."""
    id: RoundId
    working_group_id: GroupId | None
    start_time: datetime
    end_time: datetime | None = None

    @property
    def is_open(self) -> bool:
        return self.end_time is None

    @property
    def status(self) -> RoundStatus:
        return RoundStatus.IN_PROGRESS if self.is_open else RoundStatus.COMPLETED


@dataclass(frozen=True)
class GroupSnapshot:
    """Immutable copy of a persisted working group."""
    id: GroupId
    name: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
