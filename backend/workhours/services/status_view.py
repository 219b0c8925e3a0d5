"""Status View Model: composes lifecycle state and totals into what the UI renders.

Invariants:
    - The selected group falls back to the first group by name when the
      requested id is missing or unknown (bootstrapping "General" if needed)
    - last_start_str / last_stop_str are "Never" when there is no round and
      last_stop_str is "In progress..." while a round is open
    - All strings are formatted in the service's local timezone
"""

from dataclasses import dataclass
from datetime import datetime, tzinfo

from workhours.core.aggregation import DailySummary, GroupTotal
from workhours.core.domain_types import GroupId, GroupSnapshot, RoundId
from workhours.core.format_duration import format_duration, format_timestamp
from workhours.services.aggregation_service import AggregationService
from workhours.services.group_registry import GroupRegistry
from workhours.services.round_store import RoundStore

NEVER = "Never"
IN_PROGRESS = "In progress..."


@dataclass(frozen=True)
class GroupOption:
    id: GroupId
    name: str
    selected: bool


@dataclass(frozen=True)
class AppState:
    """Current state of one working group."""
    group_id: GroupId
    group_name: str
    is_running: bool = False
    last_start_time: datetime | None = None
    last_stop_time: datetime | None = None
    last_start_str: str = NEVER
    last_stop_str: str = NEVER
    current_round_id: RoundId | None = None
    total_today_seconds: int = 0
    total_today_formatted: str = "00:00:00"
    total_overall_seconds: int = 0
    total_overall_formatted: str = "00:00:00"


@dataclass(frozen=True)
class StatusContext:
    group_options: list[GroupOption]
    selected_group_id: GroupId
    state: AppState
    all_groups_total_seconds: int
    all_groups_total_formatted: str


@dataclass(frozen=True)
class StatsContext:
    group_options: list[GroupOption]
    selected_group_id: GroupId
    selected_group_name: str
    daily_summaries: list[DailySummary]
    group_totals: list[GroupTotal]
    selected_group_today_formatted: str
    selected_group_total_formatted: str
    all_groups_total_formatted: str


@dataclass(frozen=True)
class GroupOverview:
    """One row of the group management view."""
    id: GroupId
    name: str
    total_seconds: int
    total_formatted: str
    round_count: int

    @property
    def has_rounds(self) -> bool:
        return self.round_count > 0


class StatusService:
    """Builds status, stats and group-management view models."""

    def __init__(self, store: RoundStore, tz: tzinfo):
        self.store = store
        self.tz = tz
        self.registry = GroupRegistry(store)
        self.aggregation = AggregationService(store, tz)

    async def _select(
        self, requested_id: GroupId | None,
    ) -> tuple[GroupSnapshot, list[GroupOption]]:
        selected = await self.registry.resolve_group(requested_id)
        groups = await self.registry.list_groups() or [selected]
        options = [
            GroupOption(id=g.id, name=g.name, selected=g.id == selected.id)
            for g in groups
        ]
        return selected, options

    async def current_state(self, group: GroupSnapshot, now: datetime) -> AppState:
        totals = await self.aggregation.totals_for_group(group.id, now)
        common = {
            "group_id": group.id,
            "group_name": group.name,
            "total_today_seconds": totals.today_seconds,
            "total_today_formatted": format_duration(totals.today_seconds),
            "total_overall_seconds": totals.overall_seconds,
            "total_overall_formatted": format_duration(totals.overall_seconds),
        }

        open_round = await self.store.find_open_round(group.id)
        if open_round is not None:
            return AppState(
                **common,
                is_running=True,
                current_round_id=open_round.id,
                last_start_time=open_round.start_time,
                last_start_str=format_timestamp(open_round.start_time, self.tz),
                last_stop_str=IN_PROGRESS,
            )

        last = await self.store.find_last_completed_round(group.id)
        if last is None:
            return AppState(**common)
        return AppState(
            **common,
            last_start_time=last.start_time,
            last_stop_time=last.end_time,
            last_start_str=format_timestamp(last.start_time, self.tz),
            last_stop_str=format_timestamp(last.end_time, self.tz),
        )

    async def build_status(
        self, requested_id: GroupId | None, now: datetime,
    ) -> StatusContext:
        selected, options = await self._select(requested_id)
        state = await self.current_state(selected, now)
        all_total = await self.aggregation.all_groups_total_seconds(now)
        return StatusContext(
            group_options=options,
            selected_group_id=selected.id,
            state=state,
            all_groups_total_seconds=all_total,
            all_groups_total_formatted=format_duration(all_total),
        )

    async def build_stats(
        self, requested_id: GroupId | None, now: datetime,
    ) -> StatsContext:
        selected, options = await self._select(requested_id)
        totals = await self.aggregation.totals_for_group(selected.id, now)
        all_total = await self.aggregation.all_groups_total_seconds(now)
        return StatsContext(
            group_options=options,
            selected_group_id=selected.id,
            selected_group_name=selected.name,
            daily_summaries=await self.aggregation.daily_summaries(selected.id),
            group_totals=await self.aggregation.group_totals_summary(now),
            selected_group_today_formatted=format_duration(totals.today_seconds),
            selected_group_total_formatted=format_duration(totals.overall_seconds),
            all_groups_total_formatted=format_duration(all_total),
        )

    async def build_group_overview(self, now: datetime) -> list[GroupOverview]:
        """Groups by name with overall totals and round counts."""
        if not await self.registry.list_groups():
            await self.registry.ensure_default_group()
        totals = await self.aggregation.group_totals_summary(now)
        counts = await self.store.count_rounds_by_group()
        return [
            GroupOverview(
                id=t.group_id,
                name=t.group_name,
                total_seconds=t.total_seconds,
                total_formatted=t.total_formatted,
                round_count=counts.get(t.group_id, 0),
            )
            for t in totals
        ]
