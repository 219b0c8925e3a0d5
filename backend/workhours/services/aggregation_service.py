"""Aggregation Service: loads round snapshots and hands them to core.aggregation.

Invariants:
    - Read-only: never mutates the store
    - `now` is always supplied by the caller; `tz` fixed at construction
"""

from datetime import datetime, tzinfo

from workhours.core.aggregation import (
    DailySummary, GroupTotal, GroupTotals, compute_group_totals,
    compute_total_seconds, summarize_by_day, summarize_group_totals,
)
from workhours.core.domain_types import GroupId
from workhours.services.round_store import RoundStore


class AggregationService:
    """Per-group and cross-group duration reports."""

    def __init__(self, store: RoundStore, tz: tzinfo):
        self.store = store
        self.tz = tz

    async def totals_for_group(
        self, group_id: GroupId, now: datetime,
    ) -> GroupTotals:
        rounds = await self.store.list_rounds(group_id)
        return compute_group_totals(rounds, now, self.tz)

    async def all_groups_total_seconds(self, now: datetime) -> int:
        rounds = await self.store.list_rounds(None)
        return compute_total_seconds(rounds, now)

    async def daily_summaries(self, group_id: GroupId) -> list[DailySummary]:
        """Completed rounds of one group, bucketed by local start date (newest first)."""
        group = await self.store.get_group(group_id)
        group_name = group.name if group else f"Group #{group_id}"
        rounds = await self.store.list_completed_rounds(group_id)
        return summarize_by_day(rounds, self.tz, group_id, group_name)

    async def group_totals_summary(self, now: datetime) -> list[GroupTotal]:
        groups = await self.store.list_groups()
        rounds = await self.store.list_rounds(None)
        return summarize_group_totals(groups, rounds, now)
