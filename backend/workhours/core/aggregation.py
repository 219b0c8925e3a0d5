"""Round Aggregation: pure time math over round snapshots. No IO, no async.

Invariants:
    - Elapsed time is measured up to min(end, now); open rounds run until `now`
    - Each round's duration is truncated to whole seconds before summing
    - Negative durations (clock skew) are summed as-is; only formatting clamps
    - "Today" is bucketed by START time only; a round crossing midnight is not split
    - Daily summaries use completed rounds only and are sorted by date descending

Design Decisions:
    - Grouping uses a dict keyed by local date, followed by an explicit sort:
      output order never depends on dict insertion order of the query result
    - `tz` is passed in, not read from settings: the shell decides what "local" is
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, timedelta, tzinfo

from workhours.core.domain_types import GroupId, GroupSnapshot, RoundSnapshot
from workhours.core.format_duration import (
    DATE_KEY_FORMAT, format_date_display, format_duration,
)


@dataclass(frozen=True)
class GroupTotals:
    today_seconds: int
    overall_seconds: int


@dataclass(frozen=True)
class DailySummary:
    """Completed work for one group on one local calendar date."""
    group_id: GroupId
    group_name: str
    date: str
    date_display: str
    total_seconds: int
    total_formatted: str
    round_count: int


@dataclass(frozen=True)
class GroupTotal:
    group_id: GroupId
    group_name: str
    total_seconds: int
    total_formatted: str


def elapsed_seconds(round_: RoundSnapshot, now: datetime) -> int:
    """Whole seconds between start and min(end, now); open rounds run until `now`."""
    end = now if round_.end_time is None else min(round_.end_time, now)
    return int((end - round_.start_time).total_seconds())


def local_day_bounds(now: datetime, tz: tzinfo) -> tuple[datetime, datetime]:
    """[local midnight, next local midnight) containing `now`."""
    midnight = now.astimezone(tz).replace(
        hour=0, minute=0, second=0, microsecond=0,
    )
    return midnight, midnight + timedelta(days=1)


def local_date(value: datetime, tz: tzinfo) -> date:
    return value.astimezone(tz).date()


def compute_group_totals(
    rounds: Iterable[RoundSnapshot], now: datetime, tz: tzinfo,
) -> GroupTotals:
    """Today/overall seconds for one group's rounds."""
    day_start, day_end = local_day_bounds(now, tz)
    today = 0
    overall = 0
    for round_ in rounds:
        seconds = elapsed_seconds(round_, now)
        overall += seconds
        if day_start <= round_.start_time < day_end:
            today += seconds
    return GroupTotals(today_seconds=today, overall_seconds=overall)


def compute_total_seconds(rounds: Iterable[RoundSnapshot], now: datetime) -> int:
    return sum(elapsed_seconds(r, now) for r in rounds)


def summarize_by_day(
    rounds: Iterable[RoundSnapshot],
    tz: tzinfo,
    group_id: GroupId,
    group_name: str,
) -> list[DailySummary]:
    """Group completed rounds by local start date, most recent date first."""
    buckets: dict[date, list[int]] = {}
    for round_ in rounds:
        if round_.end_time is None:
            continue
        day = local_date(round_.start_time, tz)
        totals = buckets.setdefault(day, [0, 0])
        totals[0] += elapsed_seconds(round_, round_.end_time)
        totals[1] += 1

    return [
        DailySummary(
            group_id=group_id,
            group_name=group_name,
            date=day.strftime(DATE_KEY_FORMAT),
            date_display=format_date_display(day),
            total_seconds=seconds,
            total_formatted=format_duration(seconds),
            round_count=count,
        )
        for day, (seconds, count) in sorted(
            buckets.items(), key=lambda item: item[0], reverse=True,
        )
    ]


def summarize_group_totals(
    groups: Iterable[GroupSnapshot],
    rounds: Iterable[RoundSnapshot],
    now: datetime,
) -> list[GroupTotal]:
    """Overall seconds per group, ordered by group name ascending."""
    per_group: dict[int | None, int] = {}
    for round_ in rounds:
        key = round_.working_group_id
        per_group[key] = per_group.get(key, 0) + elapsed_seconds(round_, now)

    return [
        GroupTotal(
            group_id=group.id,
            group_name=group.name,
            total_seconds=per_group.get(group.id, 0),
            total_formatted=format_duration(per_group.get(group.id, 0)),
        )
        for group in sorted(groups, key=lambda g: g.name)
    ]
