"""CSV Export: every round (or one group's rounds) as a downloadable CSV document.

Invariants:
    - Columns: Round ID, Working Group, Start Time, End Time, Duration (minutes), Status
    - Rows ordered by start time ascending
    - Open rounds are measured up to `now`, have an empty End Time and status "In Progress"
    - Timestamps are "YYYY-MM-DD HH:MM:SS" in the local timezone; minutes use two decimals
"""

import csv
import io
import re
from dataclasses import dataclass
from datetime import datetime, tzinfo

from workhours.core.domain_types import GroupId, RoundSnapshot
from workhours.core.errors import GroupNotFoundError
from workhours.core.format_duration import EXPORT_STAMP_FORMAT, format_timestamp
from workhours.services.round_store import RoundStore

CSV_HEADER = [
    "Round ID", "Working Group", "Start Time", "End Time",
    "Duration (minutes)", "Status",
]
ALL_GROUPS_LABEL = "all-groups"
_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


@dataclass(frozen=True)
class CsvExport:
    filename: str
    content: str


def _csv_row(
    round_: RoundSnapshot, group_name: str, now: datetime, tz: tzinfo,
) -> list[str]:
    end = round_.end_time if round_.end_time is not None else now
    minutes = (end - round_.start_time).total_seconds() / 60
    return [
        str(round_.id),
        group_name,
        format_timestamp(round_.start_time, tz),
        format_timestamp(round_.end_time, tz) if round_.end_time else "",
        f"{minutes:.2f}",
        round_.status.value,
    ]


async def export_rounds_csv(
    store: RoundStore,
    tz: tzinfo,
    group_id: GroupId | None,
    now: datetime,
) -> CsvExport:
    """Build the CSV document. GroupNotFoundError when group_id is unknown."""
    label = ALL_GROUPS_LABEL
    if group_id is not None:
        group = await store.get_group(group_id)
        if group is None:
            raise GroupNotFoundError(group_id)
        label = group.name or f"Group-{group_id}"

    names = {g.id: g.name for g in await store.list_groups()}
    rounds = await store.list_rounds(group_id)

    buf = io.StringIO()
    writer = csv.writer(buf)
    writer.writerow(CSV_HEADER)
    for round_ in rounds:
        group_name = names.get(
            round_.working_group_id, f"Group #{round_.working_group_id}",
        )
        writer.writerow(_csv_row(round_, group_name, now, tz))

    stamp = now.astimezone(tz).strftime(EXPORT_STAMP_FORMAT)
    safe_label = _UNSAFE_FILENAME_CHARS.sub("_", label)
    return CsvExport(
        filename=f"workinghours-{safe_label}-{stamp}.csv",
        content=buf.getvalue(),
    )
