"""CSV Export: header, row formatting, open rounds and filename labels."""

import csv
import io
from datetime import timedelta, timezone

import pytest

from workhours.core.domain_types import GroupId
from workhours.core.errors import GroupNotFoundError
from workhours.services.export_csv import CSV_HEADER, export_rounds_csv
from tests.fake_clock import T0


@pytest.fixture
def utc():
    return timezone.utc


def _rows(content):
    return list(csv.reader(io.StringIO(content)))


async def test_empty_export_has_header_only(store, utc, group_a):
    export = await export_rounds_csv(store, utc, None, T0)
    assert _rows(export.content) == [CSV_HEADER]
    assert export.filename == "workinghours-all-groups-2026-03-10-090000.csv"


async def test_completed_and_open_rounds(store, utc, group_a, group_b):
    done = await store.create_round(group_a.id, T0)
    await store.close_round(done.id, T0 + timedelta(seconds=125))
    running = await store.create_round(group_b.id, T0 + timedelta(minutes=5))

    now = T0 + timedelta(minutes=35)
    rows = _rows((await export_rounds_csv(store, utc, None, now)).content)

    assert rows[1] == [
        str(done.id), "A", "2026-03-10 09:00:00", "2026-03-10 09:02:05",
        "2.08", "Completed",
    ]
    assert rows[2] == [
        str(running.id), "B", "2026-03-10 09:05:00", "", "30.00", "In Progress",
    ]


async def test_rows_ordered_by_start_time(store, utc, group_a, group_b):
    late = await store.create_round(group_a.id, T0 + timedelta(hours=1))
    early = await store.create_round(group_b.id, T0)

    rows = _rows((await export_rounds_csv(store, utc, None, T0 + timedelta(hours=2))).content)

    assert [r[0] for r in rows[1:]] == [str(early.id), str(late.id)]


async def test_group_filter(store, utc, group_a, group_b):
    await store.create_round(group_a.id, T0)
    await store.create_round(group_b.id, T0)

    export = await export_rounds_csv(store, utc, group_b.id, T0)

    rows = _rows(export.content)
    assert [r[1] for r in rows[1:]] == ["B"]
    assert export.filename == "workinghours-B-2026-03-10-090000.csv"


async def test_filename_label_sanitized(store, utc):
    group = await store.create_group("Client X / R&D")
    export = await export_rounds_csv(store, utc, group.id, T0)
    assert export.filename == "workinghours-Client_X_R_D-2026-03-10-090000.csv"


async def test_unknown_group_rejected(store, utc):
    with pytest.raises(GroupNotFoundError):
        await export_rounds_csv(store, utc, GroupId(404), T0)
