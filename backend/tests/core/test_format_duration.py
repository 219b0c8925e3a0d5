"""Duration & timestamp formatting: pure helpers, no IO."""

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from workhours.core.format_duration import (
    format_date_display, format_duration, format_timestamp,
)


def test_negative_duration_clamps_to_zero():
    assert format_duration(-5) == "00:00:00"


def test_hours_minutes_seconds():
    assert format_duration(3661) == "01:01:01"


def test_zero():
    assert format_duration(0) == "00:00:00"


def test_under_a_minute():
    assert format_duration(59) == "00:00:59"


def test_two_minutes_five_seconds():
    assert format_duration(125) == "00:02:05"


def test_hours_not_wrapped_at_24():
    assert format_duration(90_000) == "25:00:00"


def test_timestamp_rendered_in_local_zone():
    value = datetime(2026, 3, 10, 9, 0, 0, tzinfo=timezone.utc)
    assert format_timestamp(value, ZoneInfo("Europe/Berlin")) == "2026-03-10 10:00:00"


def test_timestamp_utc():
    value = datetime(2026, 3, 10, 9, 5, 7, tzinfo=timezone.utc)
    assert format_timestamp(value, timezone.utc) == "2026-03-10 09:05:07"


def test_date_display_long_form():
    assert format_date_display(date(2006, 1, 2)) == "Monday, January 2, 2006"
