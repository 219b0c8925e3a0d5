"""Duration & Timestamp Formatting: pure helpers shared by the status view and exports.

Invariants:
    - format_duration clamps negative input to zero; summation never clamps
    - Hours are not wrapped at 24 ("25:00:00" is valid)
    - Timestamps are rendered in the caller-supplied local timezone
"""

from datetime import date, datetime, tzinfo

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
DATE_KEY_FORMAT = "%Y-%m-%d"
EXPORT_STAMP_FORMAT = "%Y-%m-%d-%H%M%S"


def format_duration(seconds: int) -> str:
    """Return HH:MM:SS for a duration in whole seconds."""
    seconds = max(0, int(seconds))
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def format_timestamp(value: datetime, tz: tzinfo) -> str:
    return value.astimezone(tz).strftime(TIMESTAMP_FORMAT)


def format_date_display(day: date) -> str:
    """Long form used by the daily breakdown, e.g. 'Monday, January 2, 2006'."""
    return f"{day.strftime('%A, %B')} {day.day}, {day.year}"
