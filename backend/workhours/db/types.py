"""UTC DateTime Column Type: stores UTC, always returns timezone-aware UTC.

Invariants:
    - Values are converted to UTC before binding
    - Naive values read back (SQLite drops tzinfo) are tagged as UTC
    - Naive values written are assumed to already be UTC
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.types import TypeDecorator


class UTCDateTime(TypeDecorator):
    """DateTime(timezone=True) that normalizes to aware UTC on both sides."""

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect):
        if value is None:
            return None
        return _as_utc(value)

    def process_result_value(self, value: datetime | None, dialect):
        if value is None:
            return None
        return _as_utc(value)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
