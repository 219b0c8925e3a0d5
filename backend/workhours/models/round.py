"""Round ORM: one recorded work session with a start and an optional end.

Invariants:
    - start_time is required; end_time NULL means the round is in progress
    - end_time is set exactly once (by stop) and never changed afterwards
    - At most one open round per working group, enforced by the partial unique
      index uq_rounds_one_open_per_group (PostgreSQL and SQLite both support it)
    - working_group_id is NULL only for legacy single-group rows awaiting backfill

Design Decisions:
    - The partial index turns the concurrent double-start race into an
      IntegrityError that the store reports as RoundAlreadyRunningError
"""

from datetime import datetime, timezone

from sqlalchemy import ForeignKey, Index, Integer, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from workhours.db.base import Base
from workhours.db.types import UTCDateTime


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Round(Base):
    """Round entity: a start/stop pair owned by a working group."""
    __tablename__ = "rounds"
    __table_args__ = (
        Index(
            "uq_rounds_one_open_per_group",
            "working_group_id",
            unique=True,
            postgresql_where=text("end_time IS NULL"),
            sqlite_where=text("end_time IS NULL"),
        ),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    start_time: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    end_time: Mapped[datetime | None] = mapped_column(
        UTCDateTime, nullable=True, index=True,
    )
    working_group_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("working_groups.id"), nullable=True, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime, nullable=False, default=_utc_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime, nullable=False, default=_utc_now, onupdate=_utc_now,
    )

    working_group: Mapped["WorkingGroup"] = relationship(
        "WorkingGroup", back_populates="rounds",
    )
