"""WorkingGroup ORM: a named partition of rounds.

Invariants:
    - name is unique and non-null (uniqueness enforced by the database)
    - At least one group exists at runtime (bootstrap + delete guard in the registry)
    - No cascade to rounds: a group with rounds cannot be deleted
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from workhours.db.base import Base
from workhours.db.types import UTCDateTime


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class WorkingGroup(Base):
    """Working group: owns zero or more rounds."""
    __tablename__ = "working_groups"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(
        String(100), unique=True, nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime, nullable=False, default=_utc_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime, nullable=False, default=_utc_now, onupdate=_utc_now,
    )

    rounds: Mapped[list["Round"]] = relationship(
        "Round", back_populates="working_group", passive_deletes="all",
    )
