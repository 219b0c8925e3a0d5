"""ORM Models: SQLAlchemy declarative models for working groups and rounds.

Invariants:
    - All models inherit from Base (db/base.py)
    - Rounds reference their working group; deleting a group never cascades

Design Decisions:
    - One file per entity
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from workhours.models.working_group import WorkingGroup  # noqa: F401
from workhours.models.round import Round  # noqa: F401
