"""Database Layer: SQLAlchemy Base and shared column types.

Invariants:
    - All ORM models inherit from db.base.Base
    - Timestamps use UTCDateTime so every driver returns aware UTC datetimes
"""
