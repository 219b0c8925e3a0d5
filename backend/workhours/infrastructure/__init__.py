"""Infrastructure Layer: database sessions, logging setup and the wall clock.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All SQLAlchemy failures leave this layer as core.errors.StorageError
"""
