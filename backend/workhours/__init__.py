"""Work Hours: start/stop tracking of work rounds per working group.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "1.0.0"
