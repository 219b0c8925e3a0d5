"""Group Name Validation: pure normalization of user-supplied working group names.

Invariants:
    - Returned names are stripped of surrounding whitespace
    - Empty (after strip) or over-long names raise InvalidGroupNameError
"""

from workhours.core.errors import InvalidGroupNameError

MAX_GROUP_NAME_LENGTH: int = 100


def normalize_group_name(raw: str | None) -> str:
    """Strip and validate a group name. Raises InvalidGroupNameError."""
    name = (raw or "").strip()
    if not name:
        raise InvalidGroupNameError("Group name cannot be empty")
    if len(name) > MAX_GROUP_NAME_LENGTH:
        raise InvalidGroupNameError(
            f"Group name cannot exceed {MAX_GROUP_NAME_LENGTH} characters",
        )
    return name
