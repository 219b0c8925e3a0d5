"""Error Hierarchy: typed, categorized exceptions for every work-hours failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - State, validation and constraint errors are 4xx; storage errors are 5xx
    - to_response() produces the REST envelope consumed by the API error handlers
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with WorkHoursError base: one FastAPI handler catches all
    - "No open round found" is an Optional result in the store, never an exception
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    INVALID_STATE = "invalid_state"
    CONSTRAINT = "constraint"
    RESOURCE_NOT_FOUND = "resource_not_found"
    STORAGE = "storage"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and the response envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    group_id: int | None = None
    round_id: int | None = None
    debug_info: dict[str, Any] | None = None


class WorkHoursError(Exception):
    """Base exception for all work-hours errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "group_id": self.context.group_id,
                    "round_id": self.context.round_id,
                },
            }
        }


# ─── Not Found (404) ────────────────────────────────────────────

class ResourceNotFoundError(WorkHoursError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: int, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class GroupNotFoundError(ResourceNotFoundError):
    """Working group id is unknown."""
    def __init__(self, group_id: int):
        super().__init__(
            "Working group", group_id, ErrorContext(group_id=group_id),
        )


class RoundNotFoundError(ResourceNotFoundError):
    """Round id is unknown."""
    def __init__(self, round_id: int):
        super().__init__("Round", round_id, ErrorContext(round_id=round_id))


# ─── Invalid State (409) ────────────────────────────────────────

class RoundAlreadyRunningError(WorkHoursError):
    """start requested while the group already has an open round."""
    def __init__(self, group_id: int):
        super().__init__(
            "Cannot start: this working group already has a running round",
            "ROUND_ALREADY_RUNNING", ErrorCategory.INVALID_STATE,
            ErrorSeverity.WARNING, ErrorContext(group_id=group_id), 409,
        )


class RoundNotRunningError(WorkHoursError):
    """stop requested while the group has no open round."""
    def __init__(self, group_id: int):
        super().__init__(
            "Cannot stop: no round is running for this working group",
            "ROUND_NOT_RUNNING", ErrorCategory.INVALID_STATE,
            ErrorSeverity.WARNING, ErrorContext(group_id=group_id), 409,
        )


# ─── Validation (400 / 409) ─────────────────────────────────────

class InvalidGroupNameError(WorkHoursError):
    """Group name is empty after trimming or too long."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            reason, "INVALID_GROUP_NAME", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


class DuplicateGroupNameError(WorkHoursError):
    """Another working group already uses this name."""
    def __init__(self, name: str, context: ErrorContext | None = None):
        super().__init__(
            f"A working group named '{name}' already exists",
            "DUPLICATE_GROUP_NAME", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 409,
        )
        self.name = name


# ─── Constraint (400) ───────────────────────────────────────────

class LastGroupError(WorkHoursError):
    """Deleting the only remaining working group."""
    def __init__(self, group_id: int):
        super().__init__(
            "Cannot delete the last remaining working group",
            "LAST_GROUP", ErrorCategory.CONSTRAINT,
            ErrorSeverity.ERROR, ErrorContext(group_id=group_id), 400,
        )


class GroupHasRoundsError(WorkHoursError):
    """Deleting a working group that still owns rounds."""
    def __init__(self, group_id: int, round_count: int):
        super().__init__(
            "Cannot delete working group with recorded rounds. Reset the group first.",
            "GROUP_HAS_ROUNDS", ErrorCategory.CONSTRAINT,
            ErrorSeverity.ERROR,
            ErrorContext(group_id=group_id, debug_info={"round_count": round_count}),
            400,
        )
        self.round_count = round_count


# ─── Infrastructure (503) ───────────────────────────────────────

class StorageError(WorkHoursError):
    """Underlying persistence operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Storage {operation} failed: {message}",
            "STORAGE_ERROR", ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
