"""Structured Logging: one-line JSON records carrying group and round context.

Invariants:
    - Every record has timestamp (UTC, ISO 8601), level, logger and message
    - group_id, round_id, error_code, path and duration_seconds appear only when set
    - setup_logging is idempotent: calling it again replaces its handler
"""

import json
import logging
from datetime import datetime, timezone

CONTEXT_FIELDS = ("group_id", "round_id", "error_code", "path", "duration_seconds")
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"

_HANDLER_NAME = "workhours"


class JSONFormatter(logging.Formatter):
    """Render a LogRecord as a JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (field, getattr(record, field))
            for field in CONTEXT_FIELDS
            if getattr(record, field, None) is not None
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the workhours handler on the root logger; `fmt` is "json" or "text"."""
    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT),
    )
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
