"""Wall Clock & Local Timezone: the only places that read the system time.

Invariants:
    - utc_now() always returns an aware UTC datetime
    - resolve_timezone always returns a real zone that follows daylight saving,
      never a fixed offset captured at call time
    - Host zone lookup order: TZ, /etc/localtime, then UTC
"""

import logging
import os
from datetime import datetime, timezone, tzinfo
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

LOCALTIME_PATH = Path("/etc/localtime")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def resolve_timezone(name: str | None) -> tzinfo:
    """IANA zone by name, or the host's local zone when no name is configured."""
    if name:
        return ZoneInfo(name)
    return host_timezone()


def host_timezone(localtime: Path = LOCALTIME_PATH) -> tzinfo:
    tz_env = os.environ.get("TZ", "").lstrip(":")
    if tz_env:
        try:
            return ZoneInfo(tz_env)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning(f"TZ '{tz_env}' is not an IANA zone name, ignoring it")

    if localtime.is_symlink():
        target = str(localtime.resolve())
        _, sep, key = target.partition("zoneinfo/")
        if sep:
            try:
                return ZoneInfo(key)
            except (ZoneInfoNotFoundError, ValueError):
                pass
    if localtime.is_file():
        with localtime.open("rb") as f:
            return ZoneInfo.from_file(f, key="localtime")

    logger.warning("Host timezone unknown, using UTC")
    return timezone.utc
