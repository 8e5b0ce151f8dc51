"""
Zwanski API: Clock Helpers
===========================

What:  Timestamp formatting shared by every endpoint, plus the /api/timezone
       snapshot of the serving host's clock.
How:   Pure functions over `datetime`; callers may pass `now` for tests.

Format:
    ISO-8601 UTC, millisecond precision, `Z` suffix: 2024-12-03T10:30:45.123Z
"""

from datetime import datetime, timezone
from typing import Optional

from zwanski_api.schemas.responses import TimezoneResponse


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """Format `now` (default: current time) as an ISO-8601 UTC string."""
    moment = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def readable_local_time(local: datetime) -> str:
    """
    Render a local datetime the way en-US browsers do: `12/3/2024, 9:05:07 AM`.

    Built by hand because strftime's unpadded directives (%-m, %-I) are not
    portable across platforms.
    """
    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return (
        f"{local.month}/{local.day}/{local.year}, "
        f"{hour}:{local.minute:02d}:{local.second:02d} {meridiem}"
    )


def clock_snapshot(now: Optional[datetime] = None) -> TimezoneResponse:
    """
    Read the serving environment's clock.

    Returns:
        TimezoneResponse with the UTC timestamp, epoch seconds, local readable
        time and the local offset from UTC in minutes (east of UTC positive).
    """
    moment = now or datetime.now(timezone.utc)
    local = moment.astimezone()
    offset = local.utcoffset()
    offset_minutes = int(offset.total_seconds() // 60) if offset is not None else 0

    return TimezoneResponse(
        utc_timestamp=utc_timestamp(moment),
        unix_timestamp=int(moment.timestamp()),
        readable=readable_local_time(local),
        timezone_offset=offset_minutes,
    )
