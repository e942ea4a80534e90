"""Unix epoch and standard library conversions.

The Unix epoch is 1970-01-01T00:00:00Z. DateTime is naive and treated
as UTC for every conversion here.

Examples:
    >>> from_unix_seconds(1_710_513_045)
    DateTime(2024, 3, 15, 14, 30, 45, 0)
"""

from __future__ import annotations

import datetime as _dt
from typing import TYPE_CHECKING

from calendra._internal.constants import NANOS_PER_MILLISECOND

if TYPE_CHECKING:
    from calendra.core.datetime import DateTime
    from calendra.core.duration import Duration


def to_unix_seconds(dt: DateTime) -> int:
    """Whole seconds since the epoch, rounded toward negative infinity."""
    return dt.to_timestamp()


def from_unix_seconds(seconds: int, nanos: int = 0) -> DateTime:
    """Create a DateTime from seconds since the epoch.

    Raises:
        DateTimeOverflowError: If the instant is outside years 1-9999.
    """
    from calendra.core.datetime import DateTime

    return DateTime.from_timestamp(seconds, nanos)


def to_unix_millis(dt: DateTime) -> int:
    """Whole milliseconds since the epoch, rounded toward negative infinity."""
    return dt.to_unix_nanos() // NANOS_PER_MILLISECOND


def from_unix_millis(millis: int) -> DateTime:
    from calendra.core.datetime import DateTime

    return DateTime.from_unix_nanos(millis * NANOS_PER_MILLISECOND)


def to_unix_nanos(dt: DateTime) -> int:
    return dt.to_unix_nanos()


def from_unix_nanos(nanos: int) -> DateTime:
    from calendra.core.datetime import DateTime

    return DateTime.from_unix_nanos(nanos)


def to_timedelta(duration: Duration) -> _dt.timedelta:
    """Convert a Duration to a timedelta, truncating to microseconds."""
    return duration.to_timedelta()


def from_timedelta(delta: _dt.timedelta) -> Duration:
    """Convert a timedelta to a Duration exactly."""
    from calendra.core.duration import Duration

    return Duration.from_timedelta(delta)


__all__ = [
    "to_unix_seconds",
    "from_unix_seconds",
    "to_unix_millis",
    "from_unix_millis",
    "to_unix_nanos",
    "from_unix_nanos",
    "to_timedelta",
    "from_timedelta",
]
