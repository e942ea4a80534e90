"""Wall-clock sources.

Anything that needs "now" takes a Clock, so code that depends on the
current time can be exercised deterministically with a FixedClock.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from calendra.core.datetime import DateTime
    from calendra.core.duration import Duration


@runtime_checkable
class Clock(Protocol):
    """A source of the current time as Unix nanoseconds (UTC)."""

    def unix_nanos(self) -> int: ...


class SystemClock:
    """The operating system's real-time clock."""

    __slots__ = ()

    def unix_nanos(self) -> int:
        return time.time_ns()

    def __repr__(self) -> str:
        return "SystemClock()"


class FixedClock:
    """A clock frozen at a given instant.

    Examples:
        >>> clock = FixedClock.at(DateTime.from_components(2024, 3, 15, 12))
        >>> DateTime.now_utc(clock)
        DateTime(2024, 3, 15, 12, 0, 0, 0)
    """

    __slots__ = ("_nanos",)

    def __init__(self, unix_nanos: int) -> None:
        self._nanos = unix_nanos

    @classmethod
    def at(cls, moment: DateTime) -> FixedClock:
        """Freeze the clock at a DateTime."""
        return cls(moment.to_unix_nanos())

    def unix_nanos(self) -> int:
        return self._nanos

    def advance(self, duration: Duration) -> FixedClock:
        """Return a new clock moved forward by duration."""
        return FixedClock(self._nanos + duration.total_nanos)

    def __repr__(self) -> str:
        return f"FixedClock({self._nanos})"


def resolve_clock(clock: Clock | None) -> Clock:
    """Return clock, or a SystemClock when none is given."""
    return SystemClock() if clock is None else clock


__all__ = ["Clock", "SystemClock", "FixedClock", "resolve_clock"]
