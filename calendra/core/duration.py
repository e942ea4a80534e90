"""Duration class representing a span of time.

This module provides the Duration class: a signed nanosecond count
restricted to the signed 64-bit range, with human-readable, compact,
clock-style and ISO 8601 text forms.
"""

from __future__ import annotations

import datetime as _dt
import re
from decimal import Decimal, InvalidOperation
from typing import Union

from calendra._internal.constants import (
    DURATION_MAX_NANOS,
    DURATION_MIN_NANOS,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from calendra.errors import (
    DurationOverflowError,
    DurationValidationError,
    InvalidDurationFormatError,
)

# Unit suffixes in descending size. Text tokens must follow this order.
_UNIT_NANOS: dict[str, int] = {
    "d": NANOS_PER_DAY,
    "h": NANOS_PER_HOUR,
    "m": NANOS_PER_MINUTE,
    "s": NANOS_PER_SECOND,
    "ms": NANOS_PER_MILLISECOND,
    "us": NANOS_PER_MICROSECOND,
    "µs": NANOS_PER_MICROSECOND,
    "ns": 1,
}
_UNIT_RANK: dict[str, int] = {"d": 0, "h": 1, "m": 2, "s": 3, "ms": 4, "us": 5, "µs": 5, "ns": 6}

_TOKEN_RE = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ms|us|µs|ns|d|h|m|s)")
_CLOCK_RE = re.compile(r"(\d+):([0-5]\d):([0-5]\d)(?:\.(\d{1,9}))?")
_ISO_RE = re.compile(
    r"P(?:(\d+)D)?(?:T(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)(?:\.(\d{1,9}))?S)?)?"
)


def _trunc_div(n: int, d: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(n) // abs(d)
    return q if (n >= 0) == (d > 0) else -q


class Duration:
    """A signed span of time with nanosecond precision.

    The value is a single nanosecond count in the signed 64-bit range
    (about +/- 292 years). Any operation whose result falls outside that
    range raises DurationOverflowError.

    Component properties (``hours``, ``minutes``, ``seconds``,
    ``milliseconds``, ``nanos``) describe the magnitude; the sign is
    reported separately by ``is_negative``.

    Examples:
        >>> d = Duration(hours=2, minutes=30)
        >>> d.to_readable()
        '2h 30m 0s'
        >>> Duration.from_text("1h30m") == Duration.from_minutes(90)
        True
        >>> Duration.from_text("2.5h").total_minutes
        150
    """

    __slots__ = ("_nanos",)

    def __init__(
        self,
        *,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
        microseconds: int = 0,
        nanoseconds: int = 0,
    ) -> None:
        """Create a Duration from component parts.

        All parameters can be positive, negative or zero; they are summed.

        Raises:
            DurationValidationError: If a component is not an integer.
            DurationOverflowError: If the total exceeds the 64-bit range.

        Examples:
            >>> Duration(minutes=1, seconds=30).total_seconds
            90
        """
        parts = (days, hours, minutes, seconds, milliseconds, microseconds, nanoseconds)
        for part in parts:
            if isinstance(part, bool) or not isinstance(part, int):
                raise DurationValidationError(
                    f"duration components must be integers, got {part!r}", part
                )
        total = (
            days * NANOS_PER_DAY
            + hours * NANOS_PER_HOUR
            + minutes * NANOS_PER_MINUTE
            + seconds * NANOS_PER_SECOND
            + milliseconds * NANOS_PER_MILLISECOND
            + microseconds * NANOS_PER_MICROSECOND
            + nanoseconds
        )
        self._nanos = _check_range(total)

    @classmethod
    def _from_nanos(cls, nanos: int) -> Duration:
        """Create a Duration from a nanosecond count, checking the range only."""
        instance = object.__new__(cls)
        instance._nanos = _check_range(nanos)
        return instance

    # Factories

    @classmethod
    def zero(cls) -> Duration:
        """Return a zero-length duration."""
        return cls._from_nanos(0)

    @classmethod
    def from_components(
        cls,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
        nanoseconds: int = 0,
    ) -> Duration:
        """Create a Duration from clock-style components.

        Raises:
            DurationOverflowError: If the total exceeds the 64-bit range.
        """
        return cls(
            hours=hours,
            minutes=minutes,
            seconds=seconds,
            milliseconds=milliseconds,
            nanoseconds=nanoseconds,
        )

    @classmethod
    def from_days(cls, days: int) -> Duration:
        return cls(days=days)

    @classmethod
    def from_hours(cls, hours: int) -> Duration:
        return cls(hours=hours)

    @classmethod
    def from_minutes(cls, minutes: int) -> Duration:
        return cls(minutes=minutes)

    @classmethod
    def from_seconds(cls, seconds: int) -> Duration:
        return cls(seconds=seconds)

    @classmethod
    def from_milliseconds(cls, milliseconds: int) -> Duration:
        return cls(milliseconds=milliseconds)

    @classmethod
    def from_microseconds(cls, microseconds: int) -> Duration:
        return cls(microseconds=microseconds)

    @classmethod
    def from_nanos(cls, nanos: int) -> Duration:
        return cls(nanoseconds=nanos)

    @classmethod
    def from_timedelta(cls, delta: _dt.timedelta) -> Duration:
        """Convert a standard library timedelta exactly."""
        micros = (delta.days * 86_400 + delta.seconds) * 1_000_000 + delta.microseconds
        return cls._from_nanos(micros * NANOS_PER_MICROSECOND)

    # Parsing

    @classmethod
    def from_text(cls, text: str) -> Duration:
        """Parse a compact or clock-style duration.

        Accepted forms, with an optional leading ``-``:

        * one or more ``<number><unit>`` tokens with units
          ``d h m s ms us ns``, largest unit first and no unit repeated,
          optionally separated by whitespace (``"1h30m"``, ``"1h 30m"``).
          Numbers may have a decimal fraction (``"2.5h"``); the result is
          truncated to whole nanoseconds.
        * clock form ``H:MM:SS`` with optional fraction
          (``"01:30:00"``, ``"0:00:01.5"``).

        Raises:
            InvalidDurationFormatError: For any other input.

        Examples:
            >>> Duration.from_text("1h 30m 15s").total_seconds
            5415
            >>> Duration.from_text("-250ms").total_millis
            -250
            >>> Duration.from_text("01:00:00") == Duration.from_hours(1)
            True
        """
        if not isinstance(text, str):
            raise InvalidDurationFormatError(f"Invalid duration text: {text!r}", text)
        body = text.strip()
        negative = body.startswith("-")
        if negative:
            body = body[1:]
        if not body:
            raise InvalidDurationFormatError(f"Invalid duration text: {text!r}", text)

        clock = _CLOCK_RE.fullmatch(body)
        if clock:
            hours, minutes, seconds, fraction = clock.groups()
            total = (
                int(hours) * NANOS_PER_HOUR
                + int(minutes) * NANOS_PER_MINUTE
                + int(seconds) * NANOS_PER_SECOND
                + (int(fraction.ljust(9, "0")) if fraction else 0)
            )
        else:
            total = _parse_tokens(body, text)

        if negative:
            total = -total
        try:
            return cls._from_nanos(total)
        except DurationOverflowError:
            raise DurationOverflowError(
                f"Duration out of range: {text!r}", text
            ) from None

    @classmethod
    def from_iso8601(cls, text: str) -> Duration:
        """Parse an ISO 8601 duration such as ``"P1DT2H30M"`` or ``"PT0.5S"``.

        Only day and time designators are supported; years, months and
        weeks have no fixed length.

        Raises:
            InvalidDurationFormatError: If the text is not such a duration.
        """
        if not isinstance(text, str):
            raise InvalidDurationFormatError(f"Invalid ISO 8601 duration: {text!r}", text)
        body = text.strip()
        negative = body.startswith("-")
        if negative:
            body = body[1:]
        match = _ISO_RE.fullmatch(body)
        if (
            match is None
            or not any(g is not None for g in match.groups())
            or body.endswith("T")
        ):
            raise InvalidDurationFormatError(f"Invalid ISO 8601 duration: {text!r}", text)
        days, hours, minutes, seconds, fraction = match.groups()
        total = (
            int(days or 0) * NANOS_PER_DAY
            + int(hours or 0) * NANOS_PER_HOUR
            + int(minutes or 0) * NANOS_PER_MINUTE
            + int(seconds or 0) * NANOS_PER_SECOND
            + (int(fraction.ljust(9, "0")) if fraction else 0)
        )
        return cls._from_nanos(-total if negative else total)

    @classmethod
    def parse(cls, value: Union[Duration, _dt.timedelta, int, str]) -> Duration:
        """Convert any supported duration representation into a Duration.

        Integers (and strings of bare digits) are nanosecond counts,
        timedeltas convert exactly, and other strings go through
        ``from_text`` or, when they start with ``P``, ``from_iso8601``.

        Raises:
            InvalidDurationFormatError: For unparseable strings or
                unsupported types.
        """
        if isinstance(value, Duration):
            return value
        if isinstance(value, _dt.timedelta):
            return cls.from_timedelta(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return cls._from_nanos(value)
        if isinstance(value, str):
            stripped = value.strip()
            unsigned = stripped.lstrip("-")
            if unsigned.isascii() and unsigned.isdigit() and len(stripped) - len(unsigned) <= 1:
                return cls._from_nanos(int(stripped))
            if unsigned.startswith("P"):
                return cls.from_iso8601(stripped)
            return cls.from_text(stripped)
        raise InvalidDurationFormatError(
            f"Cannot convert {type(value).__name__} to Duration", value
        )

    # Components of the magnitude

    @property
    def hours(self) -> int:
        """Whole hours in the magnitude (not wrapped at 24)."""
        return abs(self._nanos) // NANOS_PER_HOUR

    @property
    def minutes(self) -> int:
        """Minutes component, 0-59."""
        return (abs(self._nanos) // NANOS_PER_MINUTE) % 60

    @property
    def seconds(self) -> int:
        """Seconds component, 0-59."""
        return (abs(self._nanos) // NANOS_PER_SECOND) % 60

    @property
    def milliseconds(self) -> int:
        """Milliseconds component, 0-999."""
        return (abs(self._nanos) // NANOS_PER_MILLISECOND) % 1000

    @property
    def microseconds(self) -> int:
        """Microseconds component within the millisecond, 0-999."""
        return (abs(self._nanos) // NANOS_PER_MICROSECOND) % 1000

    @property
    def nanos(self) -> int:
        """Sub-second nanoseconds, 0-999_999_999."""
        return abs(self._nanos) % NANOS_PER_SECOND

    # Signed totals, truncated toward zero

    @property
    def total_nanos(self) -> int:
        return self._nanos

    @property
    def total_micros(self) -> int:
        return _trunc_div(self._nanos, NANOS_PER_MICROSECOND)

    @property
    def total_millis(self) -> int:
        return _trunc_div(self._nanos, NANOS_PER_MILLISECOND)

    @property
    def total_seconds(self) -> int:
        return _trunc_div(self._nanos, NANOS_PER_SECOND)

    @property
    def total_minutes(self) -> int:
        return _trunc_div(self._nanos, NANOS_PER_MINUTE)

    @property
    def total_hours(self) -> int:
        return _trunc_div(self._nanos, NANOS_PER_HOUR)

    @property
    def total_days(self) -> int:
        return _trunc_div(self._nanos, NANOS_PER_DAY)

    @property
    def is_negative(self) -> bool:
        """True if this duration is less than zero."""
        return self._nanos < 0

    @property
    def is_zero(self) -> bool:
        """True if this duration is exactly zero."""
        return self._nanos == 0

    # Arithmetic

    def add(self, other: Duration) -> Duration:
        """Return the sum of two durations.

        Raises:
            DurationOverflowError: If the sum exceeds the 64-bit range.
        """
        return Duration._from_nanos(self._nanos + other._nanos)

    def subtract(self, other: Duration) -> Duration:
        """Return this duration minus other.

        Raises:
            DurationOverflowError: If the result exceeds the 64-bit range.
        """
        return Duration._from_nanos(self._nanos - other._nanos)

    def multiply(self, factor: int) -> Duration:
        """Scale by a non-negative integer factor.

        Raises:
            DurationValidationError: If factor is negative or not an int.
            DurationOverflowError: If the product exceeds the 64-bit range.

        Examples:
            >>> Duration.from_minutes(20).multiply(3) == Duration.from_hours(1)
            True
        """
        if isinstance(factor, bool) or not isinstance(factor, int) or factor < 0:
            raise DurationValidationError(
                f"factor must be a non-negative integer, got {factor!r}", factor
            )
        return Duration._from_nanos(self._nanos * factor)

    def divide(self, divisor: int) -> Duration:
        """Divide by a positive integer, truncating toward zero.

        Raises:
            DurationValidationError: If divisor is zero, negative or not an int.

        Examples:
            >>> Duration.from_seconds(10).divide(3).total_millis
            3333
        """
        if isinstance(divisor, bool) or not isinstance(divisor, int) or divisor <= 0:
            raise DurationValidationError(
                f"divisor must be a positive integer, got {divisor!r}", divisor
            )
        return Duration._from_nanos(_trunc_div(self._nanos, divisor))

    def is_longer_than(self, other: Duration) -> bool:
        return self._nanos > other._nanos

    def is_shorter_than(self, other: Duration) -> bool:
        return self._nanos < other._nanos

    # Formatting

    def to_readable(self) -> str:
        """Return a short human-readable form.

        The largest non-zero unit decides the shape:

        * 1 hour or more: ``"2h 30m 45s"``
        * under an hour: ``"30m 45s"`` or ``"30m"``
        * under a minute: ``"45s"`` or ``"1.500s"``
        * under a second: ``"250ms"``
        * under a millisecond: ``"750ns"``

        Zero is ``"0s"``; negative durations get a ``-`` prefix.
        """
        if self._nanos == 0:
            return "0s"
        sign = "-" if self._nanos < 0 else ""
        h, m, s, ms = self.hours, self.minutes, self.seconds, self.milliseconds
        if h > 0:
            body = f"{h}h {m}m {s}s"
        elif m > 0:
            body = f"{m}m" if s == 0 else f"{m}m {s}s"
        elif s > 0:
            body = f"{s}s" if ms == 0 else f"{s}.{ms:03d}s"
        elif ms > 0:
            body = f"{ms}ms"
        else:
            body = f"{self.nanos}ns"
        return sign + body

    def to_text(self) -> str:
        """Return the canonical compact form accepted by ``from_text``.

        Examples:
            >>> Duration(hours=1, minutes=30).to_text()
            '1h30m'
            >>> Duration.from_nanos(1_500_000).to_text()
            '1ms500000ns'
        """
        if self._nanos == 0:
            return "0s"
        sub_milli = abs(self._nanos) % NANOS_PER_MILLISECOND
        parts = [
            (self.hours, "h"),
            (self.minutes, "m"),
            (self.seconds, "s"),
            (self.milliseconds, "ms"),
            (sub_milli, "ns"),
        ]
        body = "".join(f"{value}{unit}" for value, unit in parts if value)
        return ("-" if self._nanos < 0 else "") + body

    def to_hms(self) -> str:
        """Return ``"HH:MM:SS"``; hours are not wrapped at 24."""
        sign = "-" if self._nanos < 0 else ""
        return f"{sign}{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}"

    def to_precise(self) -> str:
        """Return ``"HH:MM:SS.nnnnnnnnn"`` with all nine fractional digits."""
        return f"{self.to_hms()}.{self.nanos:09d}"

    def to_iso8601(self) -> str:
        """Return the ISO 8601 form, e.g. ``"PT2H30M"`` or ``"P1DT0.5S"``."""
        if self._nanos == 0:
            return "PT0S"
        magnitude = abs(self._nanos)
        days, rest = divmod(magnitude, NANOS_PER_DAY)
        hours, rest = divmod(rest, NANOS_PER_HOUR)
        minutes, rest = divmod(rest, NANOS_PER_MINUTE)
        seconds, fraction = divmod(rest, NANOS_PER_SECOND)

        result = "-P" if self._nanos < 0 else "P"
        if days:
            result += f"{days}D"
        time_part = ""
        if hours:
            time_part += f"{hours}H"
        if minutes:
            time_part += f"{minutes}M"
        if seconds or fraction:
            time_part += str(seconds)
            if fraction:
                time_part += "." + f"{fraction:09d}".rstrip("0")
            time_part += "S"
        if time_part:
            result += "T" + time_part
        return result

    def to_timedelta(self) -> _dt.timedelta:
        """Convert to a standard library timedelta, truncating to microseconds."""
        return _dt.timedelta(microseconds=self.total_micros)

    # Operators

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: object) -> Duration:
        """Support sum() by handling 0 + Duration."""
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> Duration:
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: object) -> Duration:
        return self.__mul__(other)

    def __floordiv__(self, other: object) -> Duration:
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return self.divide(other)

    def __neg__(self) -> Duration:
        return Duration._from_nanos(-self._nanos)

    def __pos__(self) -> Duration:
        return self

    def __abs__(self) -> Duration:
        return -self if self._nanos < 0 else self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos == other._nanos

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos < other._nanos

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos <= other._nanos

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos > other._nanos

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos >= other._nanos

    def __hash__(self) -> int:
        return hash(("Duration", self._nanos))

    def __repr__(self) -> str:
        return f"Duration(nanoseconds={self._nanos})"

    def __str__(self) -> str:
        return self.to_readable()

    def __bool__(self) -> bool:
        """Return True if this is a non-zero duration."""
        return self._nanos != 0


def _check_range(nanos: int) -> int:
    if nanos < DURATION_MIN_NANOS or nanos > DURATION_MAX_NANOS:
        raise DurationOverflowError(
            f"duration of {nanos} nanoseconds exceeds the 64-bit range", nanos
        )
    return nanos


def _parse_tokens(body: str, original: str) -> int:
    """Sum the ``<number><unit>`` tokens of body, enforcing unit order."""
    pos = 0
    last_rank = -1
    total = Decimal(0)
    length = len(body)
    while pos < length:
        match = _TOKEN_RE.match(body, pos)
        if match is None:
            raise InvalidDurationFormatError(
                f"Invalid duration text: {original!r} (unexpected {body[pos:]!r})", original
            )
        number, unit = match.groups()
        rank = _UNIT_RANK[unit]
        if rank <= last_rank:
            raise InvalidDurationFormatError(
                f"Invalid duration text: {original!r} (units must be in descending order)",
                original,
            )
        last_rank = rank
        try:
            total += Decimal(number) * _UNIT_NANOS[unit]
        except InvalidOperation:
            raise InvalidDurationFormatError(
                f"Invalid number {number!r} in duration {original!r}", original
            ) from None
        pos = match.end()
        while pos < length and body[pos].isspace():
            pos += 1
    return int(total)


__all__ = ["Duration"]
