"""DateTime class combining a calendar date with a time of day.

This module provides the DateTime class: a naive UTC wall-clock instant
with nanosecond precision, built from the Year, Month and Day value
types plus hour, minute, second and nanosecond fields.
"""

from __future__ import annotations

import datetime as _dt
import logging
from typing import TYPE_CHECKING, Optional, Union, overload

from calendra._internal import calendar as _cal
from calendra._internal.constants import (
    LAST_NANOS_OF_DAY,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    PIVOT_YEAR,
    UNIX_EPOCH_ORDINAL,
)
from calendra._internal.validation import (
    TIME_COMPONENT_LIMITS,
    check_component,
    validate_range,
)
from calendra.clock import Clock, resolve_clock
from calendra.core.day import Day
from calendra.core.duration import Duration
from calendra.core.month import Month
from calendra.core.year import Year
from calendra.errors import (
    CalendraError,
    DateTimeOverflowError,
    InvalidDateError,
    UnrecognizedDateTimeError,
)
from calendra.format.layouts import (
    AUTO_DETECT_ORDER,
    DateTimeFormat,
    format_datetime,
    parse_datetime,
)

if TYPE_CHECKING:
    from calendra.core.builder import DateTimeBuilder

logger = logging.getLogger(__name__)


class DateTime:
    """A calendar date and time of day with nanosecond precision.

    DateTime is naive: it has no time zone and is treated as UTC when
    converted to or from Unix timestamps. Years are limited to 1-9999,
    and arithmetic that leaves that range raises DateTimeOverflowError.

    Attributes:
        year: The Year.
        month: The Month.
        day: The Day.
        hour: Hour (0-23).
        minute: Minute (0-59).
        second: Second (0-59).
        nanosecond: Nanosecond (0-999_999_999).

    Examples:
        >>> dt = DateTime.from_components(2024, 3, 15, 14, 30, 45)
        >>> dt.to_iso8601()
        '2024-03-15T14:30:45.000000000Z'
        >>> dt.to_readable_ptbr()
        '15 de Março de 2024 às 14:30:45'

        >>> DateTime.parse("15/03/2024") == DateTime.from_components(2024, 3, 15)
        True

        >>> (dt + Duration.from_hours(10)).to_yyyy_mm_dd()
        '2024-03-16'
    """

    __slots__ = ("_year", "_month", "_day", "_hour", "_minute", "_second", "_nanosecond")

    @validate_range(**TIME_COMPONENT_LIMITS)
    def __init__(
        self,
        year: Union[Year, int],
        month: Union[Month, int],
        day: Union[Day, int],
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
    ) -> None:
        """Create a DateTime from its components.

        Args:
            year: A Year or a year number.
            month: A Month or a month number.
            day: A Day or a day number; re-checked against year and month.
            hour: Hour (0-23).
            minute: Minute (0-59).
            second: Second (0-59).
            nanosecond: Nanosecond (0-999_999_999).

        Raises:
            InvalidTimeComponentError: If a time component is out of range.
            InvalidDateError: If a Day does not exist in the given month.
            InvalidYearError, InvalidMonthNumberError, InvalidDayError:
                If plain numbers are out of range.
        """
        y = Year.parse(year)
        m = Month.parse(month)
        if isinstance(day, Day):
            if not day.is_valid_for(y, m):
                raise InvalidDateError(
                    f"day {day.value} invalid for {m.name_en} {y.value}", day.value
                )
            d = day
        else:
            d = Day.from_number(day, y, m)

        self._year = y
        self._month = m
        self._day = d
        self._hour = hour
        self._minute = minute
        self._second = second
        self._nanosecond = nanosecond

    @classmethod
    def _from_internal(
        cls, ordinal: int, nanos_of_day: int
    ) -> DateTime:
        """Create a DateTime from an ordinal day and nanoseconds into that day.

        Raises:
            DateTimeOverflowError: If the ordinal falls outside years 1-9999.
        """
        if ordinal < _cal.MIN_ORDINAL or ordinal > _cal.MAX_ORDINAL:
            raise DateTimeOverflowError(
                "result is outside the supported range 0001-01-01 to 9999-12-31", ordinal
            )
        year, month, day = _cal.ordinal_to_ymd(ordinal)
        hour, rest = divmod(nanos_of_day, NANOS_PER_HOUR)
        minute, rest = divmod(rest, NANOS_PER_MINUTE)
        second, nanosecond = divmod(rest, NANOS_PER_SECOND)

        instance = object.__new__(cls)
        instance._year = Year(year)
        instance._month = Month.from_number(month)
        instance._day = Day._from_internal(day)
        instance._hour = hour
        instance._minute = minute
        instance._second = second
        instance._nanosecond = nanosecond
        return instance

    # Factories

    @classmethod
    def from_components(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
    ) -> DateTime:
        """Create a DateTime from plain integers.

        Examples:
            >>> DateTime.from_components(2024, 2, 29, 23, 59, 59)
            DateTime(2024, 2, 29, 23, 59, 59, 0)
        """
        return cls(year, month, day, hour, minute, second, nanosecond)

    @classmethod
    def from_date_start_of_day(
        cls, year: Union[Year, int], month: Union[Month, int], day: Union[Day, int]
    ) -> DateTime:
        """Create a DateTime at 00:00:00 on the given date."""
        return cls(year, month, day)

    @classmethod
    def from_date_and_time(
        cls,
        year: Union[Year, int],
        month: Union[Month, int],
        day: Union[Day, int],
        hour: int,
        minute: int,
        second: int,
    ) -> DateTime:
        return cls(year, month, day, hour, minute, second)

    @classmethod
    def now_utc(cls, clock: Optional[Clock] = None) -> DateTime:
        """Return the current UTC time from clock (the system clock by default)."""
        source = resolve_clock(clock)
        logger.debug("Reading current time from %r", source)
        return cls.from_unix_nanos(source.unix_nanos())

    @classmethod
    def from_unix_nanos(cls, nanos: int) -> DateTime:
        """Create a DateTime from nanoseconds since 1970-01-01T00:00:00Z.

        Raises:
            DateTimeOverflowError: If the instant is outside years 1-9999.
        """
        days, nanos_of_day = divmod(nanos, NANOS_PER_DAY)
        return cls._from_internal(UNIX_EPOCH_ORDINAL + days, nanos_of_day)

    @classmethod
    def from_timestamp(cls, seconds: int, nanos: int = 0) -> DateTime:
        """Create a DateTime from Unix seconds plus extra nanoseconds.

        Raises:
            InvalidTimeComponentError: If nanos is outside 0-999_999_999.
            DateTimeOverflowError: If the instant is outside years 1-9999.

        Examples:
            >>> DateTime.from_timestamp(0)
            DateTime(1970, 1, 1, 0, 0, 0, 0)
        """
        check_component("nanos", nanos, 0, NANOS_PER_SECOND - 1)
        return cls.from_unix_nanos(seconds * NANOS_PER_SECOND + nanos)

    @classmethod
    def from_datetime(cls, value: _dt.datetime) -> DateTime:
        """Convert a standard library datetime.

        Aware values are converted to UTC first; naive values are taken
        as UTC.
        """
        if value.tzinfo is not None:
            value = value.astimezone(_dt.timezone.utc)
        return cls(
            value.year,
            value.month,
            value.day,
            value.hour,
            value.minute,
            value.second,
            value.microsecond * NANOS_PER_MICROSECOND,
        )

    @staticmethod
    def builder() -> DateTimeBuilder:
        """Return an empty DateTimeBuilder."""
        from calendra.core.builder import DateTimeBuilder

        return DateTimeBuilder()

    # Parsing

    @classmethod
    def parse(cls, value: Union[DateTime, _dt.datetime, int, str]) -> DateTime:
        """Convert any supported representation into a DateTime.

        Strings are matched against the built-in layouts in this order:
        ISO 8601, YYYY-MM-DD, DD/MM/YYYY, MM/DD/YYYY, YYYYMMDD, DDMMYYYY,
        MMDDYYYY and, for exactly four ASCII digits only, YYMM. The first
        layout that parses wins, so ambiguous slashed dates are read as
        day-first. Integers are Unix seconds.

        Raises:
            UnrecognizedDateTimeError: If no layout matches.

        Examples:
            >>> DateTime.parse("20240315").to_iso8601()
            '2024-03-15T00:00:00.000000000Z'
            >>> DateTime.parse("03/15/2024").day
            Day(15)
            >>> DateTime.parse("2403")
            DateTime(2024, 3, 1, 0, 0, 0, 0)
        """
        if isinstance(value, DateTime):
            return value
        if isinstance(value, _dt.datetime):
            return cls.from_datetime(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.from_timestamp(value)
        if not isinstance(value, str):
            raise UnrecognizedDateTimeError(
                f"Cannot convert {type(value).__name__} to DateTime", value
            )

        text = value.strip()
        four_digits = len(text) == 4 and text.isascii() and text.isdigit()
        for fmt in AUTO_DETECT_ORDER:
            if fmt is DateTimeFormat.YYMM and not four_digits:
                continue
            try:
                result = parse_datetime(text, fmt)
            except CalendraError as exc:
                logger.debug("%r is not %s: %s", text, fmt.name, exc)
                continue
            logger.debug("%r parsed as %s", text, fmt.name)
            return result

        raise UnrecognizedDateTimeError(
            f"Unrecognized date format: {value!r}", value
        )

    @staticmethod
    def is_valid(value: object) -> bool:
        """Return True if ``DateTime.parse`` would accept value."""
        try:
            DateTime.parse(value)  # type: ignore[arg-type]
        except CalendraError:
            return False
        return True

    @classmethod
    def from_format(cls, text: str, fmt: Union[DateTimeFormat, str]) -> DateTime:
        """Parse text in a built-in layout or a strftime-style pattern."""
        if isinstance(fmt, DateTimeFormat):
            return parse_datetime(text, fmt)
        from calendra.format.strftime import strptime

        return strptime(text, fmt)

    @classmethod
    def from_iso8601(cls, text: str) -> DateTime:
        """Parse ``YYYY-MM-DDTHH:MM:SS[.f][Z]`` or a bare ``YYYY-MM-DD``.

        Examples:
            >>> DateTime.from_iso8601("2024-03-15T14:30:45.5Z").nanosecond
            500000000
        """
        return parse_datetime(text, DateTimeFormat.ISO8601)

    @classmethod
    def from_yyyymmdd(cls, text: str) -> DateTime:
        return parse_datetime(text, DateTimeFormat.YYYYMMDD)

    @classmethod
    def from_yyyy_mm_dd(cls, text: str) -> DateTime:
        return parse_datetime(text, DateTimeFormat.YYYY_MM_DD)

    @classmethod
    def from_dd_mm_yyyy(cls, text: str) -> DateTime:
        return parse_datetime(text, DateTimeFormat.DD_MM_YYYY)

    @classmethod
    def from_mm_dd_yyyy(cls, text: str) -> DateTime:
        return parse_datetime(text, DateTimeFormat.MM_DD_YYYY)

    @classmethod
    def from_ddmmyyyy(cls, text: str) -> DateTime:
        return parse_datetime(text, DateTimeFormat.DDMMYYYY)

    @classmethod
    def from_mmddyyyy(cls, text: str) -> DateTime:
        return parse_datetime(text, DateTimeFormat.MMDDYYYY)

    @classmethod
    def from_yymm(cls, text: str, *, pivot: int = PIVOT_YEAR) -> DateTime:
        """Parse four digits YYMM as the first day of that month, at midnight.

        Raises:
            DateTimeFormatLengthError: If text is not exactly 4 characters.
            DateTimeParseError: If text contains non-digits.
            InvalidMonthNumberError: If MM is outside 01-12.

        Examples:
            >>> DateTime.from_yymm("9912").year
            Year(1999)
            >>> DateTime.from_yymm("0501").year
            Year(2005)
        """
        return parse_datetime(text, DateTimeFormat.YYMM, pivot=pivot)

    # Accessors

    @property
    def year(self) -> Year:
        return self._year

    @property
    def month(self) -> Month:
        return self._month

    @property
    def day(self) -> Day:
        return self._day

    @property
    def hour(self) -> int:
        return self._hour

    @property
    def minute(self) -> int:
        return self._minute

    @property
    def second(self) -> int:
        return self._second

    @property
    def nanosecond(self) -> int:
        return self._nanosecond

    def date_tuple(self) -> tuple[int, int, int]:
        """Return (year, month, day) as integers."""
        return (self._year.value, self._month.number, self._day.value)

    def weekday(self) -> int:
        """Day of week, Monday=0 through Sunday=6."""
        return _cal.weekday(*self.date_tuple())

    def _ordinal(self) -> int:
        return _cal.ymd_to_ordinal(*self.date_tuple())

    def _nanos_of_day(self) -> int:
        return (
            self._hour * NANOS_PER_HOUR
            + self._minute * NANOS_PER_MINUTE
            + self._second * NANOS_PER_SECOND
            + self._nanosecond
        )

    def _instant(self) -> int:
        """Nanoseconds since the start of ordinal day 0, used for ordering."""
        return self._ordinal() * NANOS_PER_DAY + self._nanos_of_day()

    # Formatting

    def to_format(self, fmt: Union[DateTimeFormat, str]) -> str:
        """Format in a built-in layout or a strftime-style pattern."""
        if isinstance(fmt, DateTimeFormat):
            return format_datetime(self, fmt)
        from calendra.format.strftime import strftime

        return strftime(self, fmt)

    def to_iso8601(self) -> str:
        """Return ``YYYY-MM-DDTHH:MM:SS.nnnnnnnnnZ``."""
        return format_datetime(self, DateTimeFormat.ISO8601)

    def to_yyyymmdd(self) -> str:
        return format_datetime(self, DateTimeFormat.YYYYMMDD)

    def to_yyyy_mm_dd(self) -> str:
        return format_datetime(self, DateTimeFormat.YYYY_MM_DD)

    def to_dd_mm_yyyy(self) -> str:
        return format_datetime(self, DateTimeFormat.DD_MM_YYYY)

    def to_mm_dd_yyyy(self) -> str:
        return format_datetime(self, DateTimeFormat.MM_DD_YYYY)

    def to_ddmmyyyy(self) -> str:
        return format_datetime(self, DateTimeFormat.DDMMYYYY)

    def to_mmddyyyy(self) -> str:
        return format_datetime(self, DateTimeFormat.MMDDYYYY)

    def to_yymm(self) -> str:
        """Return YYMM; only years 1950-2049 survive a round trip."""
        return format_datetime(self, DateTimeFormat.YYMM)

    def _clock_text(self) -> str:
        return f"{self._hour:02d}:{self._minute:02d}:{self._second:02d}"

    def to_readable_en(self) -> str:
        """Return e.g. ``"March 15, 2024 at 14:30:45"``."""
        return (
            f"{self._month.name_en} {self._day.value}, {self._year.value} "
            f"at {self._clock_text()}"
        )

    def to_readable_ptbr(self) -> str:
        """Return e.g. ``"15 de Março de 2024 às 14:30:45"``."""
        return (
            f"{self._day.value} de {self._month.name_ptbr} de {self._year.value} "
            f"às {self._clock_text()}"
        )

    # Conversion

    def to_unix_nanos(self) -> int:
        """Nanoseconds since 1970-01-01T00:00:00Z (negative before it)."""
        return (self._ordinal() - UNIX_EPOCH_ORDINAL) * NANOS_PER_DAY + self._nanos_of_day()

    def to_timestamp(self) -> int:
        """Whole Unix seconds, rounded toward negative infinity."""
        return self.to_unix_nanos() // NANOS_PER_SECOND

    def to_timestamp_nanos(self) -> int:
        return self.to_unix_nanos()

    def to_datetime(self) -> _dt.datetime:
        """Convert to an aware standard library datetime in UTC.

        Nanoseconds are truncated to microseconds.
        """
        return _dt.datetime(
            self._year.value,
            self._month.number,
            self._day.value,
            self._hour,
            self._minute,
            self._second,
            self._nanosecond // NANOS_PER_MICROSECOND,
            tzinfo=_dt.timezone.utc,
        )

    # Arithmetic

    def _shift(self, nanos: int) -> DateTime:
        ordinal, nanos_of_day = divmod(self._instant() + nanos, NANOS_PER_DAY)
        return DateTime._from_internal(ordinal, nanos_of_day)

    def add_duration(self, duration: Duration) -> DateTime:
        """Return this instant moved forward by duration.

        Raises:
            DateTimeOverflowError: If the result is outside years 1-9999.

        Examples:
            >>> dt = DateTime.from_components(2023, 12, 31, 23, 0)
            >>> dt.add_duration(Duration.from_hours(2))
            DateTime(2024, 1, 1, 1, 0, 0, 0)
        """
        return self._shift(duration.total_nanos)

    def subtract_duration(self, duration: Duration) -> DateTime:
        """Return this instant moved back by duration.

        Raises:
            DateTimeOverflowError: If the result is outside years 1-9999.
        """
        return self._shift(-duration.total_nanos)

    def add_days(self, days: int) -> DateTime:
        return self._shift(days * NANOS_PER_DAY)

    def add_hours(self, hours: int) -> DateTime:
        return self._shift(hours * NANOS_PER_HOUR)

    def add_minutes(self, minutes: int) -> DateTime:
        return self._shift(minutes * NANOS_PER_MINUTE)

    def add_seconds(self, seconds: int) -> DateTime:
        return self._shift(seconds * NANOS_PER_SECOND)

    def duration_since(self, other: DateTime) -> Optional[Duration]:
        """Return the time elapsed from other to this instant.

        Returns None when other is later than this instant.

        Raises:
            DurationOverflowError: If the span exceeds the Duration range.
        """
        diff = self._instant() - other._instant()
        if diff < 0:
            return None
        return Duration.from_nanos(diff)

    def duration_until(self, other: DateTime) -> Optional[Duration]:
        """Return the time from this instant to other, or None if other is earlier."""
        return other.duration_since(self)

    def is_before(self, other: DateTime) -> bool:
        return self._instant() < other._instant()

    def is_after(self, other: DateTime) -> bool:
        return self._instant() > other._instant()

    # Extraction

    def time_since_midnight(self) -> Duration:
        """Time elapsed since 00:00:00 on this day."""
        return Duration.from_nanos(self._nanos_of_day())

    def extract_time(self) -> Duration:
        """Time of day as a Duration; same as ``time_since_midnight``."""
        return self.time_since_midnight()

    def time_until_midnight(self) -> Duration:
        """Time left until the next midnight.

        Always ``24h - time_since_midnight()``, so at exactly 00:00:00 it
        is a full 24 hours.
        """
        return Duration.from_nanos(max(NANOS_PER_DAY - self._nanos_of_day(), 0))

    def time_until_end_of_day(self) -> Duration:
        return self.time_until_midnight()

    def time_since_year_start(self) -> Duration:
        """Time elapsed since January 1 00:00:00 of this year."""
        days = self._ordinal() - _cal.ymd_to_ordinal(self._year.value, 1, 1)
        return Duration.from_nanos(days * NANOS_PER_DAY + self._nanos_of_day())

    def time_since_month_start(self) -> Duration:
        """Time elapsed since 00:00:00 on the first of this month."""
        return Duration.from_nanos((self._day.value - 1) * NANOS_PER_DAY + self._nanos_of_day())

    def time_since_week_start(self) -> Duration:
        """Time elapsed since Monday 00:00:00 of this week."""
        return Duration.from_nanos(self.weekday() * NANOS_PER_DAY + self._nanos_of_day())

    def time_until_month_end(self) -> Duration:
        """Time left until 23:59:59.999999999 on the last day of this month."""
        last_day = self._year.days_in_month(self._month)
        target = _cal.ymd_to_ordinal(self._year.value, self._month.number, last_day)
        return self._until(target)

    def time_until_year_end(self) -> Duration:
        """Time left until 23:59:59.999999999 on December 31 of this year."""
        return self._until(_cal.ymd_to_ordinal(self._year.value, 12, 31))

    def _until(self, target_ordinal: int) -> Duration:
        target = target_ordinal * NANOS_PER_DAY + LAST_NANOS_OF_DAY
        return Duration.from_nanos(target - self._instant())

    # Operators

    def __add__(self, other: object) -> DateTime:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.add_duration(other)

    def __radd__(self, other: object) -> DateTime:
        return self.__add__(other)

    @overload
    def __sub__(self, other: Duration) -> DateTime: ...

    @overload
    def __sub__(self, other: DateTime) -> Duration: ...

    def __sub__(self, other: object) -> Union[DateTime, Duration]:
        """Subtract a Duration, or get the signed Duration between two DateTimes."""
        if isinstance(other, Duration):
            return self.subtract_duration(other)
        if isinstance(other, DateTime):
            return Duration.from_nanos(self._instant() - other._instant())
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._instant() == other._instant()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._instant() < other._instant()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._instant() <= other._instant()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._instant() > other._instant()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._instant() >= other._instant()

    def __hash__(self) -> int:
        return hash(("DateTime", self._instant()))

    def __repr__(self) -> str:
        return (
            f"DateTime({self._year.value}, {self._month.number}, {self._day.value}, "
            f"{self._hour}, {self._minute}, {self._second}, {self._nanosecond})"
        )

    def __str__(self) -> str:
        return self.to_iso8601()


__all__ = ["DateTime"]
