"""Fluent builder for DateTime values."""

from __future__ import annotations

import logging
from typing import Optional, Union

from calendra._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from calendra._internal.validation import (
    TIME_COMPONENT_LIMITS,
    check_component,
    validate_time_of_day,
)
from calendra.clock import Clock, resolve_clock
from calendra.core.datetime import DateTime
from calendra.core.day import Day
from calendra.core.duration import Duration
from calendra.core.month import Month
from calendra.core.year import Year
from calendra.errors import (
    InvalidDayError,
    InvalidTimeComponentError,
    MissingDateComponentError,
)

logger = logging.getLogger(__name__)


class DateTimeBuilder:
    """Mutable accumulator that assembles a DateTime step by step.

    Every setter returns the builder, so calls can be chained. The time
    of day is kept as an offset from midnight and defaults to zero; the
    date components are required.

    Examples:
        >>> DateTimeBuilder().date(2024, 3, 15).time(14, 30, 45).build()
        DateTime(2024, 3, 15, 14, 30, 45, 0)

        >>> DateTimeBuilder().year(2024).month("Março").day(1).at_noon().build()
        DateTime(2024, 3, 1, 12, 0, 0, 0)

        >>> DateTimeBuilder().build()
        Traceback (most recent call last):
        ...
        MissingDateComponentError: Year is required
    """

    __slots__ = ("_year", "_month", "_day", "_time_offset")

    def __init__(self) -> None:
        self._year: Optional[Year] = None
        self._month: Optional[Month] = None
        self._day: Optional[int] = None
        self._time_offset: Duration = Duration.zero()

    @classmethod
    def today(cls, clock: Optional[Clock] = None) -> DateTimeBuilder:
        """Start a builder on the current UTC date, at midnight."""
        now = DateTime.now_utc(resolve_clock(clock))
        return cls().date(now.year, now.month, now.day)

    @classmethod
    def tomorrow(cls, clock: Optional[Clock] = None) -> DateTimeBuilder:
        """Start a builder on the day after the current UTC date, at midnight."""
        now = DateTime.now_utc(resolve_clock(clock)).add_days(1)
        return cls().date(now.year, now.month, now.day)

    # Date components

    def year(self, year: Union[Year, int, str]) -> DateTimeBuilder:
        """Set the year.

        Raises:
            InvalidYearError: If a year number is outside 1-9999.
        """
        self._year = Year.parse(year)
        return self

    def month(self, month: Union[Month, int, str]) -> DateTimeBuilder:
        """Set the month from any representation ``Month.parse`` accepts."""
        self._month = Month.parse(month)
        return self

    def day(self, day: Union[Day, int]) -> DateTimeBuilder:
        """Set the day number; it is checked against year and month in ``build``.

        Raises:
            InvalidDayError: If day is not a Day or an integer.
        """
        if isinstance(day, Day):
            self._day = day.value
            return self
        if isinstance(day, bool) or not isinstance(day, int):
            raise InvalidDayError(
                f"day must be an integer, got {type(day).__name__}",
                day,
                self._year.value if self._year is not None else None,
                self._month.number if self._month is not None else None,
            )
        self._day = day
        return self

    def date(
        self,
        year: Union[Year, int],
        month: Union[Month, int, str],
        day: Union[Day, int],
    ) -> DateTimeBuilder:
        """Set year, month and day at once, validating the date immediately.

        Raises:
            InvalidYearError, InvalidMonthNumberError, InvalidDayError:
                If the date does not exist.
        """
        y = Year.parse(year)
        m = Month.parse(month)
        d = Day.from_number(day.value if isinstance(day, Day) else day, y, m)
        self._year, self._month, self._day = y, m, d.value
        return self

    # Time components

    def time(self, hour: int, minute: int, second: int) -> DateTimeBuilder:
        """Set the time of day to hour:minute:second.

        Raises:
            InvalidTimeComponentError: If a component is out of range.
        """
        validate_time_of_day(hour, minute, second, 0)
        self._time_offset = Duration(hours=hour, minutes=minute, seconds=second)
        return self

    def at_time(self, offset: Duration) -> DateTimeBuilder:
        """Set the time of day as an offset from midnight.

        Raises:
            InvalidTimeComponentError: If offset is negative or a day or longer.
        """
        if offset.is_negative or offset.total_nanos >= NANOS_PER_DAY:
            raise InvalidTimeComponentError(
                f"time of day must be within [0, 24h), got {offset.to_readable()}", offset
            )
        self._time_offset = offset
        return self

    def at_hour(self, hour: int) -> DateTimeBuilder:
        """Set the time of day to the start of hour."""
        return self.time(hour, 0, 0)

    def at_noon(self) -> DateTimeBuilder:
        return self.at_hour(12)

    def at_midnight(self) -> DateTimeBuilder:
        self._time_offset = Duration.zero()
        return self

    def hour(self, hour: int) -> DateTimeBuilder:
        """Replace only the hour of the current time of day."""
        return self._replace_component("hour", hour, NANOS_PER_HOUR)

    def minute(self, minute: int) -> DateTimeBuilder:
        return self._replace_component("minute", minute, NANOS_PER_MINUTE)

    def second(self, second: int) -> DateTimeBuilder:
        return self._replace_component("second", second, NANOS_PER_SECOND)

    def nanosecond(self, nanosecond: int) -> DateTimeBuilder:
        return self._replace_component("nanosecond", nanosecond, 1)

    def _replace_component(self, name: str, value: int, unit: int) -> DateTimeBuilder:
        min_val, max_val = TIME_COMPONENT_LIMITS[name]
        check_component(name, value, min_val, max_val)
        current = self._time_offset.total_nanos
        old = (current // unit) % (max_val + 1)
        self._time_offset = Duration.from_nanos(current + (value - old) * unit)
        return self

    # Output

    def build(self) -> DateTime:
        """Assemble the DateTime.

        Raises:
            MissingDateComponentError: If year, month or day was never set.
            InvalidDayError: If the day does not exist in the month.
        """
        if self._year is None:
            raise MissingDateComponentError("year")
        if self._month is None:
            raise MissingDateComponentError("month")
        if self._day is None:
            raise MissingDateComponentError("day")
        start = DateTime.from_date_start_of_day(self._year, self._month, self._day)
        result = start.add_duration(self._time_offset)
        logger.debug("Built %s", result)
        return result

    def __repr__(self) -> str:
        return (
            f"DateTimeBuilder(year={self._year!r}, month={self._month!r}, "
            f"day={self._day!r}, time_offset={self._time_offset!r})"
        )


__all__ = ["DateTimeBuilder"]
