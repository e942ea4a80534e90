"""Year class representing a calendar year.

This module provides the Year value type, including the two-digit year
pivot rule used by compact date formats such as YYMM.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Union

from calendra._internal import calendar as _cal
from calendra._internal.constants import (
    CURRENT_CENTURY_START,
    MAX_YEAR,
    MIN_YEAR,
    PIVOT_YEAR,
    PREVIOUS_CENTURY_START,
)
from calendra._internal.validation import is_ascii_digits
from calendra.errors import (
    InvalidQuarterError,
    InvalidTwoDigitYearError,
    InvalidYearError,
    YearOverflowError,
    YearParseError,
)

if TYPE_CHECKING:
    from calendra.core.month import Month

logger = logging.getLogger(__name__)


class Year:
    """A calendar year in the proleptic Gregorian calendar.

    Years are restricted to 1-9999 so that every fixed-width date format
    can print them as four digits.

    Attributes:
        value: The four-digit year number.

    Examples:
        >>> Year.from_number(2024).is_leap_year()
        True
        >>> Year.from_2digit_number(24)
        Year(2024)
        >>> Year.from_2digit_number(99)
        Year(1999)
    """

    __slots__ = ("_value",)

    def __init__(self, value: int) -> None:
        """Create a Year, validating the range.

        Raises:
            InvalidYearError: If value is not an int in 1-9999.
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidYearError(
                f"year must be an integer, got {type(value).__name__}", value
            )
        if value < MIN_YEAR or value > MAX_YEAR:
            raise InvalidYearError(
                f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {value}", value
            )
        self._value = value

    @classmethod
    def from_number(cls, n: int) -> Year:
        """Create a Year from a full year number.

        Raises:
            InvalidYearError: If n is outside 1-9999.
        """
        return cls(n)

    @classmethod
    def from_2digit_number(cls, n: int, *, pivot: int = PIVOT_YEAR) -> Year:
        """Resolve a two-digit year using the century pivot.

        Values below ``pivot`` resolve into the 2000s, the rest into the
        1900s.

        Args:
            n: Two-digit year, 0-99.
            pivot: First two-digit value that maps to the 1900s.

        Returns:
            The resolved four-digit Year.

        Raises:
            InvalidTwoDigitYearError: If n is outside 0-99.

        Examples:
            >>> Year.from_2digit_number(5)
            Year(2005)
            >>> Year.from_2digit_number(50)
            Year(1950)
            >>> Year.from_2digit_number(50, pivot=70)
            Year(2050)
        """
        if isinstance(n, bool) or not isinstance(n, int) or n < 0 or n > 99:
            raise InvalidTwoDigitYearError(
                f"two-digit year must be between 0 and 99, got {n!r}", n
            )
        century = CURRENT_CENTURY_START if n < pivot else PREVIOUS_CENTURY_START
        resolved = century + n
        logger.debug("Two-digit year %02d resolved to %d (pivot %d)", n, resolved, pivot)
        return cls(resolved)

    @classmethod
    def from_text(cls, text: str, *, pivot: int = PIVOT_YEAR) -> Year:
        """Parse a year from text.

        Four digits are a full year; one or two digits go through the
        two-digit pivot.

        Raises:
            YearParseError: If text is not 1, 2 or 4 ASCII digits.
            InvalidYearError: If the four-digit value is 0000.
        """
        stripped = text.strip() if isinstance(text, str) else text
        if not isinstance(stripped, str) or not is_ascii_digits(stripped, 1, 2, 4):
            raise YearParseError(f"Invalid year text: {text!r}", text)
        if len(stripped) == 4:
            return cls.from_number(int(stripped))
        return cls.from_2digit_number(int(stripped), pivot=pivot)

    @classmethod
    def parse(cls, value: Union[Year, int, str]) -> Year:
        """Convert any supported year representation into a Year."""
        if isinstance(value, Year):
            return value
        if isinstance(value, str):
            return cls.from_text(value)
        return cls.from_number(value)

    @property
    def value(self) -> int:
        """The year number."""
        return self._value

    def is_leap_year(self) -> bool:
        """Return True if this is a Gregorian leap year."""
        return _cal.is_leap_year(self._value)

    def days_in_month(self, month: Union[Month, int]) -> int:
        """Return the number of days in the given month of this year.

        Args:
            month: A Month or a month number.

        Raises:
            InvalidMonthNumberError: If a month number is outside 1-12.

        Examples:
            >>> Year(2024).days_in_month(2)
            29
            >>> Year(2023).days_in_month(2)
            28
        """
        from calendra.core.month import Month

        return _cal.days_in_month(self._value, Month.parse(month).number)

    def days_in_year(self) -> int:
        """Return 366 for leap years, 365 otherwise."""
        return _cal.days_in_year(self._value)

    def next(self) -> Year:
        """Return the following year.

        Raises:
            YearOverflowError: If this is the last supported year.
        """
        return self.add_years(1)

    def previous(self) -> Year:
        """Return the preceding year.

        Raises:
            YearOverflowError: If this is the first supported year.
        """
        return self.subtract_years(1)

    def add_years(self, years: int) -> Year:
        """Return the year ``years`` later (negative moves back).

        Raises:
            YearOverflowError: If the result is outside 1-9999.
        """
        result = self._value + years
        if result < MIN_YEAR or result > MAX_YEAR:
            raise YearOverflowError(
                f"year {self._value} + {years} is outside {MIN_YEAR}-{MAX_YEAR}", result
            )
        return Year(result)

    def subtract_years(self, years: int) -> Year:
        return self.add_years(-years)

    def is_before(self, other: Year) -> bool:
        return self._value < other._value

    def is_after(self, other: Year) -> bool:
        return self._value > other._value

    def years_until(self, other: Year) -> int:
        """Signed number of years from this year to other."""
        return other._value - self._value

    def years_since(self, other: Year) -> int:
        """Signed number of years from other to this year."""
        return self._value - other._value

    def to_2digit_text(self) -> str:
        """Return the last two digits, zero-padded."""
        return f"{self._value % 100:02d}"

    def to_4digit_text(self) -> str:
        """Return the year as four zero-padded digits."""
        return f"{self._value:04d}"

    @staticmethod
    def quarter_of(month: Union[Month, int]) -> int:
        """Return the quarter (1-4) a month falls in."""
        from calendra.core.month import Month

        return Month.parse(month).quarter

    @staticmethod
    def quarter_months(quarter: int) -> tuple[Month, Month, Month]:
        """Return the three months of a quarter.

        Raises:
            InvalidQuarterError: If quarter is outside 1-4.
        """
        from calendra.core.month import Month

        if isinstance(quarter, bool) or not isinstance(quarter, int) or not 1 <= quarter <= 4:
            raise InvalidQuarterError(
                f"quarter must be between 1 and 4, got {quarter!r}", quarter
            )
        first = (quarter - 1) * 3 + 1
        return (
            Month.from_number(first),
            Month.from_number(first + 1),
            Month.from_number(first + 2),
        )

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._value == other._value

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._value < other._value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._value <= other._value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._value > other._value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._value >= other._value

    def __hash__(self) -> int:
        return hash(("Year", self._value))

    def __repr__(self) -> str:
        return f"Year({self._value})"

    def __str__(self) -> str:
        return self.to_4digit_text()


__all__ = ["Year"]
