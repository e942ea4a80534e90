"""Day-of-month value type."""

from __future__ import annotations

from typing import Union

from calendra._internal import calendar as _cal
from calendra._internal.validation import is_ascii_digits
from calendra.core.month import Month
from calendra.core.year import Year
from calendra.errors import DayParseError, InvalidDayError

_WEEKDAYS_EN = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
_WEEKDAYS_PTBR = (
    "Segunda-feira",
    "Terça-feira",
    "Quarta-feira",
    "Quinta-feira",
    "Sexta-feira",
    "Sábado",
    "Domingo",
)
_WEEKDAYS_SHORT_EN = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_WEEKDAYS_SHORT_PTBR = ("Seg", "Ter", "Qua", "Qui", "Sex", "Sáb", "Dom")


class Day:
    """A day of the month, validated against a specific year and month.

    Once constructed, a Day is just a bounded number: it keeps no
    reference to the year and month it was checked against. Use
    ``is_valid_for`` to re-check it in another month.

    Examples:
        >>> Day.from_number(29, Year(2024), Month.from_number(2))
        Day(29)
        >>> Day.from_number(29, Year(2023), Month.from_number(2))
        Traceback (most recent call last):
        ...
        InvalidDayError: day 29 invalid for February 2023
    """

    __slots__ = ("_value",)

    def __init__(self, value: int, year: Union[Year, int], month: Union[Month, int]) -> None:
        y = Year.parse(year)
        m = Month.parse(month)
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidDayError(
                f"day must be an integer, got {type(value).__name__}",
                value,
                y.value,
                m.number,
            )
        if value < 1 or value > y.days_in_month(m):
            raise InvalidDayError(
                f"day {value} invalid for {m.name_en} {y.value}", value, y.value, m.number
            )
        self._value = value

    @classmethod
    def from_number(cls, n: int, year: Union[Year, int], month: Union[Month, int]) -> Day:
        """Create a Day, checking it exists in the given month.

        Raises:
            InvalidDayError: If n < 1 or n exceeds the month length.
        """
        return cls(n, year, month)

    @classmethod
    def from_text(cls, text: str, year: Union[Year, int], month: Union[Month, int]) -> Day:
        """Parse one or two ASCII digits as a day of the given month.

        Raises:
            DayParseError: If text is not 1-2 digits.
            InvalidDayError: If the number does not exist in the month.
        """
        if not isinstance(text, str) or not is_ascii_digits(text.strip(), 1, 2):
            raise DayParseError(f"Invalid day text: {text!r}", text)
        return cls(int(text.strip()), year, month)

    @classmethod
    def _from_internal(cls, value: int) -> Day:
        """Create a Day without validation, for values already checked."""
        instance = object.__new__(cls)
        instance._value = value
        return instance

    @property
    def value(self) -> int:
        return self._value

    @property
    def text(self) -> str:
        """Two-digit form, e.g. "05"."""
        return f"{self._value:02d}"

    @property
    def ordinal_en(self) -> str:
        """English ordinal, e.g. "1st", "22nd", "13th"."""
        n = self._value
        if 11 <= n % 100 <= 13:
            suffix = "th"
        else:
            suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
        return f"{n}{suffix}"

    @property
    def ordinal_ptbr(self) -> str:
        """Portuguese ordinal, e.g. "1º"."""
        return f"{self._value}º"

    def is_valid_for(self, year: Union[Year, int], month: Union[Month, int]) -> bool:
        """Return True if this day exists in the given month."""
        return self._value <= Year.parse(year).days_in_month(month)

    def weekday(self, year: Union[Year, int], month: Union[Month, int]) -> int:
        """Day of week for this day in the given month, Monday=0."""
        return _cal.weekday(Year.parse(year).value, Month.parse(month).number, self._value)

    def weekday_name_en(self, year: Union[Year, int], month: Union[Month, int]) -> str:
        return _WEEKDAYS_EN[self.weekday(year, month)]

    def weekday_name_ptbr(self, year: Union[Year, int], month: Union[Month, int]) -> str:
        return _WEEKDAYS_PTBR[self.weekday(year, month)]

    def weekday_short_en(self, year: Union[Year, int], month: Union[Month, int]) -> str:
        return _WEEKDAYS_SHORT_EN[self.weekday(year, month)]

    def weekday_short_ptbr(self, year: Union[Year, int], month: Union[Month, int]) -> str:
        return _WEEKDAYS_SHORT_PTBR[self.weekday(year, month)]

    def __int__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Day):
            return NotImplemented
        return self._value == other._value

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Day):
            return NotImplemented
        return self._value < other._value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Day):
            return NotImplemented
        return self._value <= other._value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Day):
            return NotImplemented
        return self._value > other._value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Day):
            return NotImplemented
        return self._value >= other._value

    def __hash__(self) -> int:
        return hash(("Day", self._value))

    def __repr__(self) -> str:
        return f"Day({self._value})"

    def __str__(self) -> str:
        return self.text


__all__ = ["Day"]
