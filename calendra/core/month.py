"""Month class and month-name lookups.

Every month representation (number, two-digit text, English name,
Portuguese name, three-letter abbreviation) is derived from a single
table keyed by month number, so the representations cannot drift apart.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from typing import NamedTuple, Protocol, Union, runtime_checkable

from calendra._internal.validation import is_ascii_digits
from calendra.errors import (
    CalendraError,
    InvalidMonthNameError,
    InvalidMonthNumberError,
)


class _MonthInfo(NamedTuple):
    number: int
    text: str
    name_en: str
    name_ptbr: str
    name_short: str
    name_short_en: str


_MONTH_TABLE: tuple[_MonthInfo, ...] = (
    _MonthInfo(1, "01", "January", "Janeiro", "Jan", "Jan"),
    _MonthInfo(2, "02", "February", "Fevereiro", "Fev", "Feb"),
    _MonthInfo(3, "03", "March", "Março", "Mar", "Mar"),
    _MonthInfo(4, "04", "April", "Abril", "Abr", "Apr"),
    _MonthInfo(5, "05", "May", "Maio", "Mai", "May"),
    _MonthInfo(6, "06", "June", "Junho", "Jun", "Jun"),
    _MonthInfo(7, "07", "July", "Julho", "Jul", "Jul"),
    _MonthInfo(8, "08", "August", "Agosto", "Ago", "Aug"),
    _MonthInfo(9, "09", "September", "Setembro", "Set", "Sep"),
    _MonthInfo(10, "10", "October", "Outubro", "Out", "Oct"),
    _MonthInfo(11, "11", "November", "Novembro", "Nov", "Nov"),
    _MonthInfo(12, "12", "December", "Dezembro", "Dez", "Dec"),
)


def _fold(text: str) -> str:
    """Normalise text for name lookups: trimmed, case- and accent-insensitive."""
    decomposed = unicodedata.normalize("NFKD", text.strip())
    return "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()


_BY_ENGLISH: dict[str, int] = {_fold(info.name_en): info.number for info in _MONTH_TABLE}
_BY_PORTUGUESE: dict[str, int] = {_fold(info.name_ptbr): info.number for info in _MONTH_TABLE}
_BY_ABBREVIATION: dict[str, int] = {
    **{_fold(info.name_short_en): info.number for info in _MONTH_TABLE},
    **{_fold(info.name_short): info.number for info in _MONTH_TABLE},
}


class Month:
    """A month of the year, January (1) through December (12).

    Months are ordered by number. Navigation with ``next`` and
    ``previous`` wraps around the year, and ``months_until`` gives the
    signed difference in month numbers within the same year.

    Examples:
        >>> Month.from_number(3).name_en
        'March'
        >>> Month.from_portuguese_name("marco").number
        3
        >>> Month.from_number(12).next()
        Month(1)
    """

    __slots__ = ("_number",)

    def __init__(self, number: int) -> None:
        """Create a Month from its number.

        Raises:
            InvalidMonthNumberError: If number is not an int in 1-12.
        """
        if isinstance(number, bool) or not isinstance(number, int):
            raise InvalidMonthNumberError(
                f"month must be an integer, got {type(number).__name__}", number
            )
        if number < 1 or number > 12:
            raise InvalidMonthNumberError(
                f"month must be between 1 and 12, got {number}", number
            )
        self._number = number

    # Construction

    @classmethod
    def from_number(cls, n: int) -> Month:
        """Return the month with number n.

        Raises:
            InvalidMonthNumberError: If n is outside 1-12.
        """
        if isinstance(n, int) and not isinstance(n, bool) and 1 <= n <= 12:
            return _ALL_MONTHS[n - 1]
        return cls(n)

    @classmethod
    def from_text(cls, text: str) -> Month:
        """Parse the two-digit form, "01" through "12".

        Raises:
            InvalidMonthNameError: If text is not exactly two digits.
            InvalidMonthNumberError: If the digits are outside 01-12.
        """
        return MonthText(text).to_month()

    @classmethod
    def from_english_name(cls, name: str) -> Month:
        """Parse an English month name, ignoring case."""
        return EnglishMonthName(name).to_month()

    @classmethod
    def from_portuguese_name(cls, name: str) -> Month:
        """Parse a Portuguese month name, ignoring case and accents."""
        return PortugueseMonthName(name).to_month()

    @classmethod
    def from_abbreviation(cls, abbreviation: str) -> Month:
        """Parse an English or Portuguese three-letter abbreviation."""
        return MonthAbbreviation(abbreviation).to_month()

    @classmethod
    def parse(cls, value: Union[Month, MonthValidatable, int, str]) -> Month:
        """Convert any supported month representation into a Month.

        Strings are tried as a month number ("3" or "03"), then as an
        English name, a Portuguese name and an abbreviation.

        Raises:
            InvalidMonthNumberError: For numbers outside 1-12.
            InvalidMonthNameError: If no string representation matches.

        Examples:
            >>> Month.parse("Dezembro")
            Month(12)
            >>> Month.parse("sep")
            Month(9)
        """
        if isinstance(value, Month):
            return value
        if isinstance(value, str):
            stripped = value.strip()
            if is_ascii_digits(stripped, 1, 2):
                return cls.from_number(int(stripped))
            folded = _fold(stripped)
            for table in (_BY_ENGLISH, _BY_PORTUGUESE, _BY_ABBREVIATION):
                if folded in table:
                    return _ALL_MONTHS[table[folded] - 1]
            raise InvalidMonthNameError(
                f"Unrecognised month: {value!r}", value, representation="any"
            )
        if isinstance(value, MonthValidatable):
            return value.to_month()
        return cls.from_number(value)

    @staticmethod
    def is_valid(value: object) -> bool:
        """Return True if value names a month in any supported form.

        Never raises.
        """
        if isinstance(value, MonthValidatable):
            return value.is_valid_month()
        try:
            Month.parse(value)  # type: ignore[arg-type]
        except CalendraError:
            return False
        return True

    @staticmethod
    def all_months() -> tuple[Month, ...]:
        """Return the twelve months in calendar order."""
        return _ALL_MONTHS

    # Accessors

    @property
    def _info(self) -> _MonthInfo:
        return _MONTH_TABLE[self._number - 1]

    @property
    def number(self) -> int:
        return self._number

    @property
    def text(self) -> str:
        """Two-digit form, e.g. "03"."""
        return self._info.text

    @property
    def name_en(self) -> str:
        return self._info.name_en

    @property
    def name_ptbr(self) -> str:
        return self._info.name_ptbr

    @property
    def name_short(self) -> str:
        """Portuguese three-letter abbreviation, e.g. "Fev"."""
        return self._info.name_short

    @property
    def name_short_en(self) -> str:
        """English three-letter abbreviation, e.g. "Feb"."""
        return self._info.name_short_en

    @property
    def quarter(self) -> int:
        """Quarter of the year, 1-4."""
        return (self._number - 1) // 3 + 1

    # Navigation

    def next(self) -> Month:
        """Return the following month, December wrapping to January."""
        return _ALL_MONTHS[self._number % 12]

    def previous(self) -> Month:
        """Return the preceding month, January wrapping to December."""
        return _ALL_MONTHS[(self._number - 2) % 12]

    def months_until(self, other: Month) -> int:
        """Signed number of months from this month to other.

        Examples:
            >>> Month.from_number(3).months_until(Month.from_number(7))
            4
            >>> Month.from_number(7).months_until(Month.from_number(3))
            -4
        """
        return other._number - self._number

    def months_since(self, other: Month) -> int:
        return other.months_until(self)

    def is_before(self, other: Month) -> bool:
        return self._number < other._number

    def is_after(self, other: Month) -> bool:
        return self._number > other._number

    # Dunders

    def __int__(self) -> int:
        return self._number

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Month):
            return NotImplemented
        return self._number == other._number

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Month):
            return NotImplemented
        return self._number < other._number

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Month):
            return NotImplemented
        return self._number <= other._number

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Month):
            return NotImplemented
        return self._number > other._number

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Month):
            return NotImplemented
        return self._number >= other._number

    def __hash__(self) -> int:
        return hash(("Month", self._number))

    def __repr__(self) -> str:
        return f"Month({self._number})"

    def __str__(self) -> str:
        return self.name_en


_ALL_MONTHS: tuple[Month, ...] = tuple(Month(info.number) for info in _MONTH_TABLE)


@runtime_checkable
class MonthValidatable(Protocol):
    """Anything that can be checked for, and converted into, a Month."""

    def is_valid_month(self) -> bool: ...

    def to_month(self) -> Month: ...


@dataclass(frozen=True)
class MonthNumber:
    """A month given as its number, 1-12."""

    value: int

    def is_valid_month(self) -> bool:
        return (
            isinstance(self.value, int)
            and not isinstance(self.value, bool)
            and 1 <= self.value <= 12
        )

    def to_month(self) -> Month:
        return Month.from_number(self.value)


@dataclass(frozen=True)
class MonthText:
    """A month given as exactly two digits, "01"-"12"."""

    value: str

    def is_valid_month(self) -> bool:
        return isinstance(self.value, str) and self.value in _BY_TEXT

    def to_month(self) -> Month:
        if not isinstance(self.value, str) or not is_ascii_digits(self.value, 2):
            raise InvalidMonthNameError(
                f"month text must be two digits, got {self.value!r}",
                self.value,
                representation="text",
            )
        return Month.from_number(int(self.value))


class _NamedMonth:
    """Shared lookup for the name-based month representations."""

    _table: dict[str, int]
    _representation: str

    value: str

    def _lookup(self) -> int | None:
        if not isinstance(self.value, str):
            return None
        return self._table.get(_fold(self.value))

    def is_valid_month(self) -> bool:
        return self._lookup() is not None

    def to_month(self) -> Month:
        number = self._lookup()
        if number is None:
            raise InvalidMonthNameError(
                f"Invalid {self._representation} month name: {self.value!r}",
                self.value,
                representation=self._representation,
            )
        return _ALL_MONTHS[number - 1]


@dataclass(frozen=True)
class EnglishMonthName(_NamedMonth):
    """A full English month name, e.g. "March"."""

    value: str
    _table = _BY_ENGLISH
    _representation = "english"


@dataclass(frozen=True)
class PortugueseMonthName(_NamedMonth):
    """A full Portuguese month name, e.g. "Março" (accents optional)."""

    value: str
    _table = _BY_PORTUGUESE
    _representation = "portuguese"


@dataclass(frozen=True)
class MonthAbbreviation(_NamedMonth):
    """A three-letter abbreviation in English or Portuguese."""

    value: str
    _table = _BY_ABBREVIATION
    _representation = "abbreviation"


_BY_TEXT: dict[str, int] = {info.text: info.number for info in _MONTH_TABLE}


__all__ = [
    "Month",
    "MonthValidatable",
    "MonthNumber",
    "MonthText",
    "EnglishMonthName",
    "PortugueseMonthName",
    "MonthAbbreviation",
]
