"""Fixed date layouts and their parsers.

Each DateTimeFormat member has one formatter and one parser. Formatting
is fixed-width (years are always four digits, ISO 8601 always carries
nine fractional digits and a ``Z``). Parsing is slightly more lenient:

* ISO 8601 accepts 0-9 fractional digits, an optional ``Z`` and a bare
  date.
* Slashed layouts accept one- or two-digit day and month.
* Date-only layouts produce midnight.

Examples:
    >>> dt = parse_datetime("15/03/2024", DateTimeFormat.DD_MM_YYYY)
    >>> format_datetime(dt, DateTimeFormat.YYYYMMDD)
    '20240315'
"""

from __future__ import annotations

import re
from enum import Enum
from typing import TYPE_CHECKING, Callable, Optional

from calendra._internal.constants import PIVOT_YEAR
from calendra._internal.validation import is_ascii_digits
from calendra.errors import DateTimeFormatLengthError, DateTimeParseError

if TYPE_CHECKING:
    from calendra.core.datetime import DateTime


class DateTimeFormat(Enum):
    """The built-in date layouts.

    The value is a human-readable pattern for the layout.
    """

    ISO8601 = "YYYY-MM-DDTHH:MM:SS.nnnnnnnnnZ"
    YYYYMMDD = "YYYYMMDD"
    YYYY_MM_DD = "YYYY-MM-DD"
    DD_MM_YYYY = "DD/MM/YYYY"
    MM_DD_YYYY = "MM/DD/YYYY"
    DDMMYYYY = "DDMMYYYY"
    MMDDYYYY = "MMDDYYYY"
    YYMM = "YYMM"

    @property
    def is_fixed_width(self) -> bool:
        """True for the all-digit layouts that require an exact length."""
        return self in _DIGIT_LAYOUTS

    def format(self, value: DateTime) -> str:
        """Format value in this layout."""
        return format_datetime(value, self)

    def parse(self, text: str) -> DateTime:
        """Parse text in this layout."""
        return parse_datetime(text, self)


# Order in which DateTime.parse tries the layouts. YYMM is last and is
# only attempted for exactly four ASCII digits.
AUTO_DETECT_ORDER: tuple[DateTimeFormat, ...] = (
    DateTimeFormat.ISO8601,
    DateTimeFormat.YYYY_MM_DD,
    DateTimeFormat.DD_MM_YYYY,
    DateTimeFormat.MM_DD_YYYY,
    DateTimeFormat.YYYYMMDD,
    DateTimeFormat.DDMMYYYY,
    DateTimeFormat.MMDDYYYY,
    DateTimeFormat.YYMM,
)

_ISO_RE = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})"
    r"(?:T(\d{2}):(\d{2}):(\d{2})(?:\.(\d{1,9}))?Z?)?",
    re.ASCII,
)
_DASHED_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)
_SLASHED_RE = re.compile(r"(\d{1,2})/(\d{1,2})/(\d{4})", re.ASCII)

# Digit layout -> (length, slices for year, month, day). YYMM has no day
# digits and a two-digit year.
_DIGIT_LAYOUTS: dict[DateTimeFormat, tuple[int, slice, slice, Optional[slice]]] = {
    DateTimeFormat.YYYYMMDD: (8, slice(0, 4), slice(4, 6), slice(6, 8)),
    DateTimeFormat.DDMMYYYY: (8, slice(4, 8), slice(2, 4), slice(0, 2)),
    DateTimeFormat.MMDDYYYY: (8, slice(4, 8), slice(0, 2), slice(2, 4)),
    DateTimeFormat.YYMM: (4, slice(0, 2), slice(2, 4), None),
}


# Formatting


def format_datetime(value: DateTime, fmt: DateTimeFormat) -> str:
    """Format a DateTime in one of the built-in layouts.

    Examples:
        >>> dt = DateTime.from_components(2024, 3, 15, 14, 30, 45)
        >>> format_datetime(dt, DateTimeFormat.ISO8601)
        '2024-03-15T14:30:45.000000000Z'
        >>> format_datetime(dt, DateTimeFormat.YYMM)
        '2403'
    """
    return _FORMATTERS[fmt](value)


def _format_iso8601(value: DateTime) -> str:
    return (
        f"{_format_yyyy_mm_dd(value)}T"
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
        f".{value.nanosecond:09d}Z"
    )


def _format_yyyy_mm_dd(value: DateTime) -> str:
    return f"{value.year.to_4digit_text()}-{value.month.text}-{value.day.text}"


_FORMATTERS: dict[DateTimeFormat, Callable[[DateTime], str]] = {
    DateTimeFormat.ISO8601: _format_iso8601,
    DateTimeFormat.YYYY_MM_DD: _format_yyyy_mm_dd,
    DateTimeFormat.YYYYMMDD: lambda v: f"{v.year.to_4digit_text()}{v.month.text}{v.day.text}",
    DateTimeFormat.DD_MM_YYYY: lambda v: f"{v.day.text}/{v.month.text}/{v.year.to_4digit_text()}",
    DateTimeFormat.MM_DD_YYYY: lambda v: f"{v.month.text}/{v.day.text}/{v.year.to_4digit_text()}",
    DateTimeFormat.DDMMYYYY: lambda v: f"{v.day.text}{v.month.text}{v.year.to_4digit_text()}",
    DateTimeFormat.MMDDYYYY: lambda v: f"{v.month.text}{v.day.text}{v.year.to_4digit_text()}",
    DateTimeFormat.YYMM: lambda v: f"{v.year.to_2digit_text()}{v.month.text}",
}


# Parsing


def parse_datetime(text: str, fmt: DateTimeFormat, *, pivot: int = PIVOT_YEAR) -> DateTime:
    """Parse text in one of the built-in layouts.

    Surrounding whitespace is ignored.

    Args:
        text: The string to parse.
        fmt: The layout to expect.
        pivot: Two-digit year pivot, used by YYMM only.

    Raises:
        DateTimeFormatLengthError: Digit layout given the wrong number of
            characters.
        DateTimeParseError: Text does not have the layout's shape.
        CalendraError: A component is out of range (for example
            InvalidMonthNumberError for month 13).
    """
    if not isinstance(text, str):
        raise DateTimeParseError(
            f"expected a string for {fmt.name}, got {type(text).__name__}", text
        )
    stripped = text.strip()
    if fmt in _DIGIT_LAYOUTS:
        return _parse_digits(stripped, fmt, pivot)
    if fmt is DateTimeFormat.ISO8601:
        return _parse_iso8601(stripped)
    if fmt is DateTimeFormat.YYYY_MM_DD:
        match = _DASHED_RE.fullmatch(stripped)
        if match is None:
            raise _mismatch(text, fmt)
        year, month, day = match.groups()
        return _build(int(year), int(month), int(day))
    if fmt is DateTimeFormat.DD_MM_YYYY or fmt is DateTimeFormat.MM_DD_YYYY:
        match = _SLASHED_RE.fullmatch(stripped)
        if match is None:
            raise _mismatch(text, fmt)
        first, second, year = match.groups()
        if fmt is DateTimeFormat.DD_MM_YYYY:
            return _build(int(year), int(second), int(first))
        return _build(int(year), int(first), int(second))
    raise ValueError(f"unsupported date format: {fmt!r}")


def _parse_iso8601(text: str) -> DateTime:
    match = _ISO_RE.fullmatch(text)
    if match is None:
        raise _mismatch(text, DateTimeFormat.ISO8601)
    year, month, day, hour, minute, second, fraction = match.groups()
    nanosecond = int(fraction.ljust(9, "0")) if fraction else 0
    return _build(
        int(year),
        int(month),
        int(day),
        int(hour or 0),
        int(minute or 0),
        int(second or 0),
        nanosecond,
    )


def _parse_digits(text: str, fmt: DateTimeFormat, pivot: int) -> DateTime:
    from calendra.core.year import Year

    length, year_slice, month_slice, day_slice = _DIGIT_LAYOUTS[fmt]
    if len(text) != length:
        raise DateTimeFormatLengthError(
            f"{fmt.name} expects {length} characters, got {len(text)} in {text!r}", text
        )
    if not is_ascii_digits(text):
        raise DateTimeParseError(f"{fmt.name} expects only digits, got {text!r}", text)

    if day_slice is None:
        year = Year.from_2digit_number(int(text[year_slice]), pivot=pivot).value
        return _build(year, int(text[month_slice]), 1)
    return _build(int(text[year_slice]), int(text[month_slice]), int(text[day_slice]))


def _build(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    nanosecond: int = 0,
) -> DateTime:
    from calendra.core.datetime import DateTime

    return DateTime.from_components(year, month, day, hour, minute, second, nanosecond)


def _mismatch(text: str, fmt: DateTimeFormat) -> DateTimeParseError:
    return DateTimeParseError(f"{text!r} does not match {fmt.value}", text)


__all__ = [
    "DateTimeFormat",
    "AUTO_DETECT_ORDER",
    "format_datetime",
    "parse_datetime",
]
