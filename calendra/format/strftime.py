"""strftime-style formatting and parsing for custom date layouts.

Supported Directives:
    %Y - 4-digit year (e.g., 2024)
    %y - 2-digit year (parsed with the century pivot)
    %m - 2-digit month (01-12)
    %d - 2-digit day (01-31)
    %H - 2-digit hour, 24-hour (00-23)
    %M - 2-digit minute (00-59)
    %S - 2-digit second (00-59)
    %f - Nanoseconds (000000000-999999999)
    %B - English month name (January)
    %b - English month abbreviation (Jan)
    %A - English weekday name (Monday), ignored when parsing
    %a - English weekday abbreviation (Mon), ignored when parsing
    %% - Literal %

Functions:
    strftime: Format a DateTime using a strftime-style pattern.
    strptime: Parse a string using a strftime-style pattern.

Examples:
    >>> dt = DateTime.from_components(2024, 3, 15, 14, 30, 45)
    >>> strftime(dt, "%d %B %Y, %H:%M")
    '15 March 2024, 14:30'

    >>> strptime("15 Mar 24", "%d %b %y")
    DateTime(2024, 3, 15, 0, 0, 0, 0)
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from calendra.errors import DateTimeParseError

if TYPE_CHECKING:
    from calendra.core.datetime import DateTime


_SUPPORTED = "%Y, %y, %m, %d, %H, %M, %S, %f, %B, %b, %A, %a, %%"

# Directive -> (group name, pattern) used when parsing
_PARSE_PATTERNS: dict[str, tuple[str, str]] = {
    "%Y": ("year", r"\d{4}"),
    "%y": ("year2", r"\d{2}"),
    "%m": ("month", r"\d{2}"),
    "%d": ("day", r"\d{2}"),
    "%H": ("hour", r"\d{2}"),
    "%M": ("minute", r"\d{2}"),
    "%S": ("second", r"\d{2}"),
    "%f": ("nanosecond", r"\d{9}"),
    "%B": ("month_name", r"[^\W\d_]+"),
    "%b": ("month_abbr", r"[^\W\d_]{3}"),
    "%A": ("weekday_name", r"[^\W\d_]+"),
    "%a": ("weekday_abbr", r"[^\W\d_]{3}"),
}


def strftime(value: DateTime, fmt: str) -> str:
    """Format a DateTime using a strftime-style format string.

    Args:
        value: The DateTime to format.
        fmt: Format string with %-directives.

    Returns:
        Formatted string.

    Raises:
        ValueError: If format contains unsupported directives.
    """
    result = []
    i = 0
    while i < len(fmt):
        if fmt[i] == "%" and i + 1 < len(fmt):
            result.append(_format_directive(value, fmt[i : i + 2]))
            i += 2
        else:
            result.append(fmt[i])
            i += 1

    return "".join(result)


def _format_directive(value: DateTime, directive: str) -> str:
    from calendra.core.day import _WEEKDAYS_EN, _WEEKDAYS_SHORT_EN

    if directive == "%%":
        return "%"
    if directive == "%Y":
        return value.year.to_4digit_text()
    if directive == "%y":
        return value.year.to_2digit_text()
    if directive == "%m":
        return value.month.text
    if directive == "%d":
        return value.day.text
    if directive == "%H":
        return f"{value.hour:02d}"
    if directive == "%M":
        return f"{value.minute:02d}"
    if directive == "%S":
        return f"{value.second:02d}"
    if directive == "%f":
        return f"{value.nanosecond:09d}"
    if directive == "%B":
        return value.month.name_en
    if directive == "%b":
        return value.month.name_short_en
    if directive == "%A":
        return _WEEKDAYS_EN[value.weekday()]
    if directive == "%a":
        return _WEEKDAYS_SHORT_EN[value.weekday()]
    raise ValueError(f"unsupported strftime directive: {directive}. Supported: {_SUPPORTED}")


def strptime(s: str, fmt: str) -> DateTime:
    """Parse a string using a strftime-style format string.

    Missing time components default to 0. Year, month and day are all
    required; month may come from %m, %B or %b, and year from %Y or %y.

    Raises:
        DateTimeParseError: If the string does not match the format, or
            the format lacks a date component.
        ValueError: If format contains unsupported directives.
        CalendraError: Range errors from the matched components.
    """
    from calendra.core.datetime import DateTime
    from calendra.core.month import Month
    from calendra.core.year import Year

    match = re.fullmatch(_format_to_regex(fmt), s, re.ASCII)
    if not match:
        raise DateTimeParseError(f"string {s!r} does not match format {fmt!r}", s)

    groups = match.groupdict()

    if groups.get("year") is not None:
        year = Year.from_number(int(groups["year"]))
    elif groups.get("year2") is not None:
        year = Year.from_2digit_number(int(groups["year2"]))
    else:
        year = None

    if groups.get("month") is not None:
        month = Month.from_number(int(groups["month"]))
    elif groups.get("month_name") is not None:
        month = Month.from_english_name(groups["month_name"])
    elif groups.get("month_abbr") is not None:
        month = Month.from_abbreviation(groups["month_abbr"])
    else:
        month = None

    day = int(groups["day"]) if groups.get("day") is not None else None

    if year is None or month is None or day is None:
        raise DateTimeParseError(
            f"format {fmt!r} must contain year, month and day directives", s
        )

    return DateTime.from_components(
        year.value,
        month.number,
        day,
        int(groups.get("hour") or 0),
        int(groups.get("minute") or 0),
        int(groups.get("second") or 0),
        int(groups.get("nanosecond") or 0),
    )


def _format_to_regex(fmt: str) -> str:
    """Convert a strftime format string to a regex pattern.

    A directive used twice must match the same text both times.

    Raises:
        ValueError: If format contains unsupported directives.
    """
    result = []
    seen: set[str] = set()
    i = 0
    while i < len(fmt):
        if fmt[i] == "%" and i + 1 < len(fmt):
            directive = fmt[i : i + 2]
            if directive == "%%":
                result.append("%")
            elif directive in _PARSE_PATTERNS:
                name, pattern = _PARSE_PATTERNS[directive]
                if name in seen:
                    result.append(f"(?P={name})")
                else:
                    result.append(f"(?P<{name}>{pattern})")
                    seen.add(name)
            else:
                raise ValueError(
                    f"unsupported strptime directive: {directive}. Supported: {_SUPPORTED}"
                )
            i += 2
        else:
            result.append(re.escape(fmt[i]))
            i += 1

    return "".join(result)


__all__ = ["strftime", "strptime"]
