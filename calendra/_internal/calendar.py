"""Calendar utilities for Calendra.

This module provides internal functions for proleptic Gregorian calendar
calculations: leap years, month lengths and ordinal day numbers.

Ordinal 1 is 0001-01-01. Only years 1-9999 are supported, so every
ordinal handled here is positive.

This module is not part of the public API.
"""

from __future__ import annotations

import calendar as _stdlib_calendar

from calendra._internal.constants import DAYS_IN_MONTH, MAX_YEAR, MIN_YEAR


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check.

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month."""
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (days since year 1).

    Args:
        year: The year (1-9999).
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        The ordinal day number, 1 for 0001-01-01.
    """
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert ordinal (days since year 1) to year, month, day.

    Args:
        ordinal: The ordinal day number (ordinal 1 = 0001-01-01).

    Returns:
        Tuple of (year, month, day).

    Raises:
        ValueError: If ordinal is not positive.
    """
    if ordinal < 1:
        raise ValueError(f"ordinal must be positive, got {ordinal}")

    # n is 0-indexed (n=0 means ordinal=1)
    n = ordinal - 1

    # 400-year cycles: each has 146097 days
    n400, n = divmod(n, 146097)
    # 100-year cycles within the 400
    n100, n = divmod(n, 36524)
    # 4-year cycles within the 100
    n4, n = divmod(n, 1461)
    # Single years within the 4-year cycle
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # December 31 of a leap year at the end of a cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month, day = _doy_to_md(year, n + 1)
    return (year, month, day)


def _doy_to_md(year: int, doy: int) -> tuple[int, int]:
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


def weekday(year: int, month: int, day: int) -> int:
    """Return the day of week, Monday=0 through Sunday=6."""
    return _stdlib_calendar.weekday(year, month, day)


MIN_ORDINAL: int = ymd_to_ordinal(MIN_YEAR, 1, 1)
MAX_ORDINAL: int = ymd_to_ordinal(MAX_YEAR, 12, 31)


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "days_before_month",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "weekday",
    "MIN_ORDINAL",
    "MAX_ORDINAL",
]
