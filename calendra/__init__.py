"""Calendra: calendar value types with multi-format parsing.

Calendra provides immutable years, months, days, durations and
date-times with nanosecond precision, plus parsing and formatting for
the common fixed date layouts (ISO 8601, YYYYMMDD, DD/MM/YYYY, YYMM and
friends) and English and Brazilian Portuguese names.

Core Types:
    Year: Calendar year, including the two-digit century pivot
    Month: Month of the year with English and Portuguese names
    Day: Day of the month, validated against its year and month
    Duration: Signed time span with nanosecond precision
    DateTime: Naive UTC date and time of day
    DateTimeBuilder: Step-by-step DateTime construction

Clocks:
    Clock: Protocol for sources of the current time
    SystemClock: The real-time clock
    FixedClock: A frozen clock for tests

Exceptions:
    CalendraError: Base exception
    ValidationError: Value out of range
    ParseError: Text could not be parsed
    FormatLengthError: Fixed-width text of the wrong length
    MissingComponentError: Builder missing a required component
    OverflowError: Arithmetic outside the representable range

Example:
    >>> from calendra import DateTime, Duration
    >>> dt = DateTime.parse("15/03/2024")
    >>> (dt + Duration.from_text("1h30m")).to_readable_en()
    'March 15, 2024 at 01:30:00'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from calendra.core.year import Year
from calendra.core.month import (
    EnglishMonthName,
    Month,
    MonthAbbreviation,
    MonthNumber,
    MonthText,
    MonthValidatable,
    PortugueseMonthName,
)
from calendra.core.day import Day
from calendra.core.duration import Duration
from calendra.core.datetime import DateTime
from calendra.core.builder import DateTimeBuilder

# Clocks
from calendra.clock import Clock, FixedClock, SystemClock

# Exceptions
from calendra.errors import (
    CalendraError,
    DateTimeError,
    DayError,
    DurationError,
    FormatLengthError,
    MissingComponentError,
    MonthError,
    OverflowError,
    ParseError,
    ValidationError,
    YearError,
)

# Formats
from calendra.format import DateTimeFormat

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Year",
    "Month",
    "MonthValidatable",
    "MonthNumber",
    "MonthText",
    "EnglishMonthName",
    "PortugueseMonthName",
    "MonthAbbreviation",
    "Day",
    "Duration",
    "DateTime",
    "DateTimeBuilder",
    # Clocks
    "Clock",
    "SystemClock",
    "FixedClock",
    # Formats
    "DateTimeFormat",
    # Exceptions
    "CalendraError",
    "ValidationError",
    "ParseError",
    "FormatLengthError",
    "MissingComponentError",
    "OverflowError",
    "YearError",
    "MonthError",
    "DayError",
    "DurationError",
    "DateTimeError",
]
