"""Core value types.

This module exports the calendar value types:
    - Year: A calendar year, with the two-digit pivot rule
    - Month: A month of the year and its names
    - Day: A day of the month
    - Duration: A signed span of time
    - DateTime: A date and time of day
    - DateTimeBuilder: Step-by-step DateTime construction
"""

from __future__ import annotations

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

__all__: list[str] = [
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
]
