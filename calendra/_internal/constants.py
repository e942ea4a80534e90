"""Internal constants for Calendra.

These constants define the limits, unit conversions and the two-digit
year pivot used throughout the library. This module is not part of the
public API.
"""

from __future__ import annotations

# Time unit conversions
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_MILLISECOND: int = 1_000_000
NANOS_PER_SECOND: int = 1_000_000_000
NANOS_PER_MINUTE: int = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: int = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY: int = 24 * NANOS_PER_HOUR  # 86_400_000_000_000


# Year limits. Fixed-width formats print four digits.
MIN_YEAR: int = 1
MAX_YEAR: int = 9999

# Two-digit years below the pivot land in CURRENT_CENTURY_START,
# the rest in PREVIOUS_CENTURY_START.
PIVOT_YEAR: int = 50
CURRENT_CENTURY_START: int = 2000
PREVIOUS_CENTURY_START: int = 1900

# Durations are signed 64-bit nanosecond counts
DURATION_MIN_NANOS: int = -(2**63)
DURATION_MAX_NANOS: int = 2**63 - 1

# Last representable instant of a day
LAST_NANOS_OF_DAY: int = NANOS_PER_DAY - 1

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Ordinal of 1970-01-01 (ordinal 1 = 0001-01-01)
UNIX_EPOCH_ORDINAL: int = 719_163


__all__ = [
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "NANOS_PER_DAY",
    "MIN_YEAR",
    "MAX_YEAR",
    "PIVOT_YEAR",
    "CURRENT_CENTURY_START",
    "PREVIOUS_CENTURY_START",
    "DURATION_MIN_NANOS",
    "DURATION_MAX_NANOS",
    "LAST_NANOS_OF_DAY",
    "DAYS_IN_MONTH",
    "UNIX_EPOCH_ORDINAL",
]
