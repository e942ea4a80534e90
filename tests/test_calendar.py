"""Tests for internal calendar and validation helpers."""

from __future__ import annotations

import datetime

import pytest

from calendra._internal.calendar import (
    MAX_ORDINAL,
    MIN_ORDINAL,
    days_in_month,
    is_leap_year,
    ordinal_to_ymd,
    weekday,
    ymd_to_ordinal,
)
from calendra._internal.constants import UNIX_EPOCH_ORDINAL
from calendra._internal.validation import is_ascii_digits, validate_range
from calendra.errors import InvalidTimeComponentError, ValidationError


class TestOrdinals:
    """Ordinal day numbers agree with the standard library."""

    def test_matches_stdlib(self) -> None:
        """ymd_to_ordinal and ordinal_to_ymd match date.toordinal."""
        for y, m, d in [(1, 1, 1), (1600, 2, 29), (1900, 3, 1), (1970, 1, 1),
                        (2000, 12, 31), (2024, 2, 29), (9999, 12, 31)]:
            ordinal = datetime.date(y, m, d).toordinal()
            assert ymd_to_ordinal(y, m, d) == ordinal
            assert ordinal_to_ymd(ordinal) == (y, m, d)

    def test_cycle_boundaries(self) -> None:
        """Last days of 4-, 100- and 400-year cycles decode correctly."""
        for year in (1996, 2000, 2100, 2400):
            ordinal = datetime.date(year, 12, 31).toordinal()
            assert ordinal_to_ymd(ordinal) == (year, 12, 31)
            assert ordinal_to_ymd(ordinal + 1) == (year + 1, 1, 1)

    def test_limits(self) -> None:
        """Ordinal constants cover years 1-9999."""
        assert MIN_ORDINAL == 1
        assert MAX_ORDINAL == datetime.date(9999, 12, 31).toordinal()
        assert UNIX_EPOCH_ORDINAL == datetime.date(1970, 1, 1).toordinal()

    def test_non_positive_ordinal(self) -> None:
        """Ordinals below 1 are rejected."""
        with pytest.raises(ValueError):
            ordinal_to_ymd(0)


class TestCalendarHelpers:
    """Tests for leap years, month lengths and weekdays."""

    def test_leap_and_lengths(self) -> None:
        """Leap years change February only."""
        assert is_leap_year(2024)
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2100, 2) == 28

    def test_invalid_month(self) -> None:
        """Month 13 is a programming error here."""
        with pytest.raises(ValueError):
            days_in_month(2024, 13)

    def test_weekday(self) -> None:
        """Monday is 0."""
        assert weekday(2024, 3, 11) == 0
        assert weekday(2024, 3, 17) == 6


class TestValidation:
    """Tests for the range-check helpers."""

    def test_validate_range_decorator(self) -> None:
        """Out-of-range arguments raise the configured error."""

        @validate_range(hour=(0, 23))
        def at(hour: int, label: str = "") -> int:
            return hour

        assert at(23) == 23
        assert at(hour=0) == 0
        with pytest.raises(InvalidTimeComponentError, match="hour must be between 0 and 23"):
            at(24)

    def test_validate_range_custom_error(self) -> None:
        """A different error class can be supplied."""

        @validate_range(ValidationError, count=(1, 3))
        def take(count: int) -> int:
            return count

        with pytest.raises(ValidationError):
            take(0)

    def test_is_ascii_digits(self) -> None:
        """Only ASCII digits of the allowed lengths pass."""
        assert is_ascii_digits("0123")
        assert is_ascii_digits("12", 1, 2)
        assert not is_ascii_digits("123", 1, 2)
        assert not is_ascii_digits("")
        assert not is_ascii_digits("١٢")
        assert not is_ascii_digits("1a")
