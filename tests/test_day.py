"""Tests for the Day class."""

from __future__ import annotations

import pytest

from calendra import Day, Month, Year
from calendra.errors import DayParseError, InvalidDayError, ValidationError


class TestDayConstruction:
    """Tests for day validation against year and month."""

    def test_valid_day(self) -> None:
        """A day within the month is accepted."""
        assert Day.from_number(15, Year(2024), Month.from_number(3)).value == 15

    def test_leap_day(self) -> None:
        """February 29 exists only in leap years."""
        assert Day.from_number(29, Year(2024), Month.from_number(2)).value == 29
        with pytest.raises(InvalidDayError, match="day 29 invalid for February 2023"):
            Day.from_number(29, Year(2023), Month.from_number(2))

    def test_zero_and_overflow(self) -> None:
        """Day 0 and day 32 are never valid."""
        with pytest.raises(InvalidDayError):
            Day.from_number(0, Year(2024), Month.from_number(1))
        with pytest.raises(InvalidDayError):
            Day.from_number(32, Year(2024), Month.from_number(1))

    def test_thirty_day_months(self) -> None:
        """April has no 31st."""
        assert Day.from_number(30, 2024, 4).value == 30
        with pytest.raises(ValidationError):
            Day.from_number(31, 2024, 4)

    def test_every_day_of_every_month(self) -> None:
        """Construction succeeds exactly for 1..days_in_month."""
        for year in (Year(2023), Year(2024)):
            for month in Month.all_months():
                last = year.days_in_month(month)
                for n in range(1, last + 1):
                    Day.from_number(n, year, month)
                with pytest.raises(InvalidDayError):
                    Day.from_number(last + 1, year, month)

    def test_error_attributes(self) -> None:
        """The error names the day, year and month it was checked against."""
        with pytest.raises(InvalidDayError) as excinfo:
            Day.from_number(30, Year(2024), Month.from_number(2))
        assert excinfo.value.day == 30
        assert excinfo.value.year == 2024
        assert excinfo.value.month == 2


class TestDayText:
    """Tests for text parsing and formatting."""

    def test_from_text(self) -> None:
        """One or two digits parse."""
        assert Day.from_text("5", 2024, 1).value == 5
        assert Day.from_text("05", 2024, 1).value == 5
        assert Day.from_text("31", 2024, 1).value == 31

    def test_from_text_rejects_non_digits(self) -> None:
        """Letters and three digits are parse errors."""
        for text in ("x1", "", "100", "1.5"):
            with pytest.raises(DayParseError):
                Day.from_text(text, 2024, 1)

    def test_from_text_checks_range(self) -> None:
        """Well-formed text still has to exist in the month."""
        with pytest.raises(InvalidDayError):
            Day.from_text("31", 2024, 2)

    def test_text_is_padded(self) -> None:
        """text and str are two digits."""
        day = Day.from_number(7, 2024, 1)
        assert day.text == "07"
        assert str(day) == "07"
        assert int(day) == 7


class TestDayExtras:
    """Tests for ordinals, weekdays and re-validation."""

    def test_is_valid_for(self) -> None:
        """A day checked in one month can be re-checked in another."""
        day = Day.from_number(31, 2024, 1)
        assert day.is_valid_for(2024, 3)
        assert not day.is_valid_for(2024, 4)

    def test_ordinal_en(self) -> None:
        """English ordinal suffixes, including the teens."""
        cases = {1: "1st", 2: "2nd", 3: "3rd", 4: "4th", 11: "11th", 12: "12th",
                 13: "13th", 21: "21st", 22: "22nd", 23: "23rd", 31: "31st"}
        for n, expected in cases.items():
            assert Day.from_number(n, 2024, 1).ordinal_en == expected

    def test_ordinal_ptbr(self) -> None:
        """Portuguese ordinals use the masculine ordinal indicator."""
        assert Day.from_number(1, 2024, 1).ordinal_ptbr == "1º"

    def test_weekday_names(self) -> None:
        """2024-03-15 was a Friday."""
        day = Day.from_number(15, 2024, 3)
        assert day.weekday(2024, 3) == 4
        assert day.weekday_name_en(2024, 3) == "Friday"
        assert day.weekday_name_ptbr(2024, 3) == "Sexta-feira"
        assert day.weekday_short_en(2024, 3) == "Fri"
        assert day.weekday_short_ptbr(2024, 3) == "Sex"

    def test_comparison(self) -> None:
        """Days compare by number."""
        assert Day.from_number(1, 2024, 1) < Day.from_number(2, 2024, 1)
        assert Day.from_number(5, 2024, 1) == Day.from_number(5, 2024, 6)
