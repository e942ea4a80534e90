"""Tests for DateTimeBuilder."""

from __future__ import annotations

import pytest

from calendra import DateTime, DateTimeBuilder, Day, Duration, FixedClock, Month, Year
from calendra.errors import (
    InvalidDayError,
    InvalidTimeComponentError,
    MissingComponentError,
    MissingDateComponentError,
)


class TestBuilderDate:
    """Tests for setting the date."""

    def test_builder_matches_direct_construction(self) -> None:
        """date().time().build() equals the direct constructor."""
        built = DateTimeBuilder().date(2024, 3, 15).time(14, 30, 45).build()
        assert built == DateTime.from_components(2024, 3, 15, 14, 30, 45)

    def test_separate_setters(self) -> None:
        """year, month and day can be set one at a time, in any order."""
        built = DateTime.builder().day(15).month("Março").year(Year(2024)).build()
        assert built == DateTime.from_components(2024, 3, 15)

    def test_month_representations(self) -> None:
        """month accepts any Month.parse representation."""
        for value in (3, "03", "March", "mar", Month.from_number(3)):
            built = DateTimeBuilder().year(2024).month(value).day(1).build()
            assert built.month.number == 3

    def test_date_validates_immediately(self) -> None:
        """date() rejects impossible dates straight away."""
        with pytest.raises(InvalidDayError):
            DateTimeBuilder().date(2023, 2, 29)

    def test_day_validated_at_build(self) -> None:
        """A lone day is checked once year and month are known."""
        builder = DateTimeBuilder().year(2023).month(2).day(29)
        with pytest.raises(InvalidDayError):
            builder.build()

    def test_day_rejects_non_integers(self) -> None:
        """Floats, bools and strings are day errors, not truncated."""
        for value in (15.9, True, "x", "15"):
            with pytest.raises(InvalidDayError, match="must be an integer"):
                DateTimeBuilder().year(2024).month(3).day(value)

    def test_date_rejects_non_integer_day(self) -> None:
        """date() applies the same integer check as Day.from_number."""
        for value in (15.9, False, "x"):
            with pytest.raises(InvalidDayError):
                DateTimeBuilder().date(2024, 3, value)

    def test_day_accepts_day_instances(self) -> None:
        """A Day object contributes its number."""
        day = Day.from_number(15, 2024, 1)
        assert DateTimeBuilder().year(2024).month(3).day(day).build() == DateTime.from_components(
            2024, 3, 15
        )
        assert DateTimeBuilder().date(2024, 3, day).build().day.value == 15

    def test_setters_chain(self) -> None:
        """Every setter returns the same builder."""
        builder = DateTimeBuilder()
        assert builder.year(2024) is builder
        assert builder.at_noon() is builder


class TestBuilderMissing:
    """Tests for missing components."""

    def test_empty_builder(self) -> None:
        """An empty builder reports the year first."""
        with pytest.raises(MissingDateComponentError, match="Year is required"):
            DateTimeBuilder().build()

    def test_missing_month(self) -> None:
        """The first missing component is named."""
        with pytest.raises(MissingDateComponentError) as excinfo:
            DateTimeBuilder().year(2024).day(1).build()
        assert excinfo.value.component == "month"

    def test_missing_day_is_missing_component(self) -> None:
        """The error belongs to the MissingComponent kind."""
        with pytest.raises(MissingComponentError, match="Day is required"):
            DateTimeBuilder().year(2024).month(1).build()


class TestBuilderTime:
    """Tests for setting the time of day."""

    def test_default_is_midnight(self) -> None:
        """Without a time the result is 00:00:00."""
        built = DateTimeBuilder().date(2024, 3, 15).build()
        assert built.time_since_midnight().is_zero

    def test_at_time(self) -> None:
        """at_time takes an offset from midnight."""
        built = DateTimeBuilder().date(2024, 3, 15).at_time(Duration.from_text("9h15m")).build()
        assert (built.hour, built.minute) == (9, 15)

    def test_at_time_range(self) -> None:
        """Offsets must lie within one day."""
        with pytest.raises(InvalidTimeComponentError):
            DateTimeBuilder().at_time(Duration.from_hours(24))
        with pytest.raises(InvalidTimeComponentError):
            DateTimeBuilder().at_time(-Duration.from_seconds(1))

    def test_noon_and_midnight(self) -> None:
        """at_noon and at_midnight."""
        builder = DateTimeBuilder().date(2024, 3, 15)
        assert builder.at_noon().build().hour == 12
        assert builder.at_midnight().build().hour == 0
        assert builder.at_hour(7).build().hour == 7

    def test_component_setters(self) -> None:
        """Individual components replace only themselves."""
        built = (
            DateTimeBuilder()
            .date(2024, 3, 15)
            .time(10, 20, 30)
            .hour(23)
            .minute(59)
            .nanosecond(42)
            .build()
        )
        assert built == DateTime.from_components(2024, 3, 15, 23, 59, 30, 42)

    def test_second_setter(self) -> None:
        """Setting the second keeps hour and minute."""
        built = DateTimeBuilder().date(2024, 3, 15).time(1, 2, 3).second(59).build()
        assert (built.hour, built.minute, built.second) == (1, 2, 59)

    def test_time_ranges(self) -> None:
        """Out-of-range components are rejected by the setters."""
        with pytest.raises(InvalidTimeComponentError):
            DateTimeBuilder().time(24, 0, 0)
        with pytest.raises(InvalidTimeComponentError):
            DateTimeBuilder().minute(60)
        with pytest.raises(InvalidTimeComponentError):
            DateTimeBuilder().nanosecond(1_000_000_000)


class TestBuilderClock:
    """Tests for clock-seeded builders."""

    def test_today(self, fixed_clock: FixedClock) -> None:
        """today uses the clock's date at midnight."""
        built = DateTimeBuilder.today(fixed_clock).build()
        assert built == DateTime.from_components(2024, 3, 15)

    def test_tomorrow(self, fixed_clock: FixedClock) -> None:
        """tomorrow is the next calendar day."""
        built = DateTimeBuilder.tomorrow(fixed_clock).at_noon().build()
        assert built == DateTime.from_components(2024, 3, 16, 12)

    def test_tomorrow_crosses_month(self) -> None:
        """The last day of a month rolls into the next."""
        clock = FixedClock.at(DateTime.from_components(2024, 2, 29, 23, 59))
        assert DateTimeBuilder.tomorrow(clock).build() == DateTime.from_components(2024, 3, 1)
