"""Tests for Duration class.

These tests verify construction, checked arithmetic, components, and
the readable, compact, clock-style and ISO 8601 text forms.
"""

from __future__ import annotations

import datetime

import pytest


class TestDurationConstruction:
    """Tests for Duration construction."""

    def test_default_construction_is_zero(self) -> None:
        """Default Duration() creates a zero duration."""
        from calendra.core import Duration

        assert Duration().is_zero
        assert Duration() == Duration.zero()

    def test_keyword_components_are_summed(self) -> None:
        """Components of every unit add up."""
        from calendra.core import Duration

        d = Duration(days=1, hours=2, minutes=3, seconds=4, milliseconds=5,
                     microseconds=6, nanoseconds=7)
        assert d.total_nanos == (
            86_400_000_000_000 + 7_200_000_000_000 + 180_000_000_000
            + 4_000_000_000 + 5_000_000 + 6_000 + 7
        )

    def test_from_components(self) -> None:
        """from_components takes clock-style parts."""
        from calendra.core import Duration

        d = Duration.from_components(1, 30, 15, 250, 10)
        assert d.hours == 1
        assert d.minutes == 30
        assert d.seconds == 15
        assert d.milliseconds == 250
        assert d.nanos == 250_000_010

    def test_unit_factories(self) -> None:
        """Single-unit factories agree with each other."""
        from calendra.core import Duration

        assert Duration.from_days(1) == Duration.from_hours(24)
        assert Duration.from_hours(1) == Duration.from_minutes(60)
        assert Duration.from_minutes(1) == Duration.from_seconds(60)
        assert Duration.from_seconds(1) == Duration.from_milliseconds(1000)
        assert Duration.from_milliseconds(1) == Duration.from_microseconds(1000)
        assert Duration.from_microseconds(1) == Duration.from_nanos(1000)

    def test_overflow_on_construction(self) -> None:
        """Values beyond the signed 64-bit range raise."""
        from calendra.core import Duration
        from calendra.errors import DurationOverflowError

        Duration.from_nanos(2**63 - 1)
        Duration.from_nanos(-(2**63))
        with pytest.raises(DurationOverflowError):
            Duration.from_nanos(2**63)
        with pytest.raises(DurationOverflowError):
            Duration.from_days(200_000)

    def test_non_integer_component(self) -> None:
        """Floats are rejected; use from_text for fractions."""
        from calendra.core import Duration
        from calendra.errors import DurationValidationError

        with pytest.raises(DurationValidationError):
            Duration(hours=1.5)  # type: ignore[arg-type]


class TestDurationArithmetic:
    """Tests for checked arithmetic."""

    def test_zero_is_identity(self) -> None:
        """d + 0 == d."""
        from calendra.core import Duration

        for d in (Duration.from_hours(3), Duration.from_nanos(-17), Duration.zero()):
            assert d.add(Duration.zero()) == d
            assert d + Duration.zero() == d

    def test_addition_is_associative(self) -> None:
        """(a + b) + c == a + (b + c)."""
        from calendra.core import Duration

        a = Duration.from_hours(5)
        b = Duration.from_milliseconds(-1234)
        c = Duration.from_nanos(987)
        assert (a + b) + c == a + (b + c)

    def test_subtract(self) -> None:
        """subtract can go negative."""
        from calendra.core import Duration

        d = Duration.from_minutes(5).subtract(Duration.from_minutes(7))
        assert d.is_negative
        assert d.total_minutes == -2

    def test_add_overflow(self) -> None:
        """Sums beyond the range raise."""
        from calendra.core import Duration
        from calendra.errors import DurationOverflowError, OverflowError

        big = Duration.from_nanos(2**63 - 1)
        with pytest.raises(DurationOverflowError):
            big.add(Duration.from_nanos(1))
        with pytest.raises(OverflowError):
            big + big

    def test_multiply(self) -> None:
        """multiply scales by non-negative integers."""
        from calendra.core import Duration

        assert Duration.from_minutes(20).multiply(3) == Duration.from_hours(1)
        assert Duration.from_minutes(20) * 0 == Duration.zero()
        assert 2 * Duration.from_seconds(3) == Duration.from_seconds(6)

    def test_multiply_rejects_negative(self) -> None:
        """Negative factors are invalid."""
        from calendra.core import Duration
        from calendra.errors import DurationValidationError

        with pytest.raises(DurationValidationError, match="non-negative"):
            Duration.from_seconds(1).multiply(-1)

    def test_divide(self) -> None:
        """divide truncates toward zero."""
        from calendra.core import Duration

        assert Duration.from_seconds(10).divide(4) == Duration.from_milliseconds(2500)
        assert Duration.from_nanos(-7).divide(2) == Duration.from_nanos(-3)
        assert Duration.from_hours(1) // 60 == Duration.from_minutes(1)

    def test_divide_by_zero(self) -> None:
        """Zero divisors raise a validation error."""
        from calendra.core import Duration
        from calendra.errors import DurationValidationError

        with pytest.raises(DurationValidationError):
            Duration.from_seconds(1).divide(0)

    def test_negation_and_abs(self) -> None:
        """Unary minus flips the sign, abs drops it."""
        from calendra.core import Duration

        d = Duration.from_seconds(30)
        assert (-d).total_seconds == -30
        assert abs(-d) == d

    def test_sum_builtin(self) -> None:
        """sum() works over durations."""
        from calendra.core import Duration

        parts = [Duration.from_minutes(10)] * 6
        assert sum(parts) == Duration.from_hours(1)

    def test_radd_only_accepts_integer_zero(self) -> None:
        """Only the int 0 that sum() starts from is absorbed."""
        from calendra.core import Duration

        d = Duration.from_seconds(5)
        assert 0 + d is d
        for other in (0.0, False, 1):
            with pytest.raises(TypeError):
                other + d


class TestDurationComponents:
    """Tests for magnitude components and signed totals."""

    def test_components(self) -> None:
        """Components split the magnitude."""
        from calendra.core import Duration

        d = Duration(hours=26, minutes=5, seconds=9, milliseconds=42, nanoseconds=7)
        assert d.hours == 26
        assert d.minutes == 5
        assert d.seconds == 9
        assert d.milliseconds == 42
        assert d.nanos == 42_000_007
        assert d.microseconds == 0
        assert Duration.from_nanos(1_234_567).microseconds == 234
        assert Duration.from_nanos(1_234_567).milliseconds == 1

    def test_negative_components_describe_magnitude(self) -> None:
        """Components are non-negative; is_negative carries the sign."""
        from calendra.core import Duration

        d = -Duration(hours=1, minutes=30)
        assert d.is_negative
        assert d.hours == 1
        assert d.minutes == 30

    def test_totals_truncate_toward_zero(self) -> None:
        """Totals drop the remainder, keeping the sign."""
        from calendra.core import Duration

        d = Duration.from_nanos(-1_999_999_999)
        assert d.total_seconds == -1
        assert d.total_millis == -1999
        assert d.total_micros == -1_999_999
        assert Duration(hours=47).total_days == 1
        assert Duration(minutes=119).total_hours == 1

    def test_comparisons(self) -> None:
        """Longer and shorter are strict."""
        from calendra.core import Duration

        one, two = Duration.from_seconds(1), Duration.from_seconds(2)
        assert two.is_longer_than(one)
        assert one.is_shorter_than(two)
        assert not one.is_longer_than(one)
        assert one < two <= two
        assert bool(one)
        assert not bool(Duration.zero())


class TestDurationFormatting:
    """Tests for text output."""

    def test_readable_hours(self) -> None:
        """An hour or more shows h, m and s."""
        from calendra.core import Duration

        assert Duration(hours=2, minutes=30, seconds=45).to_readable() == "2h 30m 45s"
        assert Duration.from_hours(1).to_readable() == "1h 0m 0s"

    def test_readable_minutes(self) -> None:
        """Under an hour, zero seconds are omitted."""
        from calendra.core import Duration

        assert Duration(minutes=30, seconds=45).to_readable() == "30m 45s"
        assert Duration.from_minutes(30).to_readable() == "30m"

    def test_readable_seconds(self) -> None:
        """Under a minute, milliseconds show as a fraction."""
        from calendra.core import Duration

        assert Duration.from_seconds(45).to_readable() == "45s"
        assert Duration.from_milliseconds(1500).to_readable() == "1.500s"

    def test_readable_sub_second(self) -> None:
        """Milliseconds, then nanoseconds."""
        from calendra.core import Duration

        assert Duration.from_milliseconds(250).to_readable() == "250ms"
        assert Duration.from_nanos(750).to_readable() == "750ns"

    def test_readable_zero_and_negative(self) -> None:
        """Zero is 0s and negatives get a minus sign."""
        from calendra.core import Duration

        assert Duration.zero().to_readable() == "0s"
        assert (-Duration.from_minutes(5)).to_readable() == "-5m"
        assert str(Duration.from_seconds(3)) == "3s"

    def test_to_text(self) -> None:
        """Compact canonical text."""
        from calendra.core import Duration

        assert Duration(hours=1, minutes=30).to_text() == "1h30m"
        assert Duration.from_nanos(90).to_text() == "90ns"
        assert Duration.zero().to_text() == "0s"
        assert (-Duration.from_seconds(2)).to_text() == "-2s"

    def test_to_text_round_trips(self) -> None:
        """from_text(to_text(d)) == d."""
        from calendra.core import Duration

        for d in (
            Duration.zero(),
            Duration(hours=49, minutes=1, seconds=2, milliseconds=3, nanoseconds=4),
            -Duration(minutes=7, nanoseconds=999_999),
            Duration.from_nanos(2**63 - 1),
        ):
            assert Duration.from_text(d.to_text()) == d

    def test_hms_and_precise(self) -> None:
        """Clock-style output."""
        from calendra.core import Duration

        d = Duration(hours=1, minutes=2, seconds=3, nanoseconds=4)
        assert d.to_hms() == "01:02:03"
        assert d.to_precise() == "01:02:03.000000004"
        assert Duration.from_hours(100).to_hms() == "100:00:00"

    def test_iso8601(self) -> None:
        """ISO 8601 output omits zero designators."""
        from calendra.core import Duration

        assert Duration(hours=2, minutes=30).to_iso8601() == "PT2H30M"
        assert Duration.from_days(1).to_iso8601() == "P1D"
        assert Duration(days=1, milliseconds=500).to_iso8601() == "P1DT0.5S"
        assert Duration.zero().to_iso8601() == "PT0S"
        assert (-Duration.from_seconds(5)).to_iso8601() == "-PT5S"


class TestDurationParsing:
    """Tests for text input."""

    def test_single_units(self) -> None:
        """Each unit suffix parses."""
        from calendra.core import Duration

        assert Duration.from_text("2d") == Duration.from_days(2)
        assert Duration.from_text("3h") == Duration.from_hours(3)
        assert Duration.from_text("4m") == Duration.from_minutes(4)
        assert Duration.from_text("5s") == Duration.from_seconds(5)
        assert Duration.from_text("6ms") == Duration.from_milliseconds(6)
        assert Duration.from_text("7us") == Duration.from_microseconds(7)
        assert Duration.from_text("8ns") == Duration.from_nanos(8)

    def test_combined_tokens(self) -> None:
        """Tokens combine with or without spaces."""
        from calendra.core import Duration

        expected = Duration(hours=1, minutes=30)
        assert Duration.from_text("1h30m") == expected
        assert Duration.from_text("1h 30m") == expected
        assert Duration.from_text("  1h 30m  ") == expected

    def test_fractions(self) -> None:
        """Decimal numbers convert exactly."""
        from calendra.core import Duration

        assert Duration.from_text("2.5h") == Duration(hours=2, minutes=30)
        assert Duration.from_text("1.500s") == Duration.from_milliseconds(1500)
        assert Duration.from_text(".5s") == Duration.from_milliseconds(500)
        assert Duration.from_text("0.1ns") == Duration.zero()

    def test_negative(self) -> None:
        """A leading minus negates the whole duration."""
        from calendra.core import Duration

        assert Duration.from_text("-1h30m") == -Duration(hours=1, minutes=30)

    def test_clock_form(self) -> None:
        """H:MM:SS with optional fraction."""
        from calendra.core import Duration

        assert Duration.from_text("01:30:00") == Duration(hours=1, minutes=30)
        assert Duration.from_text("100:00:01.25") == Duration(
            hours=100, seconds=1, milliseconds=250
        )

    def test_rejects_malformed(self) -> None:
        """Anything outside the grammar is a format error."""
        from calendra.core import Duration
        from calendra.errors import InvalidDurationFormatError

        for text in ("", "-", "abc", "5", "5x", "h5", "1h 1h", "30m1h", "1:2:3", "1h-30m", "1 h"):
            with pytest.raises(InvalidDurationFormatError):
                Duration.from_text(text)

    def test_parse_overflow(self) -> None:
        """Text beyond the range overflows."""
        from calendra.core import Duration
        from calendra.errors import DurationOverflowError

        with pytest.raises(DurationOverflowError):
            Duration.from_text("300000d")

    def test_from_iso8601(self) -> None:
        """ISO 8601 durations with day and time designators."""
        from calendra.core import Duration
        from calendra.errors import InvalidDurationFormatError

        assert Duration.from_iso8601("P1DT2H30M") == Duration(days=1, hours=2, minutes=30)
        assert Duration.from_iso8601("PT0.5S") == Duration.from_milliseconds(500)
        assert Duration.from_iso8601("-PT5S") == -Duration.from_seconds(5)
        for text in ("P", "PT", "P1DT", "1D", "P1Y"):
            with pytest.raises(InvalidDurationFormatError):
                Duration.from_iso8601(text)

    def test_parse_dispatch(self) -> None:
        """parse accepts Duration, int, timedelta and strings."""
        from calendra.core import Duration

        d = Duration.from_seconds(90)
        assert Duration.parse(d) is d
        assert Duration.parse(90_000_000_000) == d
        assert Duration.parse("90000000000") == d
        assert Duration.parse(datetime.timedelta(seconds=90)) == d
        assert Duration.parse("1m30s") == d
        assert Duration.parse("PT1M30S") == d


class TestDurationTimedelta:
    """Tests for timedelta interop."""

    def test_round_trip_microseconds(self) -> None:
        """Microsecond-precision values survive a round trip."""
        from calendra.core import Duration

        delta = datetime.timedelta(days=-2, seconds=5, microseconds=7)
        assert Duration.from_timedelta(delta).to_timedelta() == delta

    def test_truncates_nanoseconds(self) -> None:
        """Sub-microsecond precision is dropped."""
        from calendra.core import Duration

        assert Duration.from_nanos(1999).to_timedelta() == datetime.timedelta(microseconds=1)
