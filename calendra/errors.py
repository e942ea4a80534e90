"""Calendra exception hierarchy.

All Calendra-specific exceptions inherit from CalendraError.

Errors are organised along two axes. The *kind* classes (ValidationError,
ParseError, FormatLengthError, MissingComponentError, OverflowError) say what
went wrong. The *family* classes (YearError, MonthError, DayError,
DurationError, DateTimeError) say which value type raised it. Each concrete
error inherits from one of each, so callers can catch either axis:

    >>> try:
    ...     Month.from_number(13)
    ... except ValidationError:
    ...     pass
"""

from __future__ import annotations

from typing import Any, Optional


class CalendraError(Exception):
    """Base exception for all Calendra errors.

    Attributes:
        value: The offending input, when there is one.
    """

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class ValidationError(CalendraError):
    """Invalid input values.

    Raised when a value is well-formed but out of range.

    Examples:
        - Month number outside 1-12
        - Day number beyond the end of the month
        - Hour value outside 0-23
    """

    pass


class ParseError(CalendraError):
    """Failed to parse string representation.

    Examples:
        - Text matching none of the supported date formats
        - Unknown month name
        - Malformed duration text
    """

    pass


class FormatLengthError(ParseError):
    """Fixed-width input has the wrong number of characters."""

    pass


class MissingComponentError(CalendraError):
    """A builder was asked to build without a required component."""

    pass


class OverflowError(CalendraError):
    """Arithmetic operation exceeded representable range.

    Examples:
        - Adding a duration that moves a date past year 9999
        - Adding two durations whose sum exceeds the 64-bit range
    """

    pass


# Per-type families


class YearError(CalendraError):
    """Base class for errors raised by Year."""

    pass


class MonthError(CalendraError):
    """Base class for errors raised by Month."""

    pass


class DayError(CalendraError):
    """Base class for errors raised by Day."""

    pass


class DurationError(CalendraError):
    """Base class for errors raised by Duration."""

    pass


class DateTimeError(CalendraError):
    """Base class for errors raised by DateTime and DateTimeBuilder."""

    pass


class InvalidYearError(YearError, ValidationError):
    """Year number outside the supported range."""

    pass


class InvalidTwoDigitYearError(YearError, ValidationError):
    """Two-digit year outside 0-99."""

    pass


class InvalidQuarterError(YearError, ValidationError):
    """Quarter number outside 1-4."""

    pass


class YearParseError(YearError, ParseError):
    """Year text is not 1, 2 or 4 ASCII digits."""

    pass


class YearOverflowError(YearError, OverflowError):
    """Year arithmetic left the supported range."""

    pass


class InvalidMonthNumberError(MonthError, ValidationError):
    """Month number outside 1-12."""

    pass


class InvalidMonthNameError(MonthError, ParseError):
    """Month text did not match the attempted representation.

    Attributes:
        representation: Which form was tried ("text", "english",
            "portuguese", "abbreviation" or "any").
    """

    def __init__(self, message: str, value: Any = None, representation: str = "any") -> None:
        super().__init__(message, value)
        self.representation = representation


class InvalidDayError(DayError, ValidationError):
    """Day number invalid for the given year and month.

    Attributes:
        day: The rejected day number.
        year: The year it was checked against, or None if not yet set.
        month: The month number it was checked against, or None if not yet set.
    """

    def __init__(
        self, message: str, day: Any, year: Optional[int], month: Optional[int]
    ) -> None:
        super().__init__(message, day)
        self.day = day
        self.year = year
        self.month = month


class DayParseError(DayError, ParseError):
    """Day text is not 1 or 2 ASCII digits."""

    pass


class InvalidDurationFormatError(DurationError, ParseError):
    """Duration text could not be parsed."""

    pass


class DurationOverflowError(DurationError, OverflowError):
    """Duration arithmetic exceeded the signed 64-bit nanosecond range."""

    pass


class DurationValidationError(DurationError, ValidationError):
    """Invalid operand for a Duration operation."""

    pass


class InvalidTimeComponentError(DateTimeError, ValidationError):
    """Hour, minute, second or nanosecond outside its range."""

    pass


class InvalidDateError(DateTimeError, ValidationError):
    """Day is not valid for the month and year it is combined with."""

    pass


class DateTimeParseError(DateTimeError, ParseError):
    """Text does not match the requested date format."""

    pass


class DateTimeFormatLengthError(DateTimeError, FormatLengthError):
    """Text for a fixed-width date format has the wrong length."""

    pass


class UnrecognizedDateTimeError(DateTimeError, ParseError):
    """Text matched none of the auto-detected date formats."""

    pass


class DateTimeOverflowError(DateTimeError, OverflowError):
    """Date arithmetic moved outside years 1-9999."""

    pass


class MissingDateComponentError(DateTimeError, MissingComponentError):
    """DateTimeBuilder.build() called without year, month or day.

    Attributes:
        component: Name of the first missing component.
    """

    def __init__(self, component: str) -> None:
        super().__init__(f"{component.capitalize()} is required", component)
        self.component = component


__all__ = [
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
    "InvalidYearError",
    "InvalidTwoDigitYearError",
    "InvalidQuarterError",
    "YearParseError",
    "YearOverflowError",
    "InvalidMonthNumberError",
    "InvalidMonthNameError",
    "InvalidDayError",
    "DayParseError",
    "InvalidDurationFormatError",
    "DurationOverflowError",
    "DurationValidationError",
    "InvalidTimeComponentError",
    "InvalidDateError",
    "DateTimeParseError",
    "DateTimeFormatLengthError",
    "UnrecognizedDateTimeError",
    "DateTimeOverflowError",
    "MissingDateComponentError",
]
