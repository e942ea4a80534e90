"""Validation utilities for Calendra.

This module provides a validation decorator and helpers for ensuring
calendar values are within valid ranges.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import inspect
from typing import Callable, ParamSpec, TypeVar

from calendra.errors import CalendraError, InvalidTimeComponentError

P = ParamSpec("P")
T = TypeVar("T")

# Inclusive bounds for the time-of-day components
TIME_COMPONENT_LIMITS: dict[str, tuple[int, int]] = {
    "hour": (0, 23),
    "minute": (0, 59),
    "second": (0, 59),
    "nanosecond": (0, 999_999_999),
}


def validate_range(
    error: type[CalendraError] = InvalidTimeComponentError,
    **limits: tuple[int, int],
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator to validate that parameters are within specified ranges.

    Named parameters are checked against (min, max) ranges before the
    wrapped function runs. Non-integer values (including bool) are
    rejected as well.

    Args:
        error: Exception class raised on a violation.
        **limits: Mapping of parameter names to (min, max) tuples.
                  Both min and max are inclusive.

    Returns:
        A decorator function.

    Examples:
        >>> @validate_range(hour=(0, 23))
        ... def at(hour: int) -> int:
        ...     return hour

        >>> at(24)
        Traceback (most recent call last):
        ...
        InvalidTimeComponentError: hour must be between 0 and 23, got 24
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        sig = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            bound = sig.bind(*args, **kwargs)
            bound.apply_defaults()

            for param_name, (min_val, max_val) in limits.items():
                if param_name in bound.arguments:
                    check_component(
                        param_name, bound.arguments[param_name], min_val, max_val, error
                    )

            return func(*args, **kwargs)

        return wrapper

    return decorator


def check_component(
    name: str,
    value: object,
    min_val: int,
    max_val: int,
    error: type[CalendraError] = InvalidTimeComponentError,
) -> int:
    """Check a single integer component and return it.

    Raises:
        error: If value is not an int or lies outside [min_val, max_val].
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise error(f"{name} must be an integer, got {type(value).__name__}", value)
    if value < min_val or value > max_val:
        raise error(f"{name} must be between {min_val} and {max_val}, got {value}", value)
    return value


def validate_time_of_day(hour: int, minute: int, second: int, nanosecond: int) -> None:
    """Validate all four time-of-day components.

    Raises:
        InvalidTimeComponentError: If any component is out of range.
    """
    for name, value in (
        ("hour", hour),
        ("minute", minute),
        ("second", second),
        ("nanosecond", nanosecond),
    ):
        min_val, max_val = TIME_COMPONENT_LIMITS[name]
        check_component(name, value, min_val, max_val)


def is_ascii_digits(text: str, *lengths: int) -> bool:
    """Return True if text is made of ASCII digits only.

    When lengths are given, the text must also have one of them.
    """
    if not text or not (text.isascii() and text.isdigit()):
        return False
    return not lengths or len(text) in lengths


__all__ = [
    "TIME_COMPONENT_LIMITS",
    "validate_range",
    "check_component",
    "validate_time_of_day",
    "is_ascii_digits",
]
