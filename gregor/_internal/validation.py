"""Validation utilities for Gregor.

This module provides the range checks used by the validating
constructors. Every check raises OutOfRangeError naming the rejected
field, the offending value and the half-open range that was expected.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import inspect
from typing import Callable, TypeVar, ParamSpec

from gregor.errors import OutOfRangeError

P = ParamSpec("P")
T = TypeVar("T")


def check_integer(field: str, value: object) -> int:
    """Check that a value is an int, and not a bool.

    Raises:
        TypeError: If value is not an integer.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{field} must be an integer, got {type(value).__name__}")
    return value


def check_range(field: str, value: int, valid: range) -> int:
    """Check that an integer lies in a half-open range.

    Args:
        field: Name of the field, used in the error.
        value: The value to check.
        valid: The accepted values.

    Returns:
        The value, unchanged.

    Raises:
        TypeError: If value is not an integer.
        OutOfRangeError: If value is not in valid.

    Examples:
        >>> check_range("month", 12, range(1, 13))
        12
    """
    check_integer(field, value)
    if value not in valid:
        raise OutOfRangeError(field, value, valid)
    return value


def validate_range(
    **limits: range,
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator to validate that parameters are within specified ranges.

    This decorator validates named parameters against half-open ranges,
    raising OutOfRangeError if any value is out of range. Parameters that
    are not passed (and so take their default) are checked too.

    Args:
        **limits: Mapping of parameter names to ``range`` objects.

    Returns:
        A decorator function.

    Examples:
        >>> @validate_range(minute=range(0, 60), second=range(0, 60))
        ... def seconds_in(minute: int, second: int) -> int:
        ...     return minute * 60 + second

        >>> seconds_in(3, 60)  # Raises OutOfRangeError
        Traceback (most recent call last):
        ...
        OutOfRangeError: second must be between 0 and 59, got 60
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        sig = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            bound = sig.bind(*args, **kwargs)
            bound.apply_defaults()

            for param_name, valid in limits.items():
                value = bound.arguments.get(param_name)
                if value is not None:
                    check_range(param_name, value, valid)

            return func(*args, **kwargs)

        return wrapper

    return decorator


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The year.
        month: The month (1-12), already validated.
        day: The day to validate.

    Raises:
        OutOfRangeError: If day is outside 1 to the month's length.
    """
    from gregor._internal.calendar import days_in_month, is_leap_year

    check_range("day", day, range(1, days_in_month(month, is_leap_year(year)) + 1))


__all__ = [
    "check_integer",
    "check_range",
    "validate_range",
    "validate_day",
]
