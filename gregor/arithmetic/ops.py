"""Standalone arithmetic operations for Gregor types.

This module provides explicit functions for arithmetic that serve as the
canonical implementation. The dunder methods on the core classes delegate
to these functions.

Supported operations:
    - add: Add a Duration to an Instant, DateTime or Duration
    - subtract: Subtract durations or compute differences
    - multiply: Scale durations by integers
    - negate: Flip the sign of a duration

Type Combinations:
    - Instant + Duration -> Instant
    - Instant - Duration -> Instant
    - Instant - Instant -> Duration
    - DateTime + Duration -> DateTime
    - DateTime - Duration -> DateTime
    - DateTime - DateTime -> Duration
    - Duration + Duration -> Duration
    - Duration - Duration -> Duration
    - Duration * int -> Duration

DateTime arithmetic goes through the DateTime's Instant, so it is
exact across month, year and leap-day boundaries.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union, overload

if TYPE_CHECKING:
    from gregor.core.datetime import DateTime
    from gregor.core.duration import Duration
    from gregor.core.instant import Instant


@overload
def add(left: "Instant", right: "Duration") -> "Instant": ...


@overload
def add(left: "DateTime", right: "Duration") -> "DateTime": ...


@overload
def add(left: "Duration", right: "Duration") -> "Duration": ...


def add(
    left: Union["Instant", "DateTime", "Duration"],
    right: "Duration",
) -> Union["Instant", "DateTime", "Duration"]:
    """Add a Duration to an Instant, DateTime or Duration.

    This is the canonical implementation of addition. Class operators
    delegate to this function.

    Args:
        left: An Instant, DateTime, or Duration.
        right: A Duration to add.

    Returns:
        A new value of the same type as left, offset by right.

    Raises:
        TypeError: If the types are incompatible for addition.

    Examples:
        >>> from gregor.core.instant import Instant
        >>> from gregor.core.duration import Duration
        >>> add(Instant.at(3), Duration.of(7))
        Instant(10, 0)
    """
    from gregor.core.datetime import DateTime
    from gregor.core.duration import Duration
    from gregor.core.instant import Instant

    if not isinstance(right, Duration):
        raise TypeError(
            f"can only add Duration, not {type(right).__name__}"
        )

    if isinstance(left, Instant):
        return _add_duration_to_instant(left, right)
    elif isinstance(left, DateTime):
        return DateTime.from_instant(_add_duration_to_instant(left.to_instant(), right))
    elif isinstance(left, Duration):
        return Duration(
            left.seconds + right.seconds,
            left.milliseconds + right.milliseconds,
        )
    else:
        raise TypeError(
            f"unsupported operand type(s) for +: {type(left).__name__!r} and 'Duration'"
        )


@overload
def subtract(left: "Instant", right: "Duration") -> "Instant": ...


@overload
def subtract(left: "Instant", right: "Instant") -> "Duration": ...


@overload
def subtract(left: "DateTime", right: "Duration") -> "DateTime": ...


@overload
def subtract(left: "DateTime", right: "DateTime") -> "Duration": ...


@overload
def subtract(left: "Duration", right: "Duration") -> "Duration": ...


def subtract(
    left: Union["Instant", "DateTime", "Duration"],
    right: Union["Instant", "DateTime", "Duration"],
) -> Union["Instant", "DateTime", "Duration"]:
    """Subtract a Duration, or the same type, from a value.

    When subtracting a Duration, returns the same type as left. When
    subtracting two Instants or two DateTimes, returns the Duration
    between them.

    Raises:
        TypeError: If the types are incompatible for subtraction.

    Examples:
        >>> from gregor.core.instant import Instant
        >>> from gregor.core.duration import Duration
        >>> subtract(Instant.at(50), Duration.of(30))
        Instant(20, 0)
        >>> subtract(Instant.at(50), Instant.at_ms(30, 500))
        Duration(19, 500)
    """
    from gregor.core.datetime import DateTime
    from gregor.core.duration import Duration
    from gregor.core.instant import Instant

    if isinstance(left, Instant):
        if isinstance(right, Duration):
            return _add_duration_to_instant(left, negate(right))
        elif isinstance(right, Instant):
            return _difference(left, right)
        else:
            raise TypeError(
                f"unsupported operand type(s) for -: 'Instant' and {type(right).__name__!r}"
            )
    elif isinstance(left, DateTime):
        if isinstance(right, Duration):
            return DateTime.from_instant(
                _add_duration_to_instant(left.to_instant(), negate(right))
            )
        elif isinstance(right, DateTime):
            return _difference(left.to_instant(), right.to_instant())
        else:
            raise TypeError(
                f"unsupported operand type(s) for -: 'DateTime' and {type(right).__name__!r}"
            )
    elif isinstance(left, Duration):
        if isinstance(right, Duration):
            return Duration(
                left.seconds - right.seconds,
                left.milliseconds - right.milliseconds,
            )
        else:
            raise TypeError(
                f"unsupported operand type(s) for -: 'Duration' and {type(right).__name__!r}"
            )
    else:
        raise TypeError(
            f"unsupported operand type(s) for -: {type(left).__name__!r} and {type(right).__name__!r}"
        )


def multiply(duration: "Duration", scalar: int) -> "Duration":
    """Multiply a Duration by an integer scalar.

    Raises:
        TypeError: If duration is not a Duration or scalar is not an int.

    Examples:
        >>> from gregor.core.duration import Duration
        >>> multiply(Duration.of(30), 3)
        Duration(90, 0)
    """
    from gregor.core.duration import Duration

    if not isinstance(duration, Duration):
        raise TypeError(
            f"can only multiply Duration by scalar, not {type(duration).__name__}"
        )
    if isinstance(scalar, bool) or not isinstance(scalar, int):
        raise TypeError(
            f"can only multiply Duration by int, not {type(scalar).__name__}"
        )

    return Duration(milliseconds=duration.total_milliseconds * scalar)


def negate(duration: "Duration") -> "Duration":
    """Return the negation of a Duration.

    Examples:
        >>> from gregor.core.duration import Duration
        >>> negate(Duration.of_ms(1, 500))
        Duration(-2, 500)
    """
    from gregor.core.duration import Duration

    if not isinstance(duration, Duration):
        raise TypeError(f"can only negate Duration, not {type(duration).__name__}")

    return Duration(milliseconds=-duration.total_milliseconds)


def _add_duration_to_instant(instant: "Instant", duration: "Duration") -> "Instant":
    from gregor.core.instant import Instant

    return Instant(
        instant.seconds + duration.seconds,
        instant.milliseconds + duration.milliseconds,
    )


def _difference(left: "Instant", right: "Instant") -> "Duration":
    from gregor.core.duration import Duration

    return Duration(
        left.seconds - right.seconds,
        left.milliseconds - right.milliseconds,
    )


__all__ = [
    "add",
    "subtract",
    "multiply",
    "negate",
]
