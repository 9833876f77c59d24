"""Gregor exception hierarchy.

All Gregor-specific exceptions inherit from GregorError.
"""

from __future__ import annotations


class GregorError(Exception):
    """Base exception for all Gregor errors."""

    pass


class OutOfRangeError(GregorError, ValueError):
    """A calendar or clock field is outside its valid range.

    This is the only error the calendar core raises. It records which
    field was rejected, the offending value, and the half-open range of
    values that would have been accepted.

    Attributes:
        field: Name of the rejected field ("day", "month", "hour", ...).
        value: The value that was supplied.
        valid: The accepted values, as a half-open ``range``.

    Examples:
        - Day 30 in February
        - Hour 25
        - Day-of-year 366 in a common year
    """

    def __init__(self, field: str, value: int, valid: range) -> None:
        self.field = field
        self.value = value
        self.valid = valid
        super().__init__(
            f"{field} must be between {valid.start} and {valid.stop - 1}, "
            f"got {value}"
        )

    def __reduce__(self):
        return (type(self), (self.field, self.value, self.valid))


class ParseError(GregorError, ValueError):
    """Failed to parse an ISO 8601 string.

    Examples:
        - Malformed date string
        - Missing required components
        - Unknown offset designator
    """

    pass


class OffsetError(GregorError, ValueError):
    """Invalid UTC offset.

    Raised when the hour and minute parts of an offset carry opposite
    signs, such as ``-4`` hours and ``+30`` minutes.
    """

    pass


__all__ = [
    "GregorError",
    "OutOfRangeError",
    "ParseError",
    "OffsetError",
]
