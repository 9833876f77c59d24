"""Weekday enumeration.

This module provides the Weekday enum. Two numbering conventions are in
use: Sunday as 0 (for weekdays derived from a day count) and Monday as 1
(for ISO 8601 week dates). Each has its own named conversion.
"""

from __future__ import annotations

from enum import Enum

from gregor.errors import OutOfRangeError


class Weekday(Enum):
    """A day of the week.

    Examples:
        >>> Weekday.from_zero(0)
        <Weekday.SUNDAY: 'sunday'>
        >>> Weekday.from_one(1)
        <Weekday.MONDAY: 'monday'>
        >>> Weekday.SUNDAY.days_from_monday_as_one()
        7
    """

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @classmethod
    def from_zero(cls, weekday: int) -> Weekday:
        """Return the weekday numbered from Sunday as 0.

        Raises:
            OutOfRangeError: If weekday is not in 0..6.
        """
        if weekday not in range(0, 7):
            raise OutOfRangeError("weekday", weekday, range(0, 7))
        return _FROM_SUNDAY[weekday]

    @classmethod
    def from_one(cls, weekday: int) -> Weekday:
        """Return the weekday numbered from Monday as 1.

        Raises:
            OutOfRangeError: If weekday is not in 1..7.
        """
        if weekday not in range(1, 8):
            raise OutOfRangeError("weekday", weekday, range(1, 8))
        return _FROM_MONDAY[weekday - 1]

    def days_from_monday_as_one(self) -> int:
        """Return the ISO 8601 weekday number, Monday as 1 and Sunday as 7."""
        return _FROM_MONDAY.index(self) + 1

    def days_from_sunday_as_zero(self) -> int:
        """Return the weekday number with Sunday as 0 and Saturday as 6."""
        return _FROM_SUNDAY.index(self)


_FROM_SUNDAY: tuple[Weekday, ...] = (
    Weekday.SUNDAY,
    Weekday.MONDAY,
    Weekday.TUESDAY,
    Weekday.WEDNESDAY,
    Weekday.THURSDAY,
    Weekday.FRIDAY,
    Weekday.SATURDAY,
)

_FROM_MONDAY: tuple[Weekday, ...] = (
    Weekday.MONDAY,
    Weekday.TUESDAY,
    Weekday.WEDNESDAY,
    Weekday.THURSDAY,
    Weekday.FRIDAY,
    Weekday.SATURDAY,
    Weekday.SUNDAY,
)


__all__ = ["Weekday"]
