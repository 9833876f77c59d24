"""Month enumeration.

This module provides the Month enum and its two numbering conventions.
"""

from __future__ import annotations

from enum import Enum

from gregor._internal.constants import DAYS_BEFORE_MONTH, DAYS_IN_MONTH
from gregor.errors import OutOfRangeError


class Month(Enum):
    """A month of the year.

    Months are ordered the way they fall in the calendar, January first.
    Conversions to and from numbers go through explicit tables rather
    than the enum's values, so both the 1-based (January = 1) and
    0-based (January = 0) conventions are named at the call site.

    Examples:
        >>> Month.from_one(3)
        <Month.MARCH: 'march'>
        >>> Month.MARCH.months_from_january()
        2
        >>> Month.FEBRUARY.days_in_month(leap=True)
        29
        >>> Month.MARCH > Month.FEBRUARY
        True
    """

    JANUARY = "january"
    FEBRUARY = "february"
    MARCH = "march"
    APRIL = "april"
    MAY = "may"
    JUNE = "june"
    JULY = "july"
    AUGUST = "august"
    SEPTEMBER = "september"
    OCTOBER = "october"
    NOVEMBER = "november"
    DECEMBER = "december"

    @classmethod
    def from_one(cls, month: int) -> Month:
        """Return the month numbered from January as 1.

        Raises:
            OutOfRangeError: If month is not in 1..12.
        """
        if month not in range(1, 13):
            raise OutOfRangeError("month", month, range(1, 13))
        return _MONTHS[month - 1]

    @classmethod
    def from_zero(cls, month: int) -> Month:
        """Return the month numbered from January as 0.

        Raises:
            OutOfRangeError: If month is not in 0..11.
        """
        if month not in range(0, 12):
            raise OutOfRangeError("month", month, range(0, 12))
        return _MONTHS[month]

    def months_from_january(self) -> int:
        """Return the number of months between January and this month."""
        return _MONTH_INDEX[self]

    @property
    def number(self) -> int:
        """Return the month number, January as 1."""
        return _MONTH_INDEX[self] + 1

    def days_in_month(self, leap: bool) -> int:
        """Return the number of days in this month.

        Args:
            leap: Whether the month's year is a leap year.
        """
        if self is Month.FEBRUARY and leap:
            return 29
        return DAYS_IN_MONTH[_MONTH_INDEX[self]]

    def days_before_start(self) -> int:
        """Return the days in a common year before the first of this month.

        The leap day is not included; callers add it for months after
        February in leap years.
        """
        return DAYS_BEFORE_MONTH[_MONTH_INDEX[self]]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Month):
            return NotImplemented
        return _MONTH_INDEX[self] < _MONTH_INDEX[other]

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Month):
            return NotImplemented
        return _MONTH_INDEX[self] <= _MONTH_INDEX[other]

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Month):
            return NotImplemented
        return _MONTH_INDEX[self] > _MONTH_INDEX[other]

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Month):
            return NotImplemented
        return _MONTH_INDEX[self] >= _MONTH_INDEX[other]


_MONTHS: tuple[Month, ...] = (
    Month.JANUARY,
    Month.FEBRUARY,
    Month.MARCH,
    Month.APRIL,
    Month.MAY,
    Month.JUNE,
    Month.JULY,
    Month.AUGUST,
    Month.SEPTEMBER,
    Month.OCTOBER,
    Month.NOVEMBER,
    Month.DECEMBER,
)

_MONTH_INDEX: dict[Month, int] = {month: index for index, month in enumerate(_MONTHS)}


__all__ = ["Month"]
