"""Year value type.

This module provides the Year class, a small wrapper around an integer
year so that years are never confused with day counts or seconds.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gregor._internal.calendar import leap_year_calculations

if TYPE_CHECKING:
    from gregor.core.iter import YearMonths
    from gregor.core.yearmonth import YearMonth
    from gregor.units.month import Month


class Year:
    """A year in the proleptic Gregorian calendar.

    Years use astronomical numbering: year 0 exists (1 BCE), and years
    before it are negative. Any integer is a valid year.

    Examples:
        >>> Year(2024).is_leap_year
        True
        >>> int(Year(1999).next_year())
        2000
    """

    __slots__ = ("_value",)

    def __init__(self, value: int) -> None:
        """Create a Year.

        Args:
            value: The year number.

        Raises:
            TypeError: If value is not an integer.
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"year must be an integer, got {type(value).__name__}")
        self._value: int = value

    @property
    def value(self) -> int:
        """Return the year number."""
        return self._value

    @property
    def is_leap_year(self) -> bool:
        """Return True if this is a leap year."""
        return leap_year_calculations(self._value)[1]

    def leap_year_calculations(self) -> tuple[int, bool]:
        """Return (leap days since 2000-03-01, is_leap) for this year.

        See gregor._internal.calendar.leap_year_calculations.
        """
        return leap_year_calculations(self._value)

    def next_year(self) -> Year:
        return Year(self._value + 1)

    def previous_year(self) -> Year:
        return Year(self._value - 1)

    def month(self, month: Month) -> YearMonth:
        """Return the given month of this year.

        Examples:
            >>> from gregor.units.month import Month
            >>> Year(2024).month(Month.FEBRUARY).day_count()
            29
        """
        from gregor.core.yearmonth import YearMonth

        return YearMonth(self, month)

    def months(self, start: Month | None = None, stop: Month | None = None) -> YearMonths:
        """Return the months of this year from start up to, not including, stop.

        Either bound may be None to leave that end open. The result can be
        iterated in either direction.

        Examples:
            >>> [ym.month.number for ym in Year(2024).months()][:3]
            [1, 2, 3]
        """
        from gregor.core.iter import YearMonths

        return YearMonths(self, start, stop)

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._value == other._value

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._value < other._value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._value <= other._value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._value > other._value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._value >= other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"Year({self._value})"

    def __str__(self) -> str:
        return str(self._value)


__all__ = ["Year"]
