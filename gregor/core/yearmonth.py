"""Year-month and year-month-day compounds.

This module provides YearMonth, a month of a particular year, and
YearMonthDay, the plain calendar fields a Date is built from.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from gregor.units.month import Month
from gregor.units.year import Year

if TYPE_CHECKING:
    from gregor.core.iter import MonthDays


class YearMonth:
    """A month of a particular year.

    Examples:
        >>> ym = YearMonth(Year(2024), Month.FEBRUARY)
        >>> ym.day_count()
        29
        >>> len(ym.days())
        29
    """

    __slots__ = ("_year", "_month")

    def __init__(self, year: Year | int, month: Month) -> None:
        if not isinstance(year, Year):
            year = Year(year)
        if not isinstance(month, Month):
            raise TypeError(f"month must be a Month, got {type(month).__name__}")
        self._year: Year = year
        self._month: Month = month

    @property
    def year(self) -> Year:
        return self._year

    @property
    def month(self) -> Month:
        return self._month

    def day_count(self) -> int:
        """Return the number of days in this month."""
        return self._month.days_in_month(self._year.is_leap_year)

    def day(self, day: int) -> YearMonthDay:
        """Return the given day of this month, without validating it.

        Use Date(...) or the days() iterator when the day comes from
        outside the library.
        """
        return YearMonthDay(self._year, self._month, day)

    def days(self, start: int | None = None, stop: int | None = None) -> MonthDays:
        """Return the dates of this month from start up to, not including, stop.

        Args:
            start: First day number, or None for the 1st.
            stop: Day number to stop before, or None for the end of the month.

        Raises:
            OutOfRangeError: If a bound falls outside the month.
        """
        from gregor.core.iter import MonthDays

        return MonthDays(self, start, stop)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._year == other._year and self._month is other._month

    def __hash__(self) -> int:
        return hash((self._year, self._month))

    def __repr__(self) -> str:
        return f"YearMonth({self._year.value}, {self._month.number})"


class YearMonthDay:
    """Plain calendar fields: a year, a month and a day number.

    YearMonthDay does no validation of its own. Values built directly may
    name days that do not exist (such as 30 February); only the ones
    produced by Date's constructors are known to be valid.

    Ordering is lexicographic on (year, month, day).

    Examples:
        >>> a = YearMonthDay(Year(2024), Month.JANUARY, 31)
        >>> b = YearMonthDay(Year(2024), Month.FEBRUARY, 1)
        >>> a < b
        True
    """

    __slots__ = ("_year", "_month", "_day")

    def __init__(self, year: Year, month: Month, day: int) -> None:
        self._year: Year = year
        self._month: Month = month
        self._day: int = day

    @property
    def year(self) -> Year:
        return self._year

    @property
    def month(self) -> Month:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    def _key(self) -> tuple[int, int, int]:
        return (self._year.value, self._month.number, self._day)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, YearMonthDay):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, YearMonthDay):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, YearMonthDay):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, YearMonthDay):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, YearMonthDay):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __iter__(self) -> Iterator[Year | Month | int]:
        return iter((self._year, self._month, self._day))

    def __repr__(self) -> str:
        return f"YearMonthDay({self._year.value}, {self._month.number}, {self._day})"


__all__ = ["YearMonth", "YearMonthDay"]
