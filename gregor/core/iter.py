"""Iteration over the months of a year and the days of a month.

Both iterables cover a half-open range and can be walked forwards or
backwards any number of times.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from gregor._internal.validation import check_range
from gregor.units.month import Month

if TYPE_CHECKING:
    from gregor.core.date import Date
    from gregor.core.yearmonth import YearMonth
    from gregor.units.year import Year


class YearMonths:
    """The months of a year, from start up to but not including stop.

    Examples:
        >>> from gregor.units.year import Year
        >>> months = Year(2024).months(Month.MARCH, Month.JUNE)
        >>> [ym.month for ym in months]
        [<Month.MARCH: 'march'>, <Month.APRIL: 'april'>, <Month.MAY: 'may'>]
        >>> len(Year(2024).months())
        12
    """

    __slots__ = ("_year", "_range")

    def __init__(self, year: Year, start: Month | None = None, stop: Month | None = None) -> None:
        first = 0 if start is None else start.months_from_january()
        last = 12 if stop is None else stop.months_from_january()
        self._year = year
        self._range = range(first, last)

    def _year_month(self, index: int) -> YearMonth:
        return self._year.month(Month.from_zero(index))

    def __iter__(self) -> Iterator[YearMonth]:
        for index in self._range:
            yield self._year_month(index)

    def __reversed__(self) -> Iterator[YearMonth]:
        for index in reversed(self._range):
            yield self._year_month(index)

    def __len__(self) -> int:
        return len(self._range)

    def __repr__(self) -> str:
        return f"YearMonths({self._year!r}, {self._range.start}, {self._range.stop})"


class MonthDays:
    """The dates of a month, from day start up to but not including day stop.

    Raises:
        OutOfRangeError: If either bound is outside 1 to one past the
            last day of the month.

    Examples:
        >>> from gregor.units.year import Year
        >>> days = Year(2015).month(Month.FEBRUARY).days()
        >>> len(days)
        28
        >>> str(next(reversed(days)))
        '2015-02-28'
    """

    __slots__ = ("_year_month", "_range")

    def __init__(self, year_month: YearMonth, start: int | None = None, stop: int | None = None) -> None:
        bounds = range(1, year_month.day_count() + 2)
        first = 1 if start is None else check_range("day", start, bounds)
        last = bounds.stop - 1 if stop is None else check_range("day", stop, bounds)
        self._year_month = year_month
        self._range = range(first, last)

    def _date(self, day: int) -> Date:
        from gregor.core.date import Date

        return Date(self._year_month.year, self._year_month.month, day)

    def __iter__(self) -> Iterator[Date]:
        for day in self._range:
            yield self._date(day)

    def __reversed__(self) -> Iterator[Date]:
        for day in reversed(self._range):
            yield self._date(day)

    def __len__(self) -> int:
        return len(self._range)

    def __repr__(self) -> str:
        return f"MonthDays({self._year_month!r}, {self._range.start}, {self._range.stop})"


__all__ = ["YearMonths", "MonthDays"]
