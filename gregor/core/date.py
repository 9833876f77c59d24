"""Date class representing a calendar date.

This module provides the Date class for representing calendar dates
in the proleptic Gregorian calendar, including years before 1 and far
beyond 9999.
"""

from __future__ import annotations

from gregor._internal.calendar import (
    date_from_days,
    days_in_year,
    days_since_epoch,
    iso_weeks_in_year,
    weekday_from_days,
)
from gregor._internal.constants import EPOCH_DIFFERENCE
from gregor._internal.validation import check_integer, check_range, validate_day
from gregor.core.yearmonth import YearMonthDay
from gregor.units.month import Month
from gregor.units.weekday import Weekday
from gregor.units.year import Year


def _coerce_year(year: Year | int) -> Year:
    if isinstance(year, Year):
        return year
    return Year(year)


def _coerce_month(month: Month | int) -> Month:
    if isinstance(month, Month):
        return month
    if isinstance(month, bool) or not isinstance(month, int):
        raise TypeError(f"month must be a Month or int, got {type(month).__name__}")
    return Month.from_one(month)


def _coerce_weekday(weekday: Weekday | int) -> Weekday:
    if isinstance(weekday, Weekday):
        return weekday
    if isinstance(weekday, bool) or not isinstance(weekday, int):
        raise TypeError(f"weekday must be a Weekday or int, got {type(weekday).__name__}")
    return Weekday.from_one(weekday)


class Date:
    """A calendar date in the proleptic Gregorian calendar.

    Date represents a specific calendar day with year, month, and day
    components. It uses the proleptic Gregorian calendar, which means
    the Gregorian calendar rules are extended to dates before its
    actual adoption in 1582. Years use astronomical numbering (year 0
    exists) and are unbounded.

    The day of the year and the day of the week are worked out once, at
    construction, and stored alongside the calendar fields. Equality,
    ordering and hashing look only at the calendar fields.

    Attributes:
        year: The year, as a Year.
        month: The month, as a Month.
        day: The day of the month (1-31).
        yearday: The day of the year (1-366).
        weekday: The day of the week, as a Weekday.

    Examples:
        >>> d = Date(2024, 1, 15)
        >>> int(d.year), d.month, d.day
        (2024, <Month.JANUARY: 'january'>, 15)
        >>> d.weekday
        <Weekday.MONDAY: 'monday'>

        >>> Date.yd(2015, 256)
        Date(2015, 9, 13)

        >>> Date.ywd(2009, 1, Weekday.MONDAY)  # Week 1 starts in 2008
        Date(2008, 12, 29)
    """

    __slots__ = ("_ymd", "_yearday", "_weekday")

    def __init__(self, year: Year | int, month: Month | int, day: int) -> None:
        """Create a Date from year, month, and day.

        Args:
            year: The year, as a Year or an int.
            month: The month, as a Month or an int with January as 1.
            day: The day of the month.

        Raises:
            OutOfRangeError: If month or day is out of range.
            TypeError: If an argument has the wrong type.

        Examples:
            >>> Date(2024, Month.FEBRUARY, 29)
            Date(2024, 2, 29)

            >>> Date(2023, 2, 29)  # 2023 is not a leap year
            Traceback (most recent call last):
            ...
            OutOfRangeError: day must be between 1 and 28, got 29
        """
        year = _coerce_year(year)
        month = _coerce_month(month)
        check_integer("day", day)

        validate_day(year.value, month.number, day)

        fields = date_from_days(days_since_epoch(year.value, month.number, day))
        self._ymd: YearMonthDay = YearMonthDay(year, month, day)
        self._yearday: int = fields.yearday
        self._weekday: Weekday = Weekday.from_zero(fields.weekday)

    @classmethod
    def _from_day_count(cls, days: int) -> Date:
        # days counts from 2000-03-01; every day count is a valid date
        fields = date_from_days(days)
        date = cls.__new__(cls)
        date._ymd = YearMonthDay(
            Year(fields.year), Month.from_one(fields.month), fields.day
        )
        date._yearday = fields.yearday
        date._weekday = Weekday.from_zero(fields.weekday)
        return date

    @classmethod
    def ymd(cls, year: Year | int, month: Month | int, day: int) -> Date:
        """Create a Date from year, month and day. Same as Date(...)."""
        return cls(year, month, day)

    @classmethod
    def yd(cls, year: Year | int, yearday: int) -> Date:
        """Create a Date from a year and a day of that year.

        Args:
            year: The year.
            yearday: The day of the year, 1 January as 1.

        Returns:
            The corresponding Date.

        Raises:
            OutOfRangeError: If yearday is outside 1 to 365 (366 in leap
                years).

        Examples:
            >>> Date.yd(2016, 268)
            Date(2016, 9, 24)
            >>> Date.yd(2015, 268)
            Date(2015, 9, 25)
        """
        year = _coerce_year(year)
        check_range("yearday", yearday, range(1, days_in_year(year.value) + 1))

        jan_1 = days_since_epoch(year.value, 1, 1)
        return cls._from_day_count(jan_1 + yearday - 1)

    @classmethod
    def ywd(cls, year: Year | int, week: int, weekday: Weekday | int) -> Date:
        """Create a Date from an ISO 8601 week date.

        Week 1 is the week holding 4 January, so its Monday can fall in
        the previous year, and the last week can end in the next year.

        Args:
            year: The ISO week-numbering year.
            week: The week number (1 to 52, or 53 in long years).
            weekday: The day of the week, as a Weekday or an int with
                Monday as 1.

        Returns:
            The corresponding Date.

        Raises:
            OutOfRangeError: If week or weekday is out of range.

        Examples:
            >>> Date.ywd(2015, 37, Weekday.FRIDAY)
            Date(2015, 9, 11)
            >>> Date.ywd(2009, 53, Weekday.SUNDAY)
            Date(2010, 1, 3)
        """
        year = _coerce_year(year)
        weekday = _coerce_weekday(weekday)
        check_range("week", week, range(1, iso_weeks_in_year(year.value) + 1))

        jan_4 = Weekday.from_zero(weekday_from_days(days_since_epoch(year.value, 1, 4)))
        correction = jan_4.days_from_monday_as_one() + 3
        yearday = 7 * week + weekday.days_from_monday_as_one() - correction

        if yearday <= 0:
            previous = year.previous_year()
            return cls.yd(previous, days_in_year(previous.value) + yearday)

        total = days_in_year(year.value)
        if yearday > total:
            return cls.yd(year.next_year(), yearday - total)

        return cls.yd(year, yearday)

    @classmethod
    def from_days_since_epoch(cls, days: int) -> Date:
        """Create a Date from a count of days since 1970-01-01.

        Examples:
            >>> Date.from_days_since_epoch(0)
            Date(1970, 1, 1)
        """
        return cls._from_day_count(days - EPOCH_DIFFERENCE)

    @classmethod
    def today(cls) -> Date:
        """Return today's date in UTC, read from the system clock."""
        from gregor.core.datetime import DateTime

        return DateTime.now().date

    @classmethod
    def from_iso_format(cls, s: str) -> Date:
        """Parse a calendar, ordinal or week date in ISO 8601 format.

        Examples:
            >>> Date.from_iso_format("2024-01-15")
            Date(2024, 1, 15)
            >>> Date.from_iso_format("2009-W01-1")
            Date(2008, 12, 29)
        """
        from gregor.format.iso8601 import parse_date

        return parse_date(s)

    @property
    def year(self) -> Year:
        """Return the year component."""
        return self._ymd.year

    @property
    def month(self) -> Month:
        """Return the month component."""
        return self._ymd.month

    @property
    def day(self) -> int:
        """Return the day of the month."""
        return self._ymd.day

    @property
    def yearday(self) -> int:
        """Return the day of the year.

        Examples:
            >>> Date(2024, 12, 31).yearday  # Leap year
            366
        """
        return self._yearday

    @property
    def weekday(self) -> Weekday:
        """Return the day of the week."""
        return self._weekday

    @property
    def year_month_day(self) -> YearMonthDay:
        """Return the plain calendar fields."""
        return self._ymd

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date is in a leap year."""
        return self._ymd.year.is_leap_year

    @property
    def days_since_epoch(self) -> int:
        """Return the number of days since 1970-01-01 (negative before it).

        Examples:
            >>> Date(1970, 1, 2).days_since_epoch
            1
        """
        ymd = self._ymd
        return days_since_epoch(ymd.year.value, ymd.month.number, ymd.day) + EPOCH_DIFFERENCE

    def to_iso_format(self) -> str:
        """Return the date as an ISO 8601 string.

        Years 0 to 9999 are written with four digits; other years carry
        an explicit sign.

        Examples:
            >>> Date(2024, 1, 15).to_iso_format()
            '2024-01-15'
            >>> Date(-753, 12, 1).to_iso_format()
            '-0753-12-01'
        """
        from gregor.format.iso8601 import format_date

        return format_date(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._ymd == other._ymd

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._ymd < other._ymd

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._ymd <= other._ymd

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._ymd > other._ymd

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._ymd >= other._ymd

    def __hash__(self) -> int:
        return hash(self._ymd)

    def __repr__(self) -> str:
        """Return a string like 'Date(2024, 1, 15)'."""
        ymd = self._ymd
        return f"Date({ymd.year.value}, {ymd.month.number}, {ymd.day})"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["Date"]
