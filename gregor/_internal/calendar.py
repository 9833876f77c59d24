"""Calendar arithmetic for Gregor.

This module converts between a linear count of days and proleptic
Gregorian calendar fields, and holds the leap-year logic both directions
depend on.

The day count used here starts at 2000-03-01 (day 0), not at the Unix
epoch. With the reference year a multiple of 400 and the year starting
just after February, the one irregular day of the calendar (29 February)
always falls at the very end of a counting year, so every 400-, 100- and
4-year boundary in the day count is a calendar cycle boundary as well.
Callers that work in days since 1970-01-01 shift by EPOCH_DIFFERENCE.

This module is not part of the public API.
"""

from __future__ import annotations

from typing import NamedTuple

from gregor._internal.constants import (
    DAYS_BEFORE_MONTH,
    DAYS_IN_100Y,
    DAYS_IN_400Y,
    DAYS_IN_4Y,
    DAYS_IN_MONTH,
    DAYS_MARCH_TO_DECEMBER,
    MARCH_TRIANGLE,
    REFERENCE_WEEKDAY,
    REFERENCE_YEAR,
)


class DayFields(NamedTuple):
    """Calendar fields decoded from a day count.

    Attributes:
        year: The year (astronomical numbering, may be zero or negative).
        month: The month, January as 1.
        day: The day of the month, from 1.
        yearday: The day of the year, 1 January as 1.
        weekday: The day of the week, Sunday as 0.
    """

    year: int
    month: int
    day: int
    yearday: int
    weekday: int


def split_cycles(number_of_periods: int, cycle_length: int) -> tuple[int, int]:
    """Split a count into whole cycles and a non-negative remainder.

    This is a division that always leaves a remainder in
    ``0 <= remainder < cycle_length``, whatever the sign of the count, so
    that periodic calendar maths works the same way before and after the
    reference point.

    Args:
        number_of_periods: The count to split (any sign).
        cycle_length: The length of one cycle (must be positive).

    Returns:
        Tuple of (cycles, remainder) with
        ``number_of_periods == cycles * cycle_length + remainder``.

    Raises:
        ValueError: If cycle_length is not positive.

    Examples:
        >>> split_cycles(7, 3)
        (2, 1)
        >>> split_cycles(-7, 3)
        (-3, 2)
    """
    if cycle_length <= 0:
        raise ValueError(f"cycle_length must be positive, got {cycle_length}")
    return divmod(number_of_periods, cycle_length)


def leap_year_calculations(year: int) -> tuple[int, bool]:
    """Count elapsed leap days and check whether a year is a leap year.

    Performs two related calculations for leap years:

    1. The signed number of leap days between the reference day
       (2000-03-01) and 1 January of ``year``;
    2. Whether ``year`` itself is a leap year.

    The current year's own leap day is never part of the count, so it is
    subtracted when the year turns out to be a leap year. The leap test
    has to run before that subtraction.

    Args:
        year: The year (can be negative).

    Returns:
        Tuple of (leap_years_elapsed, is_leap).

    Examples:
        >>> leap_year_calculations(2005)
        (1, False)
        >>> leap_year_calculations(2004)
        (0, True)
        >>> leap_year_calculations(2100)
        (24, False)
    """
    num_400y_cycles, remainder = split_cycles(year - REFERENCE_YEAR, 400)

    # Standard leap-year rule, applied to the year within its 400-year cycle
    is_leap = remainder == 0 or (remainder % 100 != 0 and remainder % 4 == 0)

    num_100y_cycles, remainder = split_cycles(remainder, 100)

    leap_years_elapsed = (
        remainder // 4
        + 97 * num_400y_cycles  # 97 leap years in 400 years
        + 24 * num_100y_cycles  # 24 leap years in 100 years
    )
    if is_leap:
        leap_years_elapsed -= 1

    return leap_years_elapsed, is_leap


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)  # Divisible by 4 but not 100
        True
    """
    return leap_year_calculations(year)[1]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


def days_in_month(month: int, leap: bool) -> int:
    """Return the number of days in a month.

    Args:
        month: The month, January as 1. Must already be valid.
        leap: Whether the month's year is a leap year.

    Returns:
        Number of days in the month.
    """
    if month == 2 and leap:
        return 29
    return DAYS_IN_MONTH[month - 1]


def days_since_epoch(year: int, month: int, day: int) -> int:
    """Convert calendar fields to a count of days since 2000-03-01.

    The fields are assumed to form a valid date already: this function
    does no validation and returns a meaningless (but finite) number for
    fields such as 30 February. Validate through a Date constructor first.

    Args:
        year: The year (can be negative).
        month: The month, January as 1.
        day: The day of the month.

    Returns:
        Days relative to 2000-03-01 (negative before it).

    Examples:
        >>> days_since_epoch(2000, 3, 1)
        0
        >>> days_since_epoch(1970, 1, 1)
        -11017
    """
    leap_days_elapsed, leap = leap_year_calculations(year)

    days = (
        365 * (year - REFERENCE_YEAR)
        + leap_days_elapsed
        # 2000-01-01 is 60 days before the reference day, one of which is
        # the leap day that leap_days_elapsed leaves out
        - 59
        + DAYS_BEFORE_MONTH[month - 1]
        + (day - 1)
    )

    # This year's own leap day, once February is over
    if leap and month >= 3:
        days += 1

    return days


def weekday_from_days(days: int) -> int:
    """Return the day of the week for a day count, Sunday as 0.

    Args:
        days: Days relative to 2000-03-01.

    Returns:
        Day of week (0=Sunday, 6=Saturday).
    """
    return split_cycles(days + REFERENCE_WEEKDAY, 7)[1]


def date_from_days(days: int) -> DayFields:
    """Convert a count of days since 2000-03-01 to calendar fields.

    The count is peeled apart into 400-year, 100-year and 4-year cycles
    and single years, each one counting from 1 March. What is left is the
    offset into a March-based year, which the month triangle turns into a
    month and day before the year is shifted back to start in January.

    Args:
        days: Days relative to 2000-03-01 (any sign).

    Returns:
        The decoded DayFields.

    Examples:
        >>> date_from_days(0)
        DayFields(year=2000, month=3, day=1, yearday=61, weekday=3)
        >>> date_from_days(-11017)
        DayFields(year=1970, month=1, day=1, yearday=1, weekday=4)
    """
    num_400y_cycles, remainder = split_cycles(days, DAYS_IN_400Y)

    # The final day of a 400-year cycle is the 29 February that closes its
    # last 100-year block; likewise for the last day of a 4-year cycle.
    # Both have to stay inside the block instead of starting a new one.
    num_100y_cycles = min(remainder // DAYS_IN_100Y, 3)
    remainder -= num_100y_cycles * DAYS_IN_100Y

    num_4y_cycles = remainder // DAYS_IN_4Y
    remainder -= num_4y_cycles * DAYS_IN_4Y

    years = min(remainder // 365, 3)
    remainder -= years * 365  # days into this March-based year

    # The calendar year this March-based year starts in is a leap year
    # when it opens a 4-year cycle, except where that is also the start of
    # a 100-year block other than the first one.
    leap = years == 0 and (num_4y_cycles != 0 or num_100y_cycles == 0)
    days_this_year = 366 if leap else 365

    yearday = remainder + days_this_year - DAYS_MARCH_TO_DECEMBER
    if yearday >= days_this_year:
        yearday -= days_this_year  # January and February of the next year

    year = (
        REFERENCE_YEAR
        + 400 * num_400y_cycles
        + 100 * num_100y_cycles
        + 4 * num_4y_cycles
        + years
    )

    # The triangle runs backwards from January, so the month index is
    # 11 minus the position of the first entry not past the remainder.
    for index, elapsed in enumerate(MARCH_TRIANGLE):
        if elapsed <= remainder:
            month = 11 - index
            month_days = remainder - elapsed
            break
    else:
        month = 0
        month_days = remainder

    # Months so far count from March; re-bias to count from January
    month += 2
    if month >= 12:
        year += 1
        month -= 12

    return DayFields(
        year=year,
        month=month + 1,
        day=month_days + 1,
        yearday=yearday + 1,
        weekday=weekday_from_days(days),
    )


def iso_weeks_in_year(year: int) -> int:
    """Return the number of ISO 8601 weeks in a year (52 or 53).

    A year has 53 weeks when it starts on a Thursday, or when it is a
    leap year starting on a Wednesday.

    Examples:
        >>> iso_weeks_in_year(2009)
        53
        >>> iso_weeks_in_year(2010)
        52
    """
    jan_1 = weekday_from_days(days_since_epoch(year, 1, 1))
    if jan_1 == 4 or (jan_1 == 3 and is_leap_year(year)):
        return 53
    return 52


__all__ = [
    "DayFields",
    "split_cycles",
    "leap_year_calculations",
    "is_leap_year",
    "days_in_year",
    "days_in_month",
    "days_since_epoch",
    "weekday_from_days",
    "date_from_days",
    "iso_weeks_in_year",
]
