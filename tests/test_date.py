"""Tests for the Date class."""

from __future__ import annotations

import pytest

from gregor._internal.calendar import is_leap_year
from gregor.core.date import Date
from gregor.core.yearmonth import YearMonthDay
from gregor.errors import OutOfRangeError
from gregor.units.month import Month
from gregor.units.weekday import Weekday
from gregor.units.year import Year


class TestDateConstruction:
    """Tests for Date construction from year, month and day."""

    def test_basic_construction(self) -> None:
        """Test basic date construction."""
        d = Date(2024, 1, 15)
        assert d.year == Year(2024)
        assert d.month is Month.JANUARY
        assert d.day == 15

    def test_month_enum_and_int_agree(self) -> None:
        """Test that a Month and its number build the same date."""
        assert Date(2024, Month.MARCH, 1) == Date(2024, 3, 1)
        assert Date(Year(2024), 3, 1) == Date(2024, 3, 1)

    def test_ymd_alias(self) -> None:
        """Test Date.ymd."""
        assert Date.ymd(2015, Month.JANUARY, 16) == Date(2015, 1, 16)

    def test_distant_past(self) -> None:
        """Test a date in the first century."""
        d = Date.ymd(7, Month.APRIL, 1)
        assert (d.year.value, d.month, d.day) == (7, Month.APRIL, 1)

    def test_distant_future(self) -> None:
        """Test a year in the millions."""
        d = Date.ymd(1048576, Month.OCTOBER, 13)
        assert d.year == Year(1048576)
        assert d.month is Month.OCTOBER
        assert d.day == 13

    def test_negative_year(self) -> None:
        """Test a proleptic date before year 0."""
        d = Date(-753, 12, 1)
        assert d.year.value == -753
        assert d.yearday == 335

    def test_invalid_month(self) -> None:
        """Test that month 13 raises OutOfRangeError."""
        with pytest.raises(OutOfRangeError, match="month must be between 1 and 12, got 13"):
            Date(2024, 13, 1)

    def test_invalid_day_zero(self) -> None:
        """Test that day 0 raises OutOfRangeError."""
        with pytest.raises(OutOfRangeError, match="day must be between 1 and 31, got 0"):
            Date(2024, 1, 0)

    def test_invalid_feb_29_non_leap(self) -> None:
        """Test that Feb 29 is rejected in a common year."""
        with pytest.raises(OutOfRangeError, match="day must be between 1 and 28, got 29"):
            Date(2023, 2, 29)

    def test_error_fields(self) -> None:
        """Test that the error names the field, value and valid range."""
        with pytest.raises(OutOfRangeError) as excinfo:
            Date(2024, 4, 31)
        assert excinfo.value.field == "day"
        assert excinfo.value.value == 31
        assert excinfo.value.valid == range(1, 31)

    def test_wrong_types(self) -> None:
        """Test that wrong argument types raise TypeError."""
        with pytest.raises(TypeError, match="month must be a Month or int"):
            Date(2024, "1", 1)  # type: ignore[arg-type]
        with pytest.raises(TypeError, match="day must be an integer"):
            Date(2024, 1, 1.0)  # type: ignore[arg-type]
        with pytest.raises(TypeError, match="year must be an integer"):
            Date("2024", 1, 1)  # type: ignore[arg-type]

    def test_boundary_rejection(self) -> None:
        """Test that impossible days are rejected in every year 1-2999."""
        for year in range(1, 3000):
            for month, day in ((Month.JANUARY, 32), (Month.FEBRUARY, 30), (Month.APRIL, 31)):
                with pytest.raises(OutOfRangeError):
                    Date(year, month, day)

    def test_feb_29_only_in_leap_years(self) -> None:
        """Test that Feb 29 exists exactly in leap years 1-2999."""
        for year in range(1, 3000):
            if is_leap_year(year):
                assert Date(year, Month.FEBRUARY, 29).day == 29
            else:
                with pytest.raises(OutOfRangeError):
                    Date(year, Month.FEBRUARY, 29)


class TestDateFromYearday:
    """Tests for Date.yd."""

    def test_start_of_year(self) -> None:
        """Test day 1."""
        assert Date.yd(2015, 1) == Date(2015, 1, 1)

    def test_hex_yearday(self) -> None:
        """Test the 256th day of 2015."""
        d = Date.yd(2015, 0x100)
        assert d == Date(2015, 9, 13)
        assert d.yearday == 256

    def test_leap_year_shift(self) -> None:
        """Test that the same yearday lands a day earlier in a leap year."""
        assert Date.yd(2016, 268) == Date(2016, 9, 24)
        assert Date.yd(2015, 268) == Date(2015, 9, 25)

    def test_last_day(self) -> None:
        """Test the last day of common and leap years."""
        assert Date.yd(2015, 365) == Date(2015, 12, 31)
        assert Date.yd(2016, 366) == Date(2016, 12, 31)

    @pytest.mark.parametrize(("year", "yearday"), [(2015, 0), (2015, 366), (2016, 367)])
    def test_out_of_range(self, year: int, yearday: int) -> None:
        """Test rejection of days outside the year."""
        with pytest.raises(OutOfRangeError, match="yearday must be between 1 and"):
            Date.yd(year, yearday)

    def test_every_day_round_trips(self) -> None:
        """Test that yd rebuilds every date from its own yearday."""
        for year in (2002, 2000, 1900):
            for month in Month:
                for day in range(1, month.days_in_month(is_leap_year(year)) + 1):
                    date = Date(year, month, day)
                    assert Date.yd(year, date.yearday) == date
                    assert Date.yd(year, date.yearday).yearday == date.yearday


class TestDateFromWeekDate:
    """Tests for Date.ywd (ISO 8601 week dates)."""

    def test_mid_year(self) -> None:
        """Test a week date inside its year."""
        assert Date.ywd(2015, 37, Weekday.FRIDAY) == Date(2015, 9, 11)

    def test_rolls_back_into_previous_year(self) -> None:
        """Test that week 1 can start in December."""
        assert Date.ywd(2009, 1, Weekday.MONDAY) == Date(2008, 12, 29)
        assert Date.ywd(2015, 1, Weekday.MONDAY) == Date(2014, 12, 29)

    def test_rolls_forward_into_next_year(self) -> None:
        """Test that week 53 can end in January."""
        assert Date.ywd(2009, 53, Weekday.SUNDAY) == Date(2010, 1, 3)

    def test_int_weekday_is_monday_first(self) -> None:
        """Test that an int weekday counts Monday as 1."""
        assert Date.ywd(2015, 1, 4) == Date(2015, 1, 1)
        assert Date.ywd(2015, 1, 7) == Date(2015, 1, 4)

    def test_week_out_of_range(self) -> None:
        """Test that week 53 is rejected in a 52-week year."""
        with pytest.raises(OutOfRangeError, match="week must be between 1 and 52, got 53"):
            Date.ywd(2010, 53, Weekday.MONDAY)
        with pytest.raises(OutOfRangeError, match="week must be between 1 and 53, got 0"):
            Date.ywd(2009, 0, Weekday.MONDAY)

    def test_weekday_out_of_range(self) -> None:
        """Test that weekday 0 is rejected."""
        with pytest.raises(OutOfRangeError, match="weekday must be between 1 and 7"):
            Date.ywd(2015, 10, 0)

    def test_weekday_matches(self) -> None:
        """Test that every week date has the requested weekday."""
        for week in range(1, 54):
            for weekday in Weekday:
                assert Date.ywd(2015, week, weekday).weekday is weekday

    def test_consecutive_days(self) -> None:
        """Test that consecutive week dates are consecutive days."""
        dates = [
            Date.ywd(2020, week, weekday)
            for week in range(1, 54)
            for weekday in (Weekday.from_one(n) for n in range(1, 8))
        ]
        counts = [d.days_since_epoch for d in dates]
        assert counts == list(range(counts[0], counts[0] + len(counts)))


class TestDateProperties:
    """Tests for derived Date fields."""

    @pytest.mark.parametrize(
        ("ymd", "weekday"),
        [
            ((1970, 1, 1), Weekday.THURSDAY),
            ((2000, 3, 1), Weekday.WEDNESDAY),
            ((2024, 1, 15), Weekday.MONDAY),
            ((2010, 1, 3), Weekday.SUNDAY),
        ],
    )
    def test_weekday(self, ymd: tuple[int, int, int], weekday: Weekday) -> None:
        """Test weekdays of known dates."""
        assert Date(*ymd).weekday is weekday

    def test_yearday(self) -> None:
        """Test day-of-year values."""
        assert Date(2015, 1, 1).yearday == 1
        assert Date(2015, 12, 31).yearday == 365
        assert Date(2024, 12, 31).yearday == 366
        assert Date(2024, 3, 1).yearday == 61

    def test_derived_fields_match_day_count(self) -> None:
        """Test that stored yearday and weekday match a fresh derivation."""
        for days in range(-800, 800, 3):
            date = Date.from_days_since_epoch(days)
            rebuilt = Date(date.year, date.month, date.day)
            assert rebuilt.yearday == date.yearday
            assert rebuilt.weekday is date.weekday
            assert rebuilt.days_since_epoch == days

    def test_days_since_epoch(self) -> None:
        """Test days counted from 1970-01-01."""
        assert Date(1970, 1, 1).days_since_epoch == 0
        assert Date(1969, 12, 31).days_since_epoch == -1
        assert Date(2000, 3, 1).days_since_epoch == 11017

    def test_from_days_since_epoch(self) -> None:
        """Test building a Date from a 1970-based day count."""
        assert Date.from_days_since_epoch(0) == Date(1970, 1, 1)
        assert Date.from_days_since_epoch(-1) == Date(1969, 12, 31)

    def test_year_month_day(self) -> None:
        """Test the plain calendar fields."""
        assert Date(2024, 1, 15).year_month_day == YearMonthDay(Year(2024), Month.JANUARY, 15)

    def test_is_leap_year(self) -> None:
        """Test the leap-year flag."""
        assert Date(2024, 1, 1).is_leap_year
        assert not Date(1900, 1, 1).is_leap_year


class TestDateComparison:
    """Tests for Date equality, ordering and hashing."""

    def test_equality(self) -> None:
        """Test equality with another date."""
        assert Date(2024, 1, 15) == Date(2024, 1, 15)
        assert Date(2024, 1, 15) != Date(2024, 1, 16)

    def test_equality_with_other_types(self) -> None:
        """Test that a Date never equals a non-Date."""
        assert Date(2024, 1, 15) != "2024-01-15"

    def test_ordering(self) -> None:
        """Test calendar ordering."""
        assert Date(2024, 1, 31) < Date(2024, 2, 1)
        assert Date(-1, 12, 31) < Date(0, 1, 1)
        assert Date(2024, 1, 1) <= Date(2024, 1, 1)
        assert Date(2025, 1, 1) > Date(2024, 12, 31)

    def test_ordering_against_other_types(self) -> None:
        """Test that ordering against a non-Date is a TypeError."""
        with pytest.raises(TypeError):
            Date(2024, 1, 1) < 5  # noqa: B015

    def test_hash(self) -> None:
        """Test that equal dates hash equally."""
        assert len({Date(2024, 1, 15), Date(2024, Month.JANUARY, 15)}) == 1

    def test_repr_and_str(self) -> None:
        """Test string forms."""
        assert repr(Date(2024, 1, 15)) == "Date(2024, 1, 15)"
        assert str(Date(2024, 1, 15)) == "2024-01-15"


class TestDateArgumentTypes:
    """Tests for rejecting non-integer day, yearday and week numbers."""

    @pytest.mark.parametrize("yearday", [True, 256.0])
    def test_yd_rejects_non_integer(self, yearday: object) -> None:
        """Test that the yearday must be an int."""
        with pytest.raises(TypeError, match="yearday must be an integer"):
            Date.yd(2015, yearday)  # type: ignore[arg-type]

    @pytest.mark.parametrize("week", [True, 37.0])
    def test_ywd_rejects_non_integer_week(self, week: object) -> None:
        """Test that the week must be an int."""
        with pytest.raises(TypeError, match="week must be an integer"):
            Date.ywd(2015, week, Weekday.FRIDAY)  # type: ignore[arg-type]

    def test_day_rejects_float(self) -> None:
        """Test that the day of the month must be an int."""
        with pytest.raises(TypeError, match="day must be an integer, got float"):
            Date(2015, 9, 13.0)  # type: ignore[arg-type]
