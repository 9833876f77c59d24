"""Tests for ISO 8601 parsing."""

from __future__ import annotations

import logging

import pytest

from gregor.core.date import Date
from gregor.core.datetime import DateTime
from gregor.core.offset_datetime import OffsetDateTime
from gregor.core.time import Time
from gregor.errors import OutOfRangeError, ParseError
from gregor.format import format_iso8601, parse_iso8601
from gregor.format.iso8601 import (
    parse_date,
    parse_datetime,
    parse_offset,
    parse_offset_datetime,
    parse_time,
)
from gregor.units.offset import Offset


class TestParseDate:
    """Tests for parsing the three date forms."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("2024-01-15", Date(2024, 1, 15)),
            ("-0753-12-01", Date(-753, 12, 1)),
            ("+10601-01-31", Date(10601, 1, 31)),
            ("0000-02-29", Date(0, 2, 29)),
            ("2015-W37-5", Date(2015, 9, 11)),
            ("2009-W01-1", Date(2008, 12, 29)),
            ("2009-W53-7", Date(2010, 1, 3)),
            ("2015-256", Date(2015, 9, 13)),
            ("2016-366", Date(2016, 12, 31)),
        ],
    )
    def test_valid(self, text: str, expected: Date) -> None:
        """Test calendar, week and ordinal dates."""
        assert parse_date(text) == expected
        assert Date.from_iso_format(text) == expected

    @pytest.mark.parametrize(
        ("text", "field"),
        [
            ("2015-02-29", "day"),
            ("2015-13-01", "month"),
            ("2015-00-10", "month"),
            ("2014-W53-1", "week"),
            ("2015-W10-8", "weekday"),
            ("2015-366", "yearday"),
            ("2015-000", "yearday"),
        ],
    )
    def test_out_of_range(self, text: str, field: str) -> None:
        """Test that well-formed strings with bad fields name the field."""
        with pytest.raises(OutOfRangeError) as excinfo:
            parse_date(text)
        assert excinfo.value.field == field

    @pytest.mark.parametrize(
        "text",
        ["", "2015", "2015-1-1", "15-01-01", "2015/01/01", "2015-01-01x", "2015-W1-1"],
    )
    def test_malformed(self, text: str) -> None:
        """Test that malformed strings raise ParseError."""
        with pytest.raises(ParseError, match="invalid ISO 8601 date"):
            parse_date(text)


class TestParseTime:
    """Tests for parsing times of day."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("14:30", Time(14, 30)),
            ("14:30:45", Time(14, 30, 45)),
            ("23:59:59.5", Time(23, 59, 59, 500)),
            ("23:59:59.05", Time(23, 59, 59, 50)),
            ("23:59:59.999", Time(23, 59, 59, 999)),
            ("12:00:00,25", Time(12, 0, 0, 250)),
            ("24:00", Time(24)),
            ("24:00:00.000", Time(24)),
        ],
    )
    def test_valid(self, text: str, expected: Time) -> None:
        """Test the accepted time forms."""
        assert parse_time(text) == expected
        assert Time.from_iso_format(text) == expected

    def test_out_of_range(self) -> None:
        """Test that bad fields raise OutOfRangeError."""
        with pytest.raises(OutOfRangeError, match="hour must be between 0 and 23, got 24"):
            parse_time("24:30")
        with pytest.raises(OutOfRangeError, match="minute"):
            parse_time("12:60")

    @pytest.mark.parametrize("text", ["1:30", "12", "12:30:45.1234", "12:30pm"])
    def test_malformed(self, text: str) -> None:
        """Test that malformed times raise ParseError."""
        with pytest.raises(ParseError, match="invalid ISO 8601 time"):
            parse_time(text)


class TestParseOffset:
    """Tests for parsing offset designators."""

    @pytest.mark.parametrize(
        ("text", "seconds"),
        [("+01", 3600), ("+05:30", 19800), ("-03:45", -13500), ("-00:25:21", -1521), ("+00", 0)],
    )
    def test_valid(self, text: str, seconds: int) -> None:
        """Test signed offsets."""
        offset = parse_offset(text)
        assert offset.offset_seconds == seconds
        assert not offset.is_utc

    def test_zulu(self) -> None:
        """Test that Z is UTC itself."""
        assert parse_offset("Z") == Offset.utc()

    def test_out_of_range(self) -> None:
        """Test offset fields beyond their limits."""
        with pytest.raises(OutOfRangeError, match="minutes must be between 0 and 59, got 60"):
            parse_offset("+05:60")
        with pytest.raises(OutOfRangeError, match="offset"):
            parse_offset("+25")

    @pytest.mark.parametrize("text", ["z", "+1", "05:00", "+05:0"])
    def test_malformed(self, text: str) -> None:
        """Test that malformed offsets raise ParseError."""
        with pytest.raises(ParseError, match="invalid ISO 8601 offset"):
            parse_offset(text)


class TestParseDateTime:
    """Tests for parsing date-times with and without offsets."""

    def test_datetime(self) -> None:
        """Test a date-time with no offset."""
        assert parse_datetime("2009-02-13T23:31:30") == DateTime.at(1_234_567_890)
        assert DateTime.from_iso_format("1938-04-24T22:13:20") == DateTime.at(-1_000_000_000)

    def test_datetime_rejects_offset(self) -> None:
        """Test that parse_datetime does not accept an offset."""
        with pytest.raises(ParseError, match="invalid ISO 8601 date-time"):
            parse_datetime("2009-02-13T23:31:30Z")

    def test_offset_datetime(self) -> None:
        """Test that the fields are read as wall-clock time."""
        odt = parse_offset_datetime("2009-02-14T00:31:30+01")
        assert odt.local == DateTime.of(2009, 2, 14, 0, 31, 30)
        assert odt.offset == Offset.of_hours_and_minutes(1, 0)
        assert odt.to_utc() == DateTime.at(1_234_567_890)

    def test_negative_offset(self) -> None:
        """Test a negative offset after the seconds."""
        odt = OffsetDateTime.from_iso_format("2009-02-13T18:31:30-05:00")
        assert odt.time == Time(18, 31, 30)
        assert odt.offset.offset_seconds == -18000

    def test_offset_datetime_requires_offset(self) -> None:
        """Test that parse_offset_datetime needs an offset."""
        with pytest.raises(ParseError, match="invalid ISO 8601 offset date-time"):
            parse_offset_datetime("2009-02-13T23:31:30")

    def test_signed_year(self) -> None:
        """Test a date-time with a negative year."""
        dt = parse_datetime("-0753-04-21T12:00")
        assert dt.year.value == -753


class TestParseIso8601:
    """Tests for parse_iso8601 shape detection."""

    def test_detects_shape(self) -> None:
        """Test that each shape produces the right type."""
        assert isinstance(parse_iso8601("2024-01-15"), Date)
        assert isinstance(parse_iso8601("14:30"), Time)
        assert isinstance(parse_iso8601("2024-01-15T14:30"), DateTime)
        assert isinstance(parse_iso8601("2024-01-15T14:30Z"), OffsetDateTime)

    def test_strips_whitespace(self) -> None:
        """Test that surrounding whitespace is ignored."""
        assert parse_iso8601("  2024-01-15\n") == Date(2024, 1, 15)

    def test_empty(self) -> None:
        """Test that an empty string is rejected."""
        with pytest.raises(ParseError, match="invalid ISO 8601 value"):
            parse_iso8601("   ")

    @pytest.mark.parametrize(
        "text",
        [
            "٢٠١٥-٠٩-١٣",
            "２０１５-W37-5",
            "2015-256٣",
            "１２:30",
            "2009-02-13T23:31:30+٠١",
        ],
    )
    def test_non_ascii_digits(self, text: str) -> None:
        """Test that only ASCII digits are read as numbers."""
        with pytest.raises(ParseError):
            parse_iso8601(text)

    def test_garbage(self) -> None:
        """Test that text of no known shape is rejected."""
        with pytest.raises(ParseError):
            parse_iso8601("hello")
        with pytest.raises(ParseError):
            parse_iso8601("T")

    def test_parse_error_is_value_error(self) -> None:
        """Test that ParseError can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse_iso8601("not a date")

    @pytest.mark.parametrize(
        "text",
        [
            "2009-02-13T23:31:30.000",
            "2009-02-14T00:31:30.000+01",
            "1969-12-31T23:59:59.999Z",
            "-0753-12-01",
            "+10601-01-31T24:00:00.000-00:25:21",
        ],
    )
    def test_formatted_text_parses_back(self, text: str) -> None:
        """Test that formatted output is accepted as input."""
        assert format_iso8601(parse_iso8601(text)) == text

    def test_rejection_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that rejected input is logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="gregor.format.iso8601"):
            with pytest.raises(ParseError):
                parse_date("yesterday")
        assert "Rejected ISO 8601 date: 'yesterday'" in caplog.text
