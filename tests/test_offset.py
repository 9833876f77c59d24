"""Tests for Offset and OffsetDateTime."""

from __future__ import annotations

import pytest

from gregor.core.datetime import DateTime
from gregor.core.offset_datetime import OffsetDateTime
from gregor.errors import OffsetError, OutOfRangeError
from gregor.units.offset import Offset


class TestOffsetConstruction:
    """Tests for Offset constructors."""

    def test_utc(self) -> None:
        """Test the UTC offset."""
        utc = Offset.utc()
        assert utc.is_utc
        assert utc.offset_seconds == 0

    def test_of_seconds(self) -> None:
        """Test an offset in seconds."""
        offset = Offset.of_seconds(1234)
        assert offset.offset_seconds == 1234
        assert not offset.is_utc

    @pytest.mark.parametrize("seconds", [100_000, -86401, 86401])
    def test_of_seconds_out_of_range(self, seconds: int) -> None:
        """Test that offsets beyond one day are rejected."""
        with pytest.raises(OutOfRangeError, match="offset must be between -86400 and 86400"):
            Offset.of_seconds(seconds)

    @pytest.mark.parametrize(
        ("hours", "minutes", "seconds"),
        [(5, 30, 19800), (-3, -45, -13500), (0, -30, -1800), (-5, 0, -18000)],
    )
    def test_of_hours_and_minutes(self, hours: int, minutes: int, seconds: int) -> None:
        """Test offsets from hours and minutes of the same sign."""
        assert Offset.of_hours_and_minutes(hours, minutes).offset_seconds == seconds

    def test_mixed_signs(self) -> None:
        """Test that opposite signs are rejected."""
        with pytest.raises(OffsetError, match="same sign, got -4 and 30"):
            Offset.of_hours_and_minutes(-4, 30)
        with pytest.raises(OffsetError):
            Offset.of_hours_and_minutes(4, -30)

    def test_out_of_range_parts(self) -> None:
        """Test that each part is range-checked."""
        with pytest.raises(OutOfRangeError, match="minutes must be between -59 and 59, got 60"):
            Offset.of_hours_and_minutes(8, 60)
        with pytest.raises(OutOfRangeError, match="hours must be between -23 and 23, got 24"):
            Offset.of_hours_and_minutes(24, 0)

    def test_offset_error_is_value_error(self) -> None:
        """Test that OffsetError can be caught as ValueError."""
        with pytest.raises(ValueError):
            Offset.of_hours_and_minutes(1, -1)


class TestOffsetParts:
    """Tests for splitting an offset into hours, minutes and seconds."""

    def test_negative_parts(self) -> None:
        """Test that every part carries the offset's sign."""
        offset = Offset.of_hours_and_minutes(-3, -45)
        assert (offset.hours, offset.minutes, offset.seconds) == (-3, -45, 0)
        assert offset.is_negative

    def test_seconds_part(self) -> None:
        """Test an offset with a seconds part."""
        offset = Offset.of_seconds(-1521)
        assert (offset.hours, offset.minutes, offset.seconds) == (0, -25, -21)

    def test_positive_parts(self) -> None:
        """Test a positive offset."""
        offset = Offset.of_seconds(5 * 3600 + 30 * 60 + 15)
        assert (offset.hours, offset.minutes, offset.seconds) == (5, 30, 15)
        assert not offset.is_negative


class TestOffsetEquality:
    """Tests for Offset equality."""

    def test_utc_distinct_from_zero(self) -> None:
        """Test that UTC and a zero-second offset are different values."""
        assert Offset.utc() != Offset.of_seconds(0)
        assert Offset.utc() == Offset.utc()
        assert Offset.of_seconds(0) == Offset.of_hours_and_minutes(0, 0)

    def test_hash(self) -> None:
        """Test hashing."""
        assert hash(Offset.of_seconds(3600)) == hash(Offset.of_hours_and_minutes(1, 0))

    def test_repr(self) -> None:
        """Test the debugging representation."""
        assert repr(Offset.utc()) == "Offset.utc()"
        assert repr(Offset.of_seconds(-1521)) == "Offset.of_seconds(-1521)"


class TestTransformDate:
    """Tests for shifting a UTC date-time into an offset."""

    def test_east(self) -> None:
        """Test an offset east of UTC crossing midnight."""
        utc = DateTime.of(2009, 2, 13, 23, 31, 30)
        odt = Offset.of_hours_and_minutes(1, 0).transform_date(utc)
        assert odt.local == DateTime.of(2009, 2, 14, 0, 31, 30)
        assert odt.day == 14
        assert odt.hour == 0

    def test_west(self) -> None:
        """Test an offset west of UTC crossing a year boundary."""
        utc = DateTime.of(2016, 1, 1, 2, 0)
        odt = Offset.of_hours_and_minutes(-3, -45).transform_date(utc)
        assert odt.local == DateTime.of(2015, 12, 31, 22, 15)
        assert odt.year.value == 2015

    def test_utc_unchanged(self) -> None:
        """Test that UTC leaves the fields alone."""
        utc = DateTime.at(1_234_567_890)
        assert Offset.utc().transform_date(utc).local == utc

    def test_to_utc_round_trip(self) -> None:
        """Test that to_utc() undoes the shift."""
        utc = DateTime.at_ms(1_234_567_890, 123)
        for offset in (Offset.of_seconds(-1521), Offset.of_hours_and_minutes(5, 30), Offset.utc()):
            odt = offset.transform_date(utc)
            assert odt.to_utc() == utc
            assert odt.to_instant() == utc.to_instant()

    def test_equality_is_by_fields(self) -> None:
        """Test that the same moment at different offsets is not equal."""
        utc = DateTime.at(0)
        plus_one = Offset.of_hours_and_minutes(1, 0).transform_date(utc)
        minus_one = Offset.of_hours_and_minutes(-1, 0).transform_date(utc)
        assert plus_one != minus_one
        assert plus_one.to_instant() == minus_one.to_instant()

    def test_wrong_types(self) -> None:
        """Test that OffsetDateTime checks its parts."""
        with pytest.raises(TypeError, match="local must be a DateTime"):
            OffsetDateTime(0, Offset.utc())  # type: ignore[arg-type]
        with pytest.raises(TypeError, match="offset must be an Offset"):
            OffsetDateTime(DateTime.at(0), 3600)  # type: ignore[arg-type]
