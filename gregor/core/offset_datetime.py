"""DateTime with a fixed UTC offset.

This module provides OffsetDateTime, a wall-clock DateTime paired with
the Offset it was shifted by.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gregor.core.datetime import DateTime
from gregor.units.offset import Offset

if TYPE_CHECKING:
    from gregor.core.date import Date
    from gregor.core.instant import Instant
    from gregor.core.time import Time
    from gregor.units.month import Month
    from gregor.units.weekday import Weekday
    from gregor.units.year import Year


class OffsetDateTime:
    """A wall-clock date and time at a fixed offset from UTC.

    The ``local`` value is what a clock at the offset shows; the field
    accessors read it. ``to_utc()`` undoes the offset again.

    Attributes:
        local: The wall-clock DateTime.
        offset: The Offset from UTC.

    Examples:
        >>> utc = DateTime.of(2009, 2, 13, 23, 31, 30)
        >>> odt = Offset.of_hours_and_minutes(-5, 0).transform_date(utc)
        >>> odt.hour
        18
        >>> str(odt)
        '2009-02-13T18:31:30.000-05'
        >>> odt.to_utc() == utc
        True
    """

    __slots__ = ("_local", "_offset")

    def __init__(self, local: DateTime, offset: Offset) -> None:
        if not isinstance(local, DateTime):
            raise TypeError(f"local must be a DateTime, got {type(local).__name__}")
        if not isinstance(offset, Offset):
            raise TypeError(f"offset must be an Offset, got {type(offset).__name__}")
        self._local: DateTime = local
        self._offset: Offset = offset

    @classmethod
    def from_iso_format(cls, s: str) -> OffsetDateTime:
        """Parse a date-time followed by an offset designator."""
        from gregor.format.iso8601 import parse_offset_datetime

        return parse_offset_datetime(s)

    @property
    def local(self) -> DateTime:
        return self._local

    @property
    def offset(self) -> Offset:
        return self._offset

    @property
    def date(self) -> Date:
        return self._local.date

    @property
    def time(self) -> Time:
        return self._local.time

    @property
    def year(self) -> Year:
        return self._local.year

    @property
    def month(self) -> Month:
        return self._local.month

    @property
    def day(self) -> int:
        return self._local.day

    @property
    def yearday(self) -> int:
        return self._local.yearday

    @property
    def weekday(self) -> Weekday:
        return self._local.weekday

    @property
    def hour(self) -> int:
        return self._local.hour

    @property
    def minute(self) -> int:
        return self._local.minute

    @property
    def second(self) -> int:
        return self._local.second

    @property
    def millisecond(self) -> int:
        return self._local.millisecond

    def to_utc(self) -> DateTime:
        """Return the same moment as a UTC DateTime."""
        return self._local.add_seconds(-self._offset.offset_seconds)

    def to_instant(self) -> Instant:
        """Return the Instant of this moment."""
        return self.to_utc().to_instant()

    def to_iso_format(self) -> str:
        from gregor.format.iso8601 import format_offset_datetime

        return format_offset_datetime(self)

    def __eq__(self, other: object) -> bool:
        """Compare wall-clock fields and offsets, not instants."""
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self._local == other._local and self._offset == other._offset

    def __hash__(self) -> int:
        return hash((self._local, self._offset))

    def __repr__(self) -> str:
        return f"OffsetDateTime({self._local!r}, {self._offset!r})"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["OffsetDateTime"]
