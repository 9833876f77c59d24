"""DateTime class combining a Date and a Time.

This module provides the DateTime class, a calendar date paired with a
time of day, and its conversion to and from an Instant.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, overload

from gregor.core.date import Date
from gregor.core.time import Time

if TYPE_CHECKING:
    from gregor.core.duration import Duration
    from gregor.core.instant import Instant
    from gregor.units.month import Month
    from gregor.units.weekday import Weekday
    from gregor.units.year import Year


class DateTime:
    """A date and a time of day, with no offset attached.

    A DateTime carries no data of its own beyond its two parts; every
    field accessor delegates to the Date or the Time. Conversion to an
    Instant treats the value as UTC.

    Attributes:
        date: The Date part.
        time: The Time part.

    Examples:
        >>> dt = DateTime.at(1_234_567_890)
        >>> str(dt)
        '2009-02-13T23:31:30.000'

        >>> DateTime.of(2001, 9, 9, 1, 46, 40).to_instant().seconds
        1000000000

        >>> from gregor.core.duration import Duration
        >>> DateTime.at(10_000) + Duration.of(1) == DateTime.at(10_001)
        True
    """

    __slots__ = ("_date", "_time")

    def __init__(self, date: Date, time: Time) -> None:
        """Create a DateTime from a Date and a Time.

        Raises:
            TypeError: If date or time has the wrong type.
        """
        if not isinstance(date, Date):
            raise TypeError(f"date must be a Date, got {type(date).__name__}")
        if not isinstance(time, Time):
            raise TypeError(f"time must be a Time, got {type(time).__name__}")
        self._date: Date = date
        self._time: Time = time

    @classmethod
    def of(
        cls,
        year: Year | int,
        month: Month | int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
    ) -> DateTime:
        """Create a DateTime from its calendar and clock fields.

        Raises:
            OutOfRangeError: If any field is out of range.

        Examples:
            >>> DateTime.of(2009, 2, 13, 23, 31, 30)
            DateTime(Date(2009, 2, 13), Time(23, 31, 30, 0))
        """
        return cls(Date(year, month, day), Time(hour, minute, second, millisecond))

    @classmethod
    def at(cls, seconds: int) -> DateTime:
        """Create the UTC DateTime a number of seconds after the Unix epoch.

        Examples:
            >>> DateTime.at(0)
            DateTime(Date(1970, 1, 1), Time(0, 0, 0, 0))
        """
        return cls.at_ms(seconds, 0)

    @classmethod
    def at_ms(cls, seconds: int, millisecond: int) -> DateTime:
        """Create the UTC DateTime at seconds and milliseconds after the epoch."""
        from gregor.convert.epoch import datetime_from_instant

        return datetime_from_instant(seconds, millisecond)

    @classmethod
    def from_instant(cls, instant: Instant) -> DateTime:
        """Create the UTC DateTime for an Instant."""
        return cls.at_ms(instant.seconds, instant.milliseconds)

    @classmethod
    def now(cls) -> DateTime:
        """Return the current UTC date and time, read from the system clock."""
        from gregor.core.instant import Instant

        return cls.from_instant(Instant.now())

    @classmethod
    def from_iso_format(cls, s: str) -> DateTime:
        """Parse a date-time in ISO 8601 format (date, 'T', time)."""
        from gregor.format.iso8601 import parse_datetime

        return parse_datetime(s)

    @property
    def date(self) -> Date:
        return self._date

    @property
    def time(self) -> Time:
        return self._time

    @property
    def year(self) -> Year:
        return self._date.year

    @property
    def month(self) -> Month:
        return self._date.month

    @property
    def day(self) -> int:
        return self._date.day

    @property
    def yearday(self) -> int:
        return self._date.yearday

    @property
    def weekday(self) -> Weekday:
        return self._date.weekday

    @property
    def hour(self) -> int:
        return self._time.hour

    @property
    def minute(self) -> int:
        return self._time.minute

    @property
    def second(self) -> int:
        return self._time.second

    @property
    def millisecond(self) -> int:
        return self._time.millisecond

    def to_instant(self) -> Instant:
        """Return the Instant of this DateTime, read as UTC.

        A time of 24:00 gives the same instant as 00:00 on the next day.

        Examples:
            >>> DateTime.of(1970, 1, 1, 24, 0).to_instant()
            Instant(86400, 0)
        """
        from gregor.convert.epoch import instant_from_datetime

        return instant_from_datetime(self)

    def add_seconds(self, seconds: int) -> DateTime:
        """Return the DateTime a number of seconds later (or earlier).

        Examples:
            >>> DateTime.of(2015, 12, 31, 23, 59, 59).add_seconds(1)
            DateTime(Date(2016, 1, 1), Time(0, 0, 0, 0))
        """
        from gregor.core.instant import Instant

        instant = self.to_instant()
        return DateTime.from_instant(
            Instant(instant.seconds + seconds, instant.milliseconds)
        )

    def to_iso_format(self) -> str:
        """Return the value as an ISO 8601 string (date 'T' time)."""
        from gregor.format.iso8601 import format_datetime

        return format_datetime(self)

    def __add__(self, other: object) -> DateTime:
        from gregor.core.duration import Duration

        if not isinstance(other, Duration):
            return NotImplemented
        from gregor.arithmetic.ops import add

        return add(self, other)

    @overload
    def __sub__(self, other: Duration) -> DateTime: ...

    @overload
    def __sub__(self, other: DateTime) -> Duration: ...

    def __sub__(self, other: object) -> DateTime | Duration:
        from gregor.core.duration import Duration

        if not isinstance(other, (Duration, DateTime)):
            return NotImplemented
        from gregor.arithmetic.ops import subtract

        return subtract(self, other)

    def _key(self) -> tuple[Date, Time]:
        return (self._date, self._time)

    def __eq__(self, other: object) -> bool:
        """Compare fields; 24:00 on one day is not equal to 00:00 on the next."""
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"DateTime({self._date!r}, {self._time!r})"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["DateTime"]
