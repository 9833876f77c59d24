"""Time class representing a time of day.

This module provides the Time class for representing time-of-day values
with millisecond precision.
"""

from __future__ import annotations

from gregor._internal.constants import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from gregor._internal.validation import check_integer, check_range, validate_range


@validate_range(
    minute=range(0, 60),
    second=range(0, 60),
    millisecond=range(0, 1000),
)
def _check_fields(hour: int, minute: int, second: int, millisecond: int) -> None:
    check_integer("hour", hour)
    # 24:00:00.000 is the one hour-24 value, marking the end of a day
    if hour == 24 and minute == 0 and second == 0 and millisecond == 0:
        return
    check_range("hour", hour, range(0, 24))


class Time:
    """A time of day with millisecond precision.

    Time represents the time portion of a day, from midnight (00:00:00.000)
    to the end of the day. Besides the usual 00:00 to 23:59:59.999, the
    single value 24:00:00.000 is accepted to stand for the midnight that
    ends a day. It sorts after every other time and converts to the same
    instant as 00:00 on the following day.

    Attributes:
        hour: The hour component (0-23, or 24 for end of day).
        minute: The minute component (0-59).
        second: The second component (0-59).
        millisecond: The millisecond component (0-999).

    Examples:
        >>> t = Time.hms(14, 30, 45)
        >>> t.hour, t.minute, t.second
        (14, 30, 45)

        >>> Time.hm(24, 0).is_end_of_day
        True

        >>> Time.hm(24, 30)
        Traceback (most recent call last):
        ...
        OutOfRangeError: hour must be between 0 and 23, got 24
    """

    __slots__ = ("_hour", "_minute", "_second", "_millisecond")

    def __init__(
        self,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
    ) -> None:
        """Create a Time from component parts.

        Args:
            hour: The hour (0-23, or 24 when everything else is zero).
            minute: The minute (0-59).
            second: The second (0-59).
            millisecond: The millisecond (0-999).

        Raises:
            OutOfRangeError: If any component is out of range.
        """
        _check_fields(hour, minute, second, millisecond)
        self._hour: int = hour
        self._minute: int = minute
        self._second: int = second
        self._millisecond: int = millisecond

    @classmethod
    def hm(cls, hour: int, minute: int) -> Time:
        """Create a Time from hours and minutes."""
        return cls(hour, minute)

    @classmethod
    def hms(cls, hour: int, minute: int, second: int) -> Time:
        """Create a Time from hours, minutes and seconds."""
        return cls(hour, minute, second)

    @classmethod
    def hms_ms(cls, hour: int, minute: int, second: int, millisecond: int) -> Time:
        """Create a Time from hours, minutes, seconds and milliseconds."""
        return cls(hour, minute, second, millisecond)

    @classmethod
    def midnight(cls) -> Time:
        """Return 00:00:00.000."""
        return cls()

    @classmethod
    def now(cls) -> Time:
        """Return the current UTC time of day, read from the system clock."""
        from gregor.core.datetime import DateTime

        return DateTime.now().time

    @classmethod
    def from_seconds_since_midnight(cls, seconds: int, millisecond: int = 0) -> Time:
        """Create a Time from the number of seconds since midnight.

        Args:
            seconds: Seconds since midnight (0-86399).
            millisecond: The millisecond (0-999).

        Raises:
            OutOfRangeError: If seconds or millisecond is out of range.

        Examples:
            >>> Time.from_seconds_since_midnight(3661)
            Time(1, 1, 1, 0)
        """
        check_range("second", seconds, range(0, SECONDS_PER_DAY))
        hour, remainder = divmod(seconds, SECONDS_PER_HOUR)
        minute, second = divmod(remainder, SECONDS_PER_MINUTE)
        return cls(hour, minute, second, millisecond)

    @classmethod
    def from_iso_format(cls, s: str) -> Time:
        """Parse a time in ISO 8601 format (HH:MM[:SS[.fff]])."""
        from gregor.format.iso8601 import parse_time

        return parse_time(s)

    @property
    def hour(self) -> int:
        return self._hour

    @property
    def minute(self) -> int:
        return self._minute

    @property
    def second(self) -> int:
        return self._second

    @property
    def millisecond(self) -> int:
        return self._millisecond

    @property
    def is_end_of_day(self) -> bool:
        """Return True for the 24:00:00.000 end-of-day value."""
        return self._hour == 24

    def to_seconds(self) -> int:
        """Return the whole seconds since midnight (86400 for 24:00)."""
        return (
            self._hour * SECONDS_PER_HOUR
            + self._minute * SECONDS_PER_MINUTE
            + self._second
        )

    def to_iso_format(self) -> str:
        """Return the time as an ISO 8601 string (HH:MM:SS.mmm).

        Examples:
            >>> Time.hms(12, 0, 0).to_iso_format()
            '12:00:00.000'
        """
        from gregor.format.iso8601 import format_time

        return format_time(self)

    def _key(self) -> tuple[int, int, int, int]:
        return (self._hour, self._minute, self._second, self._millisecond)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"Time({self._hour}, {self._minute}, {self._second}, {self._millisecond})"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["Time"]
