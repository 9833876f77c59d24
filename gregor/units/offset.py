"""Fixed UTC offsets.

This module provides the Offset class for shifting a UTC DateTime into
wall-clock time for display. Offsets are plain numbers of seconds; there
is no time zone database and no daylight saving time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gregor._internal.constants import (
    MAX_OFFSET_SECONDS,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from gregor._internal.validation import check_range
from gregor.errors import OffsetError

if TYPE_CHECKING:
    from gregor.core.datetime import DateTime
    from gregor.core.offset_datetime import OffsetDateTime


def _truncate(value: int, unit: int) -> int:
    # Division rounding toward zero, so negative offsets split into
    # negative hours, minutes and seconds
    quotient = abs(value) // unit
    return -quotient if value < 0 else quotient


class Offset:
    """A fixed offset from UTC.

    The offset is stored in seconds, positive east of UTC. ``Offset.utc()``
    is a distinct value from ``Offset.of_seconds(0)``: the first renders
    as ``Z``, the second as ``+00``.

    Attributes:
        offset_seconds: The offset in seconds (0 for UTC).

    Examples:
        >>> Offset.of_hours_and_minutes(5, 30).offset_seconds
        19800
        >>> Offset.utc().is_utc
        True
        >>> str(Offset.of_hours_and_minutes(-3, -45))
        '-03:45'
    """

    __slots__ = ("_offset_seconds",)

    def __init__(self, offset_seconds: int | None = None) -> None:
        """Create an Offset.

        Prefer the named constructors, which validate their input.

        Args:
            offset_seconds: Seconds east of UTC, or None for UTC itself.
        """
        self._offset_seconds: int | None = offset_seconds

    @classmethod
    def utc(cls) -> Offset:
        """Return the UTC offset."""
        return cls(None)

    @classmethod
    def of_seconds(cls, seconds: int) -> Offset:
        """Create an Offset from a number of seconds.

        Args:
            seconds: Seconds east of UTC, within one day either way.

        Raises:
            OutOfRangeError: If seconds is outside -86400..86400.

        Examples:
            >>> Offset.of_seconds(3600).hours
            1
        """
        check_range(
            "offset", seconds, range(-MAX_OFFSET_SECONDS, MAX_OFFSET_SECONDS + 1)
        )
        return cls(seconds)

    @classmethod
    def of_hours_and_minutes(cls, hours: int, minutes: int) -> Offset:
        """Create an Offset from hours and minutes.

        Both parts carry the offset's sign: UTC-03:45 is ``(-3, -45)``.

        Args:
            hours: Hours east of UTC (-23 to 23).
            minutes: Minutes east of UTC (-59 to 59).

        Raises:
            OffsetError: If hours and minutes have opposite signs.
            OutOfRangeError: If either part is out of range.

        Examples:
            >>> Offset.of_hours_and_minutes(-3, -45).offset_seconds
            -13500
            >>> Offset.of_hours_and_minutes(-4, 30)
            Traceback (most recent call last):
            ...
            OffsetError: hours and minutes must have the same sign, got -4 and 30
        """
        if (hours > 0 and minutes < 0) or (hours < 0 and minutes > 0):
            raise OffsetError(
                f"hours and minutes must have the same sign, got {hours} and {minutes}"
            )
        check_range("hours", hours, range(-23, 24))
        check_range("minutes", minutes, range(-59, 60))
        return cls.of_seconds(hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE)

    @property
    def offset_seconds(self) -> int:
        """Return the offset in seconds, 0 for UTC."""
        return self._offset_seconds or 0

    @property
    def is_utc(self) -> bool:
        """Return True if this is the UTC offset itself."""
        return self._offset_seconds is None

    @property
    def is_negative(self) -> bool:
        """Return True if this offset is west of UTC."""
        return self.offset_seconds < 0

    @property
    def hours(self) -> int:
        """Return the whole hours of the offset, truncated toward zero."""
        return _truncate(self.offset_seconds, SECONDS_PER_HOUR)

    @property
    def minutes(self) -> int:
        """Return the minutes past the whole hours, with the offset's sign."""
        return _truncate(self.offset_seconds, SECONDS_PER_MINUTE) - self.hours * 60

    @property
    def seconds(self) -> int:
        """Return the seconds past the whole minutes, with the offset's sign."""
        return self.offset_seconds - _truncate(self.offset_seconds, SECONDS_PER_MINUTE) * 60

    def transform_date(self, utc: DateTime) -> OffsetDateTime:
        """Shift a UTC date-time into this offset's wall-clock time.

        Args:
            utc: The date-time in UTC.

        Returns:
            An OffsetDateTime holding the wall-clock value and this offset.

        Examples:
            >>> from gregor.core.datetime import DateTime
            >>> utc = DateTime.of(2009, 2, 13, 23, 31, 30)
            >>> str(Offset.of_hours_and_minutes(1, 0).transform_date(utc))
            '2009-02-14T00:31:30.000+01'
        """
        from gregor.core.offset_datetime import OffsetDateTime

        return OffsetDateTime(utc.add_seconds(self.offset_seconds), self)

    def to_iso_format(self) -> str:
        """Return the offset as ``Z``, ``+HH``, ``+HH:MM`` or ``+HH:MM:SS``."""
        from gregor.format.iso8601 import format_offset

        return format_offset(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Offset):
            return NotImplemented
        return self._offset_seconds == other._offset_seconds

    def __hash__(self) -> int:
        return hash(self._offset_seconds)

    def __repr__(self) -> str:
        if self._offset_seconds is None:
            return "Offset.utc()"
        return f"Offset.of_seconds({self._offset_seconds})"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["Offset"]
