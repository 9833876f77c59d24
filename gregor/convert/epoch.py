"""Conversion between date-times and the Unix time line.

This module holds the two directions of the instant conversion and the
Unix timestamp helpers built on them.

Functions:
    datetime_from_instant: Calendar fields for seconds since the epoch.
    instant_from_datetime: Seconds since the epoch for calendar fields.
    to_unix_seconds: Convert DateTime to Unix timestamp in seconds.
    from_unix_seconds: Create DateTime from Unix seconds.
    to_unix_millis: Convert DateTime to Unix timestamp in milliseconds.
    from_unix_millis: Create DateTime from Unix milliseconds.

The Unix epoch is 1970-01-01 00:00:00 UTC. Leap seconds are ignored, so
every day is exactly 86400 seconds.

Examples:
    >>> from gregor.convert import to_unix_seconds, from_unix_seconds
    >>> str(from_unix_seconds(1_000_000_000))
    '2001-09-09T01:46:40.000'
    >>> to_unix_seconds(from_unix_seconds(-1_000_000_000))
    -1000000000
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gregor._internal.calendar import days_since_epoch, split_cycles
from gregor._internal.constants import (
    EPOCH_DIFFERENCE,
    MILLIS_PER_SECOND,
    SECONDS_PER_DAY,
)

if TYPE_CHECKING:
    from gregor.core.datetime import DateTime
    from gregor.core.instant import Instant


def datetime_from_instant(seconds: int, milliseconds: int = 0) -> "DateTime":
    """Return the UTC DateTime at a point on the Unix time line.

    The seconds are moved onto the calendar's own day count, which starts
    on 2000-03-01, and split into whole days and seconds within the day.

    Args:
        seconds: Seconds since 1970-01-01T00:00:00Z (any sign).
        milliseconds: Milliseconds past those seconds; values outside
            0-999 carry into the seconds.

    Returns:
        The DateTime. Its time is always below 24:00.

    Examples:
        >>> datetime_from_instant(0)
        DateTime(Date(1970, 1, 1), Time(0, 0, 0, 0))
        >>> datetime_from_instant(-1_000_000_000)
        DateTime(Date(1938, 4, 24), Time(22, 13, 20, 0))
    """
    from gregor.core.date import Date
    from gregor.core.datetime import DateTime
    from gregor.core.time import Time

    carry, milliseconds = split_cycles(milliseconds, MILLIS_PER_SECOND)
    days, seconds_of_day = split_cycles(
        seconds + carry - EPOCH_DIFFERENCE * SECONDS_PER_DAY, SECONDS_PER_DAY
    )

    return DateTime(
        Date._from_day_count(days),
        Time.from_seconds_since_midnight(seconds_of_day, milliseconds),
    )


def instant_from_datetime(dt: "DateTime") -> "Instant":
    """Return the Instant of a DateTime, read as UTC.

    A time of 24:00 counts a full day of seconds, landing on midnight
    of the following day.

    Args:
        dt: The DateTime to convert.

    Returns:
        The Instant.

    Examples:
        >>> from gregor.core.datetime import DateTime
        >>> instant_from_datetime(DateTime.of(2038, 1, 19, 3, 14, 7))
        Instant(2147483647, 0)
    """
    from gregor.core.instant import Instant

    date, time = dt.date, dt.time
    days = days_since_epoch(date.year.value, date.month.number, date.day)
    seconds = (days + EPOCH_DIFFERENCE) * SECONDS_PER_DAY + time.to_seconds()
    return Instant(seconds, time.millisecond)


def to_unix_seconds(dt: "DateTime") -> int:
    """Convert a DateTime to a Unix timestamp in whole seconds.

    Milliseconds are dropped, rounding toward the past.

    Examples:
        >>> from gregor.core.datetime import DateTime
        >>> to_unix_seconds(DateTime.of(1970, 1, 1))
        0
    """
    return instant_from_datetime(dt).seconds


def from_unix_seconds(seconds: int) -> "DateTime":
    """Create a UTC DateTime from Unix seconds."""
    return datetime_from_instant(seconds)


def to_unix_millis(dt: "DateTime") -> int:
    """Convert a DateTime to a Unix timestamp in milliseconds.

    Examples:
        >>> from gregor.core.datetime import DateTime
        >>> to_unix_millis(DateTime.of(1970, 1, 1, 0, 0, 1, 500))
        1500
    """
    instant = instant_from_datetime(dt)
    return instant.seconds * MILLIS_PER_SECOND + instant.milliseconds


def from_unix_millis(millis: int) -> "DateTime":
    """Create a UTC DateTime from Unix milliseconds.

    Examples:
        >>> str(from_unix_millis(-1))
        '1969-12-31T23:59:59.999'
    """
    seconds, milliseconds = split_cycles(millis, MILLIS_PER_SECOND)
    return datetime_from_instant(seconds, milliseconds)


__all__ = [
    "datetime_from_instant",
    "instant_from_datetime",
    "to_unix_seconds",
    "from_unix_seconds",
    "to_unix_millis",
    "from_unix_millis",
]
