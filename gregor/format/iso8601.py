"""ISO 8601 formatting and parsing.

This module provides functions for converting Gregor values to and from
ISO 8601 string representations. It is the only string-facing code in
the library: the core types expose fields, and this module maps between
those fields and text.

Functions:
    parse_iso8601: Parse an ISO 8601 string into a Gregor value.
    format_iso8601: Format a Gregor value as an ISO 8601 string.

Dates:
    - YYYY-MM-DD (calendar date)
    - YYYY-Www-D (week date)
    - YYYY-DDD (ordinal date)
    - years outside 0000-9999 carry a sign: -0753-12-01, +10601-01-31

Times:
    - HH:MM
    - HH:MM:SS
    - HH:MM:SS.f (fractional seconds, 1-3 digits)

DateTimes:
    - date 'T' time
    - date 'T' time followed by Z, +HH, +HH:MM or +HH:MM:SS

Examples:
    >>> from gregor.format import parse_iso8601, format_iso8601

    >>> parse_iso8601("2015-W37-5")
    Date(2015, 9, 11)

    >>> format_iso8601(parse_iso8601("2009-02-13T23:31:30Z"))
    '2009-02-13T23:31:30.000Z'
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Union

from gregor._internal.constants import SECONDS_PER_HOUR, SECONDS_PER_MINUTE
from gregor._internal.validation import check_range
from gregor.errors import ParseError

if TYPE_CHECKING:
    from gregor.core.date import Date
    from gregor.core.datetime import DateTime
    from gregor.core.offset_datetime import OffsetDateTime
    from gregor.core.time import Time
    from gregor.units.offset import Offset

logger = logging.getLogger(__name__)

# Type alias for values with an ISO 8601 form
ISOType = Union["Date", "Time", "DateTime", "Offset", "OffsetDateTime"]

_YEAR = r"([+-]?\d{4,})"

_CALENDAR_DATE = re.compile(_YEAR + r"-(\d{2})-(\d{2})", re.ASCII)
_WEEK_DATE = re.compile(_YEAR + r"-W(\d{2})-(\d)", re.ASCII)
_ORDINAL_DATE = re.compile(_YEAR + r"-(\d{3})", re.ASCII)
_TIME = re.compile(r"(\d{2}):(\d{2})(?::(\d{2})(?:[.,](\d{1,3}))?)?", re.ASCII)
_OFFSET = re.compile(r"Z|([+-])(\d{2})(?::(\d{2})(?::(\d{2}))?)?", re.ASCII)
_DATETIME = re.compile(r"([^T]+)T(.+?)(Z|[+-]\d{2}(?::\d{2}){0,2})?", re.ASCII)


def _reject(kind: str, s: str) -> ParseError:
    logger.debug("Rejected ISO 8601 %s: %r", kind, s)
    return ParseError(f"invalid ISO 8601 {kind}: {s!r}")


def parse_date(s: str) -> Date:
    """Parse a calendar, week or ordinal date.

    Raises:
        ParseError: If the string matches none of the date forms.
        OutOfRangeError: If a field is out of range for its date.

    Examples:
        >>> parse_date("-0753-12-01")
        Date(-753, 12, 1)
        >>> parse_date("2015-256")
        Date(2015, 9, 13)
    """
    from gregor.core.date import Date

    match = _CALENDAR_DATE.fullmatch(s)
    if match:
        year, month, day = (int(group) for group in match.groups())
        return Date(year, month, day)

    match = _WEEK_DATE.fullmatch(s)
    if match:
        year, week, weekday = (int(group) for group in match.groups())
        return Date.ywd(year, week, weekday)

    match = _ORDINAL_DATE.fullmatch(s)
    if match:
        year, yearday = (int(group) for group in match.groups())
        return Date.yd(year, yearday)

    raise _reject("date", s)


def parse_time(s: str) -> Time:
    """Parse a time of day.

    Fractions of a second are read as milliseconds: ".5" is 500.

    Examples:
        >>> parse_time("14:30")
        Time(14, 30, 0, 0)
        >>> parse_time("23:59:59.5")
        Time(23, 59, 59, 500)
        >>> parse_time("24:00")
        Time(24, 0, 0, 0)
    """
    from gregor.core.time import Time

    match = _TIME.fullmatch(s)
    if not match:
        raise _reject("time", s)

    hour, minute, second, fraction = match.groups()
    millisecond = int(fraction.ljust(3, "0")) if fraction else 0
    return Time(int(hour), int(minute), int(second or 0), millisecond)


def parse_offset(s: str) -> Offset:
    """Parse an offset designator (Z, +HH, +HH:MM or +HH:MM:SS).

    Examples:
        >>> parse_offset("Z").is_utc
        True
        >>> parse_offset("-00:25:21").offset_seconds
        -1521
    """
    from gregor.units.offset import Offset

    match = _OFFSET.fullmatch(s)
    if not match:
        raise _reject("offset", s)
    if s == "Z":
        return Offset.utc()

    sign, hours, minutes, seconds = match.groups()
    minutes = check_range("minutes", int(minutes or 0), range(0, 60))
    seconds = check_range("seconds", int(seconds or 0), range(0, 60))
    total = int(hours) * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE + seconds
    return Offset.of_seconds(-total if sign == "-" else total)


def _split_datetime(s: str) -> tuple[str, str, str | None]:
    match = _DATETIME.fullmatch(s)
    if not match:
        raise _reject("date-time", s)
    return match.group(1), match.group(2), match.group(3)


def parse_datetime(s: str) -> DateTime:
    """Parse a date-time with no offset.

    Examples:
        >>> str(parse_datetime("2009-02-13T23:31:30"))
        '2009-02-13T23:31:30.000'
    """
    from gregor.core.datetime import DateTime

    date, time, offset = _split_datetime(s)
    if offset is not None:
        raise _reject("date-time", s)
    return DateTime(parse_date(date), parse_time(time))


def parse_offset_datetime(s: str) -> OffsetDateTime:
    """Parse a date-time followed by an offset designator.

    The date and time are read as the wall-clock value at that offset.

    Examples:
        >>> odt = parse_offset_datetime("2009-02-14T00:31:30+01")
        >>> str(odt.to_utc())
        '2009-02-13T23:31:30.000'
    """
    from gregor.core.datetime import DateTime
    from gregor.core.offset_datetime import OffsetDateTime

    date, time, offset = _split_datetime(s)
    if offset is None:
        raise _reject("offset date-time", s)
    return OffsetDateTime(
        DateTime(parse_date(date), parse_time(time)), parse_offset(offset)
    )


def parse_iso8601(s: str) -> ISOType:
    """Parse an ISO 8601 string into a Gregor value.

    Detects whether the string represents a date, time, date-time or
    offset date-time from its shape.

    Args:
        s: The ISO 8601 string to parse.

    Returns:
        A Date, Time, DateTime or OffsetDateTime.

    Raises:
        ParseError: If the string is not valid ISO 8601 format.
        OutOfRangeError: If the parsed fields are invalid.

    Detection rules:
        - Contains 'T' -> DateTime, or OffsetDateTime with an offset
        - Contains ':' -> Time
        - Otherwise -> Date

    Examples:
        >>> parse_iso8601("2024-01-15")
        Date(2024, 1, 15)

        >>> parse_iso8601("14:30:45")
        Time(14, 30, 45, 0)
    """
    s = s.strip()
    if not s:
        raise _reject("value", s)

    if "T" in s:
        _, _, offset = _split_datetime(s)
        if offset is None:
            return parse_datetime(s)
        return parse_offset_datetime(s)

    if ":" in s:
        return parse_time(s)

    return parse_date(s)


def format_date(date: Date) -> str:
    """Format a Date as YYYY-MM-DD, with a signed year outside 0-9999."""
    year = date.year.value
    if 0 <= year <= 9999:
        return f"{year:04d}-{date.month.number:02d}-{date.day:02d}"
    return f"{year:+05d}-{date.month.number:02d}-{date.day:02d}"


def format_time(time: Time) -> str:
    """Format a Time as HH:MM:SS.mmm."""
    return (
        f"{time.hour:02d}:{time.minute:02d}:{time.second:02d}"
        f".{time.millisecond:03d}"
    )


def format_datetime(dt: DateTime) -> str:
    return f"{format_date(dt.date)}T{format_time(dt.time)}"


def format_offset(offset: Offset) -> str:
    """Format an Offset with the shortest form that keeps every part.

    Examples:
        >>> from gregor.units.offset import Offset
        >>> format_offset(Offset.of_hours_and_minutes(1, 30))
        '+01:30'
        >>> format_offset(Offset.of_seconds(-1521))
        '-00:25:21'
    """
    if offset.is_utc:
        return "Z"

    sign = "-" if offset.is_negative else "+"
    hours, minutes, seconds = abs(offset.hours), abs(offset.minutes), abs(offset.seconds)
    if seconds:
        return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}"
    if minutes:
        return f"{sign}{hours:02d}:{minutes:02d}"
    return f"{sign}{hours:02d}"


def format_offset_datetime(odt: OffsetDateTime) -> str:
    return f"{format_datetime(odt.local)}{format_offset(odt.offset)}"


def format_iso8601(value: ISOType) -> str:
    """Format a Gregor value as an ISO 8601 string.

    Args:
        value: A Date, Time, DateTime, Offset or OffsetDateTime.

    Returns:
        ISO 8601 formatted string.

    Raises:
        TypeError: If value has no ISO 8601 form.

    Examples:
        >>> from gregor import Date, Time
        >>> format_iso8601(Date(10601, 1, 31))
        '+10601-01-31'
        >>> format_iso8601(Time(12, 0))
        '12:00:00.000'
    """
    # Import here to avoid circular imports
    from gregor.core.date import Date
    from gregor.core.datetime import DateTime
    from gregor.core.offset_datetime import OffsetDateTime
    from gregor.core.time import Time
    from gregor.units.offset import Offset

    if isinstance(value, OffsetDateTime):
        return format_offset_datetime(value)
    elif isinstance(value, DateTime):
        return format_datetime(value)
    elif isinstance(value, Date):
        return format_date(value)
    elif isinstance(value, Time):
        return format_time(value)
    elif isinstance(value, Offset):
        return format_offset(value)
    else:
        raise TypeError(
            f"expected Date, Time, DateTime, Offset or OffsetDateTime, "
            f"got {type(value).__name__}"
        )


__all__ = [
    "parse_iso8601",
    "format_iso8601",
    "parse_date",
    "parse_time",
    "parse_offset",
    "parse_datetime",
    "parse_offset_datetime",
    "format_date",
    "format_time",
    "format_datetime",
    "format_offset",
    "format_offset_datetime",
]
