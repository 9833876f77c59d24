"""Gregor: proleptic Gregorian calendar and clock-time values.

Gregor converts between a linear count of time since the Unix epoch and
calendar fields (year, month, day, weekday, day of year, hour, minute,
second, millisecond), for any year, without a time zone database.

Core Types:
    Date: Calendar date (year, month, day)
    Time: Time of day (hour, minute, second, millisecond)
    DateTime: Combined date and time
    Instant: Seconds and milliseconds since 1970-01-01T00:00:00Z
    Duration: Time span with millisecond precision
    OffsetDateTime: Wall-clock DateTime at a fixed UTC offset
    YearMonth, YearMonthDay: Calendar compounds

Units:
    Year: Integer year wrapper
    Month: Month of the year
    Weekday: Day of the week
    Offset: Fixed UTC offset

Format Functions:
    parse_iso8601: Parse ISO 8601 date/time/datetime string
    format_iso8601: Format a value as an ISO 8601 string

Exceptions:
    GregorError: Base exception
    OutOfRangeError: A field outside its valid range
    ParseError: Failed to parse string
    OffsetError: Offset hours and minutes with opposite signs

Example:
    >>> from gregor import Date, DateTime, Duration, Weekday
    >>> Date.ywd(2009, 53, Weekday.SUNDAY)
    Date(2010, 1, 3)
    >>> str(DateTime.at(1_000_000_000) + Duration.of(20))
    '2001-09-09T01:47:00.000'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from gregor.core.date import Date
from gregor.core.datetime import DateTime
from gregor.core.duration import Duration
from gregor.core.instant import Instant
from gregor.core.offset_datetime import OffsetDateTime
from gregor.core.time import Time
from gregor.core.yearmonth import YearMonth, YearMonthDay

# Units
from gregor.units.month import Month
from gregor.units.offset import Offset
from gregor.units.weekday import Weekday
from gregor.units.year import Year

# Exceptions
from gregor.errors import (
    GregorError,
    OffsetError,
    OutOfRangeError,
    ParseError,
)

# Format functions
from gregor.format import format_iso8601, parse_iso8601

# System clock
from gregor.system import sys_time

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    "DateTime",
    "Duration",
    "Instant",
    "OffsetDateTime",
    "Time",
    "YearMonth",
    "YearMonthDay",
    # Units
    "Month",
    "Offset",
    "Weekday",
    "Year",
    # Exceptions
    "GregorError",
    "OutOfRangeError",
    "ParseError",
    "OffsetError",
    # Format functions
    "parse_iso8601",
    "format_iso8601",
    # System clock
    "sys_time",
]
