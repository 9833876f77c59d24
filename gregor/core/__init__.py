"""Core calendar and clock types.

This module provides the fundamental value types:
    - Date: Calendar date in the proleptic Gregorian calendar
    - Time: Time of day with millisecond precision
    - DateTime: Combined date and time
    - Instant: Point on the UTC time line
    - Duration: Time span with millisecond precision
    - OffsetDateTime: Wall-clock date and time at a fixed offset
    - YearMonth, YearMonthDay: Calendar compounds
    - YearMonths, MonthDays: Iteration over months and days
"""

from __future__ import annotations

from gregor.core.date import Date
from gregor.core.datetime import DateTime
from gregor.core.duration import Duration
from gregor.core.instant import Instant
from gregor.core.iter import MonthDays, YearMonths
from gregor.core.offset_datetime import OffsetDateTime
from gregor.core.time import Time
from gregor.core.yearmonth import YearMonth, YearMonthDay

__all__: list[str] = [
    "Date",
    "DateTime",
    "Duration",
    "Instant",
    "MonthDays",
    "OffsetDateTime",
    "Time",
    "YearMonth",
    "YearMonthDay",
    "YearMonths",
]
