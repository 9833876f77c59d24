"""Internal constants for Gregor.

These constants define the cycle lengths, reference points and lookup
tables used throughout the library. This module is not part of the
public API.
"""

from __future__ import annotations

# Time unit conversions (leap seconds are ignored everywhere)
MILLIS_PER_SECOND: int = 1_000
SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

# Gregorian cycle lengths, in days
DAYS_IN_4Y: int = 365 * 4 + 1
DAYS_IN_100Y: int = 365 * 100 + 24
DAYS_IN_400Y: int = 365 * 400 + 97

# Day 0 of the internal day count is 2000-03-01: a year that is a multiple
# of 400, starting just after a possible leap day, so that every cycle
# boundary in the day count is also a calendar cycle boundary.
REFERENCE_YEAR: int = 2000

# Days from 1970-01-01 to 2000-03-01
EPOCH_DIFFERENCE: int = 30 * 365 + 7 + 31 + 29  # 11_017

# 2000-03-01 was a Wednesday (3 with Sunday as 0)
REFERENCE_WEEKDAY: int = 3

# Days in a March-based year before January and February
DAYS_MARCH_TO_DECEMBER: int = 306

# Days elapsed at the end of each month, counting from 1 March, for
# January back to March. February is never listed: it is whatever is
# left at the end of the March-based year.
MARCH_TRIANGLE: tuple[int, ...] = (
    337,  # January
    306,  # December
    275,  # November
    245,  # October
    214,  # September
    184,  # August
    153,  # July
    122,  # June
    92,   # May
    61,   # April
    31,   # March
)

# Days in each month (non-leap year), January first
DAYS_IN_MONTH: tuple[int, ...] = (
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Days in a common year before the first of each month, January first
DAYS_BEFORE_MONTH: tuple[int, ...] = (
    0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334,
)

# Fixed UTC offset limits (in seconds)
MAX_OFFSET_SECONDS: int = SECONDS_PER_DAY


__all__ = [
    "MILLIS_PER_SECOND",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "DAYS_IN_4Y",
    "DAYS_IN_100Y",
    "DAYS_IN_400Y",
    "REFERENCE_YEAR",
    "EPOCH_DIFFERENCE",
    "REFERENCE_WEEKDAY",
    "DAYS_MARCH_TO_DECEMBER",
    "MARCH_TRIANGLE",
    "DAYS_IN_MONTH",
    "DAYS_BEFORE_MONTH",
    "MAX_OFFSET_SECONDS",
]
