"""Calendar units and enumerations.

This module provides:
    - Year: Integer year wrapper
    - Month: Month-of-year enum
    - Weekday: Day-of-week enum
    - Offset: Fixed UTC offset
"""

from __future__ import annotations

from gregor.units.month import Month
from gregor.units.offset import Offset
from gregor.units.weekday import Weekday
from gregor.units.year import Year

__all__: list[str] = [
    "Month",
    "Offset",
    "Weekday",
    "Year",
]
