"""System clock access.

This is the only module in Gregor that performs I/O.
"""

from __future__ import annotations

import logging
import time

from gregor._internal.calendar import split_cycles

logger = logging.getLogger(__name__)

_NANOS_PER_MILLI = 1_000_000


def sys_time() -> tuple[int, int]:
    """Return the current wall-clock time as (seconds, milliseconds).

    Seconds count from 1970-01-01T00:00:00Z; milliseconds are 0-999.
    """
    millis = time.time_ns() // _NANOS_PER_MILLI
    seconds, milliseconds = split_cycles(millis, 1000)
    logger.debug("Read system clock: %d.%03d", seconds, milliseconds)
    return seconds, milliseconds


__all__ = ["sys_time"]
