"""Conversions between date-times and the Unix time line.

Examples:
    >>> from gregor.convert import to_unix_seconds, from_unix_seconds
    >>> dt = from_unix_seconds(1_234_567_890)
    >>> to_unix_seconds(dt)
    1234567890
"""

from __future__ import annotations

from gregor.convert.epoch import (
    datetime_from_instant,
    from_unix_millis,
    from_unix_seconds,
    instant_from_datetime,
    to_unix_millis,
    to_unix_seconds,
)

__all__ = [
    "datetime_from_instant",
    "instant_from_datetime",
    "to_unix_seconds",
    "from_unix_seconds",
    "to_unix_millis",
    "from_unix_millis",
]
