"""Instant class representing a point on the UTC time line.

This module provides the Instant class, a count of seconds and
milliseconds since 1970-01-01T00:00:00Z with no calendar attached.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, overload

from gregor._internal.calendar import split_cycles
from gregor._internal.constants import MILLIS_PER_SECOND

if TYPE_CHECKING:
    from gregor.core.duration import Duration


class Instant:
    """A point in time, counted from the Unix epoch.

    Leap seconds are ignored: every day is 86400 seconds long. The
    milliseconds part is normalized to [0, 1000), so the instant half a
    second before the epoch is ``Instant(-1, 500)``.

    Examples:
        >>> Instant.at(1_234_567_890).seconds
        1234567890
        >>> Instant(0, -500)
        Instant(-1, 500)
        >>> Instant.at(10) - Instant.at(3)
        Duration(7, 0)
    """

    __slots__ = ("_seconds", "_milliseconds")

    def __init__(self, seconds: int, milliseconds: int = 0) -> None:
        carry, milliseconds = split_cycles(milliseconds, MILLIS_PER_SECOND)
        self._seconds: int = seconds + carry
        self._milliseconds: int = milliseconds

    @classmethod
    def at(cls, seconds: int) -> Instant:
        """Create an Instant from whole seconds since the epoch."""
        return cls(seconds)

    @classmethod
    def at_ms(cls, seconds: int, milliseconds: int) -> Instant:
        """Create an Instant from seconds and milliseconds since the epoch."""
        return cls(seconds, milliseconds)

    @classmethod
    def now(cls) -> Instant:
        """Return the current instant, read from the system clock."""
        from gregor.system import sys_time

        return cls(*sys_time())

    @property
    def seconds(self) -> int:
        return self._seconds

    @property
    def milliseconds(self) -> int:
        return self._milliseconds

    def __add__(self, other: object) -> Instant:
        from gregor.core.duration import Duration

        if not isinstance(other, Duration):
            return NotImplemented
        from gregor.arithmetic.ops import add

        return add(self, other)

    @overload
    def __sub__(self, other: Duration) -> Instant: ...

    @overload
    def __sub__(self, other: Instant) -> Duration: ...

    def __sub__(self, other: object) -> Instant | Duration:
        from gregor.core.duration import Duration

        if not isinstance(other, (Duration, Instant)):
            return NotImplemented
        from gregor.arithmetic.ops import subtract

        return subtract(self, other)

    def _key(self) -> tuple[int, int]:
        return (self._seconds, self._milliseconds)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"Instant({self._seconds}, {self._milliseconds})"


__all__ = ["Instant"]
