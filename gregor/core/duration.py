"""Duration class representing a span of time.

This module provides the Duration class for representing time spans
with millisecond precision.
"""

from __future__ import annotations

from gregor._internal.calendar import split_cycles
from gregor._internal.constants import MILLIS_PER_SECOND


class Duration:
    """A span of time with millisecond precision.

    Duration represents a length of time, which can be positive, negative,
    or zero. It stores whole seconds and the milliseconds past them.

    The internal representation is normalized such that
    ``_milliseconds`` is always in the range [0, 1000) and ``_seconds``
    holds the sign, so -1.5 seconds is stored as (-2, 500).

    Attributes:
        seconds: The whole seconds (can be negative).
        milliseconds: The milliseconds past the seconds [0, 1000).

    Examples:
        >>> d = Duration.of_ms(1, 1500)
        >>> d.lengths()
        (2, 500)

        >>> (-Duration.of_ms(1, 500)).lengths()
        (-2, 500)

        >>> Duration.of(30) + Duration.of(45)
        Duration(75, 0)
    """

    __slots__ = ("_seconds", "_milliseconds")

    def __init__(self, seconds: int = 0, milliseconds: int = 0) -> None:
        """Create a Duration from seconds and milliseconds.

        Either part may be negative or exceed its unit; the result is
        normalized.

        Args:
            seconds: Number of seconds.
            milliseconds: Number of milliseconds.
        """
        carry, milliseconds = split_cycles(milliseconds, MILLIS_PER_SECOND)
        self._seconds: int = seconds + carry
        self._milliseconds: int = milliseconds

    @classmethod
    def zero(cls) -> Duration:
        return cls(0, 0)

    @classmethod
    def of(cls, seconds: int) -> Duration:
        """Create a Duration of whole seconds."""
        return cls(seconds)

    @classmethod
    def of_ms(cls, seconds: int, milliseconds: int) -> Duration:
        """Create a Duration of seconds and milliseconds."""
        return cls(seconds, milliseconds)

    @property
    def seconds(self) -> int:
        return self._seconds

    @property
    def milliseconds(self) -> int:
        return self._milliseconds

    @property
    def total_milliseconds(self) -> int:
        """Return the whole duration in milliseconds."""
        return self._seconds * MILLIS_PER_SECOND + self._milliseconds

    @property
    def is_negative(self) -> bool:
        return self._seconds < 0

    @property
    def is_zero(self) -> bool:
        return self._seconds == 0 and self._milliseconds == 0

    def lengths(self) -> tuple[int, int]:
        """Return the (seconds, milliseconds) pair."""
        return self._seconds, self._milliseconds

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        from gregor.arithmetic.ops import add

        return add(self, other)

    def __radd__(self, other: object) -> Duration:
        """Support sum() by handling 0 + Duration."""
        if other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        from gregor.arithmetic.ops import subtract

        return subtract(self, other)

    def __mul__(self, other: object) -> Duration:
        """Multiply a duration by an integer.

        Examples:
            >>> Duration.of_ms(1, 500) * 3
            Duration(4, 500)
        """
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        from gregor.arithmetic.ops import multiply

        return multiply(self, other)

    def __rmul__(self, other: object) -> Duration:
        """Support scalar * Duration."""
        return self.__mul__(other)

    def __neg__(self) -> Duration:
        from gregor.arithmetic.ops import negate

        return negate(self)

    def __pos__(self) -> Duration:
        return self

    def __abs__(self) -> Duration:
        return -self if self.is_negative else self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.lengths() == other.lengths()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.lengths() < other.lengths()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.lengths() <= other.lengths()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.lengths() > other.lengths()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.lengths() >= other.lengths()

    def __hash__(self) -> int:
        return hash(self.lengths())

    def __repr__(self) -> str:
        return f"Duration({self._seconds}, {self._milliseconds})"


__all__ = ["Duration"]
