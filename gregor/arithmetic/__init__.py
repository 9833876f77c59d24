"""Arithmetic on instants, date-times and durations.

The functions in this module serve as the canonical implementations
behind the operators on the core classes:
    - add: Add a Duration
    - subtract: Subtract a Duration or take a difference
    - multiply: Scale a Duration by an integer
    - negate: Flip the sign of a Duration
"""

from __future__ import annotations

from gregor.arithmetic.ops import add, multiply, negate, subtract

__all__ = [
    "add",
    "subtract",
    "multiply",
    "negate",
]
