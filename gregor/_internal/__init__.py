"""Internal utilities for Gregor.

This module contains private implementation details:
    - Calendar arithmetic (day counts, leap years)
    - Validation helpers
    - Constants and lookup tables

Note: This module is not part of the public API.
"""

from __future__ import annotations

from gregor._internal.validation import (
    check_integer,
    check_range,
    validate_day,
    validate_range,
)

__all__: list[str] = [
    "check_integer",
    "check_range",
    "validate_day",
    "validate_range",
]
