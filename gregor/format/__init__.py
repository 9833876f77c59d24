"""ISO 8601 formatting and parsing.

Functions:
    parse_iso8601: Parse an ISO 8601 date, time, date-time or offset
        date-time string.
    format_iso8601: Format a Gregor value as an ISO 8601 string.

Examples:
    >>> from gregor.format import parse_iso8601, format_iso8601
    >>> format_iso8601(parse_iso8601("2024-01-15"))
    '2024-01-15'
"""

from __future__ import annotations

from gregor.format.iso8601 import format_iso8601, parse_iso8601

__all__: list[str] = [
    "parse_iso8601",
    "format_iso8601",
]
