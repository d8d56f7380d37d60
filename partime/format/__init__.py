"""Text parsing and formatting.

Functions:
    parse_temporal: Parse a literal, detecting its precision.
    parse_exact: Parse a complete literal of one given precision.
    format_temporal: Render the canonical text form.
"""

from __future__ import annotations

from partime.format.text import format_temporal, parse_exact, parse_temporal

__all__: list[str] = [
    "parse_temporal",
    "parse_exact",
    "format_temporal",
]
