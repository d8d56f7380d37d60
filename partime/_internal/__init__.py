"""Internal utilities for Partime.

This module contains private implementation details:
    - Calendar rules (leap years, month lengths, ordinals)
    - Field validation
    - Constants and wire values

Note: This module is not part of the public API.
"""

from __future__ import annotations

from partime._internal.validation import (
    validate_day,
    validate_month,
    validate_range,
    validate_year,
)

__all__: list[str] = [
    "validate_day",
    "validate_month",
    "validate_range",
    "validate_year",
]
