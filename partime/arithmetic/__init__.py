"""Ordering, boundaries, and arithmetic for partial temporal values.

Comparisons:
    compare: Order two values of any precision (None when indeterminate)
    is_before, is_after, overlaps: Range-resolved predicates

Operations:
    narrow, widen, plus, with_field, until: Dispatch over the variants
"""

from __future__ import annotations

from partime.arithmetic.comparisons import (
    compare,
    equal,
    instant_range,
    is_after,
    is_before,
    overlaps,
)
from partime.arithmetic.ops import narrow, plus, until, widen, with_field

__all__: list[str] = [
    # Comparisons
    "compare",
    "equal",
    "instant_range",
    "is_before",
    "is_after",
    "overlaps",
    # Operations
    "narrow",
    "widen",
    "plus",
    "with_field",
    "until",
]
