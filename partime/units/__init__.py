"""Units and tags shared by every temporal variant."""

from __future__ import annotations

from partime.units.offset import UtcOffset
from partime.units.precision import Precision
from partime.units.timeunit import TimeUnit

__all__: list[str] = [
    "Precision",
    "TimeUnit",
    "UtcOffset",
]
