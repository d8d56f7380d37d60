"""Internal constants for Partime.

These constants define the limits and wire values used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_MILLISECOND: int = 1_000_000
NANOS_PER_SECOND: int = 1_000_000_000
NANOS_PER_MINUTE: int = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: int = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY: int = 24 * NANOS_PER_HOUR  # 86_400_000_000_000

DAYS_PER_WEEK: int = 7
MONTHS_PER_YEAR: int = 12

# Year limits: the range of a four-digit year field
MIN_YEAR: int = 1
MAX_YEAR: int = 9999

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Fixed UTC offset limits (in minutes)
MAX_OFFSET_MINUTES: int = 18 * 60  # +/- 18:00

# Fractional second digits carried by text forms
MAX_FRACTION_DIGITS: int = 9

# Canonical hash markers, one per precision. Wire values: never reuse.
HASH_MARKER_YEAR: int = 6
HASH_MARKER_YEAR_MONTH: int = 7
HASH_MARKER_DATE: int = 8
HASH_MARKER_DATE_TIME: int = 9


__all__ = [
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "NANOS_PER_DAY",
    "DAYS_PER_WEEK",
    "MONTHS_PER_YEAR",
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_IN_MONTH",
    "MAX_OFFSET_MINUTES",
    "MAX_FRACTION_DIGITS",
    "HASH_MARKER_YEAR",
    "HASH_MARKER_YEAR_MONTH",
    "HASH_MARKER_DATE",
    "HASH_MARKER_DATE_TIME",
]
