"""TimeUnit enumeration for precision-preserving arithmetic.

This module provides the TimeUnit enum and the table of which units each
precision accepts.
"""

from __future__ import annotations

from enum import Enum

from partime._internal.constants import (
    DAYS_PER_WEEK,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from partime.units.precision import Precision


class TimeUnit(Enum):
    """Units accepted by ``plus`` and ``until``.

    Calendar units (MONTH and longer) have no fixed length; they are
    applied by shifting the month count. DAY and WEEK are applied by
    shifting the ordinal day, and the remaining units by shifting the
    time of day.

    Examples:
        >>> TimeUnit.DECADE.months
        120

        >>> TimeUnit.HOUR.nanos
        3600000000000

        >>> TimeUnit.MONTH.is_supported_by(Precision.YEAR)
        False
    """

    NANOSECOND = "nanosecond"
    MICROSECOND = "microsecond"
    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    DECADE = "decade"
    CENTURY = "century"
    MILLENNIUM = "millennium"

    @property
    def months(self) -> int | None:
        """Return the length in months of a calendar unit, else None."""
        return _MONTHS.get(self)

    @property
    def days(self) -> int | None:
        """Return the length in days of DAY or WEEK, else None."""
        return _DAYS.get(self)

    @property
    def nanos(self) -> int | None:
        """Return the fixed length in nanoseconds, or None for calendar units."""
        return _NANOS.get(self)

    @property
    def is_time_based(self) -> bool:
        """Return True for units shorter than a day."""
        return self in _TIME_BASED

    def is_supported_by(self, precision: Precision) -> bool:
        """Return True if values of the given precision accept this unit."""
        return self in SUPPORTED_UNITS[precision]


_MONTHS: dict[TimeUnit, int] = {
    TimeUnit.MONTH: 1,
    TimeUnit.YEAR: 12,
    TimeUnit.DECADE: 120,
    TimeUnit.CENTURY: 1_200,
    TimeUnit.MILLENNIUM: 12_000,
}

_DAYS: dict[TimeUnit, int] = {
    TimeUnit.DAY: 1,
    TimeUnit.WEEK: DAYS_PER_WEEK,
}

_NANOS: dict[TimeUnit, int] = {
    TimeUnit.NANOSECOND: 1,
    TimeUnit.MICROSECOND: NANOS_PER_MICROSECOND,
    TimeUnit.MILLISECOND: NANOS_PER_MILLISECOND,
    TimeUnit.SECOND: NANOS_PER_SECOND,
    TimeUnit.MINUTE: NANOS_PER_MINUTE,
    TimeUnit.HOUR: NANOS_PER_HOUR,
    TimeUnit.DAY: NANOS_PER_DAY,
    TimeUnit.WEEK: DAYS_PER_WEEK * NANOS_PER_DAY,
}

_TIME_BASED: frozenset[TimeUnit] = frozenset(
    {
        TimeUnit.NANOSECOND,
        TimeUnit.MICROSECOND,
        TimeUnit.MILLISECOND,
        TimeUnit.SECOND,
        TimeUnit.MINUTE,
        TimeUnit.HOUR,
    }
)

_YEAR_UNITS: frozenset[TimeUnit] = frozenset(
    {TimeUnit.YEAR, TimeUnit.DECADE, TimeUnit.CENTURY, TimeUnit.MILLENNIUM}
)

SUPPORTED_UNITS: dict[Precision, frozenset[TimeUnit]] = {
    Precision.YEAR: _YEAR_UNITS,
    Precision.YEAR_MONTH: _YEAR_UNITS | {TimeUnit.MONTH},
    Precision.DATE: _YEAR_UNITS | {TimeUnit.MONTH, TimeUnit.WEEK, TimeUnit.DAY},
    Precision.DATE_TIME: frozenset(TimeUnit),
}


def check_unit(unit: TimeUnit, precision: Precision) -> None:
    """Raise ValueError unless the precision accepts the unit."""
    if not isinstance(unit, TimeUnit):
        raise TypeError(f"expected TimeUnit, got {type(unit).__name__}")
    if not unit.is_supported_by(precision):
        raise ValueError(f"unit {unit.value!r} is not supported at {precision.value} precision")


__all__ = ["TimeUnit", "SUPPORTED_UNITS", "check_unit"]
