"""Precision-dispatching operations over the closed variant family.

Each function accepts any of Year, YearMonth, Date, or DateTime and
dispatches on the precision tag; any other argument is a TypeError.
Widening is defined for every precision except DATE_TIME.

Supported Operations:
    - narrow: Truncate to a coarser precision
    - widen: Expand to the inclusive range of finer values
    - plus: Precision-preserving arithmetic
    - with_field: Replace one field and revalidate
    - until: Whole units between two values of one precision
"""

from __future__ import annotations

from typing import Any

from partime.core.base import PartialTemporal
from partime.core.date import Date
from partime.core.datetime import DateTime
from partime.core.year import Year
from partime.core.year_month import YearMonth
from partime.units.precision import Precision
from partime.units.timeunit import TimeUnit


def _check(value: object) -> PartialTemporal:
    if not isinstance(value, PartialTemporal):
        raise TypeError(
            f"expected Year, YearMonth, Date, or DateTime, got {type(value).__name__}"
        )
    return value


def narrow(value: PartialTemporal, precision: Precision) -> PartialTemporal:
    """Truncate value to the given precision.

    Examples:
        >>> from partime import DateTime
        >>> narrow(DateTime(2024, 5, 6, 7, 8, 9), Precision.YEAR)
        Year(2024)
    """
    return _check(value).narrow_to(precision)


def widen(value: PartialTemporal) -> tuple[PartialTemporal, PartialTemporal]:
    """Return the inclusive (start, end) range value denotes.

    Raises:
        ValueError: If value is a DateTime, the finest precision.

    Examples:
        >>> widen(YearMonth(2023, 2))
        (Date(2023, 2, 1), Date(2023, 2, 28))
    """
    value = _check(value)
    if isinstance(value, (Year, YearMonth, Date)):
        return value.widen()
    elif isinstance(value, DateTime):
        raise ValueError("date-time is the finest precision and cannot be widened")
    raise TypeError(f"unknown temporal variant {type(value).__name__}")


def plus(value: PartialTemporal, amount: int, unit: TimeUnit) -> PartialTemporal:
    """Return value moved by amount units (see PartialTemporal.plus)."""
    return _check(value).plus(amount, unit)


def with_field(value: PartialTemporal, name: str, new_value: Any) -> PartialTemporal:
    """Return value with one field replaced (see PartialTemporal.with_field)."""
    return _check(value).with_field(name, new_value)


def until(start: PartialTemporal, end: PartialTemporal, unit: TimeUnit) -> int:
    """Return the whole units from start to end (see PartialTemporal.until)."""
    return _check(start).until(end, unit)


__all__ = ["narrow", "widen", "plus", "with_field", "until"]
