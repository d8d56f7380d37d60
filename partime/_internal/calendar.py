"""Calendar utilities for Partime.

This module is the single home of the proleptic Gregorian calendar rules:
the leap-year rule, month lengths, ordinal day numbers and month shifting.
Validation, widening and all arithmetic go through these functions.

Ordinal 1 = 0001-01-01, the first day of the supported range.

This module is not part of the public API.
"""

from __future__ import annotations

from partime._internal.constants import DAYS_IN_MONTH, MONTHS_PER_YEAR


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month."""
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (days since year 1).

    Examples:
        >>> ymd_to_ordinal(1, 1, 1)
        1
        >>> ymd_to_ordinal(2024, 1, 15)
        738900
    """
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert ordinal (days since year 1) to year, month, day.

    Based on the 400/100/4/1-year cycle decomposition used by Python's
    datetime module.

    Raises:
        ValueError: If ordinal is below 1.
    """
    if ordinal < 1:
        raise ValueError(f"ordinal must be >= 1, got {ordinal}")

    # n is 0-indexed (n=0 means ordinal=1)
    n = ordinal - 1

    # 400-year cycles: each has 146097 days
    n400, n = divmod(n, 146097)
    # 100-year cycles within the 400: 36524 days each (the last has 36525)
    n100, n = divmod(n, 36524)
    # 4-year cycles within the 100: 1461 days each
    n4, n = divmod(n, 1461)
    # Years within the 4-year cycle: 365 days each (except leap year)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a cycle: December 31 of the previous leap year
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    doy = n + 1
    month, day = _doy_to_md(year, doy)
    return (year, month, day)


def _doy_to_md(year: int, doy: int) -> tuple[int, int]:
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


def day_of_week(ordinal: int) -> int:
    """Return the day of week for an ordinal (Monday=0, Sunday=6).

    0001-01-01 (ordinal 1) was a Monday.
    """
    return (ordinal - 1) % 7


def proleptic_month(year: int, month: int) -> int:
    """Return a running month count, year * 12 + (month - 1)."""
    return year * MONTHS_PER_YEAR + (month - 1)


def shift_month(year: int, month: int, months: int) -> tuple[int, int]:
    """Return (year, month) moved by a signed number of months.

    The resulting year is not range checked.

    Examples:
        >>> shift_month(2024, 11, 3)
        (2025, 2)
        >>> shift_month(2024, 1, -1)
        (2023, 12)
    """
    new_year, month_index = divmod(proleptic_month(year, month) + months, MONTHS_PER_YEAR)
    return (new_year, month_index + 1)


def clamp_day(year: int, month: int, day: int) -> int:
    """Clamp day to the last valid day of the given month."""
    return min(day, days_in_month(year, month))


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "days_before_month",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "day_of_week",
    "proleptic_month",
    "shift_month",
    "clamp_day",
]
