"""Validation utilities for Partime.

Each validator checks one field against its legal range and raises
InvalidField naming the field and the rejected value. Constructors call
every validator they need before storing anything, so a partially
validated value never exists.

This module is not part of the public API.
"""

from __future__ import annotations

from partime._internal.calendar import days_in_month
from partime._internal.constants import (
    MAX_FRACTION_DIGITS,
    MAX_OFFSET_MINUTES,
    MAX_YEAR,
    MIN_YEAR,
    NANOS_PER_SECOND,
)
from partime.errors import InvalidField


def _check_int(field: str, value: object) -> None:
    # bool is an int subclass but never a calendar field
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidField(
            field, value, f"{field} must be an integer, got {type(value).__name__}"
        )


def validate_range(field: str, value: int, min_val: int, max_val: int) -> None:
    """Validate that a field lies within [min_val, max_val].

    Raises:
        InvalidField: If value is not an integer or is out of range.

    Examples:
        >>> validate_range("month", 13, 1, 12)
        Traceback (most recent call last):
        ...
        partime.errors.InvalidField: month must be between 1 and 12, got 13
    """
    _check_int(field, value)
    if value < min_val or value > max_val:
        raise InvalidField(
            field, value, f"{field} must be between {min_val} and {max_val}, got {value}"
        )


def validate_year(year: int) -> None:
    """Validate that a year is within MIN_YEAR to MAX_YEAR."""
    validate_range("year", year, MIN_YEAR, MAX_YEAR)


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12."""
    validate_range("month", month, 1, 12)


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    The year and month must already be valid.

    Raises:
        InvalidField: If day is invalid for the month.
    """
    _check_int("day", day)
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise InvalidField(
            "day",
            day,
            f"day must be between 1 and {max_day} for {year:04d}-{month:02d}, got {day}",
        )


def validate_hour(hour: int) -> None:
    validate_range("hour", hour, 0, 23)


def validate_minute(minute: int) -> None:
    validate_range("minute", minute, 0, 59)


def validate_second(second: int) -> None:
    # Leap seconds are not modeled
    validate_range("second", second, 0, 59)


def validate_nanosecond(nanosecond: int) -> None:
    validate_range("nanosecond", nanosecond, 0, NANOS_PER_SECOND - 1)


def validate_fraction_digits(nanosecond: int, digits: int) -> None:
    """Validate that nanosecond can be written with the given digit count.

    Raises:
        InvalidField: If digits is out of 0-9, or nanosecond has
            significant digits beyond it.
    """
    validate_range("fraction_digits", digits, 0, MAX_FRACTION_DIGITS)
    if nanosecond % 10 ** (MAX_FRACTION_DIGITS - digits):
        raise InvalidField(
            "fraction_digits",
            digits,
            f"nanosecond {nanosecond} needs more than {digits} fractional digits",
        )


def validate_offset_minutes(minutes: int) -> None:
    """Validate a UTC offset in signed minutes (+/-18:00)."""
    validate_range("offset", minutes, -MAX_OFFSET_MINUTES, MAX_OFFSET_MINUTES)


__all__ = [
    "validate_range",
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_hour",
    "validate_minute",
    "validate_second",
    "validate_nanosecond",
    "validate_fraction_digits",
    "validate_offset_minutes",
]
