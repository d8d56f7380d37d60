"""Canonical text parsing and formatting.

This module converts partial temporal values to and from their text
layout::

    YYYY[-MM[-DD[Thh:mm:ss[.f{1,9}][Z|+hh:mm|-hh:mm]]]]

Precision is detected from the components present. The leading four
characters are always read as the year; each further component is
consumed only if its separator and digits are well-formed, and parsing
stops at the first precision it cannot extend::

    "2023"        -> Year(2023)
    "2023-07"     -> YearMonth(2023, 7)
    "2023-07-1"   -> YearMonth(2023, 7)       (day is not two digits)
    "2023-07-14T10:30:00+02:00" -> DateTime(...)

A component that is well-formed but out of range is an InvalidField, never
a reason to stop early. Once a full time of day has been read, whatever
follows must be a fraction and/or an offset: a malformed tail there is
rejected rather than dropped, because dropping it could discard an offset.

Examples:
    >>> parse_temporal("2024-02")
    YearMonth(2024, 2)

    >>> format_temporal(parse_temporal("2024-02-29T12:00:00Z"))
    '2024-02-29T12:00:00Z'
"""

from __future__ import annotations

import logging
from typing import TypeVar

from partime._internal.validation import (
    validate_day,
    validate_hour,
    validate_minute,
    validate_month,
    validate_second,
    validate_year,
)
from partime.core.base import PartialTemporal
from partime.core.date import Date
from partime.core.datetime import DateTime
from partime.core.year import Year
from partime.core.year_month import YearMonth
from partime.errors import MalformedText
from partime.units.offset import UtcOffset

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=PartialTemporal)

_ASCII_DIGITS = frozenset("0123456789")

# Length of "YYYY-MM-DDThh:mm:ss"
_TIME_END = 19
_OFFSET_LENGTH = len("+hh:mm")


def _read_digits(text: str, start: int, count: int) -> int | None:
    """Return the integer of count ASCII digits at start, or None."""
    chunk = text[start : start + count]
    if len(chunk) != count or not all(c in _ASCII_DIGITS for c in chunk):
        return None
    return int(chunk)


def _has(text: str, index: int, char: str) -> bool:
    return text[index : index + 1] == char


def _malformed(text: str, reason: str) -> MalformedText:
    logger.debug("rejecting temporal text %r: %s", text, reason)
    return MalformedText(f"{reason}: {text!r}")


def _parse_time_tail(
    text: str, date: tuple[int, int, int], time: tuple[int, int, int]
) -> DateTime:
    pos = _TIME_END
    nanosecond = 0
    fraction_digits = 0

    if _has(text, pos, "."):
        end = pos + 1
        while end < len(text) and text[end] in _ASCII_DIGITS:
            end += 1
        fraction = text[pos + 1 : end]
        if not 1 <= len(fraction) <= 9:
            raise _malformed(text, "fractional second must have 1 to 9 digits")
        nanosecond = int(fraction.ljust(9, "0"))
        fraction_digits = len(fraction)
        pos = end

    offset = None
    tail = text[pos:]
    if tail.startswith("Z"):
        offset = UtcOffset.utc()
        pos += 1
    elif tail[:1] in ("+", "-"):
        # MalformedText or InvalidField propagate from the offset parser
        offset = UtcOffset.from_string(tail[:_OFFSET_LENGTH])
        pos += _OFFSET_LENGTH

    if pos != len(text):
        raise _malformed(text, f"unexpected content {text[pos:]!r} after time of day")

    return DateTime(
        *date,
        *time,
        nanosecond=nanosecond,
        offset=offset,
        fraction_digits=fraction_digits,
    )


def _parse(text: str) -> tuple[PartialTemporal, int]:
    """Parse the longest valid prefix; return the value and characters used."""
    year = _read_digits(text, 0, 4)
    if year is None:
        raise _malformed(text, "expected a four-digit year")
    validate_year(year)

    month = _read_digits(text, 5, 2) if _has(text, 4, "-") else None
    if month is None:
        return Year(year), 4
    validate_month(month)

    day = _read_digits(text, 8, 2) if _has(text, 7, "-") else None
    if day is None:
        return YearMonth(year, month), 7
    validate_day(year, month, day)

    hour = _read_digits(text, 11, 2) if _has(text, 10, "T") else None
    minute = _read_digits(text, 14, 2) if _has(text, 13, ":") else None
    second = _read_digits(text, 17, 2) if _has(text, 16, ":") else None
    if hour is None or minute is None or second is None:
        return Date(year, month, day), 10
    validate_hour(hour)
    validate_minute(minute)
    validate_second(second)

    value = _parse_time_tail(text, (year, month, day), (hour, minute, second))
    return value, len(text)


def parse_temporal(text: str, *, strict: bool = False) -> PartialTemporal:
    """Parse text into the variant matching its precision.

    Args:
        text: The temporal literal.
        strict: Require the whole text to be consumed. By default parsing
            stops quietly at the first precision it cannot extend.

    Returns:
        A Year, YearMonth, Date, or DateTime.

    Raises:
        MalformedText: If no four-digit year leads the text, a date-time
            has a malformed fraction or offset, or (strict) text remains.
        InvalidField: If a well-formed field is out of range.

    Examples:
        >>> parse_temporal("2023")
        Year(2023)

        >>> parse_temporal("2023-02-30")
        Traceback (most recent call last):
        ...
        partime.errors.InvalidField: day must be between 1 and 28 for 2023-02, got 30

        >>> parse_temporal("2023-0x")  # stops after the year
        Year(2023)
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")

    value, consumed = _parse(text)
    if strict and consumed != len(text):
        raise _malformed(text, f"unexpected content {text[consumed:]!r}")
    return value


def parse_exact(text: str, cls: type[T]) -> T:
    """Parse text strictly and require the precision of cls.

    Raises:
        MalformedText: If the text is not a complete literal of that precision.
        InvalidField: If a field is out of range.
    """
    value = parse_temporal(text, strict=True)
    if not isinstance(value, cls):
        raise _malformed(
            text, f"expected a {cls.precision.value} literal, got {value.precision.value}"
        )
    return value


def format_temporal(value: PartialTemporal) -> str:
    """Return the canonical text form of a partial temporal value.

    Examples:
        >>> format_temporal(Year(476))
        '0476'
    """
    if not isinstance(value, PartialTemporal):
        raise TypeError(f"expected a partial temporal value, got {type(value).__name__}")
    return value.to_iso_format()


__all__ = ["parse_temporal", "parse_exact", "format_temporal"]
