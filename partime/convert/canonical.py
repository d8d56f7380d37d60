"""Canonical byte encoding of partial temporal values.

The encoding is the identity of a value in content-addressed contexts. It
is fixed-width and little-endian, stable across processes and versions,
and covers only the precision tag and the value's fields:

    Year       marker 6, year i32
    YearMonth  marker 7, year i32, month u8
    Date       marker 8, year i32, month u8, day u8
    DateTime   marker 9, year i32, month u8, day u8, hour u8, minute u8,
               second u8, nanosecond u32, offset flag u8,
               offset minutes i16 (only when the flag is 1)

Formatting details (fraction digits, ``Z`` versus ``+00:00``) are not
encoded, so equal values always produce identical bytes.

Examples:
    >>> from partime import Year
    >>> canonical_bytes(Year(2023))
    b'\\x06\\xe7\\x07\\x00\\x00'
"""

from __future__ import annotations

import hashlib
import struct
from typing import Protocol

from partime.core.base import PartialTemporal
from partime.core.date import Date
from partime.core.datetime import DateTime
from partime.core.year import Year
from partime.core.year_month import YearMonth

_YEAR = struct.Struct("<Bi")
_YEAR_MONTH = struct.Struct("<BiB")
_DATE = struct.Struct("<BiBB")
_DATE_TIME = struct.Struct("<BiBBBBBIB")
_OFFSET = struct.Struct("<h")


class Sink(Protocol):
    """Anything that accepts bytes, such as a hashlib hash object."""

    def update(self, data: bytes, /) -> None: ...


def canonical_bytes(value: PartialTemporal) -> bytes:
    """Return the canonical encoding of a value.

    Raises:
        TypeError: If value is not one of the four variants.
    """
    if not isinstance(value, PartialTemporal):
        raise TypeError(
            f"expected Year, YearMonth, Date, or DateTime, got {type(value).__name__}"
        )
    marker = value.precision.marker

    if isinstance(value, DateTime):
        offset = value.offset
        head = _DATE_TIME.pack(
            marker,
            value.year,
            value.month,
            value.day,
            value.hour,
            value.minute,
            value.second,
            value.nanosecond,
            0 if offset is None else 1,
        )
        if offset is None:
            return head
        return head + _OFFSET.pack(offset.minutes)
    elif isinstance(value, Date):
        return _DATE.pack(marker, value.year, value.month, value.day)
    elif isinstance(value, YearMonth):
        return _YEAR_MONTH.pack(marker, value.year, value.month)
    elif isinstance(value, Year):
        return _YEAR.pack(marker, value.year)
    else:
        raise TypeError(
            f"expected Year, YearMonth, Date, or DateTime, got {type(value).__name__}"
        )


def hash_into(value: PartialTemporal, sink: Sink) -> None:
    """Feed the canonical encoding of value into sink.

    Examples:
        >>> import hashlib
        >>> from partime import Date
        >>> h = hashlib.sha256()
        >>> hash_into(Date(2024, 1, 15), h)
    """
    sink.update(canonical_bytes(value))


def content_hash(value: PartialTemporal, algorithm: str = "sha256") -> str:
    """Return the hex digest of the canonical encoding.

    Args:
        value: The value to hash.
        algorithm: Any algorithm name accepted by hashlib.new().
    """
    digest = hashlib.new(algorithm)
    hash_into(value, digest)
    return digest.hexdigest()


__all__ = ["canonical_bytes", "hash_into", "content_hash", "Sink"]
