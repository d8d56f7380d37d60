"""Partime exception hierarchy.

All Partime-specific exceptions inherit from PartimeError.
"""

from __future__ import annotations


class PartimeError(Exception):
    """Base exception for all Partime errors."""

    pass


class MalformedText(PartimeError):
    """Text cannot be tokenized into the temporal layout.

    Examples:
        - Leading year is not four ASCII digits ("abcd", "202")
        - Garbage after a complete time ("2023-01-01T10:00:00x")
        - Trailing content in strict mode
    """

    pass


class InvalidField(PartimeError):
    """A field is syntactically present but outside its legal range.

    Attributes:
        field: Name of the offending field ("year", "month", "day", ...).
        value: The rejected value.

    Examples:
        - Month value outside 1-12
        - Day 30 in February
        - Offset beyond +/-18:00
    """

    def __init__(self, field: str, value: object, message: str | None = None) -> None:
        self.field = field
        self.value = value
        super().__init__(message or f"invalid {field}: {value!r}")

    def __reduce__(self):  # keep pickling working with the custom signature
        return (type(self), (self.field, self.value, str(self)))


class OutOfRange(PartimeError):
    """Arithmetic produced a year outside the supported span.

    Examples:
        - Year(9999) plus one year
        - Date(1, 1, 1) minus one day
    """

    pass


class IncomparablePrecision(PartimeError):
    """Values of different precision cannot be ordered or measured.

    Raised when the ranges two values denote overlap, so neither can be
    said to come first, or when a measurement needs both values at the
    same precision.
    """

    pass


__all__ = [
    "PartimeError",
    "MalformedText",
    "InvalidField",
    "OutOfRange",
    "IncomparablePrecision",
]
