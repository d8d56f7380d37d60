"""Partime: partial-precision temporal literals.

Partime models the date/time literals of clinical-data interchange
formats, where a value may commit only to a year, a year and month, a
date, or a full date-time with a fixed UTC offset. Each precision is a
separate immutable value type; precision is never coerced away.

Core Types:
    Year: Year precision (YYYY)
    YearMonth: Month precision (YYYY-MM)
    Date: Day precision (YYYY-MM-DD)
    DateTime: Date and time with optional offset (YYYY-MM-DDThh:mm:ss...)

Units:
    Precision: Precision tag of a value
    TimeUnit: Units for plus() and until()
    UtcOffset: Fixed UTC offset in minutes

Functions:
    parse_temporal: Parse a literal, detecting its precision
    format_temporal: Render the canonical text form
    canonical_bytes: Canonical hash encoding
    compare: Range-resolved ordering across precisions

Exceptions:
    PartimeError: Base exception
    MalformedText: Text does not follow the layout
    InvalidField: Field out of range
    OutOfRange: Arithmetic left the supported years
    IncomparablePrecision: Cross-precision order is indeterminate

Example:
    >>> from partime import Date, Precision, TimeUnit, parse_temporal
    >>> parse_temporal("2024-01-31").plus(1, TimeUnit.MONTH)
    Date(2024, 2, 29)
    >>> Date(2024, 2, 29).narrow_to(Precision.YEAR).widen()
    (Date(2024, 1, 1), Date(2024, 12, 31))
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from partime.core.base import PartialTemporal
from partime.core.date import Date
from partime.core.datetime import DateTime
from partime.core.year import Year
from partime.core.year_month import YearMonth

# Units
from partime.units.offset import UtcOffset
from partime.units.precision import Precision
from partime.units.timeunit import TimeUnit

# Exceptions
from partime.errors import (
    IncomparablePrecision,
    InvalidField,
    MalformedText,
    OutOfRange,
    PartimeError,
)

# Functions
from partime.arithmetic.comparisons import compare, is_after, is_before, overlaps
from partime.convert.canonical import canonical_bytes, content_hash, hash_into
from partime.format.text import format_temporal, parse_temporal

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "PartialTemporal",
    "Year",
    "YearMonth",
    "Date",
    "DateTime",
    # Units
    "Precision",
    "TimeUnit",
    "UtcOffset",
    # Exceptions
    "PartimeError",
    "MalformedText",
    "InvalidField",
    "OutOfRange",
    "IncomparablePrecision",
    # Functions
    "parse_temporal",
    "format_temporal",
    "canonical_bytes",
    "hash_into",
    "content_hash",
    "compare",
    "is_before",
    "is_after",
    "overlaps",
]
