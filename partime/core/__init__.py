"""The closed family of partial temporal variants."""

from __future__ import annotations

from partime.core.base import PartialTemporal
from partime.core.date import Date
from partime.core.datetime import DateTime
from partime.core.year import Year
from partime.core.year_month import YearMonth

__all__: list[str] = [
    "PartialTemporal",
    "Year",
    "YearMonth",
    "Date",
    "DateTime",
]
