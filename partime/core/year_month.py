"""YearMonth class representing a month-precision temporal value."""

from __future__ import annotations

from typing import TYPE_CHECKING

from partime._internal.calendar import (
    days_in_month,
    is_leap_year,
    proleptic_month,
    shift_month,
    ymd_to_ordinal,
)
from partime._internal.constants import NANOS_PER_DAY
from partime._internal.validation import validate_month, validate_year
from partime.core.base import PartialTemporal, check_result_year, truncated_div
from partime.core.year import Year
from partime.units.precision import Precision
from partime.units.timeunit import TimeUnit

if TYPE_CHECKING:
    from partime.core.date import Date


class YearMonth(PartialTemporal):
    """A temporal value that commits to a year and a month.

    Attributes:
        year: The year (1-9999).
        month: The month (1-12).

    Examples:
        >>> ym = YearMonth(2024, 2)
        >>> ym.days_in_month
        29
        >>> ym.widen()
        (Date(2024, 2, 1), Date(2024, 2, 29))

        >>> YearMonth(2024, 11).plus_months(3)
        YearMonth(2025, 2)
    """

    __slots__ = ("_year", "_month")

    precision = Precision.YEAR_MONTH
    FIELDS = ("year", "month")

    def __init__(self, year: int, month: int) -> None:
        """Create a YearMonth.

        Raises:
            InvalidField: If year or month is out of range.
        """
        validate_year(year)
        validate_month(month)
        self._year: int = year
        self._month: int = month

    @classmethod
    def from_iso_format(cls, s: str) -> YearMonth:
        """Parse a year-month from its canonical text form (YYYY-MM)."""
        from partime.format.text import parse_exact

        return parse_exact(s, cls)

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def is_leap_year(self) -> bool:
        return is_leap_year(self._year)

    @property
    def days_in_month(self) -> int:
        """Return the length of this month in days."""
        return days_in_month(self._year, self._month)

    def at_start(self) -> Date:
        """Return the first day of this month."""
        from partime.core.date import Date

        return Date(self._year, self._month, 1)

    def at_end(self) -> Date:
        """Return the last day of this month."""
        from partime.core.date import Date

        return Date(self._year, self._month, self.days_in_month)

    def widen(self) -> tuple[Date, Date]:
        """Return the inclusive (first day, last day) range of this month."""
        return (self.at_start(), self.at_end())

    def replace(self, year: int | None = None, month: int | None = None) -> YearMonth:
        """Return a new YearMonth with the given fields replaced.

        Raises:
            InvalidField: If the resulting value is invalid.
        """
        return YearMonth(
            year if year is not None else self._year,
            month if month is not None else self._month,
        )

    def plus_months(self, months: int) -> YearMonth:
        return self.plus(months, TimeUnit.MONTH)

    def _fields(self) -> tuple:
        return (self._year, self._month)

    def _instant_range(self) -> tuple[int, int]:
        first = ymd_to_ordinal(self._year, self._month, 1)
        return (
            first * NANOS_PER_DAY,
            (first + self.days_in_month) * NANOS_PER_DAY - 1,
        )

    def _narrow(self, target: Precision) -> Year:
        return Year(self._year)

    def _plus(self, amount: int, unit: TimeUnit) -> YearMonth:
        new_year, new_month = shift_month(self._year, self._month, amount * unit.months)
        check_result_year(new_year, "plus")
        return YearMonth(new_year, new_month)

    def _until(self, end: YearMonth, unit: TimeUnit) -> int:
        months = proleptic_month(end._year, end._month) - proleptic_month(self._year, self._month)
        return truncated_div(months, unit.months)

    def to_iso_format(self) -> str:
        """Return the value as YYYY-MM."""
        return f"{self._year:04d}-{self._month:02d}"

    def __repr__(self) -> str:
        return f"YearMonth({self._year}, {self._month})"


__all__ = ["YearMonth"]
