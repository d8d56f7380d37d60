"""Year class representing a year-precision temporal value."""

from __future__ import annotations

from typing import TYPE_CHECKING

from partime._internal.calendar import is_leap_year, ymd_to_ordinal
from partime._internal.constants import MONTHS_PER_YEAR, NANOS_PER_DAY
from partime._internal.validation import validate_year
from partime.core.base import PartialTemporal, check_result_year, truncated_div
from partime.units.precision import Precision
from partime.units.timeunit import TimeUnit

if TYPE_CHECKING:
    from partime.core.date import Date


class Year(PartialTemporal):
    """A temporal value that commits to a year and nothing finer.

    A Year is not the first of January, and it is not any particular
    instant: it denotes every instant of that year. Use widen() to get
    the bounding dates.

    Attributes:
        year: The year (1-9999).

    Examples:
        >>> y = Year(2024)
        >>> y.year
        2024
        >>> y.widen()
        (Date(2024, 1, 1), Date(2024, 12, 31))

        >>> Year(9999).plus_years(1)
        Traceback (most recent call last):
        ...
        partime.errors.OutOfRange: plus produced year 10000, outside 1..9999
    """

    __slots__ = ("_year",)

    precision = Precision.YEAR
    FIELDS = ("year",)

    def __init__(self, year: int) -> None:
        """Create a Year.

        Raises:
            InvalidField: If year is outside 1-9999.
        """
        validate_year(year)
        self._year: int = year

    @classmethod
    def from_iso_format(cls, s: str) -> Year:
        """Parse a year from its canonical text form (YYYY).

        Raises:
            MalformedText: If the text is not exactly a year literal.
            InvalidField: If the year is out of range.
        """
        from partime.format.text import parse_exact

        return parse_exact(s, cls)

    @property
    def year(self) -> int:
        return self._year

    @property
    def is_leap_year(self) -> bool:
        return is_leap_year(self._year)

    def at_start(self) -> Date:
        """Return the first calendar date of this year."""
        from partime.core.date import Date

        return Date(self._year, 1, 1)

    def at_end(self) -> Date:
        """Return the last calendar date of this year."""
        from partime.core.date import Date

        return Date(self._year, 12, 31)

    def widen(self) -> tuple[Date, Date]:
        """Return the inclusive (first date, last date) range of this year."""
        return (self.at_start(), self.at_end())

    def replace(self, year: int | None = None) -> Year:
        """Return a new Year with the year replaced."""
        return Year(year if year is not None else self._year)

    def _fields(self) -> tuple:
        return (self._year,)

    def _instant_range(self) -> tuple[int, int]:
        first = ymd_to_ordinal(self._year, 1, 1) * NANOS_PER_DAY
        last = (ymd_to_ordinal(self._year, 12, 31) + 1) * NANOS_PER_DAY - 1
        return (first, last)

    def _plus(self, amount: int, unit: TimeUnit) -> Year:
        new_year = self._year + amount * (unit.months // MONTHS_PER_YEAR)
        check_result_year(new_year, "plus")
        return Year(new_year)

    def _until(self, end: Year, unit: TimeUnit) -> int:
        return truncated_div(end._year - self._year, unit.months // MONTHS_PER_YEAR)

    def to_iso_format(self) -> str:
        """Return the year as four digits.

        Examples:
            >>> Year(476).to_iso_format()
            '0476'
        """
        return f"{self._year:04d}"

    def __repr__(self) -> str:
        return f"Year({self._year})"


__all__ = ["Year"]
