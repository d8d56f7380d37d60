"""Date class representing a day-precision temporal value.

Dates live in the proleptic Gregorian calendar. A Date never asserts a
UTC offset: widening it yields date-times without one.
"""

from __future__ import annotations

import datetime as _datetime
from typing import TYPE_CHECKING

from partime._internal.calendar import (
    clamp_day,
    day_of_week,
    days_before_month,
    days_in_month,
    is_leap_year,
    ordinal_to_ymd,
    proleptic_month,
    shift_month,
    ymd_to_ordinal,
)
from partime._internal.constants import NANOS_PER_DAY
from partime._internal.validation import validate_day, validate_month, validate_year
from partime.core.base import (
    PartialTemporal,
    check_result_ordinal,
    check_result_year,
    truncated_div,
)
from partime.core.year import Year
from partime.core.year_month import YearMonth
from partime.units.precision import Precision
from partime.units.timeunit import TimeUnit

if TYPE_CHECKING:
    from partime.core.datetime import DateTime


def months_until(start: tuple[int, int, int], end: tuple[int, int, int]) -> int:
    """Return the complete months from one (year, month, day) to another.

    A month is complete once the end day reaches the start day, so
    Jan 31 to Feb 28 is zero months and Jan 15 to Feb 15 is one.
    """
    # Pack month and day so a single subtraction orders both
    packed_start = proleptic_month(start[0], start[1]) * 32 + start[2]
    packed_end = proleptic_month(end[0], end[1]) * 32 + end[2]
    return truncated_div(packed_end - packed_start, 32)


class Date(PartialTemporal):
    """A calendar date in the proleptic Gregorian calendar.

    Attributes:
        year: The year (1-9999).
        month: The month (1-12).
        day: The day of the month (1-31).

    Examples:
        >>> d = Date(2024, 1, 15)
        >>> d.year, d.month, d.day
        (2024, 1, 15)

        >>> Date(2024, 1, 31).plus_months(1)  # Clamps to Feb 29
        Date(2024, 2, 29)

        >>> Date(2023, 2, 30)
        Traceback (most recent call last):
        ...
        partime.errors.InvalidField: day must be between 1 and 28 for 2023-02, got 30
    """

    __slots__ = ("_year", "_month", "_day")

    precision = Precision.DATE
    FIELDS = ("year", "month", "day")

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a Date from year, month, and day.

        Raises:
            InvalidField: If any component is out of range.
        """
        validate_year(year)
        validate_month(month)
        validate_day(year, month, day)
        self._year: int = year
        self._month: int = month
        self._day: int = day

    @classmethod
    def from_ordinal(cls, ordinal: int) -> Date:
        """Create a Date from an ordinal day number (0001-01-01 is 1).

        Raises:
            OutOfRange: If the ordinal is outside the supported span.

        Examples:
            >>> Date.from_ordinal(738900)
            Date(2024, 1, 15)
        """
        check_result_ordinal(ordinal, "from_ordinal")
        return cls(*ordinal_to_ymd(ordinal))

    @classmethod
    def from_iso_format(cls, s: str) -> Date:
        """Parse a date from its canonical text form (YYYY-MM-DD)."""
        from partime.format.text import parse_exact

        return parse_exact(s, cls)

    @classmethod
    def from_date(cls, value: _datetime.date) -> Date:
        """Create a Date from a standard library date.

        A datetime.datetime is accepted and its time of day ignored.
        """
        return cls(value.year, value.month, value.day)

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    @property
    def is_leap_year(self) -> bool:
        return is_leap_year(self._year)

    @property
    def days_in_month(self) -> int:
        return days_in_month(self._year, self._month)

    @property
    def day_of_week(self) -> int:
        """Return the day of the week, Monday as 0 through Sunday as 6.

        Examples:
            >>> Date(2024, 1, 15).day_of_week  # Monday
            0
        """
        return day_of_week(self.to_ordinal())

    @property
    def day_of_year(self) -> int:
        """Return the day of the year (1-366)."""
        return days_before_month(self._year, self._month) + self._day

    def at_start(self) -> DateTime:
        """Return the first instant of this date, without an offset."""
        from partime.core.datetime import DateTime

        return DateTime(self._year, self._month, self._day, 0, 0, 0, fraction_digits=9)

    def at_end(self) -> DateTime:
        """Return the last representable instant of this date, without an offset."""
        from partime.core.datetime import DateTime

        return DateTime(
            self._year, self._month, self._day, 23, 59, 59, nanosecond=999_999_999
        )

    def widen(self) -> tuple[DateTime, DateTime]:
        """Return the inclusive (start, end) range of instants of this date.

        Neither bound asserts a UTC offset.

        Examples:
            >>> start, end = Date(2024, 1, 15).widen()
            >>> str(start), str(end)
            ('2024-01-15T00:00:00.000000000', '2024-01-15T23:59:59.999999999')
        """
        return (self.at_start(), self.at_end())

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
    ) -> Date:
        """Return a new Date with the given fields replaced.

        The whole date is revalidated, so replacing the year of Feb 29
        with a common year fails rather than rolling over.

        Raises:
            InvalidField: If the resulting date is invalid.

        Examples:
            >>> Date(2024, 1, 15).replace(month=6)
            Date(2024, 6, 15)
        """
        return Date(
            year if year is not None else self._year,
            month if month is not None else self._month,
            day if day is not None else self._day,
        )

    def plus_months(self, months: int) -> Date:
        return self.plus(months, TimeUnit.MONTH)

    def plus_days(self, days: int) -> Date:
        return self.plus(days, TimeUnit.DAY)

    def to_ordinal(self) -> int:
        """Return the ordinal day number, where 0001-01-01 is 1."""
        return ymd_to_ordinal(self._year, self._month, self._day)

    def to_date(self) -> _datetime.date:
        """Return the equivalent standard library date."""
        return _datetime.date(self._year, self._month, self._day)

    def _fields(self) -> tuple:
        return (self._year, self._month, self._day)

    def _instant_range(self) -> tuple[int, int]:
        ordinal = self.to_ordinal()
        return (ordinal * NANOS_PER_DAY, (ordinal + 1) * NANOS_PER_DAY - 1)

    def _narrow(self, target: Precision) -> PartialTemporal:
        if target is Precision.YEAR_MONTH:
            return YearMonth(self._year, self._month)
        return Year(self._year)

    def _plus(self, amount: int, unit: TimeUnit) -> Date:
        if unit.days is not None:
            ordinal = self.to_ordinal() + amount * unit.days
            check_result_ordinal(ordinal, "plus")
            return Date(*ordinal_to_ymd(ordinal))

        new_year, new_month = shift_month(self._year, self._month, amount * unit.months)
        check_result_year(new_year, "plus")
        return Date(new_year, new_month, clamp_day(new_year, new_month, self._day))

    def _until(self, end: Date, unit: TimeUnit) -> int:
        if unit.days is not None:
            return truncated_div(end.to_ordinal() - self.to_ordinal(), unit.days)
        return truncated_div(months_until(self._fields(), end._fields()), unit.months)

    def to_iso_format(self) -> str:
        """Return the date as YYYY-MM-DD."""
        return f"{self._year:04d}-{self._month:02d}-{self._day:02d}"

    def __repr__(self) -> str:
        return f"Date({self._year}, {self._month}, {self._day})"


__all__ = ["Date", "months_until"]
