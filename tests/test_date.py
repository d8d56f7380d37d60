"""Tests for the Date class."""

from __future__ import annotations

import datetime

import pytest

from partime import Date, DateTime, Precision, TimeUnit, Year, YearMonth
from partime.errors import InvalidField, OutOfRange


class TestDateConstruction:
    """Tests for Date construction and validation."""

    def test_basic_construction(self) -> None:
        """Accessors return exactly the constructor fields."""
        d = Date(2024, 1, 15)
        assert d.year == 2024
        assert d.month == 1
        assert d.day == 15

    def test_construction_leap_year_february(self) -> None:
        assert Date(2024, 2, 29).day == 29

    def test_invalid_feb_29_non_leap(self) -> None:
        with pytest.raises(InvalidField, match="day must be between 1 and 28") as exc_info:
            Date(2023, 2, 29)
        assert exc_info.value.field == "day"
        assert exc_info.value.value == 29

    def test_invalid_month(self) -> None:
        with pytest.raises(InvalidField) as exc_info:
            Date(2024, 13, 1)
        assert exc_info.value.field == "month"

    def test_year_limits(self) -> None:
        assert Date(1, 1, 1).year == 1
        assert Date(9999, 12, 31).year == 9999

    def test_accessors_sampled(self) -> None:
        """No silent normalization for any valid date in a sample year."""
        for month in range(1, 13):
            for day in range(1, 29):
                d = Date(2023, month, day)
                assert (d.year, d.month, d.day) == (2023, month, day)


class TestDateBoundaries:
    """Tests for Date narrowing and widening."""

    def test_narrow_chain(self) -> None:
        """Narrowing step by step equals narrowing directly."""
        d = Date(2024, 3, 15)
        assert d.narrow_to(Precision.YEAR_MONTH) == YearMonth(2024, 3)
        assert d.narrow_to(Precision.YEAR_MONTH).narrow_to(Precision.YEAR) == Year(2024)
        assert d.narrow_to(Precision.YEAR) == Year(2024)

    def test_widen(self) -> None:
        """A date widens to its first and last instants without an offset."""
        start, end = Date(2024, 1, 15).widen()
        assert start == DateTime(2024, 1, 15, 0, 0, 0)
        assert end == DateTime(2024, 1, 15, 23, 59, 59, nanosecond=999_999_999)
        assert start.offset is None
        assert end.offset is None

    def test_widen_text(self) -> None:
        start, end = Date(2024, 1, 15).widen()
        assert str(start) == "2024-01-15T00:00:00.000000000"
        assert str(end) == "2024-01-15T23:59:59.999999999"


class TestDateArithmetic:
    """Tests for Date arithmetic."""

    def test_plus_month_clamps(self) -> None:
        assert Date(2023, 1, 31).plus(1, TimeUnit.MONTH) == Date(2023, 2, 28)
        assert Date(2024, 1, 31).plus(1, TimeUnit.MONTH) == Date(2024, 2, 29)
        assert Date(2024, 3, 31).plus_months(-1) == Date(2024, 2, 29)

    def test_plus_year_from_leap_day(self) -> None:
        assert Date(2024, 2, 29).plus(1, TimeUnit.YEAR) == Date(2025, 2, 28)
        assert Date(2024, 2, 29).plus(4, TimeUnit.YEAR) == Date(2028, 2, 29)

    def test_plus_days(self) -> None:
        assert Date(2024, 1, 15).plus_days(10) == Date(2024, 1, 25)
        assert Date(2024, 1, 15).plus_days(-20) == Date(2023, 12, 26)
        assert Date(2023, 12, 31).plus_days(1) == Date(2024, 1, 1)

    def test_plus_weeks(self) -> None:
        assert Date(2024, 2, 26).plus(1, TimeUnit.WEEK) == Date(2024, 3, 4)

    def test_plus_days_matches_stdlib(self) -> None:
        start = Date(2000, 2, 28)
        for days in (1, 2, 365, 366, 10_000, -10_000):
            expected = datetime.date(2000, 2, 28) + datetime.timedelta(days=days)
            assert start.plus_days(days) == Date.from_date(expected)

    def test_plus_zero_is_same_object(self) -> None:
        d = Date(2024, 1, 15)
        assert d.plus(0, TimeUnit.DAY) is d

    def test_plus_out_of_range(self) -> None:
        with pytest.raises(OutOfRange):
            Date(9999, 12, 31).plus_days(1)
        with pytest.raises(OutOfRange):
            Date(1, 1, 1).plus_days(-1)
        with pytest.raises(OutOfRange):
            Date(9999, 6, 1).plus(1, TimeUnit.YEAR)

    def test_plus_hour_unsupported(self) -> None:
        with pytest.raises(ValueError):
            Date(2024, 1, 15).plus(1, TimeUnit.HOUR)

    def test_until_days(self) -> None:
        assert Date(2024, 1, 1).until(Date(2024, 3, 1), TimeUnit.DAY) == 60
        assert Date(2024, 3, 1).until(Date(2024, 1, 1), TimeUnit.DAY) == -60
        assert Date(2024, 1, 1).until(Date(2024, 1, 20), TimeUnit.WEEK) == 2

    def test_until_months(self) -> None:
        assert Date(2024, 1, 31).until(Date(2024, 2, 29), TimeUnit.MONTH) == 0
        assert Date(2024, 1, 15).until(Date(2024, 2, 15), TimeUnit.MONTH) == 1
        assert Date(2024, 2, 15).until(Date(2024, 1, 16), TimeUnit.MONTH) == 0
        assert Date(2000, 5, 10).until(Date(2024, 5, 9), TimeUnit.YEAR) == 23
        assert Date(2000, 5, 10).until(Date(2024, 5, 10), TimeUnit.YEAR) == 24


class TestDateFields:
    """Tests for replacing fields."""

    def test_replace(self) -> None:
        assert Date(2024, 1, 15).replace(month=6) == Date(2024, 6, 15)

    def test_replace_year_revalidates(self) -> None:
        """Changing the year of a leap day to a common year fails."""
        with pytest.raises(InvalidField) as exc_info:
            Date(2024, 2, 29).with_field("year", 2023)
        assert exc_info.value.field == "day"

    def test_with_field(self) -> None:
        assert Date(2024, 1, 15).with_field("day", 31) == Date(2024, 1, 31)


class TestDateMisc:
    """Tests for derived properties and conversions."""

    def test_day_of_week(self) -> None:
        assert Date(2024, 1, 15).day_of_week == 0
        assert Date(2024, 1, 21).day_of_week == 6

    def test_day_of_year(self) -> None:
        assert Date(2024, 12, 31).day_of_year == 366
        assert Date(2023, 12, 31).day_of_year == 365

    def test_ordinal_roundtrip(self) -> None:
        d = Date(2024, 1, 15)
        assert d.to_ordinal() == 738900
        assert Date.from_ordinal(738900) == d

    def test_from_ordinal_out_of_range(self) -> None:
        with pytest.raises(OutOfRange):
            Date.from_ordinal(0)

    def test_stdlib_interop(self) -> None:
        assert Date(2024, 1, 15).to_date() == datetime.date(2024, 1, 15)
        assert Date.from_date(datetime.date(2024, 1, 15)) == Date(2024, 1, 15)

    def test_text(self) -> None:
        assert str(Date(2024, 1, 5)) == "2024-01-05"
        assert repr(Date(2024, 1, 5)) == "Date(2024, 1, 5)"
        assert Date.from_iso_format("2024-01-05") == Date(2024, 1, 5)
