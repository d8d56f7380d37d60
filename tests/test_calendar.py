"""Tests for the shared calendar rules."""

from __future__ import annotations

import datetime

import pytest

from partime._internal.calendar import (
    clamp_day,
    day_of_week,
    days_in_month,
    days_in_year,
    is_leap_year,
    ordinal_to_ymd,
    shift_month,
    ymd_to_ordinal,
)


class TestLeapYear:
    """Tests for the leap-year rule."""

    @pytest.mark.parametrize("year", [4, 1600, 2000, 2024, 2400])
    def test_leap_years(self, year: int) -> None:
        """Years divisible by 4, and centuries divisible by 400, are leap."""
        assert is_leap_year(year)
        assert days_in_year(year) == 366

    @pytest.mark.parametrize("year", [1, 1700, 1800, 1900, 2023, 2100])
    def test_common_years(self, year: int) -> None:
        """Other years, including plain centuries, are common."""
        assert not is_leap_year(year)
        assert days_in_year(year) == 365

    def test_matches_stdlib(self) -> None:
        """The rule agrees with the standard library over a wide span."""
        import calendar

        for year in range(1, 3000):
            assert is_leap_year(year) == calendar.isleap(year)


class TestMonthLength:
    """Tests for month lengths."""

    def test_february(self) -> None:
        """February has 29 days only in leap years."""
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28
        assert days_in_month(1900, 2) == 28

    def test_thirty_day_months(self) -> None:
        """April, June, September and November have 30 days."""
        for month in (4, 6, 9, 11):
            assert days_in_month(2023, month) == 30

    def test_invalid_month(self) -> None:
        """Months outside 1-12 raise ValueError."""
        with pytest.raises(ValueError):
            days_in_month(2023, 13)

    def test_clamp_day(self) -> None:
        """Days past the end of the month clamp to its last day."""
        assert clamp_day(2023, 2, 31) == 28
        assert clamp_day(2024, 2, 31) == 29
        assert clamp_day(2024, 3, 15) == 15


class TestOrdinals:
    """Tests for ordinal day numbers."""

    def test_first_day(self) -> None:
        """0001-01-01 is ordinal 1."""
        assert ymd_to_ordinal(1, 1, 1) == 1
        assert ordinal_to_ymd(1) == (1, 1, 1)

    def test_matches_stdlib(self) -> None:
        """Ordinals agree with datetime.date.toordinal()."""
        for year, month, day in [
            (1, 12, 31),
            (4, 12, 31),
            (100, 3, 1),
            (400, 12, 31),
            (1600, 2, 29),
            (2000, 12, 31),
            (2024, 1, 15),
            (9999, 12, 31),
        ]:
            expected = datetime.date(year, month, day).toordinal()
            assert ymd_to_ordinal(year, month, day) == expected
            assert ordinal_to_ymd(expected) == (year, month, day)

    def test_roundtrip_sampled(self) -> None:
        """Every 997th ordinal survives conversion both ways."""
        last = ymd_to_ordinal(9999, 12, 31)
        for ordinal in range(1, last + 1, 997):
            assert ymd_to_ordinal(*ordinal_to_ymd(ordinal)) == ordinal

    def test_ordinal_below_one(self) -> None:
        """Ordinals before 0001-01-01 are rejected."""
        with pytest.raises(ValueError):
            ordinal_to_ymd(0)

    def test_day_of_week(self) -> None:
        """Day of week agrees with the standard library."""
        for ordinal in (1, 2, 738900, 738906):
            assert day_of_week(ordinal) == datetime.date.fromordinal(ordinal).weekday()


class TestShiftMonth:
    """Tests for month shifting."""

    def test_forward_across_year(self) -> None:
        assert shift_month(2024, 11, 3) == (2025, 2)

    def test_backward_across_year(self) -> None:
        assert shift_month(2024, 1, -1) == (2023, 12)

    def test_whole_years(self) -> None:
        assert shift_month(2024, 6, -24) == (2022, 6)

    def test_zero(self) -> None:
        assert shift_month(2024, 6, 0) == (2024, 6)
