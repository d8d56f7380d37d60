"""Tests for the precision-dispatching operations."""

from __future__ import annotations

import pytest

from partime import Date, DateTime, Precision, TimeUnit, UtcOffset, Year, YearMonth
from partime.arithmetic import narrow, plus, until, widen, with_field
from partime.errors import IncomparablePrecision, InvalidField, OutOfRange


class TestNarrow:
    """Tests for narrow()."""

    def test_narrow_chain(self) -> None:
        value = DateTime(2024, 5, 6, 7, 8, 9)
        assert narrow(value, Precision.DATE) == Date(2024, 5, 6)
        assert narrow(value, Precision.YEAR_MONTH) == YearMonth(2024, 5)
        assert narrow(value, Precision.YEAR) == Year(2024)

    def test_narrow_same_precision(self) -> None:
        assert narrow(Date(2024, 5, 6), Precision.DATE) == Date(2024, 5, 6)

    def test_narrow_to_finer(self) -> None:
        with pytest.raises(ValueError):
            narrow(Year(2024), Precision.DATE)

    def test_narrow_then_widen_contains(self) -> None:
        value = Date(2024, 2, 29)
        start, end = widen(narrow(value, Precision.YEAR_MONTH))
        assert start <= value <= end


class TestWiden:
    """Tests for widen()."""

    def test_widen_year(self) -> None:
        assert widen(Year(2024)) == (Date(2024, 1, 1), Date(2024, 12, 31))

    def test_widen_year_month(self) -> None:
        assert widen(YearMonth(2023, 2)) == (Date(2023, 2, 1), Date(2023, 2, 28))
        assert widen(YearMonth(2024, 2)) == (Date(2024, 2, 1), Date(2024, 2, 29))

    def test_widen_date(self) -> None:
        start, end = widen(Date(2024, 1, 15))
        assert start == DateTime(2024, 1, 15, 0, 0, 0)
        assert end == DateTime(2024, 1, 15, 23, 59, 59, nanosecond=999_999_999)
        assert not start.has_offset and not end.has_offset

    def test_widen_date_time(self) -> None:
        with pytest.raises(ValueError):
            widen(DateTime(2024, 1, 15, 0, 0, 0))


class TestPlus:
    """Tests for plus()."""

    def test_plus_years(self) -> None:
        assert plus(Year(2023), 1, TimeUnit.YEAR) == Year(2024)

    def test_plus_zero(self) -> None:
        value = YearMonth(2024, 2)
        assert plus(value, 0, TimeUnit.MONTH) is value

    def test_plus_month_clamps(self) -> None:
        assert plus(Date(2024, 1, 31), 1, TimeUnit.MONTH) == Date(2024, 2, 29)

    def test_plus_unsupported_unit(self) -> None:
        with pytest.raises(ValueError):
            plus(Year(2024), 1, TimeUnit.DAY)

    def test_plus_out_of_range(self) -> None:
        with pytest.raises(OutOfRange):
            plus(Year(9999), 1, TimeUnit.YEAR)

    @pytest.mark.parametrize("amount", [1.5, 1.0, "1", True, None])
    def test_plus_requires_int_amount(self, amount) -> None:
        with pytest.raises(TypeError):
            plus(Year(2023), amount, TimeUnit.YEAR)


class TestWithField:
    """Tests for with_field()."""

    def test_replace_field(self) -> None:
        assert with_field(Date(2024, 2, 29), "year", 2028) == Date(2028, 2, 29)

    def test_revalidates(self) -> None:
        with pytest.raises(InvalidField):
            with_field(Date(2024, 2, 29), "year", 2023)

    def test_unknown_field(self) -> None:
        with pytest.raises(ValueError):
            with_field(Year(2024), "month", 1)

    @pytest.mark.parametrize(
        ("value", "name"),
        [
            (Year(2024), "year"),
            (YearMonth(2024, 2), "month"),
            (Date(2024, 1, 15), "day"),
            (DateTime(2024, 1, 15, 10, 0, 0), "hour"),
        ],
    )
    def test_none_is_not_a_field_value(self, value, name: str) -> None:
        with pytest.raises(InvalidField) as exc_info:
            with_field(value, name, None)
        assert exc_info.value.field == name
        assert exc_info.value.value is None

    def test_none_removes_offset(self) -> None:
        value = DateTime(2024, 1, 15, 10, 0, 0, offset=UtcOffset(60))
        assert with_field(value, "offset", None) == DateTime(2024, 1, 15, 10, 0, 0)


class TestUntil:
    """Tests for until()."""

    def test_years(self) -> None:
        assert until(Year(2001), Year(2024), TimeUnit.YEAR) == 23
        assert until(Year(2024), Year(2001), TimeUnit.YEAR) == -23

    def test_months(self) -> None:
        assert until(YearMonth(2023, 11), YearMonth(2024, 2), TimeUnit.MONTH) == 3

    def test_days(self) -> None:
        assert until(Date(2024, 2, 1), Date(2024, 3, 1), TimeUnit.DAY) == 29

    def test_mismatched_precision(self) -> None:
        with pytest.raises(IncomparablePrecision):
            until(Year(2024), Date(2024, 1, 1), TimeUnit.YEAR)


class TestTypeChecks:
    """Every operation rejects values outside the variant family."""

    @pytest.mark.parametrize(
        "call",
        [
            lambda: narrow("2024", Precision.YEAR),
            lambda: widen(2024),
            lambda: plus(None, 1, TimeUnit.YEAR),
            lambda: with_field(object(), "year", 1),
            lambda: until(2024, Year(2024), TimeUnit.YEAR),
        ],
    )
    def test_type_error(self, call) -> None:
        with pytest.raises(TypeError):
            call()
