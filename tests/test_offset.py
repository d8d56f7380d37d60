"""Tests for the UtcOffset class."""

from __future__ import annotations

import pytest

from partime.errors import InvalidField, MalformedText
from partime.units.offset import UtcOffset


class TestUtcOffsetConstruction:
    """Tests for UtcOffset construction."""

    def test_minutes(self) -> None:
        assert UtcOffset(330).minutes == 330
        assert UtcOffset(-300).minutes == -300

    def test_limits(self) -> None:
        """Offsets up to +/-18:00 are accepted."""
        assert UtcOffset(1080).minutes == 1080
        assert UtcOffset(-1080).minutes == -1080

    def test_beyond_limits(self) -> None:
        with pytest.raises(InvalidField) as exc_info:
            UtcOffset(1081)
        assert exc_info.value.field == "offset"

    def test_zulu_must_be_zero(self) -> None:
        with pytest.raises(InvalidField):
            UtcOffset(60, zulu=True)

    def test_utc_singleton(self) -> None:
        assert UtcOffset.utc() is UtcOffset.utc()
        assert UtcOffset.utc().is_utc
        assert UtcOffset.utc().is_zulu

    def test_from_hours(self) -> None:
        assert UtcOffset.from_hours(5, 30).minutes == 330
        assert UtcOffset.from_hours(-3, 30).minutes == -210
        assert UtcOffset.from_hours(0).minutes == 0


class TestUtcOffsetText:
    """Tests for parsing and formatting offsets."""

    @pytest.mark.parametrize(
        ("text", "minutes"),
        [("Z", 0), ("+00:00", 0), ("+05:30", 330), ("-08:00", -480), ("+18:00", 1080)],
    )
    def test_parse(self, text: str, minutes: int) -> None:
        assert UtcOffset.from_string(text).minutes == minutes

    @pytest.mark.parametrize("text", ["Z", "+00:00", "+05:30", "-08:00", "-00:30"])
    def test_roundtrip(self, text: str) -> None:
        assert str(UtcOffset.from_string(text)) == text

    @pytest.mark.parametrize("text", ["", "UTC", "+5:30", "+0530", "05:30", "+05:3", "-00:00"])
    def test_malformed(self, text: str) -> None:
        with pytest.raises(MalformedText):
            UtcOffset.from_string(text)

    def test_out_of_range(self) -> None:
        with pytest.raises(InvalidField) as exc_info:
            UtcOffset.from_string("-18:30")
        assert exc_info.value.value == -1110

    def test_minutes_over_59(self) -> None:
        with pytest.raises(InvalidField):
            UtcOffset.from_string("+05:60")


class TestUtcOffsetEquality:
    """Tests for equality and hashing."""

    def test_zulu_equals_zero(self) -> None:
        """Z and +00:00 are the same offset."""
        assert UtcOffset.utc() == UtcOffset(0)
        assert hash(UtcOffset.utc()) == hash(UtcOffset(0))

    def test_different(self) -> None:
        assert UtcOffset(60) != UtcOffset(-60)
