"""Fixed UTC offset for date-time values.

This module provides the UtcOffset class: a signed whole number of
minutes east of UTC, without any timezone database.
"""

from __future__ import annotations

import re
from typing import ClassVar

from partime._internal.constants import MAX_OFFSET_MINUTES
from partime._internal.validation import validate_offset_minutes
from partime.errors import InvalidField, MalformedText

_OFFSET_PATTERN = re.compile(r"([+-])(\d{2}):(\d{2})")


class UtcOffset:
    """A fixed offset from UTC in whole minutes.

    Offsets are limited to +/-18:00. Positive values are east of UTC.

    An offset remembers whether it was written as ``Z``. That only
    affects the text form: ``UtcOffset(0)`` and ``UtcOffset.utc()`` are
    equal and hash alike.

    Attributes:
        minutes: Signed offset in minutes.

    Examples:
        >>> UtcOffset.from_string("+05:30").minutes
        330

        >>> str(UtcOffset.from_string("Z"))
        'Z'

        >>> UtcOffset(-300)
        UtcOffset(minutes=-300)
    """

    __slots__ = ("_minutes", "_zulu")

    _utc_instance: ClassVar[UtcOffset | None] = None

    MAX_MINUTES: ClassVar[int] = MAX_OFFSET_MINUTES

    def __init__(self, minutes: int, *, zulu: bool = False) -> None:
        """Create an offset of the given signed minutes.

        Raises:
            InvalidField: If minutes is outside +/-18:00, or zulu is
                requested for a non-zero offset.
        """
        validate_offset_minutes(minutes)
        if zulu and minutes != 0:
            raise InvalidField("offset", minutes, "only a zero offset can be written as Z")
        self._minutes: int = minutes
        self._zulu: bool = zulu

    @classmethod
    def utc(cls) -> UtcOffset:
        """Return the shared UTC offset, written as ``Z``."""
        if cls._utc_instance is None:
            cls._utc_instance = cls(0, zulu=True)
        return cls._utc_instance

    @classmethod
    def from_hours(cls, hours: int, minutes: int = 0) -> UtcOffset:
        """Create an offset from hours and minutes.

        The sign of hours applies to minutes as well.

        Examples:
            >>> UtcOffset.from_hours(-3, 30).minutes
            -210
        """
        if minutes < 0 or minutes > 59:
            raise InvalidField("offset", minutes, f"offset minutes must be 0-59, got {minutes}")
        total = abs(hours) * 60 + minutes
        return cls(-total if hours < 0 else total)

    @classmethod
    def from_string(cls, s: str) -> UtcOffset:
        """Parse ``Z``, ``+hh:mm`` or ``-hh:mm``.

        Raises:
            MalformedText: If the text does not have that layout, or is
                the non-canonical ``-00:00``.
            InvalidField: If the offset is out of range.
        """
        if s == "Z":
            return cls.utc()

        match = _OFFSET_PATTERN.fullmatch(s)
        if not match:
            raise MalformedText(f"Cannot parse UTC offset: {s!r}")

        sign_str, hours_str, minutes_str = match.groups()
        hours = int(hours_str)
        minutes = int(minutes_str)
        if sign_str == "-" and hours == 0 and minutes == 0:
            raise MalformedText(f"Zero UTC offset must be written +00:00 or Z: {s!r}")
        if minutes > 59:
            raise InvalidField("offset", s, f"offset minutes out of range: {s!r}")

        total = hours * 60 + minutes
        if total > MAX_OFFSET_MINUTES:
            signed = total if sign_str == "+" else -total
            raise InvalidField("offset", signed, f"offset out of range: {s!r}")
        return cls(total if sign_str == "+" else -total)

    @property
    def minutes(self) -> int:
        """Return the offset in signed minutes."""
        return self._minutes

    @property
    def is_utc(self) -> bool:
        return self._minutes == 0

    @property
    def is_zulu(self) -> bool:
        """Return True if this offset is written as ``Z``."""
        return self._zulu

    def to_iso_format(self) -> str:
        """Return ``Z`` or ``+hh:mm`` / ``-hh:mm``."""
        if self._zulu:
            return "Z"
        hours, minutes = divmod(abs(self._minutes), 60)
        sign = "-" if self._minutes < 0 else "+"
        return f"{sign}{hours:02d}:{minutes:02d}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UtcOffset):
            return NotImplemented
        return self._minutes == other._minutes

    def __hash__(self) -> int:
        return hash(self._minutes)

    def __repr__(self) -> str:
        if self._zulu:
            return "UtcOffset.utc()"
        return f"UtcOffset(minutes={self._minutes})"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["UtcOffset"]
