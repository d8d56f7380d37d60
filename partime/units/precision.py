"""Precision enumeration for partial temporal values.

This module provides the Precision enum, the tag that identifies which
of the four temporal variants a value is.
"""

from __future__ import annotations

from enum import Enum

from partime._internal.constants import (
    HASH_MARKER_DATE,
    HASH_MARKER_DATE_TIME,
    HASH_MARKER_YEAR,
    HASH_MARKER_YEAR_MONTH,
)


class Precision(Enum):
    """The coarsest unit a temporal literal commits to.

    Precisions are ordered from coarse to fine, so ``Precision.YEAR <
    Precision.DATE`` holds. Every precision also owns the marker byte that
    leads its canonical hash encoding.

    Examples:
        >>> Precision.YEAR < Precision.DATE_TIME
        True

        >>> Precision.DATE.finer
        <Precision.DATE_TIME: 'date-time'>

        >>> Precision.YEAR_MONTH.marker
        7
    """

    YEAR = "year"
    YEAR_MONTH = "year-month"
    DATE = "date"
    DATE_TIME = "date-time"

    @property
    def rank(self) -> int:
        """Return 0 for the coarsest precision up to 3 for the finest."""
        return _RANKS[self]

    @property
    def marker(self) -> int:
        """Return the canonical hash marker byte for this precision."""
        return _MARKERS[self]

    @property
    def finer(self) -> Precision | None:
        """Return the next finer precision, or None for DATE_TIME."""
        rank = self.rank + 1
        return _ORDER[rank] if rank < len(_ORDER) else None

    @property
    def coarser(self) -> Precision | None:
        """Return the next coarser precision, or None for YEAR."""
        rank = self.rank - 1
        return _ORDER[rank] if rank >= 0 else None

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Precision):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Precision):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Precision):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Precision):
            return NotImplemented
        return self.rank >= other.rank


_ORDER: tuple[Precision, ...] = (
    Precision.YEAR,
    Precision.YEAR_MONTH,
    Precision.DATE,
    Precision.DATE_TIME,
)

_RANKS: dict[Precision, int] = {p: i for i, p in enumerate(_ORDER)}

_MARKERS: dict[Precision, int] = {
    Precision.YEAR: HASH_MARKER_YEAR,
    Precision.YEAR_MONTH: HASH_MARKER_YEAR_MONTH,
    Precision.DATE: HASH_MARKER_DATE,
    Precision.DATE_TIME: HASH_MARKER_DATE_TIME,
}


__all__ = ["Precision"]
