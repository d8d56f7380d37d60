"""Comparison of partial temporal values across precisions.

Values of the same precision have a total order (see each variant). Values
of different precision are compared by **range resolution**: each value
stands for the inclusive range of instants it may denote, and one value
precedes another only when its whole range precedes the other's whole
range. When the ranges overlap the order is indeterminate.

Comparison Rules:
    - Same precision: the variant's total order; 0 only for equal values
    - Two date-times of which only one has an offset: compared by range
      like different precisions, since the one without an offset is not
      a fixed instant; the ordering operators and sorted() still use the
      total order
    - Different precision: -1 or 1 by disjoint ranges, None on overlap
    - A value without a UTC offset, compared with a value that has one,
      may lie anywhere within the largest offset (18 hours) of its local
      range, so that range is widened by 18 hours on each side
    - Values of different precision are never equal

Examples:
    >>> from partime import Date, Year
    >>> compare(Year(2023), Date(2024, 1, 1))
    -1
    >>> compare(Year(2024), Date(2024, 6, 1)) is None
    True
"""

from __future__ import annotations

from partime._internal.constants import MAX_OFFSET_MINUTES, NANOS_PER_MINUTE
from partime.core.base import PartialTemporal

_OFFSET_SLACK = MAX_OFFSET_MINUTES * NANOS_PER_MINUTE


def _check(value: object) -> None:
    if not isinstance(value, PartialTemporal):
        raise TypeError(f"expected a partial temporal value, got {type(value).__name__}")


def instant_range(value: PartialTemporal, *, against: PartialTemporal | None = None) -> tuple[int, int]:
    """Return the inclusive nanosecond range a value may denote.

    Args:
        value: The value whose range to return.
        against: The value it will be compared with. If that one asserts
            a UTC offset and value does not, the range is widened by the
            maximum offset on both sides.
    """
    _check(value)
    first, last = value._instant_range()
    if against is not None and against.has_offset and not value.has_offset:
        first -= _OFFSET_SLACK
        last += _OFFSET_SLACK
    return (first, last)


def compare(left: PartialTemporal, right: PartialTemporal) -> int | None:
    """Compare two values of any precision.

    Returns:
        -1 if left comes first, 1 if right comes first, 0 if the values
        are equal, or None if their ranges overlap so neither comes first.
        Values of one precision always get -1, 0 or 1, except two
        date-times of which only one has an offset: those get None when
        they are within 18 hours of each other.

    Raises:
        TypeError: If either argument is not a partial temporal value.

    Examples:
        >>> from partime import Date, DateTime
        >>> compare(Date(2024, 1, 15), DateTime(2024, 1, 16, 8, 0, 0))
        -1
        >>> compare(Date(2024, 1, 15), Date(2024, 1, 15))
        0
    """
    _check(left)
    _check(right)

    if left.precision is right.precision and left.has_offset == right.has_offset:
        mine, theirs = left._sort_key(), right._sort_key()
        return (mine > theirs) - (mine < theirs)

    left_first, left_last = instant_range(left, against=right)
    right_first, right_last = instant_range(right, against=left)
    if left_last < right_first:
        return -1
    if left_first > right_last:
        return 1
    return None


def equal(left: PartialTemporal, right: PartialTemporal) -> bool:
    """Test field equality. Different precisions are never equal."""
    _check(left)
    _check(right)
    return left == right


def is_before(left: PartialTemporal, right: PartialTemporal) -> bool:
    """Return True only if left certainly comes before right."""
    return compare(left, right) == -1


def is_after(left: PartialTemporal, right: PartialTemporal) -> bool:
    """Return True only if left certainly comes after right."""
    return compare(left, right) == 1


def overlaps(left: PartialTemporal, right: PartialTemporal) -> bool:
    """Return True if the ranges of the two values share an instant.

    Examples:
        >>> from partime import Date, YearMonth
        >>> overlaps(YearMonth(2024, 2), Date(2024, 2, 29))
        True
    """
    left_first, left_last = instant_range(left, against=right)
    right_first, right_last = instant_range(right, against=left)
    return left_first <= right_last and right_first <= left_last


__all__ = [
    "compare",
    "equal",
    "instant_range",
    "is_before",
    "is_after",
    "overlaps",
]
