"""Shared behavior of the partial temporal variants.

The four variants (Year, YearMonth, Date, DateTime) form a closed family.
Each one stores only the fields its precision implies; this base class
holds the operations whose shape is identical across the family and
leaves the per-precision work to small hooks on each subclass.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar

from partime._internal.calendar import ymd_to_ordinal
from partime._internal.constants import MAX_YEAR, MIN_YEAR
from partime.errors import IncomparablePrecision, InvalidField, OutOfRange
from partime.units.precision import Precision
from partime.units.timeunit import TimeUnit, check_unit

if TYPE_CHECKING:
    from typing import Self

logger = logging.getLogger(__name__)

# Ordinal bounds of the supported calendar span
MIN_ORDINAL: int = 1
MAX_ORDINAL: int = ymd_to_ordinal(MAX_YEAR, 12, 31)


def truncated_div(numerator: int, denominator: int) -> int:
    """Divide, rounding toward zero."""
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient


def check_result_year(year: int, operation: str) -> None:
    """Raise OutOfRange if an arithmetic result leaves the year span."""
    if year < MIN_YEAR or year > MAX_YEAR:
        logger.debug("%s produced year %d outside %d..%d", operation, year, MIN_YEAR, MAX_YEAR)
        raise OutOfRange(
            f"{operation} produced year {year}, outside {MIN_YEAR}..{MAX_YEAR}"
        )


def check_result_ordinal(ordinal: int, operation: str) -> None:
    """Raise OutOfRange if an arithmetic result leaves the day span."""
    if ordinal < MIN_ORDINAL or ordinal > MAX_ORDINAL:
        logger.debug("%s produced day ordinal %d outside the supported span", operation, ordinal)
        raise OutOfRange(f"{operation} produced a date outside {MIN_YEAR:04d}..{MAX_YEAR:04d}")


class PartialTemporal:
    """Base class of the partial temporal variants.

    Subclasses define:
        precision: The Precision tag of the variant.
        FIELDS: Names of the fields the variant carries, most significant
            first.
        _fields(): The field values that make up equality and hashing.
        _sort_key(): A key giving the total order within the variant.
        _instant_range(): Inclusive (first, last) nanosecond on the
            ordinal time line that the value may denote.
        _narrow(target): Truncation to a strictly coarser precision.
        _plus(amount, unit): Arithmetic for a supported, non-zero amount.
        _until(end, unit): Unit count to a value of the same variant.
        replace(...): Rebuild with some fields changed.
        to_iso_format(): Canonical text form.
    """

    __slots__ = ()

    precision: ClassVar[Precision]
    FIELDS: ClassVar[tuple[str, ...]]

    @property
    def has_offset(self) -> bool:
        """Return True if the value asserts a UTC offset."""
        return False

    def narrow_to(self, target: Precision) -> PartialTemporal:
        """Return this value truncated to a coarser (or equal) precision.

        Args:
            target: The precision to narrow to.

        Returns:
            A value of the target precision holding the leading fields.

        Raises:
            ValueError: If target is finer than this value's precision.

        Examples:
            >>> from partime import Date, Precision
            >>> Date(2024, 3, 15).narrow_to(Precision.YEAR_MONTH)
            YearMonth(2024, 3)
        """
        if not isinstance(target, Precision):
            raise TypeError(f"expected Precision, got {type(target).__name__}")
        if target > self.precision:
            raise ValueError(
                f"cannot narrow {self.precision.value} to finer precision {target.value}"
            )
        if target is self.precision:
            return self
        return self._narrow(target)

    def plus(self, amount: int, unit: TimeUnit) -> Self:
        """Return a new value moved by amount units.

        Month-based units clamp the day to the last day of the target
        month. Adding zero returns this value.

        Args:
            amount: Number of units to add (can be negative).
            unit: A TimeUnit supported at this precision.

        Raises:
            TypeError: If amount is not an int.
            ValueError: If the unit is not meaningful at this precision.
            OutOfRange: If the result falls outside the supported years.

        Examples:
            >>> from partime import Date, TimeUnit
            >>> Date(2023, 1, 31).plus(1, TimeUnit.MONTH)
            Date(2023, 2, 28)
        """
        if not isinstance(amount, int) or isinstance(amount, bool):
            raise TypeError(f"amount must be an int, got {type(amount).__name__}")
        check_unit(unit, self.precision)
        if amount == 0:
            return self
        return self._plus(amount, unit)

    def plus_years(self, years: int) -> Self:
        """Return a new value moved by the given number of years."""
        return self.plus(years, TimeUnit.YEAR)

    def with_field(self, name: str, value: Any) -> Self:
        """Return a new value with one field replaced and fully revalidated.

        Raises:
            ValueError: If the variant has no such field.
            InvalidField: If the rebuilt value is invalid.
        """
        if name not in self.FIELDS:
            raise ValueError(
                f"{type(self).__name__} has no field {name!r}; expected one of {self.FIELDS}"
            )
        # replace() reads None as "unchanged"; only an offset may be removed
        if value is None and name != "offset":
            raise InvalidField(name, None, f"{name} cannot be None")
        return self.replace(**{name: value})

    def until(self, end: PartialTemporal, unit: TimeUnit) -> int:
        """Return the number of complete units from this value to end.

        The result is negative when end is earlier, and truncated toward
        zero.

        Raises:
            IncomparablePrecision: If end has a different precision.
            ValueError: If the unit is not meaningful at this precision.

        Examples:
            >>> from partime import Year, TimeUnit
            >>> Year(2001).until(Year(2024), TimeUnit.DECADE)
            2
        """
        if not isinstance(end, PartialTemporal):
            raise TypeError(f"expected a partial temporal value, got {type(end).__name__}")
        if end.precision is not self.precision:
            raise IncomparablePrecision(
                f"cannot measure from {self.precision.value} to {end.precision.value}"
            )
        check_unit(unit, self.precision)
        return self._until(end, unit)

    def canonical_bytes(self) -> bytes:
        """Return the canonical hash encoding of this value."""
        from partime.convert.canonical import canonical_bytes

        return canonical_bytes(self)

    # Hooks

    def _fields(self) -> tuple:
        raise NotImplementedError

    def _sort_key(self) -> tuple:
        return self._fields()

    def _instant_range(self) -> tuple[int, int]:
        raise NotImplementedError

    def _narrow(self, target: Precision) -> PartialTemporal:
        raise NotImplementedError

    def _plus(self, amount: int, unit: TimeUnit) -> Self:
        raise NotImplementedError

    def _until(self, end: Any, unit: TimeUnit) -> int:
        raise NotImplementedError

    def replace(self, **fields: Any) -> Self:
        raise NotImplementedError

    def to_iso_format(self) -> str:
        raise NotImplementedError

    # Comparison

    def _order(self, other: PartialTemporal) -> int:
        if other.precision is self.precision:
            mine, theirs = self._sort_key(), other._sort_key()
            return (mine > theirs) - (mine < theirs)

        from partime.arithmetic.comparisons import compare

        result = compare(self, other)
        if result is None:
            raise IncomparablePrecision(
                f"{self} and {other} overlap; their order is indeterminate"
            )
        return result

    def __eq__(self, other: object) -> bool:
        """Field equality. Values of different precision are never equal."""
        if not isinstance(other, PartialTemporal):
            return NotImplemented
        return other.precision is self.precision and self._fields() == other._fields()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PartialTemporal):
            return NotImplemented
        return self._order(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, PartialTemporal):
            return NotImplemented
        return self._order(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, PartialTemporal):
            return NotImplemented
        return self._order(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, PartialTemporal):
            return NotImplemented
        return self._order(other) >= 0

    def __hash__(self) -> int:
        return hash((self.precision, self._fields()))

    def __str__(self) -> str:
        """Return the canonical text form."""
        return self.to_iso_format()

    def __bool__(self) -> bool:
        """Temporal values are always truthy."""
        return True


__all__ = ["PartialTemporal", "truncated_div", "check_result_year", "check_result_ordinal"]
