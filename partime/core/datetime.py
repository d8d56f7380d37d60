"""DateTime class: the finest precision, a date with a time of day.

A DateTime carries seconds, an optional fractional second (to the
nanosecond) and an optional fixed UTC offset. It is the only variant that
may assert an offset, and it cannot be widened any further.
"""

from __future__ import annotations

import datetime as _datetime
from typing import Any

from partime._internal.calendar import (
    clamp_day,
    days_in_month,
    is_leap_year,
    ordinal_to_ymd,
    shift_month,
    ymd_to_ordinal,
)
from partime._internal.constants import (
    MAX_FRACTION_DIGITS,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from partime._internal.validation import (
    validate_day,
    validate_fraction_digits,
    validate_hour,
    validate_minute,
    validate_month,
    validate_nanosecond,
    validate_second,
    validate_year,
)
from partime.core.base import (
    PartialTemporal,
    check_result_ordinal,
    check_result_year,
    truncated_div,
)
from partime.core.date import Date, months_until
from partime.core.year import Year
from partime.core.year_month import YearMonth
from partime.errors import InvalidField
from partime.units.offset import UtcOffset
from partime.units.precision import Precision
from partime.units.timeunit import TimeUnit

# Days in one 400-year cycle. Shifting both ends of a span by a whole
# cycle keeps every calendar difference intact.
_DAYS_PER_CYCLE = 146_097

_KEEP: Any = object()


def fraction_digits_for(nanosecond: int) -> int:
    """Return the fewest fractional digits that write nanosecond exactly.

    Examples:
        >>> fraction_digits_for(0)
        0
        >>> fraction_digits_for(500_000_000)
        1
        >>> fraction_digits_for(123_456_000)
        6
    """
    if nanosecond == 0:
        return 0
    digits = MAX_FRACTION_DIGITS
    while nanosecond % 10 == 0:
        nanosecond //= 10
        digits -= 1
    return digits


class DateTime(PartialTemporal):
    """A date and time of day with an optional fixed UTC offset.

    Equality is field equality: 10:00+02:00 and 08:00Z name the same
    instant but are different values. Ordering places values with an
    offset on the UTC time line and values without one on their local
    fields, so the order stays total and agrees with equality.

    ``fraction_digits`` records how many fractional-second digits the
    text form shows. It is formatting only and plays no part in
    equality, ordering, or the canonical hash.

    Attributes:
        year, month, day: The calendar date.
        hour: The hour (0-23).
        minute: The minute (0-59).
        second: The second (0-59).
        nanosecond: The fraction of the second in nanoseconds.
        offset: The UtcOffset, or None when no offset is asserted.

    Examples:
        >>> dt = DateTime(2024, 1, 15, 14, 30, 45, offset=UtcOffset.utc())
        >>> str(dt)
        '2024-01-15T14:30:45Z'

        >>> DateTime(2024, 1, 15, 23, 0, 0).plus(2, TimeUnit.HOUR)
        DateTime(2024, 1, 16, 1, 0, 0)
    """

    __slots__ = (
        "_year",
        "_month",
        "_day",
        "_hour",
        "_minute",
        "_second",
        "_nanosecond",
        "_offset",
        "_fraction_digits",
    )

    precision = Precision.DATE_TIME
    FIELDS = ("year", "month", "day", "hour", "minute", "second", "nanosecond", "offset")

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
        *,
        nanosecond: int = 0,
        offset: UtcOffset | None = None,
        fraction_digits: int | None = None,
    ) -> None:
        """Create a DateTime from component parts.

        Args:
            year, month, day: The calendar date.
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            nanosecond: Fractional second in nanoseconds (0-999999999).
            offset: Optional fixed UTC offset.
            fraction_digits: Fractional digits of the text form (0-9).
                Defaults to the fewest digits that write nanosecond
                exactly.

        Raises:
            InvalidField: If any component is out of range.
        """
        validate_year(year)
        validate_month(month)
        validate_day(year, month, day)
        validate_hour(hour)
        validate_minute(minute)
        validate_second(second)
        validate_nanosecond(nanosecond)
        if fraction_digits is None:
            fraction_digits = fraction_digits_for(nanosecond)
        validate_fraction_digits(nanosecond, fraction_digits)
        if offset is not None and not isinstance(offset, UtcOffset):
            raise InvalidField(
                "offset", offset, f"offset must be a UtcOffset, got {type(offset).__name__}"
            )

        self._year: int = year
        self._month: int = month
        self._day: int = day
        self._hour: int = hour
        self._minute: int = minute
        self._second: int = second
        self._nanosecond: int = nanosecond
        self._offset: UtcOffset | None = offset
        self._fraction_digits: int = fraction_digits

    @classmethod
    def _from_ordinal_nanos(
        cls,
        ordinal: int,
        nanos_of_day: int,
        offset: UtcOffset | None,
        fraction_digits: int,
    ) -> DateTime:
        year, month, day = ordinal_to_ymd(ordinal)
        hour, rem = divmod(nanos_of_day, NANOS_PER_HOUR)
        minute, rem = divmod(rem, NANOS_PER_MINUTE)
        second, nanosecond = divmod(rem, NANOS_PER_SECOND)
        return cls(
            year,
            month,
            day,
            hour,
            minute,
            second,
            nanosecond=nanosecond,
            offset=offset,
            fraction_digits=max(fraction_digits, fraction_digits_for(nanosecond)),
        )

    @classmethod
    def from_iso_format(cls, s: str) -> DateTime:
        """Parse a date-time from its canonical text form.

        Examples:
            >>> DateTime.from_iso_format("2024-01-15T14:30:45.120+05:30")
            DateTime(2024, 1, 15, 14, 30, 45, nanosecond=120000000, offset=UtcOffset(minutes=330))
        """
        from partime.format.text import parse_exact

        return parse_exact(s, cls)

    @classmethod
    def from_datetime(cls, value: _datetime.datetime) -> DateTime:
        """Create a DateTime from a standard library datetime.

        An aware datetime keeps its offset, which must be whole minutes.

        Raises:
            InvalidField: If the offset is not whole minutes or out of range.
        """
        offset = None
        utcoffset = value.utcoffset()
        if utcoffset is not None:
            minutes, remainder = divmod(utcoffset, _datetime.timedelta(minutes=1))
            if remainder:
                raise InvalidField("offset", utcoffset, "offset must be whole minutes")
            offset = UtcOffset(minutes)
        return cls(
            value.year,
            value.month,
            value.day,
            value.hour,
            value.minute,
            value.second,
            nanosecond=value.microsecond * NANOS_PER_MICROSECOND,
            offset=offset,
        )

    # Properties

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
    def hour(self) -> int:
        return self._hour

    @property
    def minute(self) -> int:
        return self._minute

    @property
    def second(self) -> int:
        return self._second

    @property
    def nanosecond(self) -> int:
        return self._nanosecond

    @property
    def millisecond(self) -> int:
        """Return the fractional second truncated to milliseconds."""
        return self._nanosecond // NANOS_PER_MILLISECOND

    @property
    def offset(self) -> UtcOffset | None:
        return self._offset

    @property
    def has_offset(self) -> bool:
        return self._offset is not None

    @property
    def fraction_digits(self) -> int:
        return self._fraction_digits

    @property
    def is_leap_year(self) -> bool:
        return is_leap_year(self._year)

    @property
    def days_in_month(self) -> int:
        return days_in_month(self._year, self._month)

    def to_ordinal(self) -> int:
        """Return the ordinal of the local date, where 0001-01-01 is 1."""
        return ymd_to_ordinal(self._year, self._month, self._day)

    @property
    def nanos_of_day(self) -> int:
        """Return the local time of day in nanoseconds since midnight."""
        return (
            self._hour * NANOS_PER_HOUR
            + self._minute * NANOS_PER_MINUTE
            + self._second * NANOS_PER_SECOND
            + self._nanosecond
        )

    def _local_nanos(self) -> int:
        return self.to_ordinal() * NANOS_PER_DAY + self.nanos_of_day

    def _timeline_nanos(self) -> int:
        # UTC when an offset is asserted, local fields otherwise
        nanos = self._local_nanos()
        if self._offset is not None:
            nanos -= self._offset.minutes * NANOS_PER_MINUTE
        return nanos

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
        nanosecond: int | None = None,
        offset: UtcOffset | None = _KEEP,
    ) -> DateTime:
        """Return a new DateTime with the given fields replaced.

        Pass ``offset=None`` to drop the offset. The local fields are
        kept as they are; no conversion between offsets happens.

        Raises:
            InvalidField: If the resulting value is invalid.
        """
        new_nanosecond = nanosecond if nanosecond is not None else self._nanosecond
        digits = self._fraction_digits
        if new_nanosecond % 10 ** (MAX_FRACTION_DIGITS - digits):
            digits = fraction_digits_for(new_nanosecond)
        return DateTime(
            year if year is not None else self._year,
            month if month is not None else self._month,
            day if day is not None else self._day,
            hour if hour is not None else self._hour,
            minute if minute is not None else self._minute,
            second if second is not None else self._second,
            nanosecond=new_nanosecond,
            offset=self._offset if offset is _KEEP else offset,
            fraction_digits=digits,
        )

    def with_offset(self, offset: UtcOffset | None) -> DateTime:
        """Return the same local fields with a different (or no) offset."""
        return self.replace(offset=offset)

    def to_offset(self, offset: UtcOffset) -> DateTime:
        """Return the same instant expressed at another offset.

        Raises:
            ValueError: If this value asserts no offset.
            OutOfRange: If the shifted date leaves the supported span.
        """
        if self._offset is None:
            raise ValueError("cannot convert a date-time without an offset")
        local = self._timeline_nanos() + offset.minutes * NANOS_PER_MINUTE
        ordinal, nanos_of_day = divmod(local, NANOS_PER_DAY)
        check_result_ordinal(ordinal, "to_offset")
        return DateTime._from_ordinal_nanos(ordinal, nanos_of_day, offset, self._fraction_digits)

    def plus_days(self, days: int) -> DateTime:
        return self.plus(days, TimeUnit.DAY)

    def plus_hours(self, hours: int) -> DateTime:
        return self.plus(hours, TimeUnit.HOUR)

    def to_datetime(self) -> _datetime.datetime:
        """Return the equivalent standard library datetime.

        The fractional second is truncated to microseconds.
        """
        tzinfo = None
        if self._offset is not None:
            tzinfo = _datetime.timezone(_datetime.timedelta(minutes=self._offset.minutes))
        return _datetime.datetime(
            self._year,
            self._month,
            self._day,
            self._hour,
            self._minute,
            self._second,
            self._nanosecond // NANOS_PER_MICROSECOND,
            tzinfo=tzinfo,
        )

    # Hooks

    def _fields(self) -> tuple:
        return (
            self._year,
            self._month,
            self._day,
            self._hour,
            self._minute,
            self._second,
            self._nanosecond,
            self._offset.minutes if self._offset is not None else None,
        )

    def _sort_key(self) -> tuple:
        has_offset = self._offset is not None
        return (
            self._timeline_nanos(),
            has_offset,
            self._offset.minutes if has_offset else 0,
        )

    def _instant_range(self) -> tuple[int, int]:
        nanos = self._timeline_nanos()
        return (nanos, nanos)

    def _narrow(self, target: Precision) -> PartialTemporal:
        if target is Precision.DATE:
            return Date(self._year, self._month, self._day)
        if target is Precision.YEAR_MONTH:
            return YearMonth(self._year, self._month)
        return Year(self._year)

    def _plus(self, amount: int, unit: TimeUnit) -> DateTime:
        if unit.months is not None:
            new_year, new_month = shift_month(self._year, self._month, amount * unit.months)
            check_result_year(new_year, "plus")
            return self.replace(
                year=new_year,
                month=new_month,
                day=clamp_day(new_year, new_month, self._day),
            )

        if unit.days is not None:
            ordinal = self.to_ordinal() + amount * unit.days
            check_result_ordinal(ordinal, "plus")
            year, month, day = ordinal_to_ymd(ordinal)
            return self.replace(year=year, month=month, day=day)

        day_delta, nanos_of_day = divmod(self.nanos_of_day + amount * unit.nanos, NANOS_PER_DAY)
        ordinal = self.to_ordinal() + day_delta
        check_result_ordinal(ordinal, "plus")
        return DateTime._from_ordinal_nanos(
            ordinal, nanos_of_day, self._offset, self._fraction_digits
        )

    def _until(self, end: DateTime, unit: TimeUnit) -> int:
        if (self._offset is None) != (end._offset is None):
            raise ValueError(
                "cannot measure between a date-time with an offset and one without"
            )

        # Bring end onto this value's local time line
        end_local = end._timeline_nanos()
        if self._offset is not None:
            end_local += self._offset.minutes * NANOS_PER_MINUTE

        if unit.is_time_based:
            return truncated_div(end_local - self._local_nanos(), unit.nanos)

        end_ordinal, end_time = divmod(end_local, NANOS_PER_DAY)
        start_ordinal = self.to_ordinal()
        start_time = self.nanos_of_day
        # A partial last day does not count
        if end_ordinal > start_ordinal and end_time < start_time:
            end_ordinal -= 1
        elif end_ordinal < start_ordinal and end_time > start_time:
            end_ordinal += 1

        if unit.days is not None:
            return truncated_div(end_ordinal - start_ordinal, unit.days)
        months = months_until(
            ordinal_to_ymd(start_ordinal + _DAYS_PER_CYCLE),
            ordinal_to_ymd(end_ordinal + _DAYS_PER_CYCLE),
        )
        return truncated_div(months, unit.months)

    def to_iso_format(self) -> str:
        """Return the value as YYYY-MM-DDThh:mm:ss[.f][offset].

        The fraction shows exactly fraction_digits digits.

        Examples:
            >>> DateTime(2024, 1, 15, 14, 30, 45, nanosecond=500_000_000).to_iso_format()
            '2024-01-15T14:30:45.5'
        """
        result = (
            f"{self._year:04d}-{self._month:02d}-{self._day:02d}"
            f"T{self._hour:02d}:{self._minute:02d}:{self._second:02d}"
        )
        if self._fraction_digits:
            result += "." + f"{self._nanosecond:09d}"[: self._fraction_digits]
        if self._offset is not None:
            result += self._offset.to_iso_format()
        return result

    def __repr__(self) -> str:
        extra = ""
        if self._nanosecond:
            extra += f", nanosecond={self._nanosecond}"
        if self._offset is not None:
            extra += f", offset={self._offset!r}"
        return (
            f"DateTime({self._year}, {self._month}, {self._day}, "
            f"{self._hour}, {self._minute}, {self._second}{extra})"
        )


__all__ = ["DateTime", "fraction_digits_for"]
