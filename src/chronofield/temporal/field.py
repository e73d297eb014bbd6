"""Fields of date-time.

``TemporalField`` is the abstract contract for a field such as month-of-year
or minute-of-hour, and ``ChronoField`` is the standard set of ISO fields.
Each field is measured in a base unit within a range unit, for example
day-of-month counts DAYS within MONTHS.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Any

from ..constants import (
    LONG_MAX,
    LONG_MIN,
    MICROS_PER_DAY,
    MILLIS_PER_DAY,
    MINUTES_PER_DAY,
    NANOS_PER_DAY,
    SECONDS_PER_DAY,
    YEAR_MAX,
    YEAR_MIN,
)
from .range import ValueRange
from .unit import ChronoUnit, TemporalUnit

if TYPE_CHECKING:
    from .accessor import Temporal, TemporalAccessor
    from .common import ResolverStyle


class TemporalField(ABC):
    """A field of date-time, such as month-of-year or hour-of-minute.

    Implementations must be immutable and hashable, since fields are used as
    keys in field-value maps during resolution.
    """

    @property
    @abstractmethod
    def base_unit(self) -> TemporalUnit: ...

    @property
    @abstractmethod
    def range_unit(self) -> TemporalUnit: ...

    @property
    @abstractmethod
    def range(self) -> ValueRange:
        """Outer range of valid values, independent of any temporal."""

    @property
    @abstractmethod
    def is_date_based(self) -> bool: ...

    @property
    @abstractmethod
    def is_time_based(self) -> bool: ...

    @abstractmethod
    def is_supported_by(self, temporal: TemporalAccessor) -> bool: ...

    @abstractmethod
    def range_refined_by(self, temporal: TemporalAccessor) -> ValueRange:
        """Range of valid values given the context of temporal."""

    @abstractmethod
    def get_from(self, temporal: TemporalAccessor) -> int: ...

    @abstractmethod
    def adjust_into(self, temporal: Temporal, new_value: int) -> Temporal:
        """Return a copy of temporal with this field set to new_value."""

    def resolve(
        self,
        field_values: dict[TemporalField, int],
        partial_temporal: TemporalAccessor,
        resolver_style: ResolverStyle,
    ) -> TemporalAccessor | None:
        """Combine this field with others in field_values into a date.

        Fields that resolve remove the values they consumed from field_values
        (and may add others). The default leaves the map untouched.
        """
        return None


class ChronoField(Enum):
    """Standard set of ISO fields.

    Each member carries its display name, base unit, range unit and outer
    value range.
    """

    NANO_OF_SECOND = ("NanoOfSecond", ChronoUnit.NANOS, ChronoUnit.SECONDS, ValueRange.of(0, 999_999_999))
    NANO_OF_DAY = ("NanoOfDay", ChronoUnit.NANOS, ChronoUnit.DAYS, ValueRange.of(0, NANOS_PER_DAY - 1))
    MICRO_OF_SECOND = ("MicroOfSecond", ChronoUnit.MICROS, ChronoUnit.SECONDS, ValueRange.of(0, 999_999))
    MICRO_OF_DAY = ("MicroOfDay", ChronoUnit.MICROS, ChronoUnit.DAYS, ValueRange.of(0, MICROS_PER_DAY - 1))
    MILLI_OF_SECOND = ("MilliOfSecond", ChronoUnit.MILLIS, ChronoUnit.SECONDS, ValueRange.of(0, 999))
    MILLI_OF_DAY = ("MilliOfDay", ChronoUnit.MILLIS, ChronoUnit.DAYS, ValueRange.of(0, MILLIS_PER_DAY - 1))
    SECOND_OF_MINUTE = ("SecondOfMinute", ChronoUnit.SECONDS, ChronoUnit.MINUTES, ValueRange.of(0, 59))
    SECOND_OF_DAY = ("SecondOfDay", ChronoUnit.SECONDS, ChronoUnit.DAYS, ValueRange.of(0, SECONDS_PER_DAY - 1))
    MINUTE_OF_HOUR = ("MinuteOfHour", ChronoUnit.MINUTES, ChronoUnit.HOURS, ValueRange.of(0, 59))
    MINUTE_OF_DAY = ("MinuteOfDay", ChronoUnit.MINUTES, ChronoUnit.DAYS, ValueRange.of(0, MINUTES_PER_DAY - 1))
    HOUR_OF_AMPM = ("HourOfAmPm", ChronoUnit.HOURS, ChronoUnit.HALF_DAYS, ValueRange.of(0, 11))
    CLOCK_HOUR_OF_AMPM = ("ClockHourOfAmPm", ChronoUnit.HOURS, ChronoUnit.HALF_DAYS, ValueRange.of(1, 12))
    HOUR_OF_DAY = ("HourOfDay", ChronoUnit.HOURS, ChronoUnit.DAYS, ValueRange.of(0, 23))
    CLOCK_HOUR_OF_DAY = ("ClockHourOfDay", ChronoUnit.HOURS, ChronoUnit.DAYS, ValueRange.of(1, 24))
    AMPM_OF_DAY = ("AmPmOfDay", ChronoUnit.HALF_DAYS, ChronoUnit.DAYS, ValueRange.of(0, 1))
    DAY_OF_WEEK = ("DayOfWeek", ChronoUnit.DAYS, ChronoUnit.WEEKS, ValueRange.of(1, 7))
    ALIGNED_DAY_OF_WEEK_IN_MONTH = (
        "AlignedDayOfWeekInMonth",
        ChronoUnit.DAYS,
        ChronoUnit.WEEKS,
        ValueRange.of(1, 7),
    )
    ALIGNED_DAY_OF_WEEK_IN_YEAR = (
        "AlignedDayOfWeekInYear",
        ChronoUnit.DAYS,
        ChronoUnit.WEEKS,
        ValueRange.of(1, 7),
    )
    DAY_OF_MONTH = ("DayOfMonth", ChronoUnit.DAYS, ChronoUnit.MONTHS, ValueRange.of(1, 28, 31))
    DAY_OF_YEAR = ("DayOfYear", ChronoUnit.DAYS, ChronoUnit.YEARS, ValueRange.of(1, 365, 366))
    EPOCH_DAY = (
        "EpochDay",
        ChronoUnit.DAYS,
        ChronoUnit.FOREVER,
        ValueRange.of(-365_249_999_634, 365_249_999_634),
    )
    ALIGNED_WEEK_OF_MONTH = ("AlignedWeekOfMonth", ChronoUnit.WEEKS, ChronoUnit.MONTHS, ValueRange.of(1, 4, 5))
    ALIGNED_WEEK_OF_YEAR = ("AlignedWeekOfYear", ChronoUnit.WEEKS, ChronoUnit.YEARS, ValueRange.of(1, 53))
    MONTH_OF_YEAR = ("MonthOfYear", ChronoUnit.MONTHS, ChronoUnit.YEARS, ValueRange.of(1, 12))
    PROLEPTIC_MONTH = (
        "ProlepticMonth",
        ChronoUnit.MONTHS,
        ChronoUnit.FOREVER,
        ValueRange.of(YEAR_MIN * 12, YEAR_MAX * 12 + 11),
    )
    YEAR_OF_ERA = ("YearOfEra", ChronoUnit.YEARS, ChronoUnit.ERAS, ValueRange.of(1, YEAR_MAX, YEAR_MAX + 1))
    YEAR = ("Year", ChronoUnit.YEARS, ChronoUnit.FOREVER, ValueRange.of(YEAR_MIN, YEAR_MAX))
    ERA = ("Era", ChronoUnit.ERAS, ChronoUnit.FOREVER, ValueRange.of(0, 1))
    INSTANT_SECONDS = ("InstantSeconds", ChronoUnit.SECONDS, ChronoUnit.FOREVER, ValueRange.of(LONG_MIN, LONG_MAX))
    OFFSET_SECONDS = ("OffsetSeconds", ChronoUnit.SECONDS, ChronoUnit.FOREVER, ValueRange.of(-18 * 3600, 18 * 3600))

    def __init__(self, display_name: str, base_unit: ChronoUnit, range_unit: ChronoUnit, value_range: ValueRange) -> None:
        self.display_name = display_name
        self._base_unit = base_unit
        self._range_unit = range_unit
        self._range = value_range

    @property
    def base_unit(self) -> ChronoUnit:
        return self._base_unit

    @property
    def range_unit(self) -> ChronoUnit:
        return self._range_unit

    @property
    def range(self) -> ValueRange:
        return self._range

    @property
    def is_date_based(self) -> bool:
        """Fields from DAY_OF_WEEK to ERA are date-based."""
        return _FIELD_ORDINALS[ChronoField.DAY_OF_WEEK] <= _FIELD_ORDINALS[self] <= _FIELD_ORDINALS[ChronoField.ERA]

    @property
    def is_time_based(self) -> bool:
        """Fields before DAY_OF_WEEK are time-based."""
        return _FIELD_ORDINALS[self] < _FIELD_ORDINALS[ChronoField.DAY_OF_WEEK]

    def check_valid_value(self, value: int) -> int:
        """Validate value against the outer range of this field.

        Raises:
            DateTimeError: If the value is out of range
        """
        return self._range.check_valid_value(value, self)

    def check_valid_int_value(self, value: int) -> int:
        """Validate value against the outer range, requiring it to fit 32 bits.

        Raises:
            DateTimeError: If the value is out of range or the field is not int-valued
        """
        return self._range.check_valid_int_value(value, self)

    def is_supported_by(self, temporal: TemporalAccessor) -> bool:
        return temporal.is_supported(self)

    def range_refined_by(self, temporal: TemporalAccessor) -> ValueRange:
        return temporal.range(self)

    def get_from(self, temporal: TemporalAccessor) -> int:
        return temporal.get_long(self)

    def adjust_into(self, temporal: Temporal, new_value: int) -> Temporal:
        return temporal.with_field(self, new_value)

    def resolve(
        self,
        field_values: dict[Any, int],
        partial_temporal: TemporalAccessor,
        resolver_style: ResolverStyle,
    ) -> TemporalAccessor | None:
        return None

    def __str__(self) -> str:
        return self.display_name


TemporalField.register(ChronoField)

_FIELD_ORDINALS: dict[ChronoField, int] = {field: index for index, field in enumerate(ChronoField)}
