"""Time-of-day without date or zone, to nanosecond precision.

Arithmetic wraps around midnight, so adding 25 hours to 10:00 gives 11:00.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from ..constants import (
    HOURS_PER_DAY,
    MICROS_PER_DAY,
    MILLIS_PER_DAY,
    MINUTES_PER_DAY,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MILLI,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from ..exact import trunc_div
from ..exceptions import DateTimeError, UnsupportedTemporalTypeError
from ..temporal import query as queries
from ..temporal.accessor import Temporal, TemporalAccessor
from ..temporal.field import ChronoField, TemporalField
from ..temporal.unit import ChronoUnit, TemporalUnit

if TYPE_CHECKING:
    from ..temporal.accessor import TemporalAmount


@dataclass(frozen=True, order=True)
class LocalTime(Temporal):
    """A time such as 10:15:30.

    Attributes:
        hour: Hour-of-day, 0 to 23
        minute: Minute-of-hour, 0 to 59
        second: Second-of-minute, 0 to 59
        nano: Nano-of-second, 0 to 999,999,999
    """

    hour: int
    minute: int = 0
    second: int = 0
    nano: int = 0

    supported_units: ClassVar[frozenset[ChronoUnit]] = frozenset(
        unit for unit in ChronoUnit if unit.is_time_based
    )

    MIDNIGHT: ClassVar[LocalTime]
    NOON: ClassVar[LocalTime]
    MAX: ClassVar[LocalTime]

    def __post_init__(self) -> None:
        ChronoField.HOUR_OF_DAY.check_valid_value(self.hour)
        ChronoField.MINUTE_OF_HOUR.check_valid_value(self.minute)
        ChronoField.SECOND_OF_MINUTE.check_valid_value(self.second)
        ChronoField.NANO_OF_SECOND.check_valid_value(self.nano)

    @classmethod
    def of(cls, hour: int, minute: int = 0, second: int = 0, nano: int = 0) -> LocalTime:
        return cls(hour, minute, second, nano)

    @classmethod
    def of_second_of_day(cls, second_of_day: int, nano_of_second: int = 0) -> LocalTime:
        ChronoField.SECOND_OF_DAY.check_valid_value(second_of_day)
        hours, remainder = divmod(second_of_day, SECONDS_PER_HOUR)
        minutes, seconds = divmod(remainder, SECONDS_PER_MINUTE)
        return cls(hours, minutes, seconds, nano_of_second)

    @classmethod
    def of_nano_of_day(cls, nano_of_day: int) -> LocalTime:
        ChronoField.NANO_OF_DAY.check_valid_value(nano_of_day)
        seconds, nanos = divmod(nano_of_day, NANOS_PER_SECOND)
        return cls.of_second_of_day(seconds, nanos)

    @classmethod
    def from_temporal(cls, temporal: TemporalAccessor) -> LocalTime:
        """Obtain a time from any temporal that can answer the local-time query.

        Raises:
            DateTimeError: If the temporal has no time
        """
        time = temporal.query(queries.local_time)
        if time is None:
            raise DateTimeError(f"Unable to obtain LocalTime from TemporalAccessor: {temporal!r}")
        return time

    def to_second_of_day(self) -> int:
        return self.hour * SECONDS_PER_HOUR + self.minute * SECONDS_PER_MINUTE + self.second

    def to_nano_of_day(self) -> int:
        return self.to_second_of_day() * NANOS_PER_SECOND + self.nano

    # =========================================================================
    # Field access
    # =========================================================================

    def is_supported(self, field: TemporalField | TemporalUnit | None) -> bool:
        if isinstance(field, ChronoField):
            return field.is_time_based
        if isinstance(field, ChronoUnit):
            return field in self.supported_units
        return field is not None and field.is_supported_by(self)

    def get_long(self, field: TemporalField) -> int:
        if isinstance(field, ChronoField):
            getter = _FIELD_GETTERS.get(field)
            if getter is None:
                raise UnsupportedTemporalTypeError(f"Unsupported field: {field}")
            return getter(self)
        return field.get_from(self)

    def query(self, query: Callable[[TemporalAccessor], Any]) -> Any:
        if query is queries.local_time:
            return self
        if query is queries.precision:
            return ChronoUnit.NANOS
        return super().query(query)

    # =========================================================================
    # Adjustment
    # =========================================================================

    def with_field(self, field: TemporalField, new_value: int) -> LocalTime:
        if not isinstance(field, ChronoField):
            return field.adjust_into(self, new_value)
        field.check_valid_value(new_value)
        setter = _FIELD_SETTERS.get(field)
        if setter is None:
            raise UnsupportedTemporalTypeError(f"Unsupported field: {field}")
        return setter(self, new_value)

    def with_hour(self, hour: int) -> LocalTime:
        return LocalTime(hour, self.minute, self.second, self.nano)

    def with_minute(self, minute: int) -> LocalTime:
        return LocalTime(self.hour, minute, self.second, self.nano)

    def with_second(self, second: int) -> LocalTime:
        return LocalTime(self.hour, self.minute, second, self.nano)

    def with_nano(self, nano: int) -> LocalTime:
        return LocalTime(self.hour, self.minute, self.second, nano)

    def adjust_into(self, temporal: Temporal) -> Temporal:
        return temporal.with_field(ChronoField.NANO_OF_DAY, self.to_nano_of_day())

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def plus(self, amount: TemporalAmount | int, unit: TemporalUnit | None = None) -> LocalTime:
        if unit is None:
            return amount.add_to(self)
        if not isinstance(unit, ChronoUnit):
            return unit.add_to(self, amount)
        if unit is ChronoUnit.NANOS:
            return self.plus_nanos(amount)
        if unit is ChronoUnit.MICROS:
            return self.plus_nanos((amount % MICROS_PER_DAY) * 1_000)
        if unit is ChronoUnit.MILLIS:
            return self.plus_nanos((amount % MILLIS_PER_DAY) * NANOS_PER_MILLI)
        if unit is ChronoUnit.SECONDS:
            return self.plus_seconds(amount)
        if unit is ChronoUnit.MINUTES:
            return self.plus_minutes(amount)
        if unit is ChronoUnit.HOURS:
            return self.plus_hours(amount)
        if unit is ChronoUnit.HALF_DAYS:
            return self.plus_hours((amount % 2) * 12)
        raise UnsupportedTemporalTypeError(f"Unsupported unit: {unit}")

    def plus_hours(self, hours: int) -> LocalTime:
        return self.with_hour((self.hour + hours) % HOURS_PER_DAY)

    def plus_minutes(self, minutes: int) -> LocalTime:
        minute_of_day = (self.hour * 60 + self.minute + minutes) % MINUTES_PER_DAY
        return LocalTime(minute_of_day // 60, minute_of_day % 60, self.second, self.nano)

    def plus_seconds(self, seconds: int) -> LocalTime:
        second_of_day = (self.to_second_of_day() + seconds) % SECONDS_PER_DAY
        return LocalTime.of_second_of_day(second_of_day, self.nano)

    def plus_nanos(self, nanos: int) -> LocalTime:
        return LocalTime.of_nano_of_day((self.to_nano_of_day() + nanos) % NANOS_PER_DAY)

    def until(self, end: TemporalAccessor, unit: TemporalUnit) -> int:
        end_time = LocalTime.from_temporal(end)
        if not isinstance(unit, ChronoUnit):
            return unit.between(self, end_time)
        divisor = _UNIT_NANOS.get(unit)
        if divisor is None:
            raise UnsupportedTemporalTypeError(f"Unsupported unit: {unit}")
        return trunc_div(end_time.to_nano_of_day() - self.to_nano_of_day(), divisor)

    def __str__(self) -> str:
        text = f"{self.hour:02d}:{self.minute:02d}"
        if self.second > 0 or self.nano > 0:
            text += f":{self.second:02d}"
            if self.nano > 0:
                if self.nano % NANOS_PER_MILLI == 0:
                    text += f".{self.nano // NANOS_PER_MILLI:03d}"
                elif self.nano % 1_000 == 0:
                    text += f".{self.nano // 1_000:06d}"
                else:
                    text += f".{self.nano:09d}"
        return text


def _with_ampm_hour(time: LocalTime, value: int) -> LocalTime:
    return time.plus_hours(value - time.hour % 12)


_FIELD_GETTERS: dict[ChronoField, Callable[[LocalTime], int]] = {
    ChronoField.NANO_OF_SECOND: lambda t: t.nano,
    ChronoField.NANO_OF_DAY: lambda t: t.to_nano_of_day(),
    ChronoField.MICRO_OF_SECOND: lambda t: t.nano // 1_000,
    ChronoField.MICRO_OF_DAY: lambda t: t.to_nano_of_day() // 1_000,
    ChronoField.MILLI_OF_SECOND: lambda t: t.nano // NANOS_PER_MILLI,
    ChronoField.MILLI_OF_DAY: lambda t: t.to_nano_of_day() // NANOS_PER_MILLI,
    ChronoField.SECOND_OF_MINUTE: lambda t: t.second,
    ChronoField.SECOND_OF_DAY: lambda t: t.to_second_of_day(),
    ChronoField.MINUTE_OF_HOUR: lambda t: t.minute,
    ChronoField.MINUTE_OF_DAY: lambda t: t.hour * 60 + t.minute,
    ChronoField.HOUR_OF_AMPM: lambda t: t.hour % 12,
    ChronoField.CLOCK_HOUR_OF_AMPM: lambda t: t.hour % 12 or 12,
    ChronoField.HOUR_OF_DAY: lambda t: t.hour,
    ChronoField.CLOCK_HOUR_OF_DAY: lambda t: t.hour or 24,
    ChronoField.AMPM_OF_DAY: lambda t: t.hour // 12,
}

_FIELD_SETTERS: dict[ChronoField, Callable[[LocalTime, int], LocalTime]] = {
    ChronoField.NANO_OF_SECOND: lambda t, v: t.with_nano(v),
    ChronoField.NANO_OF_DAY: lambda t, v: LocalTime.of_nano_of_day(v),
    ChronoField.MICRO_OF_SECOND: lambda t, v: t.with_nano(v * 1_000),
    ChronoField.MICRO_OF_DAY: lambda t, v: LocalTime.of_nano_of_day(v * 1_000),
    ChronoField.MILLI_OF_SECOND: lambda t, v: t.with_nano(v * NANOS_PER_MILLI),
    ChronoField.MILLI_OF_DAY: lambda t, v: LocalTime.of_nano_of_day(v * NANOS_PER_MILLI),
    ChronoField.SECOND_OF_MINUTE: lambda t, v: t.with_second(v),
    ChronoField.SECOND_OF_DAY: lambda t, v: t.plus_seconds(v - t.to_second_of_day()),
    ChronoField.MINUTE_OF_HOUR: lambda t, v: t.with_minute(v),
    ChronoField.MINUTE_OF_DAY: lambda t, v: t.plus_minutes(v - (t.hour * 60 + t.minute)),
    ChronoField.HOUR_OF_AMPM: _with_ampm_hour,
    ChronoField.CLOCK_HOUR_OF_AMPM: lambda t, v: _with_ampm_hour(t, 0 if v == 12 else v),
    ChronoField.HOUR_OF_DAY: lambda t, v: t.with_hour(v),
    ChronoField.CLOCK_HOUR_OF_DAY: lambda t, v: t.with_hour(0 if v == 24 else v),
    ChronoField.AMPM_OF_DAY: lambda t, v: t.plus_hours((v - t.hour // 12) * 12),
}

_UNIT_NANOS: dict[ChronoUnit, int] = {
    ChronoUnit.NANOS: 1,
    ChronoUnit.MICROS: 1_000,
    ChronoUnit.MILLIS: NANOS_PER_MILLI,
    ChronoUnit.SECONDS: NANOS_PER_SECOND,
    ChronoUnit.MINUTES: NANOS_PER_MINUTE,
    ChronoUnit.HOURS: NANOS_PER_HOUR,
    ChronoUnit.HALF_DAYS: NANOS_PER_HOUR * 12,
}

LocalTime.MIDNIGHT = LocalTime(0)
LocalTime.NOON = LocalTime(12)
LocalTime.MAX = LocalTime(23, 59, 59, 999_999_999)
