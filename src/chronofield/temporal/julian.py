"""Julian day-number fields.

Each field is a continuous count of days from a fixed origin, differing from
EPOCH_DAY (days since 1970-01-01) only by a constant offset:

| Field               | Origin                       | Offset    |
|---------------------|------------------------------|-----------|
| JULIAN_DAY          | -4713-11-24 (Gregorian) noon | 2,440,588 |
| MODIFIED_JULIAN_DAY | 1858-11-17 midnight          | 40,587    |
| RATA_DIE            | 0001-01-01                   | 719,163   |

These fields are day counts only; they carry no time-of-day fraction, so
JULIAN_DAY changes at midnight rather than noon.
"""

from __future__ import annotations

from typing import Any

from ..calendar.chronology import chronology_of
from ..exact import subtract_exact
from ..exceptions import DateTimeError, UnsupportedTemporalTypeError
from .accessor import Temporal, TemporalAccessor
from .common import ResolverStyle
from .field import ChronoField, TemporalField
from .range import ValueRange
from .unit import ChronoUnit, TemporalUnit

# Epoch days of LocalDate.MIN and LocalDate.MAX
_MIN_EPOCH_DAY = -365_243_219_162
_MAX_EPOCH_DAY = 365_241_780_471


class _JulianField(TemporalField):
    """A day count offset from EPOCH_DAY."""

    def __init__(self, name: str, offset: int) -> None:
        self._name = name
        self._offset = offset
        self._range = ValueRange.of(_MIN_EPOCH_DAY + offset, _MAX_EPOCH_DAY + offset)

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def base_unit(self) -> TemporalUnit:
        return ChronoUnit.DAYS

    @property
    def range_unit(self) -> TemporalUnit:
        return ChronoUnit.FOREVER

    @property
    def range(self) -> ValueRange:
        return self._range

    @property
    def is_date_based(self) -> bool:
        return True

    @property
    def is_time_based(self) -> bool:
        return False

    def is_supported_by(self, temporal: TemporalAccessor) -> bool:
        return temporal.is_supported(ChronoField.EPOCH_DAY)

    def range_refined_by(self, temporal: TemporalAccessor) -> ValueRange:
        if not self.is_supported_by(temporal):
            raise UnsupportedTemporalTypeError(f"Unsupported field: {self}")
        return self._range

    def get_from(self, temporal: TemporalAccessor) -> int:
        return temporal.get_long(ChronoField.EPOCH_DAY) + self._offset

    def adjust_into(self, temporal: Temporal, new_value: int) -> Temporal:
        if not self._range.is_valid_value(new_value):
            raise DateTimeError(f"Invalid value: {self._name} {new_value}")
        return temporal.with_field(ChronoField.EPOCH_DAY, subtract_exact(new_value, self._offset))

    def resolve(
        self,
        field_values: dict[Any, int],
        partial_temporal: TemporalAccessor,
        resolver_style: ResolverStyle,
    ) -> TemporalAccessor | None:
        """Replace this field with the date it identifies."""
        if self not in field_values:
            return None
        value = field_values.pop(self)
        return chronology_of(partial_temporal).date_epoch_day(subtract_exact(value, self._offset))

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"JulianFields.{self._name}"


JULIAN_DAY = _JulianField("JulianDay", 2_440_588)
MODIFIED_JULIAN_DAY = _JulianField("ModifiedJulianDay", 40_587)
RATA_DIE = _JulianField("RataDie", 719_163)

FIELDS: tuple[TemporalField, ...] = (JULIAN_DAY, MODIFIED_JULIAN_DAY, RATA_DIE)
