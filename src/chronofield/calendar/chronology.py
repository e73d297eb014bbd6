"""The ISO-8601 calendar system.

``IsoChronology`` is the only chronology implemented. Fields that need a
calendar system to build dates (IsoFields, WeekFields, JulianFields) obtain
it from the temporal being processed through ``chronology_of``.
"""

from __future__ import annotations

from typing import Any

from ..exact import subtract_exact
from ..temporal import query as queries
from ..temporal.accessor import TemporalAccessor
from ..temporal.common import ResolverStyle
from ..temporal.field import ChronoField
from .local_date import LocalDate, is_leap_year, month_length


class IsoChronology:
    """Proleptic Gregorian calendar, the de facto world calendar."""

    id = "ISO"

    def is_leap_year(self, year: int) -> bool:
        return is_leap_year(year)

    def date(self, year: int, month: int, day: int) -> LocalDate:
        return LocalDate.of(year, month, day)

    def date_year_day(self, year: int, day_of_year: int) -> LocalDate:
        return LocalDate.of_year_day(year, day_of_year)

    def date_epoch_day(self, epoch_day: int) -> LocalDate:
        return LocalDate.of_epoch_day(epoch_day)

    def date_from(self, temporal: TemporalAccessor) -> LocalDate:
        return LocalDate.from_temporal(temporal)

    def resolve_date(self, field_values: dict[Any, int], resolver_style: ResolverStyle) -> LocalDate | None:
        """Build a date from the ChronoField values left in field_values.

        Handles EPOCH_DAY, YEAR with MONTH_OF_YEAR and DAY_OF_MONTH, and YEAR
        with DAY_OF_YEAR. Consumed values are removed from the map. Returns
        ``None`` if no combination is complete.

        Raises:
            DateTimeError: If the values do not form a valid date for the style
        """
        if ChronoField.EPOCH_DAY in field_values:
            return LocalDate.of_epoch_day(field_values.pop(ChronoField.EPOCH_DAY))
        if ChronoField.YEAR not in field_values:
            return None
        if ChronoField.MONTH_OF_YEAR in field_values and ChronoField.DAY_OF_MONTH in field_values:
            year = ChronoField.YEAR.check_valid_int_value(field_values.pop(ChronoField.YEAR))
            month_value = field_values.pop(ChronoField.MONTH_OF_YEAR)
            day_value = field_values.pop(ChronoField.DAY_OF_MONTH)
            if resolver_style is ResolverStyle.LENIENT:
                months = subtract_exact(month_value, 1)
                days = subtract_exact(day_value, 1)
                return LocalDate.of(year, 1, 1).plus_months(months).plus_days(days)
            month = ChronoField.MONTH_OF_YEAR.check_valid_int_value(month_value)
            day = ChronoField.DAY_OF_MONTH.check_valid_int_value(day_value)
            if resolver_style is ResolverStyle.SMART:
                day = min(day, month_length(month, is_leap_year(year)))
            return LocalDate.of(year, month, day)
        if ChronoField.DAY_OF_YEAR in field_values:
            year = ChronoField.YEAR.check_valid_int_value(field_values.pop(ChronoField.YEAR))
            day_of_year = field_values.pop(ChronoField.DAY_OF_YEAR)
            if resolver_style is ResolverStyle.LENIENT:
                return LocalDate.of_year_day(year, 1).plus_days(subtract_exact(day_of_year, 1))
            return LocalDate.of_year_day(year, ChronoField.DAY_OF_YEAR.check_valid_int_value(day_of_year))
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def __str__(self) -> str:
        return self.id


ISO = IsoChronology()


def chronology_of(temporal: TemporalAccessor) -> Any:
    """Chronology of temporal, ISO when the temporal does not name one."""
    found = temporal.query(queries.chronology)
    return ISO if found is None else found
