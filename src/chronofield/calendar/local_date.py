"""ISO-8601 calendar date without time or zone.

Dates cover the proleptic Gregorian calendar from year -999,999,999 to
999,999,999. Conversion to and from the epoch-day count (days since
1970-01-01) uses 400 year cycles so it is exact across the whole range.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from ..constants import DAYS_0000_TO_1970, DAYS_PER_CYCLE, YEAR_MAX, YEAR_MIN
from ..exact import add_exact, floor_div, floor_mod, multiply_exact, subtract_exact, trunc_div
from ..exceptions import DateTimeError, UnsupportedTemporalTypeError
from ..period import Period
from ..temporal import query as queries
from ..temporal.accessor import Temporal, TemporalAccessor
from ..temporal.field import ChronoField, TemporalField
from ..temporal.range import ValueRange
from ..temporal.unit import ChronoUnit, TemporalUnit
from .day_of_week import DayOfWeek

if TYPE_CHECKING:
    from ..temporal.accessor import TemporalAmount

# =============================================================================
# Month tables
# =============================================================================

_MONTH_NAMES = (
    "JANUARY",
    "FEBRUARY",
    "MARCH",
    "APRIL",
    "MAY",
    "JUNE",
    "JULY",
    "AUGUST",
    "SEPTEMBER",
    "OCTOBER",
    "NOVEMBER",
    "DECEMBER",
)

# Day-of-year of the first day of each month in a standard year
_FIRST_DAY_OF_MONTH = (1, 32, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335)


def is_leap_year(year: int) -> bool:
    """Proleptic Gregorian leap-year rule."""
    return (year & 3) == 0 and (year % 100 != 0 or year % 400 == 0)


def month_length(month: int, leap_year: bool) -> int:
    if month == 2:
        return 29 if leap_year else 28
    if month in (4, 6, 9, 11):
        return 30
    return 31


def first_day_of_year(month: int, leap_year: bool) -> int:
    """Day-of-year of the first day of month."""
    leap = 1 if leap_year and month > 2 else 0
    return _FIRST_DAY_OF_MONTH[month - 1] + leap


@dataclass(frozen=True, order=True)
class LocalDate(Temporal):
    """A date in the ISO-8601 calendar, such as 2007-12-03.

    Attributes:
        year: Proleptic year, -999,999,999 to 999,999,999
        month: Month-of-year, 1 to 12
        day: Day-of-month, 1 to 31
    """

    year: int
    month: int
    day: int

    supported_units: ClassVar[frozenset[ChronoUnit]] = frozenset(
        unit for unit in ChronoUnit if unit.is_date_based
    )

    MIN: ClassVar[LocalDate]
    MAX: ClassVar[LocalDate]

    def __post_init__(self) -> None:
        ChronoField.YEAR.check_valid_value(self.year)
        ChronoField.MONTH_OF_YEAR.check_valid_value(self.month)
        ChronoField.DAY_OF_MONTH.check_valid_value(self.day)
        if self.day > 28 and self.day > month_length(self.month, is_leap_year(self.year)):
            if self.day == 29:
                raise DateTimeError(f"Invalid date 'February 29' as '{self.year}' is not a leap year")
            raise DateTimeError(f"Invalid date '{_MONTH_NAMES[self.month - 1]} {self.day}'")

    # =========================================================================
    # Factories
    # =========================================================================

    @classmethod
    def of(cls, year: int, month: int, day: int) -> LocalDate:
        """Create a date from year, month and day.

        Raises:
            DateTimeError: If any value is out of range or the day is invalid for the month
        """
        return cls(year, month, day)

    @classmethod
    def of_year_day(cls, year: int, day_of_year: int) -> LocalDate:
        ChronoField.YEAR.check_valid_value(year)
        ChronoField.DAY_OF_YEAR.check_valid_value(day_of_year)
        leap = is_leap_year(year)
        if day_of_year == 366 and not leap:
            raise DateTimeError(f"Invalid date 'DayOfYear 366' as '{year}' is not a leap year")
        month = (day_of_year - 1) // 31 + 1
        month_end = first_day_of_year(month, leap) + month_length(month, leap) - 1
        if day_of_year > month_end:
            month += 1
        return cls(year, month, day_of_year - first_day_of_year(month, leap) + 1)

    @classmethod
    def of_epoch_day(cls, epoch_day: int) -> LocalDate:
        """Create a date from the count of days since 1970-01-01.

        Raises:
            DateTimeError: If the epoch day is outside the supported date range
        """
        ChronoField.EPOCH_DAY.check_valid_value(epoch_day)
        zero_day = epoch_day + DAYS_0000_TO_1970
        # Shift to a March-based year so the leap day is the last day
        zero_day -= 60
        adjust = 0
        if zero_day < 0:
            adjust_cycles = trunc_div(zero_day + 1, DAYS_PER_CYCLE) - 1
            adjust = adjust_cycles * 400
            zero_day += -adjust_cycles * DAYS_PER_CYCLE
        year_est = (400 * zero_day + 591) // DAYS_PER_CYCLE
        doy_est = zero_day - (365 * year_est + year_est // 4 - year_est // 100 + year_est // 400)
        if doy_est < 0:
            year_est -= 1
            doy_est = zero_day - (365 * year_est + year_est // 4 - year_est // 100 + year_est // 400)
        year_est += adjust
        march_month0 = (doy_est * 5 + 2) // 153
        month = (march_month0 + 2) % 12 + 1
        day = doy_est - (march_month0 * 306 + 5) // 10 + 1
        year_est += march_month0 // 10
        return cls(year_est, month, day)

    @classmethod
    def from_temporal(cls, temporal: TemporalAccessor) -> LocalDate:
        """Obtain a date from any temporal that can answer the local-date query.

        Raises:
            DateTimeError: If the temporal has no date
        """
        date = temporal.query(queries.local_date)
        if date is None:
            raise DateTimeError(f"Unable to obtain LocalDate from TemporalAccessor: {temporal!r}")
        return date

    # =========================================================================
    # Derived values
    # =========================================================================

    @property
    def is_leap_year(self) -> bool:
        return is_leap_year(self.year)

    @property
    def length_of_month(self) -> int:
        return month_length(self.month, self.is_leap_year)

    @property
    def length_of_year(self) -> int:
        return 366 if self.is_leap_year else 365

    @property
    def day_of_year(self) -> int:
        return first_day_of_year(self.month, self.is_leap_year) + self.day - 1

    @property
    def day_of_week(self) -> DayOfWeek:
        return DayOfWeek.of(floor_mod(self.to_epoch_day() + 3, 7) + 1)

    @property
    def proleptic_month(self) -> int:
        return self.year * 12 + self.month - 1

    def to_epoch_day(self) -> int:
        y = self.year
        total = 365 * y
        if y >= 0:
            total += (y + 3) // 4 - (y + 99) // 100 + (y + 399) // 400
        else:
            total -= (-y) // 4 - (-y) // 100 + (-y) // 400
        total += (367 * self.month - 362) // 12
        total += self.day - 1
        if self.month > 2:
            total -= 1 if self.is_leap_year else 2
        return total - DAYS_0000_TO_1970

    # =========================================================================
    # Field access
    # =========================================================================

    def is_supported(self, field: TemporalField | TemporalUnit | None) -> bool:
        if isinstance(field, ChronoField):
            return field.is_date_based
        if isinstance(field, ChronoUnit):
            return field in self.supported_units
        return field is not None and field.is_supported_by(self)

    def range(self, field: TemporalField) -> ValueRange:
        if isinstance(field, ChronoField):
            if not field.is_date_based:
                raise UnsupportedTemporalTypeError(f"Unsupported field: {field}")
            if field is ChronoField.DAY_OF_MONTH:
                return ValueRange.of(1, self.length_of_month)
            if field is ChronoField.DAY_OF_YEAR:
                return ValueRange.of(1, self.length_of_year)
            if field is ChronoField.ALIGNED_WEEK_OF_MONTH:
                return ValueRange.of(1, 4 if self.month == 2 and not self.is_leap_year else 5)
            if field is ChronoField.YEAR_OF_ERA:
                return ValueRange.of(1, YEAR_MAX + 1 if self.year <= 0 else YEAR_MAX)
            return field.range
        return field.range_refined_by(self)

    def get_long(self, field: TemporalField) -> int:
        if isinstance(field, ChronoField):
            getter = _FIELD_GETTERS.get(field)
            if getter is None:
                raise UnsupportedTemporalTypeError(f"Unsupported field: {field}")
            return getter(self)
        return field.get_from(self)

    def query(self, query: Callable[[TemporalAccessor], Any]) -> Any:
        if query is queries.local_date:
            return self
        if query is queries.chronology:
            from .chronology import ISO

            return ISO
        if query is queries.precision:
            return ChronoUnit.DAYS
        return super().query(query)

    # =========================================================================
    # Adjustment
    # =========================================================================

    def with_field(self, field: TemporalField, new_value: int) -> LocalDate:
        if not isinstance(field, ChronoField):
            return field.adjust_into(self, new_value)
        field.check_valid_value(new_value)
        if field is ChronoField.DAY_OF_WEEK:
            return self.plus_days(new_value - self.day_of_week.value)
        if field in (ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH, ChronoField.ALIGNED_DAY_OF_WEEK_IN_YEAR):
            return self.plus_days(new_value - self.get_long(field))
        if field is ChronoField.DAY_OF_MONTH:
            return self.with_day_of_month(new_value)
        if field is ChronoField.DAY_OF_YEAR:
            return self.with_day_of_year(new_value)
        if field is ChronoField.EPOCH_DAY:
            return LocalDate.of_epoch_day(new_value)
        if field in (ChronoField.ALIGNED_WEEK_OF_MONTH, ChronoField.ALIGNED_WEEK_OF_YEAR):
            return self.plus_weeks(new_value - self.get_long(field))
        if field is ChronoField.MONTH_OF_YEAR:
            return self.with_month(new_value)
        if field is ChronoField.PROLEPTIC_MONTH:
            return self.plus_months(new_value - self.proleptic_month)
        if field is ChronoField.YEAR_OF_ERA:
            return self.with_year(new_value if self.year >= 1 else 1 - new_value)
        if field is ChronoField.YEAR:
            return self.with_year(new_value)
        if field is ChronoField.ERA:
            return self if self.get_long(ChronoField.ERA) == new_value else self.with_year(1 - self.year)
        raise UnsupportedTemporalTypeError(f"Unsupported field: {field}")

    def with_year(self, year: int) -> LocalDate:
        if self.year == year:
            return self
        ChronoField.YEAR.check_valid_value(year)
        return _resolve_previous_valid(year, self.month, self.day)

    def with_month(self, month: int) -> LocalDate:
        if self.month == month:
            return self
        ChronoField.MONTH_OF_YEAR.check_valid_value(month)
        return _resolve_previous_valid(self.year, month, self.day)

    def with_day_of_month(self, day: int) -> LocalDate:
        if self.day == day:
            return self
        return LocalDate.of(self.year, self.month, day)

    def with_day_of_year(self, day_of_year: int) -> LocalDate:
        if self.day_of_year == day_of_year:
            return self
        return LocalDate.of_year_day(self.year, day_of_year)

    def adjust_into(self, temporal: Temporal) -> Temporal:
        """Use this date as an adjuster, replacing the date of temporal."""
        return temporal.with_field(ChronoField.EPOCH_DAY, self.to_epoch_day())

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def plus(self, amount: TemporalAmount | int, unit: TemporalUnit | None = None) -> LocalDate:
        if unit is None:
            return amount.add_to(self)
        if not isinstance(unit, ChronoUnit):
            return unit.add_to(self, amount)
        if unit is ChronoUnit.DAYS:
            return self.plus_days(amount)
        if unit is ChronoUnit.WEEKS:
            return self.plus_weeks(amount)
        if unit is ChronoUnit.MONTHS:
            return self.plus_months(amount)
        if unit is ChronoUnit.YEARS:
            return self.plus_years(amount)
        if unit is ChronoUnit.DECADES:
            return self.plus_years(multiply_exact(amount, 10))
        if unit is ChronoUnit.CENTURIES:
            return self.plus_years(multiply_exact(amount, 100))
        if unit is ChronoUnit.MILLENNIA:
            return self.plus_years(multiply_exact(amount, 1000))
        if unit is ChronoUnit.ERAS:
            return self.with_field(ChronoField.ERA, add_exact(self.get_long(ChronoField.ERA), amount))
        raise UnsupportedTemporalTypeError(f"Unsupported unit: {unit}")

    def plus_years(self, years: int) -> LocalDate:
        if years == 0:
            return self
        new_year = ChronoField.YEAR.check_valid_int_value(self.year + years)
        return _resolve_previous_valid(new_year, self.month, self.day)

    def plus_months(self, months: int) -> LocalDate:
        if months == 0:
            return self
        calc_months = self.proleptic_month + months
        new_year = ChronoField.YEAR.check_valid_int_value(floor_div(calc_months, 12))
        return _resolve_previous_valid(new_year, floor_mod(calc_months, 12) + 1, self.day)

    def plus_weeks(self, weeks: int) -> LocalDate:
        return self.plus_days(multiply_exact(weeks, 7))

    def plus_days(self, days: int) -> LocalDate:
        if days == 0:
            return self
        return LocalDate.of_epoch_day(add_exact(self.to_epoch_day(), days))

    def minus_years(self, years: int) -> LocalDate:
        return self.plus_years(-years)

    def minus_months(self, months: int) -> LocalDate:
        return self.plus_months(-months)

    def minus_weeks(self, weeks: int) -> LocalDate:
        return self.plus_weeks(-weeks)

    def minus_days(self, days: int) -> LocalDate:
        return self.plus_days(-days)

    def until(self, end: TemporalAccessor, unit: TemporalUnit | None = None) -> Any:
        """Amount of time until end.

        Without a unit the result is a ``Period`` of years, months and days.
        With a unit the result is the whole number of that unit, truncated
        toward zero.
        """
        end_date = LocalDate.from_temporal(end)
        if unit is None:
            return self._period_until(end_date)
        if not isinstance(unit, ChronoUnit):
            return unit.between(self, end_date)
        if unit is ChronoUnit.DAYS:
            return end_date.to_epoch_day() - self.to_epoch_day()
        if unit is ChronoUnit.WEEKS:
            return trunc_div(end_date.to_epoch_day() - self.to_epoch_day(), 7)
        if unit is ChronoUnit.MONTHS:
            return self._months_until(end_date)
        if unit is ChronoUnit.YEARS:
            return trunc_div(self._months_until(end_date), 12)
        if unit is ChronoUnit.DECADES:
            return trunc_div(self._months_until(end_date), 120)
        if unit is ChronoUnit.CENTURIES:
            return trunc_div(self._months_until(end_date), 1200)
        if unit is ChronoUnit.MILLENNIA:
            return trunc_div(self._months_until(end_date), 12000)
        if unit is ChronoUnit.ERAS:
            return end_date.get_long(ChronoField.ERA) - self.get_long(ChronoField.ERA)
        raise UnsupportedTemporalTypeError(f"Unsupported unit: {unit}")

    def _months_until(self, end: LocalDate) -> int:
        packed1 = self.proleptic_month * 32 + self.day
        packed2 = end.proleptic_month * 32 + end.day
        return trunc_div(packed2 - packed1, 32)

    def _period_until(self, end: LocalDate) -> Period:
        total_months = end.proleptic_month - self.proleptic_month
        days = end.day - self.day
        if total_months > 0 and days < 0:
            total_months -= 1
            days = end.to_epoch_day() - self.plus_months(total_months).to_epoch_day()
        elif total_months < 0 and days > 0:
            total_months += 1
            days -= end.length_of_month
        years = trunc_div(total_months, 12)
        months = subtract_exact(total_months, years * 12)
        return Period.of(years, months, days)

    def __str__(self) -> str:
        year = self.year
        if abs(year) < 1000:
            year_text = f"-{-year:04d}" if year < 0 else f"{year:04d}"
        else:
            year_text = f"+{year}" if year > 9999 else str(year)
        return f"{year_text}-{self.month:02d}-{self.day:02d}"


def _resolve_previous_valid(year: int, month: int, day: int) -> LocalDate:
    return LocalDate(year, month, min(day, month_length(month, is_leap_year(year))))


_FIELD_GETTERS: dict[ChronoField, Callable[[LocalDate], int]] = {
    ChronoField.DAY_OF_WEEK: lambda d: d.day_of_week.value,
    ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH: lambda d: (d.day - 1) % 7 + 1,
    ChronoField.ALIGNED_DAY_OF_WEEK_IN_YEAR: lambda d: (d.day_of_year - 1) % 7 + 1,
    ChronoField.DAY_OF_MONTH: lambda d: d.day,
    ChronoField.DAY_OF_YEAR: lambda d: d.day_of_year,
    ChronoField.EPOCH_DAY: lambda d: d.to_epoch_day(),
    ChronoField.ALIGNED_WEEK_OF_MONTH: lambda d: (d.day - 1) // 7 + 1,
    ChronoField.ALIGNED_WEEK_OF_YEAR: lambda d: (d.day_of_year - 1) // 7 + 1,
    ChronoField.MONTH_OF_YEAR: lambda d: d.month,
    ChronoField.PROLEPTIC_MONTH: lambda d: d.proleptic_month,
    ChronoField.YEAR_OF_ERA: lambda d: d.year if d.year >= 1 else 1 - d.year,
    ChronoField.YEAR: lambda d: d.year,
    ChronoField.ERA: lambda d: 1 if d.year >= 1 else 0,
}

LocalDate.MIN = LocalDate(YEAR_MIN, 1, 1)
LocalDate.MAX = LocalDate(YEAR_MAX, 12, 31)
