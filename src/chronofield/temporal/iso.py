"""Fields and units specific to the ISO-8601 calendar system.

Quarter-based fields:

- ``DAY_OF_QUARTER``: 1 to 90, 91 or 92 depending on quarter and leap year
- ``QUARTER_OF_YEAR``: 1 to 4, Q1 being January to March

Week-based-year fields, where weeks start on Monday and week 1 is the first
week with at least four days in the calendar year:

- ``WEEK_OF_WEEK_BASED_YEAR``: 1 to 52 or 53
- ``WEEK_BASED_YEAR``: the year the week belongs to, which can differ from
  the calendar year for the first and last few days of a year

Units ``WEEK_BASED_YEARS`` and ``QUARTER_YEARS`` add whole week-based years
and quarters. All of these only work with ISO temporals.

Example:
    >>> from chronofield.calendar import LocalDate
    >>> LocalDate.of(2008, 12, 29).get(WEEK_BASED_YEAR)
    2009
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..calendar.chronology import ISO, chronology_of
from ..calendar.day_of_week import DayOfWeek
from ..calendar.local_date import LocalDate
from ..constants import SECONDS_PER_AVERAGE_YEAR
from ..exact import add_exact, multiply_exact, subtract_exact, trunc_div, trunc_mod
from ..exceptions import DateTimeError, UnsupportedTemporalTypeError
from .common import ResolverStyle
from .field import ChronoField, TemporalField
from .range import ValueRange
from .unit import ChronoUnit, TemporalUnit

if TYPE_CHECKING:
    from ..duration import Duration
    from .accessor import Temporal, TemporalAccessor

# Days before the start of each quarter; standard year then leap year
QUARTER_DAYS = (0, 90, 181, 273, 0, 91, 182, 274)


def _is_iso(temporal: TemporalAccessor) -> bool:
    return chronology_of(temporal) is ISO


def _ensure_iso(temporal: TemporalAccessor) -> None:
    if not _is_iso(temporal):
        raise DateTimeError("Resolve requires ISO chronology")


# =============================================================================
# Week-based-year calculations
# =============================================================================


def get_week_range(week_based_year: int) -> int:
    """Number of weeks (52 or 53) in a week-based year."""
    date = LocalDate.of(week_based_year, 1, 1)
    if date.day_of_week is DayOfWeek.THURSDAY or (date.day_of_week is DayOfWeek.WEDNESDAY and date.is_leap_year):
        return 53
    return 52


def _get_week_range(date: LocalDate) -> ValueRange:
    return ValueRange.of(1, get_week_range(get_week_based_year(date)))


def get_week(date: LocalDate) -> int:
    """ISO week-of-week-based-year of date."""
    dow0 = date.day_of_week.ordinal
    doy0 = date.day_of_year - 1
    doy_thu0 = doy0 + (3 - dow0)
    aligned_week = trunc_div(doy_thu0, 7)
    first_thu_doy0 = doy_thu0 - aligned_week * 7
    first_mon_doy0 = first_thu_doy0 - 3
    if first_mon_doy0 < -3:
        first_mon_doy0 += 7
    if doy0 < first_mon_doy0:
        # Belongs to the last week of the previous week-based year
        return _get_week_range(date.with_day_of_year(180).minus_years(1)).maximum
    week = (doy0 - first_mon_doy0) // 7 + 1
    if week == 53 and not (first_mon_doy0 == -3 or (first_mon_doy0 == -2 and date.is_leap_year)):
        week = 1
    return week


def get_week_based_year(date: LocalDate) -> int:
    """ISO week-based year of date."""
    year = date.year
    doy = date.day_of_year
    if doy <= 3:
        dow = date.day_of_week.ordinal
        if doy - dow < -2:
            year -= 1
    elif doy >= 363:
        dow = date.day_of_week.ordinal
        doy = doy - 363 - (1 if date.is_leap_year else 0)
        if doy - dow >= 0:
            year += 1
    return year


# =============================================================================
# Fields
# =============================================================================


class _IsoField(TemporalField):
    """Base of the IsoFields; every one of them is date-based."""

    def __init__(self, name: str, base_unit: TemporalUnit, range_unit: TemporalUnit, value_range: ValueRange) -> None:
        self._name = name
        self._base_unit = base_unit
        self._range_unit = range_unit
        self._range = value_range

    @property
    def base_unit(self) -> TemporalUnit:
        return self._base_unit

    @property
    def range_unit(self) -> TemporalUnit:
        return self._range_unit

    @property
    def range(self) -> ValueRange:
        return self._range

    @property
    def is_date_based(self) -> bool:
        return True

    @property
    def is_time_based(self) -> bool:
        return False

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"IsoFields.{self._name}"


class _DayOfQuarterField(_IsoField):
    def is_supported_by(self, temporal: TemporalAccessor) -> bool:
        return (
            temporal.is_supported(ChronoField.DAY_OF_YEAR)
            and temporal.is_supported(ChronoField.MONTH_OF_YEAR)
            and temporal.is_supported(ChronoField.YEAR)
            and _is_iso(temporal)
        )

    def range_refined_by(self, temporal: TemporalAccessor) -> ValueRange:
        if not self.is_supported_by(temporal):
            raise UnsupportedTemporalTypeError("Unsupported field: DayOfQuarter")
        qoy = temporal.get_long(QUARTER_OF_YEAR)
        if qoy == 1:
            year = temporal.get_long(ChronoField.YEAR)
            return ValueRange.of(1, 91 if ISO.is_leap_year(year) else 90)
        if qoy == 2:
            return ValueRange.of(1, 91)
        if qoy in (3, 4):
            return ValueRange.of(1, 92)
        return self.range

    def get_from(self, temporal: TemporalAccessor) -> int:
        if not self.is_supported_by(temporal):
            raise UnsupportedTemporalTypeError("Unsupported field: DayOfQuarter")
        doy = temporal.get(ChronoField.DAY_OF_YEAR)
        moy = temporal.get(ChronoField.MONTH_OF_YEAR)
        year = temporal.get_long(ChronoField.YEAR)
        return doy - QUARTER_DAYS[(moy - 1) // 3 + (4 if ISO.is_leap_year(year) else 0)]

    def adjust_into(self, temporal: Temporal, new_value: int) -> Temporal:
        current = self.get_from(temporal)
        self.range.check_valid_value(new_value, self)
        day_of_year = temporal.get_long(ChronoField.DAY_OF_YEAR)
        return temporal.with_field(ChronoField.DAY_OF_YEAR, day_of_year + (new_value - current))

    def resolve(
        self,
        field_values: dict[Any, int],
        partial_temporal: TemporalAccessor,
        resolver_style: ResolverStyle,
    ) -> LocalDate | None:
        if ChronoField.YEAR not in field_values or QUARTER_OF_YEAR not in field_values:
            return None
        _ensure_iso(partial_temporal)
        year = ChronoField.YEAR.check_valid_int_value(field_values[ChronoField.YEAR])
        qoy_long = field_values[QUARTER_OF_YEAR]
        doq = field_values[DAY_OF_QUARTER]
        if resolver_style is ResolverStyle.LENIENT:
            date = LocalDate.of(year, 1, 1).plus_months(multiply_exact(subtract_exact(qoy_long, 1), 3))
            date = date.plus_days(subtract_exact(doq, 1))
        else:
            qoy = QUARTER_OF_YEAR.range.check_valid_int_value(qoy_long, QUARTER_OF_YEAR)
            if resolver_style is ResolverStyle.STRICT:
                if qoy == 1:
                    max_doq = 91 if ISO.is_leap_year(year) else 90
                elif qoy == 2:
                    max_doq = 91
                else:
                    max_doq = 92
                ValueRange.of(1, max_doq).check_valid_value(doq, self)
            else:
                self.range.check_valid_value(doq, self)
            date = LocalDate.of(year, (qoy - 1) * 3 + 1, 1).plus_days(doq - 1)
        del field_values[self]
        del field_values[ChronoField.YEAR]
        del field_values[QUARTER_OF_YEAR]
        return date


class _QuarterOfYearField(_IsoField):
    def is_supported_by(self, temporal: TemporalAccessor) -> bool:
        return temporal.is_supported(ChronoField.MONTH_OF_YEAR) and _is_iso(temporal)

    def range_refined_by(self, temporal: TemporalAccessor) -> ValueRange:
        return self.range

    def get_from(self, temporal: TemporalAccessor) -> int:
        if not self.is_supported_by(temporal):
            raise UnsupportedTemporalTypeError("Unsupported field: QuarterOfYear")
        moy = temporal.get_long(ChronoField.MONTH_OF_YEAR)
        return (moy + 2) // 3

    def adjust_into(self, temporal: Temporal, new_value: int) -> Temporal:
        current = self.get_from(temporal)
        self.range.check_valid_value(new_value, self)
        month_of_year = temporal.get_long(ChronoField.MONTH_OF_YEAR)
        return temporal.with_field(ChronoField.MONTH_OF_YEAR, month_of_year + (new_value - current) * 3)


class _WeekOfWeekBasedYearField(_IsoField):
    def is_supported_by(self, temporal: TemporalAccessor) -> bool:
        return temporal.is_supported(ChronoField.EPOCH_DAY) and _is_iso(temporal)

    def range_refined_by(self, temporal: TemporalAccessor) -> ValueRange:
        if not self.is_supported_by(temporal):
            raise UnsupportedTemporalTypeError("Unsupported field: WeekOfWeekBasedYear")
        return _get_week_range(LocalDate.from_temporal(temporal))

    def get_from(self, temporal: TemporalAccessor) -> int:
        if not self.is_supported_by(temporal):
            raise UnsupportedTemporalTypeError("Unsupported field: WeekOfWeekBasedYear")
        return get_week(LocalDate.from_temporal(temporal))

    def adjust_into(self, temporal: Temporal, new_value: int) -> Temporal:
        self.range.check_valid_value(new_value, self)
        return temporal.plus(subtract_exact(new_value, self.get_from(temporal)), ChronoUnit.WEEKS)

    def resolve(
        self,
        field_values: dict[Any, int],
        partial_temporal: TemporalAccessor,
        resolver_style: ResolverStyle,
    ) -> LocalDate | None:
        if WEEK_BASED_YEAR not in field_values or ChronoField.DAY_OF_WEEK not in field_values:
            return None
        _ensure_iso(partial_temporal)
        wby = WEEK_BASED_YEAR.range.check_valid_int_value(field_values[WEEK_BASED_YEAR], WEEK_BASED_YEAR)
        wowby = field_values[WEEK_OF_WEEK_BASED_YEAR]
        if resolver_style is ResolverStyle.LENIENT:
            dow = field_values[ChronoField.DAY_OF_WEEK]
            weeks = 0
            if dow > 7:
                weeks = (dow - 1) // 7
                dow = (dow - 1) % 7 + 1
            elif dow < 1:
                weeks = trunc_div(dow, 7) - 1
                dow = trunc_mod(dow, 7) + 7
            date = LocalDate.of(wby, 1, 4).plus_weeks(wowby - 1).plus_weeks(weeks)
            date = date.with_field(ChronoField.DAY_OF_WEEK, dow)
        else:
            dow = ChronoField.DAY_OF_WEEK.check_valid_int_value(field_values[ChronoField.DAY_OF_WEEK])
            if resolver_style is ResolverStyle.STRICT:
                _get_week_range(LocalDate.of(wby, 1, 4)).check_valid_value(wowby, self)
            else:
                self.range.check_valid_value(wowby, self)
            date = LocalDate.of(wby, 1, 4).plus_weeks(wowby - 1).with_field(ChronoField.DAY_OF_WEEK, dow)
        del field_values[self]
        del field_values[WEEK_BASED_YEAR]
        del field_values[ChronoField.DAY_OF_WEEK]
        return date


class _WeekBasedYearField(_IsoField):
    def is_supported_by(self, temporal: TemporalAccessor) -> bool:
        return temporal.is_supported(ChronoField.EPOCH_DAY) and _is_iso(temporal)

    def range_refined_by(self, temporal: TemporalAccessor) -> ValueRange:
        return ChronoField.YEAR.range

    def get_from(self, temporal: TemporalAccessor) -> int:
        if not self.is_supported_by(temporal):
            raise UnsupportedTemporalTypeError("Unsupported field: WeekBasedYear")
        return get_week_based_year(LocalDate.from_temporal(temporal))

    def adjust_into(self, temporal: Temporal, new_value: int) -> Temporal:
        """Move to the same week and day in another week-based year.

        Week 53 becomes week 52 if the target year only has 52 weeks.
        """
        if not self.is_supported_by(temporal):
            raise UnsupportedTemporalTypeError("Unsupported field: WeekBasedYear")
        new_wby = self.range.check_valid_int_value(new_value, WEEK_BASED_YEAR)
        date = LocalDate.from_temporal(temporal)
        dow = date.get(ChronoField.DAY_OF_WEEK)
        week = get_week(date)
        if week == 53 and get_week_range(new_wby) == 52:
            week = 52
        resolved = LocalDate.of(new_wby, 1, 4)
        days = (dow - resolved.get(ChronoField.DAY_OF_WEEK)) + (week - 1) * 7
        resolved = resolved.plus_days(days)
        return temporal.adjust(resolved)


# =============================================================================
# Units
# =============================================================================


class _IsoUnit(TemporalUnit):
    """Base of the IsoFields units; both are date-based with estimated durations."""

    def __init__(self, name: str, seconds: int) -> None:
        self._name = name
        self._seconds = seconds

    @property
    def duration(self) -> Duration:
        from ..duration import Duration

        return Duration.of_seconds(self._seconds)

    @property
    def is_duration_estimated(self) -> bool:
        return True

    @property
    def is_date_based(self) -> bool:
        return True

    @property
    def is_time_based(self) -> bool:
        return False

    def is_supported_by(self, temporal: Temporal) -> bool:
        return temporal.is_supported(ChronoField.EPOCH_DAY)

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"IsoFields.{self._name}"


class _WeekBasedYearsUnit(_IsoUnit):
    def add_to(self, temporal: Temporal, amount: int) -> Temporal:
        added = add_exact(temporal.get(WEEK_BASED_YEAR), amount)
        return temporal.with_field(WEEK_BASED_YEAR, added)

    def between(self, temporal1: Temporal, temporal2: Temporal) -> int:
        return subtract_exact(temporal2.get_long(WEEK_BASED_YEAR), temporal1.get_long(WEEK_BASED_YEAR))


class _QuarterYearsUnit(_IsoUnit):
    def add_to(self, temporal: Temporal, amount: int) -> Temporal:
        return temporal.plus(multiply_exact(amount, 3), ChronoUnit.MONTHS)

    def between(self, temporal1: Temporal, temporal2: Temporal) -> int:
        return trunc_div(temporal1.until(temporal2, ChronoUnit.MONTHS), 3)


WEEK_BASED_YEARS = _WeekBasedYearsUnit("WeekBasedYears", SECONDS_PER_AVERAGE_YEAR)
QUARTER_YEARS = _QuarterYearsUnit("QuarterYears", SECONDS_PER_AVERAGE_YEAR // 4)

DAY_OF_QUARTER = _DayOfQuarterField("DayOfQuarter", ChronoUnit.DAYS, QUARTER_YEARS, ValueRange.of(1, 90, 92))
QUARTER_OF_YEAR = _QuarterOfYearField("QuarterOfYear", QUARTER_YEARS, ChronoUnit.YEARS, ValueRange.of(1, 4))
WEEK_OF_WEEK_BASED_YEAR = _WeekOfWeekBasedYearField(
    "WeekOfWeekBasedYear", ChronoUnit.WEEKS, WEEK_BASED_YEARS, ValueRange.of(1, 52, 53)
)
WEEK_BASED_YEAR = _WeekBasedYearField("WeekBasedYear", WEEK_BASED_YEARS, ChronoUnit.FOREVER, ChronoField.YEAR.range)

FIELDS: tuple[TemporalField, ...] = (DAY_OF_QUARTER, QUARTER_OF_YEAR, WEEK_OF_WEEK_BASED_YEAR, WEEK_BASED_YEAR)
UNITS: tuple[TemporalUnit, ...] = (WEEK_BASED_YEARS, QUARTER_YEARS)
