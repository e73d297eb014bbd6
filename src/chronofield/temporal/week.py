"""Localized week definitions.

Different regions count weeks differently. A ``WeekFields`` is defined by
two values:

- the first day of the week (Monday in ISO, Sunday in the US)
- the minimal number of days that must fall in the month or year for the
  partial week at its start to count as week 1 (4 in ISO, 1 in the US)

Weeks that start before week 1 are week 0 of the month or year. For the
week-based-year fields they instead belong to the last week of the previous
week-based year.

Each definition exposes five fields computed in terms of it: day-of-week,
week-of-month, week-of-year, week-of-week-based-year and week-based-year.

Example (first day Monday, minimal days 4):
    2008-12-31 (Wednesday): week 5 of December, week 1 of week-based year 2009
    2009-01-01 (Thursday):  week 1 of January, week 1 of week-based year 2009
"""

from __future__ import annotations

import logging
import threading
from enum import Enum
from functools import cached_property
from typing import Any, ClassVar

from babel import Locale

from ..calendar.chronology import chronology_of
from ..calendar.day_of_week import DayOfWeek
from ..calendar.local_date import is_leap_year
from ..exceptions import InvalidArgumentError, StrictResolutionError
from .accessor import Temporal, TemporalAccessor
from .common import ResolverStyle
from .field import ChronoField, TemporalField
from .iso import WEEK_BASED_YEARS
from .range import ValueRange
from .unit import ChronoUnit, TemporalUnit

logger = logging.getLogger(__name__)

# Average number of weeks in a year, used to estimate week-based-year moves
_WEEKS_PER_YEAR_ESTIMATE = 52.1775


class _WeekFieldKind(Enum):
    """The five localized fields, with base unit, range unit and outer range."""

    DAY_OF_WEEK = ("DayOfWeek", ChronoUnit.DAYS, ChronoUnit.WEEKS, ValueRange.of(1, 7))
    WEEK_OF_MONTH = ("WeekOfMonth", ChronoUnit.WEEKS, ChronoUnit.MONTHS, ValueRange(0, 1, 4, 6))
    WEEK_OF_YEAR = ("WeekOfYear", ChronoUnit.WEEKS, ChronoUnit.YEARS, ValueRange(0, 1, 52, 54))
    WEEK_OF_WEEK_BASED_YEAR = (
        "WeekOfWeekBasedYear",
        ChronoUnit.WEEKS,
        WEEK_BASED_YEARS,
        ValueRange(1, 1, 52, 53),
    )
    WEEK_BASED_YEAR = ("WeekBasedYear", WEEK_BASED_YEARS, ChronoUnit.FOREVER, ChronoField.YEAR.range)

    def __init__(self, display_name: str, base_unit: TemporalUnit, range_unit: TemporalUnit, value_range: ValueRange) -> None:
        self.display_name = display_name
        self.base_unit = base_unit
        self.range_unit = range_unit
        self.value_range = value_range


class WeekFields:
    """A week definition and the fields computed from it.

    Obtain instances with ``of``, ``of_locale`` or the ``ISO`` and
    ``SUNDAY_START`` constants. Instances are cached, so the same definition
    always returns the same object, and compare equal by their two values.

    Attributes:
        first_day_of_week: The day weeks start on
        minimal_days_in_first_week: Days required in the first week, 1 to 7
    """

    ISO: ClassVar[WeekFields]
    SUNDAY_START: ClassVar[WeekFields]

    _cache: ClassVar[dict[tuple[DayOfWeek, int], WeekFields]] = {}
    _cache_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, first_day_of_week: DayOfWeek, minimal_days_in_first_week: int) -> None:
        if not 1 <= minimal_days_in_first_week <= 7:
            raise InvalidArgumentError("Minimal number of days is invalid")
        self._first_day_of_week = first_day_of_week
        self._minimal_days = minimal_days_in_first_week

    @classmethod
    def of(cls, first_day_of_week: DayOfWeek, minimal_days_in_first_week: int) -> WeekFields:
        """Get the shared instance for a week definition.

        Raises:
            InvalidArgumentError: If minimal_days_in_first_week is not 1 to 7
        """
        key = (first_day_of_week, minimal_days_in_first_week)
        rules = cls._cache.get(key)
        if rules is None:
            candidate = cls(first_day_of_week, minimal_days_in_first_week)
            with cls._cache_lock:
                rules = cls._cache.setdefault(key, candidate)
            if rules is candidate:
                logger.debug("Cached week definition %s", rules)
        return rules

    @classmethod
    def of_locale(cls, locale: Locale | str) -> WeekFields:
        """Get the week definition used in a locale, from CLDR week data.

        Args:
            locale: A babel ``Locale`` or an identifier such as ``"en_US"``

        Raises:
            babel.UnknownLocaleError: If the locale is not known
        """
        if not isinstance(locale, Locale):
            locale = Locale.parse(locale, sep="-" if "-" in locale else "_")
        # Babel numbers days from Monday = 0
        first_day = DayOfWeek.of(locale.first_week_day + 1)
        return cls.of(first_day, locale.min_week_days)

    @property
    def first_day_of_week(self) -> DayOfWeek:
        return self._first_day_of_week

    @property
    def minimal_days_in_first_week(self) -> int:
        return self._minimal_days

    # =========================================================================
    # Fields
    # =========================================================================

    @cached_property
    def day_of_week(self) -> TemporalField:
        """Localized day-of-week, 1 being the first day of the week."""
        return ComputedDayOfField(self, _WeekFieldKind.DAY_OF_WEEK)

    @cached_property
    def week_of_month(self) -> TemporalField:
        """Week within the month, 0 for days before week 1."""
        return ComputedDayOfField(self, _WeekFieldKind.WEEK_OF_MONTH)

    @cached_property
    def week_of_year(self) -> TemporalField:
        """Week within the year, 0 for days before week 1."""
        return ComputedDayOfField(self, _WeekFieldKind.WEEK_OF_YEAR)

    @cached_property
    def week_of_week_based_year(self) -> TemporalField:
        """Week within the week-based year, 1 to 52 or 53."""
        return ComputedDayOfField(self, _WeekFieldKind.WEEK_OF_WEEK_BASED_YEAR)

    @cached_property
    def week_based_year(self) -> TemporalField:
        """Year the week belongs to, used with week_of_week_based_year."""
        return ComputedDayOfField(self, _WeekFieldKind.WEEK_BASED_YEAR)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeekFields):
            return NotImplemented
        return (self._first_day_of_week, self._minimal_days) == (other._first_day_of_week, other._minimal_days)

    def __hash__(self) -> int:
        return self._first_day_of_week.ordinal * 7 + self._minimal_days

    def __reduce__(self) -> tuple[object, tuple[DayOfWeek, int]]:
        # Unpickle through the cache so the shared instance is returned
        return (WeekFields.of, (self._first_day_of_week, self._minimal_days))

    def __repr__(self) -> str:
        return f"WeekFields.of(DayOfWeek.{self._first_day_of_week.name}, {self._minimal_days})"

    def __str__(self) -> str:
        return f"WeekFields[{self._first_day_of_week.name},{self._minimal_days}]"


class ComputedDayOfField(TemporalField):
    """A field whose value is computed from a week definition."""

    def __init__(self, week_def: WeekFields, kind: _WeekFieldKind) -> None:
        self._week_def = week_def
        self._kind = kind

    @property
    def name(self) -> str:
        return self._kind.display_name

    @property
    def week_def(self) -> WeekFields:
        return self._week_def

    @property
    def base_unit(self) -> TemporalUnit:
        return self._kind.base_unit

    @property
    def range_unit(self) -> TemporalUnit:
        return self._kind.range_unit

    @property
    def range(self) -> ValueRange:
        return self._kind.value_range

    @property
    def is_date_based(self) -> bool:
        return True

    @property
    def is_time_based(self) -> bool:
        return False

    # =========================================================================
    # Week arithmetic
    # =========================================================================

    def _localized_day_of_week(self, temporal: TemporalAccessor) -> int:
        sow = self._week_def.first_day_of_week.value
        return (temporal.get(ChronoField.DAY_OF_WEEK) - sow) % 7 + 1

    def _start_of_week_offset(self, day: int, dow: int) -> int:
        """Offset from day 1 of the period to the start of its week 1."""
        week_start = (day - dow) % 7
        if week_start + 1 > self._week_def.minimal_days_in_first_week:
            return 7 - week_start
        return -week_start

    @staticmethod
    def _compute_week(offset: int, day: int) -> int:
        return (7 + offset + (day - 1)) // 7

    def _localized_week_of_month(self, temporal: TemporalAccessor, dow: int) -> int:
        dom = temporal.get(ChronoField.DAY_OF_MONTH)
        return self._compute_week(self._start_of_week_offset(dom, dow), dom)

    def _localized_week_of_year(self, temporal: TemporalAccessor, dow: int) -> int:
        doy = temporal.get(ChronoField.DAY_OF_YEAR)
        return self._compute_week(self._start_of_week_offset(doy, dow), doy)

    def _first_week_of_next_year(self, temporal: TemporalAccessor, dow: int) -> int:
        """Week-of-year index at which the next year's week 1 begins."""
        offset = self._start_of_week_offset(temporal.get(ChronoField.DAY_OF_YEAR), dow)
        year_length = 366 if is_leap_year(temporal.get(ChronoField.YEAR)) else 365
        return self._compute_week(offset, year_length + self._week_def.minimal_days_in_first_week)

    def _localized_week_of_week_based_year(self, temporal: TemporalAccessor) -> int:
        dow = self._localized_day_of_week(temporal)
        woy = self._localized_week_of_year(temporal, dow)
        if woy == 0:
            previous = chronology_of(temporal).date_from(temporal).minus(1, ChronoUnit.WEEKS)
            return self._localized_week_of_year(previous, dow) + 1
        if woy >= 53:
            first_week_next_year = self._first_week_of_next_year(temporal, dow)
            if woy >= first_week_next_year:
                return woy - (first_week_next_year - 1)
        return woy

    def _localized_week_based_year(self, temporal: TemporalAccessor) -> int:
        dow = self._localized_day_of_week(temporal)
        year = temporal.get(ChronoField.YEAR)
        woy = self._localized_week_of_year(temporal, dow)
        if woy == 0:
            return year - 1
        if woy < 53:
            return year
        if woy >= self._first_week_of_next_year(temporal, dow):
            return year + 1
        return year

    def _range_week_of_week_based_year(self, temporal: TemporalAccessor) -> ValueRange:
        dow = self._localized_day_of_week(temporal)
        woy = self._localized_week_of_year(temporal, dow)
        if woy == 0:
            earlier = chronology_of(temporal).date_from(temporal).minus(2, ChronoUnit.WEEKS)
            return self._range_week_of_week_based_year(earlier)
        first_week_next_year = self._first_week_of_next_year(temporal, dow)
        if woy >= first_week_next_year:
            later = chronology_of(temporal).date_from(temporal).plus(2, ChronoUnit.WEEKS)
            return self._range_week_of_week_based_year(later)
        return ValueRange.of(1, first_week_next_year - 1)

    # =========================================================================
    # TemporalField
    # =========================================================================

    def is_supported_by(self, temporal: TemporalAccessor) -> bool:
        if not temporal.is_supported(ChronoField.DAY_OF_WEEK):
            return False
        kind = self._kind
        if kind is _WeekFieldKind.DAY_OF_WEEK:
            return True
        if kind is _WeekFieldKind.WEEK_OF_MONTH:
            return temporal.is_supported(ChronoField.DAY_OF_MONTH)
        if kind is _WeekFieldKind.WEEK_OF_YEAR:
            return temporal.is_supported(ChronoField.DAY_OF_YEAR)
        return temporal.is_supported(ChronoField.EPOCH_DAY)

    def get_from(self, temporal: TemporalAccessor) -> int:
        kind = self._kind
        if kind is _WeekFieldKind.DAY_OF_WEEK:
            return self._localized_day_of_week(temporal)
        if kind is _WeekFieldKind.WEEK_OF_MONTH:
            return self._localized_week_of_month(temporal, self._localized_day_of_week(temporal))
        if kind is _WeekFieldKind.WEEK_OF_YEAR:
            return self._localized_week_of_year(temporal, self._localized_day_of_week(temporal))
        if kind is _WeekFieldKind.WEEK_OF_WEEK_BASED_YEAR:
            return self._localized_week_of_week_based_year(temporal)
        return self._localized_week_based_year(temporal)

    def range_refined_by(self, temporal: TemporalAccessor) -> ValueRange:
        kind = self._kind
        if kind is _WeekFieldKind.DAY_OF_WEEK:
            return self.range
        if kind is _WeekFieldKind.WEEK_OF_WEEK_BASED_YEAR:
            return self._range_week_of_week_based_year(temporal)
        if kind is _WeekFieldKind.WEEK_BASED_YEAR:
            return temporal.range(ChronoField.YEAR)
        field = ChronoField.DAY_OF_MONTH if kind is _WeekFieldKind.WEEK_OF_MONTH else ChronoField.DAY_OF_YEAR
        dow = self._localized_day_of_week(temporal)
        offset = self._start_of_week_offset(temporal.get(field), dow)
        field_range = temporal.range(field)
        return ValueRange.of(
            self._compute_week(offset, field_range.minimum),
            self._compute_week(offset, field_range.maximum),
        )

    def adjust_into(self, temporal: Temporal, new_value: int) -> Temporal:
        new_val = self.range.check_valid_int_value(new_value, self)
        current_val = temporal.get(self)
        if new_val == current_val:
            return temporal
        if self._kind is not _WeekFieldKind.WEEK_BASED_YEAR:
            return temporal.plus(new_val - current_val, self.base_unit)
        # Estimate the move in weeks, then correct to keep the same week number
        wowby_field = self._week_def.week_of_week_based_year
        base_wowby = temporal.get(wowby_field)
        diff_weeks = int((new_value - current_val) * _WEEKS_PER_YEAR_ESTIMATE)
        result = temporal.plus(diff_weeks, ChronoUnit.WEEKS)
        if result.get(self) > new_val:
            result = result.minus(result.get(wowby_field), ChronoUnit.WEEKS)
        else:
            if result.get(self) < new_val:
                result = result.plus(2, ChronoUnit.WEEKS)
            result = result.plus(base_wowby - result.get(wowby_field), ChronoUnit.WEEKS)
            if result.get(self) > new_val:
                result = result.minus(1, ChronoUnit.WEEKS)
        return result

    def resolve(
        self,
        field_values: dict[Any, int],
        partial_temporal: TemporalAccessor,
        resolver_style: ResolverStyle,
    ) -> TemporalAccessor | None:
        """Resolve the localized fields.

        A localized day-of-week is replaced by the ISO DAY_OF_WEEK in the map.
        The week fields need DAY_OF_WEEK plus their period: week-based year
        with week-of-week-based-year, YEAR and MONTH_OF_YEAR for week-of-month,
        YEAR for week-of-year.

        Raises:
            StrictResolutionError: If a strict result lands in a different period
        """
        sow = self._week_def.first_day_of_week.value
        kind = self._kind
        if kind is _WeekFieldKind.DAY_OF_WEEK:
            local_dow = self.range.check_valid_int_value(field_values.pop(self), self)
            field_values[ChronoField.DAY_OF_WEEK] = ((sow - 1) + (local_dow - 1)) % 7 + 1
            return None
        if ChronoField.DAY_OF_WEEK not in field_values:
            return None
        if kind is _WeekFieldKind.WEEK_OF_WEEK_BASED_YEAR:
            # Resolved together with the week-based-year field
            return None
        if kind is _WeekFieldKind.WEEK_BASED_YEAR:
            return self._resolve_week_based_year(field_values, partial_temporal, resolver_style)
        if ChronoField.YEAR not in field_values:
            return None
        iso_dow = ChronoField.DAY_OF_WEEK.check_valid_int_value(field_values[ChronoField.DAY_OF_WEEK])
        dow = (iso_dow - sow) % 7 + 1
        year = ChronoField.YEAR.check_valid_int_value(field_values[ChronoField.YEAR])
        chrono = chronology_of(partial_temporal)
        value = field_values[self]
        if kind is _WeekFieldKind.WEEK_OF_MONTH:
            if ChronoField.MONTH_OF_YEAR not in field_values:
                return None
            if resolver_style is ResolverStyle.LENIENT:
                date = chrono.date(year, 1, 1).plus(field_values[ChronoField.MONTH_OF_YEAR] - 1, ChronoUnit.MONTHS)
                date_dow = self._localized_day_of_week(date)
                weeks = value - self._localized_week_of_month(date, date_dow)
            else:
                month = ChronoField.MONTH_OF_YEAR.check_valid_int_value(field_values[ChronoField.MONTH_OF_YEAR])
                date = chrono.date(year, month, 8)
                date_dow = self._localized_day_of_week(date)
                wom = self.range.check_valid_int_value(value, self)
                weeks = wom - self._localized_week_of_month(date, date_dow)
            date = date.plus(weeks * 7 + (dow - date_dow), ChronoUnit.DAYS)
            if resolver_style is ResolverStyle.STRICT:
                if date.get_long(ChronoField.MONTH_OF_YEAR) != field_values[ChronoField.MONTH_OF_YEAR]:
                    raise StrictResolutionError("Strict mode rejected date parsed to a different month")
            for consumed in (self, ChronoField.YEAR, ChronoField.MONTH_OF_YEAR, ChronoField.DAY_OF_WEEK):
                del field_values[consumed]
            return date
        # Week of year
        date = chrono.date(year, 1, 1)
        date_dow = self._localized_day_of_week(date)
        woy = value if resolver_style is ResolverStyle.LENIENT else self.range.check_valid_int_value(value, self)
        weeks = woy - self._localized_week_of_year(date, date_dow)
        date = date.plus(weeks * 7 + (dow - date_dow), ChronoUnit.DAYS)
        if resolver_style is ResolverStyle.STRICT:
            if date.get_long(ChronoField.YEAR) != field_values[ChronoField.YEAR]:
                raise StrictResolutionError("Strict mode rejected date parsed to a different year")
        for consumed in (self, ChronoField.YEAR, ChronoField.DAY_OF_WEEK):
            del field_values[consumed]
        return date

    def _resolve_week_based_year(
        self,
        field_values: dict[Any, int],
        partial_temporal: TemporalAccessor,
        resolver_style: ResolverStyle,
    ) -> TemporalAccessor | None:
        wowby_field = self._week_def.week_of_week_based_year
        if wowby_field not in field_values:
            return None
        sow = self._week_def.first_day_of_week.value
        chrono = chronology_of(partial_temporal)
        iso_dow = ChronoField.DAY_OF_WEEK.check_valid_int_value(field_values[ChronoField.DAY_OF_WEEK])
        dow = (iso_dow - sow) % 7 + 1
        wby = self.range.check_valid_int_value(field_values[self], self)
        date = chrono.date(wby, 1, self._week_def.minimal_days_in_first_week)
        if resolver_style is ResolverStyle.LENIENT:
            wowby = field_values[wowby_field]
        else:
            wowby = wowby_field.range.check_valid_int_value(field_values[wowby_field], wowby_field)
        date_dow = self._localized_day_of_week(date)
        weeks = wowby - self._localized_week_of_year(date, date_dow)
        date = date.plus(weeks * 7 + (dow - date_dow), ChronoUnit.DAYS)
        if resolver_style is ResolverStyle.STRICT:
            if date.get_long(self) != field_values[self]:
                raise StrictResolutionError("Strict mode rejected date parsed to a different year")
        for consumed in (self, wowby_field, ChronoField.DAY_OF_WEEK):
            del field_values[consumed]
        return date

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComputedDayOfField):
            return NotImplemented
        return self._kind is other._kind and self._week_def == other._week_def

    def __hash__(self) -> int:
        return hash((self._kind, self._week_def))

    def __repr__(self) -> str:
        return f"{self._week_def!r}.{self._kind.name.lower()}"

    def __str__(self) -> str:
        return f"{self.name}[{self._week_def}]"


WeekFields.ISO = WeekFields.of(DayOfWeek.MONDAY, 4)
WeekFields.SUNDAY_START = WeekFields.of(DayOfWeek.SUNDAY, 1)
