"""Common date adjustment strategies.

Each function returns a ``TemporalAdjuster`` to pass to ``Temporal.adjust``:

    >>> from chronofield.calendar import DayOfWeek, LocalDate
    >>> LocalDate.of(2024, 2, 10).adjust(last_day_of_month())
    LocalDate(year=2024, month=2, day=29)
    >>> LocalDate.of(2024, 2, 10).adjust(next_or_same(DayOfWeek.MONDAY))
    LocalDate(year=2024, month=2, day=12)
"""

from __future__ import annotations

from collections.abc import Callable

from ..calendar.day_of_week import DayOfWeek
from ..calendar.local_date import LocalDate
from .accessor import Temporal, TemporalAdjuster
from .field import ChronoField
from .unit import ChronoUnit


class _FunctionAdjuster(TemporalAdjuster):
    """Adapts a plain function to the adjuster interface."""

    def __init__(self, name: str, function: Callable[[Temporal], Temporal]) -> None:
        self._name = name
        self._function = function

    def adjust_into(self, temporal: Temporal) -> Temporal:
        return self._function(temporal)

    def __repr__(self) -> str:
        return f"TemporalAdjuster({self._name})"


def of_date_adjuster(date_adjuster: Callable[[LocalDate], LocalDate]) -> TemporalAdjuster:
    """Wrap a function over ``LocalDate`` so it can adjust any date-bearing temporal."""

    def adjust(temporal: Temporal) -> Temporal:
        return temporal.adjust(date_adjuster(LocalDate.from_temporal(temporal)))

    return _FunctionAdjuster(getattr(date_adjuster, "__name__", "date"), adjust)


# =============================================================================
# Month and year boundaries
# =============================================================================


def first_day_of_month() -> TemporalAdjuster:
    return _FunctionAdjuster("first_day_of_month", lambda t: t.with_field(ChronoField.DAY_OF_MONTH, 1))


def last_day_of_month() -> TemporalAdjuster:
    def adjust(temporal: Temporal) -> Temporal:
        return temporal.with_field(ChronoField.DAY_OF_MONTH, temporal.range(ChronoField.DAY_OF_MONTH).maximum)

    return _FunctionAdjuster("last_day_of_month", adjust)


def first_day_of_next_month() -> TemporalAdjuster:
    return _FunctionAdjuster(
        "first_day_of_next_month",
        lambda t: t.with_field(ChronoField.DAY_OF_MONTH, 1).plus(1, ChronoUnit.MONTHS),
    )


def first_day_of_year() -> TemporalAdjuster:
    return _FunctionAdjuster("first_day_of_year", lambda t: t.with_field(ChronoField.DAY_OF_YEAR, 1))


def last_day_of_year() -> TemporalAdjuster:
    def adjust(temporal: Temporal) -> Temporal:
        return temporal.with_field(ChronoField.DAY_OF_YEAR, temporal.range(ChronoField.DAY_OF_YEAR).maximum)

    return _FunctionAdjuster("last_day_of_year", adjust)


def first_day_of_next_year() -> TemporalAdjuster:
    return _FunctionAdjuster(
        "first_day_of_next_year",
        lambda t: t.with_field(ChronoField.DAY_OF_YEAR, 1).plus(1, ChronoUnit.YEARS),
    )


# =============================================================================
# Day-of-week within month
# =============================================================================


def first_in_month(day_of_week: DayOfWeek) -> TemporalAdjuster:
    return day_of_week_in_month(1, day_of_week)


def last_in_month(day_of_week: DayOfWeek) -> TemporalAdjuster:
    return day_of_week_in_month(-1, day_of_week)


def day_of_week_in_month(ordinal: int, day_of_week: DayOfWeek) -> TemporalAdjuster:
    """The ordinal'th day_of_week in the month.

    Positive ordinals count from the start of the month and negative ones from
    the end (-1 is the last). Ordinal 0 is the last day_of_week of the
    previous month. Ordinals beyond the month roll into the following months.
    """
    dow_value = day_of_week.value

    def adjust(temporal: Temporal) -> Temporal:
        if ordinal >= 0:
            first = temporal.with_field(ChronoField.DAY_OF_MONTH, 1)
            dow_diff = (dow_value - first.get(ChronoField.DAY_OF_WEEK) + 7) % 7
            dow_diff += (ordinal - 1) * 7
            return first.plus(dow_diff, ChronoUnit.DAYS)
        last_day = temporal.range(ChronoField.DAY_OF_MONTH).maximum
        last = temporal.with_field(ChronoField.DAY_OF_MONTH, last_day)
        days_diff = dow_value - last.get(ChronoField.DAY_OF_WEEK)
        if days_diff > 0:
            days_diff -= 7
        days_diff -= (-ordinal - 1) * 7
        return last.plus(days_diff, ChronoUnit.DAYS)

    return _FunctionAdjuster(f"day_of_week_in_month({ordinal}, {day_of_week.name})", adjust)


# =============================================================================
# Relative day-of-week
# =============================================================================


def next(day_of_week: DayOfWeek) -> TemporalAdjuster:
    """The first day_of_week strictly after the date."""
    return _relative_day_of_week(day_of_week, after=True, or_same=False)


def next_or_same(day_of_week: DayOfWeek) -> TemporalAdjuster:
    return _relative_day_of_week(day_of_week, after=True, or_same=True)


def previous(day_of_week: DayOfWeek) -> TemporalAdjuster:
    """The last day_of_week strictly before the date."""
    return _relative_day_of_week(day_of_week, after=False, or_same=False)


def previous_or_same(day_of_week: DayOfWeek) -> TemporalAdjuster:
    return _relative_day_of_week(day_of_week, after=False, or_same=True)


def _relative_day_of_week(day_of_week: DayOfWeek, *, after: bool, or_same: bool) -> TemporalAdjuster:
    dow_value = day_of_week.value

    def adjust(temporal: Temporal) -> Temporal:
        cal_dow = temporal.get(ChronoField.DAY_OF_WEEK)
        if or_same and cal_dow == dow_value:
            return temporal
        if after:
            days_diff = cal_dow - dow_value
            return temporal.plus(7 - days_diff if days_diff >= 0 else -days_diff, ChronoUnit.DAYS)
        days_diff = dow_value - cal_dow
        return temporal.minus(7 - days_diff if days_diff >= 0 else -days_diff, ChronoUnit.DAYS)

    direction = "next" if after else "previous"
    suffix = "_or_same" if or_same else ""
    return _FunctionAdjuster(f"{direction}{suffix}({day_of_week.name})", adjust)
