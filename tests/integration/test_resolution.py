"""Integration tests for resolving mixed sets of field values into dates."""

from __future__ import annotations

from typing import Any

import pytest

from chronofield import Duration, LocalDate, LocalTime, Period
from chronofield.exceptions import DateTimeError
from chronofield.temporal import (
    ChronoField,
    ChronoUnit,
    ResolverStyle,
    WeekFields,
    field_by_name,
    iso,
    julian,
    resolve_fields,
)
from chronofield.temporal import query as queries


def parse_field_values(text: str) -> dict[Any, int]:
    """Turn "Name=value;Name=value" into a field-value map, as a parser front end would."""
    field_values: dict[Any, int] = {}
    for part in text.split(";"):
        name, value = part.split("=")
        field_values[field_by_name(name)] = int(value)
    return field_values


class TestResolveFromNames:
    """Tests that go from field names and values to a date."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Year=2024;MonthOfYear=2;DayOfMonth=29", LocalDate.of(2024, 2, 29)),
            ("Year=2024;QuarterOfYear=2;DayOfQuarter=45", LocalDate.of(2024, 5, 15)),
            ("WeekBasedYear=2009;WeekOfWeekBasedYear=1;DayOfWeek=1", LocalDate.of(2008, 12, 29)),
            ("WeekBasedYear=2004;WeekOfWeekBasedYear=53;DayOfWeek=6", LocalDate.of(2005, 1, 1)),
            ("JulianDay=2451545", LocalDate.of(2000, 1, 1)),
            ("ModifiedJulianDay=0;DayOfWeek=3", LocalDate.of(1858, 11, 17)),
            ("EpochDay=19782;QuarterOfYear=1;DayOfQuarter=60", LocalDate.of(2024, 2, 29)),
        ],
        ids=["year_month_day", "quarter", "week_based", "week_53", "julian_day", "mjd_with_dow", "epoch_cross_check"],
    )
    def test_resolves_to_date(self, text: str, expected: LocalDate) -> None:
        field_values = parse_field_values(text)
        assert resolve_fields(field_values) == expected
        assert field_values == {}

    def test_derived_date_conflicts_with_quarter(self) -> None:
        """Test that a leftover quarter field that disagrees with the date is rejected."""
        field_values = parse_field_values("EpochDay=19782;QuarterOfYear=2")
        with pytest.raises(DateTimeError, match="Conflict found: Field QuarterOfYear 1 differs"):
            resolve_fields(field_values)


class TestResolveWithTime:
    """Tests combining a resolved date with the remaining time fields."""

    def test_time_fields_survive_date_resolution(self) -> None:
        field_values = {
            iso.WEEK_BASED_YEAR: 2020,
            iso.WEEK_OF_WEEK_BASED_YEAR: 53,
            ChronoField.DAY_OF_WEEK: 5,
            ChronoField.HOUR_OF_DAY: 23,
            ChronoField.MINUTE_OF_HOUR: 59,
        }
        date = resolve_fields(field_values, ResolverStyle.STRICT)
        assert date == LocalDate.of(2021, 1, 1)
        time = LocalTime.of(field_values[ChronoField.HOUR_OF_DAY], field_values[ChronoField.MINUTE_OF_HOUR])
        assert time.plus(Duration.of_minutes(2)) == LocalTime.of(0, 1)


class TestLocalizedWeeks:
    """Tests that a week definition from a locale drives resolution."""

    def test_us_week_of_year(self) -> None:
        week_fields = WeekFields.of_locale("en_US")
        field_values = {week_fields.week_of_year: 10, ChronoField.YEAR: 2024, week_fields.day_of_week: 1}
        date = resolve_fields(field_values)
        assert date == LocalDate.of(2024, 3, 3)
        assert date.get(week_fields.day_of_week) == 1
        assert date.get(week_fields.week_of_year) == 10

    def test_iso_and_week_fields_agree_across_a_decade(self) -> None:
        """Test that ISO week numbering matches the Monday/4 week definition day by day."""
        week_fields = WeekFields.of_locale("de_DE")
        date = LocalDate.of(2015, 12, 1)
        while date < LocalDate.of(2026, 2, 1):
            assert date.get(iso.WEEK_OF_WEEK_BASED_YEAR) == date.get(week_fields.week_of_week_based_year), date
            assert date.get(iso.WEEK_BASED_YEAR) == date.get(week_fields.week_based_year), date
            date = date.plus(1, ChronoUnit.WEEKS).plus_days(1)


class TestAmountsAndFields:
    """Tests mixing amounts, adjusters and derived fields."""

    def test_period_between_quarter_starts(self) -> None:
        start = LocalDate.of(2024, 5, 15).with_field(iso.DAY_OF_QUARTER, 1)
        end = start.plus(2, iso.QUARTER_YEARS)
        assert (start, end) == (LocalDate.of(2024, 4, 1), LocalDate.of(2024, 10, 1))
        assert Period.between(start, end) == Period.of_months(6)
        assert start.until(end, ChronoUnit.DAYS) == 183

    def test_julian_day_arithmetic(self) -> None:
        date = LocalDate.of(2024, 2, 29)
        later = date.plus(Period.of_days(100))
        assert later.get_long(julian.JULIAN_DAY) - date.get_long(julian.JULIAN_DAY) == 100
        assert later.query(queries.local_date) == LocalDate.of(2024, 6, 8)
