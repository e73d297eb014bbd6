"""Unit tests for the LocalDate collaborator."""

import re

import pytest

from chronofield.calendar import DayOfWeek, LocalDate, LocalTime
from chronofield.exceptions import DateTimeError, UnsupportedTemporalTypeError
from chronofield.period import Period
from chronofield.temporal import ChronoField, ChronoUnit, ValueRange
from chronofield.temporal import query as queries

# =============================================================================
# Test Constants - Duplicated from src for test isolation
# =============================================================================

TEST_MIN_EPOCH_DAY = -365_243_219_162
TEST_MAX_EPOCH_DAY = 365_241_780_471


class TestEpochDay:
    """Tests for conversion to and from the epoch-day count."""

    @pytest.mark.parametrize(
        ("date", "epoch_day"),
        [
            (LocalDate.of(1970, 1, 1), 0),
            (LocalDate.of(1969, 12, 31), -1),
            (LocalDate.of(2000, 1, 1), 10_957),
            (LocalDate.of(2008, 12, 29), 14_242),
            (LocalDate.of(0, 1, 1), -719_528),
            (LocalDate.of(-1, 12, 31), -719_529),
            (LocalDate.MIN, TEST_MIN_EPOCH_DAY),
            (LocalDate.MAX, TEST_MAX_EPOCH_DAY),
        ],
        ids=["epoch", "day_before", "y2k", "week_boundary", "year_zero", "year_minus_one", "min", "max"],
    )
    def test_conversion(self, date: LocalDate, epoch_day: int) -> None:
        """Test both directions of the epoch-day conversion."""
        assert date.to_epoch_day() == epoch_day
        assert LocalDate.of_epoch_day(epoch_day) == date

    def test_outside_range_raises(self) -> None:
        with pytest.raises(DateTimeError, match="Invalid value for Year"):
            LocalDate.of_epoch_day(TEST_MAX_EPOCH_DAY + 1)


class TestConstruction:
    """Tests for date validation."""

    @pytest.mark.parametrize(
        ("year", "month", "day", "message"),
        [
            (2023, 2, 29, "Invalid date 'February 29' as '2023' is not a leap year"),
            (2023, 4, 31, "Invalid date 'APRIL 31'"),
            (2023, 13, 1, "Invalid value for MonthOfYear"),
            (2023, 1, 32, "Invalid value for DayOfMonth"),
        ],
        ids=["not_leap", "short_month", "bad_month", "bad_day"],
    )
    def test_invalid_dates_raise(self, year: int, month: int, day: int, message: str) -> None:
        with pytest.raises(DateTimeError, match=re.escape(message)):
            LocalDate.of(year, month, day)

    def test_of_year_day(self) -> None:
        assert LocalDate.of_year_day(2024, 60) == LocalDate.of(2024, 2, 29)
        assert LocalDate.of_year_day(2023, 60) == LocalDate.of(2023, 3, 1)
        assert LocalDate.of_year_day(2024, 366) == LocalDate.of(2024, 12, 31)

    def test_of_year_day_366_in_standard_year(self) -> None:
        with pytest.raises(DateTimeError, match="not a leap year"):
            LocalDate.of_year_day(2023, 366)

    def test_from_temporal_without_date(self) -> None:
        with pytest.raises(DateTimeError, match="Unable to obtain LocalDate"):
            LocalDate.from_temporal(LocalTime.of(10, 0))


class TestFieldAccess:
    """Tests for reading fields."""

    @pytest.mark.parametrize(
        ("field", "expected"),
        [
            (ChronoField.DAY_OF_WEEK, 4),
            (ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH, 1),
            (ChronoField.ALIGNED_DAY_OF_WEEK_IN_YEAR, 4),
            (ChronoField.DAY_OF_MONTH, 29),
            (ChronoField.DAY_OF_YEAR, 60),
            (ChronoField.ALIGNED_WEEK_OF_MONTH, 5),
            (ChronoField.ALIGNED_WEEK_OF_YEAR, 9),
            (ChronoField.MONTH_OF_YEAR, 2),
            (ChronoField.PROLEPTIC_MONTH, 24_289),
            (ChronoField.YEAR_OF_ERA, 2024),
            (ChronoField.YEAR, 2024),
            (ChronoField.ERA, 1),
        ],
        ids=lambda value: str(value),
    )
    def test_get_long(self, leap_day: LocalDate, field: ChronoField, expected: int) -> None:
        assert leap_day.get_long(field) == expected

    def test_year_zero_is_before_common_era(self) -> None:
        """Test that year 0 is year 1 of era 0."""
        date = LocalDate.of(0, 6, 1)
        assert date.get(ChronoField.YEAR_OF_ERA) == 1
        assert date.get(ChronoField.ERA) == 0

    def test_day_of_week(self, leap_day: LocalDate) -> None:
        assert leap_day.day_of_week is DayOfWeek.THURSDAY
        assert LocalDate.of(1970, 1, 1).day_of_week is DayOfWeek.THURSDAY

    def test_time_field_unsupported(self, leap_day: LocalDate) -> None:
        assert not leap_day.is_supported(ChronoField.HOUR_OF_DAY)
        with pytest.raises(UnsupportedTemporalTypeError, match="Unsupported field: HourOfDay"):
            leap_day.get_long(ChronoField.HOUR_OF_DAY)

    @pytest.mark.parametrize(
        ("date", "field", "expected"),
        [
            (LocalDate.of(2023, 2, 10), ChronoField.DAY_OF_MONTH, ValueRange.of(1, 28)),
            (LocalDate.of(2024, 2, 10), ChronoField.DAY_OF_MONTH, ValueRange.of(1, 29)),
            (LocalDate.of(2023, 6, 10), ChronoField.DAY_OF_YEAR, ValueRange.of(1, 365)),
            (LocalDate.of(2023, 2, 10), ChronoField.ALIGNED_WEEK_OF_MONTH, ValueRange.of(1, 4)),
            (LocalDate.of(2024, 2, 10), ChronoField.ALIGNED_WEEK_OF_MONTH, ValueRange.of(1, 5)),
            (LocalDate.of(-5, 1, 1), ChronoField.YEAR_OF_ERA, ValueRange.of(1, 1_000_000_000)),
            (LocalDate.of(2023, 2, 10), ChronoField.MONTH_OF_YEAR, ValueRange.of(1, 12)),
        ],
        ids=["feb_standard", "feb_leap", "day_of_year", "aligned_week_feb", "aligned_week_leap", "bce", "month"],
    )
    def test_range(self, date: LocalDate, field: ChronoField, expected: ValueRange) -> None:
        assert date.range(field) == expected

    def test_queries(self, leap_day: LocalDate) -> None:
        assert leap_day.query(queries.local_date) is leap_day
        assert leap_day.query(queries.precision) is ChronoUnit.DAYS
        assert leap_day.query(queries.local_time) is None
        assert str(leap_day.query(queries.chronology)) == "ISO"


class TestAdjustment:
    """Tests for with_field and adjusters."""

    @pytest.mark.parametrize(
        ("field", "value", "expected"),
        [
            (ChronoField.DAY_OF_WEEK, 1, LocalDate.of(2024, 2, 26)),
            (ChronoField.DAY_OF_MONTH, 1, LocalDate.of(2024, 2, 1)),
            (ChronoField.DAY_OF_YEAR, 1, LocalDate.of(2024, 1, 1)),
            (ChronoField.MONTH_OF_YEAR, 4, LocalDate.of(2024, 4, 29)),
            (ChronoField.YEAR, 2023, LocalDate.of(2023, 2, 28)),
            (ChronoField.EPOCH_DAY, 0, LocalDate.of(1970, 1, 1)),
            (ChronoField.ALIGNED_WEEK_OF_MONTH, 1, LocalDate.of(2024, 2, 1)),
            (ChronoField.PROLEPTIC_MONTH, 24_288, LocalDate.of(2024, 1, 29)),
            (ChronoField.ERA, 0, LocalDate.of(-2023, 2, 28)),
        ],
        ids=lambda value: str(value),
    )
    def test_with_field(self, leap_day: LocalDate, field: ChronoField, value: int, expected: LocalDate) -> None:
        assert leap_day.with_field(field, value) == expected

    def test_with_field_out_of_range(self, leap_day: LocalDate) -> None:
        with pytest.raises(DateTimeError, match="Invalid value for DayOfWeek"):
            leap_day.with_field(ChronoField.DAY_OF_WEEK, 8)

    def test_day_of_week_as_adjuster(self, leap_day: LocalDate) -> None:
        assert leap_day.adjust(DayOfWeek.SUNDAY) == LocalDate.of(2024, 3, 3)


class TestArithmetic:
    """Tests for plus, minus and until."""

    @pytest.mark.parametrize(
        ("amount", "unit", "expected"),
        [
            (1, ChronoUnit.DAYS, LocalDate.of(2024, 3, 1)),
            (-2, ChronoUnit.WEEKS, LocalDate.of(2024, 2, 15)),
            (1, ChronoUnit.MONTHS, LocalDate.of(2024, 3, 29)),
            (1, ChronoUnit.YEARS, LocalDate.of(2025, 2, 28)),
            (4, ChronoUnit.YEARS, LocalDate.of(2028, 2, 29)),
            (1, ChronoUnit.DECADES, LocalDate.of(2034, 2, 28)),
            (1, ChronoUnit.CENTURIES, LocalDate.of(2124, 2, 29)),
            (1, ChronoUnit.MILLENNIA, LocalDate.of(3024, 2, 29)),
        ],
        ids=["days", "weeks", "months", "year_clamps", "leap_to_leap", "decades", "centuries", "millennia"],
    )
    def test_plus(self, leap_day: LocalDate, amount: int, unit: ChronoUnit, expected: LocalDate) -> None:
        assert leap_day.plus(amount, unit) == expected

    def test_minus(self, leap_day: LocalDate) -> None:
        assert leap_day.minus(1, ChronoUnit.MONTHS) == LocalDate.of(2024, 1, 29)

    def test_plus_time_unit_unsupported(self, leap_day: LocalDate) -> None:
        with pytest.raises(UnsupportedTemporalTypeError, match="Unsupported unit: Hours"):
            leap_day.plus(1, ChronoUnit.HOURS)

    def test_plus_beyond_max_raises(self) -> None:
        with pytest.raises(DateTimeError):
            LocalDate.MAX.plus(1, ChronoUnit.DAYS)

    @pytest.mark.parametrize(
        ("start", "end", "unit", "expected"),
        [
            (LocalDate.of(2024, 1, 1), LocalDate.of(2024, 3, 1), ChronoUnit.DAYS, 60),
            (LocalDate.of(2024, 1, 1), LocalDate.of(2024, 1, 14), ChronoUnit.WEEKS, 1),
            (LocalDate.of(2024, 1, 14), LocalDate.of(2024, 1, 1), ChronoUnit.WEEKS, -1),
            (LocalDate.of(2024, 1, 15), LocalDate.of(2024, 3, 14), ChronoUnit.MONTHS, 1),
            (LocalDate.of(2024, 3, 14), LocalDate.of(2024, 1, 15), ChronoUnit.MONTHS, -1),
            (LocalDate.of(2000, 1, 1), LocalDate.of(2100, 1, 1), ChronoUnit.CENTURIES, 1),
            (LocalDate.of(-1, 1, 1), LocalDate.of(1, 1, 1), ChronoUnit.ERAS, 1),
        ],
        ids=["days", "weeks", "negative_weeks", "months", "negative_months", "centuries", "eras"],
    )
    def test_until_unit(self, start: LocalDate, end: LocalDate, unit: ChronoUnit, expected: int) -> None:
        assert start.until(end, unit) == expected

    @pytest.mark.parametrize(
        ("start", "end", "expected"),
        [
            (LocalDate.of(2024, 1, 15), LocalDate.of(2025, 3, 10), Period.of(1, 1, 23)),
            (LocalDate.of(2025, 3, 10), LocalDate.of(2024, 1, 15), Period.of(-1, -1, -26)),
            (LocalDate.of(2024, 1, 31), LocalDate.of(2024, 2, 29), Period.of(0, 0, 29)),
            (LocalDate.of(2024, 5, 5), LocalDate.of(2024, 5, 5), Period.ZERO),
        ],
        ids=["forward", "backward", "end_of_month", "same_day"],
    )
    def test_until_period(self, start: LocalDate, end: LocalDate, expected: Period) -> None:
        """Test the years, months and days decomposition."""
        assert start.until(end) == expected


class TestFormatting:
    """Tests for ISO text output."""

    @pytest.mark.parametrize(
        ("date", "expected"),
        [
            (LocalDate.of(2024, 2, 9), "2024-02-09"),
            (LocalDate.of(12_345, 1, 1), "+12345-01-01"),
            (LocalDate.of(-1, 1, 1), "-0001-01-01"),
            (LocalDate.of(-12_345, 1, 1), "-12345-01-01"),
            (LocalDate.of(33, 7, 4), "0033-07-04"),
        ],
        ids=["standard", "large_year", "negative_year", "large_negative", "small_year"],
    )
    def test_str(self, date: LocalDate, expected: str) -> None:
        assert str(date) == expected

    def test_ordering(self) -> None:
        assert LocalDate.of(2024, 1, 31) < LocalDate.of(2024, 2, 1) < LocalDate.of(2025, 1, 1)
