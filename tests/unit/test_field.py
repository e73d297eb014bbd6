"""Unit tests for TemporalField and ChronoField."""

import pytest

from chronofield.calendar import LocalDate, LocalTime
from chronofield.exceptions import DateTimeError, UnsupportedTemporalTypeError
from chronofield.temporal import ChronoField, ChronoUnit, TemporalField, ValueRange


class TestChronoFieldDescriptors:
    """Tests for the values each ChronoField carries."""

    @pytest.mark.parametrize(
        ("field", "base_unit", "range_unit", "value_range"),
        [
            (ChronoField.NANO_OF_SECOND, ChronoUnit.NANOS, ChronoUnit.SECONDS, ValueRange.of(0, 999_999_999)),
            (ChronoField.CLOCK_HOUR_OF_AMPM, ChronoUnit.HOURS, ChronoUnit.HALF_DAYS, ValueRange.of(1, 12)),
            (ChronoField.DAY_OF_MONTH, ChronoUnit.DAYS, ChronoUnit.MONTHS, ValueRange.of(1, 28, 31)),
            (ChronoField.ALIGNED_WEEK_OF_MONTH, ChronoUnit.WEEKS, ChronoUnit.MONTHS, ValueRange.of(1, 4, 5)),
            (ChronoField.YEAR, ChronoUnit.YEARS, ChronoUnit.FOREVER, ValueRange.of(-999_999_999, 999_999_999)),
            (ChronoField.OFFSET_SECONDS, ChronoUnit.SECONDS, ChronoUnit.FOREVER, ValueRange.of(-64_800, 64_800)),
        ],
        ids=["nano_of_second", "clock_hour_of_ampm", "day_of_month", "aligned_week_of_month", "year", "offset"],
    )
    def test_units_and_range(
        self, field: ChronoField, base_unit: ChronoUnit, range_unit: ChronoUnit, value_range: ValueRange
    ) -> None:
        assert field.base_unit is base_unit
        assert field.range_unit is range_unit
        assert field.range == value_range

    @pytest.mark.parametrize(
        ("field", "date_based", "time_based"),
        [
            (ChronoField.NANO_OF_SECOND, False, True),
            (ChronoField.AMPM_OF_DAY, False, True),
            (ChronoField.DAY_OF_WEEK, True, False),
            (ChronoField.ERA, True, False),
            (ChronoField.INSTANT_SECONDS, False, False),
            (ChronoField.OFFSET_SECONDS, False, False),
        ],
        ids=["nano_of_second", "ampm", "day_of_week", "era", "instant_seconds", "offset_seconds"],
    )
    def test_classification(self, field: ChronoField, date_based: bool, time_based: bool) -> None:
        """Test that instant and offset fields are neither date- nor time-based."""
        assert field.is_date_based is date_based
        assert field.is_time_based is time_based

    def test_str_is_display_name(self) -> None:
        assert str(ChronoField.DAY_OF_MONTH) == "DayOfMonth"
        assert str(ChronoField.CLOCK_HOUR_OF_AMPM) == "ClockHourOfAmPm"

    def test_is_temporal_field(self) -> None:
        assert isinstance(ChronoField.YEAR, TemporalField)

    def test_members_are_distinct(self) -> None:
        """Test that no two fields collapse into an alias of each other."""
        assert ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH is not ChronoField.ALIGNED_DAY_OF_WEEK_IN_YEAR
        assert len(ChronoField) == 30


class TestChronoFieldValidation:
    """Tests for check_valid_value and check_valid_int_value."""

    def test_check_valid_value(self) -> None:
        assert ChronoField.HOUR_OF_DAY.check_valid_value(23) == 23
        with pytest.raises(DateTimeError, match="Invalid value for HourOfDay"):
            ChronoField.HOUR_OF_DAY.check_valid_value(24)

    def test_check_valid_int_value_on_long_field(self) -> None:
        with pytest.raises(DateTimeError, match="Invalid int value for ProlepticMonth"):
            ChronoField.PROLEPTIC_MONTH.check_valid_int_value(0)


class TestChronoFieldDelegation:
    """Tests for the TemporalField operations ChronoField delegates to the temporal."""

    def test_get_from(self, leap_day: LocalDate) -> None:
        assert ChronoField.DAY_OF_YEAR.get_from(leap_day) == 60

    def test_adjust_into(self, leap_day: LocalDate) -> None:
        assert ChronoField.MONTH_OF_YEAR.adjust_into(leap_day, 3) == LocalDate.of(2024, 3, 29)

    def test_range_refined_by(self) -> None:
        """Test that the refined range reflects the month of the temporal."""
        assert ChronoField.DAY_OF_MONTH.range_refined_by(LocalDate.of(2023, 2, 1)) == ValueRange.of(1, 28)
        assert ChronoField.DAY_OF_MONTH.range_refined_by(LocalDate.of(2023, 4, 1)) == ValueRange.of(1, 30)

    def test_is_supported_by(self) -> None:
        assert ChronoField.HOUR_OF_DAY.is_supported_by(LocalTime.of(1, 2))
        assert not ChronoField.HOUR_OF_DAY.is_supported_by(LocalDate.of(2024, 1, 1))

    def test_unsupported_range_raises(self) -> None:
        with pytest.raises(UnsupportedTemporalTypeError, match="Unsupported field: HourOfDay"):
            ChronoField.HOUR_OF_DAY.range_refined_by(LocalDate.of(2024, 1, 1))

    def test_resolve_is_a_no_op(self) -> None:
        """Test that standard fields leave the map to the chronology."""
        field_values = {ChronoField.YEAR: 2024}
        assert ChronoField.YEAR.resolve(field_values, LocalDate.of(2024, 1, 1), None) is None
        assert field_values == {ChronoField.YEAR: 2024}
