"""Unit tests for Duration."""

import logging
import pickle
import re
from collections.abc import Callable

import pytest

from chronofield.calendar import LocalDate, LocalTime
from chronofield.duration import Duration
from chronofield.exceptions import (
    ArithmeticOverflowError,
    DateTimeError,
    DateTimeParseError,
    InvalidArgumentError,
    UnsupportedTemporalTypeError,
)
from chronofield.period import Period
from chronofield.temporal import ChronoUnit, Temporal

# =============================================================================
# Test Constants
# =============================================================================

TEST_LONG_MAX = 2**63 - 1
TEST_NANOS_PER_SECOND = 1_000_000_000


class TestFactories:
    """Tests for Duration factories and normalisation."""

    def test_nanos_are_normalised_positive(self) -> None:
        """Test that a negative adjustment borrows from the seconds."""
        duration = Duration.of_seconds(3, -1)
        assert (duration.seconds, duration.nanos) == (2, 999_999_999)

    def test_negative_millis(self) -> None:
        duration = Duration.of_millis(-500)
        assert (duration.seconds, duration.nanos) == (-1, 500_000_000)

    def test_zero_is_shared(self) -> None:
        assert Duration.of_seconds(0) is Duration.ZERO
        assert Duration.of_nanos(0) is Duration.ZERO
        assert Duration.of_seconds(5).minus(Duration.of_seconds(5)) is Duration.ZERO

    @pytest.mark.parametrize(
        ("amount", "unit", "expected"),
        [
            (1, ChronoUnit.HOURS, Duration.of_hours(1)),
            (1, ChronoUnit.DAYS, Duration.of_days(1)),
            (1, ChronoUnit.MICROS, Duration.of_nanos(1_000)),
            (3, ChronoUnit.HALF_DAYS, Duration.of_hours(36)),
            (-2_500, ChronoUnit.MILLIS, Duration.of_millis(-2_500)),
        ],
        ids=["hours", "days", "micros", "half_days", "negative_millis"],
    )
    def test_of_unit(self, amount: int, unit: ChronoUnit, expected: Duration) -> None:
        assert Duration.of(amount, unit) == expected

    @pytest.mark.parametrize("unit", [ChronoUnit.WEEKS, ChronoUnit.MONTHS, ChronoUnit.FOREVER], ids=str)
    def test_of_estimated_unit_raises(self, unit: ChronoUnit) -> None:
        """Test that units longer than a day are rejected."""
        with pytest.raises(DateTimeError, match="Unit must not have an estimated duration"):
            Duration.of(1, unit)

    def test_from_amount_rejects_period(self) -> None:
        with pytest.raises(DateTimeError):
            Duration.from_amount(Period.of_years(1))

    def test_from_amount_copies_duration(self) -> None:
        assert Duration.from_amount(Duration.of_millis(1_500)) == Duration.of_millis(1_500)


class TestParse:
    """Tests for ISO-8601 duration parsing."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("PT20.345S", Duration.of_millis(20_345)),
            ("PT15M", Duration.of_minutes(15)),
            ("PT10H", Duration.of_hours(10)),
            ("P2D", Duration.of_days(2)),
            ("P2DT3H4M", Duration.of_seconds(2 * 86_400 + 3 * 3_600 + 4 * 60)),
            ("PT-6H3M", Duration.of_seconds(-21_420)),
            ("-PT6H3M", Duration.of_seconds(-21_780)),
            ("-PT-6H+3M", Duration.of_seconds(21_420)),
            ("PT-0.5S", Duration.of_millis(-500)),
            ("pt1s", Duration.of_seconds(1)),
            ("PT1,5S", Duration.of_millis(1_500)),
            ("PT0.000000001S", Duration.of_nanos(1)),
        ],
        ids=[
            "fraction",
            "minutes",
            "hours",
            "days",
            "days_and_time",
            "negative_hours",
            "negated_whole",
            "double_negation",
            "negative_half_second",
            "lower_case",
            "comma_fraction",
            "one_nano",
        ],
    )
    def test_parse_valid(self, text: str, expected: Duration) -> None:
        assert Duration.parse(text) == expected

    @pytest.mark.parametrize(
        "text",
        ["", "P", "PT", "P1DT", "P1Dt", "T1H", "P1Y", "PT1H2D", "PT1.S1", "PT0.1234567890S"],
        ids=[
            "empty",
            "bare_p",
            "bare_t",
            "trailing_t",
            "trailing_lower_t",
            "missing_p",
            "years",
            "wrong_order",
            "junk",
            "ten_digits",
        ],
    )
    def test_parse_invalid(self, text: str) -> None:
        with pytest.raises(DateTimeParseError, match="Text cannot be parsed to a Duration") as exc_info:
            Duration.parse(text)
        assert exc_info.value.parsed_text == text

    def test_parse_overflow_names_the_component(self) -> None:
        """Test that a seconds value past 64 bits reports which part failed."""
        text = f"PT{TEST_LONG_MAX + 1}S"
        with pytest.raises(DateTimeParseError, match="Text cannot be parsed to a Duration: seconds"):
            Duration.parse(text)


class TestFormatting:
    """Tests for ISO-8601 duration output."""

    @pytest.mark.parametrize(
        ("duration", "expected"),
        [
            (Duration.ZERO, "PT0S"),
            (Duration.of_days(2), "PT48H"),
            (Duration.of_seconds(29_172, 345_000_000), "PT8H6M12.345S"),
            (Duration.of_minutes(90), "PT1H30M"),
            (Duration.of_millis(-500), "PT-0.5S"),
            (Duration.of_seconds(-61, 500_000_000), "PT-1M-0.5S"),
            (Duration.of_nanos(1), "PT0.000000001S"),
        ],
        ids=["zero", "days_as_hours", "mixed", "no_seconds", "negative_fraction", "negative_mixed", "one_nano"],
    )
    def test_str(self, duration: Duration, expected: str) -> None:
        assert str(duration) == expected

    def test_str_round_trips(self) -> None:
        text = "PT8H6M12.345S"
        assert str(Duration.parse(text)) == text


class TestArithmetic:
    """Tests for duration arithmetic."""

    def test_plus_and_minus(self) -> None:
        duration = Duration.of_seconds(1, 600_000_000)
        assert duration.plus(Duration.of_millis(500)) == Duration.of_millis(2_100)
        assert duration - Duration.of_seconds(2) == Duration.of_millis(-400)

    def test_plus_overflow_raises(self) -> None:
        with pytest.raises(ArithmeticOverflowError):
            Duration.of_seconds(TEST_LONG_MAX).plus_seconds(1)

    def test_multiplied_by_overflow_raises(self) -> None:
        with pytest.raises(ArithmeticOverflowError):
            Duration.of_seconds(TEST_LONG_MAX).multiplied_by(2)

    @pytest.mark.parametrize(
        ("duration", "divisor", "expected"),
        [
            (Duration.of_seconds(10), 3, Duration.of_seconds(3, 333_333_333)),
            (Duration.of_seconds(-10), 3, Duration.of_nanos(-3_333_333_333)),
            (Duration.of_seconds(7), -7, Duration.of_seconds(-1)),
        ],
        ids=["positive", "negative", "negative_divisor"],
    )
    def test_divided_by_truncates(self, duration: Duration, divisor: int, expected: Duration) -> None:
        assert duration.divided_by(divisor) == expected

    def test_divided_by_zero_raises(self) -> None:
        with pytest.raises(ZeroDivisionError):
            Duration.of_seconds(1).divided_by(0)

    def test_negated_and_abs(self) -> None:
        duration = Duration.of_millis(-1_500)
        assert -duration == Duration.of_millis(1_500)
        assert abs(duration) == Duration.of_millis(1_500)
        assert duration.is_negative

    @pytest.mark.parametrize(
        ("duration", "minutes", "millis"),
        [
            (Duration.of_seconds(-90), -1, -90_000),
            (Duration.of_millis(-1_500), 0, -1_500),
            (Duration.of_seconds(150, 999_999), 2, 150_000),
        ],
        ids=["negative_minutes", "negative_millis", "sub_milli_truncated"],
    )
    def test_conversions(self, duration: Duration, minutes: int, millis: int) -> None:
        """Test that conversions truncate toward zero."""
        assert duration.to_minutes() == minutes
        assert duration.to_millis() == millis

    def test_ordering(self) -> None:
        durations = [Duration.of_seconds(1), Duration.ZERO, Duration.of_millis(-1)]
        assert sorted(durations) == [Duration.of_millis(-1), Duration.ZERO, Duration.of_seconds(1)]


class TestBetween:
    """Tests for Duration.between."""

    @pytest.mark.parametrize(
        ("start", "end", "expected"),
        [
            (LocalTime.of(10, 0), LocalTime.of(10, 0, 1, 500), Duration.of_seconds(1, 500)),
            (LocalTime.of(10, 0, 1, 500), LocalTime.of(10, 0), Duration.of_seconds(-1, -500)),
            (LocalTime.of(10, 0, 0, 900), LocalTime.of(10, 0, 1, 100), Duration.of_nanos(999_999_200)),
            (LocalTime.of(10, 0, 1, 100), LocalTime.of(10, 0, 0, 900), Duration.of_nanos(-999_999_200)),
        ],
        ids=["forward", "backward", "nanos_borrow", "nanos_borrow_backward"],
    )
    def test_between_times(self, start: LocalTime, end: LocalTime, expected: Duration) -> None:
        assert Duration.between(start, end) == expected

    def test_between_dates_unsupported(self) -> None:
        """Test that dates cannot be measured in seconds."""
        with pytest.raises(UnsupportedTemporalTypeError, match="Unsupported unit: Seconds"):
            Duration.between(LocalDate.of(2024, 1, 1), LocalDate.of(2024, 1, 2))

    @pytest.mark.parametrize(("start", "end"), [(10, 13), (13, 10), (10, 10)], ids=["forward", "backward", "same"])
    def test_unreadable_nanos_fall_back_to_whole_seconds(
        self,
        make_seconds_only_temporal: Callable[[int], Temporal],
        caplog: pytest.LogCaptureFixture,
        start: int,
        end: int,
    ) -> None:
        """Test that a failing nano-of-second lookup keeps the whole-second difference."""
        with caplog.at_level(logging.DEBUG, logger="chronofield.duration"):
            duration = Duration.between(make_seconds_only_temporal(start), make_seconds_only_temporal(end))
        assert duration == Duration.of_seconds(end - start)
        assert duration.nanos == 0
        assert "Falling back to whole seconds" in caplog.text


class TestTemporalAmount:
    """Tests for applying a duration to a temporal."""

    def test_add_to_time_wraps(self) -> None:
        assert LocalTime.of(23, 59, 59).plus(Duration.of_seconds(2)) == LocalTime.of(0, 0, 1)

    def test_subtract_from_time(self) -> None:
        assert LocalTime.of(0, 0).minus(Duration.of_millis(1)) == LocalTime.of(23, 59, 59, 999_000_000)

    def test_units_and_get(self) -> None:
        duration = Duration.of_millis(2_500)
        assert duration.units == (ChronoUnit.SECONDS, ChronoUnit.NANOS)
        assert duration.get(ChronoUnit.NANOS) == 500_000_000
        with pytest.raises(UnsupportedTemporalTypeError):
            duration.get(ChronoUnit.DAYS)


class TestSerialization:
    """Tests for pickling and the binary form."""

    def test_pickle_zero_is_canonical(self) -> None:
        assert pickle.loads(pickle.dumps(Duration.ZERO)) is Duration.ZERO

    def test_pickle_round_trip(self) -> None:
        duration = Duration.of_seconds(-61, 500_000_000)
        assert pickle.loads(pickle.dumps(duration)) == duration

    def test_bytes_round_trip(self) -> None:
        duration = Duration.of_seconds(-61, 500_000_000)
        data = duration.to_bytes()
        assert len(data) == 12
        assert Duration.from_bytes(data) == duration

    def test_bytes_wrong_length(self) -> None:
        with pytest.raises(InvalidArgumentError, match=re.escape("Duration requires 12 bytes, got 11")):
            Duration.from_bytes(b"\x00" * 11)
