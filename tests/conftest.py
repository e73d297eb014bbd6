"""Shared test fixtures for pyChronoField tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from chronofield.calendar import LocalDate
from chronofield.exceptions import DateTimeError, UnsupportedTemporalTypeError
from chronofield.temporal import ChronoField, ChronoUnit, Temporal


class ProbeTemporal(Temporal):
    """Temporal that only answers plus(), for exercising unit support probing.

    It does not publish ``supported_units``, so units must probe it. Every
    call to plus() is recorded in ``calls``.
    """

    def __init__(self, accepts: Callable[[int, Any], bool]) -> None:
        self._accepts = accepts
        self.calls: list[tuple[int, Any]] = []

    def is_supported(self, field: Any) -> bool:
        return False

    def get_long(self, field: Any) -> int:
        raise UnsupportedTemporalTypeError(f"Unsupported field: {field}")

    def with_field(self, field: Any, new_value: int) -> ProbeTemporal:
        raise UnsupportedTemporalTypeError(f"Unsupported field: {field}")

    def plus(self, amount: Any, unit: Any = None) -> ProbeTemporal:
        self.calls.append((amount, unit))
        if self._accepts(amount, unit):
            return self
        raise DateTimeError(f"Cannot add {amount} {unit}")

    def until(self, end: Any, unit: Any) -> int:
        raise UnsupportedTemporalTypeError(f"Unsupported unit: {unit}")

    def __repr__(self) -> str:
        return "ProbeTemporal()"


class SecondsOnlyTemporal(Temporal):
    """Temporal counting whole seconds that advertises, but cannot read, nano-of-second."""

    def __init__(self, seconds: int) -> None:
        self.seconds = seconds

    def is_supported(self, field: Any) -> bool:
        return field is ChronoField.NANO_OF_SECOND or field is ChronoUnit.SECONDS

    def get_long(self, field: Any) -> int:
        raise DateTimeError(f"Field {field} is not available")

    def with_field(self, field: Any, new_value: int) -> SecondsOnlyTemporal:
        raise DateTimeError(f"Field {field} is not available")

    def plus(self, amount: Any, unit: Any = None) -> SecondsOnlyTemporal:
        if unit is ChronoUnit.SECONDS:
            return SecondsOnlyTemporal(self.seconds + amount)
        raise UnsupportedTemporalTypeError(f"Unsupported unit: {unit}")

    def until(self, end: Any, unit: Any) -> int:
        if unit is ChronoUnit.SECONDS:
            return end.seconds - self.seconds
        raise UnsupportedTemporalTypeError(f"Unsupported unit: {unit}")

    def __repr__(self) -> str:
        return f"SecondsOnlyTemporal({self.seconds})"


@pytest.fixture
def make_probe_temporal() -> Callable[[Callable[[int, Any], bool]], ProbeTemporal]:
    """Factory for temporals that accept plus() calls matching a predicate."""
    return ProbeTemporal


@pytest.fixture
def make_seconds_only_temporal() -> Callable[[int], SecondsOnlyTemporal]:
    """Factory for temporals whose nano-of-second lookups fail."""
    return SecondsOnlyTemporal


@pytest.fixture
def leap_day() -> LocalDate:
    """2024-02-29, a Thursday."""
    return LocalDate.of(2024, 2, 29)


@pytest.fixture
def iso_week_boundary() -> dict[LocalDate, tuple[int, int]]:
    """Dates around the 2008/2009 ISO week-based-year boundary.

    Maps each date to its (week-of-week-based-year, week-based-year).
    """
    return {
        LocalDate.of(2008, 12, 28): (52, 2008),  # Sunday
        LocalDate.of(2008, 12, 29): (1, 2009),  # Monday
        LocalDate.of(2008, 12, 31): (1, 2009),  # Wednesday
        LocalDate.of(2009, 1, 1): (1, 2009),  # Thursday
        LocalDate.of(2009, 1, 4): (1, 2009),  # Sunday
        LocalDate.of(2009, 1, 5): (2, 2009),  # Monday
        LocalDate.of(2005, 1, 1): (53, 2004),  # Saturday
        LocalDate.of(2010, 1, 3): (53, 2009),  # Sunday
    }
