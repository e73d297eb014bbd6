"""Units of date-time measurement.

``TemporalUnit`` is the abstract contract every unit implements, and
``ChronoUnit`` is the standard set of units from nanoseconds to eras. Units
are ordered from shortest to longest estimated duration.

Reference: ISO-8601 calendar system
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum
from functools import cached_property
from typing import TYPE_CHECKING, Any

from ..constants import (
    LONG_MAX,
    NANOS_PER_MILLI,
    SECONDS_PER_AVERAGE_YEAR,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from ..exceptions import ArithmeticOverflowError, DateTimeError

if TYPE_CHECKING:
    from ..duration import Duration
    from .accessor import Temporal

logger = logging.getLogger(__name__)


class TemporalUnit(ABC):
    """A unit of date-time, such as days or hours.

    Implementations must be immutable. A unit either has an exact duration or
    an estimated one; date-based units are estimated because the length of a
    month or year varies.
    """

    @property
    @abstractmethod
    def duration(self) -> Duration:
        """Duration of the unit, which may be an estimate."""

    @property
    @abstractmethod
    def is_duration_estimated(self) -> bool: ...

    @property
    @abstractmethod
    def is_date_based(self) -> bool: ...

    @property
    @abstractmethod
    def is_time_based(self) -> bool: ...

    @abstractmethod
    def is_supported_by(self, temporal: Temporal) -> bool:
        """Check whether the temporal object can be added to in this unit."""

    @abstractmethod
    def add_to(self, temporal: Temporal, amount: int) -> Temporal:
        """Return a copy of temporal with amount of this unit added."""

    @abstractmethod
    def between(self, temporal1: Temporal, temporal2: Temporal) -> int:
        """Whole number of this unit between two temporals, truncated toward zero."""


class ChronoUnit(Enum):
    """Standard set of date-time units.

    Each member carries its display name and its (possibly estimated)
    duration as ``(seconds, nanos)``.
    """

    NANOS = ("Nanos", 0, 1)
    MICROS = ("Micros", 0, 1_000)
    MILLIS = ("Millis", 0, NANOS_PER_MILLI)
    SECONDS = ("Seconds", 1, 0)
    MINUTES = ("Minutes", SECONDS_PER_MINUTE, 0)
    HOURS = ("Hours", SECONDS_PER_HOUR, 0)
    HALF_DAYS = ("HalfDays", SECONDS_PER_DAY // 2, 0)
    DAYS = ("Days", SECONDS_PER_DAY, 0)
    WEEKS = ("Weeks", 7 * SECONDS_PER_DAY, 0)
    MONTHS = ("Months", SECONDS_PER_AVERAGE_YEAR // 12, 0)
    YEARS = ("Years", SECONDS_PER_AVERAGE_YEAR, 0)
    DECADES = ("Decades", SECONDS_PER_AVERAGE_YEAR * 10, 0)
    CENTURIES = ("Centuries", SECONDS_PER_AVERAGE_YEAR * 100, 0)
    MILLENNIA = ("Millennia", SECONDS_PER_AVERAGE_YEAR * 1_000, 0)
    ERAS = ("Eras", SECONDS_PER_AVERAGE_YEAR * 1_000_000_000, 0)
    FOREVER = ("Forever", LONG_MAX, 999_999_999)

    def __init__(self, display_name: str, seconds: int, nanos: int) -> None:
        self.display_name = display_name
        self._seconds = seconds
        self._nanos = nanos

    @cached_property
    def duration(self) -> Duration:
        from ..duration import Duration

        return Duration.of_seconds(self._seconds, self._nanos)

    @property
    def ordinal(self) -> int:
        return _UNIT_ORDINALS[self]

    @property
    def is_duration_estimated(self) -> bool:
        """Date-based units and FOREVER have estimated durations."""
        return self.is_date_based or self is ChronoUnit.FOREVER

    @property
    def is_date_based(self) -> bool:
        return self.ordinal >= ChronoUnit.DAYS.ordinal and self is not ChronoUnit.FOREVER

    @property
    def is_time_based(self) -> bool:
        return self.ordinal < ChronoUnit.DAYS.ordinal

    def is_supported_by(self, temporal: Any) -> bool:
        """Check whether temporal can be added to in this unit.

        Temporals that publish ``supported_units`` are answered from it. Any
        other temporal is probed by adding one unit, then subtracting one.
        """
        if self is ChronoUnit.FOREVER:
            return False
        supported = getattr(temporal, "supported_units", None)
        if supported is not None:
            return self in supported
        try:
            temporal.plus(1, self)
            return True
        except (DateTimeError, ArithmeticOverflowError):
            try:
                temporal.plus(-1, self)
                return True
            except (DateTimeError, ArithmeticOverflowError) as ex:
                logger.debug("Probe of %s against %r failed: %s", self, temporal, ex)
                return False

    def add_to(self, temporal: Temporal, amount: int) -> Temporal:
        return temporal.plus(amount, self)

    def between(self, temporal1: Temporal, temporal2: Temporal) -> int:
        return temporal1.until(temporal2, self)

    def __str__(self) -> str:
        return self.display_name


TemporalUnit.register(ChronoUnit)

_UNIT_ORDINALS: dict[ChronoUnit, int] = {unit: index for index, unit in enumerate(ChronoUnit)}
