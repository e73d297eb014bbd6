"""Days of the week, numbered from Monday (1) to Sunday (7)."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from ..exceptions import DateTimeError
from ..temporal.field import ChronoField

if TYPE_CHECKING:
    from ..temporal.accessor import Temporal, TemporalAccessor


class DayOfWeek(Enum):
    """ISO-8601 day of week."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @classmethod
    def of(cls, day_of_week: int) -> DayOfWeek:
        """Look up a day by its ISO number.

        Raises:
            DateTimeError: If day_of_week is not 1 to 7
        """
        if not 1 <= day_of_week <= 7:
            raise DateTimeError(f"Invalid value for DayOfWeek: {day_of_week}")
        return cls(day_of_week)

    @classmethod
    def from_temporal(cls, temporal: TemporalAccessor) -> DayOfWeek:
        return cls.of(temporal.get(ChronoField.DAY_OF_WEEK))

    @property
    def ordinal(self) -> int:
        """Zero-based position, Monday being 0."""
        return self.value - 1

    def plus(self, days: int) -> DayOfWeek:
        return _DAYS[(self.ordinal + days % 7) % 7]

    def minus(self, days: int) -> DayOfWeek:
        return self.plus(-(days % 7))

    def adjust_into(self, temporal: Temporal) -> Temporal:
        """Move temporal to this day within its Monday-based week."""
        return temporal.with_field(ChronoField.DAY_OF_WEEK, self.value)


_DAYS: tuple[DayOfWeek, ...] = tuple(DayOfWeek)
