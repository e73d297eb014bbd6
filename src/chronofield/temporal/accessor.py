"""Capability interfaces for date-time objects.

These abstract classes describe what the field and unit layer needs from a
date-time object: read access (``TemporalAccessor``), adjustment and
arithmetic (``Temporal``), amounts of time (``TemporalAmount``) and
adjustment strategies (``TemporalAdjuster``). Default behaviour is provided
where it can be expressed in terms of the abstract methods.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Self

from ..exceptions import UnsupportedTemporalTypeError
from . import query as queries
from .field import ChronoField, TemporalField
from .range import ValueRange
from .unit import TemporalUnit


class TemporalAccessor(ABC):
    """Read-only access to the fields of a date-time object."""

    @abstractmethod
    def is_supported(self, field: TemporalField | TemporalUnit | None) -> bool:
        """Check whether a field (or unit, for ``Temporal``) is supported."""

    @abstractmethod
    def get_long(self, field: TemporalField) -> int:
        """Get the value of a field as a 64-bit integer.

        Raises:
            UnsupportedTemporalTypeError: If the field is not supported
        """

    def range(self, field: TemporalField) -> ValueRange:
        """Get the range of valid values for a field in the context of this object."""
        if isinstance(field, ChronoField):
            if self.is_supported(field):
                return field.range
            raise UnsupportedTemporalTypeError(f"Unsupported field: {field}")
        return field.range_refined_by(self)

    def get(self, field: TemporalField) -> int:
        """Get the value of a field, requiring it to fit a 32-bit integer."""
        return self.range(field).check_valid_int_value(self.get_long(field), field)

    def query(self, query: Callable[[TemporalAccessor], Any]) -> Any:
        """Answer a query; see ``chronofield.temporal.query``."""
        if query in (queries.zone_id, queries.chronology, queries.precision):
            return None
        return query(self)


class Temporal(TemporalAccessor):
    """A date-time object that supports adjustment and arithmetic."""

    @abstractmethod
    def with_field(self, field: TemporalField, new_value: int) -> Self:
        """Return a copy with the field set to new_value."""

    @abstractmethod
    def plus(self, amount: Any, unit: TemporalUnit | None = None) -> Self:
        """Return a copy with an amount added.

        With a unit, amount is an integer count of that unit. Without one,
        amount is a ``TemporalAmount`` such as a ``Duration`` or ``Period``.
        """

    @abstractmethod
    def until(self, end: Temporal, unit: TemporalUnit) -> int:
        """Whole units from this object to end, truncated toward zero."""

    def minus(self, amount: Any, unit: TemporalUnit | None = None) -> Self:
        if unit is None:
            return amount.subtract_from(self)
        return self.plus(-amount, unit)

    def adjust(self, adjuster: TemporalAdjuster) -> Self:
        """Return a copy adjusted by the strategy, such as "last day of month"."""
        return adjuster.adjust_into(self)


class TemporalAmount(ABC):
    """An amount of time, such as "6 hours" or "1 year 2 months"."""

    @property
    @abstractmethod
    def units(self) -> tuple[TemporalUnit, ...]:
        """Units this amount is expressed in, longest first."""

    @abstractmethod
    def get(self, unit: TemporalUnit) -> int: ...

    @abstractmethod
    def add_to(self, temporal: Temporal) -> Temporal: ...

    @abstractmethod
    def subtract_from(self, temporal: Temporal) -> Temporal: ...


class TemporalAdjuster(ABC):
    """Strategy for adjusting a temporal object."""

    @abstractmethod
    def adjust_into(self, temporal: Temporal) -> Temporal: ...
