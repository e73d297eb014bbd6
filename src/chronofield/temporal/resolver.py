"""Multi-field resolution and lookup of built-in fields and units by name.

``resolve_fields`` turns a sparse map of field values into a date, the way a
parser would after reading text such as "2009-W01-1". Fields outside the
standard ``ChronoField`` set (IsoFields, WeekFields, JulianFields) are offered
their ``resolve`` hook first; each hook removes the keys it consumes, so the
loop runs until no hook makes progress. The remaining standard fields are then
combined by the chronology, and any date fields still left over are checked
for consistency with the date.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

from ..calendar.chronology import ISO, IsoChronology
from ..calendar.local_date import LocalDate
from ..exceptions import DateTimeError, InvalidArgumentError, UnsupportedTemporalTypeError
from . import iso, julian
from . import query as queries
from .accessor import TemporalAccessor
from .common import ResolverStyle
from .field import ChronoField, TemporalField
from .unit import ChronoUnit, TemporalUnit

logger = logging.getLogger(__name__)

# Upper bound on resolve passes; a well-behaved hook always shrinks the map
_MAX_RESOLVE_PASSES = 100


class _FieldValuesAccessor(TemporalAccessor):
    """Read-only view of the field values still awaiting resolution."""

    def __init__(self, field_values: dict[Any, int], chronology: IsoChronology) -> None:
        self._field_values = field_values
        self._chronology = chronology

    def is_supported(self, field: Any) -> bool:
        return field in self._field_values

    def get_long(self, field: TemporalField) -> int:
        try:
            return self._field_values[field]
        except KeyError:
            raise UnsupportedTemporalTypeError(f"Unsupported field: {field}") from None

    def query(self, query: Any) -> Any:
        if query is queries.chronology:
            return self._chronology
        return super().query(query)


def resolve_fields(
    field_values: dict[Any, int],
    resolver_style: ResolverStyle = ResolverStyle.SMART,
    chronology: IsoChronology = ISO,
) -> LocalDate | None:
    """Resolve field values into a date.

    The map is updated in place: every field used to build or cross-check the
    date is removed, leaving only fields that play no part in the date (for
    example time-of-day fields).

    Args:
        field_values: Mutable map of field to value
        resolver_style: How strictly out-of-range and inconsistent values are treated
        chronology: Calendar system used to build dates

    Returns:
        The resolved date, or None if the fields do not identify a date

    Raises:
        DateTimeError: If values are invalid or conflict with each other
    """
    partial = _FieldValuesAccessor(field_values, chronology)
    date: LocalDate | None = None

    for _ in range(_MAX_RESOLVE_PASSES):
        progressed, date = _resolve_one(field_values, partial, resolver_style, date)
        if not progressed:
            break
    else:
        raise DateTimeError("One of the fields has an incorrectly implemented resolve method")

    date = _merge(date, chronology.resolve_date(field_values, resolver_style))
    if date is not None:
        _cross_check(date, field_values)
    return date


def _resolve_one(
    field_values: dict[Any, int],
    partial: TemporalAccessor,
    resolver_style: ResolverStyle,
    date: LocalDate | None,
) -> tuple[bool, LocalDate | None]:
    """Offer each non-standard field its resolve hook until one makes progress."""
    for field in list(field_values):
        if isinstance(field, ChronoField) or field not in field_values:
            continue
        before = dict(field_values)
        resolved = field.resolve(field_values, partial, resolver_style)
        if resolved is not None:
            return True, _merge(date, LocalDate.from_temporal(resolved))
        if field_values != before:
            return True, date
    return False, date


def _merge(date: LocalDate | None, resolved: LocalDate | None) -> LocalDate | None:
    if date is None:
        return resolved
    if resolved is not None and resolved != date:
        raise DateTimeError(f"Conflict found: Fields resolved to two different dates: {date} {resolved}")
    return date


def _cross_check(date: LocalDate, field_values: dict[Any, int]) -> None:
    for field in list(field_values):
        if not field.is_date_based or not date.is_supported(field):
            continue
        value1 = date.get_long(field)
        value2 = field_values[field]
        if value1 != value2:
            raise DateTimeError(
                f"Conflict found: Field {field} {value1} differs from {field} {value2} derived from {date}"
            )
        del field_values[field]
        logger.debug("Cross-checked %s=%d against %s", field, value2, date)


# =============================================================================
# Lookup by name
# =============================================================================


def _named_fields() -> dict[str, TemporalField]:
    names: dict[str, TemporalField] = {}
    for chrono_field in ChronoField:
        names[chrono_field.name] = chrono_field
        names[chrono_field.display_name] = chrono_field
    for constant_name in ("DAY_OF_QUARTER", "QUARTER_OF_YEAR", "WEEK_OF_WEEK_BASED_YEAR", "WEEK_BASED_YEAR"):
        field = getattr(iso, constant_name)
        names[constant_name] = field
        names[str(field)] = field
    for constant_name in ("JULIAN_DAY", "MODIFIED_JULIAN_DAY", "RATA_DIE"):
        field = getattr(julian, constant_name)
        names[constant_name] = field
        names[str(field)] = field
    return names


def _named_units() -> dict[str, TemporalUnit]:
    names: dict[str, TemporalUnit] = {}
    for chrono_unit in ChronoUnit:
        names[chrono_unit.name] = chrono_unit
        names[chrono_unit.display_name] = chrono_unit
    for constant_name in ("WEEK_BASED_YEARS", "QUARTER_YEARS"):
        unit = getattr(iso, constant_name)
        names[constant_name] = unit
        names[str(unit)] = unit
    return names


@lru_cache(maxsize=128)
def field_by_name(name: str) -> TemporalField:
    """Find a built-in field by constant name ("DAY_OF_QUARTER") or display name ("DayOfQuarter").

    Raises:
        InvalidArgumentError: If no built-in field has that name
    """
    try:
        return _named_fields()[name]
    except KeyError:
        raise InvalidArgumentError(f"Unknown field name: {name}") from None


@lru_cache(maxsize=128)
def unit_by_name(name: str) -> TemporalUnit:
    """Find a built-in unit by constant name ("QUARTER_YEARS") or display name ("QuarterYears").

    Raises:
        InvalidArgumentError: If no built-in unit has that name
    """
    try:
        return _named_units()[name]
    except KeyError:
        raise InvalidArgumentError(f"Unknown unit name: {name}") from None
