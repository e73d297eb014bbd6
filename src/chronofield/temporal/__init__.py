"""Field and unit layer.

This package contains the temporal field, unit and range model, the derived
ISO, week-based and Julian fields, queries, adjusters and the resolution
driver.

Reference: ISO-8601:2004
"""

from .common import ResolverStyle
from .range import ValueRange
from .unit import ChronoUnit, TemporalUnit
from .field import ChronoField, TemporalField
from . import query
from .accessor import Temporal, TemporalAccessor, TemporalAdjuster, TemporalAmount
from . import iso, julian
from .week import ComputedDayOfField, WeekFields
from . import adjusters
from .resolver import field_by_name, resolve_fields, unit_by_name

__all__ = [
    # Common types
    "ResolverStyle",
    "ValueRange",
    # Units and fields
    "ChronoField",
    "ChronoUnit",
    "TemporalField",
    "TemporalUnit",
    # Capability interfaces
    "Temporal",
    "TemporalAccessor",
    "TemporalAdjuster",
    "TemporalAmount",
    # Derived fields
    "ComputedDayOfField",
    "WeekFields",
    "iso",
    "julian",
    # Queries, adjusters and resolution
    "adjusters",
    "field_by_name",
    "query",
    "resolve_fields",
    "unit_by_name",
]
