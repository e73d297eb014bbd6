"""
pyChronoField: ISO-8601 calendar fields, units and amounts for Python.

This library models date-time fields (day-of-quarter, week-of-week-based-year,
localized week numbering, Julian day numbers) and units (days, quarters,
week-based years) over a small capability interface, together with the
``Duration`` and ``Period`` amounts and the multi-field resolution that turns
a sparse set of field values into a date.
"""

from __future__ import annotations

import logging

# The temporal layer must load before the calendar types built on it
from .temporal import (
    ChronoField,
    ChronoUnit,
    ResolverStyle,
    TemporalField,
    TemporalUnit,
    ValueRange,
    WeekFields,
)
from .calendar import DayOfWeek, IsoChronology, LocalDate, LocalTime
from .duration import Duration
from .exceptions import (
    ArithmeticOverflowError,
    ChronoError,
    DateTimeError,
    DateTimeParseError,
    InvalidArgumentError,
    StrictResolutionError,
    UnsupportedTemporalTypeError,
)
from .period import Period

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Calendar
    "DayOfWeek",
    "IsoChronology",
    "LocalDate",
    "LocalTime",
    # Amounts
    "Duration",
    "Period",
    # Fields and units
    "ChronoField",
    "ChronoUnit",
    "ResolverStyle",
    "TemporalField",
    "TemporalUnit",
    "ValueRange",
    "WeekFields",
    # Exceptions
    "ArithmeticOverflowError",
    "ChronoError",
    "DateTimeError",
    "DateTimeParseError",
    "InvalidArgumentError",
    "StrictResolutionError",
    "UnsupportedTemporalTypeError",
]
