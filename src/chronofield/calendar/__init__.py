"""ISO calendar collaborators used by the field and unit layer."""

from .day_of_week import DayOfWeek
from .local_date import LocalDate
from .local_time import LocalTime
from .chronology import ISO, IsoChronology, chronology_of

__all__ = [
    "ISO",
    "DayOfWeek",
    "IsoChronology",
    "LocalDate",
    "LocalTime",
    "chronology_of",
]
