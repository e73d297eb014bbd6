"""Standard queries against temporal objects.

A query is any callable taking a ``TemporalAccessor`` and returning a result
or ``None``; it is run through ``temporal.query(q)`` so the temporal can
answer the well-known queries itself. The ``zone_id``, ``chronology`` and
``precision`` queries are answered only by the temporal: called directly they
delegate back to ``temporal.query``.
"""

from __future__ import annotations

from datetime import timedelta, timezone, tzinfo
from typing import TYPE_CHECKING, Any

from .field import ChronoField

if TYPE_CHECKING:
    from ..calendar.chronology import IsoChronology
    from ..calendar.local_date import LocalDate
    from ..calendar.local_time import LocalTime
    from .accessor import TemporalAccessor
    from .unit import TemporalUnit


def zone_id(temporal: TemporalAccessor) -> Any:
    """Strict time-zone query; ``None`` unless the temporal carries a zone."""
    return temporal.query(zone_id)


def chronology(temporal: TemporalAccessor) -> IsoChronology | None:
    return temporal.query(chronology)


def precision(temporal: TemporalAccessor) -> TemporalUnit | None:
    """Smallest unit the temporal supports."""
    return temporal.query(precision)


def offset(temporal: TemporalAccessor) -> tzinfo | None:
    """Offset from UTC, built from OFFSET_SECONDS when supported."""
    if temporal.is_supported(ChronoField.OFFSET_SECONDS):
        return timezone(timedelta(seconds=temporal.get(ChronoField.OFFSET_SECONDS)))
    return None


def zone(temporal: TemporalAccessor) -> Any:
    """Lenient zone query: the zone if present, else the offset."""
    found = temporal.query(zone_id)
    if found is not None:
        return found
    return temporal.query(offset)


def local_date(temporal: TemporalAccessor) -> LocalDate | None:
    from ..calendar.local_date import LocalDate

    if temporal.is_supported(ChronoField.EPOCH_DAY):
        return LocalDate.of_epoch_day(temporal.get_long(ChronoField.EPOCH_DAY))
    return None


def local_time(temporal: TemporalAccessor) -> LocalTime | None:
    from ..calendar.local_time import LocalTime

    if temporal.is_supported(ChronoField.NANO_OF_DAY):
        return LocalTime.of_nano_of_day(temporal.get_long(ChronoField.NANO_OF_DAY))
    return None
