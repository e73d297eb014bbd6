"""Time-based amount of time, such as "34.5 seconds".

A ``Duration`` is stored as whole seconds (signed 64-bit) plus a nanosecond
adjustment that is always in the range 0 to 999,999,999. A negative duration
of half a second is therefore ``-1`` seconds and ``500_000_000`` nanos.

Days are treated as exactly 24 hours. Units with an estimated length
(months, years) cannot be added to a duration.

Reference: ISO-8601 durations (``PnDTnHnMn.nS``)
"""

from __future__ import annotations

import logging
import re
import struct
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from .constants import (
    LONG_MAX,
    LONG_MIN,
    NANOS_PER_MILLI,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from .exact import (
    add_exact,
    check_long,
    floor_div,
    floor_mod,
    multiply_exact,
    trunc_div,
    trunc_mod,
)
from .exceptions import (
    ArithmeticOverflowError,
    DateTimeError,
    DateTimeParseError,
    InvalidArgumentError,
    UnsupportedTemporalTypeError,
)
from .temporal.accessor import TemporalAmount
from .temporal.field import ChronoField
from .temporal.unit import ChronoUnit, TemporalUnit

if TYPE_CHECKING:
    from .temporal.accessor import Temporal

logger = logging.getLogger(__name__)

# =============================================================================
# Text and binary formats
# =============================================================================

_PATTERN = re.compile(
    r"([-+]?)P(?:([-+]?[0-9]+)D)?"
    r"(T(?:([-+]?[0-9]+)H)?(?:([-+]?[0-9]+)M)?(?:([-+]?[0-9]+)(?:[.,]([0-9]{0,9}))?S)?)?",
    re.IGNORECASE,
)

_BINARY_FORMAT = struct.Struct(">qi")  # seconds (int64), nanos (int32)


@dataclass(frozen=True, order=True)
class Duration(TemporalAmount):
    """An exact amount of time in seconds and nanoseconds.

    Create instances through the ``of_*`` factories, ``between`` or
    ``parse``; these normalise the nanosecond part and return the shared
    ``ZERO`` instance for a zero length. Ordering and equality compare the
    length of the duration.

    Attributes:
        seconds: Whole seconds, may be negative
        nanos: Nanosecond adjustment, 0 to 999,999,999
    """

    seconds: int
    nanos: int

    ZERO: ClassVar[Duration]

    def __post_init__(self) -> None:
        if not LONG_MIN <= self.seconds <= LONG_MAX:
            raise InvalidArgumentError(f"Seconds out of range: {self.seconds}")
        if not 0 <= self.nanos < NANOS_PER_SECOND:
            raise InvalidArgumentError(f"Nanos out of range: {self.nanos}")

    @classmethod
    def _create(cls, seconds: int, nanos: int) -> Duration:
        if seconds == 0 and nanos == 0:
            return cls.ZERO
        return cls(seconds, nanos)

    @classmethod
    def _create_from_nanos(cls, total_nanos: int) -> Duration:
        seconds, nanos = divmod(total_nanos, NANOS_PER_SECOND)
        if not LONG_MIN <= seconds <= LONG_MAX:
            raise ArithmeticOverflowError(f"Exceeds capacity of Duration: {total_nanos}")
        return cls._create(seconds, nanos)

    # =========================================================================
    # Factories
    # =========================================================================

    @classmethod
    def of_days(cls, days: int) -> Duration:
        return cls._create(multiply_exact(days, SECONDS_PER_DAY), 0)

    @classmethod
    def of_hours(cls, hours: int) -> Duration:
        return cls._create(multiply_exact(hours, SECONDS_PER_HOUR), 0)

    @classmethod
    def of_minutes(cls, minutes: int) -> Duration:
        return cls._create(multiply_exact(minutes, SECONDS_PER_MINUTE), 0)

    @classmethod
    def of_seconds(cls, seconds: int, nano_adjustment: int = 0) -> Duration:
        """Create a duration from seconds and an adjustment in nanoseconds.

        The adjustment may be any value, including negative; it is folded
        into the seconds so that ``of_seconds(3, -1)`` is 2.999999999 seconds.

        Raises:
            ArithmeticOverflowError: If the seconds overflow 64 bits
        """
        secs = add_exact(seconds, floor_div(nano_adjustment, NANOS_PER_SECOND))
        return cls._create(secs, floor_mod(nano_adjustment, NANOS_PER_SECOND))

    @classmethod
    def of_millis(cls, millis: int) -> Duration:
        secs, mos = divmod(millis, 1_000)
        return cls._create(secs, mos * NANOS_PER_MILLI)

    @classmethod
    def of_nanos(cls, nanos: int) -> Duration:
        secs, nos = divmod(nanos, NANOS_PER_SECOND)
        return cls._create(secs, nos)

    @classmethod
    def of(cls, amount: int, unit: TemporalUnit) -> Duration:
        """Create a duration of amount in unit; DAYS counts as 24 hours.

        Raises:
            DateTimeError: If the unit has an estimated duration
        """
        return cls.ZERO.plus(amount, unit)

    @classmethod
    def from_amount(cls, amount: TemporalAmount) -> Duration:
        """Convert any amount expressed in exact units (or DAYS) to a duration."""
        duration = cls.ZERO
        for unit in amount.units:
            duration = duration.plus(amount.get(unit), unit)
        return duration

    @classmethod
    def between(cls, start_inclusive: Temporal, end_exclusive: Temporal) -> Duration:
        """Duration between two temporals, negative if end is before start.

        Whole seconds come from ``start.until(end, SECONDS)``. When both sides
        support NANO_OF_SECOND the nanosecond difference is added, with a
        correction so the sign of the two parts agrees. If that refinement
        fails the result keeps whole-second precision.
        """
        secs = start_inclusive.until(end_exclusive, ChronoUnit.SECONDS)
        nanos = 0
        if start_inclusive.is_supported(ChronoField.NANO_OF_SECOND) and end_exclusive.is_supported(
            ChronoField.NANO_OF_SECOND
        ):
            try:
                start_nos = start_inclusive.get_long(ChronoField.NANO_OF_SECOND)
                nanos = end_exclusive.get_long(ChronoField.NANO_OF_SECOND) - start_nos
                if secs > 0 and nanos < 0:
                    nanos += NANOS_PER_SECOND
                elif secs < 0 and nanos > 0:
                    nanos -= NANOS_PER_SECOND
                elif secs == 0 and nanos != 0:
                    adjusted_end = end_exclusive.with_field(ChronoField.NANO_OF_SECOND, start_nos)
                    secs = start_inclusive.until(adjusted_end, ChronoUnit.SECONDS)
            except (DateTimeError, ArithmeticError) as ex:
                logger.debug("Falling back to whole seconds between %s and %s: %s", start_inclusive, end_exclusive, ex)
                nanos = 0
        return cls.of_seconds(secs, nanos)

    @classmethod
    def parse(cls, text: str) -> Duration:
        """Parse an ISO-8601 duration such as ``PT8H6M12.345S``.

        Accepted: an optional sign, ``P``, optional days, then ``T`` and at
        least one of hours, minutes and seconds. Each number may carry its
        own sign, seconds accept up to nine fraction digits after ``.`` or
        ``,`` and letters are case-insensitive. A leading ``-`` negates the
        whole duration.

        Raises:
            DateTimeParseError: If the text is not a valid duration
        """
        match = _PATTERN.fullmatch(text)
        if match is not None and match.group(3) not in ("T", "t"):
            sign, day_text, _, hour_text, minute_text, second_text, fraction_text = match.groups()
            if any(part is not None for part in (day_text, hour_text, minute_text, second_text)):
                negate = sign == "-"
                days_as_secs = _parse_number(text, day_text, SECONDS_PER_DAY, "days")
                hours_as_secs = _parse_number(text, hour_text, SECONDS_PER_HOUR, "hours")
                mins_as_secs = _parse_number(text, minute_text, SECONDS_PER_MINUTE, "minutes")
                seconds = _parse_number(text, second_text, 1, "seconds")
                negative_secs = second_text is not None and second_text.startswith("-")
                nanos = _parse_fraction(fraction_text, -1 if negative_secs else 1)
                try:
                    return cls._of_parts(negate, days_as_secs, hours_as_secs, mins_as_secs, seconds, nanos)
                except ArithmeticOverflowError as ex:
                    raise DateTimeParseError("Text cannot be parsed to a Duration: overflow", text, 0) from ex
        raise DateTimeParseError("Text cannot be parsed to a Duration", text, 0)

    @classmethod
    def _of_parts(cls, negate: bool, *parts: int) -> Duration:
        days_as_secs, hours_as_secs, mins_as_secs, secs, nanos = parts
        seconds = add_exact(days_as_secs, add_exact(hours_as_secs, add_exact(mins_as_secs, secs)))
        duration = cls.of_seconds(seconds, nanos)
        return duration.negated() if negate else duration

    @classmethod
    def from_bytes(cls, data: bytes) -> Duration:
        """Decode the 12 byte form written by ``to_bytes``.

        Raises:
            InvalidArgumentError: If data has the wrong length
        """
        if len(data) != _BINARY_FORMAT.size:
            raise InvalidArgumentError(f"Duration requires {_BINARY_FORMAT.size} bytes, got {len(data)}")
        seconds, nanos = _BINARY_FORMAT.unpack(data)
        return cls.of_seconds(seconds, nanos)

    # =========================================================================
    # TemporalAmount
    # =========================================================================

    @property
    def units(self) -> tuple[TemporalUnit, ...]:
        return (ChronoUnit.SECONDS, ChronoUnit.NANOS)

    def get(self, unit: TemporalUnit) -> int:
        if unit is ChronoUnit.SECONDS:
            return self.seconds
        if unit is ChronoUnit.NANOS:
            return self.nanos
        raise UnsupportedTemporalTypeError(f"Unsupported unit: {unit}")

    def add_to(self, temporal: Temporal) -> Temporal:
        if self.seconds != 0:
            temporal = temporal.plus(self.seconds, ChronoUnit.SECONDS)
        if self.nanos != 0:
            temporal = temporal.plus(self.nanos, ChronoUnit.NANOS)
        return temporal

    def subtract_from(self, temporal: Temporal) -> Temporal:
        if self.seconds != 0:
            temporal = temporal.minus(self.seconds, ChronoUnit.SECONDS)
        if self.nanos != 0:
            temporal = temporal.minus(self.nanos, ChronoUnit.NANOS)
        return temporal

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def is_zero(self) -> bool:
        return self.seconds == 0 and self.nanos == 0

    @property
    def is_negative(self) -> bool:
        return self.seconds < 0

    def with_seconds(self, seconds: int) -> Duration:
        return Duration._create(check_long(seconds), self.nanos)

    def with_nanos(self, nano_of_second: int) -> Duration:
        ChronoField.NANO_OF_SECOND.check_valid_int_value(nano_of_second)
        return Duration._create(self.seconds, nano_of_second)

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def plus(self, amount: Duration | int, unit: TemporalUnit | None = None) -> Duration:
        """Add another duration, or an amount of a unit.

        Raises:
            DateTimeError: If unit has an estimated duration
            ArithmeticOverflowError: If the result overflows
        """
        if unit is None:
            return self._plus(amount.seconds, amount.nanos)
        if unit is ChronoUnit.DAYS:
            return self._plus(multiply_exact(amount, SECONDS_PER_DAY), 0)
        if unit.is_duration_estimated:
            raise DateTimeError("Unit must not have an estimated duration")
        if amount == 0:
            return self
        if unit is ChronoUnit.NANOS:
            return self.plus_nanos(amount)
        if unit is ChronoUnit.MICROS:
            return self._plus(
                trunc_div(amount, 1_000_000_000) * 1_000, trunc_mod(amount, 1_000_000_000) * 1_000
            )
        if unit is ChronoUnit.MILLIS:
            return self.plus_millis(amount)
        if unit is ChronoUnit.SECONDS:
            return self.plus_seconds(amount)
        unit_duration = unit.duration.multiplied_by(amount)
        return self._plus(unit_duration.seconds, unit_duration.nanos)

    def plus_days(self, days: int) -> Duration:
        return self._plus(multiply_exact(days, SECONDS_PER_DAY), 0)

    def plus_hours(self, hours: int) -> Duration:
        return self._plus(multiply_exact(hours, SECONDS_PER_HOUR), 0)

    def plus_minutes(self, minutes: int) -> Duration:
        return self._plus(multiply_exact(minutes, SECONDS_PER_MINUTE), 0)

    def plus_seconds(self, seconds: int) -> Duration:
        return self._plus(seconds, 0)

    def plus_millis(self, millis: int) -> Duration:
        return self._plus(trunc_div(millis, 1_000), trunc_mod(millis, 1_000) * NANOS_PER_MILLI)

    def plus_nanos(self, nanos: int) -> Duration:
        return self._plus(0, nanos)

    def _plus(self, seconds_to_add: int, nanos_to_add: int) -> Duration:
        if seconds_to_add == 0 and nanos_to_add == 0:
            return self
        epoch_sec = add_exact(self.seconds, seconds_to_add)
        epoch_sec = add_exact(epoch_sec, trunc_div(nanos_to_add, NANOS_PER_SECOND))
        nano_adjustment = self.nanos + trunc_mod(nanos_to_add, NANOS_PER_SECOND)
        return Duration.of_seconds(epoch_sec, nano_adjustment)

    def minus(self, amount: Duration | int, unit: TemporalUnit | None = None) -> Duration:
        if unit is None:
            return self._plus(-amount.seconds, -amount.nanos)
        return self.plus(-amount, unit)

    def minus_days(self, days: int) -> Duration:
        return self.plus_days(-days)

    def minus_hours(self, hours: int) -> Duration:
        return self.plus_hours(-hours)

    def minus_minutes(self, minutes: int) -> Duration:
        return self.plus_minutes(-minutes)

    def minus_seconds(self, seconds: int) -> Duration:
        return self.plus_seconds(-seconds)

    def minus_millis(self, millis: int) -> Duration:
        return self.plus_millis(-millis)

    def minus_nanos(self, nanos: int) -> Duration:
        return self.plus_nanos(-nanos)

    def multiplied_by(self, multiplicand: int) -> Duration:
        """Exact product; raises ArithmeticOverflowError if it does not fit."""
        if multiplicand == 0:
            return Duration.ZERO
        if multiplicand == 1:
            return self
        return Duration._create_from_nanos(self._total_nanos() * multiplicand)

    def divided_by(self, divisor: int) -> Duration:
        """Quotient truncated toward zero at nanosecond precision.

        Raises:
            ZeroDivisionError: If divisor is zero
        """
        if divisor == 0:
            raise ZeroDivisionError("Cannot divide by zero")
        if divisor == 1:
            return self
        return Duration._create_from_nanos(trunc_div(self._total_nanos(), divisor))

    def negated(self) -> Duration:
        return self.multiplied_by(-1)

    def abs(self) -> Duration:
        return self.negated() if self.is_negative else self

    def _total_nanos(self) -> int:
        return self.seconds * NANOS_PER_SECOND + self.nanos

    def __add__(self, other: Duration) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: Duration) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.minus(other)

    def __neg__(self) -> Duration:
        return self.negated()

    def __abs__(self) -> Duration:
        return self.abs()

    # =========================================================================
    # Conversion
    # =========================================================================

    def to_days(self) -> int:
        return trunc_div(self.seconds, SECONDS_PER_DAY)

    def to_hours(self) -> int:
        return trunc_div(self.seconds, SECONDS_PER_HOUR)

    def to_minutes(self) -> int:
        return trunc_div(self.seconds, SECONDS_PER_MINUTE)

    def to_millis(self) -> int:
        millis = multiply_exact(self.seconds, 1_000)
        return add_exact(millis, self.nanos // NANOS_PER_MILLI)

    def to_nanos(self) -> int:
        total = multiply_exact(self.seconds, NANOS_PER_SECOND)
        return add_exact(total, self.nanos)

    def to_bytes(self) -> bytes:
        return _BINARY_FORMAT.pack(self.seconds, self.nanos)

    def __reduce__(self) -> tuple[object, tuple[int, int]]:
        # Unpickle through the factory so ZERO stays canonical
        return (Duration.of_seconds, (self.seconds, self.nanos))

    def __str__(self) -> str:
        """ISO-8601 text such as ``PT8H6M12.345S``; days are shown as hours."""
        if self.is_zero:
            return "PT0S"
        hours = trunc_div(self.seconds, SECONDS_PER_HOUR)
        minutes = trunc_div(trunc_mod(self.seconds, SECONDS_PER_HOUR), SECONDS_PER_MINUTE)
        secs = trunc_mod(self.seconds, SECONDS_PER_MINUTE)
        text = "PT"
        if hours != 0:
            text += f"{hours}H"
        if minutes != 0:
            text += f"{minutes}M"
        if secs == 0 and self.nanos == 0 and len(text) > 2:
            return text
        if secs < 0 and self.nanos > 0:
            text += "-0" if secs == -1 else str(secs + 1)
        else:
            text += str(secs)
        if self.nanos > 0:
            if secs < 0:
                fraction = str(2 * NANOS_PER_SECOND - self.nanos)
            else:
                fraction = str(self.nanos + NANOS_PER_SECOND)
            # Leading "1" of the padded value becomes the decimal point
            text += "." + fraction.rstrip("0")[1:]
        return text + "S"


def _parse_number(text: str, parsed: str | None, multiplier: int, error_text: str) -> int:
    if parsed is None:
        return 0
    try:
        return multiply_exact(check_long(int(parsed)), multiplier)
    except (ArithmeticOverflowError, ValueError) as ex:
        raise DateTimeParseError(f"Text cannot be parsed to a Duration: {error_text}", text, 0) from ex


def _parse_fraction(parsed: str | None, sign: int) -> int:
    if not parsed:
        return 0
    return int((parsed + "000000000")[:9]) * sign


Duration.ZERO = Duration(0, 0)
