"""Date-based amount of time, such as "2 years, 3 months and 4 days".

The three components are independent signed 32-bit values and are never
normalised implicitly: "15 months" stays 15 months until ``normalized`` is
called. Adding a period to a date respects calendar rules, so one month
after January 31st is the end of February.

Reference: ISO-8601 periods (``PnYnMnWnD``)
"""

from __future__ import annotations

import re
import struct
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from .constants import INT_MAX, INT_MIN
from .exact import add_exact, multiply_exact, to_int_exact, trunc_div, trunc_mod
from .exceptions import (
    ArithmeticOverflowError,
    DateTimeError,
    DateTimeParseError,
    InvalidArgumentError,
    UnsupportedTemporalTypeError,
)
from .temporal.accessor import TemporalAmount
from .temporal.unit import ChronoUnit, TemporalUnit

if TYPE_CHECKING:
    from .calendar.local_date import LocalDate
    from .temporal.accessor import Temporal

_PATTERN = re.compile(
    r"([-+]?)P(?:([-+]?[0-9]+)Y)?(?:([-+]?[0-9]+)M)?(?:([-+]?[0-9]+)W)?(?:([-+]?[0-9]+)D)?",
    re.IGNORECASE,
)

_BINARY_FORMAT = struct.Struct(">iii")  # years, months, days (int32 each)


@dataclass(frozen=True)
class Period(TemporalAmount):
    """An amount of time in years, months and days.

    Create instances through the ``of*`` factories, ``between`` or ``parse``;
    an all-zero result is always the shared ``ZERO`` instance.

    Attributes:
        years: Signed 32-bit number of years
        months: Signed 32-bit number of months
        days: Signed 32-bit number of days
    """

    years: int
    months: int
    days: int

    ZERO: ClassVar[Period]

    def __post_init__(self) -> None:
        for value in (self.years, self.months, self.days):
            if not INT_MIN <= value <= INT_MAX:
                raise InvalidArgumentError(f"Period component out of range: {value}")

    @classmethod
    def _create(cls, years: int, months: int, days: int) -> Period:
        if (years | months | days) == 0:
            return cls.ZERO
        return cls(to_int_exact(years), to_int_exact(months), to_int_exact(days))

    # =========================================================================
    # Factories
    # =========================================================================

    @classmethod
    def of(cls, years: int, months: int, days: int) -> Period:
        return cls._create(years, months, days)

    @classmethod
    def of_years(cls, years: int) -> Period:
        return cls._create(years, 0, 0)

    @classmethod
    def of_months(cls, months: int) -> Period:
        return cls._create(0, months, 0)

    @classmethod
    def of_weeks(cls, weeks: int) -> Period:
        return cls._create(0, 0, multiply_exact(weeks, 7))

    @classmethod
    def of_days(cls, days: int) -> Period:
        return cls._create(0, 0, days)

    @classmethod
    def from_amount(cls, amount: TemporalAmount) -> Period:
        """Convert an amount in YEARS, MONTHS and DAYS to a period.

        Raises:
            DateTimeError: If the amount uses any other unit
        """
        if isinstance(amount, Period):
            return amount
        years = months = days = 0
        for unit in amount.units:
            value = amount.get(unit)
            if unit is ChronoUnit.YEARS:
                years = add_exact(years, value)
            elif unit is ChronoUnit.MONTHS:
                months = add_exact(months, value)
            elif unit is ChronoUnit.DAYS:
                days = add_exact(days, value)
            else:
                raise DateTimeError(f"Unit must be Years, Months or Days, but was {unit}")
        return cls._create(years, months, days)

    @classmethod
    def between(cls, start_inclusive: LocalDate, end_exclusive: LocalDate) -> Period:
        """Years, months and days between two dates; see ``LocalDate.until``."""
        return start_inclusive.until(end_exclusive)

    @classmethod
    def parse(cls, text: str) -> Period:
        """Parse an ISO-8601 period such as ``P1Y2M3D`` or ``-P2W``.

        Weeks are converted to days. A leading ``-`` negates every component.

        Raises:
            DateTimeParseError: If the text is not a valid period
        """
        match = _PATTERN.fullmatch(text)
        if match is not None:
            sign, year_text, month_text, week_text, day_text = match.groups()
            if any(part is not None for part in (year_text, month_text, week_text, day_text)):
                negate = -1 if sign == "-" else 1
                try:
                    years = _parse_number(year_text, negate)
                    months = _parse_number(month_text, negate)
                    weeks = _parse_number(week_text, negate)
                    days = _parse_number(day_text, negate)
                    days = add_exact(days, multiply_exact(weeks, 7))
                    return cls._create(years, months, days)
                except (ArithmeticOverflowError, ValueError) as ex:
                    raise DateTimeParseError("Text cannot be parsed to a Period", text, 0) from ex
        raise DateTimeParseError("Text cannot be parsed to a Period", text, 0)

    @classmethod
    def from_bytes(cls, data: bytes) -> Period:
        """Decode the 12 byte form written by ``to_bytes``.

        Raises:
            InvalidArgumentError: If data has the wrong length
        """
        if len(data) != _BINARY_FORMAT.size:
            raise InvalidArgumentError(f"Period requires {_BINARY_FORMAT.size} bytes, got {len(data)}")
        return cls._create(*_BINARY_FORMAT.unpack(data))

    # =========================================================================
    # TemporalAmount
    # =========================================================================

    @property
    def units(self) -> tuple[TemporalUnit, ...]:
        return (ChronoUnit.YEARS, ChronoUnit.MONTHS, ChronoUnit.DAYS)

    def get(self, unit: TemporalUnit) -> int:
        if unit is ChronoUnit.YEARS:
            return self.years
        if unit is ChronoUnit.MONTHS:
            return self.months
        if unit is ChronoUnit.DAYS:
            return self.days
        raise UnsupportedTemporalTypeError(f"Unsupported unit: {unit}")

    def add_to(self, temporal: Temporal) -> Temporal:
        if self.years != 0 and self.months != 0:
            temporal = temporal.plus(self.to_total_months(), ChronoUnit.MONTHS)
        elif self.years != 0:
            temporal = temporal.plus(self.years, ChronoUnit.YEARS)
        elif self.months != 0:
            temporal = temporal.plus(self.months, ChronoUnit.MONTHS)
        if self.days != 0:
            temporal = temporal.plus(self.days, ChronoUnit.DAYS)
        return temporal

    def subtract_from(self, temporal: Temporal) -> Temporal:
        if self.years != 0 and self.months != 0:
            temporal = temporal.minus(self.to_total_months(), ChronoUnit.MONTHS)
        elif self.years != 0:
            temporal = temporal.minus(self.years, ChronoUnit.YEARS)
        elif self.months != 0:
            temporal = temporal.minus(self.months, ChronoUnit.MONTHS)
        if self.days != 0:
            temporal = temporal.minus(self.days, ChronoUnit.DAYS)
        return temporal

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def is_zero(self) -> bool:
        return self is Period.ZERO or (self.years == 0 and self.months == 0 and self.days == 0)

    @property
    def is_negative(self) -> bool:
        """True if any component is negative."""
        return self.years < 0 or self.months < 0 or self.days < 0

    def to_total_months(self) -> int:
        return self.years * 12 + self.months

    def with_years(self, years: int) -> Period:
        if years == self.years:
            return self
        return Period._create(years, self.months, self.days)

    def with_months(self, months: int) -> Period:
        if months == self.months:
            return self
        return Period._create(self.years, months, self.days)

    def with_days(self, days: int) -> Period:
        if days == self.days:
            return self
        return Period._create(self.years, self.months, days)

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def plus(self, amount: TemporalAmount) -> Period:
        """Add component-wise; raises ArithmeticOverflowError past 32 bits."""
        other = Period.from_amount(amount)
        return Period._create(
            to_int_exact(self.years + other.years),
            to_int_exact(self.months + other.months),
            to_int_exact(self.days + other.days),
        )

    def plus_years(self, years: int) -> Period:
        if years == 0:
            return self
        return Period._create(to_int_exact(self.years + years), self.months, self.days)

    def plus_months(self, months: int) -> Period:
        if months == 0:
            return self
        return Period._create(self.years, to_int_exact(self.months + months), self.days)

    def plus_days(self, days: int) -> Period:
        if days == 0:
            return self
        return Period._create(self.years, self.months, to_int_exact(self.days + days))

    def minus(self, amount: TemporalAmount) -> Period:
        other = Period.from_amount(amount)
        return Period._create(
            to_int_exact(self.years - other.years),
            to_int_exact(self.months - other.months),
            to_int_exact(self.days - other.days),
        )

    def minus_years(self, years: int) -> Period:
        return self.plus_years(-years)

    def minus_months(self, months: int) -> Period:
        return self.plus_months(-months)

    def minus_days(self, days: int) -> Period:
        return self.plus_days(-days)

    def multiplied_by(self, scalar: int) -> Period:
        if self.is_zero or scalar == 1:
            return self
        return Period._create(
            to_int_exact(self.years * scalar),
            to_int_exact(self.months * scalar),
            to_int_exact(self.days * scalar),
        )

    def negated(self) -> Period:
        return self.multiplied_by(-1)

    def normalized(self) -> Period:
        """Fold months into years so that months is within -11 to 11.

        Days are left unchanged. Both parts take the sign of the total, so
        1 year -25 months becomes -1 year -1 month.
        """
        total_months = self.to_total_months()
        split_years = trunc_div(total_months, 12)
        split_months = trunc_mod(total_months, 12)
        if split_years == self.years and split_months == self.months:
            return self
        return Period._create(to_int_exact(split_years), split_months, self.days)

    def __add__(self, other: Period) -> Period:
        if not isinstance(other, Period):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: Period) -> Period:
        if not isinstance(other, Period):
            return NotImplemented
        return self.minus(other)

    def __neg__(self) -> Period:
        return self.negated()

    # =========================================================================
    # Conversion
    # =========================================================================

    def to_bytes(self) -> bytes:
        return _BINARY_FORMAT.pack(self.years, self.months, self.days)

    def __reduce__(self) -> tuple[object, tuple[int, int, int]]:
        # Unpickle through the factory so ZERO stays canonical
        return (Period.of, (self.years, self.months, self.days))

    def __str__(self) -> str:
        if self.is_zero:
            return "P0D"
        text = "P"
        if self.years != 0:
            text += f"{self.years}Y"
        if self.months != 0:
            text += f"{self.months}M"
        if self.days != 0:
            text += f"{self.days}D"
        return text


def _parse_number(parsed: str | None, negate: int) -> int:
    if parsed is None:
        return 0
    return to_int_exact(multiply_exact(to_int_exact(int(parsed)), negate))


Period.ZERO = Period(0, 0, 0)
