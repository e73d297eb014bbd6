"""Valid value ranges for date-time fields.

A range is described by four bounds. Most fields have a fixed range
(``1 - 12`` for month-of-year) but some depend on context, such as
day-of-month whose maximum is 28, 29, 30 or 31 depending on the month.
Such a range is stored as ``minimum - smallest maximum / largest maximum``,
for example ``1 - 28/31``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..constants import INT_MAX, INT_MIN
from ..exceptions import DateTimeError, InvalidArgumentError

if TYPE_CHECKING:
    from .field import TemporalField


@dataclass(frozen=True)
class ValueRange:
    """Immutable range of valid values for a field.

    Invariant: min_smallest <= min_largest <= max_smallest <= max_largest.

    Attributes:
        min_smallest: Smallest possible minimum value
        min_largest: Largest possible minimum value
        max_smallest: Smallest possible maximum value
        max_largest: Largest possible maximum value
    """

    min_smallest: int
    min_largest: int
    max_smallest: int
    max_largest: int

    def __post_init__(self) -> None:
        if self.min_smallest > self.min_largest:
            raise InvalidArgumentError("Smallest minimum value must be less than largest minimum value")
        if self.max_smallest > self.max_largest:
            raise InvalidArgumentError("Smallest maximum value must be less than largest maximum value")
        if self.min_largest > self.max_smallest:
            raise InvalidArgumentError("Minimum value must be less than maximum value")

    @classmethod
    def of(cls, minimum: int, *maximums: int) -> ValueRange:
        """Create a range from a fixed minimum.

        ``of(min, max)`` creates a fixed range, ``of(min, max_smallest,
        max_largest)`` a range with a variable maximum and
        ``of(min_smallest, min_largest, max_smallest, max_largest)`` a fully
        variable range.

        Raises:
            InvalidArgumentError: If the bounds are inconsistent or the arity is wrong
        """
        if len(maximums) == 1:
            return cls(minimum, minimum, maximums[0], maximums[0])
        if len(maximums) == 2:
            return cls(minimum, minimum, maximums[0], maximums[1])
        if len(maximums) == 3:
            return cls(minimum, *maximums)
        raise InvalidArgumentError(f"ValueRange.of() takes 2 to 4 bounds, got {len(maximums) + 1}")

    @classmethod
    def of_variable_minimum(cls, min_smallest: int, min_largest: int, maximum: int) -> ValueRange:
        """Create a range with a variable minimum and a fixed maximum."""
        return cls(min_smallest, min_largest, maximum, maximum)

    # =========================================================================
    # Bounds
    # =========================================================================

    @property
    def minimum(self) -> int:
        return self.min_smallest

    @property
    def largest_minimum(self) -> int:
        return self.min_largest

    @property
    def smallest_maximum(self) -> int:
        return self.max_smallest

    @property
    def maximum(self) -> int:
        return self.max_largest

    @property
    def is_fixed(self) -> bool:
        """True if both the minimum and the maximum are fixed."""
        return self.min_smallest == self.min_largest and self.max_smallest == self.max_largest

    @property
    def is_int_value(self) -> bool:
        """True if every value in the range fits a signed 32-bit integer."""
        return self.minimum >= INT_MIN and self.maximum <= INT_MAX

    # =========================================================================
    # Validation
    # =========================================================================

    def is_valid_value(self, value: int) -> bool:
        """Check a value against the outer bounds of the range."""
        return self.minimum <= value <= self.maximum

    def is_valid_int_value(self, value: int) -> bool:
        return self.is_int_value and self.is_valid_value(value)

    def check_valid_value(self, value: int, field: TemporalField | None = None) -> int:
        """Return value if it is within the range.

        Raises:
            DateTimeError: If the value is outside the range
        """
        if not self.is_valid_value(value):
            if field is not None:
                raise DateTimeError(f"Invalid value for {field} (valid values {self}): {value}")
            raise DateTimeError(f"Invalid value (valid values {self}): {value}")
        return value

    def check_valid_int_value(self, value: int, field: TemporalField | None = None) -> int:
        """Return value if it is within the range and the range fits 32 bits.

        Raises:
            DateTimeError: If the value is invalid or the range is not int-valued
        """
        if not self.is_valid_int_value(value):
            if field is not None:
                raise DateTimeError(f"Invalid int value for {field}: {value}")
            raise DateTimeError(f"Invalid int value: {value}")
        return value

    def __str__(self) -> str:
        text = str(self.min_smallest)
        if self.min_smallest != self.min_largest:
            text += f"/{self.min_largest}"
        text += f" - {self.max_smallest}"
        if self.max_smallest != self.max_largest:
            text += f"/{self.max_largest}"
        return text
