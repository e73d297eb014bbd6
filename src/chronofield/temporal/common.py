"""Common types shared across the field and unit layer."""

from __future__ import annotations

from enum import Enum, auto


class ResolverStyle(Enum):
    """How strictly parsed field values are turned into a date.

    - STRICT: values must be valid for the specific date being built
    - SMART: values must be within the outer range of the field
    - LENIENT: out-of-range values roll over into neighbouring periods
    """

    STRICT = auto()
    SMART = auto()
    LENIENT = auto()
