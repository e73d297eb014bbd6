"""Date-time exception classes."""

from __future__ import annotations


class ChronoError(Exception):
    """Base exception for all chronofield errors."""


class DateTimeError(ChronoError):
    """Value out of range or a date-time that cannot be calculated."""


class UnsupportedTemporalTypeError(DateTimeError):
    """A field or unit is not supported by the temporal object."""


class StrictResolutionError(DateTimeError):
    """Strict resolution produced a date that disagrees with the parsed values."""


class DateTimeParseError(DateTimeError):
    """Text could not be parsed.

    Attributes:
        parsed_text: The text that failed to parse
        error_index: Index in the text where the failure was detected
    """

    def __init__(self, message: str, parsed_text: str, error_index: int = 0) -> None:
        super().__init__(message)
        self.parsed_text = parsed_text
        self.error_index = error_index


class ArithmeticOverflowError(ChronoError, ArithmeticError):
    """A result does not fit the fixed-width integer it must be stored in."""


class InvalidArgumentError(ChronoError, ValueError):
    """An argument violates the contract of the call (programming error)."""
