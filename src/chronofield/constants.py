"""Numeric constants shared by the calendar and field layers."""

from __future__ import annotations

# =============================================================================
# Integer widths
# =============================================================================

LONG_MIN = -(1 << 63)
LONG_MAX = (1 << 63) - 1
INT_MIN = -(1 << 31)
INT_MAX = (1 << 31) - 1

# =============================================================================
# Time-of-day
# =============================================================================

HOURS_PER_DAY = 24
MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = MINUTES_PER_HOUR * HOURS_PER_DAY
SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = SECONDS_PER_MINUTE * MINUTES_PER_HOUR
SECONDS_PER_DAY = SECONDS_PER_HOUR * HOURS_PER_DAY
MILLIS_PER_SECOND = 1_000
MILLIS_PER_DAY = MILLIS_PER_SECOND * SECONDS_PER_DAY
MICROS_PER_DAY = SECONDS_PER_DAY * 1_000_000
NANOS_PER_MILLI = 1_000_000
NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MINUTE = NANOS_PER_SECOND * SECONDS_PER_MINUTE
NANOS_PER_HOUR = NANOS_PER_MINUTE * MINUTES_PER_HOUR
NANOS_PER_DAY = NANOS_PER_HOUR * HOURS_PER_DAY

# =============================================================================
# Calendar
# =============================================================================

YEAR_MIN = -999_999_999
YEAR_MAX = 999_999_999
DAYS_PER_WEEK = 7
MONTHS_PER_YEAR = 12
DAYS_PER_CYCLE = 146_097  # Days in a 400 year Gregorian cycle
DAYS_0000_TO_1970 = (DAYS_PER_CYCLE * 5) - (30 * 365 + 7)  # 719528

# Average Gregorian year (365.2425 days), basis of every estimated duration
SECONDS_PER_AVERAGE_YEAR = 31_556_952
