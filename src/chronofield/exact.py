"""Overflow-checked integer arithmetic.

Python integers never overflow, but the values handled here are persisted and
exchanged as signed 64-bit (and in places 32-bit) quantities. Every helper
checks its result against that width and raises ``ArithmeticOverflowError``
instead of silently producing a value no other implementation could hold.

Two division flavours are provided: ``floor_div``/``floor_mod`` round toward
negative infinity (Python's ``//`` and ``%``), while ``trunc_div``/``trunc_mod``
round toward zero, which several calendar algorithms depend on.
"""

from __future__ import annotations

from .constants import INT_MAX, INT_MIN, LONG_MAX, LONG_MIN
from .exceptions import ArithmeticOverflowError


def check_long(value: int) -> int:
    """Return value unchanged if it fits a signed 64-bit integer."""
    if not LONG_MIN <= value <= LONG_MAX:
        raise ArithmeticOverflowError(f"long overflow: {value}")
    return value


def to_int_exact(value: int) -> int:
    """Return value unchanged if it fits a signed 32-bit integer."""
    if not INT_MIN <= value <= INT_MAX:
        raise ArithmeticOverflowError(f"integer overflow: {value}")
    return value


def add_exact(a: int, b: int) -> int:
    return check_long(a + b)


def subtract_exact(a: int, b: int) -> int:
    return check_long(a - b)


def multiply_exact(a: int, b: int) -> int:
    return check_long(a * b)


def floor_div(a: int, b: int) -> int:
    return a // b


def floor_mod(a: int, b: int) -> int:
    return a % b


def trunc_div(a: int, b: int) -> int:
    """Divide, rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def trunc_mod(a: int, b: int) -> int:
    """Remainder of ``trunc_div``; takes the sign of the dividend."""
    return a - b * trunc_div(a, b)
