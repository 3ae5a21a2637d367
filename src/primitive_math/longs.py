"""
64-bit signed integer arithmetic.

Same contracts as :mod:`primitive_math.ints`, over [MIN_VALUE, MAX_VALUE] of a
64-bit word. ``factorial`` and ``binomial`` still take 32-bit ``n`` and ``k``.
"""

from __future__ import annotations

from .core import checked as _checked
from .core import combinatorics as _combinatorics
from .core import division as _division
from .core.gcd import gcd as _gcd
from .core.rounding import RoundingMode
from .core.widths import INT64

BITS: int = INT64.bits
MIN_VALUE: int = INT64.min_value
MAX_VALUE: int = INT64.max_value

MAX_POWER_OF_TWO: int = 1 << (BITS - 2)


def checked_add(a: int, b: int) -> int:
    return _checked.checked_add(a, b, width=INT64)


def checked_subtract(a: int, b: int) -> int:
    return _checked.checked_subtract(a, b, width=INT64)


def checked_multiply(a: int, b: int) -> int:
    return _checked.checked_multiply(a, b, width=INT64)


def checked_pow(b: int, k: int) -> int:
    return _checked.checked_pow(b, k, width=INT64)


def pow(b: int, k: int) -> int:
    """Wrapping ``b ** k``; see :func:`checked_pow` for the checked form."""
    return _checked.pow(b, k, width=INT64)


def checked_cast(value: int) -> int:
    return _checked.checked_cast(value, width=INT64)


def saturated_cast(value: int) -> int:
    return _checked.saturated_cast(value, width=INT64)


def divide(p: int, q: int, mode: RoundingMode) -> int:
    return _division.divide(p, q, mode, width=INT64)


def mod(x: int, m: int) -> int:
    return _division.mod(x, m, width=INT64)


def mean(x: int, y: int) -> int:
    return _division.mean(x, y, width=INT64)


def is_power_of_two(x: int) -> bool:
    return _division.is_power_of_two(x, width=INT64)


def sqrt(x: int, mode: RoundingMode) -> int:
    return _division.sqrt(x, mode, width=INT64)


def log2(x: int, mode: RoundingMode) -> int:
    return _division.log2(x, mode, width=INT64)


def log10(x: int, mode: RoundingMode) -> int:
    return _division.log10(x, mode, width=INT64)


def gcd(a: int, b: int) -> int:
    return _gcd(a, b, width=INT64)


def factorial(n: int) -> int:
    """``n!``, or MAX_VALUE when ``n >= 21``."""
    return _combinatorics.factorial(n, width=INT64)


def binomial(n: int, k: int) -> int:
    """``n`` choose ``k``, or MAX_VALUE when it does not fit.

    Large ``n`` with moderate ``k`` take a numerator/denominator folding path
    that stays exact without leaving the 64-bit range.
    """
    return _combinatorics.binomial(n, k, width=INT64)


__all__ = [
    "BITS",
    "MIN_VALUE",
    "MAX_VALUE",
    "MAX_POWER_OF_TWO",
    "checked_add",
    "checked_subtract",
    "checked_multiply",
    "checked_pow",
    "pow",
    "checked_cast",
    "saturated_cast",
    "divide",
    "mod",
    "mean",
    "is_power_of_two",
    "sqrt",
    "log2",
    "log10",
    "gcd",
    "factorial",
    "binomial",
]
