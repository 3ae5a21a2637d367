"""
32-bit signed integer arithmetic.

Every argument must lie in [MIN_VALUE, MAX_VALUE]; anything wider is rejected
with ArithmeticDomainError rather than narrowed. Results follow one of three
contracts:

- exact or ArithmeticOverflowError: checked_add, checked_subtract,
  checked_multiply, checked_pow;
- exact under a RoundingMode: divide, sqrt, log2, log10;
- saturated at MAX_VALUE: factorial, binomial.
"""

from __future__ import annotations

from .core import checked as _checked
from .core import combinatorics as _combinatorics
from .core import division as _division
from .core.gcd import gcd as _gcd
from .core.rounding import RoundingMode
from .core.widths import INT32

BITS: int = INT32.bits
MIN_VALUE: int = INT32.min_value
MAX_VALUE: int = INT32.max_value

#: The largest power of two representable as a 32-bit value.
MAX_POWER_OF_TWO: int = 1 << (BITS - 2)


# ----------------------------
# Overflow-checked arithmetic
# ----------------------------

def checked_add(a: int, b: int) -> int:
    """``a + b``, raising ArithmeticOverflowError if it overflows."""
    return _checked.checked_add(a, b, width=INT32)


def checked_subtract(a: int, b: int) -> int:
    """``a - b``, raising ArithmeticOverflowError if it overflows."""
    return _checked.checked_subtract(a, b, width=INT32)


def checked_multiply(a: int, b: int) -> int:
    """``a * b``, raising ArithmeticOverflowError if it overflows."""
    return _checked.checked_multiply(a, b, width=INT32)


def checked_pow(b: int, k: int) -> int:
    """``b ** k`` for ``k >= 0``, raising ArithmeticOverflowError if it overflows."""
    return _checked.checked_pow(b, k, width=INT32)


def pow(b: int, k: int) -> int:
    """``b ** k`` for ``k >= 0``, wrapping silently on overflow."""
    return _checked.pow(b, k, width=INT32)


def checked_cast(value: int) -> int:
    """``value`` if it is a 32-bit value; ArithmeticDomainError otherwise."""
    return _checked.checked_cast(value, width=INT32)


def saturated_cast(value: int) -> int:
    """``value`` clamped to [MIN_VALUE, MAX_VALUE]."""
    return _checked.saturated_cast(value, width=INT32)


# ----------------------------
# Division, roots and logarithms
# ----------------------------

def divide(p: int, q: int, mode: RoundingMode) -> int:
    """``p / q`` rounded with ``mode``.

    Raises ZeroDivisorError for ``q == 0``, RoundingNecessaryError under
    UNNECESSARY when ``q`` does not divide ``p``, and ArithmeticOverflowError
    for ``MIN_VALUE / -1``.
    """
    return _division.divide(p, q, mode, width=INT32)


def mod(x: int, m: int) -> int:
    """``x mod m``, always in ``[0, m)``. ``m`` must be positive."""
    return _division.mod(x, m, width=INT32)


def mean(x: int, y: int) -> int:
    """Mean of ``x`` and ``y`` rounded toward negative infinity, without overflow."""
    return _division.mean(x, y, width=INT32)


def is_power_of_two(x: int) -> bool:
    return _division.is_power_of_two(x, width=INT32)


def sqrt(x: int, mode: RoundingMode) -> int:
    """Square root of ``x >= 0`` rounded with ``mode``."""
    return _division.sqrt(x, mode, width=INT32)


def log2(x: int, mode: RoundingMode) -> int:
    """Base-2 logarithm of ``x > 0`` rounded with ``mode``."""
    return _division.log2(x, mode, width=INT32)


def log10(x: int, mode: RoundingMode) -> int:
    """Base-10 logarithm of ``x > 0`` rounded with ``mode``."""
    return _division.log10(x, mode, width=INT32)


# ----------------------------
# GCD and combinatorics
# ----------------------------

def gcd(a: int, b: int) -> int:
    """Greatest common divisor of non-negative ``a`` and ``b``; ``gcd(0, 0) == 0``."""
    return _gcd(a, b, width=INT32)


def factorial(n: int) -> int:
    """``n!``, or MAX_VALUE when ``n >= 13``."""
    return _combinatorics.factorial(n, width=INT32)


def binomial(n: int, k: int) -> int:
    """``n`` choose ``k``, or MAX_VALUE when it does not fit."""
    return _combinatorics.binomial(n, k, width=INT32)


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
