"""
Top-level API for primitive_math.

Fixed-width arithmetic for Python ints and binary64 floats:
  - ints / longs: checked, rounding-exact and saturating integer functions
    for 32-bit and 64-bit signed values
  - doubles: classification, fuzzy comparison and rounding of floats
  - RationalNumber: a numerator/denominator value type

Width-generic implementations live in ``primitive_math.core``.
"""

from __future__ import annotations

from . import doubles, ints, longs
from .core import (
    RoundingMode,
    ArithmeticDomainError,
    ZeroDivisorError,
    ArithmeticOverflowError,
    OutOfRangeError,
    RoundingNecessaryError,
    InvariantViolation,
)
from .rational import RationalNumber

__all__ = [
    "ints",
    "longs",
    "doubles",
    "RoundingMode",
    "RationalNumber",
    # exceptions
    "ArithmeticDomainError",
    "ZeroDivisorError",
    "ArithmeticOverflowError",
    "OutOfRangeError",
    "RoundingNecessaryError",
    "InvariantViolation",
]
