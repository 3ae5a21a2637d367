"""
IEEE-754 binary64 bit helpers.

Python floats are binary64, so the raw layout is reached through ``struct``:
a double is packed little-endian and read back as a 64-bit integer (and vice
versa). The helpers below mirror the accessors a platform math library would
provide (unbiased exponent, significand with the implicit bit restored).
"""

from __future__ import annotations

import struct

from .constants import (
    SIGNIFICAND_MASK,
    EXPONENT_MASK,
    SIGNIFICAND_BITS,
    EXPONENT_BIAS,
    MIN_EXPONENT,
    MAX_EXPONENT,
    IMPLICIT_BIT,
    ONE_BITS,
)
from .exc import ArithmeticDomainError

_DOUBLE = struct.Struct("<d")
_RAW = struct.Struct("<Q")


# ----------------------------
# Raw bits
# ----------------------------

def to_bits(x: float) -> int:
    """Raw bits of ``x`` as an unsigned 64-bit integer (NaN payload preserved)."""
    return _RAW.unpack(_DOUBLE.pack(x))[0]


def from_bits(bits: int) -> float:
    return _DOUBLE.unpack(_RAW.pack(bits))[0]


# ----------------------------
# Field accessors
# ----------------------------

def get_exponent(x: float) -> int:
    """Unbiased exponent of ``x``.

    Subnormals and zeros report MIN_EXPONENT - 1; infinities and NaNs report
    MAX_EXPONENT + 1.
    """
    return ((to_bits(x) & EXPONENT_MASK) >> SIGNIFICAND_BITS) - EXPONENT_BIAS


def is_finite(x: float) -> bool:
    return get_exponent(x) <= MAX_EXPONENT


def is_normal(x: float) -> bool:
    return get_exponent(x) >= MIN_EXPONENT


def get_significand(x: float) -> int:
    """Integer significand of a finite ``x``, implicit bit included.

    For subnormals the stored fraction is shifted left once so that
    ``significand * 2^(exponent - 52)`` holds for every finite value.
    """
    if not is_finite(x):
        raise ArithmeticDomainError("not a normal value")
    bits = to_bits(x) & SIGNIFICAND_MASK
    if get_exponent(x) == MIN_EXPONENT - 1:
        return bits << 1
    return bits | IMPLICIT_BIT


def scale_normalize(x: float) -> float:
    """``x`` scaled by a power of two into [1, 2). ``x`` must be positive, normal and finite."""
    return from_bits((to_bits(x) & SIGNIFICAND_MASK) | ONE_BITS)


__all__ = [
    "to_bits",
    "from_bits",
    "get_exponent",
    "get_significand",
    "is_finite",
    "is_normal",
    "scale_normalize",
]
