"""
Overflow-checked arithmetic over a fixed signed width.

- checked_*: return the exact result or raise ArithmeticOverflowError; a
  wrapped or clamped value is never returned.
- pow: the unchecked variant, wrapping silently in two's complement.
- checked_cast / saturated_cast: narrowing an arbitrary int into the width.

Exact intermediate results are computed on Python ints (the narrow promotion a
fixed-width machine would need a wider register for) and then range-checked.
"""

from __future__ import annotations

from .exc import ArithmeticDomainError, ArithmeticOverflowError
from .widths import IntWidth, require_int


def _check_no_overflow(condition: bool, width: IntWidth) -> None:
    if not condition:
        raise ArithmeticOverflowError(f"overflow in {width.bits}-bit arithmetic", bits=width.bits)


def _require_exponent(k: int) -> int:
    require_int("exponent", k)
    if k < 0:
        raise ArithmeticDomainError(f"exponent ({k}) must be >= 0")
    return k


def checked_add(a: int, b: int, *, width: IntWidth) -> int:
    width.require("a", a)
    width.require("b", b)
    result = a + b
    _check_no_overflow(width.contains(result), width)
    return result


def checked_subtract(a: int, b: int, *, width: IntWidth) -> int:
    width.require("a", a)
    width.require("b", b)
    result = a - b
    _check_no_overflow(width.contains(result), width)
    return result


def checked_multiply(a: int, b: int, *, width: IntWidth) -> int:
    width.require("a", a)
    width.require("b", b)
    result = a * b
    _check_no_overflow(width.contains(result), width)
    return result


def checked_pow(b: int, k: int, *, width: IntWidth) -> int:
    """Return ``b ** k``, raising ArithmeticOverflowError if it leaves the width.

    Bases in {-2, -1, 0, 1, 2} are answered directly. Otherwise repeated
    squaring is used, refusing to square once ``|b|`` exceeds floor(sqrt(MAX)):
    any remaining exponent bit would multiply that square into the result.
    """
    width.require("b", b)
    _require_exponent(k)
    bits = width.bits
    if b == 0:
        return 1 if k == 0 else 0
    if b == 1:
        return 1
    if b == -1:
        return 1 if k & 1 == 0 else -1
    if b == 2:
        _check_no_overflow(k < bits - 1, width)
        return 1 << k
    if b == -2:
        _check_no_overflow(k < bits, width)
        return 1 << k if k & 1 == 0 else -(1 << k)

    accum = 1
    while True:
        if k == 0:
            return accum
        if k == 1:
            return checked_multiply(accum, b, width=width)
        if k & 1:
            accum = checked_multiply(accum, b, width=width)
        k >>= 1
        if k > 0:
            _check_no_overflow(-width.floor_sqrt_max <= b <= width.floor_sqrt_max, width)
            b *= b


def pow(b: int, k: int, *, width: IntWidth) -> int:
    """Return ``b ** k`` reduced to the width (two's-complement wraparound).

    Only for callers that accept wraparound; see :func:`checked_pow`.
    """
    width.require("b", b)
    _require_exponent(k)
    bits = width.bits
    if b == 0:
        return 1 if k == 0 else 0
    if b == 1:
        return 1
    if b == -1:
        return 1 if k & 1 == 0 else -1
    if b == 2:
        return width.wrap(1 << k) if k < bits else 0
    if b == -2:
        if k < bits:
            return width.wrap(1 << k) if k & 1 == 0 else width.wrap(-(1 << k))
        return 0

    accum = 1
    while True:
        if k == 0:
            return accum
        if k == 1:
            return width.wrap(accum * b)
        if k & 1:
            accum = width.wrap(accum * b)
        b = width.wrap(b * b)
        k >>= 1


def checked_cast(value: int, *, width: IntWidth) -> int:
    """Return ``value`` unchanged if it fits the width; raise otherwise."""
    require_int("value", value)
    if not width.contains(value):
        raise ArithmeticDomainError(f"Out of range: {value}")
    return value


def saturated_cast(value: int, *, width: IntWidth) -> int:
    """Return the width's value nearest to ``value``."""
    require_int("value", value)
    if value > width.max_value:
        return width.max_value
    if value < width.min_value:
        return width.min_value
    return value


__all__ = [
    "checked_add",
    "checked_subtract",
    "checked_multiply",
    "checked_pow",
    "pow",
    "checked_cast",
    "saturated_cast",
]
