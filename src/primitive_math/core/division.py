"""
Rounding-exact division, integer square roots and logarithms (fixed width).

Every operation first finds the floor of the exact result cheaply, decides
whether the result is exact, and otherwise locates the exact value relative to
the half mark between ``floor`` and ``floor + 1`` without any overflow-prone
doubling. The final pick is delegated to :func:`rounding.resolve`.

Alignment notes:
- divide: truncating quotient/remainder first (native C/Java semantics), then
  adjusted by 0 or +/-1.
- sqrt: a double estimate, off by at most one, corrected in integers.
- log2/log10: leading-zero counts and the per-width tables in `constants.py`.
  sqrt(2) and sqrt(10) are irrational, so a half mark is never hit exactly.
"""

from __future__ import annotations

import math

from .exc import ArithmeticDomainError, ArithmeticOverflowError, ZeroDivisorError
from .rounding import RoundingMode, check_rounding_unnecessary, require_mode, resolve
from .widths import IntWidth

# Debug printing control
DEBUG_DIVISION = False

def _dbg(msg: str) -> None:
    if DEBUG_DIVISION:
        print(msg)


def _sign(x: int) -> int:
    return (x > 0) - (x < 0)


# ----------------------------
# Predicates / small helpers
# ----------------------------

def is_power_of_two(x: int, *, width: IntWidth) -> bool:
    """True iff ``x`` is a positive power of two (MIN_VALUE is not)."""
    width.require("x", x)
    return x > 0 and (x & (x - 1)) == 0


def mod(x: int, m: int, *, width: IntWidth) -> int:
    """Return ``x mod m`` in ``[0, m)``; unlike a C remainder it is never negative."""
    width.require("x", x)
    width.require("m", m)
    if m <= 0:
        raise ArithmeticDomainError(f"Modulus {m} must be > 0")
    return x % m


def mean(x: int, y: int, *, width: IntWidth) -> int:
    """Arithmetic mean of ``x`` and ``y`` rounded toward negative infinity.

    Overflow resilient: never forms ``x + y``.
    """
    width.require("x", x)
    width.require("y", y)
    return (x & y) + ((x ^ y) >> 1)


# ----------------------------
# Division
# ----------------------------

def divide(p: int, q: int, mode: RoundingMode, *, width: IntWidth) -> int:
    """Return ``p / q`` rounded with ``mode``.

    Raises
    ------
    ZeroDivisorError
        If ``q == 0``.
    RoundingNecessaryError
        If ``mode`` is UNNECESSARY and ``q`` does not divide ``p``.
    ArithmeticOverflowError
        For ``MIN_VALUE / -1``, whose quotient does not fit the width.
    """
    width.require("p", p)
    width.require("q", q)
    require_mode(mode)
    if q == 0:
        raise ZeroDivisorError("/ by zero")

    # Truncating division (toward zero).
    div = abs(p) // abs(q)
    if (p < 0) != (q < 0):
        div = -div
    rem = p - q * div
    if not width.contains(div):
        raise ArithmeticOverflowError(f"{p} / {q} overflows {width.bits}-bit arithmetic", bits=width.bits)

    if rem == 0:
        return div

    # signum is 1 if p and q have the same sign, -1 otherwise.
    signum = 1 if (p ^ q) >= 0 else -1
    abs_rem = abs(rem)
    # Same sign as compare(|rem|, |q| / 2); subtracting non-negatives cannot overflow.
    cmp_rem_to_half_divisor = _sign(abs_rem - (abs(q) - abs_rem))

    if signum > 0:
        floor, cmp_half = div, cmp_rem_to_half_divisor
    else:
        # div was truncated upward; the fraction above floor is 1 - |rem|/|q|
        floor, cmp_half = div - 1, -cmp_rem_to_half_divisor
    _dbg(f"divide: p={p}, q={q}, div={div}, rem={rem}, floor={floor}, cmp_half={cmp_half}")
    return resolve(mode, floor, negative=signum < 0, cmp_half=cmp_half)


# ----------------------------
# Square root
# ----------------------------

def _sqrt_floor(x: int) -> int:
    # Let k = floor(sqrt(x)). Conversion to double and math.sqrt are both
    # monotonic, and int(math.sqrt(k * k)) == k for every k in range, so the
    # estimate is k or k + 1.
    guess = int(math.sqrt(x))
    if guess * guess > x:
        _dbg(f"sqrt: x={x}, guess={guess} too high, correcting")
        guess -= 1
    return guess


def sqrt(x: int, mode: RoundingMode, *, width: IntWidth) -> int:
    """Return the square root of ``x`` rounded with ``mode``.

    Raises ArithmeticDomainError if ``x < 0`` and RoundingNecessaryError under
    UNNECESSARY when ``x`` is not a perfect square.
    """
    width.require_non_negative("x", x)
    require_mode(mode)
    sqrt_floor = _sqrt_floor(x)
    floor_squared = sqrt_floor * sqrt_floor
    if mode is RoundingMode.UNNECESSARY:
        check_rounding_unnecessary(floor_squared == x)
    if floor_squared == x:
        return sqrt_floor

    # x <= (sqrt_floor + 0.5)^2 = half_square + 0.25 iff x <= half_square,
    # both sides being integers.
    half_square = floor_squared + sqrt_floor
    cmp_half = 1 if x > half_square else -1
    return resolve(mode, sqrt_floor, negative=False, cmp_half=cmp_half)


# ----------------------------
# Logarithms
# ----------------------------

def log2(x: int, mode: RoundingMode, *, width: IntWidth) -> int:
    """Return the base-2 logarithm of ``x`` rounded with ``mode``.

    Raises ArithmeticDomainError if ``x <= 0`` and RoundingNecessaryError under
    UNNECESSARY when ``x`` is not a power of two.
    """
    width.require_positive("x", x)
    require_mode(mode)
    leading_zeros = width.number_of_leading_zeros(x)
    log_floor = (width.bits - 1) - leading_zeros
    exact = is_power_of_two(x, width=width)
    if mode is RoundingMode.UNNECESSARY:
        check_rounding_unnecessary(exact)
    if exact:
        return log_floor

    # floor(2^(log_floor + 0.5)): the half mark, never equal to x.
    half_power = width.max_power_of_sqrt2_unsigned >> leading_zeros
    cmp_half = 1 if x > half_power else -1
    return resolve(mode, log_floor, negative=False, cmp_half=cmp_half)


def _log10_floor(x: int, width: IntWidth) -> int:
    # Two-table lookup (Hacker's Delight, fig. 11-5): the leading-zero count
    # narrows floor(log10(x)) to y or y - 1, then one comparison with 10^y
    # picks between them.
    y = width.max_log10_for_leading_zeros[width.number_of_leading_zeros(x)]
    return y - 1 if x < width.powers_of_10[y] else y


def log10(x: int, mode: RoundingMode, *, width: IntWidth) -> int:
    """Return the base-10 logarithm of ``x`` rounded with ``mode``.

    Raises ArithmeticDomainError if ``x <= 0`` and RoundingNecessaryError under
    UNNECESSARY when ``x`` is not a power of ten.
    """
    width.require_positive("x", x)
    require_mode(mode)
    log_floor = _log10_floor(x, width)
    floor_pow = width.powers_of_10[log_floor]
    if mode is RoundingMode.UNNECESSARY:
        check_rounding_unnecessary(x == floor_pow)
    if x == floor_pow:
        return log_floor

    cmp_half = 1 if x > width.half_powers_of_10[log_floor] else -1
    return resolve(mode, log_floor, negative=False, cmp_half=cmp_half)


__all__ = [
    "is_power_of_two",
    "mod",
    "mean",
    "divide",
    "sqrt",
    "log2",
    "log10",
]
