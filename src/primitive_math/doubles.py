"""
Floating-point (binary64) classification, fuzzy comparison and rounding.

- Predicates read the IEEE-754 layout directly (see ``core.ieee``).
- round_to_int / round_to_long / round_to_big_integer share one step,
  :func:`round_intermediate`, which moves ``x`` to a double that truncation
  (rounding DOWN) maps to the requested result; each then range-checks and
  narrows.
- fuzzy_equals / fuzzy_compare are reflexive and symmetric but NOT transitive:
  never use them for hashing or as a sort key.

Inputs are Python floats; ints are accepted and converted with ``float()``.
"""

from __future__ import annotations

import math
import numbers
from typing import Iterable

from .core import ieee
from .core.constants import (
    SIGNIFICAND_BITS,
    IMPLICIT_BIT,
    MAX_DOUBLE_FACTORIAL,
    MIN_INT_AS_DOUBLE,
    MAX_INT_AS_DOUBLE,
    MIN_LONG_AS_DOUBLE,
    MAX_LONG_AS_DOUBLE_PLUS_ONE,
)
from .core.exc import ArithmeticDomainError, OutOfRangeError
from .core.rounding import RoundingMode, check_rounding_unnecessary, require_mode, resolve
from .core.widths import INT32, INT64

# Debug printing control
DEBUG_DOUBLES = False

def _dbg(msg: str) -> None:
    if DEBUG_DOUBLES:
        print(msg)


def _as_double(name: str, x) -> float:
    if isinstance(x, bool) or not isinstance(x, numbers.Real):
        raise TypeError(f"{name} must be a real number")
    try:
        return float(x)
    except OverflowError as e:
        raise ArithmeticDomainError(f"{name} is out of double range") from e


# ----------------------------
# Classification
# ----------------------------

def is_finite(x: float) -> bool:
    """True iff ``x`` is neither infinite nor NaN."""
    return ieee.is_finite(_as_double("x", x))


def is_mathematical_integer(x: float) -> bool:
    """True iff ``x`` is finite and has no fractional part."""
    x = _as_double("x", x)
    if not ieee.is_finite(x):
        return False
    if x == 0.0:
        return True
    # Fractional bits left in the significand once the exponent is applied.
    significand = ieee.get_significand(x)
    fraction_bits = SIGNIFICAND_BITS - INT64.number_of_trailing_zeros(significand)
    return fraction_bits <= ieee.get_exponent(x)


def is_power_of_two(x: float) -> bool:
    """True iff ``x == 2^k`` for some integer ``k`` (subnormal powers included)."""
    x = _as_double("x", x)
    if not (x > 0.0 and ieee.is_finite(x)):
        return False
    significand = ieee.get_significand(x)
    return significand & (significand - 1) == 0


# ----------------------------
# Fuzzy comparison
# ----------------------------

def _require_tolerance(tolerance: float) -> float:
    tolerance = _as_double("tolerance", tolerance)
    if not tolerance >= 0.0:
        # also rejects NaN
        raise ArithmeticDomainError(f"tolerance ({tolerance}) must be >= 0")
    return tolerance


def fuzzy_equals(a: float, b: float, tolerance: float) -> bool:
    """True iff ``a`` and ``b`` are within ``tolerance`` of each other.

    Special cases:
    - all NaNs are fuzzily equal to each other, and to nothing else;
    - ``a == b`` always implies fuzzy equality (infinities equal themselves);
    - +0.0 and -0.0 are fuzzily equal;
    - with infinite tolerance every pair of non-NaN values is fuzzily equal.

    Raises ArithmeticDomainError if ``tolerance`` is negative or NaN.
    """
    tolerance = _require_tolerance(tolerance)
    a = _as_double("a", a)
    b = _as_double("b", b)
    # copysign(d, 1.0) is abs(d) except that a NaN difference never passes.
    return (
        math.copysign(a - b, 1.0) <= tolerance
        or a == b
        or (math.isnan(a) and math.isnan(b))
    )


def fuzzy_compare(a: float, b: float, tolerance: float) -> int:
    """``0`` if fuzzily equal, otherwise the sign of ``a - b``.

    NaN compares above every other value, +inf included.
    """
    if fuzzy_equals(a, b, tolerance):
        return 0
    a = float(a)
    b = float(b)
    if a < b:
        return -1
    if a > b:
        return 1
    return int(math.isnan(a)) - int(math.isnan(b))


# ----------------------------
# Rounding to integers
# ----------------------------

def _rint(x: float) -> float:
    # Nearest integer-valued double, ties to even. Python's round() on a
    # float already uses ties-to-even.
    return float(round(x))


def round_intermediate(x: float, mode: RoundingMode) -> float:
    """Return ``y`` such that truncating ``y`` gives ``x`` rounded with ``mode``.

    Raises ArithmeticDomainError for infinite or NaN ``x`` and
    RoundingNecessaryError under UNNECESSARY when ``x`` has a fraction.
    """
    x = _as_double("x", x)
    require_mode(mode)
    if not ieee.is_finite(x):
        raise ArithmeticDomainError("input is infinite or NaN")

    if mode is RoundingMode.UNNECESSARY:
        check_rounding_unnecessary(is_mathematical_integer(x))
        return x
    if mode is RoundingMode.FLOOR:
        return x if x >= 0.0 or is_mathematical_integer(x) else x - 1.0
    if mode is RoundingMode.CEILING:
        return x if x <= 0.0 or is_mathematical_integer(x) else x + 1.0
    if mode is RoundingMode.DOWN:
        return x
    if mode is RoundingMode.UP:
        return x if is_mathematical_integer(x) else x + math.copysign(1.0, x)
    if mode is RoundingMode.HALF_EVEN:
        return _rint(x)

    z = _rint(x)
    tie = abs(x - z) == 0.5
    if tie:
        _dbg(f"round_intermediate: tie at x={x}, mode={mode.value}")
    if mode is RoundingMode.HALF_UP:
        return x + math.copysign(0.5, x) if tie else z
    if mode is RoundingMode.HALF_DOWN:
        return x if tie else z
    raise AssertionError(f"unhandled rounding mode: {mode!r}")


def round_to_int(x: float, mode: RoundingMode) -> int:
    """``x`` rounded with ``mode`` as a 32-bit value.

    Raises OutOfRangeError if the rounded value lies outside the 32-bit range.
    """
    z = round_intermediate(x, mode)
    if not (MIN_INT_AS_DOUBLE - 1.0 < z < MAX_INT_AS_DOUBLE + 1.0):
        raise OutOfRangeError(f"{x} rounds outside the 32-bit range", bits=INT32.bits)
    return int(z)


def round_to_long(x: float, mode: RoundingMode) -> int:
    """``x`` rounded with ``mode`` as a 64-bit value.

    Raises OutOfRangeError if the rounded value lies outside the 64-bit range.
    """
    z = round_intermediate(x, mode)
    # LONG_MAX is not a double; compare against LONG_MAX + 1 instead.
    if not (MIN_LONG_AS_DOUBLE - z < 1.0 and z < MAX_LONG_AS_DOUBLE_PLUS_ONE):
        raise OutOfRangeError(f"{x} rounds outside the 64-bit range", bits=INT64.bits)
    return int(z)


def round_to_big_integer(x: float, mode: RoundingMode) -> int:
    """``x`` rounded with ``mode`` as an unbounded int. Every finite double fits."""
    return int(round_intermediate(x, mode))


# ----------------------------
# Logarithms / factorial
# ----------------------------

def log2(x: float) -> float:
    """Base-2 logarithm, within 1 ULP.

    NaN or negative gives NaN, +inf gives +inf and +/-0.0 gives -inf.
    """
    x = _as_double("x", x)
    if math.isnan(x) or x < 0.0:
        return math.nan
    if x == 0.0:
        return -math.inf
    if math.isinf(x):
        return math.inf
    return math.log2(x)


def log2_rounded(x: float, mode: RoundingMode) -> int:
    """Base-2 logarithm of a positive finite ``x`` rounded with ``mode``.

    Raises ArithmeticDomainError unless ``x`` is positive and finite, and
    RoundingNecessaryError under UNNECESSARY when ``x`` is not a power of two.
    """
    x = _as_double("x", x)
    require_mode(mode)
    if not (x > 0.0 and ieee.is_finite(x)):
        raise ArithmeticDomainError("x must be positive and finite")
    if not ieee.is_normal(x):
        # Work on a normal value, then undo the scaling.
        return log2_rounded(x * float(IMPLICIT_BIT), mode) - SIGNIFICAND_BITS

    exponent = ieee.get_exponent(x)
    exact = is_power_of_two(x)
    if mode is RoundingMode.UNNECESSARY:
        check_rounding_unnecessary(exact)
    if exact:
        return exponent

    # sqrt(2) is irrational, so log2(x) never lands on exponent + 0.5.
    scaled = ieee.scale_normalize(x)
    cmp_half = 1 if scaled * scaled > 2.0 else -1
    return resolve(mode, exponent, negative=exponent < 0, cmp_half=cmp_half)


def factorial(n: int) -> float:
    """``n!`` as a double (correctly rounded), or +inf when ``n > 170``."""
    INT32.require_non_negative("n", n)
    if n > MAX_DOUBLE_FACTORIAL:
        return math.inf
    return float(math.factorial(n))


# ----------------------------
# Mean
# ----------------------------

def mean(values: Iterable[float]) -> float:
    """Arithmetic mean of ``values`` without forming their sum.

    Uses the running update ``mean += (v - mean) / count`` (Knuth, TAOCP
    vol. 2, 4.2.2). Large ints lose precision on conversion to float; an int
    beyond the double range raises ArithmeticDomainError.

    Raises ArithmeticDomainError if ``values`` is empty or holds a
    non-finite value.
    """
    count = 0
    running = 0.0
    for value in values:
        value = _as_double("value", value)
        if not ieee.is_finite(value):
            raise ArithmeticDomainError(f"Cannot take mean of non-finite value {value}")
        count += 1
        delta = value - running
        if math.isinf(delta):
            # opposite-sign extremes; scale before subtracting
            running += value / count - running / count
        else:
            running += delta / count
    if count == 0:
        raise ArithmeticDomainError("Cannot take mean of 0 values")
    return running


__all__ = [
    "is_finite",
    "is_mathematical_integer",
    "is_power_of_two",
    "fuzzy_equals",
    "fuzzy_compare",
    "round_intermediate",
    "round_to_int",
    "round_to_long",
    "round_to_big_integer",
    "log2",
    "log2_rounded",
    "factorial",
    "mean",
]
