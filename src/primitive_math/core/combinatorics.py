"""
Saturating factorial and binomial coefficients over a fixed width.

Unlike the checked_* family these never signal overflow: a true value beyond
the width is reported as the width's MAX_VALUE.

Binomial paths (after folding k to min(k, n - k)):
1. k in {0, 1}: closed form.
2. n small enough for the factorial table: n! / (k! (n-k)!).
3. n beyond BIGGEST_BINOMIALS[k]: saturate.
4. n within BIGGEST_SIMPLE_BINOMIALS[k] (or any 32-bit case): incremental
   multiply-then-divide; every partial product fits by construction.
5. Otherwise (64-bit only): accumulate numerator/denominator while their bit
   budget allows, then fold the fraction into the result with a GCD reduction.
"""

from __future__ import annotations

from .constants import (
    INT_FACTORIALS,
    LONG_FACTORIALS,
    INT_BIGGEST_BINOMIALS,
    LONG_BIGGEST_BINOMIALS,
    LONG_BIGGEST_SIMPLE_BINOMIALS,
)
from .division import log2
from .exc import ArithmeticDomainError, InvariantViolation
from .gcd import gcd
from .rounding import RoundingMode
from .widths import INT32, INT64, IntWidth

# Debug printing control
DEBUG_COMBINATORICS = False

def _dbg(msg: str) -> None:
    if DEBUG_COMBINATORICS:
        print(msg)


def _factorials(width: IntWidth) -> tuple:
    return LONG_FACTORIALS if width.bits == INT64.bits else INT_FACTORIALS


def _biggest_binomials(width: IntWidth) -> tuple:
    return LONG_BIGGEST_BINOMIALS if width.bits == INT64.bits else INT_BIGGEST_BINOMIALS


def factorial(n: int, *, width: IntWidth) -> int:
    """Return ``n!``, or the width's MAX_VALUE if it does not fit.

    ``n`` is a 32-bit value for both widths.
    """
    INT32.require_non_negative("n", n)
    table = _factorials(width)
    return table[n] if n < len(table) else width.max_value


def multiply_fraction(x: int, numerator: int, denominator: int, *, width: IntWidth) -> int:
    """Return ``x * numerator / denominator``, known to be integral.

    Divides the common factor of ``x`` and ``denominator`` out first, after
    which ``denominator`` must divide ``numerator``.
    """
    if x == 1:
        return numerator // denominator
    common_divisor = gcd(x, denominator, width=width)
    x //= common_divisor
    denominator //= common_divisor
    if numerator % denominator != 0:
        raise InvariantViolation(
            f"multiply_fraction: {x} * {numerator} / {denominator} is not integral"
        )
    result = x * (numerator // denominator)
    if not width.contains(result):
        raise InvariantViolation(f"multiply_fraction: result {result} left the {width.bits}-bit range")
    return result


def binomial(n: int, k: int, *, width: IntWidth) -> int:
    """Return ``n`` choose ``k``, or the width's MAX_VALUE if it does not fit.

    Raises ArithmeticDomainError if ``n < 0``, ``k < 0`` or ``k > n``.
    ``n`` and ``k`` are 32-bit values for both widths.
    """
    INT32.require_non_negative("n", n)
    INT32.require_non_negative("k", k)
    if k > n:
        raise ArithmeticDomainError(f"k ({k}) > n ({n})")
    if k > (n >> 1):
        k = n - k
    if k == 0:
        return 1
    if k == 1:
        return n

    factorials = _factorials(width)
    if width.bits == INT64.bits and n < len(factorials):
        _dbg(f"binomial: n={n}, k={k} -> factorial table")
        return factorials[n] // (factorials[k] * factorials[n - k])

    biggest = _biggest_binomials(width)
    if k >= len(biggest) or n > biggest[k]:
        _dbg(f"binomial: n={n}, k={k} -> saturate")
        return width.max_value

    if width.bits != INT64.bits or (
        k < len(LONG_BIGGEST_SIMPLE_BINOMIALS) and n <= LONG_BIGGEST_SIMPLE_BINOMIALS[k]
    ):
        _dbg(f"binomial: n={n}, k={k} -> simple product")
        result = 1
        for i in range(k):
            result *= n - i
            result //= i + 1
        return result

    _dbg(f"binomial: n={n}, k={k} -> fraction folding")
    n_bits = log2(n, RoundingMode.CEILING, width=width)
    result = 1
    numerator = n
    denominator = 1
    # Upper bound on log2(numerator, CEILING).
    numerator_bits = n_bits
    n -= 1
    for i in range(2, k + 1):
        if numerator_bits + n_bits < width.bits - 1:
            # Safe to keep multiplying into the pair.
            numerator *= n
            denominator *= i
            numerator_bits += n_bits
        else:
            # Might not be safe: fold numerator / denominator into result first.
            result = multiply_fraction(result, numerator, denominator, width=width)
            numerator = n
            denominator = i
            numerator_bits = n_bits
        n -= 1
    return multiply_fraction(result, numerator, denominator, width=width)


__all__ = [
    "factorial",
    "binomial",
    "multiply_fraction",
]
