"""
Binary GCD (Stein's algorithm) over non-negative fixed-width integers.

Uses only shifts, subtraction and parity tests. Both arguments must be
non-negative: gcd(0, MIN_VALUE) would be 2^(bits-1), which does not fit.
"""

from __future__ import annotations

from .widths import IntWidth


def gcd(a: int, b: int, *, width: IntWidth) -> int:
    """Greatest common divisor of ``a`` and ``b``; ``gcd(0, 0) == 0``."""
    width.require_non_negative("a", a)
    width.require_non_negative("b", b)
    if a == 0:
        # 0 % b == 0, so b divides a (the converse does not hold).
        return b
    if b == 0:
        return a

    a_twos = width.number_of_trailing_zeros(a)
    a >>= a_twos
    b_twos = width.number_of_trailing_zeros(b)
    b >>= b_twos
    while a != b:
        # Both odd. gcd(a, b) == gcd(|a - b|, min(a, b)), and |a - b| is even,
        # so its twos can be stripped: 2 does not divide the odd min(a, b).
        if a < b:
            a, b = b - a, a
        else:
            a = a - b
        a >>= width.number_of_trailing_zeros(a)
    return a << min(a_twos, b_twos)


__all__ = ["gcd"]
