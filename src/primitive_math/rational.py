"""
A small ratio value type over 32-bit numerator/denominator pairs.

The raw pair is kept as given; equality, ordering and hashing use the pair
reduced by its greatest common divisor, with the sign carried by the
numerator. The divisor comes from a Euclidean modulo loop, separate from the
binary GCD of the integer kernel: it accepts signed inputs and returns
``a + b`` once either operand reaches zero.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .core.exc import ArithmeticDomainError
from .core.widths import INT32


def _euclid_gcd(a: int, b: int) -> int:
    a = abs(a)
    b = abs(b)
    while a != 0 and b != 0:
        if a > b:
            a %= b
        else:
            b %= a
    return a + b


@dataclass(frozen=True, eq=False)
class RationalNumber:
    """``numerator / denominator`` with a non-zero denominator.

    Build instances through :meth:`of`, which returns ``None`` for a zero
    denominator instead of raising.
    """

    numerator: int
    denominator: int
    gcd: int = field(init=False)

    def __post_init__(self):
        INT32.require("numerator", self.numerator)
        INT32.require("denominator", self.denominator)
        if self.denominator == 0:
            raise ArithmeticDomainError("denominator must be non-zero; use RationalNumber.of")
        object.__setattr__(self, "gcd", _euclid_gcd(self.numerator, self.denominator))

    @classmethod
    def of(cls, numerator: int, denominator: int) -> Optional["RationalNumber"]:
        if denominator == 0:
            return None
        return cls(numerator, denominator)

    @property
    def scaled_numerator(self) -> int:
        return self.numerator // self.gcd

    @property
    def scaled_denominator(self) -> int:
        return self.denominator // self.gcd

    def _reduced(self) -> Tuple[int, int]:
        n, d = self.scaled_numerator, self.scaled_denominator
        if d < 0:
            n, d = -n, -d
        return n, d

    # ------------- comparisons (exact, by cross-multiplication) -------------

    def _cmp_core(self, other: "RationalNumber") -> int:
        n1, d1 = self._reduced()
        n2, d2 = other._reduced()
        lhs = n1 * d2
        rhs = n2 * d1
        return (lhs > rhs) - (lhs < rhs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RationalNumber):
            return NotImplemented
        return self._cmp_core(other) == 0

    def __lt__(self, other: "RationalNumber") -> bool:
        if not isinstance(other, RationalNumber):
            return NotImplemented
        return self._cmp_core(other) < 0

    def __le__(self, other: "RationalNumber") -> bool:
        if not isinstance(other, RationalNumber):
            return NotImplemented
        return self._cmp_core(other) <= 0

    def __gt__(self, other: "RationalNumber") -> bool:
        if not isinstance(other, RationalNumber):
            return NotImplemented
        return self._cmp_core(other) > 0

    def __ge__(self, other: "RationalNumber") -> bool:
        if not isinstance(other, RationalNumber):
            return NotImplemented
        return self._cmp_core(other) >= 0

    def __hash__(self) -> int:
        return hash(self._reduced())

    def __str__(self) -> str:
        return f"{{{self.numerator}, {self.denominator}, {self.gcd}}}"


__all__ = ["RationalNumber"]
