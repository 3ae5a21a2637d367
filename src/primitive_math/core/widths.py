"""
Fixed-width signed integer model.

Python integers are unbounded, so the kernel carries the width explicitly: an
:class:`IntWidth` knows its bounds, the thresholds the algorithms need, and the
two's-complement bit operations (leading/trailing zeros, wraparound) that a
fixed-width machine integer would provide natively.

Every generic operation in ``core`` takes a ``width`` and is instantiated for
:data:`INT32` and :data:`INT64` by the ``ints`` and ``longs`` families.
"""

from __future__ import annotations

from dataclasses import dataclass

from .constants import (
    INT_BITS,
    INT_MIN,
    INT_MAX,
    LONG_BITS,
    LONG_MIN,
    LONG_MAX,
    FLOOR_SQRT_MAX_INT,
    FLOOR_SQRT_MAX_LONG,
    MAX_POWER_OF_SQRT2_UNSIGNED_INT,
    MAX_POWER_OF_SQRT2_UNSIGNED_LONG,
    INT_MAX_LOG10_FOR_LEADING_ZEROS,
    INT_POWERS_OF_10,
    INT_HALF_POWERS_OF_10,
    LONG_MAX_LOG10_FOR_LEADING_ZEROS,
    LONG_POWERS_OF_10,
    LONG_HALF_POWERS_OF_10,
)
from .exc import ArithmeticDomainError


def require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


@dataclass(frozen=True)
class IntWidth:
    """A signed two's-complement integer width and its precomputed tables."""

    bits: int
    min_value: int
    max_value: int
    floor_sqrt_max: int
    max_power_of_sqrt2_unsigned: int
    max_log10_for_leading_zeros: tuple
    powers_of_10: tuple
    half_powers_of_10: tuple

    # ------------- predicates -------------

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    # ------------- validation -------------

    def require(self, name: str, value: int) -> int:
        """Return ``value`` if it is an int of this width, else raise."""
        require_int(name, value)
        if not self.contains(value):
            raise ArithmeticDomainError(f"{name} ({value}) is not a {self.bits}-bit value")
        return value

    def require_non_negative(self, name: str, value: int) -> int:
        self.require(name, value)
        if value < 0:
            raise ArithmeticDomainError(f"{name} ({value}) must be >= 0")
        return value

    def require_positive(self, name: str, value: int) -> int:
        self.require(name, value)
        if value <= 0:
            raise ArithmeticDomainError(f"{name} ({value}) must be > 0")
        return value

    # ------------- two's-complement bit operations -------------

    def wrap(self, value: int) -> int:
        """Reduce an unbounded int to this width, as a machine multiply/shift would."""
        mask = (1 << self.bits) - 1
        value &= mask
        if value > self.max_value:
            value -= 1 << self.bits
        return value

    def number_of_leading_zeros(self, value: int) -> int:
        """Leading zero bits of ``value`` viewed as an unsigned word of this width."""
        return self.bits - (value & ((1 << self.bits) - 1)).bit_length()

    def number_of_trailing_zeros(self, value: int) -> int:
        if value == 0:
            return self.bits
        return (value & -value).bit_length() - 1


INT32 = IntWidth(
    bits=INT_BITS,
    min_value=INT_MIN,
    max_value=INT_MAX,
    floor_sqrt_max=FLOOR_SQRT_MAX_INT,
    max_power_of_sqrt2_unsigned=MAX_POWER_OF_SQRT2_UNSIGNED_INT,
    max_log10_for_leading_zeros=INT_MAX_LOG10_FOR_LEADING_ZEROS,
    powers_of_10=INT_POWERS_OF_10,
    half_powers_of_10=INT_HALF_POWERS_OF_10,
)

INT64 = IntWidth(
    bits=LONG_BITS,
    min_value=LONG_MIN,
    max_value=LONG_MAX,
    floor_sqrt_max=FLOOR_SQRT_MAX_LONG,
    max_power_of_sqrt2_unsigned=MAX_POWER_OF_SQRT2_UNSIGNED_LONG,
    max_log10_for_leading_zeros=LONG_MAX_LOG10_FOR_LEADING_ZEROS,
    powers_of_10=LONG_POWERS_OF_10,
    half_powers_of_10=LONG_HALF_POWERS_OF_10,
)


__all__ = [
    "IntWidth",
    "INT32",
    "INT64",
    "require_int",
]
