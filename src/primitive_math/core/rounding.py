"""
Rounding policy shared by every rounding-aware operation in the kernel.

Division, square roots, logarithms and double -> integer conversion all reduce
to the same question: the exact result lies strictly between two consecutive
integers ``floor`` and ``floor + 1``; which one does the mode select?

Callers answer the cheap parts themselves (is the result exact? where is it
relative to the half mark?) and hand the decision to :func:`resolve`. Keeping
the decision in one place is what makes the modes behave identically across
the 32-bit, 64-bit and double families.
"""

from __future__ import annotations

from decimal import (
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
)
from enum import Enum
from typing import Optional

from .exc import RoundingNecessaryError


class RoundingMode(Enum):
    """Policy selecting one of the two integers bracketing an inexact result."""

    UP = "UP"
    DOWN = "DOWN"
    CEILING = "CEILING"
    FLOOR = "FLOOR"
    HALF_UP = "HALF_UP"
    HALF_DOWN = "HALF_DOWN"
    HALF_EVEN = "HALF_EVEN"
    UNNECESSARY = "UNNECESSARY"

    @property
    def is_half(self) -> bool:
        """True for the three round-to-nearest modes."""
        return self in (RoundingMode.HALF_UP, RoundingMode.HALF_DOWN, RoundingMode.HALF_EVEN)

    @property
    def decimal_rounding(self) -> Optional[str]:
        """Matching `decimal` module rounding constant (None for UNNECESSARY)."""
        return _DECIMAL_ROUNDING.get(self)


_DECIMAL_ROUNDING = {
    RoundingMode.UP: ROUND_UP,
    RoundingMode.DOWN: ROUND_DOWN,
    RoundingMode.CEILING: ROUND_CEILING,
    RoundingMode.FLOOR: ROUND_FLOOR,
    RoundingMode.HALF_UP: ROUND_HALF_UP,
    RoundingMode.HALF_DOWN: ROUND_HALF_DOWN,
    RoundingMode.HALF_EVEN: ROUND_HALF_EVEN,
}


def require_mode(mode: RoundingMode) -> RoundingMode:
    if not isinstance(mode, RoundingMode):
        raise TypeError(f"mode must be a RoundingMode, got {type(mode).__name__}")
    return mode


def check_rounding_unnecessary(condition: bool) -> None:
    """Raise unless the exact result is already an integer."""
    if not condition:
        raise RoundingNecessaryError("mode was UNNECESSARY, but rounding was necessary")


def resolve(mode: RoundingMode, floor: int, *, negative: bool, cmp_half: int) -> int:
    """Return ``floor`` or ``floor + 1`` for an exact value strictly inside (floor, floor + 1).

    Parameters
    ----------
    mode : RoundingMode
        Requested policy. UNNECESSARY always raises here: callers only come to
        :func:`resolve` once they know the result is inexact.
    floor : int
        The lower bracketing integer.
    negative : bool
        Whether the exact value is below zero (equivalently ``floor < 0``).
    cmp_half : int
        Sign of ``(exact - floor) - 1/2``: positive above the half mark,
        negative below it, zero exactly on it.
    """
    if mode is RoundingMode.UNNECESSARY:
        check_rounding_unnecessary(False)
    if mode is RoundingMode.FLOOR:
        return floor
    if mode is RoundingMode.CEILING:
        return floor + 1
    if mode is RoundingMode.DOWN:
        # toward zero
        return floor + 1 if negative else floor
    if mode is RoundingMode.UP:
        # away from zero
        return floor if negative else floor + 1

    if cmp_half > 0:
        return floor + 1
    if cmp_half < 0:
        return floor
    if mode is RoundingMode.HALF_UP:
        return floor if negative else floor + 1
    if mode is RoundingMode.HALF_DOWN:
        return floor + 1 if negative else floor
    if mode is RoundingMode.HALF_EVEN:
        return floor + 1 if floor & 1 else floor
    raise AssertionError(f"unhandled rounding mode: {mode!r}")


__all__ = [
    "RoundingMode",
    "require_mode",
    "check_rounding_unnecessary",
    "resolve",
]
