from __future__ import annotations
import random
from decimal import Decimal, localcontext
from fractions import Fraction
from typing import List, Tuple

import pytest

# Import project primitives
from primitive_math import RoundingMode
from primitive_math.core import INT32, INT64, IntWidth


# -----------------------------
# Test helpers (exact oracles)
# -----------------------------

#: Every mode that has a decimal counterpart (UNNECESSARY excluded).
ROUNDING_MODES: List[RoundingMode] = [m for m in RoundingMode if m is not RoundingMode.UNNECESSARY]


def decimal_round(value, mode: RoundingMode) -> int:
    """Round an exact value (int, Fraction or Decimal-compatible) to an integer via `decimal`.

    Fractions are divided out at 80 significant digits, far beyond what any
    64-bit quotient needs to be placed correctly against its half mark.
    """
    with localcontext() as ctx:
        ctx.prec = 80
        if isinstance(value, Fraction):
            d = Decimal(value.numerator) / Decimal(value.denominator)
        else:
            d = Decimal(value)
        return int(d.quantize(Decimal(1), rounding=mode.decimal_rounding))


def decimal_sqrt_round(x: int, mode: RoundingMode) -> int:
    with localcontext() as ctx:
        ctx.prec = 80
        return int(Decimal(x).sqrt().quantize(Decimal(1), rounding=mode.decimal_rounding))


def edge_values(width: IntWidth) -> List[int]:
    """Boundary-heavy sample of a width's values."""
    lo, hi = width.min_value, width.max_value
    vals = {0, 1, -1, 2, -2, 3, -3, 7, -7, 10, -10, lo, lo + 1, hi, hi - 1, hi // 2, lo // 2}
    vals |= {width.floor_sqrt_max, -width.floor_sqrt_max, width.floor_sqrt_max + 1}
    return sorted(v for v in vals if width.contains(v))


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture(params=[INT32, INT64], ids=["int32", "int64"])
def width(request) -> IntWidth:
    return request.param


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(20151105)


@pytest.fixture()
def random_pairs(width, rng) -> List[Tuple[int, int]]:
    lo, hi = width.min_value, width.max_value
    pairs = []
    for _ in range(300):
        bits = rng.randint(1, width.bits - 1)
        a = rng.randint(-(1 << bits), (1 << bits) - 1)
        b = rng.randint(lo, hi) if rng.random() < 0.3 else rng.randint(-1000, 1000)
        pairs.append((max(lo, min(hi, a)), b))
    return pairs


@pytest.fixture()
def edges(width) -> List[int]:
    return edge_values(width)


@pytest.fixture()
def round_oracle():
    return decimal_round


@pytest.fixture()
def sqrt_oracle():
    return decimal_sqrt_round
