import math

import pytest

from primitive_math.core import ieee
from primitive_math.core.constants import IMPLICIT_BIT, MIN_EXPONENT, MAX_EXPONENT
from primitive_math.core.exc import ArithmeticDomainError


def test_bits_round_trip_known_patterns():
    print("[ieee-bits] 1.0 -> 0x3FF0..., -0.0 -> sign bit only")
    assert ieee.to_bits(1.0) == 0x3FF0000000000000
    assert ieee.to_bits(-0.0) == 0x8000000000000000
    assert ieee.from_bits(0x7FF0000000000000) == math.inf
    assert ieee.from_bits(1) == 5e-324


@pytest.mark.parametrize(
    "x,expected",
    [(1.0, 0), (3.0, 1), (0.5, -1), (0.0, MIN_EXPONENT - 1), (5e-324, MIN_EXPONENT - 1), (math.inf, MAX_EXPONENT + 1)],
)
def test_get_exponent(x, expected):
    assert ieee.get_exponent(x) == expected


def test_get_significand():
    print("[ieee-significand] implicit bit restored for normals, doubled raw fraction for subnormals")
    assert ieee.get_significand(1.0) == IMPLICIT_BIT
    assert ieee.get_significand(1.5) == IMPLICIT_BIT | (IMPLICIT_BIT >> 1)
    assert ieee.get_significand(5e-324) == 2
    with pytest.raises(ArithmeticDomainError):
        ieee.get_significand(math.nan)


def test_normal_and_scale():
    assert ieee.is_normal(2.2250738585072014e-308)
    assert not ieee.is_normal(5e-324)
    assert ieee.scale_normalize(12.0) == 1.5
    assert ieee.scale_normalize(1024.0) == 1.0
