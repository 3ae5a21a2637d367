import math

import pytest

from primitive_math import doubles
from primitive_math.core.rounding import RoundingMode
from primitive_math.core.exc import (
    ArithmeticDomainError,
    ArithmeticOverflowError,
    OutOfRangeError,
    RoundingNecessaryError,
)

from conftest import ROUNDING_MODES

R = RoundingMode
TINY = 5e-324  # smallest subnormal, 2^-1074


# -----------------------------
# Classification
# -----------------------------

@pytest.mark.parametrize(
    "x,expected",
    [
        (0.0, True),
        (-0.0, True),
        (1.0, True),
        (-3.0, True),
        (2.0 ** 60, True),
        (1.5, False),
        (4503599627370495.5, False),
        (TINY, False),
        (math.inf, False),
        (math.nan, False),
    ],
)
def test_is_mathematical_integer(x, expected):
    print(f"[is-integer] {x!r} -> expect {expected}")
    assert doubles.is_mathematical_integer(x) is expected


@pytest.mark.parametrize(
    "x,expected",
    [
        (1.0, True),
        (0.5, True),
        (2.0 ** 1023, True),
        (TINY, True),
        (2 * TINY, True),
        (3 * TINY, False),
        (3.0, False),
        (0.0, False),
        (-2.0, False),
        (math.inf, False),
        (math.nan, False),
    ],
)
def test_is_power_of_two(x, expected):
    print(f"[is-power-of-two] {x!r} -> expect {expected}")
    assert doubles.is_power_of_two(x) is expected


def test_is_finite():
    assert doubles.is_finite(1e308)
    assert doubles.is_finite(-TINY)
    assert not doubles.is_finite(math.inf)
    assert not doubles.is_finite(-math.inf)
    assert not doubles.is_finite(math.nan)


# -----------------------------
# Fuzzy comparison
# -----------------------------

@pytest.mark.parametrize(
    "a,b,tol,expected",
    [
        (math.nan, math.nan, 0.0, True),
        (math.nan, 1.0, math.inf, False),
        (math.inf, math.inf, 0.0, True),
        (math.inf, -math.inf, math.inf, True),
        (math.inf, 1e308, 1e308, False),
        (0.0, -0.0, 0.0, True),
        (1.0, 1.1, 0.2, True),
        (1.0, 1.1, 0.05, False),
        (1.0, 1.0, 0.0, True),
    ],
)
def test_fuzzy_equals(a, b, tol, expected):
    print(f"[fuzzy-equals] ({a}, {b}, tol={tol}) -> expect {expected}")
    assert doubles.fuzzy_equals(a, b, tol) is expected
    assert doubles.fuzzy_equals(b, a, tol) is expected


@pytest.mark.parametrize("tol", [-1.0, -0.0001, math.nan])
def test_fuzzy_bad_tolerance(tol):
    print(f"[fuzzy-tolerance] tolerance={tol} -> expect ArithmeticDomainError")
    with pytest.raises(ArithmeticDomainError):
        doubles.fuzzy_equals(1.0, 1.0, tol)
    with pytest.raises(ArithmeticDomainError):
        doubles.fuzzy_compare(1.0, 1.0, tol)


def test_fuzzy_equals_not_transitive():
    print("[fuzzy-equals] 0 ~ 0.6 and 0.6 ~ 1.2 with tol 0.6, but not 0 ~ 1.2")
    assert doubles.fuzzy_equals(0.0, 0.6, 0.6)
    assert doubles.fuzzy_equals(0.6, 1.2, 0.6)
    assert not doubles.fuzzy_equals(0.0, 1.2, 0.6)


@pytest.mark.parametrize(
    "a,b,tol,expected",
    [
        (1.0, 2.0, 0.5, -1),
        (2.0, 1.0, 0.5, 1),
        (1.0, 1.2, 0.5, 0),
        (math.nan, math.inf, 0.0, 1),
        (1.0, math.nan, 0.0, -1),
        (math.nan, math.nan, 0.0, 0),
    ],
)
def test_fuzzy_compare(a, b, tol, expected):
    print(f"[fuzzy-compare] ({a}, {b}, tol={tol}) -> expect {expected}")
    assert doubles.fuzzy_compare(a, b, tol) == expected


# -----------------------------
# Rounding to integers
# -----------------------------

SAMPLES = [0.0, -0.0, 0.5, -0.5, 1.5, -1.5, 2.5, -2.5, 2.4, -2.6, 3.5, 7.0, -7.0, 0.49999999999999994, 1e9 + 0.5, -123456.75]


def test_round_to_int_matches_decimal_oracle(round_oracle):
    print("[round-to-int] every mode over halves and near-halves agrees with decimal quantize")
    for x in SAMPLES:
        for mode in ROUNDING_MODES:
            assert doubles.round_to_int(x, mode) == round_oracle(x, mode), (x, mode)
            assert doubles.round_to_long(x, mode) == round_oracle(x, mode), (x, mode)
            assert doubles.round_to_big_integer(x, mode) == round_oracle(x, mode), (x, mode)


def test_round_unnecessary():
    assert doubles.round_to_int(-7.0, R.UNNECESSARY) == -7
    with pytest.raises(RoundingNecessaryError):
        doubles.round_to_long(2.5, R.UNNECESSARY)


@pytest.mark.parametrize("x", [math.inf, -math.inf, math.nan])
def test_round_non_finite_rejected(x):
    print(f"[round-non-finite] {x} -> expect ArithmeticDomainError")
    with pytest.raises(ArithmeticDomainError):
        doubles.round_to_int(x, R.FLOOR)
    with pytest.raises(ArithmeticDomainError):
        doubles.round_to_big_integer(x, R.FLOOR)


def test_round_to_int_range_edges():
    print("[round-to-int] values rounding just inside / just outside the 32-bit range")
    assert doubles.round_to_int(2147483647.4, R.FLOOR) == 2147483647
    assert doubles.round_to_int(-2147483648.9, R.CEILING) == -2147483648
    with pytest.raises(OutOfRangeError):
        doubles.round_to_int(2147483647.5, R.HALF_UP)
    with pytest.raises(OutOfRangeError):
        doubles.round_to_int(-2147483648.9, R.FLOOR)


def test_round_to_long_range_edges():
    print("[round-to-long] 2^63 is out of range, -2^63 is LONG_MIN")
    assert doubles.round_to_long(-(2.0 ** 63), R.UNNECESSARY) == -(2 ** 63)
    assert doubles.round_to_long(9.223372036854775e18, R.DOWN) == 9223372036854774784
    with pytest.raises(OutOfRangeError):
        doubles.round_to_long(2.0 ** 63, R.DOWN)
    # a kind of overflow error
    with pytest.raises(ArithmeticOverflowError):
        doubles.round_to_long(1e300, R.DOWN)


def test_round_to_big_integer_unbounded():
    assert doubles.round_to_big_integer(1e300, R.UNNECESSARY) == int(1e300)
    assert doubles.round_to_big_integer(-(2.0 ** 70) - 0.0, R.FLOOR) == -(2 ** 70)


@pytest.mark.parametrize("x", [10 ** 400, -(10 ** 400)])
def test_int_beyond_double_range_rejected(x):
    print("[double-input] int too large for a double -> expect ArithmeticDomainError")
    with pytest.raises(ArithmeticDomainError):
        doubles.round_to_big_integer(x, R.FLOOR)
    with pytest.raises(ArithmeticDomainError):
        doubles.is_finite(x)
    with pytest.raises(ArithmeticDomainError):
        doubles.mean([1.0, x])


# -----------------------------
# Logarithms / factorial / mean
# -----------------------------

def test_log2_special_cases():
    print("[log2] NaN/negative -> NaN, +/-0 -> -inf, +inf -> +inf")
    assert math.isnan(doubles.log2(math.nan))
    assert math.isnan(doubles.log2(-1.0))
    assert doubles.log2(0.0) == -math.inf
    assert doubles.log2(-0.0) == -math.inf
    assert doubles.log2(math.inf) == math.inf
    assert doubles.log2(8.0) == 3.0


@pytest.mark.parametrize(
    "x,mode,expected",
    [
        (8.0, R.UNNECESSARY, 3),
        (10.0, R.FLOOR, 3),
        (10.0, R.CEILING, 4),
        (11.0, R.HALF_EVEN, 3),
        (12.0, R.HALF_DOWN, 4),
        (0.75, R.FLOOR, -1),
        (0.75, R.CEILING, 0),
        (0.75, R.DOWN, 0),
        (0.75, R.UP, -1),
        (0.75, R.HALF_UP, 0),
        (0.6, R.HALF_UP, -1),
        (TINY, R.UNNECESSARY, -1074),
        (3 * TINY, R.FLOOR, -1073),
        (3 * TINY, R.CEILING, -1072),
    ],
)
def test_log2_rounded(x, mode, expected):
    print(f"[log2-rounded] log2({x!r}) {mode.value} -> expect {expected}")
    assert doubles.log2_rounded(x, mode) == expected


@pytest.mark.parametrize("x", [0.0, -1.0, math.inf, math.nan])
def test_log2_rounded_domain(x):
    with pytest.raises(ArithmeticDomainError):
        doubles.log2_rounded(x, R.FLOOR)


def test_log2_rounded_unnecessary_strict():
    with pytest.raises(RoundingNecessaryError):
        doubles.log2_rounded(10.0, R.UNNECESSARY)


def test_double_factorial():
    print("[factorial-double] exact for small n, inf above 170")
    assert doubles.factorial(0) == 1.0
    assert doubles.factorial(5) == 120.0
    assert doubles.factorial(20) == float(2432902008176640000)
    assert math.isfinite(doubles.factorial(170))
    assert doubles.factorial(171) == math.inf
    with pytest.raises(ArithmeticDomainError):
        doubles.factorial(-1)


def test_mean_values():
    print("[mean] running mean over floats, ints and generators")
    assert doubles.mean([1, 2, 3, 4]) == 2.5
    assert doubles.mean([1.5]) == 1.5
    assert doubles.mean(x for x in (-1.0, 1.0)) == 0.0
    big = 2 ** 63 - 1
    assert doubles.mean([big, big]) == float(big)
    assert doubles.mean([1e308, 1e308]) == 1e308


@pytest.mark.parametrize(
    "values,expected",
    [
        ([1.7e308, -1.7e308], 0.0),
        ([-1.7e308, 1.7e308], 0.0),
        ([1.5e308, -1.5e308, 3.0], 1.0),
    ],
)
def test_mean_opposite_extremes_stay_finite(values, expected):
    print(f"[mean-extremes] {values} -> expect {expected}")
    assert doubles.mean(values) == expected


@pytest.mark.parametrize("values", [[], [1.0, math.inf], [math.nan], [-math.inf, 0.0]])
def test_mean_rejects_empty_or_non_finite(values):
    print(f"[mean-domain] {values} -> expect ArithmeticDomainError")
    with pytest.raises(ArithmeticDomainError):
        doubles.mean(values)


def test_mean_rejects_non_numbers():
    with pytest.raises(TypeError):
        doubles.mean(["1.0"])
    with pytest.raises(TypeError):
        doubles.mean([True, False])
