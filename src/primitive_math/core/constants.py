"""
Primitive Math Core Constants (integer and IEEE-754 domain)
===========================================================

Width bounds and the immutable lookup tables used by the kernel. Tables are
plain tuples built at import time, so every reader sees them fully initialised.
"""

# NOTE: Tables prefixed INT_ belong to the 32-bit family, LONG_ to the 64-bit one.
#       Never index one family's table with the other family's leading-zero count.

# ---------------------------------------------------------------------------
# Signed two's-complement widths
# ---------------------------------------------------------------------------

INT_BITS: int = 32
INT_MIN: int = -(1 << (INT_BITS - 1))       # -2147483648
INT_MAX: int = (1 << (INT_BITS - 1)) - 1    # 2147483647

LONG_BITS: int = 64
LONG_MIN: int = -(1 << (LONG_BITS - 1))     # -9223372036854775808
LONG_MAX: int = (1 << (LONG_BITS - 1)) - 1  # 9223372036854775807

#: floor(sqrt(MAX)) per width; squaring anything larger in magnitude overflows.
FLOOR_SQRT_MAX_INT: int = 46340
FLOOR_SQRT_MAX_LONG: int = 3037000499

#: The biggest half power of two that fits in an unsigned word of the width,
#: i.e. floor(2^(bits - 0.5)).
MAX_POWER_OF_SQRT2_UNSIGNED_INT: int = 0xB504F333
MAX_POWER_OF_SQRT2_UNSIGNED_LONG: int = 0xB504F333F9DE6484


# ---------------------------------------------------------------------------
# Base-10 logarithm tables
# ---------------------------------------------------------------------------

#: INT_MAX_LOG10_FOR_LEADING_ZEROS[i] == floor(log10(2^(32 - i)))
INT_MAX_LOG10_FOR_LEADING_ZEROS: tuple = (
    9, 9, 9, 8, 8, 8, 7, 7, 7, 6, 6, 6, 6, 5, 5, 5, 4, 4, 4, 3, 3, 3, 3,
    2, 2, 2, 1, 1, 1, 0, 0, 0, 0,
)

INT_POWERS_OF_10: tuple = (
    1, 10, 100, 1000, 10000, 100000, 1000000, 10000000, 100000000, 1000000000,
)

#: INT_HALF_POWERS_OF_10[i] == largest int less than 10^(i + 0.5)
INT_HALF_POWERS_OF_10: tuple = (
    3, 31, 316, 3162, 31622, 316227, 3162277, 31622776, 316227766, INT_MAX,
)

#: LONG_MAX_LOG10_FOR_LEADING_ZEROS[i] == floor(log10(2^(64 - i)))
LONG_MAX_LOG10_FOR_LEADING_ZEROS: tuple = (
    19, 18, 18, 18, 18, 17, 17, 17, 16, 16, 16, 15, 15, 15, 15, 14, 14, 14, 13, 13, 13, 12, 12,
    12, 12, 11, 11, 11, 10, 10, 10, 9, 9, 9, 9, 8, 8, 8, 7, 7, 7, 6, 6, 6, 6, 5, 5, 5, 4, 4, 4,
    3, 3, 3, 3, 2, 2, 2, 1, 1, 1, 0, 0, 0,
)

LONG_POWERS_OF_10: tuple = (
    1,
    10,
    100,
    1000,
    10000,
    100000,
    1000000,
    10000000,
    100000000,
    1000000000,
    10000000000,
    100000000000,
    1000000000000,
    10000000000000,
    100000000000000,
    1000000000000000,
    10000000000000000,
    100000000000000000,
    1000000000000000000,
)

#: LONG_HALF_POWERS_OF_10[i] == largest long less than 10^(i + 0.5)
LONG_HALF_POWERS_OF_10: tuple = (
    3,
    31,
    316,
    3162,
    31622,
    316227,
    3162277,
    31622776,
    316227766,
    3162277660,
    31622776601,
    316227766016,
    3162277660168,
    31622776601683,
    316227766016837,
    3162277660168379,
    31622776601683793,
    316227766016837933,
    3162277660168379331,
)


# ---------------------------------------------------------------------------
# Combinatorics tables
# ---------------------------------------------------------------------------

#: n! for every n whose factorial fits in the width.
INT_FACTORIALS: tuple = (
    1,
    1,
    2,
    6,
    24,
    120,
    720,
    5040,
    40320,
    362880,
    3628800,
    39916800,
    479001600,
)

LONG_FACTORIALS: tuple = (
    1,
    1,
    2,
    6,
    24,
    120,
    720,
    5040,
    40320,
    362880,
    3628800,
    39916800,
    479001600,
    6227020800,
    87178291200,
    1307674368000,
    20922789888000,
    355687428096000,
    6402373705728000,
    121645100408832000,
    2432902008176640000,
)

#: binomial(INT_BIGGEST_BINOMIALS[k], k) fits in an int, binomial(... + 1, k) does not.
INT_BIGGEST_BINOMIALS: tuple = (
    INT_MAX, INT_MAX, 65536, 2345, 477, 193, 110, 75, 58, 49, 43, 39, 37, 35, 34, 34, 33,
)

#: binomial(LONG_BIGGEST_BINOMIALS[k], k) fits in a long, binomial(... + 1, k) does not.
LONG_BIGGEST_BINOMIALS: tuple = (
    INT_MAX, INT_MAX, INT_MAX, 3810779, 121977, 16175, 4337, 1733,
    887, 534, 361, 265, 206, 169, 143, 125, 111, 101, 94, 88, 83, 79, 76, 74, 72, 70, 69, 68,
    67, 67, 66, 66, 66, 66,
)

#: Up to LONG_BIGGEST_SIMPLE_BINOMIALS[k] the multiply-then-divide loop never
#: leaves the long range; above it the fraction-folding path is required.
LONG_BIGGEST_SIMPLE_BINOMIALS: tuple = (
    INT_MAX, INT_MAX, INT_MAX, 2642246, 86251, 11724, 3218, 1313,
    684, 419, 287, 214, 169, 139, 119, 105, 95, 87, 81, 76, 73, 70, 68, 66, 64, 63, 62, 62,
    61, 61, 61,
)


# ---------------------------------------------------------------------------
# IEEE-754 binary64 layout
# ---------------------------------------------------------------------------

SIGNIFICAND_MASK: int = 0x000FFFFFFFFFFFFF
EXPONENT_MASK: int = 0x7FF0000000000000
SIGNIFICAND_BITS: int = 52
EXPONENT_BIAS: int = 1023
MIN_EXPONENT: int = -1022
MAX_EXPONENT: int = 1023

#: The implicit leading 1 bit omitted from the significand of normal doubles.
IMPLICIT_BIT: int = SIGNIFICAND_MASK + 1

#: Raw bits of 1.0 (biased exponent 1023, empty significand).
ONE_BITS: int = 0x3FF0000000000000

#: Largest n for which n! is a finite double.
MAX_DOUBLE_FACTORIAL: int = 170

# Range checks for double -> integer narrowing. LONG_MAX is not representable
# as a double, so its bound is stored as LONG_MAX + 1 and compared strictly.
MIN_INT_AS_DOUBLE: float = -2.0 ** 31
MAX_INT_AS_DOUBLE: float = 2.0 ** 31 - 1.0
MIN_LONG_AS_DOUBLE: float = -2.0 ** 63
MAX_LONG_AS_DOUBLE_PLUS_ONE: float = 2.0 ** 63


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

__all__ = [
    "INT_BITS",
    "INT_MIN",
    "INT_MAX",
    "LONG_BITS",
    "LONG_MIN",
    "LONG_MAX",
    "FLOOR_SQRT_MAX_INT",
    "FLOOR_SQRT_MAX_LONG",
    "MAX_POWER_OF_SQRT2_UNSIGNED_INT",
    "MAX_POWER_OF_SQRT2_UNSIGNED_LONG",
    "INT_MAX_LOG10_FOR_LEADING_ZEROS",
    "INT_POWERS_OF_10",
    "INT_HALF_POWERS_OF_10",
    "LONG_MAX_LOG10_FOR_LEADING_ZEROS",
    "LONG_POWERS_OF_10",
    "LONG_HALF_POWERS_OF_10",
    "INT_FACTORIALS",
    "LONG_FACTORIALS",
    "INT_BIGGEST_BINOMIALS",
    "LONG_BIGGEST_BINOMIALS",
    "LONG_BIGGEST_SIMPLE_BINOMIALS",
    "SIGNIFICAND_MASK",
    "EXPONENT_MASK",
    "SIGNIFICAND_BITS",
    "EXPONENT_BIAS",
    "MIN_EXPONENT",
    "MAX_EXPONENT",
    "IMPLICIT_BIT",
    "ONE_BITS",
    "MAX_DOUBLE_FACTORIAL",
    "MIN_INT_AS_DOUBLE",
    "MAX_INT_AS_DOUBLE",
    "MIN_LONG_AS_DOUBLE",
    "MAX_LONG_AS_DOUBLE_PLUS_ONE",
]
