"""
Primitive Math Core
===================

Width-generic integer kernel shared by the 32-bit (``ints``) and 64-bit
(``longs``) function families, plus the IEEE-754 helpers used by ``doubles``.

Every integer operation here takes a keyword-only ``width`` (:data:`INT32` or
:data:`INT64`); results are exact, checked, or saturated, never wrapped unless
the function says so (``pow``).
"""

# NOTE:
#   Values outside the requested width are rejected (ArithmeticDomainError);
#   there is no implicit widening or narrowing between families.

# Rounding policy
from .rounding import (
    RoundingMode,
    resolve,
    require_mode,
    check_rounding_unnecessary,
)

# Width model
from .widths import (
    IntWidth,
    INT32,
    INT64,
    require_int,
)

# Overflow-checked arithmetic
from .checked import (
    checked_add,
    checked_subtract,
    checked_multiply,
    checked_pow,
    pow,
    checked_cast,
    saturated_cast,
)

# Exact division, roots and logarithms
from .division import (
    is_power_of_two,
    mod,
    mean,
    divide,
    sqrt,
    log2,
    log10,
)

# Binary GCD and saturating combinatorics
from .gcd import gcd
from .combinatorics import (
    factorial,
    binomial,
    multiply_fraction,
)

# Core exceptions
from .exc import (
    ArithmeticDomainError,
    ZeroDivisorError,
    ArithmeticOverflowError,
    OutOfRangeError,
    RoundingNecessaryError,
    InvariantViolation,
)

__all__ = [
    # rounding
    "RoundingMode",
    "resolve",
    "require_mode",
    "check_rounding_unnecessary",
    # widths
    "IntWidth",
    "INT32",
    "INT64",
    "require_int",
    # checked
    "checked_add",
    "checked_subtract",
    "checked_multiply",
    "checked_pow",
    "pow",
    "checked_cast",
    "saturated_cast",
    # division
    "is_power_of_two",
    "mod",
    "mean",
    "divide",
    "sqrt",
    "log2",
    "log10",
    # gcd / combinatorics
    "gcd",
    "factorial",
    "binomial",
    "multiply_fraction",
    # exceptions
    "ArithmeticDomainError",
    "ZeroDivisorError",
    "ArithmeticOverflowError",
    "OutOfRangeError",
    "RoundingNecessaryError",
    "InvariantViolation",
]
