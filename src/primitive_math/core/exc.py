"""
Core exception types for primitive_math.core.

These are dependency-free and may be imported by all core modules.
"""

__all__ = [
    "ArithmeticDomainError",
    "ZeroDivisorError",
    "ArithmeticOverflowError",
    "OutOfRangeError",
    "RoundingNecessaryError",
    "InvariantViolation",
]


class ArithmeticDomainError(ValueError):
    """Raised when inputs violate a function's domain or basic preconditions."""
    pass


class ZeroDivisorError(ArithmeticDomainError, ZeroDivisionError):
    """Raised when an integer division is asked to divide by zero."""
    pass


class ArithmeticOverflowError(OverflowError):
    """Raised when an exact result does not fit in the target width.

    Attributes
    ----------
    bits : int | None
        Width of the function family that overflowed, when known.
    """

    def __init__(self, message: str = "overflow", *, bits=None):
        super().__init__(message)
        self.bits = bits


class OutOfRangeError(ArithmeticOverflowError):
    """Raised when a rounded double falls outside the target integer range."""
    pass


class RoundingNecessaryError(ArithmeticError):
    """Raised when RoundingMode.UNNECESSARY meets an inexact result."""
    pass


class InvariantViolation(Exception):
    """Raised when an internal post-condition would be broken."""
    pass
