"""
Error types raised by the SPSA core.
"""


class SPSAError(Exception):
    """Base class for SPSA engine errors."""


class DimensionMismatchError(SPSAError, ValueError):
    """Raised when vectors (or bounds) of unequal length are combined."""

    def __init__(self, expected: int, actual: int, what: str = "vector"):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Dimension mismatch: expected {what} of length {expected}, got {actual}")


class ZeroPerturbationError(SPSAError, ArithmeticError):
    """
    Raised when a perturbation coordinate is exactly zero.

    The gradient estimate divides by every coordinate of the perturbation
    vector, so a zero sample means the distribution violates its contract.
    """
