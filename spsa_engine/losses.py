"""
Reference loss functions used to validate convergence.
"""

from typing import Callable, Dict
import numpy as np

from .core.vector import Vector


def absolute_sum(v: Vector) -> float:
    """Sum of absolute values. Minimum 0 at the origin."""
    return float(np.abs(np.asarray(v, dtype=float)).sum())


def rosenbrock(v: Vector) -> float:
    """
    Paired-coordinate Rosenbrock function.

    Sums 100 * (x_i^2 - x_{i+1})^2 + (x_i - 1)^2 over pairs (0,1), (2,3), ...
    Minimum 0 at (1, 1, ..., 1). Requires an even dimension.
    """
    x = np.asarray(v, dtype=float)
    if len(x) % 2 != 0:
        raise ValueError(f"rosenbrock requires an even dimension, got {len(x)}")
    odd, even = x[0::2], x[1::2]
    return float((100 * (odd ** 2 - even) ** 2 + (odd - 1) ** 2).sum())


LOSS_FUNCTIONS: Dict[str, Callable[[Vector], float]] = {
    "absolute_sum": absolute_sum,
    "rosenbrock": rosenbrock,
}
