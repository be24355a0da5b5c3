"""
Constraint functions: map a parameter vector back into its feasible set.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, List, Tuple, Union
import numpy as np

from .vector import Vector
from .exceptions import DimensionMismatchError

ConstraintFunction = Callable[[Vector], Vector]


def no_constraints(theta: Vector) -> Vector:
    """Identity constraint (default)."""
    return theta


@dataclass(frozen=True)
class Bounds:
    """Lower and upper bound on a single coordinate."""
    lower: float
    upper: float

    def __post_init__(self):
        if self.lower > self.upper:
            raise ValueError(f"lower bound {self.lower} exceeds upper bound {self.upper}")


class BoundedConstraints:
    """
    Per-coordinate box constraints.

    Each coordinate is clamped independently into [lower_i, upper_i]. The
    instance is callable, so it can be passed directly as an engine
    constraint function.
    """

    def __init__(self, bounds: Iterable[Union[Bounds, Tuple[float, float]]]):
        self.bounds: List[Bounds] = [b if isinstance(b, Bounds) else Bounds(*b) for b in bounds]
        self._lower = np.array([b.lower for b in self.bounds], dtype=float)
        self._upper = np.array([b.upper for b in self.bounds], dtype=float)

    def __len__(self) -> int:
        return len(self.bounds)

    def constrain(self, theta: Vector) -> Vector:
        """Return a new vector with every coordinate clamped into its bounds."""
        if len(theta) != len(self.bounds):
            raise DimensionMismatchError(len(theta), len(self.bounds), what="bounds")
        return Vector(np.clip(np.asarray(theta, dtype=float), self._lower, self._upper))

    def __call__(self, theta: Vector) -> Vector:
        return self.constrain(theta)

    def __repr__(self) -> str:
        return f"BoundedConstraints({[(b.lower, b.upper) for b in self.bounds]})"
