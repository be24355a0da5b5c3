"""
Perturbation distributions for the simultaneous-perturbation gradient estimate.

A valid distribution must be symmetric around zero with a bounded inverse
moment, E[1/|X|] < inf. This rules out the normal and the plain uniform
distribution. The condition is a documented precondition: it is not checked
at runtime beyond rejecting exact zeros in the engine.
"""

from abc import ABC, abstractmethod
from typing import Optional
import numpy as np

from .vector import Vector


class PerturbationDistribution(ABC):
    """Abstract base class for perturbation distributions."""

    def __init__(self, rng: Optional[np.random.Generator] = None, seed: Optional[int] = None):
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    @abstractmethod
    def sample(self) -> float:
        """Draw a single perturbation value."""
        pass

    def sample_n(self, n: int) -> np.ndarray:
        """Draw n i.i.d. values."""
        return np.array([self.sample() for _ in range(n)], dtype=float)


class Bernoulli(PerturbationDistribution):
    """
    Symmetric Bernoulli +/- r distribution.

    The asymptotically optimal choice for SPSA and the default of the
    convenience wrapper.
    """

    def __init__(self, r: float = 1.0, rng: Optional[np.random.Generator] = None, seed: Optional[int] = None):
        if r <= 0:
            raise ValueError("r must be > 0")
        super().__init__(rng=rng, seed=seed)
        self.r = float(r)

    def sample(self) -> float:
        return self.r if self.rng.random() < 0.5 else -self.r

    def sample_n(self, n: int) -> np.ndarray:
        return np.where(self.rng.random(n) < 0.5, self.r, -self.r)

    def __repr__(self) -> str:
        return f"Bernoulli(r={self.r})"


class SegmentedUniform(PerturbationDistribution):
    """
    Segmented (mirrored) uniform distribution.

    Samples with equal density every value in [a, b] U [-b, -a], 0 < a < b.
    """

    def __init__(self, a: float, b: float, rng: Optional[np.random.Generator] = None, seed: Optional[int] = None):
        if not 0 < a < b:
            raise ValueError(f"SegmentedUniform requires 0 < a < b, got a={a}, b={b}")
        super().__init__(rng=rng, seed=seed)
        self.a = float(a)
        self.b = float(b)

    def sample(self) -> float:
        return float(self.sample_n(1)[0])

    def sample_n(self, n: int) -> np.ndarray:
        magnitude = self.rng.uniform(self.a, self.b, size=n)
        sign = np.where(self.rng.random(n) < 0.5, 1.0, -1.0)
        return sign * magnitude

    def __repr__(self) -> str:
        return f"SegmentedUniform(a={self.a}, b={self.b})"


def sample_n(n: int, distribution) -> Vector:
    """
    Draw n i.i.d. samples from a distribution into a fresh Vector.

    Any object exposing ``sample()`` is accepted; PerturbationDistribution
    subclasses use their bulk sampler.
    """
    if n < 0:
        raise ValueError("n must be >= 0")
    if isinstance(distribution, PerturbationDistribution):
        return Vector(distribution.sample_n(n))
    return Vector([distribution.sample() for _ in range(n)])
