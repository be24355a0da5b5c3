"""Pytest configuration and fixtures."""
import pytest
import numpy as np

from spsa_engine.core.vector import Vector
from spsa_engine.core.gains import standard_ak, standard_ck
from spsa_engine.core.distributions import Bernoulli
from spsa_engine.losses import absolute_sum


@pytest.fixture
def rng():
    """Seeded random generator for reproducible perturbations."""
    return np.random.default_rng(42)


@pytest.fixture
def ones5():
    """Five-dimensional starting point."""
    return Vector([1, 1, 1, 1, 1])


@pytest.fixture
def sample_bounds():
    """Box bounds matching a five-dimensional vector."""
    return [(0, 10), (5, 10), (-5, 0), (0, 5), (0, 5)]


@pytest.fixture
def engine_kwargs(ones5, rng):
    """Standard engine configuration on the absolute sum loss."""
    return {
        'theta': ones5,
        'loss': absolute_sum,
        'ak': standard_ak(1, 100, 0.602),
        'ck': standard_ck(0.1, 0.101),
        'delta': Bernoulli(1, rng=rng),
    }
