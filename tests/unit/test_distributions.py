"""Unit tests for perturbation distributions."""
import pytest
import numpy as np

from spsa_engine.core.distributions import (
    PerturbationDistribution,
    Bernoulli,
    SegmentedUniform,
    sample_n
)
from spsa_engine.core.vector import Vector


def check_moments(distribution, n=1000, big=100.0):
    """First moment, second moment and mean absolute reciprocal stay bounded."""
    data = np.asarray(sample_n(n, distribution))
    
    assert len(data) == n
    assert abs(data.mean()) < big, "First moment is too large."
    assert (data ** 2).mean() < big, "Second moment is too large."
    assert (1 / np.abs(data)).mean() < big, "First inverse moment is too large."
    return data


def test_bernoulli(rng):
    data = check_moments(Bernoulli(1, rng=rng))
    
    assert set(np.unique(data)) <= {-1.0, 1.0}
    # Both signs show up over 1000 draws
    assert (data > 0).any() and (data < 0).any()


def test_bernoulli_single_sample(rng):
    b = Bernoulli(2.5, rng=rng)
    assert all(b.sample() in (-2.5, 2.5) for _ in range(50))


def test_segmented_uniform(rng):
    data = check_moments(SegmentedUniform(0.5, 1.5, rng=rng))
    
    magnitudes = np.abs(data)
    assert (magnitudes >= 0.5).all()
    assert (magnitudes <= 1.5).all()
    assert (data > 0).any() and (data < 0).any()


def test_segmented_uniform_single_sample(rng):
    su = SegmentedUniform(0.5, 1.5, rng=rng)
    for _ in range(50):
        assert 0.5 <= abs(su.sample()) <= 1.5


@pytest.mark.parametrize("a,b", [(0, 1), (1, 1), (2, 1), (-1, 1)])
def test_segmented_uniform_invalid(a, b):
    with pytest.raises(ValueError):
        SegmentedUniform(a, b)


def test_bernoulli_invalid():
    with pytest.raises(ValueError):
        Bernoulli(0)


def test_seed_reproducibility():
    """Test that an explicit seed makes draws repeatable."""
    a = sample_n(20, Bernoulli(1, seed=3))
    b = sample_n(20, Bernoulli(1, seed=3))
    
    assert a == b


def test_sample_n_duck_typed():
    """Test that any object with sample() works."""
    class Constant:
        def sample(self):
            return 0.25
    
    v = sample_n(4, Constant())
    
    assert isinstance(v, Vector)
    assert v == [0.25, 0.25, 0.25, 0.25]


def test_default_sample_n_uses_sample():
    """Test the base-class bulk sampler for custom subclasses."""
    class Alternating(PerturbationDistribution):
        def __init__(self):
            super().__init__(seed=0)
            self.sign = 1.0
        
        def sample(self):
            self.sign = -self.sign
            return self.sign
    
    assert sample_n(4, Alternating()) == [-1, 1, -1, 1]


def test_abstract_distribution():
    with pytest.raises(TypeError):
        PerturbationDistribution()
