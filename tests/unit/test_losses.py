"""Unit tests for the reference loss functions."""
import pytest

from spsa_engine.core.vector import Vector
from spsa_engine.losses import absolute_sum, rosenbrock, LOSS_FUNCTIONS


def test_absolute_sum():
    assert absolute_sum(Vector([1, -2, 3])) == 6.0
    assert absolute_sum(Vector.zeros(4)) == 0.0


def test_rosenbrock_minimum():
    assert rosenbrock(Vector([1] * 10)) == 0.0


def test_rosenbrock_value():
    # 100 * (0 - 1)^2 + (0 - 1)^2
    assert rosenbrock(Vector([0, 1])) == pytest.approx(101.0)


def test_rosenbrock_odd_dimension():
    with pytest.raises(ValueError):
        rosenbrock(Vector([1, 1, 1]))


def test_registry():
    assert set(LOSS_FUNCTIONS) == {'absolute_sum', 'rosenbrock'}
