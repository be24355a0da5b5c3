"""Integration tests for end-to-end SPSA convergence."""
import pytest

from spsa_engine.core.vector import Vector
from spsa_engine.core.gains import standard_ak, standard_ck
from spsa_engine.core.distributions import Bernoulli
from spsa_engine.core.constraints import BoundedConstraints, no_constraints
from spsa_engine.optimize.engine import SPSA
from spsa_engine.optimize.optimizer import Optimizer, OptimizationResult, optimize
from spsa_engine.losses import absolute_sum, rosenbrock


def test_spsa_absolute_sum(ones5):
    """Test the core engine with every knob set explicitly."""
    engine = SPSA(
        theta=ones5,
        loss=absolute_sum,
        ak=standard_ak(1, 100, 0.602),
        ck=standard_ck(0.1, 0.101),
        delta=Bernoulli(1, seed=1),
        constraint=no_constraints
    )
    
    final = engine.run(1000)
    
    assert final.mean_square() < 0.001, f"SPSA didn't optimize AbsoluteSum well: {final}"


def test_optimize_absolute_sum():
    """Test the convenience wrapper."""
    theta = optimize(absolute_sum, [1, 1, 1, 1, 1], 1000, 1, 0.1, seed=2)
    
    assert isinstance(theta, Vector)
    assert theta.mean_square() < 0.001, f"optimize didn't optimize AbsoluteSum well: {theta}"


def test_spsa_rosenbrock():
    """Test convergence on the paired-coordinate Rosenbrock function."""
    theta0 = [0.99, 1, 0.99, 1, 0.99, 1, 0.99, 1, 0.99, 1]
    theta = optimize(rosenbrock, theta0, 10000, 0.002, 0.05, seed=3)
    
    assert rosenbrock(theta) < 0.001, f"SPSA didn't optimize Rosenbrock well: {theta}"


def test_optimizer_result_with_constraint():
    """Test the Optimizer facade with box constraints."""
    constraint = BoundedConstraints([(0.5, 2.0)] * 4)
    optimizer = Optimizer(absolute_sum, [1, 1, 1, 1], a=1, c=0.1, constraint=constraint)
    
    result = optimizer.optimize(n_rounds=500, random_seed=4, record_history=True)
    
    assert isinstance(result, OptimizationResult)
    assert result.rounds == 500
    assert len(result.history) == 500
    # Optimum of the box is its lower corner
    assert all(x >= 0.5 for x in result.theta)
    assert result.theta.to_list() == pytest.approx([0.5] * 4, abs=0.15)
    assert result.final_loss == pytest.approx(absolute_sum(result.theta))
