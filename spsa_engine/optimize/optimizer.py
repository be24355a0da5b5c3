"""
High-level SPSA optimization with standard gains and Bernoulli perturbations.
"""

from concurrent.futures import Executor
from dataclasses import dataclass
from typing import Optional, Sequence, Union
import logging

import pandas as pd

from ..core.vector import Vector
from ..core.gains import standard_ak, standard_ck
from ..core.distributions import Bernoulli
from ..core.constraints import ConstraintFunction, no_constraints
from ..config import settings
from .engine import SPSA, LossFunction

logger = logging.getLogger(__name__)


@dataclass
class OptimizationResult:
    """Result of an SPSA optimization run."""
    theta: Vector
    final_loss: float
    rounds: int
    history: pd.DataFrame


class Optimizer:
    """
    SPSA optimizer with mostly default options.

    Uses standard a_k and c_k gain sequences (A = 10% of the rounds,
    alpha = 0.602, gamma = 0.101 unless overridden in settings) and a
    Bernoulli +/- 1 perturbation distribution.
    """

    def __init__(
        self,
        loss: LossFunction,
        theta0: Union[Vector, Sequence[float]],
        a: float,
        c: float,
        constraint: Optional[ConstraintFunction] = None,
        executor: Optional[Executor] = None
    ):
        """
        Initialize optimizer.

        Args:
            loss: Loss function to minimize
            theta0: Starting point
            a: Scale of the a_k step-size sequence
            c: Scale of the c_k perturbation sequence (about the loss noise std-dev)
            constraint: Optional constraint function
            executor: Optional executor for concurrent loss evaluations
        """
        self.loss = loss
        self.theta0 = Vector(theta0)
        self.a = a
        self.c = c
        self.constraint = constraint if constraint is not None else no_constraints
        self.executor = executor

    def build_engine(
        self,
        n_rounds: int,
        random_seed: Optional[int] = None,
        record_history: bool = False
    ) -> SPSA:
        """Wire the standard gains and perturbation distribution into an engine."""
        return SPSA(
            theta=self.theta0,
            loss=self.loss,
            ak=standard_ak(self.a, n_rounds * settings.stability_fraction, settings.alpha),
            ck=standard_ck(self.c, settings.gamma),
            delta=Bernoulli(settings.perturbation_magnitude, seed=random_seed),
            constraint=self.constraint,
            executor=self.executor,
            record_history=record_history
        )

    def optimize(
        self,
        n_rounds: int,
        random_seed: Optional[int] = None,
        record_history: bool = False
    ) -> OptimizationResult:
        """
        Run the optimization.

        Args:
            n_rounds: Number of SPSA rounds
            random_seed: Seed of the perturbation generator
            record_history: Keep per-round diagnostics in the result

        Returns:
            OptimizationResult with the final theta and its loss
        """
        logger.info(f"Starting SPSA optimization: rounds={n_rounds}, a={self.a}, c={self.c}")

        engine = self.build_engine(n_rounds, random_seed, record_history)
        theta = engine.run(n_rounds)
        final_loss = float(self.loss(theta))

        logger.info(f"Optimization complete. Final loss: {final_loss:.6g}, theta: {theta}")

        return OptimizationResult(
            theta=theta,
            final_loss=final_loss,
            rounds=engine.rounds_completed,
            history=engine.history_frame()
        )


def optimize(
    loss: LossFunction,
    theta0: Union[Vector, Sequence[float]],
    n: int,
    a: float,
    c: float,
    constraint: Optional[ConstraintFunction] = None,
    seed: Optional[int] = None
) -> Vector:
    """
    Optimize a loss function with SPSA using default options.

    Example:
        >>> theta = optimize(absolute_sum, [1, 1, 1, 1, 1], 1000, 1, 0.1)

    Returns:
        The final parameter vector after n rounds
    """
    return Optimizer(loss, theta0, a, c, constraint).optimize(n, random_seed=seed).theta
