"""
SPSA engine: the stochastic approximation recursion.

Much of the notation follows James Spall, Introduction to Stochastic Search
and Optimization (Wiley, 2003):

    delta_k = c_k * Delta,  Delta ~ perturbation distribution
    g_k[i]  = (L(theta + delta_k) - L(theta - delta_k)) / (2 * delta_k[i])
    theta   = C(theta - a_k * g_k)
"""

from concurrent.futures import Executor, wait
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, List, Optional, Tuple
import logging
import math

import numpy as np
import pandas as pd

from ..core.vector import Vector
from ..core.distributions import sample_n
from ..core.constraints import ConstraintFunction, BoundedConstraints, no_constraints
from ..core.exceptions import DimensionMismatchError, ZeroPerturbationError
from ..config import settings

logger = logging.getLogger(__name__)

LossFunction = Callable[[Vector], float]


class EngineState(Enum):
    IDLE = "idle"
    RUNNING = "running"


@dataclass
class RoundRecord:
    """Diagnostics of a single completed round."""
    k: int
    ak: float
    ck: float
    f_pos: float
    f_neg: float
    theta: Vector

    def to_dict(self) -> dict:
        return {
            'k': self.k,
            'ak': self.ak,
            'ck': self.ck,
            'f_pos': self.f_pos,
            'f_neg': self.f_neg,
            'theta': self.theta.to_list()
        }


class SPSA:
    """
    An instance of the SPSA optimization algorithm.

    Process per round:
        1. Draw c_k, then a_k
        2. Build the perturbation delta = c_k * Delta
        3. Evaluate the loss at theta + delta and theta - delta
        4. Estimate the gradient coordinate-wise
        5. Step theta against the gradient, scaled by a_k
        6. Project theta through the constraint function

    Only ``theta`` changes between rounds; everything else is configuration
    fixed at construction.
    """

    def __init__(
        self,
        theta: Vector,
        loss: LossFunction,
        ak: Iterator[float],
        ck: Iterator[float],
        delta,
        constraint: Optional[ConstraintFunction] = None,
        executor: Optional[Executor] = None,
        record_history: bool = False
    ):
        """
        Initialize engine.

        Args:
            theta: Initial parameter vector; its length fixes the dimension
            loss: Loss function to minimize, Vector -> float
            ak: Step-size gain sequence
            ck: Perturbation gain sequence
            delta: Perturbation distribution (any object with ``sample()``)
            constraint: Constraint function applied after every update
            executor: Optional executor to evaluate the two perturbed losses concurrently
            record_history: Keep a RoundRecord for every round
        """
        self.theta = theta if isinstance(theta, Vector) else Vector(theta)
        self.loss = loss
        self.ak = ak
        self.ck = ck
        self.delta = delta
        self.constraint = constraint if constraint is not None else no_constraints
        self.executor = executor
        self.record_history = record_history

        if isinstance(self.constraint, BoundedConstraints) and len(self.constraint) != len(self.theta):
            raise DimensionMismatchError(len(self.theta), len(self.constraint), what="bounds")

        self.rounds_completed = 0
        self.history: List[RoundRecord] = []

        logger.info(f"SPSA engine initialized: dim={len(self.theta)}, delta={self.delta!r}")

    @property
    def state(self) -> EngineState:
        return EngineState.RUNNING if self.rounds_completed > 0 else EngineState.IDLE

    # ------------------------------------------------------------
    # Round loop
    # ------------------------------------------------------------

    def run(self, rounds: int) -> Vector:
        """
        Run several rounds sequentially.

        Args:
            rounds: Number of rounds, >= 0

        Returns:
            The current theta after the last round
        """
        if rounds < 0:
            raise ValueError("rounds must be >= 0")

        for _ in range(rounds):
            self.round()

            if settings.log_every and self.rounds_completed % settings.log_every == 0:
                logger.info(f"Round {self.rounds_completed}: theta={self.theta}")

        return self.theta

    def round(self) -> Vector:
        """Run one round of SPSA and return the committed theta."""
        ck = self._draw(self.ck, "ck")
        ak = self._draw(self.ak, "ak")

        grad, f_pos, f_neg = self._estimate(ck)

        # Adjust theta via SA, then correct any constraints
        theta = self.theta.subtract(grad.scale(ak))
        theta = self.constraint(theta)

        self.theta = theta
        self.rounds_completed += 1

        if self.record_history:
            self.history.append(RoundRecord(
                k=self.rounds_completed,
                ak=ak,
                ck=ck,
                f_pos=f_pos,
                f_neg=f_neg,
                theta=theta
            ))

        logger.debug(f"Round {self.rounds_completed}: ak={ak:.6g}, ck={ck:.6g}, f+={f_pos:.6g}, f-={f_neg:.6g}")
        return theta

    def estimate_gradient(self) -> Vector:
        """
        Return a simultaneous-perturbation gradient estimate at theta.

        Consumes one c_k and one a_k, as a round would, so both sequences
        stay paired for later rounds. Theta is left untouched.
        """
        ck = self._draw(self.ck, "ck")
        self._draw(self.ak, "ak")
        grad, _, _ = self._estimate(ck)
        return grad

    def _estimate(self, ck: float) -> Tuple[Vector, float, float]:
        n = len(self.theta)

        delta = sample_n(n, self.delta).scale(ck)
        if any(d == 0 for d in delta):
            raise ZeroPerturbationError(f"Perturbation vector has a zero coordinate: {delta!r}")

        f_pos, f_neg = self._evaluate(self.theta.add(delta), self.theta.subtract(delta))

        if not (math.isfinite(f_pos) and math.isfinite(f_neg)):
            logger.warning(f"Non-finite loss value at round {self.rounds_completed + 1}: f+={f_pos}, f-={f_neg}")

        grad = Vector((f_pos - f_neg) / (2 * np.asarray(delta)))
        return grad, f_pos, f_neg

    def _evaluate(self, t_pos: Vector, t_neg: Vector) -> Tuple[float, float]:
        """Evaluate the loss at both perturbed points, concurrently if an executor is set."""
        if self.executor is None:
            return float(self.loss(t_pos)), float(self.loss(t_neg))

        pos_future = self.executor.submit(self.loss, t_pos)
        neg_future = self.executor.submit(self.loss, t_neg)
        # Both evaluations finish before either error is raised
        wait([pos_future, neg_future])
        return float(pos_future.result()), float(neg_future.result())

    @staticmethod
    def _draw(sequence: Iterator[float], name: str) -> float:
        value = float(next(sequence))
        if not value > 0:
            raise ValueError(f"Gain sequence {name} produced a non-positive value: {value}")
        return value

    # ------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------

    def history_frame(self) -> pd.DataFrame:
        """Round history as a DataFrame, one row per recorded round."""
        columns = ['k', 'ak', 'ck', 'f_pos', 'f_neg', 'theta']
        if not self.history:
            return pd.DataFrame(columns=columns)
        return pd.DataFrame([r.to_dict() for r in self.history], columns=columns)
