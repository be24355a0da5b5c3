"""
Gain sequences for the SPSA recursion.

a_k scales the parameter update, c_k scales the perturbation. Both must stay
strictly positive and decrease towards zero for the stochastic approximation
to converge (see Spall, Introduction to Stochastic Search and Optimization).
"""

from typing import Callable, Iterator
import logging

logger = logging.getLogger(__name__)


class GainSequence(Iterator[float]):
    """
    Infinite, lazily evaluated stream of gain values.

    Wraps a pure function ``k -> value`` with a counter starting at k=1. Every
    ``next()`` returns the value for the current k and advances it by one.
    """

    def __init__(self, fn: Callable[[int], float], name: str = "gain"):
        self.fn = fn
        self.name = name
        self._k = 1

    @property
    def k(self) -> int:
        """Index of the value the next pull will return."""
        return self._k

    def __iter__(self) -> "GainSequence":
        return self

    def __next__(self) -> float:
        value = self.fn(self._k)
        self._k += 1
        return value

    def reset(self):
        """Rewind to k=1 so the sequence can drive a fresh run."""
        self._k = 1

    def __repr__(self) -> str:
        return f"GainSequence(name={self.name!r}, k={self._k})"


def standard_gain_sequence(scale: float, offset: float, exponent: float, name: str = "gain") -> GainSequence:
    """
    Standard form ``scale / (k + offset) ** exponent`` for k = 1, 2, ...

    Args:
        scale: Numerator, must be > 0
        offset: Shift of the index, must be > -1 so that k + offset > 0
        exponent: Decay exponent, must be > 0

    Returns:
        GainSequence starting at k=1
    """
    if scale <= 0:
        raise ValueError("scale must be > 0")
    if offset <= -1:
        raise ValueError("offset must be > -1")
    if exponent <= 0:
        raise ValueError("exponent must be > 0")

    def value(k: int) -> float:
        return scale / (k + offset) ** exponent

    return GainSequence(value, name=name)


def standard_ak(a: float, A: float, alpha: float) -> GainSequence:
    """
    Step-size sequence a_k = a / (k + A + 1) ** alpha.

    Semiautomatic tuning: A is roughly 10% of the planned rounds and
    alpha = 0.602. For very long runs alpha = 1.0 is asymptotically optimal.
    """
    return standard_gain_sequence(a, A + 1, alpha, name="ak")


def standard_ck(c: float, gamma: float) -> GainSequence:
    """
    Perturbation sequence c_k = c / (k + 1) ** gamma.

    c is usually about the standard deviation of the loss measurement noise;
    gamma = 0.101 works best in finite samples (1/6 asymptotically).
    """
    return standard_gain_sequence(c, 1, gamma, name="ck")
