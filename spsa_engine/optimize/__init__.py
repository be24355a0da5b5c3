"""SPSA optimization engine and convenience wrapper."""

from .engine import SPSA, EngineState, RoundRecord, LossFunction
from .optimizer import Optimizer, OptimizationResult, optimize

__all__ = [
    "SPSA",
    "EngineState",
    "RoundRecord",
    "LossFunction",
    "Optimizer",
    "OptimizationResult",
    "optimize"
]
