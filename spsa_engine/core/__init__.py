"""Core SPSA building blocks."""

from .vector import Vector
from .gains import GainSequence, standard_gain_sequence, standard_ak, standard_ck
from .distributions import (
    PerturbationDistribution,
    Bernoulli,
    SegmentedUniform,
    sample_n
)
from .constraints import ConstraintFunction, Bounds, BoundedConstraints, no_constraints
from .exceptions import SPSAError, DimensionMismatchError, ZeroPerturbationError

__all__ = [
    "Vector",
    "GainSequence",
    "standard_gain_sequence",
    "standard_ak",
    "standard_ck",
    "PerturbationDistribution",
    "Bernoulli",
    "SegmentedUniform",
    "sample_n",
    "ConstraintFunction",
    "Bounds",
    "BoundedConstraints",
    "no_constraints",
    "SPSAError",
    "DimensionMismatchError",
    "ZeroPerturbationError"
]
