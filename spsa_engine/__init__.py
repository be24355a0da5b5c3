"""
SPSA Engine - Simultaneous Perturbation Stochastic Approximation.

This package provides:
- Core: Vector arithmetic, gain sequences, perturbation distributions, constraints
- Optimize: The SPSA round loop and a one-call convenience wrapper
- Losses: Reference loss functions for validating convergence
"""

__version__ = "1.0.0"
__author__ = "SPSA Engine Team"
