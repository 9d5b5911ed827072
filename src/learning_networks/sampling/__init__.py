"""Hyperparameter sampling strategies.

This module provides sampling methods that expand parameter ranges into
concrete hyperparameter assignments for model tuning.
"""

from .base import SamplingStrategy
from .grid import GridSampler, apply_sample

__all__ = [
    "SamplingStrategy",
    "GridSampler",
    "apply_sample",
]
