"""Hyperparameter ranges and grid generation.

This module provides the range types used for tuning, the scale registry
they interpolate through, and the iterators that turn ranges into grids.
"""

from .scales import (
    Scale,
    LinearScale,
    LogScale,
    CustomScale,
    get_scale,
    forward,
    backward,
)
from .types import (
    ParamRange,
    NominalRange,
    NumericRange,
    make_range,
    scale_of,
)
from .iterators import iterator, unwind

__all__ = [
    # Scales
    "Scale",
    "LinearScale",
    "LogScale",
    "CustomScale",
    "get_scale",
    "forward",
    "backward",
    # Ranges
    "ParamRange",
    "NominalRange",
    "NumericRange",
    "make_range",
    "scale_of",
    # Iterators
    "iterator",
    "unwind",
]
