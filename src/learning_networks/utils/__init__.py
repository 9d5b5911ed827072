"""Utility modules for learning-networks."""

from .data import partition, select_rows, to_array
from .fields import recursive_getattr, recursive_setattr

__all__ = [
    "partition",
    "select_rows",
    "to_array",
    "recursive_getattr",
    "recursive_setattr",
]
