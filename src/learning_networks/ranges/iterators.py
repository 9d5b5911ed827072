"""Iterators over parameter ranges and grid generation.

``iterator`` turns a single range into a finite list of candidate values;
``unwind`` combines several such lists into every possible combination,
one combination per row.
"""

import math
from typing import Any, List, Optional, Sequence

import numpy as np

from ..errors import ConfigurationError, EmptyIteratorError
from .scales import CustomScale, get_scale
from .types import NominalRange, NumericRange, ParamRange


def _unique(values: List[Any]) -> List[Any]:
    """Drop repeated values, keeping first occurrences in order."""
    seen = set()
    result = []
    for v in values:
        try:
            if v in seen:
                continue
            seen.add(v)
        except TypeError:
            # unhashable output of a function scale
            if any(v == r for r in result):
                continue
        result.append(v)
    return result


def iterator(param_range: ParamRange, n: Optional[int] = None) -> List[Any]:
    """Return candidate values for ``param_range``.

    For a NominalRange the values are returned as given (``n`` is ignored),
    repeats included.

    For a NumericRange, ``n`` points are spaced uniformly between the
    transformed bounds and mapped back through the scale. Integer ranges
    round each point to the nearest integer, ties to even. Float ranges
    return floats, except that a function scale's outputs are kept as the
    function returns them. Duplicates are then removed, so fewer than ``n``
    values may be returned.

    Args:
        param_range: Range to iterate
        n: Number of points (numeric ranges only, at least 1)

    Returns:
        List of values in iteration order

    Raises:
        ConfigurationError: If ``n`` is missing or less than 1 for a numeric range
    """
    if isinstance(param_range, NominalRange):
        return list(param_range.values)

    if not isinstance(param_range, NumericRange):
        raise TypeError(f"Expected a parameter range, got {type(param_range).__name__}")

    if n is None:
        raise ConfigurationError(
            f"Numeric range {param_range.field} requires the number of points n"
        )
    if n < 1:
        raise ConfigurationError(f"Number of points must be at least 1, got {n}")

    s = get_scale(param_range.scale)
    transformed = np.linspace(s.forward(param_range.lower), s.forward(param_range.upper), n)
    values = [s.backward(float(t)) for t in transformed]

    if param_range.kind == "int":
        # round() is half-to-even
        values = [int(round(v)) for v in values]
    elif not isinstance(s, CustomScale):
        values = [float(v) for v in values]

    return _unique(values)


def unwind(*iterators: Sequence[Any]) -> np.ndarray:
    """Represent all combinations of values generated by ``iterators``.

    Returns an object array with one column per iterator and one row per
    combination. Elements of the first column cycle fastest, those of the
    last column slowest: row ``r`` holds ``iterators[j][(r // P_j) % L_j]``
    in column ``j``, where ``L_j`` is the length of iterator ``j`` and
    ``P_j`` the product of the lengths before it.

    With no iterators a single row with no columns is returned.

    Raises:
        EmptyIteratorError: If any iterator has length zero

    Example:
        >>> unwind([1, 2], ["a", "b"], ["x", "y", "z"])[:4]
        array([[1, 'a', 'x'],
               [2, 'a', 'x'],
               [1, 'b', 'x'],
               [2, 'b', 'x']], dtype=object)
    """
    lengths = [len(values) for values in iterators]
    total = math.prod(lengths)
    if total == 0:
        raise EmptyIteratorError("Parameter iterator of length zero encountered")

    table = np.empty((total, len(iterators)), dtype=object)

    inner = 1
    for j, values in enumerate(iterators):
        # element-wise fill keeps tuple values intact
        column = np.empty(lengths[j], dtype=object)
        for i, v in enumerate(values):
            column[i] = v
        outer = total // (inner * lengths[j])
        table[:, j] = np.tile(np.repeat(column, inner), outer)
        inner *= lengths[j]

    return table
