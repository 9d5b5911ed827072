"""Helpers for the opaque data containers flowing through a network.

Networks pass whatever the models accept. The reference models use polars
DataFrames for feature tables and numpy arrays for targets and matrices;
these helpers cover row selection and conversion for those containers.
"""

from typing import Any, List, Optional, Sequence

import numpy as np
import polars as pl


def select_rows(data: Any, rows: Optional[Sequence[int]]) -> Any:
    """Return the rows ``rows`` of ``data`` (all of ``data`` when rows is None).

    Supports polars DataFrames and Series, numpy arrays, and plain sequences.
    """
    if rows is None:
        return data
    indices = [int(i) for i in rows]
    if isinstance(data, pl.DataFrame):
        return data.select(pl.all().gather(indices))
    if isinstance(data, pl.Series):
        return data.gather(indices)
    if isinstance(data, np.ndarray):
        return data[indices]
    if isinstance(data, (list, tuple)):
        return type(data)(data[i] for i in indices)
    raise TypeError(f"Cannot select rows from {type(data).__name__}")


def to_array(data: Any) -> np.ndarray:
    """Convert a table (polars DataFrame/Series) or array-like to a numpy array."""
    if isinstance(data, (pl.DataFrame, pl.Series)):
        return data.to_numpy()
    return np.asarray(data)


def partition(rows: Sequence[int], *fractions: float) -> List[List[int]]:
    """Split ``rows`` into consecutive chunks.

    Chunk ``i`` holds ``round(fractions[i] * len(rows))`` rows; a final chunk
    holds the remainder. So ``partition(range(100), 0.7, 0.15)`` returns
    chunks of 70, 15 and 15 rows.

    Args:
        rows: Row indices to split, in order
        *fractions: Fractions for all but the last chunk

    Returns:
        List of ``len(fractions) + 1`` lists of row indices

    Raises:
        ValueError: If a fraction is outside [0, 1] or they sum to more than 1
    """
    rows = list(rows)
    if any(f < 0 or f > 1 for f in fractions):
        raise ValueError(f"Fractions must be in [0, 1], got {fractions}")
    if sum(fractions) > 1:
        raise ValueError(f"Fractions must sum to at most 1, got {sum(fractions)}")

    n = len(rows)
    chunks = []
    start = 0
    for f in fractions:
        stop = min(n, start + int(round(f * n)))
        chunks.append(rows[start:stop])
        start = stop
    chunks.append(rows[start:])
    return chunks
