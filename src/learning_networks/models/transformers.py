"""Reference transformers.

Simple, deterministic transformers used to assemble and test networks:
- Standardizer: rescale float columns of a DataFrame to zero mean, unit std
- UnivariateStandardizer: the same for a 1-D numeric vector
- FeatureSelector: keep a subset of DataFrame columns
- ToIntTransformer: encode labels as consecutive integers
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

import numpy as np
import polars as pl

from ..base_model import Transformer

logger = logging.getLogger(__name__)


def _spread(std: float) -> float:
    # constant columns are centred but not rescaled
    if std is None or std == 0 or not np.isfinite(std):
        return 1.0
    return float(std)


@dataclass
class Standardizer(Transformer):
    """Standardize float columns of a polars DataFrame.

    Attributes:
        features: Columns to standardize; empty means every float column
    """
    features: List[str] = field(default_factory=list)

    def fit(self, verbosity: int, X: pl.DataFrame):
        columns = list(self.features) if self.features else [
            name for name, dtype in X.schema.items() if dtype.is_float()
        ]
        unknown = [c for c in columns if c not in X.columns]
        if unknown:
            raise ValueError(f"Standardizer: unknown features {unknown}. Available: {X.columns}")

        fitresult = {c: (float(X[c].mean()), _spread(X[c].std())) for c in columns}
        if verbosity > 0:
            logger.info(f"Standardizer: fitted {len(fitresult)} features")
        return fitresult, None, {"features_fit": columns}

    def transform(self, fitresult: Dict[str, Tuple[float, float]], X: pl.DataFrame) -> pl.DataFrame:
        return X.with_columns(
            [((pl.col(c) - mean) / std).alias(c) for c, (mean, std) in fitresult.items()]
        )

    def inverse_transform(self, fitresult: Dict[str, Tuple[float, float]], Xt: pl.DataFrame) -> pl.DataFrame:
        return Xt.with_columns(
            [(pl.col(c) * std + mean).alias(c) for c, (mean, std) in fitresult.items()]
        )


@dataclass
class UnivariateStandardizer(Transformer):
    """Standardize a numeric vector to zero mean and unit (sample) std."""

    def fit(self, verbosity: int, v: Any):
        values = np.asarray(v, dtype=float)
        std = float(np.std(values, ddof=1)) if values.size > 1 else 0.0
        fitresult = (float(np.mean(values)), _spread(std))
        return fitresult, None, {}

    def transform(self, fitresult: Tuple[float, float], v: Any) -> np.ndarray:
        mean, std = fitresult
        return (np.asarray(v, dtype=float) - mean) / std

    def inverse_transform(self, fitresult: Tuple[float, float], vt: Any) -> np.ndarray:
        mean, std = fitresult
        return np.asarray(vt, dtype=float) * std + mean


@dataclass
class FeatureSelector(Transformer):
    """Select DataFrame columns.

    Attributes:
        features: Columns to keep, in order; empty keeps all columns
    """
    features: List[str] = field(default_factory=list)

    def fit(self, verbosity: int, X: pl.DataFrame):
        selected = list(self.features) if self.features else list(X.columns)
        unknown = [c for c in selected if c not in X.columns]
        if unknown:
            raise ValueError(f"FeatureSelector: unknown features {unknown}. Available: {X.columns}")
        return selected, None, {"features": selected}

    def transform(self, fitresult: List[str], X: pl.DataFrame) -> pl.DataFrame:
        return X.select(fitresult)


@dataclass
class ToIntTransformer(Transformer):
    """Encode labels as integers ``initial_label, initial_label + 1, ...``.

    Labels are numbered in sorted order of their distinct values.

    Attributes:
        initial_label: Code given to the first label
    """
    initial_label: int = 1

    def fit(self, verbosity: int, v: Any):
        labels = sorted(set(np.asarray(v).tolist()))
        encoding = {label: self.initial_label + i for i, label in enumerate(labels)}
        decoding = {code: label for label, code in encoding.items()}
        return (encoding, decoding), None, {"n_labels": len(labels)}

    def transform(self, fitresult, v: Any) -> np.ndarray:
        encoding, _ = fitresult
        try:
            return np.array([encoding[label] for label in np.asarray(v).tolist()], dtype=int)
        except KeyError as e:
            raise ValueError(f"ToIntTransformer: label {e.args[0]!r} was not seen in fit") from e

    def inverse_transform(self, fitresult, codes: Any) -> np.ndarray:
        _, decoding = fitresult
        try:
            return np.array([decoding[int(c)] for c in np.asarray(codes).tolist()])
        except KeyError as e:
            raise ValueError(f"ToIntTransformer: code {e.args[0]!r} is not a known label") from e
