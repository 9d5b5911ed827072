"""Reference supervised learners.

Nearest-neighbour learners are deterministic: distances are Euclidean and
ties between equidistant neighbours are broken by training row order.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np

from ..base_model import Supervised
from ..utils.data import to_array


def _as_matrix(X: Any) -> np.ndarray:
    A = np.asarray(to_array(X), dtype=float)
    if A.ndim == 1:
        A = A.reshape(-1, 1)
    return A


def _neighbours(Xtrain: np.ndarray, Xnew: np.ndarray, K: int) -> np.ndarray:
    """Indices of the K nearest training rows for each row of Xnew."""
    k = min(K, Xtrain.shape[0])
    diffs = Xnew[:, None, :] - Xtrain[None, :, :]
    distances = np.sqrt(np.sum(diffs * diffs, axis=2))
    return np.argsort(distances, axis=1, kind="stable")[:, :k]


@dataclass
class KNNRegressor(Supervised):
    """K-nearest-neighbour regression (mean of neighbour targets).

    Attributes:
        K: Number of neighbours
    """
    K: int = 5

    def fit(self, verbosity: int, X: Any, y: Any):
        if self.K < 1:
            raise ValueError(f"KNNRegressor requires K >= 1, got {self.K}")
        Xtrain = _as_matrix(X)
        ytrain = np.asarray(y, dtype=float)
        if Xtrain.shape[0] != ytrain.shape[0]:
            raise ValueError(f"X has {Xtrain.shape[0]} rows but y has {ytrain.shape[0]}")
        return (Xtrain, ytrain), None, {"n_train": int(Xtrain.shape[0])}

    def predict(self, fitresult, Xnew: Any) -> np.ndarray:
        Xtrain, ytrain = fitresult
        idx = _neighbours(Xtrain, _as_matrix(Xnew), self.K)
        return ytrain[idx].mean(axis=1)


@dataclass
class KNNClassifier(Supervised):
    """K-nearest-neighbour classification by majority vote.

    Vote ties go to the smallest label.

    Attributes:
        K: Number of neighbours
    """
    K: int = 5

    def fit(self, verbosity: int, X: Any, y: Any):
        if self.K < 1:
            raise ValueError(f"KNNClassifier requires K >= 1, got {self.K}")
        Xtrain = _as_matrix(X)
        ytrain = np.asarray(y)
        if Xtrain.shape[0] != ytrain.shape[0]:
            raise ValueError(f"X has {Xtrain.shape[0]} rows but y has {ytrain.shape[0]}")
        return (Xtrain, ytrain), None, {"n_train": int(Xtrain.shape[0]), "classes": sorted(set(ytrain.tolist()))}

    def predict(self, fitresult, Xnew: Any) -> np.ndarray:
        Xtrain, ytrain = fitresult
        idx = _neighbours(Xtrain, _as_matrix(Xnew), self.K)
        predictions = []
        for row in ytrain[idx]:
            labels, counts = np.unique(row, return_counts=True)
            predictions.append(labels[np.argmax(counts)])
        return np.array(predictions, dtype=ytrain.dtype)


@dataclass
class ConstantRegressor(Supervised):
    """Predict the training mean of the target for every input."""

    def fit(self, verbosity: int, X: Any, y: Any):
        return float(np.mean(np.asarray(y, dtype=float))), None, {}

    def predict(self, fitresult: float, Xnew: Any) -> np.ndarray:
        return np.full(_as_matrix(Xnew).shape[0], fitresult)
