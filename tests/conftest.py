"""Shared fixtures for learning-networks tests."""

from dataclasses import dataclass, field
from typing import List

import numpy as np
import polars as pl
import pytest


# ============================================================================
# Configurations
# ============================================================================


@dataclass
class Atom:
    """Nested configuration used for dotted-field tests."""
    max_depth: int = 3
    criterion: str = "gini"


@dataclass
class Ensemble:
    """Configuration with real, integer, string, bool and nested fields."""
    learning_rate: float = 0.1
    n_estimators: int = 100
    solver: str = "auto"
    shuffle: bool = True
    features: List[str] = field(default_factory=list)
    atom: Atom = field(default_factory=Atom)


@pytest.fixture
def ensemble():
    """Fresh Ensemble configuration."""
    return Ensemble()


# ============================================================================
# Data
# ============================================================================


@pytest.fixture
def regression_data():
    """Small deterministic regression problem as (X DataFrame, y array)."""
    rng = np.random.default_rng(0)
    n = 40
    X = pl.DataFrame({
        "x1": rng.normal(0.0, 1.0, n),
        "x2": rng.normal(5.0, 2.0, n),
        "x3": rng.uniform(0.0, 10.0, n),
    })
    y = 2.0 * X["x1"].to_numpy() - 0.5 * X["x2"].to_numpy() + rng.normal(0.0, 0.1, n)
    return X, y


@pytest.fixture
def classification_data():
    """Three well-separated classes as (X DataFrame, y array of labels)."""
    rng = np.random.default_rng(1)
    centers = {"setosa": (0.0, 0.0, 0.0), "versicolor": (5.0, 5.0, 0.0), "virginica": (0.0, 5.0, 5.0)}
    frames = []
    labels = []
    for label, (a, b, c) in centers.items():
        frames.append(pl.DataFrame({
            "sepal_length": rng.normal(a, 0.3, 15),
            "sepal_width": rng.normal(b, 0.3, 15),
            "petal_length": rng.normal(c, 0.3, 15),
        }))
        labels.extend([label] * 15)
    X = pl.concat(frames)
    y = np.array(labels)

    # interleave classes so any prefix of rows contains all of them
    order = np.arange(len(y)).reshape(3, 15).T.ravel()
    return X.select(pl.all().gather(order.tolist())), y[order]
