"""Reference models for assembling learning networks.

These are small deterministic implementations of the model contract in
``learning_networks.base_model``; any object following the same contract
can be used in their place.
"""

from .transformers import (
    Standardizer,
    UnivariateStandardizer,
    FeatureSelector,
    ToIntTransformer,
)
from .learners import KNNRegressor, KNNClassifier, ConstantRegressor
from .pipelines import SupervisedPipeline

__all__ = [
    # Transformers
    "Standardizer",
    "UnivariateStandardizer",
    "FeatureSelector",
    "ToIntTransformer",
    # Learners
    "KNNRegressor",
    "KNNClassifier",
    "ConstantRegressor",
    # Composites
    "SupervisedPipeline",
]
