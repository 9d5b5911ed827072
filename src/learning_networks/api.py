"""Public API for learning-networks.

This module provides the complete public API: parameter ranges and grids,
learning networks with selective retraining, composite models, and the
reference models used to assemble them.
"""

# Model contract
from .base_model import Model, Supervised, Transformer

# Ranges
from .ranges import (
    ParamRange,
    NominalRange,
    NumericRange,
    make_range,
    scale_of,
    iterator,
    unwind,
    get_scale,
)

# Networks
from .networks import (
    SourceNode,
    LearningNode,
    TrainableModel,
    NodeState,
    node,
    trainable,
    predict,
    transform,
    inverse_transform,
    array,
    get_tape,
    sources,
    CompositeModel,
    NetworkCache,
)

# Reference models
from .models import (
    Standardizer,
    UnivariateStandardizer,
    FeatureSelector,
    ToIntTransformer,
    KNNRegressor,
    KNNClassifier,
    ConstantRegressor,
    SupervisedPipeline,
)

# Sampling
from .sampling import SamplingStrategy, GridSampler, apply_sample

# Errors
from .errors import (
    LearningNetworksError,
    ConfigurationError,
    EmptyIteratorError,
    TypeMismatchError,
    NotTrainedError,
)

# Utilities
from .utils import partition

# Constants
from .constants import DEFAULT_VERBOSITY, DEFAULT_RESOLUTION

# Version
try:
    from importlib.metadata import version
    __version__ = version("learning-networks")
except Exception:
    __version__ = "0.1.0"

# Public API Export List
__all__ = [
    # Model contract
    "Model",
    "Supervised",
    "Transformer",

    # Ranges
    "ParamRange",
    "NominalRange",
    "NumericRange",
    "make_range",
    "scale_of",
    "iterator",
    "unwind",
    "get_scale",

    # Networks
    "SourceNode",
    "LearningNode",
    "TrainableModel",
    "NodeState",
    "node",
    "trainable",
    "predict",
    "transform",
    "inverse_transform",
    "array",
    "get_tape",
    "sources",
    "CompositeModel",
    "NetworkCache",

    # Reference models
    "Standardizer",
    "UnivariateStandardizer",
    "FeatureSelector",
    "ToIntTransformer",
    "KNNRegressor",
    "KNNClassifier",
    "ConstantRegressor",
    "SupervisedPipeline",

    # Sampling
    "SamplingStrategy",
    "GridSampler",
    "apply_sample",

    # Errors
    "LearningNetworksError",
    "ConfigurationError",
    "EmptyIteratorError",
    "TypeMismatchError",
    "NotTrainedError",

    # Utilities
    "partition",

    # Constants
    "DEFAULT_VERBOSITY",
    "DEFAULT_RESOLUTION",

    # Version
    "__version__",
]
