"""learning-networks: composable learning networks and hyperparameter grids.

This package provides lazily evaluated networks of trainable models with
fit-through training and selective retraining, together with parameter
ranges and grid generation for model tuning.
"""

# Export the public API
from .api import *  # noqa: F403, F401
from .api import __all__, __version__  # noqa: F401
