"""Model contract shared by learners, transformers and composite models.

A model is a mutable container of hyperparameters. It does not hold learned
state: ``fit`` returns the learned parameters as a ``fitresult`` which the
caller (usually a TrainableModel) passes back to ``predict``/``transform``.

Key conventions:
- ``fit(verbosity, *args)`` returns ``(fitresult, cache, report)``
- ``update`` receives the previous fitresult and cache; the default refits
- Configurations are dataclasses, so ``==`` compares hyperparameters by value
"""

import copy
from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple

FitOutput = Tuple[Any, Any, Dict[str, Any]]


class Model(ABC):
    """Base class for all models.

    Subclasses are declared as ``@dataclass`` so that two configurations with
    equal hyperparameters compare equal. Composite models rely on this to
    decide what needs retraining.
    """

    @abstractmethod
    def fit(self, verbosity: int, *args: Any) -> FitOutput:
        """Train on ``args`` and return ``(fitresult, cache, report)``.

        Args:
            verbosity: Logging level; 0 or less is silent
            *args: Training data (e.g. X, or X and y)
        """
        pass

    def update(self, verbosity: int, old_fitresult: Any, old_cache: Any, *args: Any) -> FitOutput:
        """Retrain after a hyperparameter change.

        Models that can reuse ``old_fitresult`` or ``old_cache`` override this.
        The default ignores them and calls ``fit``.
        """
        return self.fit(verbosity, *args)

    def clone(self) -> "Model":
        """Return a deep copy of this configuration."""
        return copy.deepcopy(self)


class Supervised(Model):
    """Model learning a map from inputs X to a target y."""

    @abstractmethod
    def predict(self, fitresult: Any, Xnew: Any) -> Any:
        """Predict the target for ``Xnew``."""
        pass


class Transformer(Model):
    """Model learning a transformation of its input."""

    @abstractmethod
    def transform(self, fitresult: Any, X: Any) -> Any:
        """Apply the learned transformation."""
        pass

    def inverse_transform(self, fitresult: Any, Xt: Any) -> Any:
        """Undo the learned transformation.

        Raises:
            NotImplementedError: If the transformation is not invertible
        """
        raise NotImplementedError(f"{type(self).__name__} has no inverse_transform")
