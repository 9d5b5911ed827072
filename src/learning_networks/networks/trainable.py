"""Trainable models: a model configuration bound to its training data.

A TrainableModel pairs a model (hyperparameters, shared by reference with
the caller) with the nodes supplying its training arguments, and holds the
learned state produced by fitting.

State machine:
- UNFIT: never successfully fit
- FIT: holds a fitresult; ``fit`` retrains unconditionally
- FROZEN: ``fit`` is a no-op and the fitresult is retained until ``thaw``

Deciding *whether* a model needs retraining is left to the caller (see
CompositeModel.update); the trainable model itself never checks.
"""

import logging
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..constants import DEFAULT_VERBOSITY
from ..errors import NotTrainedError
from ..utils.data import select_rows
from .nodes import AbstractNode, SourceNode, merge_tapes, next_handle

logger = logging.getLogger(__name__)


class NodeState(str, Enum):
    """Lifecycle state of a trainable model."""
    UNFIT = "unfit"
    FIT = "fit"
    FROZEN = "frozen"


class TrainableModel:
    """Model configuration plus training arguments and learned state.

    Concrete (non-node) arguments are wrapped in source nodes.

    Attributes:
        handle: Process-unique identifier
        model: The model configuration (not copied)
        args: Nodes supplying the training arguments
        fitresult: Learned parameters from the last fit, or None
        cache: Model-specific state from the last fit, passed to ``update``
        report: Report returned by the last fit
        frozen: When True, ``fit`` does nothing
        generation: Number of successful fits
    """

    def __init__(self, model: Any, *args: Any):
        self.handle = next_handle()
        self.model = model
        self.args: Tuple[AbstractNode, ...] = tuple(
            arg if isinstance(arg, AbstractNode) else SourceNode(arg) for arg in args
        )
        self.fitresult: Any = None
        self.cache: Any = None
        self.report: Dict[str, Any] = {}
        self.frozen = False
        self.generation = 0
        self._tape = tuple(merge_tapes(*(arg.tape for arg in self.args)))

    @property
    def tape(self) -> List["TrainableModel"]:
        """Trainable models this one depends on (itself excluded)."""
        return list(self._tape)

    @property
    def is_fit(self) -> bool:
        return self.generation > 0

    @property
    def state(self) -> NodeState:
        if self.frozen:
            return NodeState.FROZEN
        return NodeState.FIT if self.is_fit else NodeState.UNFIT

    def freeze(self) -> "TrainableModel":
        """Suspend training; later ``fit`` calls keep the current fitresult."""
        self.frozen = True
        return self

    def thaw(self) -> "TrainableModel":
        """Resume training. Does not refit by itself."""
        self.frozen = False
        return self

    def fit(self, verbosity: int = DEFAULT_VERBOSITY, rows: Optional[Iterable[int]] = None) -> "TrainableModel":
        """Train the model on the current values of its arguments.

        Upstream trainable models that have never been fit are fit first
        (frozen ones are left alone). The model's ``fit`` is called the first
        time, its ``update`` on every later call. Both receive
        ``verbosity - 1``.

        Args:
            verbosity: Logging level; messages are logged when positive
            rows: Optional row indices restricting the training data

        Returns:
            This trainable model
        """
        if self.frozen:
            if verbosity > 0:
                logger.info(f"Not retraining {self!r}: it is frozen")
            return self

        for upstream in self._tape:
            if not upstream.is_fit:
                upstream.fit(verbosity, rows=rows)

        values = [select_rows(arg.evaluate(), rows) for arg in self.args]

        if not self.is_fit:
            if verbosity > 0:
                logger.info(f"Training {self!r}")
            fitresult, cache, report = self.model.fit(verbosity - 1, *values)
        else:
            if verbosity > 0:
                logger.info(f"Updating {self!r}")
            fitresult, cache, report = self.model.update(
                verbosity - 1, self.fitresult, self.cache, *values
            )

        self.fitresult = fitresult
        self.cache = cache
        self.report = report if report is not None else {}
        self.generation += 1
        return self

    def apply(self, operation: str, *values: Any) -> Any:
        """Apply ``operation`` of the model with the current fitresult.

        Raises:
            NotTrainedError: If the model has not been fit
            TypeError: If the model does not implement ``operation``
        """
        if not self.is_fit:
            raise NotTrainedError(f"{self!r} has not been trained; call fit() first")
        method = getattr(self.model, operation, None)
        if method is None:
            raise TypeError(f"{type(self.model).__name__} does not implement {operation}")
        return method(self.fitresult, *values)

    def __repr__(self) -> str:
        return f"TrainableModel@{self.handle}({type(self.model).__name__})"
