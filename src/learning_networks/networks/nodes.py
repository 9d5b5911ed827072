"""Learning nodes: the lazily evaluated call graph of a learning network.

A network is built from two kinds of node:
- SourceNode: holds raw data (training inputs, targets)
- LearningNode: an operation applied to a trainable model's current
  fitresult and to the values of upstream nodes

Constructing a LearningNode performs no computation. Calling it walks the
graph depth first, so it always sees the latest fitresult of every trainable
model it passes through; nothing is cached at the node level.

Every node and trainable model carries an integer ``handle``, unique for the
process, so graphs can be inspected and logged without relying on object
identity in output.
"""

import itertools
import logging
from typing import Any, Callable, Iterable, List, Mapping, Optional, Tuple, Union

from ..constants import DEFAULT_VERBOSITY

logger = logging.getLogger(__name__)

_handles = itertools.count(1)

_NO_DATA = object()


def next_handle() -> int:
    """Allocate a fresh node handle."""
    return next(_handles)


def merge_tapes(*tapes: Iterable[Any]) -> List[Any]:
    """Concatenate tapes, dropping repeats and keeping first occurrences."""
    seen = set()
    merged = []
    for tape in tapes:
        for trainable in tape:
            if id(trainable) in seen:
                continue
            seen.add(id(trainable))
            merged.append(trainable)
    return merged


class AbstractNode:
    """Common interface of source and learning nodes."""

    handle: int

    @property
    def tape(self) -> List[Any]:
        """Trainable models upstream of this node, in dependency order."""
        raise NotImplementedError

    @property
    def sources(self) -> List["SourceNode"]:
        """Source nodes reached when this node is evaluated."""
        raise NotImplementedError

    def evaluate(self, replacements: Optional[Mapping["SourceNode", Any]] = None) -> Any:
        """Compute this node's value, substituting data for the given sources."""
        raise NotImplementedError

    def __call__(self, *data: Any) -> Any:
        """Evaluate the node.

        With no argument every source supplies its own data. With one
        argument, that value replaces the data of every source this node
        reaches.
        """
        if not data:
            return self.evaluate()
        if len(data) != 1:
            raise TypeError(f"{type(self).__name__} takes at most one replacement, got {len(data)}")
        return self.evaluate({s: data[0] for s in self.sources})


class SourceNode(AbstractNode):
    """Node wrapping raw data.

    Calling a source with a replacement returns the replacement and leaves
    the stored data untouched.
    """

    def __init__(self, data: Any):
        self.handle = next_handle()
        self._data = data

    @property
    def data(self) -> Any:
        """The wrapped data."""
        return self._data

    @property
    def tape(self) -> List[Any]:
        return []

    @property
    def sources(self) -> List["SourceNode"]:
        return [self]

    def evaluate(self, replacements: Optional[Mapping["SourceNode", Any]] = None) -> Any:
        if replacements and self in replacements:
            return replacements[self]
        return self._data

    def __call__(self, data: Any = _NO_DATA) -> Any:
        if data is _NO_DATA:
            return self._data
        return data

    def __repr__(self) -> str:
        return f"SourceNode@{self.handle}({type(self._data).__name__})"


class LearningNode(AbstractNode):
    """Lazy application of an operation to upstream nodes.

    When ``trainable`` is given, ``operation`` names one of its model's
    methods (``"predict"``, ``"transform"``, ``"inverse_transform"``) and is
    applied with the trainable's current fitresult. When ``trainable`` is
    None the node is static and ``operation`` is a plain callable.

    Attributes:
        operation: Operation name or callable
        trainable: Trainable model supplying the fitresult, or None
        args: Upstream nodes whose values are the operation's arguments
    """

    def __init__(self, operation: Union[str, Callable[..., Any]], trainable: Any, *args: AbstractNode):
        if trainable is None and not callable(operation):
            raise TypeError(f"Static node requires a callable operation, got {operation!r}")
        if trainable is not None and not isinstance(operation, str):
            raise TypeError(f"Operation on a trainable model must be a method name, got {operation!r}")
        for arg in args:
            if not isinstance(arg, AbstractNode):
                raise TypeError(f"LearningNode arguments must be nodes, got {type(arg).__name__}")

        self.handle = next_handle()
        self.operation = operation
        self.trainable = trainable
        self.args: Tuple[AbstractNode, ...] = tuple(args)

        tape = merge_tapes(*(arg.tape for arg in self.args))
        if trainable is not None:
            tape = merge_tapes(tape, trainable.tape, [trainable])
        self._tape = tuple(tape)

        sources = []
        for arg in self.args:
            sources.extend(arg.sources)
        self._sources = tuple(merge_tapes(sources))

    @property
    def tape(self) -> List[Any]:
        return list(self._tape)

    @property
    def sources(self) -> List[SourceNode]:
        return list(self._sources)

    @property
    def operation_name(self) -> str:
        if isinstance(self.operation, str):
            return self.operation
        return getattr(self.operation, "__name__", repr(self.operation))

    def evaluate(self, replacements: Optional[Mapping[SourceNode, Any]] = None) -> Any:
        values = [arg.evaluate(replacements) for arg in self.args]
        if self.trainable is None:
            return self.operation(*values)
        return self.trainable.apply(self.operation, *values)

    def fit(self, verbosity: int = DEFAULT_VERBOSITY, rows: Optional[Iterable[int]] = None) -> "LearningNode":
        """Fit-through training.

        Fits every trainable model upstream of this node, upstream strictly
        before downstream and each once. Frozen models are skipped and keep
        their fitresult. An exception from any model aborts the walk; models
        already refit keep their new state.

        Args:
            verbosity: Logging level passed to each trainable model
            rows: Optional training rows passed to each trainable model

        Returns:
            This node
        """
        if verbosity > 0:
            logger.info(f"Fitting {len(self._tape)} trainable models upstream of {self!r}")
        for trainable in self._tape:
            trainable.fit(verbosity, rows=rows)
        return self

    def __repr__(self) -> str:
        return f"LearningNode@{self.handle}({self.operation_name})"
