"""Network construction functions.

These are the user-facing verbs for building learning networks:

    X = node(Xtrain)
    y = node(ytrain)
    scaler = trainable(Standardizer(), X)
    knn = trainable(KNNRegressor(K=7), array(transform(scaler, X)), y)
    yhat = predict(knn, array(transform(scaler, X)))
    yhat.fit()
    yhat(Xtest)

``predict``, ``transform`` and ``inverse_transform`` build lazy nodes when
any argument is a node, and compute immediately when all are concrete data.
"""

from typing import Any, List, Union

from ..utils.data import to_array
from .nodes import AbstractNode, LearningNode, SourceNode
from .trainable import TrainableModel

Entry = Union[AbstractNode, TrainableModel, None]


def node(*args: Any) -> AbstractNode:
    """Create a source node, or a static node.

    ``node(data)`` wraps ``data`` in a SourceNode. ``node(f, *nodes)`` builds
    a static LearningNode applying the plain function ``f`` to the values
    of ``nodes`` (concrete arguments are wrapped as sources).
    """
    if not args:
        raise TypeError("node() requires data, or a function and its arguments")
    if len(args) == 1:
        return SourceNode(args[0])
    f, *inputs = args
    if not callable(f):
        raise TypeError(f"node(f, *args) requires a callable f, got {type(f).__name__}")
    return LearningNode(f, None, *_as_nodes(inputs))


def trainable(model: Any, *args: Any) -> TrainableModel:
    """Bind ``model`` to training arguments ``args`` (nodes or data)."""
    return TrainableModel(model, *args)


def _as_nodes(args) -> List[AbstractNode]:
    return [arg if isinstance(arg, AbstractNode) else SourceNode(arg) for arg in args]


def _operate(operation: str, model: TrainableModel, args) -> Any:
    if not isinstance(model, TrainableModel):
        raise TypeError(f"{operation} requires a TrainableModel, got {type(model).__name__}")
    if any(isinstance(arg, AbstractNode) for arg in args):
        return LearningNode(operation, model, *_as_nodes(args))
    return model.apply(operation, *args)


def predict(model: TrainableModel, *args: Any) -> Any:
    """Predictions of ``model`` on ``args``; lazy if any argument is a node."""
    return _operate("predict", model, args)


def transform(model: TrainableModel, *args: Any) -> Any:
    """Transformation of ``args`` by ``model``; lazy if any argument is a node."""
    return _operate("transform", model, args)


def inverse_transform(model: TrainableModel, *args: Any) -> Any:
    """Inverse transformation of ``args`` by ``model``; lazy if any argument is a node."""
    return _operate("inverse_transform", model, args)


def array(X: Any) -> Any:
    """Convert a table to a numpy array; lazy if ``X`` is a node."""
    if isinstance(X, AbstractNode):
        return LearningNode(to_array, None, X)
    return to_array(X)


def get_tape(entry: Entry) -> List[TrainableModel]:
    """Trainable models upstream of ``entry``, in dependency order.

    Empty for None and for source nodes. For a trainable model the result
    excludes the model itself; for a learning node it ends with the node's
    own trainable model (if any).
    """
    if entry is None:
        return []
    return entry.tape


def sources(entry: Entry) -> List[SourceNode]:
    """Source nodes feeding ``entry``, without repeats.

    For a learning node these are the sources reached when it is evaluated.
    For a trainable model, the sources of its training arguments.
    """
    if entry is None:
        return []
    if isinstance(entry, TrainableModel):
        found: List[SourceNode] = []
        for arg in entry.args:
            for s in arg.sources:
                if not any(s is f for f in found):
                    found.append(s)
        return found
    return entry.sources
