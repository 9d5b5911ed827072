"""Learning networks: lazy call graphs of trainable models.

This module provides source and learning nodes, trainable models with
freeze/thaw control, fit-through training, and composite models with
selective retraining.
"""

from .nodes import AbstractNode, SourceNode, LearningNode
from .trainable import NodeState, TrainableModel
from .operations import (
    node,
    trainable,
    predict,
    transform,
    inverse_transform,
    array,
    get_tape,
    sources,
)
from .composite import CompositeModel, NetworkCache

__all__ = [
    # Nodes
    "AbstractNode",
    "SourceNode",
    "LearningNode",
    # Trainable models
    "NodeState",
    "TrainableModel",
    # Construction
    "node",
    "trainable",
    "predict",
    "transform",
    "inverse_transform",
    "array",
    "get_tape",
    "sources",
    # Composites
    "CompositeModel",
    "NetworkCache",
]
