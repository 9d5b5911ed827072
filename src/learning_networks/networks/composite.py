"""Composite models: learning networks exported as ordinary models.

A CompositeModel is a configuration whose fields include other model
configurations (its *components*). Its ``fit`` builds a learning network
once and trains it; its ``update`` retrains only what a hyperparameter
change actually affects.

Retraining decisions are driven by value snapshots: after each fit or
update, a deep copy of every component is stored in the NetworkCache. On
the next update a component is *changed* if it no longer compares equal to
its snapshot. A component's trainable model is frozen (skipped) if and only
if neither it nor any component upstream of it in the network changed.
"""

import logging
from abc import abstractmethod
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, ClassVar, Dict, Mapping, Optional, Set, Tuple

from ..base_model import Supervised
from .nodes import LearningNode, SourceNode
from .trainable import TrainableModel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NetworkCache:
    """State kept between ``fit`` and ``update`` of a composite model.

    Attributes:
        trainables: Component name → trainable model created by ``build``
        snapshots: Component name → deep copy of the component as last trained
        sources: Source nodes wrapping the training data
    """
    trainables: Mapping[str, TrainableModel]
    snapshots: Mapping[str, Any]
    sources: Tuple[SourceNode, ...] = field(default_factory=tuple)

    def __post_init__(self):
        """Freeze mappings and sources."""
        object.__setattr__(self, 'trainables', MappingProxyType(dict(self.trainables)))
        object.__setattr__(self, 'snapshots', MappingProxyType(dict(self.snapshots)))
        object.__setattr__(self, 'sources', tuple(self.sources))

    def with_snapshots(self, snapshots: Mapping[str, Any]) -> "NetworkCache":
        """Return a cache with the same network and new snapshots."""
        return NetworkCache(self.trainables, snapshots, self.sources)

    def frozen_components(self) -> Tuple[str, ...]:
        """Names of components whose trainable model is currently frozen."""
        return tuple(name for name, t in self.trainables.items() if t.frozen)


class CompositeModel(Supervised):
    """Supervised model implemented by a learning network.

    Subclasses are dataclasses that declare:
    - ``components``: names of the fields holding component models
    - ``report_component``: component whose report is returned by fit/update
    - ``build(X, y)``: construct the network on source nodes X and y

    Component models are shared by reference with the network, so mutating
    ``composite.learner.K`` and calling ``update`` retrains the learner.
    """

    components: ClassVar[Tuple[str, ...]] = ()
    report_component: ClassVar[Optional[str]] = None

    @abstractmethod
    def build(self, X: SourceNode, y: SourceNode) -> Tuple[LearningNode, Dict[str, TrainableModel]]:
        """Build the network.

        Args:
            X: Source node of training inputs
            y: Source node of training targets

        Returns:
            Tuple of (final node producing predictions, component name → trainable model)
        """
        pass

    def snapshot(self) -> Dict[str, Any]:
        """Deep copies of all components, keyed by name."""
        return {name: getattr(self, name).clone() for name in self.components}

    def _report(self, trainables: Mapping[str, TrainableModel]) -> Dict[str, Any]:
        if self.report_component is None:
            return {}
        return trainables[self.report_component].report

    def fit(self, verbosity: int, X: Any, y: Any):
        """Build and train the network.

        Returns:
            Tuple of (final node, NetworkCache, report of ``report_component``)
        """
        Xs = SourceNode(X)
        ys = SourceNode(y)
        yhat, trainables = self.build(Xs, ys)

        missing = set(self.components) - set(trainables)
        if missing:
            raise ValueError(
                f"{type(self).__name__}.build() returned no trainable model for: {sorted(missing)}"
            )

        yhat.fit(verbosity - 1)

        cache = NetworkCache(trainables, self.snapshot(), (Xs, ys))
        return yhat, cache, self._report(trainables)

    def changed_components(self, cache: NetworkCache) -> Set[str]:
        """Names of components that differ (by value) from their snapshot."""
        return {
            name for name in self.components
            if getattr(self, name) != cache.snapshots[name]
        }

    def update(self, verbosity: int, old_fitresult: LearningNode, old_cache: NetworkCache,
               X: Any, y: Any, **kwargs: Any):
        """Selectively retrain the network built by ``fit``.

        All trainable models are thawed, then each is frozen again when its
        component and every component upstream of it are unchanged. The
        network is then fit through; frozen models are skipped. Frozen flags
        are left in place afterwards for inspection.

        The network keeps training on the source data it was built with;
        ``X`` and ``y`` are accepted for the model contract only.

        Args:
            verbosity: Logging level
            old_fitresult: Final node returned by ``fit``
            old_cache: Cache returned by the previous ``fit``/``update``
            X, y: Training data (unused)
            **kwargs: Passed to the fit-through call (e.g. ``rows``)

        Returns:
            Tuple of (final node, new NetworkCache, report of ``report_component``)
        """
        trainables = old_cache.trainables
        changed = self.changed_components(old_cache)
        owner = {id(t): name for name, t in trainables.items()}

        for t in trainables.values():
            t.thaw()

        for name, t in trainables.items():
            upstream = {owner[id(u)] for u in t.tape if id(u) in owner}
            if name not in changed and not (upstream & changed):
                t.freeze()

        if verbosity > 0:
            frozen = sorted(n for n, t in trainables.items() if t.frozen)
            logger.info(f"Changed components: {sorted(changed)}; frozen: {frozen}")

        old_fitresult.fit(verbosity - 1, **kwargs)

        cache = old_cache.with_snapshots(self.snapshot())
        return old_fitresult, cache, self._report(trainables)

    def predict(self, fitresult: LearningNode, Xnew: Any) -> Any:
        """Evaluate the trained network on new inputs."""
        return fitresult(Xnew)
