"""Composite pipelines built from the network primitives."""

from dataclasses import dataclass, field

from ..base_model import Supervised, Transformer
from ..networks import CompositeModel, array, inverse_transform, predict, trainable, transform
from .learners import KNNRegressor
from .transformers import Standardizer, UnivariateStandardizer


@dataclass
class SupervisedPipeline(CompositeModel):
    """Learner wrapped between an input transformer and a target transformer.

    Network:

        Xt   = array(transform(transformer_X, X))
        yt   = transform(transformer_y, y)
        zhat = predict(learner, Xt)          # learner trained on (Xt, yt)
        yhat = inverse_transform(transformer_y, zhat)

    ``update`` retrains transformer_X only when it changed, transformer_y only
    when it changed, and the learner when anything changed.
    """
    learner: Supervised = field(default_factory=KNNRegressor)
    transformer_X: Transformer = field(default_factory=Standardizer)
    transformer_y: Transformer = field(default_factory=UnivariateStandardizer)

    components = ("transformer_X", "transformer_y", "learner")
    report_component = "learner"

    def build(self, X, y):
        t_X = trainable(self.transformer_X, X)
        t_y = trainable(self.transformer_y, y)

        Xt = array(transform(t_X, X))
        yt = transform(t_y, y)

        l = trainable(self.learner, Xt, yt)
        zhat = predict(l, Xt)

        yhat = inverse_transform(t_y, zhat)
        return yhat, {"transformer_X": t_X, "transformer_y": t_y, "learner": l}
