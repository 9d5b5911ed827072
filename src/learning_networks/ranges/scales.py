"""Scale registry for numeric parameter ranges.

A scale supplies forward (natural → interpolation space) and backward
(interpolation space → natural) mappings. Grid points are spaced uniformly
in the forward space and mapped back, so a log scale yields points that are
uniform in order of magnitude.

Named scales are exact inverses over their domain:

    forward("log10", 100) == 2
    backward("log10", 2) == 100

A callable ``f`` supplied as a scale behaves differently. Its forward map is
the identity and its backward map is ``f`` itself:

    forward(f, 100) == 100
    backward(f, 100) == f(100)

so grid points are interpolated linearly between the raw bounds and ``f`` is
applied afterwards as a post-processing map. ``f`` need not be invertible.
"""

import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, Protocol, Union

from ..constants import (
    SCALE_CUSTOM,
    SCALE_LINEAR,
    SCALE_LOG,
    SCALE_LOG10,
    SCALE_LOG2,
)
from ..errors import ConfigurationError


class Scale(Protocol):
    """Protocol for range scales."""

    name: str

    def forward(self, x: float) -> float:
        """Map a natural value into interpolation space."""
        ...

    def backward(self, y: float) -> float:
        """Map a value from interpolation space back to natural space."""
        ...


@dataclass(frozen=True)
class LinearScale:
    """Identity scale (no-op)."""

    name: str = SCALE_LINEAR

    def forward(self, x: float) -> float:
        """Return value unchanged."""
        return x

    def backward(self, y: float) -> float:
        """Return value unchanged."""
        return y


@dataclass(frozen=True)
class LogScale:
    """Logarithmic scale with a fixed base.

    Maps (0, ∞) → (-∞, ∞). ``base=None`` means the natural logarithm.
    """

    name: str = SCALE_LOG
    base: Union[float, None] = None

    def forward(self, x: float) -> float:
        """Natural → log space."""
        if x <= 0:
            raise ValueError(f"{self.name} scale requires x > 0, got {x}")
        if self.base is None:
            return math.log(x)
        if self.base == 10:
            return math.log10(x)
        if self.base == 2:
            return math.log2(x)
        return math.log(x, self.base)

    def backward(self, y: float) -> float:
        """Log space → natural."""
        if self.base is None:
            return math.exp(y)
        return self.base ** y


@dataclass(frozen=True)
class CustomScale:
    """Scale wrapping a user function.

    Forward is the identity and backward applies ``fn``. This is not a
    mistake: the function post-processes linearly interpolated values rather
    than warping the interpolation space.
    """

    fn: Callable[[float], Any]
    name: str = SCALE_CUSTOM

    def forward(self, x: float) -> float:
        """Return value unchanged."""
        return x

    def backward(self, y: float) -> Any:
        """Apply the wrapped function."""
        return self.fn(y)


SCALES: Dict[str, Scale] = {
    SCALE_LINEAR: LinearScale(),
    SCALE_LOG: LogScale(),
    SCALE_LOG10: LogScale(name=SCALE_LOG10, base=10),
    SCALE_LOG2: LogScale(name=SCALE_LOG2, base=2),
}


def get_scale(scale: Union[str, Callable[[float], float], Scale]) -> Scale:
    """Resolve a scale tag, callable or Scale instance to a Scale.

    Args:
        scale: One of the registered tags, a scale object, or any callable

    Returns:
        The matching Scale

    Raises:
        ConfigurationError: If a string tag is not registered
    """
    if isinstance(scale, str):
        if scale not in SCALES:
            raise ConfigurationError(
                f"Unknown scale '{scale}'. Available: {sorted(SCALES.keys())} or a function"
            )
        return SCALES[scale]
    if isinstance(scale, (LinearScale, LogScale, CustomScale)):
        return scale
    if callable(scale):
        return CustomScale(scale)
    raise ConfigurationError(
        f"Scale must be a string tag or a function, got {type(scale).__name__}"
    )


def forward(scale, x: float) -> float:
    """Map ``x`` into the interpolation space of ``scale``."""
    return get_scale(scale).forward(x)


def backward(scale, y: float) -> float:
    """Map ``y`` from the interpolation space of ``scale`` to natural space."""
    return get_scale(scale).backward(y)
