"""Parameter ranges for hyperparameter tuning.

This module implements the two kinds of range:
- NominalRange: a fixed, ordered enumeration of legal values
- NumericRange: a real interval [lower, upper] with an associated scale

Ranges are constructed from a model configuration with ``make_range``, which
inspects the current value of the named field to decide which kind applies.
All range types are immutable.
"""

import numbers
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Tuple, Union

from ..constants import SCALE_LINEAR, SCALE_NONE
from ..errors import ConfigurationError, TypeMismatchError
from ..utils.fields import recursive_getattr, split_field
from .scales import get_scale

Scalar = Union[float, int]
ScaleLike = Union[str, Callable[[float], float]]


def is_real(value: Any) -> bool:
    """True for int and float values (numpy scalars included), False for bool."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_integral(value: Any) -> bool:
    """True for int values (numpy integers included), False for bool."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


class ParamRange:
    """Base class for parameter ranges.

    A range is never empty, so ``bool(r)`` is always True.
    """

    field: str

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class NominalRange(ParamRange):
    """Enumerated range for a non-numeric hyperparameter.

    Attributes:
        field: Name or dotted path of the hyperparameter
        values: Legal values, in the order and multiplicity given
    """
    field: str
    values: Tuple[Any, ...]

    def __post_init__(self):
        """Validate field and freeze values."""
        split_field(self.field)
        object.__setattr__(self, 'values', tuple(self.values))
        if not self.values:
            raise ConfigurationError(f"Range for {self.field} must have at least one value")

    def __repr__(self) -> str:
        preview = ", ".join(repr(v) for v in self.values[:3])
        more = ", ..." if len(self.values) > 3 else ""
        return f"NominalRange({self.field}: {preview}{more})"


@dataclass(frozen=True)
class NumericRange(ParamRange):
    """Numeric range for a real-valued hyperparameter.

    Attributes:
        field: Name or dotted path of the hyperparameter
        lower: Lower bound (inclusive)
        upper: Upper bound (inclusive)
        scale: Scale tag ("linear", "log", "log10", "log2") or a function
        kind: Element type ("float" or "int")
    """
    field: str
    lower: Scalar
    upper: Scalar
    scale: ScaleLike = SCALE_LINEAR
    kind: str = "float"

    def __post_init__(self):
        """Validate bounds against kind and scale."""
        split_field(self.field)
        if self.kind not in ("float", "int"):
            raise ValueError(f"Range kind must be 'float' or 'int', got {self.kind}")

        if self.kind == "int":
            if not (is_integral(self.lower) and is_integral(self.upper)):
                raise TypeMismatchError(
                    f"Integer range {self.field} must have integer bounds, "
                    f"got {type(self.lower).__name__} and {type(self.upper).__name__}"
                )
            object.__setattr__(self, 'lower', int(self.lower))
            object.__setattr__(self, 'upper', int(self.upper))
        else:
            if not (is_real(self.lower) and is_real(self.upper)):
                raise TypeMismatchError(
                    f"Range {self.field} must have numeric bounds, "
                    f"got {type(self.lower).__name__} and {type(self.upper).__name__}"
                )
            object.__setattr__(self, 'lower', float(self.lower))
            object.__setattr__(self, 'upper', float(self.upper))

        if self.lower > self.upper:
            raise ConfigurationError(
                f"Range {self.field}: lower ({self.lower}) > upper ({self.upper})"
            )

        # resolves tags eagerly so a bad scale fails at construction
        get_scale(self.scale)

    def __repr__(self) -> str:
        return (
            f"NumericRange({self.field} ∈ [{self.lower}, {self.upper}], "
            f"kind={self.kind}, scale={scale_of(self)})"
        )


def make_range(
    config: Any,
    field: str,
    *,
    values: Optional[Iterable[Any]] = None,
    lower: Optional[Scalar] = None,
    upper: Optional[Scalar] = None,
    scale: ScaleLike = SCALE_LINEAR,
) -> ParamRange:
    """Define a range for the hyperparameter ``field`` of ``config``.

    If the current value of the field is real (int or float), a NumericRange
    is returned and ``lower`` and ``upper`` must be given. Integer fields
    yield integer ranges, whose iterators round to the nearest integer.
    Otherwise a NominalRange over ``values`` is returned.

    Nested hyperparameters use dot notation: ``"atom.max_depth"`` is the
    ``max_depth`` field of the ``atom`` field of ``config``.

    Args:
        config: Model configuration (object with attributes, or a mapping)
        field: Name or dotted path of the hyperparameter
        values: Legal values for a nominal range
        lower: Lower bound for a numeric range
        upper: Upper bound for a numeric range
        scale: "linear", "log", "log10", "log2" or a function (numeric only)

    Returns:
        NumericRange or NominalRange

    Raises:
        ConfigurationError: If the field is unknown or required arguments are missing
        TypeMismatchError: If bounds do not suit the field's numeric type

    Example:
        >>> r = make_range(knn, "K", lower=1, upper=50, scale="log10")
        >>> r = make_range(tree, "criterion", values=["gini", "entropy"])
    """
    value = recursive_getattr(config, field)

    if is_real(value):
        if lower is None or upper is None:
            raise ConfigurationError(
                f"Numeric field {field} requires lower=... and upper=..."
            )
        kind = "int" if is_integral(value) else "float"
        return NumericRange(field, lower, upper, scale, kind)

    if values is None:
        raise ConfigurationError(f"Non-numeric field {field} requires values=...")
    return NominalRange(field, tuple(values))


def scale_of(param_range: ParamRange) -> str:
    """Return the scale associated with ``param_range``.

    Returns:
        "none" for a NominalRange; "linear", "log", "log10" or "log2" for a
        NumericRange with a named scale; "custom" when the scale is a function
    """
    if isinstance(param_range, NominalRange):
        return SCALE_NONE
    return get_scale(param_range.scale).name
