"""Dotted-path access to nested hyperparameters.

A field such as ``"atom.max_depth"`` addresses the ``max_depth``
hyperparameter of the ``atom`` hyperparameter of a model. Each segment is
looked up as an attribute, or as a key when the container is a mapping.
"""

from typing import Any, List, MutableMapping, Mapping

from ..errors import ConfigurationError


def split_field(field: str) -> List[str]:
    """Split a dotted field path into its segments."""
    if not isinstance(field, str) or not field:
        raise ConfigurationError(f"Field must be a non-empty string, got {field!r}")
    parts = field.split(".")
    if any(not p for p in parts):
        raise ConfigurationError(f"Malformed field path: {field!r}")
    return parts


def _get(obj: Any, name: str, field: str) -> Any:
    if isinstance(obj, Mapping):
        if name not in obj:
            raise ConfigurationError(
                f"Unknown field '{field}': no key '{name}' in {type(obj).__name__}"
            )
        return obj[name]
    if not hasattr(obj, name):
        raise ConfigurationError(
            f"Unknown field '{field}': {type(obj).__name__} has no attribute '{name}'"
        )
    return getattr(obj, name)


def recursive_getattr(obj: Any, field: str) -> Any:
    """Return the value at a dotted ``field`` path of ``obj``.

    Raises:
        ConfigurationError: If any segment of the path does not exist
    """
    value = obj
    for name in split_field(field):
        value = _get(value, name, field)
    return value


def recursive_setattr(obj: Any, field: str, value: Any) -> None:
    """Set the value at a dotted ``field`` path of ``obj`` in place.

    The final segment must already exist; new hyperparameters are never
    created this way.

    Raises:
        ConfigurationError: If any segment of the path does not exist
    """
    *parents, last = split_field(field)
    target = obj
    for name in parents:
        target = _get(target, name, field)

    # existence check for the leaf
    _get(target, last, field)
    if isinstance(target, MutableMapping):
        target[last] = value
    else:
        setattr(target, last, value)
