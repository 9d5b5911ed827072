"""Exception types raised by learning-networks.

Each error also derives from the builtin exception a caller would naturally
catch (ValueError, TypeError, RuntimeError), so code written against the
builtins keeps working.
"""


class LearningNetworksError(Exception):
    """Base class for all learning-networks errors."""


class ConfigurationError(LearningNetworksError, ValueError):
    """A range or grid was requested with missing or invalid configuration.

    Raised when a required ``lower``/``upper`` or ``values`` argument is
    missing, when the named field does not exist on the configuration, or
    when a scale tag is not recognised.
    """


class EmptyIteratorError(LearningNetworksError, ValueError):
    """A parameter iterator of length zero was passed to ``unwind``."""


class TypeMismatchError(LearningNetworksError, TypeError):
    """Range bounds do not match the numeric type of the field."""


class NotTrainedError(LearningNetworksError, RuntimeError):
    """An operation was applied through a trainable model that has not been fit."""
