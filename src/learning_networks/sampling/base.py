"""Base class for hyperparameter sampling strategies."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

from ..ranges import ParamRange


class SamplingStrategy(ABC):
    """Base class for hyperparameter sampling strategies.

    All sampling strategies should inherit from this class and implement
    the sample method to generate hyperparameter assignments according to
    their specific algorithm.
    """

    def __init__(self, ranges: Sequence[ParamRange]):
        """Initialize sampling strategy.

        Args:
            ranges: The ranges to sample from, one per hyperparameter
        """
        self.ranges = tuple(ranges)
        self._validate_ranges()

    def _validate_ranges(self) -> None:
        """Validate that the ranges are suitable for sampling."""
        if not self.ranges:
            raise ValueError("Sampling requires at least one parameter range")

        fields = [r.field for r in self.ranges]
        if len(fields) != len(set(fields)):
            duplicates = sorted({f for f in fields if fields.count(f) > 1})
            raise ValueError(f"Duplicate range fields: {duplicates}")

    @property
    def fields(self) -> List[str]:
        """Ordered list of the sampled fields."""
        return [r.field for r in self.ranges]

    @abstractmethod
    def sample(self, n_samples: Optional[int] = None) -> List[Dict[str, Any]]:
        """Generate hyperparameter assignments.

        Args:
            n_samples: Number of assignments to generate (strategy specific)

        Returns:
            List of dictionaries mapping field → value
        """
        pass

    @abstractmethod
    def method_name(self) -> str:
        """Return the name of this sampling method."""
        pass
