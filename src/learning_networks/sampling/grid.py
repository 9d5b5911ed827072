"""Grid search sampling strategy."""

import copy
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

import numpy as np

from ..constants import DEFAULT_RESOLUTION
from ..ranges import ParamRange, iterator, unwind
from ..utils.fields import recursive_setattr
from .base import SamplingStrategy


class GridSampler(SamplingStrategy):
    """Grid search hyperparameter sampling.

    Generates every combination of the candidate values of each range. The
    first range varies fastest, the last slowest (see ``unwind``).
    """

    def __init__(self, ranges: Sequence[ParamRange],
                 resolution: Union[int, Mapping[str, int]] = DEFAULT_RESOLUTION):
        """Initialize grid sampler.

        Args:
            ranges: The ranges to sample from
            resolution: Points per numeric range, either one number for all
                        ranges or a mapping from field to number. Fields
                        missing from the mapping use DEFAULT_RESOLUTION.
                        Nominal ranges always use all their values.
        """
        super().__init__(ranges)
        self.resolution = resolution

    def _resolution_for(self, field: str) -> int:
        if isinstance(self.resolution, Mapping):
            return self.resolution.get(field, DEFAULT_RESOLUTION)
        return self.resolution

    def _get_param_values(self, param_range: ParamRange) -> List[Any]:
        """Get grid values for a single range."""
        return iterator(param_range, self._resolution_for(param_range.field))

    def table(self) -> np.ndarray:
        """Full grid as an object array, one row per combination."""
        return unwind(*(self._get_param_values(r) for r in self.ranges))

    def sample(self, n_samples: Optional[int] = None) -> List[Dict[str, Any]]:
        """Generate grid of hyperparameter combinations.

        Args:
            n_samples: If given and smaller than the grid, take this many
                       evenly spaced rows of the grid

        Returns:
            List of field → value dictionaries covering the grid
        """
        fields = self.fields
        rows = self.table()
        samples = [dict(zip(fields, row.tolist())) for row in rows]

        if n_samples is not None and n_samples < len(samples):
            indices = np.linspace(0, len(samples) - 1, n_samples, dtype=int)
            samples = [samples[i] for i in indices]

        return samples

    def method_name(self) -> str:
        """Return the name of this sampling method."""
        return "grid"

    def grid_size(self) -> int:
        """Calculate total number of points in the full grid.

        Returns:
            Total number of grid points
        """
        size = 1
        for r in self.ranges:
            size *= len(self._get_param_values(r))
        return size


def apply_sample(config: Any, sample: Mapping[str, Any]) -> Any:
    """Return a deep copy of ``config`` with the sampled values set.

    Fields may be dotted paths into nested hyperparameters.
    """
    new_config = copy.deepcopy(config)
    for field, value in sample.items():
        recursive_setattr(new_config, field, value)
    return new_config
