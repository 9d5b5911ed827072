"""Global constants for learning-networks.

This module centralizes defaults shared by the network, range and sampling
layers to ensure consistency and prevent duplication.
"""

# Verbosity used by fit() when the caller does not pass one
DEFAULT_VERBOSITY: int = 1

# Number of grid points per numeric range when no resolution is given
DEFAULT_RESOLUTION: int = 10

# Named scales understood by the scale registry
SCALE_LINEAR: str = "linear"
SCALE_LOG: str = "log"
SCALE_LOG10: str = "log10"
SCALE_LOG2: str = "log2"

# Scale reported for nominal ranges and for callable scales
SCALE_NONE: str = "none"
SCALE_CUSTOM: str = "custom"
