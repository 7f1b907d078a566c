"""
Docking Configuration

Layout constants and the user-tunable DockConfig.
"""

from __future__ import annotations
import os
from dataclasses import dataclass, field

# Thickness of the grab region straddling each split boundary
SIZER_THICKNESS = 8.0

# Bounds for every non-final split ratio
MIN_RATIO = 0.01
MAX_RATIO = 0.99

# Height of the tab strip at the top of a container
HEADER_HEIGHT = 20.0

# Fraction of a container's width/height that counts as an edge drop zone
DROP_EDGE_FRACTION = 0.25


@dataclass
class DockConfig:
    """Docking workspace configuration."""

    # Container settings
    header_height: float = HEADER_HEIGHT
    drop_edge_fraction: float = DROP_EDGE_FRACTION

    # Ratio given to the existing panel when a new split is created
    default_split_ratio: float = 0.5

    # Print every published event (enabled with VIEWDOCK_DEBUG=1)
    debug: bool = field(default_factory=lambda: bool(os.getenv("VIEWDOCK_DEBUG")))

    def __post_init__(self):
        """Validate configured values."""
        if self.header_height < 0:
            raise ValueError(
                f"Invalid header_height: {self.header_height}. Must be >= 0"
            )
        if not 0.0 < self.drop_edge_fraction < 0.5:
            raise ValueError(
                f"Invalid drop_edge_fraction: {self.drop_edge_fraction}. "
                "Must be between 0.0 and 0.5"
            )
        if not MIN_RATIO <= self.default_split_ratio <= MAX_RATIO:
            raise ValueError(
                f"Invalid default_split_ratio: {self.default_split_ratio}. "
                f"Must be between {MIN_RATIO} and {MAX_RATIO}"
            )
