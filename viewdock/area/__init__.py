"""
Area Tree

Split and container nodes that make up a docking layout.
"""

from .area_base import Area, decode_area
from .area_split import Split
from .area_container import Container

__all__ = [
    # Base class
    "Area",
    "decode_area",
    # Area variants
    "Split",
    "Container",
]
