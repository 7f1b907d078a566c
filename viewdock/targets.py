"""
Hit-Test Targets

Results of pointer queries against the area tree, consumed by the
input layer to start resize drags, dock drags and drops.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .geometry import Direction
from .handles import DockHandle, SplitHandle


@dataclass(frozen=True)
class SplitSizer:
    """Boundary `index` of split `handle` is under the pointer."""

    handle: SplitHandle
    index: int
    direction: Direction


@dataclass(frozen=True)
class DockTab:
    """The tab of a dock is under the pointer."""

    handle: DockHandle


DragTarget = Union[SplitSizer, DockTab]


class DropZone(Enum):
    """Where inside a container a dragged dock would land."""

    CENTER = "center"  # Added as another tab
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"

    @property
    def split_direction(self) -> Optional[Direction]:
        """Direction of the split created by dropping here, None for tabs."""
        if self in (DropZone.LEFT, DropZone.RIGHT):
            return Direction.VERTICAL
        if self in (DropZone.TOP, DropZone.BOTTOM):
            return Direction.HORIZONTAL
        return None

    @property
    def inserts_before(self) -> bool:
        return self in (DropZone.LEFT, DropZone.TOP)


@dataclass(frozen=True)
class DropTarget:
    """Drop location relative to the dock under the pointer."""

    handle: DockHandle
    zone: DropZone
