"""
Area Base Class

The capability shared by every node of the layout tree.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from ..geometry import Rect
    from ..handles import DockHandle
    from ..targets import DragTarget, DropTarget


class Area(ABC):
    """
    Node of the layout tree.

    Two variants exist: Split (an axis-aligned partition owning its children)
    and Container (a leaf holding docks). Parents only talk to children
    through the methods below.
    """

    @abstractmethod
    def get_rect(self) -> "Rect":
        """Rectangle last assigned by the owner."""
        pass

    @abstractmethod
    def update_rect(self, rect: "Rect"):
        """Assign a new rectangle and propagate it to any descendants."""
        pass

    @abstractmethod
    def get_drag_target_at_pos(
        self, pos: Tuple[float, float]
    ) -> Optional["DragTarget"]:
        """Drag target under pos, if any."""
        pass

    @abstractmethod
    def get_drop_target_at_pos(
        self, pos: Tuple[float, float]
    ) -> Optional["DropTarget"]:
        """Drop target under pos, if any."""
        pass

    @abstractmethod
    def get_dock_handle_at_pos(
        self, pos: Tuple[float, float]
    ) -> Optional["DockHandle"]:
        """Handle of the dock under pos, if any."""
        pass

    @abstractmethod
    def encode(self) -> Dict[str, Any]:
        """Persistable state. Rectangles are never included."""
        pass


def decode_area(data: Dict[str, Any]) -> Area:
    """
    Rebuild an area from its persisted form.

    Args:
        data: Dictionary produced by Area.encode()

    Returns:
        A Split or Container with a zero rectangle
    """
    from .area_split import Split
    from .area_container import Container

    if not isinstance(data, dict):
        raise ValueError(f"Invalid area data: {data!r}")

    area_type = data.get("type")
    if area_type == "split":
        return Split.decode(data)
    if area_type == "container":
        return Container.decode(data)
    raise ValueError(f"Unknown area type: {area_type!r}")
