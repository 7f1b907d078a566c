"""
Container Area

Leaf of the layout tree: a panel showing one or more docks as tabs.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Tuple

from .area_base import Area
from ..config import DROP_EDGE_FRACTION, HEADER_HEIGHT
from ..dock import Dock
from ..geometry import Direction, Rect
from ..handles import DockHandle
from ..targets import DockTab, DropTarget, DropZone


class Container(Area):
    """
    Panel holding docks.

    The top header_height units of the rectangle form the tab strip; each
    dock gets an equal share of it. Only the active dock is visible.
    """

    def __init__(
        self,
        dock: Dock,
        rect: Optional[Rect] = None,
        header_height: float = HEADER_HEIGHT,
        drop_edge_fraction: float = DROP_EDGE_FRACTION,
    ):
        self.docks: List[Dock] = [dock]
        self.active_dock = 0
        self.rect = rect if rect is not None else Rect()
        self.header_height = header_height
        self.drop_edge_fraction = drop_edge_fraction

    @property
    def active(self) -> Dock:
        """The dock currently shown."""
        return self.docks[self.active_dock]

    def get_rect(self) -> Rect:
        return self.rect

    def update_rect(self, rect: Rect):
        self.rect = rect

    def get_header_rect(self) -> Rect:
        """Tab strip at the top of the container."""
        return Rect(
            self.rect.x,
            self.rect.y,
            self.rect.width,
            min(self.header_height, self.rect.height),
        )

    def get_tab_rects(self) -> List[Rect]:
        """One rectangle per dock, splitting the header evenly."""
        n = len(self.docks)
        ratios = [(i + 1) / n for i in range(n)]
        return self.get_header_rect().split_by_direction(Direction.VERTICAL, ratios)

    def get_drag_target_at_pos(self, pos: Tuple[float, float]) -> Optional[DockTab]:
        if not self.get_header_rect().point_is_inside(pos):
            return None
        for dock, rect in zip(self.docks, self.get_tab_rects()):
            if rect.point_is_inside(pos):
                return DockTab(dock.handle)
        return None

    def get_drop_target_at_pos(self, pos: Tuple[float, float]) -> Optional[DropTarget]:
        if not self.rect.point_is_inside(pos):
            return None
        handle = self.active.handle

        # Dropping on the tab strip adds another tab
        if self.get_header_rect().point_is_inside(pos):
            return DropTarget(handle, DropZone.CENTER)

        rel_x = (pos[0] - self.rect.x) / self.rect.width
        rel_y = (pos[1] - self.rect.y) / self.rect.height
        edges = [
            (rel_x, DropZone.LEFT),
            (1.0 - rel_x, DropZone.RIGHT),
            (rel_y, DropZone.TOP),
            (1.0 - rel_y, DropZone.BOTTOM),
        ]
        distance, zone = min(edges, key=lambda edge: edge[0])
        if distance < self.drop_edge_fraction:
            return DropTarget(handle, zone)
        return DropTarget(handle, DropZone.CENTER)

    def get_dock_handle_at_pos(
        self, pos: Tuple[float, float]
    ) -> Optional[DockHandle]:
        if self.rect.point_is_inside(pos):
            return self.active.handle
        return None

    # Dock management

    def has_dock(self, handle: DockHandle) -> bool:
        return any(dock.handle == handle for dock in self.docks)

    def append_dock(self, dock: Dock):
        """Add dock as a new tab and make it active."""
        self.docks.append(dock)
        self.active_dock = len(self.docks) - 1

    def remove_dock(self, handle: DockHandle) -> Optional[Dock]:
        """
        Remove a dock from the container.

        Returns:
            The removed dock, or None if it is not in this container.
            The container may be left empty; the owner must then drop it.
        """
        for i, dock in enumerate(self.docks):
            if dock.handle == handle:
                del self.docks[i]
                if self.active_dock > i or self.active_dock >= len(self.docks):
                    self.active_dock = max(0, self.active_dock - 1)
                return dock
        return None

    def set_active_dock(self, handle: DockHandle) -> bool:
        for i, dock in enumerate(self.docks):
            if dock.handle == handle:
                self.active_dock = i
                return True
        return False

    # Persistence

    def encode(self) -> Dict[str, Any]:
        return {
            "type": "container",
            "active_dock": self.active_dock,
            "docks": [dock.encode() for dock in self.docks],
        }

    @classmethod
    def decode(
        cls,
        data: Dict[str, Any],
        header_height: float = HEADER_HEIGHT,
        drop_edge_fraction: float = DROP_EDGE_FRACTION,
    ) -> "Container":
        """Rebuild a container; its rectangle is the zero Rect until update_rect()."""
        try:
            docks = [Dock.decode(dock) for dock in data["docks"]]
            active = int(data.get("active_dock", 0))
        except (KeyError, TypeError) as e:
            raise ValueError(f"Invalid container data: {e}") from e
        if not docks:
            raise ValueError("Container data has no docks")
        if not 0 <= active < len(docks):
            raise ValueError(f"Invalid active dock index: {active}")

        container = cls(docks[0], None, header_height, drop_edge_fraction)
        container.docks = docks
        container.active_dock = active
        return container
