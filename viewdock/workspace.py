"""
Docking Workspace

Owns the root of the area tree and performs structural edits on it.
"""

from __future__ import annotations
import json
import time
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from pubsub import pub

from . import topics
from .area import Area, Container, Split, decode_area
from .config import DockConfig
from .dock import Dock
from .geometry import Direction, Rect
from .handles import DockHandle, SplitHandle
from .targets import DragTarget, DropTarget

FORMAT_VERSION = 1

# Path from the root to a node: (split, child index) per level
AreaPath = List[Tuple[Split, int]]


def debug_event_logger(topic=pub.AUTO_TOPIC, **kwargs):
    """Log all events published on the event bus."""
    timestamp = time.strftime("%H:%M:%S")
    topic_name = topic.getName()
    data_str = ", ".join(f"{k}={v}" for k, v in kwargs.items() if k != "topic")
    print(f"[{timestamp}] EVENT: {topic_name} | {data_str}")


class Workspace:
    """
    Docking workspace.

    Interior nodes are never referenced from outside the tree. Callers hold
    SplitHandle/DockHandle values and every operation resolves them by
    searching down from the root, so structural edits can never leave a
    caller with a stale node.

    Publishes DOCK_ADDED, DOCK_REMOVED, SPLIT_CREATED, SPLIT_REMOVED,
    SPLIT_RATIO_CHANGED, LAYOUT_UPDATED and LAYOUT_LOADED events.
    """

    def __init__(self, rect: Optional[Rect] = None, config: Optional[DockConfig] = None):
        self.config = config or DockConfig()
        self.rect = rect if rect is not None else Rect()
        self.root: Optional[Area] = None

        self._next_split_id = 1
        self._next_dock_id = 1

        if self.config.debug:
            pub.subscribe(debug_event_logger, pub.ALL_TOPICS)

    # Handles

    def new_split_handle(self) -> SplitHandle:
        handle = SplitHandle(self._next_split_id)
        self._next_split_id += 1
        return handle

    def create_dock(self, plugin_name: str, plugin_data: Optional[List[str]] = None) -> Dock:
        """Create a dock with a fresh handle. It is not placed anywhere yet."""
        dock = Dock(DockHandle(self._next_dock_id), plugin_name, plugin_data)
        self._next_dock_id += 1
        return dock

    def _new_container(self, dock: Dock, rect: Optional[Rect] = None) -> Container:
        return Container(
            dock,
            rect,
            header_height=self.config.header_height,
            drop_edge_fraction=self.config.drop_edge_fraction,
        )

    # Tree traversal

    def _iter_areas(self) -> Iterator[Area]:
        stack = [self.root] if self.root is not None else []
        while stack:
            area = stack.pop()
            yield area
            if isinstance(area, Split):
                stack.extend(reversed(area.children))

    def _find_dock_path(
        self, area: Area, handle: DockHandle, path: AreaPath
    ) -> Optional[Tuple[AreaPath, Container]]:
        if isinstance(area, Container):
            return (path, area) if area.has_dock(handle) else None
        if isinstance(area, Split):
            for i, child in enumerate(area.children):
                found = self._find_dock_path(child, handle, path + [(area, i)])
                if found is not None:
                    return found
        return None

    def _locate_dock(self, handle: DockHandle) -> Optional[Tuple[AreaPath, Container]]:
        if self.root is None:
            return None
        return self._find_dock_path(self.root, handle, [])

    def find_split(self, handle: SplitHandle) -> Optional[Split]:
        """Resolve a split handle by searching from the root."""
        if isinstance(self.root, Split):
            return self.root.find_split(handle)
        return None

    def find_container(self, handle: DockHandle) -> Optional[Container]:
        """Resolve the container holding a dock."""
        found = self._locate_dock(handle)
        return found[1] if found else None

    def dock_handles(self) -> List[DockHandle]:
        """Handles of all docks, in tree order."""
        return [
            dock.handle
            for area in self._iter_areas()
            if isinstance(area, Container)
            for dock in area.docks
        ]

    # Geometry

    def initialize(self, dock: Dock):
        """Place the first dock, filling the whole workspace."""
        if self.root is not None:
            raise ValueError("Workspace already has a root area")
        self.root = self._new_container(dock, self.rect)
        pub.sendMessage(topics.DOCK_ADDED, dock=dock)

    def update_rect(self, rect: Rect):
        """Assign the workspace rectangle and propagate it through the tree."""
        self.rect = rect
        if self.root is not None:
            self.root.update_rect(rect)
        pub.sendMessage(topics.LAYOUT_UPDATED, rect=rect)

    def get_drag_target_at_pos(self, pos: Tuple[float, float]) -> Optional[DragTarget]:
        if self.root is None:
            return None
        return self.root.get_drag_target_at_pos(pos)

    def get_drop_target_at_pos(self, pos: Tuple[float, float]) -> Optional[DropTarget]:
        if self.root is None:
            return None
        return self.root.get_drop_target_at_pos(pos)

    def get_dock_handle_at_pos(self, pos: Tuple[float, float]) -> Optional[DockHandle]:
        if self.root is None:
            return None
        return self.root.get_dock_handle_at_pos(pos)

    def change_ratio(
        self, handle: SplitHandle, index: int, delta: Tuple[float, float]
    ) -> bool:
        """
        Move a split boundary.

        Args:
            handle: Split owning the boundary
            index: Boundary index within the split
            delta: Pointer displacement, see Split.change_ratio()

        Returns:
            True if the split was found
        """
        split = self.find_split(handle)
        if split is None:
            return False
        split.change_ratio(index, delta)
        pub.sendMessage(
            topics.SPLIT_RATIO_CHANGED,
            handle=handle,
            index=index,
            ratio=split.ratios[index],
        )
        return True

    # Structural edits

    def split_by_dock_handle(
        self,
        direction: Direction,
        target: DockHandle,
        dock: Dock,
        before: bool = False,
        ratio: Optional[float] = None,
    ) -> bool:
        """
        Place dock next to the container holding target.

        The target container and a new container for dock become the two
        children of a new split occupying the target container's old slot.

        Args:
            direction: Direction of the new split
            target: Dock whose container gets split
            dock: Dock to place
            before: Put the new dock first (left/top) instead of second
            ratio: Share kept by the target container, defaults to
                config.default_split_ratio

        Returns:
            True if target was found
        """
        found = self._locate_dock(target)
        if found is None:
            return False
        path, container = found

        new_container = self._new_container(dock)
        first, second = (new_container, container) if before else (container, new_container)
        if ratio is None:
            ratio = self.config.default_split_ratio
        if before:
            ratio = 1.0 - ratio

        split = Split.from_two(
            direction, ratio, self.new_split_handle(), container.get_rect(), first, second
        )
        if path:
            parent, index = path[-1]
            parent.replace_child(index, split)
        else:
            self.root = split

        pub.sendMessage(topics.SPLIT_CREATED, handle=split.handle)
        pub.sendMessage(topics.DOCK_ADDED, dock=dock)
        return True

    def add_tab(self, target: DockHandle, dock: Dock) -> bool:
        """Add dock as a tab to the container holding target."""
        container = self.find_container(target)
        if container is None:
            return False
        container.append_dock(dock)
        pub.sendMessage(topics.DOCK_ADDED, dock=dock)
        return True

    def drop_dock(self, dock: Dock, target: DropTarget) -> bool:
        """Place dock according to a drop target."""
        direction = target.zone.split_direction
        if direction is None:
            return self.add_tab(target.handle, dock)
        return self.split_by_dock_handle(
            direction, target.handle, dock, before=target.zone.inserts_before
        )

    def remove_dock(self, handle: DockHandle) -> Optional[Dock]:
        """
        Take a dock out of the workspace.

        An emptied container is removed from its split, and a split left
        with a single child collapses into its parent.

        Returns:
            The removed dock, or None if no dock has this handle
        """
        found = self._locate_dock(handle)
        if found is None:
            return None
        path, container = found

        dock = container.remove_dock(handle)
        if not container.docks:
            self._remove_area(path)

        pub.sendMessage(topics.DOCK_REMOVED, dock=dock)
        return dock

    def _remove_area(self, path: AreaPath):
        """Remove the area at the end of path from the tree."""
        # A split whose only child goes away is removed as well
        while path and len(path[-1][0].children) == 1:
            split, _ = path.pop()
            pub.sendMessage(topics.SPLIT_REMOVED, handle=split.handle)

        if not path:
            self.root = None
            return

        parent, index = path[-1]
        parent.remove_child(index)
        if len(parent.children) == 1:
            self._collapse(parent, path[:-1])

    def _collapse(self, split: Split, path: AreaPath):
        """Replace a single-child split by its child."""
        survivor = split.children[0]
        if not path:
            self.root = survivor
            survivor.update_rect(split.get_rect())
        else:
            parent, index = path[-1]
            if isinstance(survivor, Split) and survivor.direction == parent.direction:
                parent.replace_child_with_children(index, survivor.children)
                pub.sendMessage(topics.SPLIT_REMOVED, handle=survivor.handle)
            else:
                parent.replace_child(index, survivor)
        pub.sendMessage(topics.SPLIT_REMOVED, handle=split.handle)

    def move_dock(self, handle: DockHandle, target: DropTarget) -> bool:
        """
        Move a dock to a drop target.

        Returns:
            False if the dock or the target is missing or the dock would be
            dropped onto itself
        """
        if handle == target.handle:
            return False
        if self.find_container(target.handle) is None:
            return False

        dock = self.remove_dock(handle)
        if dock is None:
            return False
        return self.drop_dock(dock, target)

    def set_active_dock(self, handle: DockHandle) -> bool:
        container = self.find_container(handle)
        if container is None:
            return False
        return container.set_active_dock(handle)

    # Persistence

    def encode(self) -> Dict[str, Any]:
        """Persistable workspace state. Rectangles are not included."""
        return {
            "version": FORMAT_VERSION,
            "root": self.root.encode() if self.root is not None else None,
        }

    @classmethod
    def decode(
        cls,
        data: Dict[str, Any],
        rect: Optional[Rect] = None,
        config: Optional[DockConfig] = None,
    ) -> "Workspace":
        """
        Rebuild a workspace from encode() output.

        Every rectangle starts as the zero Rect; pass rect (or call
        update_rect() afterwards) before hit testing.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Invalid workspace data: {data!r}")
        version = data.get("version")
        if version != FORMAT_VERSION:
            raise ValueError(f"Unsupported layout version: {version!r}")

        workspace = cls(config=config)
        root_data = data.get("root")
        if root_data is not None:
            workspace.root = decode_area(root_data)

        split_ids = [0]
        dock_ids = [0]
        for area in workspace._iter_areas():
            if isinstance(area, Split):
                split_ids.append(area.handle.value)
            elif isinstance(area, Container):
                area.header_height = workspace.config.header_height
                area.drop_edge_fraction = workspace.config.drop_edge_fraction
                dock_ids.extend(dock.handle.value for dock in area.docks)
        workspace._next_split_id = max(split_ids) + 1
        workspace._next_dock_id = max(dock_ids) + 1

        if rect is not None:
            workspace.update_rect(rect)
        pub.sendMessage(topics.LAYOUT_LOADED, root=workspace.root)
        return workspace

    def dumps(self) -> str:
        return json.dumps(self.encode(), indent=2)

    @classmethod
    def loads(
        cls, text: str, rect: Optional[Rect] = None, config: Optional[DockConfig] = None
    ) -> "Workspace":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid layout JSON: {e}") from e
        return cls.decode(data, rect, config)

    def save(self, path: Union[str, Path]):
        """Write the layout to a JSON file."""
        Path(path).write_text(self.dumps())

    @classmethod
    def load(
        cls,
        path: Union[str, Path],
        rect: Optional[Rect] = None,
        config: Optional[DockConfig] = None,
    ) -> "Workspace":
        """Read a layout written by save()."""
        return cls.loads(Path(path).read_text(), rect, config)
