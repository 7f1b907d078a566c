"""
viewdock

Recursive split layout engine for panel docking.

This package provides:
- Rectangle geometry and split directions
- The area tree: splits with adjustable ratios and dock containers
- Hit testing for resize sizers, dock tabs and drop zones
- A workspace that edits the tree by handle and persists it as JSON
- Interactive resize and dock drag operations

Example usage:
    from viewdock import Workspace, Rect, Direction

    ws = Workspace(Rect(0, 0, 1280, 720))
    editor = ws.create_dock("editor")
    ws.initialize(editor)
    ws.split_by_dock_handle(Direction.VERTICAL, editor.handle, ws.create_dock("log"))
    target = ws.get_drag_target_at_pos((640, 360))
"""

__version__ = "0.1.0"

from .geometry import Direction, Rect

from .handles import SplitHandle, DockHandle

from .dock import Dock

from .targets import (
    SplitSizer,
    DockTab,
    DragTarget,
    DropZone,
    DropTarget,
)

from .area import Area, Split, Container, decode_area

from .config import DockConfig

from .workspace import Workspace

from .operation_manager import OperationManager, OpType, Operation

from . import topics

__all__ = [
    # Version
    "__version__",
    # Geometry
    "Direction",
    "Rect",
    # Handles
    "SplitHandle",
    "DockHandle",
    "Dock",
    # Hit-test targets
    "SplitSizer",
    "DockTab",
    "DragTarget",
    "DropZone",
    "DropTarget",
    # Area tree
    "Area",
    "Split",
    "Container",
    "decode_area",
    # Configuration
    "DockConfig",
    # Workspace
    "Workspace",
    # Operations
    "OperationManager",
    "OpType",
    "Operation",
    # Event topics
    "topics",
]
