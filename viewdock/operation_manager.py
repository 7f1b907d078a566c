"""
Operation Manager

Handles interactive split resizing and dock dragging.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Optional, Tuple

from pubsub import pub

from . import topics
from .targets import DockTab, SplitSizer

if TYPE_CHECKING:
    from .targets import DragTarget
    from .workspace import Workspace


class OpType(Enum):
    """Type of interactive operation."""

    NONE = auto()
    RESIZE = auto()
    MOVE_DOCK = auto()


@dataclass
class Operation:
    """Represents an active interactive operation."""

    type: OpType
    target: "DragTarget"
    last_x: float
    last_y: float


class OperationManager:
    """Manages drags started from workspace hit tests.

    Publishes OPERATION_STARTED and OPERATION_ENDED events.
    """

    def __init__(self, workspace: "Workspace"):
        """Initialize operation manager.

        Args:
            workspace: Workspace the pointer positions refer to
        """
        self.workspace = workspace
        self.current: Optional[Operation] = None

    def is_active(self) -> bool:
        """Check if an operation is currently active."""
        return self.current is not None

    def get_operation_type(self) -> OpType:
        """Get the current operation type."""
        return self.current.type if self.current else OpType.NONE

    def begin(self, pos: Tuple[float, float]) -> bool:
        """Start an operation at a pointer press.

        Args:
            pos: Pointer position

        Returns:
            True if something draggable is under pos and no operation was active
        """
        if self.current is not None:
            return False

        target = self.workspace.get_drag_target_at_pos(pos)
        if isinstance(target, SplitSizer):
            op_type = OpType.RESIZE
        elif isinstance(target, DockTab):
            op_type = OpType.MOVE_DOCK
        else:
            return False

        x, y = pos
        self.current = Operation(type=op_type, target=target, last_x=x, last_y=y)
        pub.sendMessage(topics.OPERATION_STARTED, target=target)
        return True

    def handle_motion(self, pos: Tuple[float, float]):
        """Handle pointer motion during an operation.

        Args:
            pos: Current pointer position
        """
        if not self.current:
            return

        x, y = pos
        if self.current.type == OpType.RESIZE:
            target = self.current.target
            # Split.change_ratio() inverts the displacement, so pass it
            # reversed to make the boundary follow the pointer
            delta = (self.current.last_x - x, self.current.last_y - y)
            self.workspace.change_ratio(target.handle, target.index, delta)

        self.current.last_x = x
        self.current.last_y = y

    def end(self, pos: Tuple[float, float]) -> bool:
        """End the current operation at a pointer release.

        Args:
            pos: Pointer position

        Returns:
            True if the operation changed the layout on release
        """
        if not self.current:
            return False

        self.handle_motion(pos)
        operation = self.current
        self.current = None

        changed = False
        if operation.type == OpType.MOVE_DOCK:
            drop = self.workspace.get_drop_target_at_pos(pos)
            if drop is not None:
                changed = self.workspace.move_dock(operation.target.handle, drop)

        pub.sendMessage(topics.OPERATION_ENDED, target=operation.target)
        return changed

    def cancel(self):
        """Abort the current operation without applying a drop."""
        if not self.current:
            return
        operation = self.current
        self.current = None
        pub.sendMessage(topics.OPERATION_ENDED, target=operation.target)

    def get_current_target(self) -> Optional["DragTarget"]:
        """Get the drag target of the current operation."""
        return self.current.target if self.current else None
