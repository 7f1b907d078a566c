"""
Split Area

Divides a rectangle along one axis between an ordered list of children
using cumulative ratios.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Sequence, Tuple, TYPE_CHECKING

from .area_base import Area, decode_area
from ..config import MAX_RATIO, MIN_RATIO, SIZER_THICKNESS
from ..geometry import Direction, Rect
from ..handles import SplitHandle
from ..targets import SplitSizer

if TYPE_CHECKING:
    from ..handles import DockHandle
    from ..targets import DragTarget, DropTarget


class Split(Area):
    """
    Axis-aligned partition of a rectangle.

    ratios[i] is the fractional position along the split axis where child i
    ends. The list is non-decreasing, has one entry per child and always
    ends with exactly 1.0. Children rectangles are recomputed before any
    public method returns, so they are never stale.
    """

    def __init__(
        self,
        children: Sequence[Area],
        ratios: Sequence[float],
        direction: Direction,
        handle: SplitHandle,
        rect: Optional[Rect] = None,
    ):
        if not children:
            raise ValueError("Split needs at least one child")
        if len(children) != len(ratios):
            raise ValueError(
                f"Split has {len(children)} children but {len(ratios)} ratios"
            )
        if ratios[-1] != 1.0:
            raise ValueError(f"Last split ratio must be 1.0, got {ratios[-1]}")
        if any(a > b for a, b in zip(ratios, ratios[1:])):
            raise ValueError(f"Split ratios must be non-decreasing: {list(ratios)}")

        self.children: List[Area] = list(children)
        self.ratios: List[float] = [float(r) for r in ratios]
        self.direction = direction
        self.handle = handle
        self.rect = rect if rect is not None else Rect()
        self._update_children_sizes()

    @classmethod
    def from_two(
        cls,
        direction: Direction,
        ratio: float,
        handle: SplitHandle,
        rect: Rect,
        first: Area,
        second: Area,
    ) -> "Split":
        """Create a split of two children separated at ratio."""
        ratio = min(max(ratio, MIN_RATIO), MAX_RATIO)
        return cls([first, second], [ratio, 1.0], direction, handle, rect)

    def _check_index(self, index: int):
        if not 0 <= index < len(self.children):
            raise IndexError(
                f"Child index {index} out of range for split {self.handle.value} "
                f"with {len(self.children)} children"
            )

    def _previous_ratio(self, index: int) -> float:
        return self.ratios[index - 1] if index > 0 else 0.0

    def _update_children_sizes(self):
        rects = self.rect.split_by_direction(self.direction, self.ratios)
        for child, rect in zip(self.children, rects):
            child.update_rect(rect)

    def get_rect(self) -> Rect:
        return self.rect

    def update_rect(self, rect: Rect):
        self.rect = rect
        self._update_children_sizes()

    # Hit testing

    def get_child_at_pos(self, pos: Tuple[float, float]) -> Optional[Area]:
        """First child whose rectangle contains pos."""
        for child in self.children:
            if child.get_rect().point_is_inside(pos):
                return child
        return None

    def get_sizer_rects(self) -> List[Rect]:
        """Grab regions around every boundary except the final one."""
        return self.rect.area_around_splits(
            self.direction, self.ratios[:-1], SIZER_THICKNESS
        )

    def get_drag_target_at_pos(
        self, pos: Tuple[float, float]
    ) -> Optional["DragTarget"]:
        # Sizers win over children at the same point
        for i, rect in enumerate(self.get_sizer_rects()):
            if rect.point_is_inside(pos):
                return SplitSizer(self.handle, i, self.direction)

        child = self.get_child_at_pos(pos)
        return child.get_drag_target_at_pos(pos) if child else None

    def get_drop_target_at_pos(
        self, pos: Tuple[float, float]
    ) -> Optional["DropTarget"]:
        child = self.get_child_at_pos(pos)
        return child.get_drop_target_at_pos(pos) if child else None

    def get_dock_handle_at_pos(
        self, pos: Tuple[float, float]
    ) -> Optional["DockHandle"]:
        child = self.get_child_at_pos(pos)
        return child.get_dock_handle_at_pos(pos) if child else None

    # Ratio adjustment

    def map_rect_to_delta(self, delta: Tuple[float, float]) -> float:
        """Convert a pointer displacement into a ratio delta along the split axis."""
        dx, dy = delta
        if self.direction == Direction.VERTICAL:
            extent, amount = self.rect.width, dx
        else:  # HORIZONTAL
            extent, amount = self.rect.height, dy
        if extent == 0:
            return 0.0
        return -amount / extent

    def change_ratio(self, index: int, delta: Tuple[float, float]):
        """
        Move boundary `index` by a pointer displacement.

        The result is clamped to [MIN_RATIO, MAX_RATIO] and then to the
        neighbouring boundaries, so no child ends up with a negative size.

        Args:
            index: Boundary to move (any but the final one)
            delta: Pointer displacement (dx, dy)
        """
        if not 0 <= index < len(self.ratios) - 1:
            raise IndexError(
                f"Boundary index {index} out of range for split {self.handle.value} "
                f"with {len(self.ratios) - 1} movable boundaries"
            )

        res = self.ratios[index] + self.map_rect_to_delta(delta)
        res = min(max(res, MIN_RATIO), MAX_RATIO)
        # Neighbours win when they already sit outside the global bounds
        res = min(max(res, self._previous_ratio(index)), self.ratios[index + 1])
        self.ratios[index] = res
        self._update_children_sizes()

    # Structural edits

    def replace_child(self, index: int, new_child: Area) -> Area:
        """Swap in new_child at index and return the previous occupant."""
        self._check_index(index)
        old = self.children[index]
        self.children[index] = new_child
        self._update_children_sizes()
        return old

    def append_child(self, index: int, child: Area):
        """
        Insert child right before the occupant of index.

        The two share the space the occupant had, split evenly.
        """
        self._check_index(index)
        existing = self.ratios[index]
        diff = existing - self._previous_ratio(index)
        self.children.insert(index, child)
        self.ratios.insert(index, existing - diff / 2.0)
        self._update_children_sizes()

    def remove_child(self, index: int) -> Area:
        """Remove the child at index; its space goes to the following child."""
        self._check_index(index)
        if len(self.children) == 1:
            raise ValueError(f"Cannot remove the only child of split {self.handle.value}")

        child = self.children.pop(index)
        self.ratios.pop(index)
        if index == len(self.ratios):
            self.ratios[-1] = 1.0
        self._update_children_sizes()
        return child

    def replace_child_with_children(self, index: int, children: Sequence[Area]):
        """
        Replace one child with several, keeping their relative sizes.

        Each new child is weighted by its current extent along this split's
        axis and the weights are mapped onto the span the replaced child used
        to occupy.
        """
        self._check_index(index)
        if not children:
            raise ValueError("replace_child_with_children needs at least one child")

        if self.direction == Direction.HORIZONTAL:
            dimensions = [child.get_rect().height for child in children]
        else:  # VERTICAL
            dimensions = [child.get_rect().width for child in children]
        total = sum(dimensions)
        if total <= 0:
            dimensions = [1.0] * len(children)
            total = float(len(children))

        previous = self._previous_ratio(index)
        old_ratio = self.ratios[index]
        diff = old_ratio - previous

        new_ratios = []
        acc = 0.0
        for dimension in dimensions:
            acc += dimension
            new_ratios.append(min(previous + (acc / total) * diff, old_ratio))
        new_ratios[-1] = old_ratio

        self.children[index : index + 1] = list(children)
        self.ratios[index : index + 1] = new_ratios
        self._update_children_sizes()

    def find_split(self, handle: SplitHandle) -> Optional["Split"]:
        """Find the split with handle in this subtree."""
        if self.handle == handle:
            return self
        for child in self.children:
            if isinstance(child, Split):
                found = child.find_split(handle)
                if found is not None:
                    return found
        return None

    # Persistence

    def encode(self) -> Dict[str, Any]:
        return {
            "type": "split",
            "handle": self.handle.encode(),
            "direction": self.direction.encode(),
            "ratios": list(self.ratios),
            "children": [child.encode() for child in self.children],
        }

    @classmethod
    def decode(cls, data: Dict[str, Any]) -> "Split":
        """
        Rebuild a split; its rectangle is the zero Rect until update_rect().

        Stored boundaries outside [MIN_RATIO, MAX_RATIO] are clamped.
        """
        try:
            handle = SplitHandle.decode(data["handle"])
            direction = Direction.decode(data["direction"])
            ratios = [float(r) for r in data["ratios"]]
            children = [decode_area(child) for child in data["children"]]
        except (KeyError, TypeError) as e:
            raise ValueError(f"Invalid split data: {e}") from e
        ratios = [min(max(r, MIN_RATIO), MAX_RATIO) for r in ratios[:-1]] + ratios[-1:]
        return cls(children, ratios, direction, handle)
