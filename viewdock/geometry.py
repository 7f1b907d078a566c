"""
Layout Geometry

Rectangles and split directions used by the area tree.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Sequence, Tuple


class Direction(Enum):
    """Split direction of an area."""

    HORIZONTAL = auto()  # Children stacked top-to-bottom
    VERTICAL = auto()  # Children arranged left-to-right

    def encode(self) -> str:
        return self.name.lower()

    @classmethod
    def decode(cls, name: str) -> "Direction":
        try:
            return cls[name.upper()]
        except (KeyError, AttributeError):
            raise ValueError(f"Invalid direction: {name!r}") from None


@dataclass
class Rect:
    """Rectangle with position and dimensions in layout units."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def point_is_inside(self, pos: Tuple[float, float]) -> bool:
        """Check whether pos lies inside the rectangle.

        The left and top edges are inclusive, the right and bottom edges are
        exclusive, so two rectangles sharing an edge never both contain a point.
        """
        px, py = pos
        return (
            self.x <= px < self.x + self.width
            and self.y <= py < self.y + self.height
        )

    def split_by_direction(
        self, direction: Direction, ratios: Sequence[float]
    ) -> List[Rect]:
        """
        Partition the rectangle along an axis.

        Args:
            direction: HORIZONTAL splits along y, VERTICAL splits along x
            ratios: Cumulative boundaries (0.0 - 1.0), one per resulting rect

        Returns:
            One rectangle per ratio, in order
        """
        rects = []
        prev = 0.0
        for ratio in ratios:
            span = max(0.0, ratio - prev)
            if direction == Direction.HORIZONTAL:
                rects.append(
                    Rect(
                        self.x,
                        self.y + self.height * prev,
                        self.width,
                        self.height * span,
                    )
                )
            else:  # VERTICAL
                rects.append(
                    Rect(
                        self.x + self.width * prev,
                        self.y,
                        self.width * span,
                        self.height,
                    )
                )
            prev = max(prev, ratio)
        return rects

    def area_around_splits(
        self, direction: Direction, ratios: Sequence[float], thickness: float
    ) -> List[Rect]:
        """
        Compute grab regions centered on split boundaries.

        Args:
            direction: Split direction the boundaries belong to
            ratios: Boundaries to surround (normally all but the final 1.0)
            thickness: Size of each region across its boundary

        Returns:
            One rectangle per ratio
        """
        half = thickness / 2.0
        if direction == Direction.HORIZONTAL:
            return [
                Rect(self.x, self.y + self.height * ratio - half, self.width, thickness)
                for ratio in ratios
            ]
        return [
            Rect(self.x + self.width * ratio - half, self.y, thickness, self.height)
            for ratio in ratios
        ]
