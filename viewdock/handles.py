"""
Area Handles

Stable identifiers for splits and docks. A handle never refers to a node
directly; it is resolved by searching the tree from the root on each use.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class SplitHandle:
    """Identifier of a split node."""

    value: int

    def encode(self) -> int:
        return self.value

    @classmethod
    def decode(cls, data) -> "SplitHandle":
        if isinstance(data, bool) or not isinstance(data, int):
            raise ValueError(f"Invalid split handle: {data!r}")
        return cls(data)


@dataclass(frozen=True)
class DockHandle:
    """Identifier of a dock (panel content)."""

    value: int

    def encode(self) -> int:
        return self.value

    @classmethod
    def decode(cls, data) -> "DockHandle":
        if isinstance(data, bool) or not isinstance(data, int):
            raise ValueError(f"Invalid dock handle: {data!r}")
        return cls(data)
