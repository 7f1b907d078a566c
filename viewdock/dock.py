"""
Dock

Opaque reference to the content shown in a panel.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .handles import DockHandle


@dataclass
class Dock:
    """Panel content placed in a container.

    The layout engine never looks inside a dock; plugin_name and plugin_data
    are carried along so the owner can recreate the content after a load.
    """

    handle: DockHandle
    plugin_name: str
    plugin_data: Optional[List[str]] = None

    def encode(self) -> Dict[str, Any]:
        return {
            "handle": self.handle.encode(),
            "plugin_name": self.plugin_name,
            "plugin_data": self.plugin_data,
        }

    @classmethod
    def decode(cls, data: Dict[str, Any]) -> "Dock":
        try:
            handle = DockHandle.decode(data["handle"])
            plugin_name = data["plugin_name"]
        except (KeyError, TypeError) as e:
            raise ValueError(f"Invalid dock data: {data!r}") from e
        plugin_data = data.get("plugin_data")
        return cls(
            handle, plugin_name, list(plugin_data) if plugin_data is not None else None
        )
