"""
Event Topics for viewdock

All pub/sub topics are defined here for easy discovery and documentation.
Topic naming convention: <category>.<action>
"""

# Dock events
DOCK_ADDED = "dock.added"
"""Published when a dock is placed in the workspace. Params: dock"""

DOCK_REMOVED = "dock.removed"
"""Published when a dock is taken out of the workspace. Params: dock"""

# Split events
SPLIT_CREATED = "split.created"
"""Published when a new split node is inserted into the tree. Params: handle"""

SPLIT_REMOVED = "split.removed"
"""Published when a split collapses and leaves the tree. Params: handle"""

SPLIT_RATIO_CHANGED = "split.ratio_changed"
"""Published when a split boundary is moved. Params: handle, index, ratio"""

# Layout events
LAYOUT_UPDATED = "layout.updated"
"""Published when the workspace rectangle is reassigned. Params: rect"""

LAYOUT_LOADED = "layout.loaded"
"""Published when a workspace is restored from persisted state. Params: root"""

# Operation events (interactive resize/dock drag)
OPERATION_STARTED = "operation.started"
"""Published when an interactive drag starts. Params: target"""

OPERATION_ENDED = "operation.ended"
"""Published when an interactive drag ends or is cancelled. Params: target"""
