"""
Unit tests for OperationManager.
"""

import pytest
from pubsub import pub
from viewdock import topics
from viewdock.area import Container, Split
from viewdock.geometry import Direction
from viewdock.operation_manager import OperationManager, OpType
from viewdock.targets import DockTab, SplitSizer
from viewdock.workspace import Workspace


@pytest.fixture
def workspace(standard_rect):
    """Workspace split vertically between an editor and a log dock."""
    ws = Workspace(standard_rect)
    editor = ws.create_dock("editor")
    ws.initialize(editor)
    ws.split_by_dock_handle(Direction.VERTICAL, editor.handle, ws.create_dock("log"))
    return ws


@pytest.fixture
def ended_targets():
    """Collect targets published on OPERATION_ENDED."""
    received = []

    def listener(target):
        received.append(target)

    pub.subscribe(listener, topics.OPERATION_ENDED)
    yield received
    pub.unsubscribe(listener, topics.OPERATION_ENDED)


@pytest.mark.unit
class TestOperationManager:
    """Test OperationManager state management."""

    def test_initial_state(self, workspace):
        """Test OperationManager starts with no active operation."""
        manager = OperationManager(workspace)

        assert not manager.is_active()
        assert manager.get_operation_type() == OpType.NONE
        assert manager.get_current_target() is None

    def test_begin_on_sizer_starts_resize(self, workspace):
        """Test pressing on a split boundary starts a resize."""
        manager = OperationManager(workspace)

        assert manager.begin((500, 250))

        assert manager.get_operation_type() == OpType.RESIZE
        assert manager.get_current_target() == SplitSizer(
            workspace.root.handle, 0, Direction.VERTICAL
        )

    def test_begin_on_tab_starts_dock_move(self, workspace):
        """Test pressing on a tab starts a dock drag."""
        manager = OperationManager(workspace)
        editor = workspace.root.children[0].active

        assert manager.begin((100, 10))

        assert manager.get_operation_type() == OpType.MOVE_DOCK
        assert manager.get_current_target() == DockTab(editor.handle)

    def test_begin_on_empty_space(self, workspace):
        """Test pressing inside a panel body starts nothing."""
        manager = OperationManager(workspace)

        assert not manager.begin((100, 250))
        assert not manager.is_active()

    def test_begin_blocks_when_operation_active(self, workspace):
        """Test starting a second operation while one is active."""
        manager = OperationManager(workspace)
        manager.begin((500, 250))

        assert not manager.begin((100, 10))
        assert manager.get_operation_type() == OpType.RESIZE

    def test_resize_follows_pointer(self, workspace):
        """Test the boundary moves with the pointer."""
        manager = OperationManager(workspace)
        manager.begin((500, 250))

        manager.handle_motion((600, 250))

        assert workspace.root.ratios[0] == pytest.approx(0.6)
        assert workspace.root.children[0].get_rect().width == pytest.approx(600)

        manager.handle_motion((550, 240))

        assert workspace.root.ratios[0] == pytest.approx(0.55)

    def test_operation_tracks_last_position(self, workspace):
        """Test the operation records the latest pointer position only."""
        manager = OperationManager(workspace)
        manager.begin((500, 250))

        manager.handle_motion((520, 260))

        assert vars(manager.current) == {
            "type": OpType.RESIZE,
            "target": SplitSizer(workspace.root.handle, 0, Direction.VERTICAL),
            "last_x": 520,
            "last_y": 260,
        }

    def test_resize_end(self, workspace, ended_targets):
        """Test ending a resize applies the final motion."""
        manager = OperationManager(workspace)
        manager.begin((500, 250))

        changed = manager.end((400, 250))

        assert changed is False
        assert not manager.is_active()
        assert workspace.root.ratios[0] == pytest.approx(0.4)
        assert ended_targets == [SplitSizer(workspace.root.handle, 0, Direction.VERTICAL)]

    def test_dock_drop_on_edge(self, workspace):
        """Test dragging a tab to another panel's edge moves the dock."""
        manager = OperationManager(workspace)
        editor = workspace.root.children[0].active
        log = workspace.root.children[1].active
        manager.begin((100, 10))

        manager.handle_motion((800, 250))
        changed = manager.end((990, 250))

        assert changed is True
        root = workspace.root
        assert isinstance(root, Split)
        assert [child.active for child in root.children] == [log, editor]

    def test_dock_drop_on_own_panel(self, workspace):
        """Test dropping a dock back onto its own panel changes nothing."""
        manager = OperationManager(workspace)
        before = workspace.encode()
        manager.begin((100, 10))

        assert manager.end((100, 250)) is False
        assert workspace.encode() == before

    def test_dock_drop_as_tab(self, workspace):
        """Test dropping onto another panel's tab strip adds a tab."""
        manager = OperationManager(workspace)
        editor = workspace.root.children[0].active
        manager.begin((100, 10))

        assert manager.end((700, 10))

        assert isinstance(workspace.root, Container)
        assert workspace.root.docks[-1] is editor

    def test_cancel(self, workspace, ended_targets):
        """Test cancelling a dock drag leaves the layout untouched."""
        manager = OperationManager(workspace)
        before = workspace.encode()
        manager.begin((100, 10))

        manager.cancel()

        assert not manager.is_active()
        assert workspace.encode() == before
        assert len(ended_targets) == 1

    def test_motion_without_operation(self, workspace):
        """Test motion and end are ignored when idle."""
        manager = OperationManager(workspace)

        manager.handle_motion((10, 10))

        assert manager.end((10, 10)) is False
