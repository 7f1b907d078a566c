"""
Shared pytest fixtures for viewdock tests.
"""

import pytest
from viewdock.area import Area, Container
from viewdock.dock import Dock
from viewdock.geometry import Rect
from viewdock.handles import DockHandle


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external services")


@pytest.fixture
def mock_area():
    """Factory fixture for leaf areas that record their geometry."""

    class MockArea(Area):
        def __init__(self, name="leaf", width=0.0, height=0.0):
            self.name = name
            self.rect = Rect(0, 0, width, height)
            self.update_count = 0

        def get_rect(self):
            return self.rect

        def update_rect(self, rect):
            self.rect = rect
            self.update_count += 1

        def get_drag_target_at_pos(self, pos):
            return None

        def get_drop_target_at_pos(self, pos):
            return ("drop", self.name)

        def get_dock_handle_at_pos(self, pos):
            return ("dock", self.name)

        def encode(self):
            return {"type": "mock", "name": self.name}

    return MockArea


@pytest.fixture
def make_container():
    """Factory fixture for containers holding a single dock."""

    def _make(handle_id, plugin_name="test", rect=None):
        return Container(Dock(DockHandle(handle_id), plugin_name), rect)

    return _make


@pytest.fixture
def area_100x50():
    """The 100x50 rectangle used by the hit-testing scenarios."""
    return Rect(0, 0, 100, 50)


@pytest.fixture
def standard_rect():
    """Standard 1000x500 workspace rectangle."""
    return Rect(0, 0, 1000, 500)
