"""
Pytest configuration and shared fixtures for vector math tests.
"""

import pytest
import tempfile
import shutil
from pathlib import Path
from typing import Generator

# Add parent directory to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from models.coordinates import CoordinateTransform
from models.graph import GraphModel
from models.vector import VectorModel
from services.renderer import VectorRenderer
from services.settings_manager import reset_settings_manager
from services.vector_manager import VectorCollectionManager
from services.vector_session import VectorSession


# ============== Temporary Directory Fixtures ==============

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    tmp = tempfile.mkdtemp(prefix="vector_math_test_")
    yield Path(tmp)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Never leak the global settings manager between tests."""
    reset_settings_manager()
    yield
    reset_settings_manager()


# ============== Renderer Fixtures ==============

class RecordingRenderer(VectorRenderer):
    """Renderer that records every call as (action, vector name)."""

    def __init__(self):
        self.calls: list[tuple[str, str]] = []

    def draw_vector(self, vector: VectorModel):
        self.calls.append(("draw", vector.name))

    def redraw_vector(self, vector: VectorModel):
        self.calls.append(("redraw", vector.name))

    def remove_vector_visual(self, vector: VectorModel):
        self.calls.append(("remove", vector.name))

    def actions(self, action: str) -> list[str]:
        """Names passed to one kind of call, in order."""
        return [name for a, name in self.calls if a == action]

    def clear(self):
        self.calls.clear()


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


# ============== Model Fixtures ==============

@pytest.fixture
def transform() -> CoordinateTransform:
    """Default 60 x 40 grid with 10 px cells."""
    return CoordinateTransform()


@pytest.fixture
def graph(transform: CoordinateTransform) -> GraphModel:
    """Empty graph with grid lock on and addition selected."""
    return GraphModel(transform=transform)


@pytest.fixture
def manager(graph: GraphModel, renderer: RecordingRenderer) -> VectorCollectionManager:
    """Collection manager holding the resultant and two operands."""
    mgr = VectorCollectionManager(graph, renderer)
    mgr.add_vector(0, 0, is_resultant=True)
    mgr.add_vector(0, 0, 3, 6)
    mgr.add_vector(3, 6, 14, 12)
    return mgr


@pytest.fixture
def session(graph: GraphModel, renderer: RecordingRenderer) -> VectorSession:
    """Initialized session with the default population."""
    s = VectorSession(graph, renderer)
    s.initialize()
    return s


# ============== Helper Functions ==============

def grid_end(vector: VectorModel, transform: CoordinateTransform) -> tuple[float, float]:
    """Head of a vector in grid units."""
    return transform.to_grid_point(vector.end_x, vector.end_y)


def grid_start(vector: VectorModel, transform: CoordinateTransform) -> tuple[float, float]:
    """Tail of a vector in grid units."""
    return transform.to_grid_point(vector.start_x, vector.start_y)
