"""Views package."""

from .graph_canvas import (
    GraphCanvas,
    GraphScene,
    VectorItem,
    HeadHandleItem,
)
from .vector_controls import VectorControls
from .vector_details_panel import VectorDetailsPanel
from .main_window import MainWindow

__all__ = [
    "GraphCanvas",
    "GraphScene",
    "VectorItem",
    "HeadHandleItem",
    "VectorControls",
    "VectorDetailsPanel",
    "MainWindow",
]
