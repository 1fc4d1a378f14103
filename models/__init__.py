"""
Models package.

This package contains the data models for the vector math visualizer:

- Coordinate mapping between grid units and canvas pixels
- Grid snapping and the drag remainder accumulator
- Vectors, the graph that holds them, and the operation enum
- Detail panel field values and state
"""

from .coordinates import CoordinateTransform, DEFAULT_CELL_SIZE
from .snapping import snap_to_grid, snap_point, is_aligned, DragAccumulator
from .vector import (
    VECTOR_COLORS,
    RESULTANT_NAME,
    color_for_index,
    VectorEvents,
    VectorModel,
)
from .graph import (
    MIN_OPERANDS,
    MAX_OPERANDS,
    DEFAULT_RESULTANT_START,
    DEFAULT_OPERANDS,
    Operation,
    GraphModel,
)
from .details import (
    FieldKind,
    FieldValue,
    VectorField,
    DetailState,
    VectorDetails,
)


__all__ = [
    # Coordinates
    "CoordinateTransform",
    "DEFAULT_CELL_SIZE",
    # Snapping
    "snap_to_grid",
    "snap_point",
    "is_aligned",
    "DragAccumulator",
    # Vector
    "VECTOR_COLORS",
    "RESULTANT_NAME",
    "color_for_index",
    "VectorEvents",
    "VectorModel",
    # Graph
    "MIN_OPERANDS",
    "MAX_OPERANDS",
    "DEFAULT_RESULTANT_START",
    "DEFAULT_OPERANDS",
    "Operation",
    "GraphModel",
    # Details
    "FieldKind",
    "FieldValue",
    "VectorField",
    "DetailState",
    "VectorDetails",
]
