"""
Grid-lock snapping for drag gestures.

Drag events arrive as small pixel deltas. Rounding each delta on its own
would never cross a grid line during a slow drag, and discarding the
remainder would make the arrow drift away from the pointer. The
accumulator carries the sub-cell remainder from one event to the next.
"""

import math
from dataclasses import dataclass


def snap_to_grid(value: float, cell_size: float) -> float:
    """
    Snap a pixel coordinate to the nearest multiple of cell_size.

    Halves round up, matching how the canvas rounds pointer positions.
    Snapping an aligned value returns it unchanged.
    """
    return math.floor(value / cell_size + 0.5) * cell_size


def snap_point(x: float, y: float, cell_size: float) -> tuple[float, float]:
    """Snap both coordinates of a pixel point."""
    return snap_to_grid(x, cell_size), snap_to_grid(y, cell_size)


def is_aligned(value: float, cell_size: float) -> bool:
    """Check if a pixel coordinate already sits on a grid line."""
    return snap_to_grid(value, cell_size) == value


@dataclass
class DragAccumulator:
    """Sub-cell drag remainder carried between drag events."""
    dx: float = 0.0
    dy: float = 0.0

    def reset(self):
        """Forget any carried remainder (start of a new gesture)."""
        self.dx = 0.0
        self.dy = 0.0

    def apply(
        self,
        x: float,
        y: float,
        delta_x: float,
        delta_y: float,
        cell_size: float
    ) -> tuple[float, float]:
        """
        Fold a drag delta into the accumulator and return the snapped point.

        Args:
            x, y: Current committed position in pixels
            delta_x, delta_y: Raw pointer movement since the last event
            cell_size: Grid spacing in pixels

        Returns:
            The new committed position, aligned to the grid
        """
        self.dx += delta_x
        self.dy += delta_y

        candidate_x = x + self.dx
        candidate_y = y + self.dy
        snapped_x, snapped_y = snap_point(candidate_x, candidate_y, cell_size)

        self.dx = candidate_x - snapped_x
        self.dy = candidate_y - snapped_y
        return snapped_x, snapped_y
