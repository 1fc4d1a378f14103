"""
Vector entity.

A vector is one arrow on the graph. It owns its pixel-space endpoints and
exposes the geometric mutations the canvas and the detail panel need.
Magnitude and angle are always derived from the endpoints.
"""

import math
import uuid
from dataclasses import dataclass, field
from typing import Optional

from .snapping import DragAccumulator


# Palette by creation index. Index 0 belongs to the resultant, operand i
# gets index i + 1.
VECTOR_COLORS = [
    "red",
    "blue",
    "green",
    "purple",
    "orange",
    "black",
    "brown",
    "#fcba03",
    "magenta",
    "darkgreen",
    "darkorange",
]

RESULTANT_NAME = "s"


def color_for_index(index: int) -> str:
    """Palette color for a creation index (wraps past the end)."""
    return VECTOR_COLORS[index % len(VECTOR_COLORS)]


class VectorEvents:
    """
    Callbacks a vector uses to report changes.

    The owner of the collection subclasses this (or passes an instance)
    so that construction order does not matter. Defaults do nothing.
    """

    def on_geometry_changed(self, vector: "VectorModel"):
        pass

    def on_selected(self, name: str):
        pass


_NO_EVENTS = VectorEvents()


@dataclass
class VectorModel:
    """
    One arrow on the graph.

    Coordinates are canvas pixels (Y grows downwards). The resultant is
    anchored: its tail never moves and its head is owned by the resultant
    engine, so drags on it only select it.
    """
    name: str
    color: str = "black"
    start_x: float = 0.0
    start_y: float = 0.0
    end_x: float = 0.0
    end_y: float = 0.0
    is_resultant: bool = False
    id: str = field(default_factory=lambda: str(uuid.uuid4())[:8], compare=False)

    events: VectorEvents = field(default=_NO_EVENTS, repr=False, compare=False)
    accumulator: DragAccumulator = field(
        default_factory=DragAccumulator, repr=False, compare=False
    )

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def dx(self) -> float:
        return self.end_x - self.start_x

    @property
    def dy(self) -> float:
        return self.end_y - self.start_y

    @property
    def displacement(self) -> tuple[float, float]:
        """Pixel displacement from tail to head."""
        return self.dx, self.dy

    @property
    def pixel_length(self) -> float:
        return math.hypot(self.dx, self.dy)

    def magnitude(self, cell_size: float) -> float:
        """Length in grid units."""
        return self.pixel_length / cell_size

    @property
    def angle(self) -> float:
        """Direction in degrees, atan2 convention in pixel space."""
        return math.degrees(math.atan2(self.dy, self.dx))

    @property
    def label_angle(self) -> float:
        """Rotation for the label so the text never renders upside down."""
        angle = self.angle
        if angle > 90 or angle < -90:
            angle += 180
        return angle

    @property
    def midpoint(self) -> tuple[float, float]:
        return (self.start_x + self.end_x) / 2, (self.start_y + self.end_y) / 2

    def label_text(self, cell_size: float, precision: int = 2) -> str:
        """Canvas label, e.g. ``|a| = 6.71``."""
        return f"|{self.name}| = {self.magnitude(cell_size):.{precision}f}"

    @property
    def has_draggable_head(self) -> bool:
        return not self.is_resultant

    # ------------------------------------------------------------------
    # Geometry mutations
    # ------------------------------------------------------------------

    def begin_drag(self):
        """Reset the drag remainder at the start of a gesture."""
        self.accumulator.reset()

    def drag_body(self, dx: float, dy: float, lock_to_grid: bool, cell_size: float):
        """
        Translate the whole vector by a pointer delta.

        With grid lock the tail is snapped through the accumulator and the
        head follows by the same snapped offset, so the vector keeps its
        shape.
        """
        if self.is_resultant:
            self.events.on_selected(self.name)
            return

        if lock_to_grid:
            new_start_x, new_start_y = self.accumulator.apply(
                self.start_x, self.start_y, dx, dy, cell_size
            )
            offset_x = new_start_x - self.start_x
            offset_y = new_start_y - self.start_y
        else:
            offset_x, offset_y = dx, dy

        self.start_x += offset_x
        self.start_y += offset_y
        self.end_x += offset_x
        self.end_y += offset_y

        self.events.on_geometry_changed(self)
        self.events.on_selected(self.name)

    def drag_head(self, dx: float, dy: float, lock_to_grid: bool, cell_size: float):
        """Move only the head by a pointer delta. The tail stays put."""
        if not self.has_draggable_head:
            self.events.on_selected(self.name)
            return

        if lock_to_grid:
            self.end_x, self.end_y = self.accumulator.apply(
                self.end_x, self.end_y, dx, dy, cell_size
            )
        else:
            self.end_x += dx
            self.end_y += dy

        self.events.on_geometry_changed(self)
        self.events.on_selected(self.name)

    def update_coordinates(
        self,
        start_x: float,
        start_y: float,
        end_x: float,
        end_y: float,
        notify: bool = True
    ):
        """Replace both endpoints at once."""
        self.start_x = start_x
        self.start_y = start_y
        self.end_x = end_x
        self.end_y = end_y
        if notify:
            self.events.on_geometry_changed(self)

    def set_end(self, end_x: float, end_y: float, notify: bool = True):
        """Move the head only; used for the resultant."""
        self.update_coordinates(self.start_x, self.start_y, end_x, end_y, notify)

    # ------------------------------------------------------------------
    # Metadata (renumbering only)
    # ------------------------------------------------------------------

    def set_name(self, name: str):
        self.name = name

    def set_color(self, color: str):
        self.color = color

    def bind(self, events: Optional[VectorEvents]):
        """Attach the event sink, or detach with None."""
        self.events = events if events is not None else _NO_EVENTS
