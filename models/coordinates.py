"""
Coordinate transform between grid units and canvas pixels.

Grid units are what the user reads in the detail fields. All drag,
snapping and resultant math happens in pixel space; conversion only
happens at the detail field boundary.
"""

from dataclasses import dataclass


DEFAULT_CELL_SIZE = 10


@dataclass(frozen=True)
class CoordinateTransform:
    """
    Maps grid units onto the drawing surface.

    The vertical axis is flipped: increasing grid Y moves a point up the
    screen, while pixel Y grows downwards.
    """
    num_x_ticks: int = 60
    num_y_ticks: int = 40
    cell_size: float = DEFAULT_CELL_SIZE

    def __post_init__(self):
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.num_x_ticks <= 0 or self.num_y_ticks <= 0:
            raise ValueError(
                f"tick counts must be positive, got {self.num_x_ticks}x{self.num_y_ticks}"
            )

    @property
    def width(self) -> float:
        """Pixel width of the grid area."""
        return self.num_x_ticks * self.cell_size

    @property
    def height(self) -> float:
        """Pixel height of the grid area."""
        return self.num_y_ticks * self.cell_size

    def to_pixels(self, units: float) -> float:
        """Convert a length in grid units to pixels."""
        return units * self.cell_size

    def to_units(self, pixels: float) -> float:
        """Convert a length in pixels to grid units."""
        return pixels / self.cell_size

    def to_pixel_x(self, grid_x: float) -> float:
        return grid_x * self.cell_size

    def to_pixel_y(self, grid_y: float) -> float:
        return self.height - grid_y * self.cell_size

    def to_grid_x(self, pixel_x: float) -> float:
        return pixel_x / self.cell_size

    def to_grid_y(self, pixel_y: float) -> float:
        return (self.height - pixel_y) / self.cell_size

    def to_pixel_point(self, grid_x: float, grid_y: float) -> tuple[float, float]:
        """Convert a grid point to a pixel point."""
        return self.to_pixel_x(grid_x), self.to_pixel_y(grid_y)

    def to_grid_point(self, pixel_x: float, pixel_y: float) -> tuple[float, float]:
        """Convert a pixel point to a grid point."""
        return self.to_grid_x(pixel_x), self.to_grid_y(pixel_y)

    def components_to_pixels(self, x: float, y: float) -> tuple[float, float]:
        """Convert grid components (Y up) to a pixel displacement (Y down)."""
        return x * self.cell_size, -y * self.cell_size

    def pixels_to_components(self, dx: float, dy: float) -> tuple[float, float]:
        """Convert a pixel displacement (Y down) to grid components (Y up)."""
        return dx / self.cell_size, -dy / self.cell_size
