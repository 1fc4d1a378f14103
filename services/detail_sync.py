"""
Detail Synchronizer.

Keeps the magnitude / angle / component fields consistent with a
vector's endpoints in both directions:

- geometry -> fields when a vector is dragged or selected
- fields -> fields while the user types (polar <-> Cartesian)
- fields -> geometry on an explicit commit
"""

import logging
import math
from typing import Union

from models.coordinates import CoordinateTransform
from models.details import FieldValue, VectorDetails, VectorField
from models.snapping import snap_to_grid
from models.vector import VectorModel

logger = logging.getLogger(__name__)


# Fractional digits kept for recomputed components
COMPONENT_PRECISION = 6


def fix_float(value: float) -> float:
    """Round away floating point noise (and normalise -0.0)."""
    return round(value, COMPONENT_PRECISION) + 0.0


def polar_to_components(magnitude: float, angle_degrees: float) -> tuple[float, float]:
    """Grid components for a magnitude and angle, rounded."""
    radians = math.radians(angle_degrees)
    return (
        fix_float(magnitude * math.cos(radians)),
        fix_float(magnitude * math.sin(radians)),
    )


def components_to_polar(x: float, y: float) -> tuple[float, float]:
    """Magnitude and angle (degrees) for a pair of grid components."""
    return math.hypot(x, y), math.degrees(math.atan2(y, x))


class DetailSynchronizer:
    """Stateless conversions between a vector and its detail fields."""

    def __init__(self, transform: CoordinateTransform):
        self.transform = transform

    # ------------------------------------------------------------------
    # Geometry -> fields
    # ------------------------------------------------------------------

    def from_geometry(self, vector: VectorModel) -> VectorDetails:
        """Compute the detail fields from a vector's endpoints."""
        cell = self.transform.cell_size
        x = fix_float((vector.end_x - vector.start_x) / cell)
        y = fix_float((vector.start_y - vector.end_y) / cell)
        magnitude, angle = components_to_polar(x, y)
        return VectorDetails(
            magnitude=FieldValue.of(magnitude),
            angle=FieldValue.of(angle),
            x_component=FieldValue.of(x),
            y_component=FieldValue.of(y),
        )

    # ------------------------------------------------------------------
    # Field edits
    # ------------------------------------------------------------------

    def adjust(
        self,
        details: VectorDetails,
        which: Union[VectorField, str],
        raw: str
    ) -> VectorDetails:
        """
        Apply one field edit and recompute the dependent fields.

        Blank or unparseable text is stored as typed and nothing else
        changes. Editing a component recomputes magnitude and angle;
        editing magnitude keeps the angle, editing the angle keeps the
        magnitude, and both components are recomputed.
        """
        which = VectorField.coerce(which)
        value = FieldValue.parse(raw)
        updated = details.with_field(which, value)
        if not value.is_number:
            return updated

        if which.is_component:
            components = updated.components
            if components is None:
                return updated
            magnitude, angle = components_to_polar(*components)
            return VectorDetails(
                magnitude=FieldValue.of(magnitude),
                angle=FieldValue.of(angle),
                x_component=updated.x_component,
                y_component=updated.y_component,
            )

        if which == VectorField.MAGNITUDE:
            magnitude = value.number
            angle = self._current_angle(details)
        else:
            angle = value.number
            magnitude = self._current_magnitude(details)

        if angle is None or magnitude is None:
            return updated

        x, y = polar_to_components(magnitude, angle)
        return updated.with_field(
            VectorField.X_COMPONENT, FieldValue.of(x)
        ).with_field(
            VectorField.Y_COMPONENT, FieldValue.of(y)
        )

    @staticmethod
    def _current_angle(details: VectorDetails):
        if details.angle.is_number:
            return details.angle.number
        components = details.components
        if components is None:
            return None
        return components_to_polar(*components)[1]

    @staticmethod
    def _current_magnitude(details: VectorDetails):
        if details.magnitude.is_number:
            return details.magnitude.number
        components = details.components
        if components is None:
            return None
        return components_to_polar(*components)[0]

    # ------------------------------------------------------------------
    # Fields -> geometry
    # ------------------------------------------------------------------

    def commit(
        self,
        vector: VectorModel,
        details: VectorDetails,
        lock_to_grid: bool
    ) -> bool:
        """
        Write the detail components back into the vector's endpoints.

        With grid lock the tail is snapped first and the head snapped
        after the components are applied.

        Returns:
            False if nothing was written (resultant, or a component that
            is not a number)
        """
        if vector.is_resultant:
            logger.debug("Refusing commit to the resultant")
            return False

        components = details.components
        if components is None:
            logger.debug(f"Refusing commit to '{vector.name}': incomplete components")
            return False

        cell = self.transform.cell_size
        start_x, start_y = vector.start_x, vector.start_y
        if lock_to_grid:
            start_x = snap_to_grid(start_x, cell)
            start_y = snap_to_grid(start_y, cell)

        offset_x, offset_y = self.transform.components_to_pixels(*components)
        end_x = start_x + offset_x
        end_y = start_y + offset_y
        if lock_to_grid:
            end_x = snap_to_grid(end_x, cell)
            end_y = snap_to_grid(end_y, cell)

        vector.update_coordinates(start_x, start_y, end_x, end_y)
        logger.debug(
            f"Committed '{vector.name}' components ({components[0]}, {components[1]})"
        )
        return True
