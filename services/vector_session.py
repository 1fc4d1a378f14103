"""
Vector Session.

The operations the UI calls: add/delete vectors, switch operation and
grid lock, select and drag vectors, edit and commit the active vector's
details. Every mutating call recomputes the resultant synchronously as
its last step, so listeners always see a consistent graph.
"""

import logging
from typing import Callable, Optional, Union

from models.details import DetailState, VectorDetails, VectorField
from models.graph import (
    GraphModel,
    Operation,
    DEFAULT_OPERANDS,
    DEFAULT_RESULTANT_START,
)
from models.vector import VectorModel, VectorEvents
from .detail_sync import DetailSynchronizer
from .renderer import VectorRenderer, NullRenderer
from .resultant_engine import ResultantEngine
from .vector_manager import VectorCollectionManager

logger = logging.getLogger(__name__)


class VectorSession(VectorEvents):
    """
    Interaction state for one graph.

    Listeners are plain callables assigned after construction:

    - on_details_changed(details or None)
    - on_selection_changed(name or None)
    - on_collection_changed()
    - on_state_changed(DetailState)
    """

    def __init__(
        self,
        graph: Optional[GraphModel] = None,
        renderer: Optional[VectorRenderer] = None
    ):
        self.graph = graph if graph is not None else GraphModel()
        self.renderer = renderer or NullRenderer()
        self.manager = VectorCollectionManager(self.graph, self.renderer, events=self)
        self.engine = ResultantEngine(self.graph)
        self.synchronizer = DetailSynchronizer(self.graph.transform)

        self._active_name: Optional[str] = None
        self._details: Optional[VectorDetails] = None
        self._state = DetailState.UNSELECTED

        self.on_details_changed: Optional[Callable[[Optional[VectorDetails]], None]] = None
        self.on_selection_changed: Optional[Callable[[Optional[str]], None]] = None
        self.on_collection_changed: Optional[Callable[[], None]] = None
        self.on_state_changed: Optional[Callable[[DetailState], None]] = None

    def initialize(self, operands: Optional[list] = None):
        """
        Create the resultant and the starting operands.

        Args:
            operands: (start_x, start_y, end_x, end_y) tuples in grid units;
                defaults to two vectors chained from the origin
        """
        if self.graph.resultant is None:
            self.manager.add_vector(*DEFAULT_RESULTANT_START, is_resultant=True)

        for coords in (operands if operands is not None else DEFAULT_OPERANDS):
            self.manager.add_vector(*coords)

        self._recompute()
        self._emit_collection_changed()

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def active_name(self) -> Optional[str]:
        return self._active_name

    @property
    def active_vector(self) -> Optional[VectorModel]:
        if self._active_name is None:
            return None
        return self.graph.get_vector(self._active_name)

    @property
    def state(self) -> DetailState:
        return self._state

    @property
    def operation(self) -> Operation:
        return self.graph.selected_operation

    @property
    def lock_to_grid(self) -> bool:
        return self.graph.lock_to_grid

    @property
    def vector_count(self) -> int:
        """All vectors, resultant included."""
        return len(self.graph.vectors)

    @property
    def can_add(self) -> bool:
        return self.manager.can_add

    @property
    def can_delete_active(self) -> bool:
        return self.manager.can_delete(self._active_name)

    @property
    def active_is_read_only(self) -> bool:
        return self.graph.is_resultant(self._active_name)

    # ------------------------------------------------------------------
    # Collection
    # ------------------------------------------------------------------

    def add_vector(
        self,
        start_x: Optional[float] = None,
        start_y: Optional[float] = None,
        end_x: Optional[float] = None,
        end_y: Optional[float] = None,
        is_resultant: bool = False,
        name: Optional[str] = None
    ) -> Optional[VectorModel]:
        """Add a vector (grid units). A new operand becomes the active vector."""
        vector = self.manager.add_vector(start_x, start_y, end_x, end_y, is_resultant, name)
        if vector is None:
            return None

        self._recompute()
        if not vector.is_resultant:
            self.select_vector(vector.name)
        self._emit_collection_changed()
        return vector

    def delete_vector(self, name: Optional[str]) -> bool:
        """Delete an operand. Clears the active selection on success."""
        if self.manager.delete_vector(name) is None:
            return False

        self.clear_selection()
        self._recompute()
        self._emit_collection_changed()
        return True

    def delete_active_vector(self) -> bool:
        return self.delete_vector(self._active_name)

    def set_operation(self, operation: Union[Operation, str]):
        """Switch between addition and subtraction."""
        if not isinstance(operation, Operation):
            operation = Operation.from_label(operation)
        self.graph.selected_operation = operation
        logger.info(f"Operation set to {operation.label}")
        self._recompute()

    def set_lock_to_grid(self, locked: bool):
        self.graph.lock_to_grid = bool(locked)
        logger.info(f"Lock to grid {'on' if locked else 'off'}")
        self._recompute()

    def toggle_lock_to_grid(self) -> bool:
        self.set_lock_to_grid(not self.graph.lock_to_grid)
        return self.graph.lock_to_grid

    # ------------------------------------------------------------------
    # Selection and dragging
    # ------------------------------------------------------------------

    def select_vector(self, name: Optional[str]) -> bool:
        """Make a vector active and load its details from geometry."""
        vector = self.graph.get_vector(name) if name is not None else None
        if vector is None:
            return False

        changed = name != self._active_name
        self._active_name = name
        self._set_details(self.synchronizer.from_geometry(vector))
        self._set_state(DetailState.SELECTED)
        if changed and self.on_selection_changed:
            self.on_selection_changed(name)
        return True

    def clear_selection(self):
        """Close the detail panel."""
        had_selection = self._active_name is not None
        self._active_name = None
        self._set_details(None)
        self._set_state(DetailState.UNSELECTED)
        if had_selection and self.on_selection_changed:
            self.on_selection_changed(None)

    def begin_drag(self, name: str) -> bool:
        """Start a drag gesture on a vector: reset its remainder and select it."""
        vector = self.graph.get_vector(name)
        if vector is None:
            return False
        vector.begin_drag()
        return self.select_vector(name)

    def drag_vector(self, name: str, dx: float, dy: float):
        """Translate a whole vector by a pointer delta in pixels."""
        vector = self.graph.get_vector(name)
        if vector is None:
            return
        vector.drag_body(dx, dy, self.graph.lock_to_grid, self.graph.cell_size)

    def drag_head(self, name: str, dx: float, dy: float):
        """Move a vector's head by a pointer delta in pixels."""
        vector = self.graph.get_vector(name)
        if vector is None:
            return
        vector.drag_head(dx, dy, self.graph.lock_to_grid, self.graph.cell_size)

    # ------------------------------------------------------------------
    # Details
    # ------------------------------------------------------------------

    def get_active_vector_details(self) -> Optional[VectorDetails]:
        return self._details

    def adjust_active_vector_field(self, which: Union[VectorField, str], raw: str) -> bool:
        """
        Apply a field edit to the active vector's details.

        Geometry is not touched until commit_active_vector().
        """
        if self._details is None or self.active_vector is None:
            return False
        if self.active_is_read_only:
            return False

        self._set_details(self.synchronizer.adjust(self._details, which, raw))
        self._set_state(DetailState.EDITING)
        return True

    def commit_active_vector(self) -> bool:
        """Write the edited details back into the active vector's endpoints."""
        vector = self.active_vector
        if vector is None or self._details is None:
            return False

        if not self.synchronizer.commit(vector, self._details, self.graph.lock_to_grid):
            return False

        self._set_state(DetailState.COMMITTED)
        self._set_state(DetailState.SELECTED)
        return True

    # ------------------------------------------------------------------
    # VectorEvents
    # ------------------------------------------------------------------

    def on_geometry_changed(self, vector: VectorModel):
        self.renderer.redraw_vector(vector)
        if vector.name == self._active_name:
            self._set_details(self.synchronizer.from_geometry(vector))
        self._recompute()

    def on_selected(self, name: str):
        if name != self._active_name:
            self.select_vector(name)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _recompute(self):
        if not self.engine.recompute():
            return
        resultant = self.graph.resultant
        self.renderer.redraw_vector(resultant)
        if self.graph.is_resultant(self._active_name):
            self._set_details(self.synchronizer.from_geometry(resultant))

    def _set_details(self, details: Optional[VectorDetails]):
        self._details = details
        if self.on_details_changed:
            self.on_details_changed(details)

    def _set_state(self, state: DetailState):
        if state == self._state:
            return
        logger.debug(f"Detail state {self._state.name} -> {state.name}")
        self._state = state
        if self.on_state_changed:
            self.on_state_changed(state)

    def _emit_collection_changed(self):
        if self.on_collection_changed:
            self.on_collection_changed()
