"""
Vector Collection Manager.

Add/delete bookkeeping for the graph's vectors. Keeps operand names
contiguous (a, b, c, ...) and colors assigned by index after any
sequence of deletions.
"""

import logging
import string
from typing import Optional

from models.graph import GraphModel, MIN_OPERANDS, MAX_OPERANDS
from models.vector import VectorModel, VectorEvents, color_for_index
from .renderer import VectorRenderer, NullRenderer

logger = logging.getLogger(__name__)


# Default placement in grid units when no coordinates are given
DEFAULT_START = (0, 0)
DEFAULT_END = (10, 10)


class VectorCollectionManager:
    """
    Creates, deletes and renumbers the vectors of a graph.

    Refusals (capacity, resultant, unknown names) are not errors: the
    call returns None and nothing changes.
    """

    def __init__(
        self,
        graph: GraphModel,
        renderer: Optional[VectorRenderer] = None,
        events: Optional[VectorEvents] = None
    ):
        self.graph = graph
        self.renderer = renderer or NullRenderer()
        self.events = events

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def operands(self) -> list[VectorModel]:
        return self.graph.operands()

    @property
    def operand_count(self) -> int:
        return self.graph.operand_count

    @property
    def can_add(self) -> bool:
        return self.operand_count < MAX_OPERANDS

    def can_delete(self, name: Optional[str]) -> bool:
        """Check if a vector may be deleted right now."""
        if name is None or name not in self.graph.vectors:
            return False
        if self.graph.is_resultant(name):
            return False
        return self.operand_count > MIN_OPERANDS

    def operand_letters(self) -> list[str]:
        """Letters available to operands, in order."""
        return [c for c in string.ascii_lowercase if c != self.graph.resultant_name]

    def letter_for_index(self, index: int) -> str:
        return self.operand_letters()[index]

    def next_name(self) -> Optional[str]:
        """First operand letter not already in use."""
        for letter in self.operand_letters():
            if letter not in self.graph.vectors:
                return letter
        return None

    # ------------------------------------------------------------------
    # Add
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
        """
        Create a vector from grid-unit coordinates and add it to the graph.

        Args:
            start_x, start_y, end_x, end_y: Grid units. Missing values use
                the default short diagonal from the origin.
            is_resultant: Create the resultant (only one may exist)
            name: Explicit name; defaults to the next free letter

        Returns:
            The new vector, or None if the add was refused
        """
        if is_resultant:
            if self.graph.resultant is not None:
                logger.debug("Refusing to add a second resultant")
                return None
            name = self.graph.resultant_name
        else:
            if not self.can_add:
                logger.debug(f"Refusing add: already {self.operand_count} operands")
                return None
            if name is None:
                name = self.next_name()
            elif name not in self.operand_letters():
                logger.debug(f"Refusing add: '{name}' is not an operand letter")
                return None
            elif name in self.graph.vectors:
                logger.debug(f"Refusing add: name '{name}' is taken")
                return None

        start_x = DEFAULT_START[0] if start_x is None else start_x
        start_y = DEFAULT_START[1] if start_y is None else start_y
        if is_resultant:
            end_x = start_x if end_x is None else end_x
            end_y = start_y if end_y is None else end_y
        else:
            end_x = DEFAULT_END[0] if end_x is None else end_x
            end_y = DEFAULT_END[1] if end_y is None else end_y

        t = self.graph.transform
        vector = VectorModel(
            name=name,
            color=color_for_index(len(self.graph.vectors)),
            start_x=t.to_pixel_x(start_x),
            start_y=t.to_pixel_y(start_y),
            end_x=t.to_pixel_x(end_x),
            end_y=t.to_pixel_y(end_y),
            is_resultant=is_resultant,
        )
        vector.bind(self.events)

        self.graph.vectors[name] = vector
        self.renderer.draw_vector(vector)
        logger.info(
            f"Added {'resultant' if is_resultant else 'vector'} '{name}' "
            f"({start_x}, {start_y}) -> ({end_x}, {end_y})"
        )
        return vector

    # ------------------------------------------------------------------
    # Delete / renumber
    # ------------------------------------------------------------------

    def delete_vector(self, name: Optional[str]) -> Optional[VectorModel]:
        """
        Remove an operand and renumber the rest.

        Returns:
            The removed vector, or None if the delete was refused
        """
        if not self.can_delete(name):
            logger.debug(f"Refusing delete of '{name}' ({self.operand_count} operands)")
            return None

        vector = self.graph.vectors[name]
        self.renderer.remove_vector_visual(vector)
        del self.graph.vectors[name]
        vector.bind(None)

        logger.info(f"Deleted vector '{name}'")
        self.renumber()
        return vector

    def renumber(self):
        """
        Reassign letters and colors to operands in their current order.

        The mapping is rebuilt resultant first, then operands, so its
        order matches the names.
        """
        resultant = self.graph.resultant
        operands = self.graph.operands()

        rebuilt: dict[str, VectorModel] = {}
        if resultant is not None:
            rebuilt[self.graph.resultant_name] = resultant

        for index, vector in enumerate(operands):
            letter = self.letter_for_index(index)
            color = color_for_index(index + 1)
            changed = vector.name != letter or vector.color != color
            if vector.name != letter:
                logger.debug(f"Renaming '{vector.name}' -> '{letter}'")
                vector.set_name(letter)
            vector.set_color(color)
            rebuilt[letter] = vector
            if changed:
                self.renderer.redraw_vector(vector)

        self.graph.vectors = rebuilt
