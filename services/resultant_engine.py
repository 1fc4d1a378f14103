"""
Resultant Engine.

Folds the operand vectors into the resultant under the active operation.
"""

import logging
from typing import Iterable

from models.graph import GraphModel, Operation, MIN_OPERANDS
from models.vector import VectorModel

logger = logging.getLogger(__name__)


def fold_displacements(
    operands: Iterable[VectorModel],
    operation: Operation
) -> tuple[float, float]:
    """
    Combine operand displacements into one pixel displacement.

    Addition sums every operand. Subtraction subtracts every operand from
    zero, i.e. the negated sum; the first operand is not treated as the
    minuend.
    """
    total_x = 0.0
    total_y = 0.0
    for vector in operands:
        total_x += vector.dx
        total_y += vector.dy

    if operation == Operation.SUBTRACTION:
        return -total_x, -total_y
    return total_x, total_y


class ResultantEngine:
    """Recomputes the resultant head from the operands of a graph."""

    def __init__(self, graph: GraphModel):
        self.graph = graph

    def compute_displacement(self) -> tuple[float, float]:
        """Resultant displacement for the current operands and operation."""
        return fold_displacements(self.graph.operands(), self.graph.selected_operation)

    def recompute(self) -> bool:
        """
        Move the resultant head to match the operands.

        The resultant tail never moves. Returns False (and leaves the
        resultant as it was) when there is no resultant or fewer than two
        operands.
        """
        resultant = self.graph.resultant
        if resultant is None:
            return False

        operands = self.graph.operands()
        if len(operands) < MIN_OPERANDS:
            logger.debug(f"Skipping recompute, only {len(operands)} operand(s)")
            return False

        dx, dy = fold_displacements(operands, self.graph.selected_operation)
        resultant.set_end(resultant.start_x + dx, resultant.start_y + dy, notify=False)
        logger.debug(
            f"Resultant {self.graph.selected_operation.label}: ({dx:.1f}, {dy:.1f}) px"
        )
        return True
