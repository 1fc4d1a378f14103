"""
Graph model.

The graph owns the coordinate space and the vector collection. The
resultant lives in the same mapping as the operands; the graph only keeps
its key, so every lookup goes through the mapping and stays valid after
operands are renamed.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .coordinates import CoordinateTransform
from .vector import VectorModel, RESULTANT_NAME


MIN_OPERANDS = 2
MAX_OPERANDS = 10


class Operation(Enum):
    """Operation folded over the operand vectors."""
    ADDITION = "Addition"
    SUBTRACTION = "Subtraction"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_label(cls, label: str) -> "Operation":
        """Look up an operation by its display name (case-insensitive)."""
        for op in cls:
            if op.value.lower() == label.strip().lower():
                return op
        raise ValueError(f"Unknown operation: {label!r}")


# Initial population in grid units: (start_x, start_y, end_x, end_y).
# The resultant is anchored at the origin and its head is computed.
DEFAULT_RESULTANT_START = (0, 0)
DEFAULT_OPERANDS = [
    (0, 0, 3, 6),
    (3, 6, 14, 12),
]


@dataclass
class GraphModel:
    """
    Root model: coordinate space, mode flags and the vector collection.

    ``vectors`` keeps insertion order, which is creation order for
    operands. Operand names are letters ``a, b, c, ...``; ``s`` is
    reserved for the resultant.
    """
    transform: CoordinateTransform = field(default_factory=CoordinateTransform)
    lock_to_grid: bool = True
    selected_operation: Operation = Operation.ADDITION
    vectors: dict[str, VectorModel] = field(default_factory=dict)
    resultant_name: str = RESULTANT_NAME

    @property
    def cell_size(self) -> float:
        return self.transform.cell_size

    @property
    def width(self) -> float:
        return self.transform.width

    @property
    def height(self) -> float:
        return self.transform.height

    @property
    def resultant(self) -> Optional[VectorModel]:
        """The resultant vector, looked up through the mapping."""
        return self.vectors.get(self.resultant_name)

    def operands(self) -> list[VectorModel]:
        """Non-resultant vectors in creation order."""
        return [v for v in self.vectors.values() if not v.is_resultant]

    @property
    def operand_count(self) -> int:
        return len(self.operands())

    def get_vector(self, name: str) -> Optional[VectorModel]:
        """Get a vector by name."""
        return self.vectors.get(name)

    def is_resultant(self, name: Optional[str]) -> bool:
        return name is not None and name == self.resultant_name
