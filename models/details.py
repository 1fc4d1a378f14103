"""
Detail view model for the active vector.

Holds the four editable numbers shown above the graph. Each field is a
tagged value so that a cleared or half-typed field can be kept while the
user is typing, without being mistaken for zero.
"""

import math
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import Optional


class FieldKind(Enum):
    """What a detail field currently holds."""
    EMPTY = auto()      # Blank text box
    NUMBER = auto()     # Parsed numeric value
    INVALID = auto()    # Text that does not parse yet (e.g. "-" or "1e")


@dataclass(frozen=True)
class FieldValue:
    """A single detail field: empty, a number, or raw unparsed text."""
    kind: FieldKind = FieldKind.NUMBER
    number: float = 0.0
    raw: str = ""

    @classmethod
    def empty(cls) -> "FieldValue":
        return cls(kind=FieldKind.EMPTY, number=0.0, raw="")

    @classmethod
    def of(cls, value: float) -> "FieldValue":
        return cls(kind=FieldKind.NUMBER, number=float(value), raw="")

    @classmethod
    def invalid(cls, raw: str) -> "FieldValue":
        return cls(kind=FieldKind.INVALID, number=0.0, raw=raw)

    @classmethod
    def parse(cls, raw: str) -> "FieldValue":
        """
        Parse text typed into a field.

        Blank text is EMPTY, text that is not a finite number is INVALID
        and keeps its raw form.
        """
        text = raw.strip()
        if not text:
            return cls.empty()
        try:
            value = float(text)
        except ValueError:
            return cls.invalid(raw)
        if not math.isfinite(value):
            return cls.invalid(raw)
        return cls.of(value)

    @property
    def is_number(self) -> bool:
        return self.kind == FieldKind.NUMBER

    @property
    def value(self) -> Optional[float]:
        """The number, or None when the field does not hold one."""
        return self.number if self.is_number else None

    def display(self, precision: Optional[int] = None) -> str:
        """Text to show in the field."""
        if self.kind == FieldKind.EMPTY:
            return ""
        if self.kind == FieldKind.INVALID:
            return self.raw
        if precision is None:
            return f"{self.number:g}"
        return f"{self.number:.{precision}f}"


class VectorField(Enum):
    """Editable detail fields."""
    MAGNITUDE = "magnitude"
    ANGLE = "angle"
    X_COMPONENT = "x_component"
    Y_COMPONENT = "y_component"

    @property
    def is_component(self) -> bool:
        return self in (VectorField.X_COMPONENT, VectorField.Y_COMPONENT)

    @classmethod
    def coerce(cls, value) -> "VectorField":
        """Accept a VectorField or its string value."""
        if isinstance(value, cls):
            return value
        return cls(value)


class DetailState(Enum):
    """Lifecycle of the active vector in the detail panel."""
    UNSELECTED = auto()
    SELECTED = auto()
    EDITING = auto()
    COMMITTED = auto()


@dataclass(frozen=True)
class VectorDetails:
    """Magnitude, angle and grid components of one vector."""
    magnitude: FieldValue = field(default_factory=lambda: FieldValue.of(0.0))
    angle: FieldValue = field(default_factory=lambda: FieldValue.of(0.0))
    x_component: FieldValue = field(default_factory=lambda: FieldValue.of(0.0))
    y_component: FieldValue = field(default_factory=lambda: FieldValue.of(0.0))

    def get(self, which: VectorField) -> FieldValue:
        return getattr(self, which.value)

    def with_field(self, which: VectorField, value: FieldValue) -> "VectorDetails":
        """Return a copy with one field replaced."""
        return replace(self, **{which.value: value})

    @property
    def components(self) -> Optional[tuple[float, float]]:
        """Both grid components, or None while either is not a number."""
        if self.x_component.is_number and self.y_component.is_number:
            return self.x_component.number, self.y_component.number
        return None

    def to_dict(self) -> dict:
        """Plain values, None for fields that do not hold a number."""
        return {f.value: self.get(f).value for f in VectorField}
