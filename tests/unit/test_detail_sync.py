"""
Unit tests for detail field parsing and synchronization.

Tests:
- FieldValue parsing of typed text
- Geometry -> fields
- Field edits (polar <-> Cartesian)
- Commit of fields back to geometry
"""

import math

import pytest
from models.details import FieldKind, FieldValue, VectorDetails, VectorField
from models.vector import VectorModel
from services.detail_sync import (
    DetailSynchronizer, fix_float, polar_to_components, components_to_polar
)


@pytest.fixture
def sync(transform) -> DetailSynchronizer:
    return DetailSynchronizer(transform)


@pytest.fixture
def vector() -> VectorModel:
    """Operand from grid (0, 0) to (3, 4)."""
    return VectorModel(name="a", start_x=0, start_y=400, end_x=30, end_y=360)


@pytest.fixture
def details(sync, vector) -> VectorDetails:
    return sync.from_geometry(vector)


class TestFieldValue:
    """Tests for FieldValue.parse() and display()."""
    
    def test_number(self):
        value = FieldValue.parse("  2.5 ")
        assert value.is_number
        assert value.value == 2.5
    
    def test_blank_is_empty(self):
        value = FieldValue.parse("   ")
        assert value.kind == FieldKind.EMPTY
        assert value.value is None
        assert value.display() == ""
    
    @pytest.mark.parametrize("raw", ["-", "1e", "abc", "nan", "inf", "-inf"])
    def test_invalid_keeps_text(self, raw):
        """Test that partial or non-finite input is kept as typed."""
        value = FieldValue.parse(raw)
        assert value.kind == FieldKind.INVALID
        assert value.display() == raw
    
    def test_display_precision(self):
        assert FieldValue.of(53.130102).display(2) == "53.13"
        assert FieldValue.of(5.0).display() == "5"


class TestHelpers:
    """Tests for conversion helpers."""
    
    def test_fix_float(self):
        """Test rounding of float noise and negative zero."""
        assert fix_float(0.1 + 0.2) == 0.3
        assert math.copysign(1, fix_float(-0.0)) == 1
    
    def test_polar_to_components(self):
        assert polar_to_components(5, 90) == (0.0, 5.0)
        x, y = polar_to_components(10, 53.13010235415598)
        assert (x, y) == (6.0, 8.0)
    
    def test_components_to_polar(self):
        magnitude, angle = components_to_polar(3, 4)
        assert magnitude == 5
        assert angle == pytest.approx(53.130102, abs=1e-6)


class TestFromGeometry:
    """Tests for DetailSynchronizer.from_geometry()."""
    
    def test_values(self, details):
        """Test the 3-4-5 vector."""
        assert details.x_component.value == 3
        assert details.y_component.value == 4
        assert details.magnitude.value == 5
        assert details.angle.value == pytest.approx(53.13, abs=0.01)
    
    def test_y_axis_flipped(self, sync):
        """Test that a vector pointing down the screen has negative Y."""
        v = VectorModel(name="a", start_x=0, start_y=300, end_x=0, end_y=320)
        d = sync.from_geometry(v)
        assert d.y_component.value == -2
        assert d.angle.value == pytest.approx(-90)
    
    def test_to_dict(self, details):
        data = details.to_dict()
        assert set(data) == {"magnitude", "angle", "x_component", "y_component"}
        assert data["magnitude"] == 5


class TestAdjust:
    """Tests for DetailSynchronizer.adjust()."""
    
    def test_component_updates_polar(self, sync, details):
        """Test that editing X recomputes magnitude and angle."""
        d = sync.adjust(details, VectorField.X_COMPONENT, "6")
        assert d.x_component.value == 6
        assert d.y_component.value == 4
        assert d.magnitude.value == pytest.approx(math.hypot(6, 4))
        assert d.angle.value == pytest.approx(math.degrees(math.atan2(4, 6)))
    
    def test_accepts_string_field(self, sync, details):
        d = sync.adjust(details, "y_component", "0")
        assert d.magnitude.value == 3
        assert d.angle.value == 0
    
    def test_magnitude_keeps_angle(self, sync, details):
        """Test that editing magnitude scales the components."""
        d = sync.adjust(details, VectorField.MAGNITUDE, "10")
        assert d.magnitude.value == 10
        assert d.angle == details.angle
        assert d.x_component.value == pytest.approx(6)
        assert d.y_component.value == pytest.approx(8)
    
    def test_angle_keeps_magnitude(self, sync, details):
        """Test that editing the angle rotates the components."""
        d = sync.adjust(details, VectorField.ANGLE, "90")
        assert d.magnitude.value == 5
        assert d.x_component.value == 0
        assert d.y_component.value == 5
    
    def test_blank_changes_nothing_else(self, sync, details):
        """Test that clearing a field leaves the others alone."""
        d = sync.adjust(details, VectorField.MAGNITUDE, "")
        assert d.magnitude.kind == FieldKind.EMPTY
        assert d.angle == details.angle
        assert d.x_component == details.x_component
        assert d.y_component == details.y_component
    
    def test_invalid_changes_nothing_else(self, sync, details):
        d = sync.adjust(details, VectorField.X_COMPONENT, "-")
        assert d.x_component.display() == "-"
        assert d.magnitude == details.magnitude
    
    def test_component_with_other_invalid(self, sync, details):
        """Test that polar values wait until both components are numbers."""
        d = sync.adjust(details, VectorField.Y_COMPONENT, "-")
        d = sync.adjust(d, VectorField.X_COMPONENT, "2")
        assert d.x_component.value == 2
        assert d.magnitude == details.magnitude
        assert d.angle == details.angle
    
    def test_angle_falls_back_to_components(self, sync, details):
        """Test that a cleared magnitude is taken from the components."""
        d = sync.adjust(details, VectorField.MAGNITUDE, "")
        d = sync.adjust(d, VectorField.ANGLE, "0")
        assert d.x_component.value == 5
        assert d.y_component.value == 0
    
    def test_original_unchanged(self, sync, details):
        """Test that adjust returns a new object."""
        sync.adjust(details, VectorField.X_COMPONENT, "9")
        assert details.x_component.value == 3


class TestCommit:
    """Tests for DetailSynchronizer.commit()."""
    
    def _with_components(self, sync, details, x, y):
        d = sync.adjust(details, VectorField.X_COMPONENT, str(x))
        return sync.adjust(d, VectorField.Y_COMPONENT, str(y))
    
    def test_moves_head(self, sync, vector, details):
        d = self._with_components(sync, details, 6, 8)
        assert sync.commit(vector, d, lock_to_grid=True)
        assert (vector.start_x, vector.start_y) == (0, 400)
        assert (vector.end_x, vector.end_y) == (60, 320)
    
    def test_locked_snaps_tail_first(self, sync, details):
        """Test that an off-grid tail is snapped before applying components."""
        v = VectorModel(name="a", start_x=3, start_y=397, end_x=33, end_y=357)
        assert sync.commit(v, details, lock_to_grid=True)
        assert (v.start_x, v.start_y) == (0, 400)
        assert (v.end_x, v.end_y) == (30, 360)
    
    def test_locked_snaps_head(self, sync, vector, details):
        d = self._with_components(sync, details, 2.5, 1.5)
        sync.commit(vector, d, lock_to_grid=True)
        assert (vector.end_x, vector.end_y) == (30, 390)
    
    def test_unlocked_exact(self, sync, vector, details):
        d = self._with_components(sync, details, 2.5, 1.25)
        sync.commit(vector, d, lock_to_grid=False)
        assert (vector.end_x, vector.end_y) == (25, 387.5)
    
    def test_resultant_refused(self, sync, details):
        s = VectorModel(name="s", start_x=0, start_y=400, end_x=30, end_y=360,
                        is_resultant=True)
        assert not sync.commit(s, details, lock_to_grid=True)
        assert (s.end_x, s.end_y) == (30, 360)
    
    def test_incomplete_refused(self, sync, vector, details):
        """Test that a blank component blocks the commit."""
        d = sync.adjust(details, VectorField.X_COMPONENT, "")
        assert not sync.commit(vector, d, lock_to_grid=True)
        assert (vector.end_x, vector.end_y) == (30, 360)
