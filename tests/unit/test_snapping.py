"""
Unit tests for grid snapping.

Tests:
- Rounding to the nearest grid line
- Idempotence of snapping
- Drag remainder accumulation
"""

import pytest
from models.snapping import snap_to_grid, snap_point, is_aligned, DragAccumulator


class TestSnapToGrid:
    """Tests for snap_to_grid()."""
    
    @pytest.mark.parametrize("value,expected", [
        (0, 0),
        (4, 0),
        (6, 10),
        (14, 10),
        (-4, 0),
        (-16, -20),
        (395, 400),
    ])
    def test_nearest_line(self, value, expected):
        """Test snapping to the nearest multiple of the cell size."""
        assert snap_to_grid(value, 10) == expected
    
    def test_halves_round_up(self):
        """Test that exact halves go to the larger multiple."""
        assert snap_to_grid(15, 10) == 20
        assert snap_to_grid(-15, 10) == -10
        assert snap_to_grid(25, 10) == 30
    
    @pytest.mark.parametrize("value", [-37.2, -15, 0, 3.3, 15, 44.999, 1234.5])
    def test_idempotent(self, value):
        """Test that snapping a snapped value changes nothing."""
        once = snap_to_grid(value, 10)
        assert snap_to_grid(once, 10) == once
    
    def test_other_cell_size(self):
        """Test snapping with a 25 px cell."""
        assert snap_to_grid(30, 25) == 25
        assert snap_to_grid(38, 25) == 50
    
    def test_snap_point(self):
        """Test snapping both coordinates."""
        assert snap_point(13, 387, 10) == (10, 390)
    
    def test_is_aligned(self):
        """Test alignment check."""
        assert is_aligned(30, 10)
        assert not is_aligned(31, 10)


class TestDragAccumulator:
    """Tests for DragAccumulator."""
    
    def test_small_delta_keeps_position(self):
        """Test that a sub-cell move is carried, not applied."""
        acc = DragAccumulator()
        assert acc.apply(0, 0, 3, 0, 10) == (0, 0)
        assert acc.dx == 3
        assert acc.dy == 0
    
    def test_slow_drag_crosses_grid_line(self):
        """Test that repeated small deltas eventually move the point."""
        acc = DragAccumulator()
        x, y = 0, 0
        for _ in range(5):
            x, y = acc.apply(x, y, 3, 0, 10)
        
        # Pointer moved 15 px; half-way rounds up
        assert x == 20
        assert y == 0
    
    def test_no_drift(self):
        """Test that position plus remainder always tracks the pointer."""
        acc = DragAccumulator()
        x, y = 0.0, 400.0
        moved_x = moved_y = 0.0
        for step in range(100):
            delta_x, delta_y = 1.0, -0.5 if step % 2 else 0.25
            moved_x += delta_x
            moved_y += delta_y
            x, y = acc.apply(x, y, delta_x, delta_y, 10)
            assert x + acc.dx == pytest.approx(moved_x)
            assert y + acc.dy == pytest.approx(400.0 + moved_y)
    
    def test_result_is_aligned(self):
        """Test that every returned point sits on the grid."""
        acc = DragAccumulator()
        x, y = 0.0, 0.0
        for delta in (2.2, 7.9, -3.3, 11.6, 0.4):
            x, y = acc.apply(x, y, delta, -delta, 10)
            assert is_aligned(x, 10)
            assert is_aligned(y, 10)
    
    def test_reset(self):
        """Test that reset forgets the remainder."""
        acc = DragAccumulator()
        acc.apply(0, 0, 4, -3, 10)
        acc.reset()
        assert acc.dx == 0
        assert acc.dy == 0
