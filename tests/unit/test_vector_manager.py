"""
Unit tests for the vector collection manager.

Tests:
- Adding operands and the resultant
- Capacity and deletion limits
- Contiguous renaming and recoloring after deletes
- Renderer calls
"""

import pytest
from models.graph import MAX_OPERANDS
from models.vector import VectorEvents
from tests.conftest import grid_end, grid_start


def _names(graph):
    return list(graph.vectors.keys())


class TestAdd:
    """Tests for add_vector()."""
    
    def test_initial_population(self, manager, graph):
        """Test names and colors of the starting vectors."""
        assert _names(graph) == ["s", "a", "b"]
        assert [v.color for v in graph.vectors.values()] == ["red", "blue", "green"]
        assert graph.resultant.is_resultant
    
    def test_coordinates_in_grid_units(self, manager, graph, transform):
        """Test that coordinates are converted to pixels."""
        b = graph.get_vector("b")
        assert grid_start(b, transform) == (3, 6)
        assert grid_end(b, transform) == (14, 12)
        assert (b.start_x, b.start_y) == (30, 340)
    
    def test_default_placement(self, manager, graph, transform):
        """Test that an add without coordinates uses the default diagonal."""
        c = manager.add_vector()
        assert c.name == "c"
        assert grid_start(c, transform) == (0, 0)
        assert grid_end(c, transform) == (10, 10)
        assert c.color == "purple"
    
    def test_resultant_defaults_to_zero_length(self, graph, transform):
        from services.vector_manager import VectorCollectionManager
        mgr = VectorCollectionManager(graph)
        s = mgr.add_vector(2, 3, is_resultant=True)
        assert grid_start(s, transform) == grid_end(s, transform) == (2, 3)
    
    def test_second_resultant_refused(self, manager):
        assert manager.add_vector(0, 0, is_resultant=True) is None
    
    def test_explicit_name(self, manager, graph):
        v = manager.add_vector(0, 0, 1, 1, name="q")
        assert v.name == "q"
        assert "q" in graph.vectors
    
    @pytest.mark.parametrize("name", ["a", "s"])
    def test_taken_name_refused(self, manager, graph, name):
        """Test that explicit names cannot collide."""
        assert manager.add_vector(0, 0, 1, 1, name=name) is None
        assert manager.operand_count == 2
    
    @pytest.mark.parametrize("name", ["ab", "A", "1", ""])
    def test_non_letter_name_refused(self, manager, graph, name):
        """Test that explicit names must be a single operand letter."""
        assert manager.add_vector(0, 0, 1, 1, name=name) is None
        assert name not in graph.vectors
        assert manager.operand_count == 2

    def test_capacity(self, manager, graph):
        """Test that the eleventh operand is refused."""
        while manager.operand_count < MAX_OPERANDS:
            assert manager.add_vector() is not None
        assert not manager.can_add
        assert manager.add_vector() is None
        assert manager.operand_count == MAX_OPERANDS
        assert len(graph.vectors) == MAX_OPERANDS + 1
    
    def test_letters_skip_resultant(self, manager):
        """Test that the resultant letter is never given to an operand."""
        letters = manager.operand_letters()
        assert "s" not in letters
        assert len(letters) == 25
        assert letters[:3] == ["a", "b", "c"]
    
    def test_draws(self, manager, renderer):
        assert renderer.actions("draw") == ["s", "a", "b"]


class TestDelete:
    """Tests for delete_vector()."""
    
    def test_minimum_operands(self, manager, graph):
        """Test that the last two operands cannot be deleted."""
        assert not manager.can_delete("a")
        assert manager.delete_vector("a") is None
        assert _names(graph) == ["s", "a", "b"]
    
    def test_resultant_refused(self, manager):
        manager.add_vector()
        assert not manager.can_delete("s")
        assert manager.delete_vector("s") is None
    
    @pytest.mark.parametrize("name", [None, "z"])
    def test_unknown_refused(self, manager, name):
        manager.add_vector()
        assert manager.delete_vector(name) is None
    
    def test_delete_returns_vector(self, manager, renderer):
        manager.add_vector()
        removed = manager.delete_vector("c")
        assert removed.name == "c"
        assert renderer.actions("remove") == ["c"]
    
    def test_renumber_after_middle_delete(self, manager, graph, transform):
        """Test contiguous names and colors after deleting a middle operand."""
        c = manager.add_vector(1, 1, 2, 2)
        d = manager.add_vector(2, 2, 3, 3)
        
        manager.delete_vector("b")
        
        assert _names(graph) == ["s", "a", "b", "c"]
        assert graph.get_vector("b") is c
        assert graph.get_vector("c") is d
        assert [v.color for v in graph.operands()] == ["blue", "green", "purple"]
        assert grid_start(graph.get_vector("b"), transform) == (1, 1)
    
    def test_renumber_redraws_changed(self, manager, renderer):
        """Test that only renamed or recolored vectors are redrawn."""
        manager.add_vector()
        manager.add_vector()
        renderer.clear()
        manager.delete_vector("a")
        assert renderer.actions("remove") == ["a"]
        assert renderer.actions("redraw") == ["a", "b", "c"]
    
    def test_delete_last_no_redraw(self, manager, renderer):
        manager.add_vector()
        renderer.clear()
        manager.delete_vector("c")
        assert renderer.actions("redraw") == []
    
    def test_deleted_vector_unbound(self, manager):
        """Test that a deleted vector stops reporting events."""
        sink = VectorEvents()
        manager.events = sink
        c = manager.add_vector()
        assert c.events is sink

        removed = manager.delete_vector("c")
        assert removed.events is not sink
    
    def test_add_after_delete_reuses_letter(self, manager, graph):
        """Test that a new operand gets the next contiguous letter."""
        manager.add_vector()
        manager.delete_vector("a")
        v = manager.add_vector()
        assert v.name == "c"
        assert _names(graph) == ["s", "a", "b", "c"]
