"""
Renderer interface.

The drawing layer (the Qt scene in the GUI) implements these calls; the
core only ever talks to it through this interface.
"""

from models.vector import VectorModel


class VectorRenderer:
    """Draws, repositions and removes the visuals of a vector."""

    def draw_vector(self, vector: VectorModel):
        raise NotImplementedError

    def redraw_vector(self, vector: VectorModel):
        raise NotImplementedError

    def remove_vector_visual(self, vector: VectorModel):
        raise NotImplementedError


class NullRenderer(VectorRenderer):
    """Renderer that draws nothing. Used headless and in tests."""

    def draw_vector(self, vector: VectorModel):
        pass

    def redraw_vector(self, vector: VectorModel):
        pass

    def remove_vector_visual(self, vector: VectorModel):
        pass
