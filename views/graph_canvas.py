"""
Graph canvas for visual vector editing.

Uses Qt's Graphics View Framework for rendering and drag handling.
The scene implements the renderer interface the vector session draws
through; items turn mouse drags into pixel deltas for the session.
"""

import logging
from typing import Optional

from PyQt6.QtCore import Qt, QPointF, QRectF
from PyQt6.QtGui import (
    QPainter, QPen, QBrush, QColor, QFont, QPainterPath,
    QPainterPathStroker, QPolygonF
)
from PyQt6.QtWidgets import (
    QGraphicsView, QGraphicsScene, QGraphicsItem,
    QGraphicsEllipseItem, QGraphicsLineItem, QGraphicsPolygonItem,
    QGraphicsSimpleTextItem
)

from models import CoordinateTransform, VectorModel
from services import VectorRenderer, VectorSession

# Setup logger for this module
logger = logging.getLogger(__name__)


# Color scheme
COLORS = {
    "grid_minor": QColor("#EEF0F3"),       # Very light gray
    "grid_major": QColor("#D1D5DB"),       # Light gray
    "axis": QColor("#374151"),             # Dark gray
    "axis_text": QColor("#6B7280"),        # Mid gray
    "background": QColor("#FFFFFF"),       # White
    "selection": QColor("#3B82F6"),        # Bright blue
}

# Space around the grid for axis labels (left, top, right, bottom)
MARGINS = (60, 10, 30, 30)

# Axis tick spacing in grid units; only every LABEL_EVERY is labelled
TICK_EVERY = 5
LABEL_EVERY = 10


class HeadHandleItem(QGraphicsEllipseItem):
    """
    Invisible hit-box around a vector's head.

    Dragging it moves only the head of the vector.
    """

    HANDLE_RADIUS = 10

    def __init__(self, vector_item: "VectorItem"):
        super().__init__(
            -self.HANDLE_RADIUS, -self.HANDLE_RADIUS,
            self.HANDLE_RADIUS * 2, self.HANDLE_RADIUS * 2,
            vector_item
        )
        self.vector_item = vector_item
        self.setBrush(QBrush(Qt.GlobalColor.transparent))
        self.setPen(QPen(Qt.PenStyle.NoPen))
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setZValue(10)  # Above the line

    def mousePressEvent(self, event):
        """Start a head drag."""
        if event.button() == Qt.MouseButton.LeftButton:
            session = self.vector_item.session
            if session:
                session.begin_drag(self.vector_item.vector.name)
            event.accept()
            return
        event.ignore()

    def mouseMoveEvent(self, event):
        """Forward the pointer delta to the session."""
        session = self.vector_item.session
        if session:
            delta = event.scenePos() - event.lastScenePos()
            session.drag_head(self.vector_item.vector.name, delta.x(), delta.y())
        event.accept()


class VectorItem(QGraphicsLineItem):
    """
    Visual representation of one vector: line, arrowhead and label.

    Operands also get a head hit-box. The item sits at the scene origin so
    child coordinates are scene coordinates.
    """

    LINE_WIDTH = 4
    ARROW_LENGTH = 14
    ARROW_HALF_WIDTH = 7
    GRAB_WIDTH = 12

    def __init__(self, vector: VectorModel, transform: CoordinateTransform,
                 label_precision: int = 2, parent: Optional[QGraphicsItem] = None):
        super().__init__(parent)
        self.vector = vector
        self.transform = transform
        self.label_precision = label_precision
        self.session: Optional[VectorSession] = None

        self._arrowhead = QGraphicsPolygonItem(self)
        self._arrowhead.setPen(QPen(Qt.PenStyle.NoPen))

        self._label = QGraphicsSimpleTextItem(self)
        font = QFont("SF Pro Display", 10)
        font.setWeight(QFont.Weight.DemiBold)
        self._label.setFont(font)

        self._handle: Optional[HeadHandleItem] = None
        if vector.has_draggable_head:
            self._handle = HeadHandleItem(self)

        self.setCursor(Qt.CursorShape.SizeAllCursor)
        self.setAcceptHoverEvents(True)
        self.update_from_model()

    def update_from_model(self):
        """Reposition every part from the vector's current endpoints."""
        v = self.vector
        color = QColor(v.color)

        pen = QPen(color, self.LINE_WIDTH)
        pen.setCapStyle(Qt.PenCapStyle.FlatCap)
        self.setPen(pen)

        # Stop the line short of the tip so the arrowhead stays sharp
        length = v.pixel_length
        if length > 0:
            ux, uy = v.dx / length, v.dy / length
        else:
            ux, uy = 1.0, 0.0
        inset = min(self.ARROW_LENGTH - 1, length)
        self.prepareGeometryChange()
        self.setLine(v.start_x, v.start_y, v.end_x - ux * inset, v.end_y - uy * inset)

        self._arrowhead.setBrush(QBrush(color))
        self._arrowhead.setPolygon(self._arrow_polygon(ux, uy))
        self._arrowhead.setVisible(length > 0)

        self._update_label(color)

        if self._handle:
            self._handle.setPos(v.end_x, v.end_y)

    def _arrow_polygon(self, ux: float, uy: float) -> QPolygonF:
        v = self.vector
        tip = QPointF(v.end_x, v.end_y)
        base = QPointF(v.end_x - ux * self.ARROW_LENGTH, v.end_y - uy * self.ARROW_LENGTH)
        normal = QPointF(-uy * self.ARROW_HALF_WIDTH, ux * self.ARROW_HALF_WIDTH)
        return QPolygonF([tip, base + normal, base - normal])

    def _update_label(self, color: QColor):
        v = self.vector
        self._label.setText(v.label_text(self.transform.cell_size, self.label_precision))
        self._label.setBrush(QBrush(color))

        # Bottom-centre of the text sits on the midpoint, rotated with the line
        rect = self._label.boundingRect()
        mid_x, mid_y = v.midpoint
        self._label.setTransformOriginPoint(rect.width() / 2, rect.height())
        self._label.setPos(mid_x - rect.width() / 2, mid_y - rect.height() - 2)
        self._label.setRotation(v.label_angle)

    def shape(self) -> QPainterPath:
        """Wider hit area than the drawn line."""
        path = QPainterPath()
        line = self.line()
        path.moveTo(line.p1())
        path.lineTo(line.p2())
        stroker = QPainterPathStroker()
        stroker.setWidth(self.GRAB_WIDTH)
        return stroker.createStroke(path)

    def mousePressEvent(self, event):
        """Select the vector and start a body drag."""
        if event.button() == Qt.MouseButton.LeftButton:
            if self.session:
                self.session.begin_drag(self.vector.name)
            event.accept()
            return
        event.ignore()

    def mouseMoveEvent(self, event):
        """Translate the whole vector by the pointer delta."""
        if self.session:
            delta = event.scenePos() - event.lastScenePos()
            self.session.drag_vector(self.vector.name, delta.x(), delta.y())
        event.accept()

    def hoverEnterEvent(self, event):
        """Handle hover enter."""
        self.setPen(QPen(QColor(self.vector.color).lighter(130), self.LINE_WIDTH + 1))
        super().hoverEnterEvent(event)

    def hoverLeaveEvent(self, event):
        """Handle hover leave."""
        self.update_from_model()
        super().hoverLeaveEvent(event)

    def paint(self, painter: QPainter, option, widget=None):
        """Custom paint with highlight for the active vector."""
        if self.session and self.session.active_name == self.vector.name:
            painter.setPen(QPen(COLORS["selection"], self.LINE_WIDTH + 6,
                                Qt.PenStyle.SolidLine, Qt.PenCapStyle.RoundCap))
            painter.setOpacity(0.25)
            painter.drawLine(self.line())
            painter.setOpacity(1.0)
        super().paint(painter, option, widget)

    def boundingRect(self) -> QRectF:
        pad = self.LINE_WIDTH + 6
        return super().boundingRect().adjusted(-pad, -pad, pad, pad)


class GraphScene(QGraphicsScene, VectorRenderer):
    """
    Scene holding every vector item.

    Implements the renderer interface so the session can draw, move and
    remove vectors. Items are keyed by the vector's stable id, not its
    name, because names change when vectors are renumbered.
    """

    def __init__(self, transform: CoordinateTransform, label_precision: int = 2, parent=None):
        super().__init__(parent)
        self.transform = transform
        self.label_precision = label_precision
        self.session: Optional[VectorSession] = None

        self._vector_items: dict[str, VectorItem] = {}

        left, top, right, bottom = MARGINS
        self.setSceneRect(QRectF(
            -left, -top,
            transform.width + left + right,
            transform.height + top + bottom
        ))
        self.setBackgroundBrush(COLORS["background"])

    def set_session(self, session: VectorSession):
        """Attach the session that item drags are forwarded to."""
        self.session = session
        for item in self._vector_items.values():
            item.session = session

    # ---- VectorRenderer ----

    def draw_vector(self, vector: VectorModel):
        item = VectorItem(vector, self.transform, self.label_precision)
        item.session = self.session
        # Resultant underneath the operands
        item.setZValue(0 if vector.is_resultant else 1)
        self.addItem(item)
        self._vector_items[vector.id] = item

    def redraw_vector(self, vector: VectorModel):
        item = self._vector_items.get(vector.id)
        if item is None:
            logger.debug(f"No item for vector '{vector.name}', drawing it")
            self.draw_vector(vector)
            return
        item.update_from_model()
        item.update()

    def remove_vector_visual(self, vector: VectorModel):
        item = self._vector_items.pop(vector.id, None)
        if item is not None:
            self.removeItem(item)

    def refresh_all(self):
        """Repaint every item (e.g. after the selection changed)."""
        for item in self._vector_items.values():
            item.update()


class GraphCanvas(QGraphicsView):
    """
    Canvas widget showing the grid, axes and vectors.
    """

    def __init__(self, transform: CoordinateTransform, label_precision: int = 2,
                 show_minor_grid: bool = True, parent=None):
        super().__init__(parent)

        self.transform = transform
        self.show_minor_grid = show_minor_grid

        # Create scene
        self.graph_scene = GraphScene(transform, label_precision)
        self.setScene(self.graph_scene)

        # View settings
        self.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.setRenderHint(QPainter.RenderHint.TextAntialiasing)
        self.setViewportUpdateMode(QGraphicsView.ViewportUpdateMode.FullViewportUpdate)
        self.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop)
        self.setDragMode(QGraphicsView.DragMode.NoDrag)

    def drawBackground(self, painter: QPainter, rect: QRectF):
        """Draw grid lines and axes."""
        super().drawBackground(painter, rect)

        t = self.transform
        cell = t.cell_size

        # Grid lines, major every LABEL_EVERY cells
        for i in range(t.num_x_ticks + 1):
            major = i % LABEL_EVERY == 0
            if not major and not self.show_minor_grid:
                continue
            painter.setPen(QPen(COLORS["grid_major" if major else "grid_minor"], 1))
            x = t.to_pixel_x(i)
            painter.drawLine(QPointF(x, 0), QPointF(x, t.height))

        for j in range(t.num_y_ticks + 1):
            major = j % LABEL_EVERY == 0
            if not major and not self.show_minor_grid:
                continue
            painter.setPen(QPen(COLORS["grid_major" if major else "grid_minor"], 1))
            y = t.to_pixel_y(j)
            painter.drawLine(QPointF(0, y), QPointF(t.width, y))

        # Axes along the bottom and left edges
        painter.setPen(QPen(COLORS["axis"], 1.5))
        painter.drawLine(QPointF(0, t.height), QPointF(t.width, t.height))
        painter.drawLine(QPointF(0, 0), QPointF(0, t.height))

        painter.setFont(QFont("SF Pro Display", 9))
        painter.setPen(QPen(COLORS["axis_text"], 1))
        tick = cell / 2

        for i in range(TICK_EVERY, t.num_x_ticks + 1, TICK_EVERY):
            x = t.to_pixel_x(i)
            painter.drawLine(QPointF(x, t.height), QPointF(x, t.height + tick))
            if i % LABEL_EVERY == 0:
                painter.drawText(QRectF(x - 20, t.height + tick, 40, 16),
                                 Qt.AlignmentFlag.AlignCenter, str(i))

        for j in range(TICK_EVERY, t.num_y_ticks + 1, TICK_EVERY):
            y = t.to_pixel_y(j)
            painter.drawLine(QPointF(-tick, y), QPointF(0, y))
            if j % LABEL_EVERY == 0:
                painter.drawText(QRectF(-tick - 44, y - 8, 40, 16),
                                 Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter,
                                 str(j))

    def fit_contents(self):
        """Fit view to show the whole grid."""
        self.fitInView(self.graph_scene.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)

    def reset_view(self):
        """Reset to default zoom."""
        self.resetTransform()
        self.centerOn(self.graph_scene.sceneRect().center())
