"""
Main application window.

Assembles all UI components and manages the application layout.
"""

import logging
from typing import Optional

from PyQt6.QtCore import Qt, QUrl
from PyQt6.QtGui import QAction, QKeySequence, QDesktopServices
from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QHBoxLayout, QVBoxLayout,
    QLabel, QStatusBar, QMessageBox, QFrame
)

from models import GraphModel, Operation
from views.graph_canvas import GraphCanvas
from views.vector_controls import VectorControls
from views.vector_details_panel import VectorDetailsPanel
from services import SettingsManager, VectorSession, get_settings

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Main application window.

    Layout:
    ┌─────────────────────────────────────────────────────┐
    │  Menu Bar                                           │
    ├─────────────────────────────────────────────────────┤
    │  Controls (operation, add, delete, grid lock)       │
    ├───────────────────────────────────┬─────────────────┤
    │                                   │                 │
    │          Graph Canvas             │  Details Panel  │
    │                                   │                 │
    ├───────────────────────────────────┴─────────────────┤
    │  Status Bar                               GitHub    │
    └─────────────────────────────────────────────────────┘
    """

    def __init__(self, settings_manager: Optional[SettingsManager] = None,
                 graph: Optional[GraphModel] = None):
        super().__init__()

        # Settings manager (JSON file based)
        self.settings_manager = settings_manager or get_settings()

        # Model
        self.graph = graph if graph is not None else self.settings_manager.graph.create_graph()

        # Setup
        self._setup_window()
        self._setup_menu()
        self._setup_central_widget()
        self._setup_status_bar()

        # Session draws through the canvas scene
        self.session = VectorSession(self.graph, renderer=self.canvas.graph_scene)
        self.canvas.graph_scene.set_session(self.session)
        self._connect_signals()
        self.session.initialize()

        # Restore window geometry
        self._load_window_settings()

    def _load_window_settings(self):
        """Restore window geometry and state."""
        geometry, state = self.settings_manager.get_window_geometry()
        if geometry:
            self.restoreGeometry(geometry)
        if state:
            self.restoreState(state)

    def _save_window_settings(self):
        """Save window geometry and state."""
        self.settings_manager.save_window_geometry(
            self.saveGeometry(),
            self.saveState()
        )

    def closeEvent(self, event):
        """Handle window close - save settings."""
        self._save_window_settings()
        super().closeEvent(event)

    def _setup_window(self):
        """Configure window properties."""
        self.setWindowTitle("Vector Math")
        self.setMinimumSize(900, 600)
        self.resize(1100, 720)

        self.setStyleSheet("""
            QMainWindow {
                background: #F3F4F6;
            }
        """)

    def _setup_menu(self):
        """Create menu bar."""
        menubar = self.menuBar()

        # Edit menu
        edit_menu = menubar.addMenu("&Edit")

        add_action = QAction("&Add Vector", self)
        add_action.setShortcut(QKeySequence("Ctrl+N"))
        add_action.triggered.connect(self._on_add_vector)
        edit_menu.addAction(add_action)

        delete_action = QAction("&Delete Vector", self)
        delete_action.setShortcut(QKeySequence.StandardKey.Delete)
        delete_action.triggered.connect(self._on_delete_vector)
        edit_menu.addAction(delete_action)

        edit_menu.addSeparator()

        lock_action = QAction("Toggle Grid &Lock", self)
        lock_action.setShortcut(QKeySequence("Ctrl+L"))
        lock_action.triggered.connect(self._on_toggle_lock)
        edit_menu.addAction(lock_action)

        close_action = QAction("&Close Details", self)
        close_action.setShortcut(QKeySequence(Qt.Key.Key_Escape))
        close_action.triggered.connect(self._on_close_details)
        edit_menu.addAction(close_action)

        # View menu
        view_menu = menubar.addMenu("&View")

        fit_action = QAction("&Fit to Window", self)
        fit_action.setShortcut(QKeySequence("Ctrl+0"))
        fit_action.triggered.connect(self._on_fit_contents)
        view_menu.addAction(fit_action)

        reset_action = QAction("&Reset View", self)
        reset_action.triggered.connect(self._on_reset_view)
        view_menu.addAction(reset_action)

        # Help menu
        help_menu = menubar.addMenu("&Help")

        about_action = QAction("&About", self)
        about_action.triggered.connect(self._on_about)
        help_menu.addAction(about_action)

    def _setup_central_widget(self):
        """Create the main layout with all panels."""
        central = QWidget()
        self.setCentralWidget(central)

        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        # Top - controls
        self.controls = VectorControls()
        self.controls.setStyleSheet("""
            VectorControls {
                background: white;
                border-bottom: 1px solid #E5E7EB;
            }
        """)
        layout.addWidget(self.controls)

        body = QHBoxLayout()
        body.setContentsMargins(0, 0, 0, 0)
        body.setSpacing(0)

        # Center - graph canvas
        ui = self.settings_manager.ui
        self.canvas = GraphCanvas(
            self.graph.transform,
            label_precision=ui.label_precision,
            show_minor_grid=ui.show_minor_grid,
        )
        self.canvas.setStyleSheet("""
            QGraphicsView {
                border: none;
            }
        """)
        body.addWidget(self.canvas, 1)

        # Right - details panel, hidden until a vector is selected
        self.details_panel = VectorDetailsPanel(precision=ui.field_precision)
        self.details_panel.setStyleSheet(self.details_panel.styleSheet() + """
            VectorDetailsPanel {
                background: white;
                border-left: 1px solid #E5E7EB;
            }
        """)
        body.addWidget(self.details_panel)

        layout.addLayout(body, 1)

    def _setup_status_bar(self):
        """Create status bar."""
        status = QStatusBar()
        status.setStyleSheet("""
            QStatusBar {
                background: #F9FAFB;
                border-top: 1px solid #E5E7EB;
                padding: 4px 8px;
                color: #6B7280;
                font-size: 12px;
            }
        """)
        self.setStatusBar(status)

        # Vector count
        self._count_label = QLabel("Vectors: 0")
        status.addWidget(self._count_label)

        sep = QFrame()
        sep.setFrameShape(QFrame.Shape.VLine)
        sep.setStyleSheet("color: #E5E7EB;")
        status.addWidget(sep)

        # Instructions
        self._instruction_label = QLabel("Drag a vector to move it • Drag its head to resize")
        status.addWidget(self._instruction_label, 1)

        # Footer link
        url = self.settings_manager.ui.project_url
        self._link_label = QLabel(f'<a href="{url}">View on GitHub</a>')
        self._link_label.setTextFormat(Qt.TextFormat.RichText)
        self._link_label.setOpenExternalLinks(False)
        self._link_label.linkActivated.connect(self._on_open_link)
        status.addPermanentWidget(self._link_label)

    def _connect_signals(self):
        """Connect all signals."""
        # Controls -> Session
        self.controls.operationChanged.connect(self._on_operation_changed)
        self.controls.addRequested.connect(self._on_add_vector)
        self.controls.deleteRequested.connect(self._on_delete_vector)
        self.controls.lockToggled.connect(self._on_toggle_lock)

        # Details panel -> Session
        self.details_panel.fieldEdited.connect(self.session.adjust_active_vector_field)
        self.details_panel.updateRequested.connect(self._on_update_details)
        self.details_panel.closeRequested.connect(self._on_close_details)

        # Session -> UI
        self.session.on_details_changed = self.details_panel.set_details
        self.session.on_selection_changed = self._on_selection_changed
        self.session.on_collection_changed = self._update_controls
        self.session.on_state_changed = self.details_panel.set_state

    # ------------------------------------------------------------------
    # Session listeners
    # ------------------------------------------------------------------

    def _on_selection_changed(self, name: Optional[str]):
        self.details_panel.set_vector(
            name,
            self.session.get_active_vector_details(),
            read_only=self.session.active_is_read_only,
        )
        self.canvas.graph_scene.refresh_all()
        self._update_controls()

    def _update_controls(self):
        self.controls.update_state(
            self.session.operation,
            self.session.can_add,
            self.session.can_delete_active,
            self.session.lock_to_grid,
        )
        self._count_label.setText(f"Vectors: {self.session.vector_count}")

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def _on_operation_changed(self, label: str):
        try:
            operation = Operation.from_label(label)
        except ValueError:
            logger.warning(f"Ignoring unknown operation {label!r}")
            return
        self.session.set_operation(operation)
        self.settings_manager.default_operation = operation.label
        self.statusBar().showMessage(f"Operation: {operation.label}", 2000)

    def _on_add_vector(self):
        vector = self.session.add_vector()
        if vector is None:
            self.statusBar().showMessage("Maximum number of vectors reached", 3000)
            return
        self._update_controls()
        self.statusBar().showMessage(f"Added vector {vector.name}", 2000)

    def _on_delete_vector(self):
        name = self.session.active_name
        if not self.session.delete_active_vector():
            self.statusBar().showMessage("This vector cannot be deleted", 3000)
            return
        self.statusBar().showMessage(f"Deleted vector {name}", 2000)

    def _on_toggle_lock(self):
        locked = self.session.toggle_lock_to_grid()
        self.settings_manager.lock_to_grid = locked
        self._update_controls()
        self.statusBar().showMessage(f"Grid lock {'on' if locked else 'off'}", 2000)

    def _on_update_details(self):
        if not self.session.commit_active_vector():
            self.statusBar().showMessage("Enter numbers for both components to update", 3000)
            return
        self.statusBar().showMessage(f"Updated vector {self.session.active_name}", 2000)

    def _on_close_details(self):
        self.session.clear_selection()

    def _on_fit_contents(self):
        """Fit view to contents."""
        self.canvas.fit_contents()

    def _on_reset_view(self):
        """Reset view to default."""
        self.canvas.reset_view()

    def _on_open_link(self, url: str):
        if not QDesktopServices.openUrl(QUrl(url)):
            logger.warning(f"Could not open {url}")

    def _on_about(self):
        """Show about dialog."""
        QMessageBox.about(
            self,
            "About Vector Math",
            "<h3>Vector Math</h3>"
            "<p>An interactive visualizer for adding and subtracting 2-D vectors.</p>"
            "<p><b>Features:</b></p>"
            "<ul>"
            "<li>Drag vectors and their heads on a grid</li>"
            "<li>Live resultant for addition or subtraction</li>"
            "<li>Edit magnitude, angle and components</li>"
            "</ul>"
        )
