"""
Control bar for the vector graph.

Operation selector, add/delete buttons and the grid lock toggle.
"""

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel,
    QPushButton, QComboBox
)

from models import Operation


BUTTON_STYLE = """
    QPushButton {
        background: white;
        border: 2px solid #E5E7EB;
        border-radius: 8px;
        padding: 6px 14px;
        color: #374151;
        font-size: 13px;
        font-weight: 600;
    }
    QPushButton:hover {
        border-color: #3B82F6;
        background: #F9FAFB;
    }
    QPushButton:pressed {
        background: #F3F4F6;
    }
    QPushButton:disabled {
        color: #D1D5DB;
        border-color: #F3F4F6;
    }
    QPushButton:checked {
        background: #DBEAFE;
        border-color: #3B82F6;
        color: #1E40AF;
    }
"""


class VectorControls(QWidget):
    """
    Buttons and selector driving the vector session.

    The widget only emits intent; the main window forwards it to the
    session and calls update_state() afterwards.
    """

    operationChanged = pyqtSignal(str)
    addRequested = pyqtSignal()
    deleteRequested = pyqtSignal()
    lockToggled = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._setup_ui()

    def _setup_ui(self):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(16, 12, 16, 12)
        layout.setSpacing(12)

        # Operation selector
        op_layout = QVBoxLayout()
        op_layout.setSpacing(2)
        op_label = QLabel("Operation")
        op_label.setStyleSheet("color: #6B7280; font-size: 11px;")
        op_layout.addWidget(op_label)

        self.operation_combo = QComboBox()
        for op in Operation:
            self.operation_combo.addItem(op.label)
        self.operation_combo.setMinimumWidth(130)
        self.operation_combo.currentTextChanged.connect(self.operationChanged)
        op_layout.addWidget(self.operation_combo)
        layout.addLayout(op_layout)

        self.add_btn = QPushButton("Add Vector")
        self.add_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self.add_btn.setStyleSheet(BUTTON_STYLE)
        self.add_btn.clicked.connect(self.addRequested)
        layout.addWidget(self.add_btn)

        self.delete_btn = QPushButton("Delete Vector")
        self.delete_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self.delete_btn.setStyleSheet(BUTTON_STYLE)
        self.delete_btn.clicked.connect(self.deleteRequested)
        layout.addWidget(self.delete_btn)

        self.lock_btn = QPushButton("Toggle Grid Lock")
        self.lock_btn.setCheckable(True)
        self.lock_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self.lock_btn.setStyleSheet(BUTTON_STYLE)
        self.lock_btn.clicked.connect(self.lockToggled)
        layout.addWidget(self.lock_btn)

        layout.addStretch()

        self.lock_status = QLabel()
        font = QFont("SF Pro Display", 11)
        self.lock_status.setFont(font)
        self.lock_status.setStyleSheet("color: #6B7280;")
        layout.addWidget(self.lock_status)

    def update_state(self, operation: Operation, can_add: bool,
                     can_delete: bool, lock_to_grid: bool):
        """Sync widgets with the session without re-emitting signals."""
        self.operation_combo.blockSignals(True)
        self.operation_combo.setCurrentText(operation.label)
        self.operation_combo.blockSignals(False)

        self.add_btn.setEnabled(can_add)
        self.add_btn.setToolTip("" if can_add else "Maximum number of vectors reached")

        self.delete_btn.setEnabled(can_delete)
        self.delete_btn.setToolTip(
            "" if can_delete else "Select an operand; at least two must remain"
        )

        self.lock_btn.setChecked(lock_to_grid)
        self.lock_status.setText(f"Grid lock: {'on' if lock_to_grid else 'off'}")
