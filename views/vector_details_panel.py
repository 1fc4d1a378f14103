"""
Details panel for the active vector.

Shows magnitude, direction and components of the selected vector and
lets the user edit them. Edits are applied to the graph only when the
Update button is pressed.
"""

from typing import Optional

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel,
    QPushButton, QLineEdit, QFormLayout
)

from models import DetailState, VectorDetails, VectorField


class SectionHeader(QLabel):
    """Styled section header."""

    def __init__(self, text: str, parent=None):
        super().__init__(text, parent)
        font = QFont("SF Pro Display", 11)
        font.setWeight(QFont.Weight.DemiBold)
        self.setFont(font)
        self.setStyleSheet("""
            QLabel {
                color: #374151;
                padding: 2px 0 4px 0;
                border-bottom: 1px solid #E5E7EB;
                margin-top: 8px;
            }
        """)


def input_style() -> str:
    """Common input widget styling."""
    return """
        QLineEdit {
            border: 1px solid #D1D5DB;
            border-radius: 6px;
            padding: 2px 4px;
            background: white;
            color: #374151;
            min-height: 20px;
        }
        QLineEdit:focus {
            border-color: #3B82F6;
            outline: none;
        }
        QLineEdit:read-only {
            background: #F9FAFB;
            color: #6B7280;
        }
    """


def _field_label(name: str, subscript: str = "") -> QLabel:
    """Rich-text label such as |a|, θ or a<sub>x</sub>."""
    text = f"{name}<sub>{subscript}</sub>" if subscript else name
    label = QLabel(text)
    label.setTextFormat(Qt.TextFormat.RichText)
    label.setStyleSheet("color: #374151; font-size: 13px;")
    return label


class VectorDetailsPanel(QWidget):
    """
    Magnitude / angle / component editor.

    The field the user is typing in is never overwritten while the
    session recomputes the others.
    """

    fieldEdited = pyqtSignal(str, str)  # (VectorField value, raw text)
    updateRequested = pyqtSignal()
    closeRequested = pyqtSignal()

    def __init__(self, precision: int = 2, parent=None):
        super().__init__(parent)
        self.precision = precision
        self._name: Optional[str] = None
        self._read_only = False
        self._details: Optional[VectorDetails] = None
        self._editing_field: Optional[VectorField] = None
        self._edits: dict[VectorField, QLineEdit] = {}
        self._labels: dict[VectorField, QLabel] = {}
        self._setup_ui()
        self.set_vector(None, None)

    def _setup_ui(self):
        self.setMinimumWidth(240)
        self.setMaximumWidth(320)
        self.setStyleSheet(input_style())

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(8)

        # Title
        self._title = QLabel("Vector Details")
        title_font = QFont("SF Pro Display", 14)
        title_font.setWeight(QFont.Weight.Bold)
        self._title.setFont(title_font)
        self._title.setStyleSheet("color: #111827;")
        layout.addWidget(self._title)

        layout.addWidget(SectionHeader("Polar"))
        polar_form = QFormLayout()
        polar_form.setSpacing(6)
        layout.addLayout(polar_form)

        layout.addWidget(SectionHeader("Components"))
        comp_form = QFormLayout()
        comp_form.setSpacing(6)
        layout.addLayout(comp_form)

        for which, form in (
            (VectorField.MAGNITUDE, polar_form),
            (VectorField.ANGLE, polar_form),
            (VectorField.X_COMPONENT, comp_form),
            (VectorField.Y_COMPONENT, comp_form),
        ):
            label = _field_label("")
            edit = QLineEdit()
            edit.textEdited.connect(lambda text, w=which: self._on_text_edited(w, text))
            edit.returnPressed.connect(self.updateRequested)
            form.addRow(label, edit)
            self._labels[which] = label
            self._edits[which] = edit

        # Buttons
        btn_layout = QHBoxLayout()
        self.update_btn = QPushButton("Update")
        self.update_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self.update_btn.setStyleSheet("""
            QPushButton {
                background: #3B82F6;
                color: white;
                border: none;
                border-radius: 6px;
                padding: 6px 16px;
                font-weight: 600;
            }
            QPushButton:hover { background: #2563EB; }
            QPushButton:disabled { background: #BFDBFE; }
        """)
        self.update_btn.clicked.connect(self.updateRequested)
        btn_layout.addWidget(self.update_btn)

        self.close_btn = QPushButton("Close")
        self.close_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self.close_btn.setStyleSheet("""
            QPushButton {
                background: white;
                color: #374151;
                border: 1px solid #D1D5DB;
                border-radius: 6px;
                padding: 6px 16px;
            }
            QPushButton:hover { background: #F3F4F6; }
        """)
        self.close_btn.clicked.connect(self.closeRequested)
        btn_layout.addWidget(self.close_btn)
        layout.addLayout(btn_layout)

        self._state_label = QLabel()
        self._state_label.setStyleSheet("color: #9CA3AF; font-size: 11px;")
        layout.addWidget(self._state_label)

        layout.addStretch()

    def set_vector(self, name: Optional[str], details: Optional[VectorDetails],
                   read_only: bool = False):
        """Show a vector, or hide the panel with name None."""
        self._name = name
        self._read_only = read_only
        self._editing_field = None

        if name is None:
            self.hide()
            return

        self._title.setText(f"Vector {name}" + (" (resultant)" if read_only else ""))
        self._labels[VectorField.MAGNITUDE].setText(f"|{name}|")
        self._labels[VectorField.ANGLE].setText(f"θ<sub>{name}</sub>")
        self._labels[VectorField.X_COMPONENT].setText(f"{name}<sub>x</sub>")
        self._labels[VectorField.Y_COMPONENT].setText(f"{name}<sub>y</sub>")

        for edit in self._edits.values():
            edit.setReadOnly(read_only)
        self.update_btn.setEnabled(not read_only)

        self.set_details(details)
        self.show()

    def set_details(self, details: Optional[VectorDetails]):
        """Refresh field text, leaving the field being typed in alone."""
        self._details = details
        if details is None:
            for edit in self._edits.values():
                edit.clear()
            return

        for which, edit in self._edits.items():
            if which == self._editing_field:
                continue
            edit.setText(details.get(which).display(self.precision))

    def set_state(self, state: DetailState):
        if state != DetailState.EDITING and self._editing_field is not None:
            self._editing_field = None
            self.set_details(self._details)
        self._state_label.setText("Unsaved changes" if state == DetailState.EDITING else "")

    def _on_text_edited(self, which: VectorField, text: str):
        if self._read_only:
            return
        self._editing_field = which
        self.fieldEdited.emit(which.value, text)
