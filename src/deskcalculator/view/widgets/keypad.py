"""
Keypad Widget
"""
from PySide6.QtWidgets import QWidget, QGridLayout, QPushButton, QSizePolicy
from PySide6.QtCore import Signal

from deskcalculator.model.operators import Operator

# Row-major layout, 4 columns
BUTTON_LABELS: list[str] = [
    "7", "8", "9", "÷",
    "4", "5", "6", "×",
    "1", "2", "3", "-",
    "0", ".", "=", "+",
    "C",
]
COLUMNS = 4

OPERATOR_LABELS = frozenset(op.display for op in Operator)


class Keypad(QWidget):
    # One signal per event kind
    digit_pressed = Signal(str)
    dot_pressed = Signal()
    operator_pressed = Signal(str)
    equals_pressed = Signal()
    clear_pressed = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.buttons: dict[str, QPushButton] = {}

        grid = QGridLayout(self)
        grid.setSpacing(5)

        for index, label in enumerate(BUTTON_LABELS):
            btn = QPushButton(label)
            btn.setMinimumHeight(48)
            btn.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
            btn.setStyleSheet("font-size: 18px;")
            # Bind the label now; 'checked' is the argument clicked() passes
            btn.clicked.connect(lambda checked=False, text=label: self._on_button(text))
            grid.addWidget(btn, index // COLUMNS, index % COLUMNS)
            self.buttons[label] = btn

    # --- SLOTS ---

    def _on_button(self, label: str) -> None:
        if label.isdigit():
            self.digit_pressed.emit(label)
        elif label == ".":
            self.dot_pressed.emit()
        elif label == "=":
            self.equals_pressed.emit()
        elif label == "C":
            self.clear_pressed.emit()
        elif label in OPERATOR_LABELS:
            self.operator_pressed.emit(label)
