"""
Main Application Window
=======================
The calculator window: a display label on top and the keypad below.

Why is this file needed?
------------------------
1. Layout: It organizes the visual structure of the application.
2. Routing: It re-raises keypad clicks and key presses as its own signals
   and connects them to the controller.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel
from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QKeyEvent

from deskcalculator.config import VISIBLE_APP_NAME
from deskcalculator.view.widgets.keypad import Keypad

if TYPE_CHECKING:
    from deskcalculator.controller.calculator_controller import CalculatorController


class CalculatorWindow(QWidget):
    digit_pressed = Signal(str)
    dot_pressed = Signal()
    operator_pressed = Signal(str)
    equals_pressed = Signal()
    clear_pressed = Signal()
    key_typed = Signal(str)

    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(300, 400)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 10, 10, 10)

        # --- 1. DISPLAY ---
        self.display_label = QLabel("0")
        self.display_label.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        self.display_label.setStyleSheet("font-size: 24px; padding: 10px;")
        layout.addWidget(self.display_label)

        # --- 2. KEYPAD ---
        self.keypad = Keypad(self)
        layout.addWidget(self.keypad, stretch=1)

        # --- SIGNAL CONNECTIONS (keypad -> window) ---
        self.keypad.digit_pressed.connect(self.digit_pressed)
        self.keypad.dot_pressed.connect(self.dot_pressed)
        self.keypad.operator_pressed.connect(self.operator_pressed)
        self.keypad.equals_pressed.connect(self.equals_pressed)
        self.keypad.clear_pressed.connect(self.clear_pressed)

        self.setFocusPolicy(Qt.StrongFocus)

    def bind_controller(self, controller: CalculatorController) -> None:
        """Connect every input event to the controller."""
        self.digit_pressed.connect(controller.on_digit)
        self.dot_pressed.connect(controller.on_dot)
        self.operator_pressed.connect(controller.on_operator)
        self.equals_pressed.connect(controller.on_equals)
        self.clear_pressed.connect(controller.on_clear)
        self.key_typed.connect(controller.on_key)

    # --- Controller -> View ---

    def set_display(self, text: str) -> None:
        self.display_label.setText(text)

    def display_text(self) -> str:
        return self.display_label.text()

    # --- EVENTS ---

    def keyPressEvent(self, event: QKeyEvent) -> None:
        text = event.text()
        if text:
            self.key_typed.emit(text)
            event.accept()
        else:
            super().keyPressEvent(event)
