"""
Calculator Controller
=====================
Routes input events from the View to the Model and pushes the resulting
display text back to the View.

Why is this file needed?
------------------------
1. Decoupling: The View only knows how to raise events and render a string;
   the Model only knows calculator rules. This class is the wiring.
2. Translation: Operator glyphs and typed characters are mapped to
   ``Operator`` members here. Unknown input is ignored.

The controller holds no calculator state of its own.
"""
import logging
from typing import Protocol

from deskcalculator.model.operators import Operator
from deskcalculator.model.state import CalculatorModel

logger = logging.getLogger(__name__)


class CalculatorView(Protocol):
    def set_display(self, text: str) -> None: ...


# Keyboard characters that are not digits or operators
DOT_KEYS = frozenset({".", ","})
EQUALS_KEYS = frozenset({"=", "\r", "\n"})
CLEAR_KEYS = frozenset({"c", "C", "\x1b"})


class CalculatorController:
    def __init__(self, model: CalculatorModel, view: CalculatorView) -> None:
        self.model = model
        self.view = view

    # --- SLOTS (View -> Model) ---

    def on_digit(self, digit: str) -> None:
        self.model.append_digit(digit)
        self.refresh()

    def on_dot(self) -> None:
        self.model.append_dot()
        self.refresh()

    def on_operator(self, display_symbol: str) -> None:
        operator = Operator.from_display(display_symbol)
        if operator is None:
            logger.debug(f"Unknown operator symbol {display_symbol!r} ignored")
            return
        self.model.input_operator(operator)
        self.refresh()

    def on_equals(self) -> None:
        self.model.equals()
        self.refresh()

    def on_clear(self) -> None:
        self.model.clear_all()
        self.refresh()

    def on_key(self, text: str) -> None:
        """Simple character dispatch for keyboard input."""
        if len(text) == 1 and text.isascii() and text.isdigit():
            self.on_digit(text)
        elif text in DOT_KEYS:
            self.on_dot()
        elif text in EQUALS_KEYS:
            self.on_equals()
        elif text in CLEAR_KEYS:
            self.on_clear()
        else:
            operator = Operator.from_symbol(text)
            if operator is not None:
                self.on_operator(operator.display)

    # --- Model -> View ---

    def refresh(self) -> None:
        self.view.set_display(self.model.display_text())
