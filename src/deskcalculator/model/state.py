"""
Calculator State (Input State Machine)
======================================
This module defines the object that owns all calculator state for the running
application.

Why is this file needed?
------------------------
1. State Management: It holds the committed left operand (accumulator), the
   operator waiting for a right operand and the numeral being typed.
2. Input Rules: Every key press is one method call here. The current mode
   decides whether the press is accepted and when arithmetic runs.
3. Decoupling: The Controller writes to this object and reads the display
   text back; the View never touches it.

Classes:
    InputMode: Coarse state gating which inputs are accepted.
    CalculatorModel: The state machine itself.
"""
from __future__ import annotations

import logging
import string
from decimal import Decimal, InvalidOperation
from enum import StrEnum
from typing import Optional

from deskcalculator.config import CalculatorSettings, DEFAULT_SETTINGS, DotPolicy, EqualsPolicy
from deskcalculator.model.errors import (
    CalculatorError, ErrorSink, MalformedNumeralError, log_calculation_error
)
from deskcalculator.model.formatter import count_digits, format_for_display
from deskcalculator.model.operators import Operator

logger = logging.getLogger(__name__)


class InputMode(StrEnum):
    READY = "ready"                      # initial state, or a result is shown
    ENTERING_NUMBER = "entering-number"  # a digit, '.' or leading '-' was typed
    AFTER_OPERATOR = "after-operator"    # an operator was just committed
    ERROR = "error"                      # failed arithmetic; only Clear leaves


INPUT_ALLOWED = frozenset({
    InputMode.READY,
    InputMode.ENTERING_NUMBER,
    InputMode.AFTER_OPERATOR,
})


class CalculatorModel:
    """
    Long-lived state machine, mutated in place by each input event.

    Arithmetic runs only when an operator or "=" is pressed, strictly left to
    right (no precedence). Errors are reported to ``error_sink`` and turn the
    model into ``InputMode.ERROR``; no public method raises.

    Not thread-safe: call it from the UI thread only.
    """

    def __init__(
        self,
        settings: CalculatorSettings = DEFAULT_SETTINGS,
        error_sink: ErrorSink = log_calculation_error,
    ) -> None:
        self.settings = settings
        self._error_sink = error_sink

        self._mode: InputMode = InputMode.READY
        self._accumulator: Optional[Decimal] = None
        self._pending: Optional[Operator] = None
        self._entry: str = ""

    # --- PROPERTIES ---

    @property
    def mode(self) -> InputMode:
        return self._mode

    @property
    def accumulator(self) -> Optional[Decimal]:
        return self._accumulator

    @property
    def pending_operator(self) -> Optional[Operator]:
        return self._pending

    @property
    def current_entry(self) -> str:
        return self._entry

    # --- INPUT EVENTS ---

    def append_digit(self, digit: str) -> None:
        if not self._accepts_input():
            return
        if len(digit) != 1 or digit not in string.digits:
            logger.debug(f"Ignoring non-digit input {digit!r}")
            return
        if count_digits(self._entry) >= self.settings.max_digits:
            return

        # Leading zero suppression: "0" then "5" gives "5"
        if self._entry == "0":
            self._entry = ""
        self._entry += digit
        self._set_mode(InputMode.ENTERING_NUMBER)

    def append_dot(self) -> None:
        if not self._accepts_input():
            return
        if "." in self._entry:
            return
        if count_digits(self._entry) >= self.settings.max_digits:
            return

        if self._entry in ("", "-"):
            if self.settings.dot_policy is DotPolicy.REJECT:
                return
            self._entry += "0."
        else:
            self._entry += "."
        self._set_mode(InputMode.ENTERING_NUMBER)

    def input_operator(self, operator: Operator) -> None:
        if not self._accepts_input():
            return

        # "-" with nothing typed starts a negative number
        if (
            operator is Operator.SUBTRACT
            and not self._entry
            and self._mode in (InputMode.READY, InputMode.AFTER_OPERATOR)
        ):
            self._entry = "-"
            self._set_mode(InputMode.ENTERING_NUMBER)
            return

        # Repeated operator presses just replace the pending one
        if not self._entry:
            self._pending = operator
            self._set_mode(InputMode.AFTER_OPERATOR)
            return

        right = self._parse_entry()
        if right is None:
            return

        if self._accumulator is None:
            self._accumulator = right
        elif self._pending is not None:
            result = self._evaluate(self._pending, self._accumulator, right)
            if result is None:
                return
            self._accumulator = result

        self._entry = ""
        self._pending = operator
        self._set_mode(InputMode.AFTER_OPERATOR)

    def equals(self) -> None:
        if self._mode is InputMode.ERROR:
            return

        if self._pending is None or not self._has_operand():
            # Nothing to compute; keep what is on screen
            self._set_mode(InputMode.READY)
            return

        right = self._parse_entry()
        if right is None:
            return

        left = self._accumulator if self._accumulator is not None else Decimal(0)
        result = self._evaluate(self._pending, left, right)
        if result is None:
            return

        self._accumulator = result
        self._pending = None
        self._entry = ""
        self._set_mode(InputMode.READY)

    def clear_all(self) -> None:
        """Back to the initial state. Always accepted, also from ERROR."""
        self._accumulator = None
        self._pending = None
        self._entry = ""
        self._mode = InputMode.READY
        logger.info("Calculator state has been reset.")

    # --- DISPLAY ---

    def display_text(self) -> str:
        if self._mode is InputMode.ERROR:
            return self.settings.error_label
        if self._entry:
            # Echo the entry exactly as typed
            return self._entry
        if self._accumulator is None:
            return "0"
        return format_for_display(self._accumulator, self.settings.max_digits)

    # --- HELPERS ---

    def _accepts_input(self) -> bool:
        return self._mode in INPUT_ALLOWED

    def _has_operand(self) -> bool:
        if not self._entry:
            return False
        if self._entry == "-" and self.settings.equals_policy is EqualsPolicy.STRICT:
            return False
        return True

    def _set_mode(self, mode: InputMode) -> None:
        if mode is not self._mode:
            logger.debug(f"Mode {self._mode} -> {mode}")
        self._mode = mode

    def _parse_entry(self) -> Optional[Decimal]:
        """Numeric value of the entry; "" and "-" read as zero. None on failure."""
        if self._entry in ("", "-"):
            return Decimal(0)
        try:
            return Decimal(self._entry)
        except InvalidOperation:
            self._fail(MalformedNumeralError(self._entry))
            return None

    def _evaluate(self, operator: Operator, left: Decimal, right: Decimal) -> Optional[Decimal]:
        evaluation = operator.apply(left, right)
        if not evaluation.ok:
            self._fail(evaluation.error)
            return None
        logger.debug(f"{left} {operator.symbol} {right} = {evaluation.value}")
        return evaluation.value

    def _fail(self, error: CalculatorError) -> None:
        self._error_sink(error)
        self._set_mode(InputMode.ERROR)
