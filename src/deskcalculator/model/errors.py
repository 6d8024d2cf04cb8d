"""
Calculation Errors
==================
Exception types for the arithmetic failures the calculator can hit, plus the
default diagnostic sink that reports them.

The state machine catches these at the point of evaluation, hands them to a
sink and switches to the error mode. Nothing here changes calculator state.
"""
import logging
from typing import Callable

logger = logging.getLogger(__name__)


class CalculatorError(ArithmeticError):
    """Base class for failures while evaluating an operation."""


class DivisionByZeroError(CalculatorError):
    def __init__(self) -> None:
        super().__init__("Divide by zero")


class MalformedNumeralError(CalculatorError):
    def __init__(self, text: str) -> None:
        super().__init__(f"Malformed numeral: '{text}'")
        self.text = text


class ArithmeticOverflowError(CalculatorError):
    """The bounded decimal context could not represent the result."""


# Signature of a diagnostic sink
ErrorSink = Callable[[CalculatorError], None]


def log_calculation_error(error: CalculatorError) -> None:
    """Default sink: write the failure to the log."""
    logger.warning(f"[Calculator Error] {type(error).__name__}: {error}")
