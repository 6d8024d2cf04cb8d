"""
Operator Table
==============
Maps the four calculator keys to binary arithmetic over ``decimal.Decimal``.

Add, Subtract and Multiply run in a bounded 16-digit context. Divide keeps a
fixed number of fractional digits and rounds half up. ``Operator.apply``
never raises; it returns an ``Evaluation`` holding either the value or the
error.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import (
    Context, Decimal, DecimalException, DivisionByZero, InvalidOperation, Overflow, ROUND_HALF_EVEN
)
from enum import Enum
from fractions import Fraction
from typing import Callable, Optional

from deskcalculator.config import (
    ARITHMETIC_EMAX, ARITHMETIC_EMIN, ARITHMETIC_PRECISION, DIVISION_SCALE
)
from deskcalculator.model.errors import (
    ArithmeticOverflowError, CalculatorError, DivisionByZeroError
)

BinaryFunction = Callable[[Decimal, Decimal], Decimal]

ARITHMETIC_CONTEXT = Context(
    prec=ARITHMETIC_PRECISION,
    rounding=ROUND_HALF_EVEN,
    Emin=ARITHMETIC_EMIN,
    Emax=ARITHMETIC_EMAX,
    traps=[InvalidOperation, DivisionByZero, Overflow],
)


def _add(left: Decimal, right: Decimal) -> Decimal:
    return ARITHMETIC_CONTEXT.add(left, right)


def _subtract(left: Decimal, right: Decimal) -> Decimal:
    return ARITHMETIC_CONTEXT.subtract(left, right)


def _multiply(left: Decimal, right: Decimal) -> Decimal:
    return ARITHMETIC_CONTEXT.multiply(left, right)


def _divide(left: Decimal, right: Decimal) -> Decimal:
    """Quotient with DIVISION_SCALE fractional digits, ties away from zero."""
    if right.is_zero():
        raise DivisionByZeroError()

    # The quotient's exponent is at least this; bail out before exact math
    if not left.is_zero() and left.adjusted() - right.adjusted() - 1 > ARITHMETIC_EMAX:
        raise ArithmeticOverflowError(f"/: quotient exceeds 1E+{ARITHMETIC_EMAX}")

    # Exact rational quotient, so the only rounding is the final one
    scaled = Fraction(left) / Fraction(right) * 10 ** DIVISION_SCALE
    magnitude = (2 * abs(scaled.numerator) + scaled.denominator) // (2 * scaled.denominator)
    sign = "-" if scaled < 0 else ""
    quotient = Decimal(f"{sign}{magnitude}E-{DIVISION_SCALE}")

    if not quotient.is_zero() and quotient.adjusted() > ARITHMETIC_EMAX:
        raise ArithmeticOverflowError(f"/: quotient exceeds 1E+{ARITHMETIC_EMAX}")
    return quotient


@dataclass(frozen=True)
class Evaluation:
    """Outcome of applying an operator: a value or an error, never both."""
    value: Optional[Decimal] = None
    error: Optional[CalculatorError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Decimal) -> Evaluation:
        return cls(value=value)

    @classmethod
    def failure(cls, error: CalculatorError) -> Evaluation:
        return cls(error=error)


class Operator(Enum):
    """The four binary operators. Value: (display glyph, ASCII symbol, function)."""
    ADD = ("+", "+", _add)
    SUBTRACT = ("-", "-", _subtract)
    MULTIPLY = ("×", "*", _multiply)
    DIVIDE = ("÷", "/", _divide)

    def __init__(self, display: str, symbol: str, action: BinaryFunction) -> None:
        self.display = display
        self.symbol = symbol
        self._action = action

    def apply(self, left: Decimal, right: Decimal) -> Evaluation:
        try:
            return Evaluation.success(self._action(left, right))
        except CalculatorError as e:
            return Evaluation.failure(e)
        except DecimalException as e:
            return Evaluation.failure(ArithmeticOverflowError(f"{self.symbol}: {type(e).__name__}"))

    @classmethod
    def from_display(cls, display: str) -> Optional[Operator]:
        """Operator for a keypad glyph, or None when the glyph is unknown."""
        return _DISPLAY_MAP.get(display)

    @classmethod
    def from_symbol(cls, symbol: str) -> Optional[Operator]:
        """Operator for a typed character (ASCII symbol or glyph)."""
        return _SYMBOL_MAP.get(symbol)


# --- Lookup tables (immutable after import) ---
_DISPLAY_MAP: dict[str, Operator] = {op.display: op for op in Operator}
_SYMBOL_MAP: dict[str, Operator] = {**_DISPLAY_MAP, **{op.symbol: op for op in Operator}}
