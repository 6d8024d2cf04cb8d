"""
Configuration & Global Constants
================================
This module serves as the central registry for calculator constants and the
input behaviour settings.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (digit limits, decimal precision,
   the error label) being scattered throughout the model.
2. Choice points: Two input behaviours differ between calculator designs
   (pressing "." on an empty entry, and "=" on a lone "-" entry). They are
   selected here instead of being hardcoded in the state machine.

Exports:
    MAX_DIGITS (int): Digit characters allowed in one entry.
    ERROR_LABEL (str): Text shown while the calculator is in error.
    CalculatorSettings: Immutable bundle passed to the model.
"""
from dataclasses import dataclass
from enum import StrEnum


# Application identity (used by the Qt bootstrap)
ORG_ID = "deskcalculator"
APP_ID = "deskcalculator"
VISIBLE_APP_NAME = "Calculator"

# Global Constants
MAX_DIGITS: int = 8
ERROR_LABEL: str = "ERROR"

# Divide keeps this many fractional digits (round half up)
DIVISION_SCALE: int = 10

# Add / Subtract / Multiply context (64-bit decimal)
ARITHMETIC_PRECISION: int = 16
ARITHMETIC_EMIN: int = -383
ARITHMETIC_EMAX: int = 384


class DotPolicy(StrEnum):
    """What "." does when no number is being typed."""
    START_ZERO = "start-zero"  # entry becomes "0."
    REJECT = "reject"          # ignored


class EqualsPolicy(StrEnum):
    """Whether "=" computes when the entry is a lone minus sign."""
    STRICT = "strict"    # "-" counts as no operand
    LENIENT = "lenient"  # "-" is read as zero


@dataclass(frozen=True)
class CalculatorSettings:
    max_digits: int = MAX_DIGITS
    dot_policy: DotPolicy = DotPolicy.START_ZERO
    equals_policy: EqualsPolicy = EqualsPolicy.STRICT
    error_label: str = ERROR_LABEL


DEFAULT_SETTINGS = CalculatorSettings()
