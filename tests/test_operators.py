from decimal import Decimal

import pytest

from deskcalculator.model.errors import ArithmeticOverflowError, DivisionByZeroError
from deskcalculator.model.operators import Operator


@pytest.mark.parametrize("operator, left, right, expected", [
    (Operator.ADD, "7", "3", "10"),
    (Operator.SUBTRACT, "2.5", "4", "-1.5"),
    (Operator.MULTIPLY, "12345678", "87654321", "1082152022374638"),
    (Operator.MULTIPLY, "-0.5", "0.5", "-0.25"),
    (Operator.DIVIDE, "10", "4", "2.5"),
])
def test_basic_arithmetic(operator, left, right, expected):
    evaluation = operator.apply(Decimal(left), Decimal(right))
    assert evaluation.ok
    assert evaluation.value == Decimal(expected)


def test_divide_keeps_ten_fractional_digits_rounding_half_up():
    assert Operator.DIVIDE.apply(Decimal(1), Decimal(3)).value == Decimal("0.3333333333")
    assert Operator.DIVIDE.apply(Decimal(2), Decimal(3)).value == Decimal("0.6666666667")
    assert Operator.DIVIDE.apply(Decimal(-2), Decimal(3)).value == Decimal("-0.6666666667")
    # Exact tie at the 11th digit rounds away from zero
    assert Operator.DIVIDE.apply(Decimal("0.00000000005"), Decimal(1)).value == Decimal("0.0000000001")
    assert Operator.DIVIDE.apply(Decimal("-0.00000000005"), Decimal(1)).value == Decimal("-0.0000000001")


def test_divide_result_has_fixed_scale():
    value = Operator.DIVIDE.apply(Decimal(10), Decimal(4)).value
    assert value.as_tuple().exponent == -10


@pytest.mark.parametrize("zero", ["0", "0.0", "-0"])
def test_divide_by_zero_is_reported_not_raised(zero):
    evaluation = Operator.DIVIDE.apply(Decimal(5), Decimal(zero))
    assert not evaluation.ok
    assert evaluation.value is None
    assert isinstance(evaluation.error, DivisionByZeroError)


def test_sixteen_digit_context_rounds_half_even():
    evaluation = Operator.ADD.apply(Decimal("1234567890123456"), Decimal("0.5"))
    assert evaluation.value == Decimal("1234567890123456")


def test_overflow_is_reported_as_error():
    evaluation = Operator.MULTIPLY.apply(Decimal("1E+384"), Decimal(10))
    assert not evaluation.ok
    assert isinstance(evaluation.error, ArithmeticOverflowError)


def test_lookup_by_display_glyph():
    assert Operator.from_display("+") is Operator.ADD
    assert Operator.from_display("-") is Operator.SUBTRACT
    assert Operator.from_display("×") is Operator.MULTIPLY
    assert Operator.from_display("÷") is Operator.DIVIDE


@pytest.mark.parametrize("unknown", ["*", "/", "%", "", "plus"])
def test_unknown_display_glyph_returns_none(unknown):
    assert Operator.from_display(unknown) is None


def test_lookup_by_symbol_accepts_ascii_and_glyphs():
    assert Operator.from_symbol("*") is Operator.MULTIPLY
    assert Operator.from_symbol("/") is Operator.DIVIDE
    assert Operator.from_symbol("÷") is Operator.DIVIDE
    assert Operator.from_symbol("^") is None


@pytest.mark.parametrize("left, right", [
    ("1E+384", "0.1"),
    ("1E+380", "0.0000001"),
    ("-9E+384", "0.1"),
    ("1E+1000", "1"),
])
def test_divide_beyond_exponent_range_is_reported_as_error(left, right):
    evaluation = Operator.DIVIDE.apply(Decimal(left), Decimal(right))
    assert not evaluation.ok
    assert isinstance(evaluation.error, ArithmeticOverflowError)


def test_divide_at_exponent_limit_is_accepted():
    evaluation = Operator.DIVIDE.apply(Decimal("1E+384"), Decimal(1))
    assert evaluation.ok
    assert evaluation.value == Decimal("1E+384")
