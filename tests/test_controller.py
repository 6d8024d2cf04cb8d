from unittest.mock import Mock

import pytest

from deskcalculator.controller.calculator_controller import CalculatorController
from deskcalculator.model.operators import Operator
from deskcalculator.model.state import InputMode


@pytest.fixture
def view() -> Mock:
    return Mock()


@pytest.fixture
def controller(model, view) -> CalculatorController:
    return CalculatorController(model, view)


def test_each_event_pushes_display_text(controller, view):
    controller.on_digit("7")
    view.set_display.assert_called_with("7")
    controller.on_operator("+")
    view.set_display.assert_called_with("7")
    controller.on_digit("3")
    view.set_display.assert_called_with("3")
    controller.on_equals()
    view.set_display.assert_called_with("10")
    assert view.set_display.call_count == 4


def test_dot_and_clear(controller, view):
    controller.on_dot()
    view.set_display.assert_called_with("0.")
    controller.on_clear()
    view.set_display.assert_called_with("0")


def test_divide_by_zero_then_clear(controller, view, model):
    for digit in "5":
        controller.on_digit(digit)
    controller.on_operator("÷")
    controller.on_digit("0")
    controller.on_equals()
    view.set_display.assert_called_with("ERROR")

    # Ignored input still refreshes the display
    controller.on_digit("5")
    view.set_display.assert_called_with("ERROR")

    controller.on_clear()
    view.set_display.assert_called_with("0")
    assert model.mode is InputMode.READY


@pytest.mark.parametrize("symbol", ["%", "*", "", "mod"])
def test_unknown_operator_symbol_is_ignored(controller, view, model, symbol):
    controller.on_digit("4")
    view.reset_mock()
    controller.on_operator(symbol)
    view.set_display.assert_not_called()
    assert model.pending_operator is None
    assert model.current_entry == "4"


def test_refresh_pushes_current_text(controller, view):
    controller.refresh()
    view.set_display.assert_called_once_with("0")


def test_keyboard_dispatch(controller, view, model):
    for key in "12*3\r":
        controller.on_key(key)
    view.set_display.assert_called_with("36")

    controller.on_key("\x1b")
    view.set_display.assert_called_with("0")

    for key in "9,5/":
        controller.on_key(key)
    assert model.pending_operator is Operator.DIVIDE
    assert model.accumulator is not None

    controller.on_key("c")
    assert model.display_text() == "0"


def test_keyboard_accepts_glyphs_and_equals_sign(controller, view):
    for key in "8÷2=":
        controller.on_key(key)
    view.set_display.assert_called_with("4")


@pytest.mark.parametrize("key", ["x", " ", "", "%", "\t"])
def test_unmapped_keys_are_ignored(controller, view, key):
    controller.on_key(key)
    view.set_display.assert_not_called()
