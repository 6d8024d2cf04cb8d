import os

# Widgets are created without a display server
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from typing import Callable, Iterable

import pytest

from deskcalculator.config import CalculatorSettings
from deskcalculator.model.operators import Operator
from deskcalculator.model.state import CalculatorModel


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def errors() -> list:
    """Collects everything passed to the model's error sink."""
    return []


@pytest.fixture
def make_model(errors) -> Callable[..., CalculatorModel]:
    def _make(**settings) -> CalculatorModel:
        return CalculatorModel(CalculatorSettings(**settings), error_sink=errors.append)
    return _make


@pytest.fixture
def model(make_model) -> CalculatorModel:
    return make_model()


@pytest.fixture
def press() -> Callable[[CalculatorModel, Iterable[str]], str]:
    """Feed keypad labels to a model, return the display text afterwards."""
    def _press(model: CalculatorModel, keys: Iterable[str]) -> str:
        for key in keys:
            if key.isdigit():
                model.append_digit(key)
            elif key == ".":
                model.append_dot()
            elif key == "=":
                model.equals()
            elif key == "C":
                model.clear_all()
            else:
                model.input_operator(Operator.from_display(key))
        return model.display_text()
    return _press
