"""
Application Initialization
==========================
This module constructs the MVC (Model-View-Controller) architecture and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the calculator state machine (Model).
2. Instantiates the calculator window (View).
3. Wires both through the Controller, which the View notifies on every key.
4. Prevents circular import errors by being the orchestrator.
"""
import logging
import sys
from typing import Optional

from deskcalculator.app.application import create_app
from deskcalculator.controller.calculator_controller import CalculatorController
from deskcalculator.logging_config import setup_logging
from deskcalculator.model.state import CalculatorModel
from deskcalculator.view.main_window import CalculatorWindow

logger = logging.getLogger(__name__)


def main(log_file: Optional[str] = None) -> None:
    # 1. Setup Logging (Console + Optional File)
    # Use logging.DEBUG to trace every mode transition
    setup_logging(level=logging.INFO, log_file=log_file)

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the Model
    model = CalculatorModel()

    # 4. Initialize the Window and connect it to the Controller
    window = CalculatorWindow()
    controller = CalculatorController(model, window)
    window.bind_controller(controller)
    controller.refresh()
    window.show()

    # 5. Start Event Loop
    logger.info("Calculator started.")
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
