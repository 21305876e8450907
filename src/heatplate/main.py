"""
Application Initialization
==========================
Builds the simulation core, wraps it in the main window and starts the Qt
event loop.

It acts as the "Dependency Injection" root:
1. Sets up logging.
2. Instantiates the Simulation (core) with default parameters.
3. Passes the Simulation into the MainWindow (view).
"""
import logging
import sys

from PySide6.QtWidgets import QApplication

from heatplate.controller.simulation import Simulation
from heatplate.logging_config import setup_logging
from heatplate.view.main_window import VISIBLE_APP_NAME, MainWindow


def main() -> None:
    # Use logging.DEBUG to see degenerate-range notices and per-step details
    setup_logging(level=logging.INFO)

    app = QApplication(sys.argv)
    app.setApplicationName(VISIBLE_APP_NAME)

    simulation = Simulation()

    window = MainWindow(simulation)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
