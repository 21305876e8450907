"""
Main Application Window
=======================
Hosts the heat map, the run controls and the parameters panel, and drives
the simulation from a frame timer.

Why is this file needed?
------------------------
1. Scheduling: A QTimer calls `Simulation.tick()` once per frame while the
   run is active; the core itself never schedules anything.
2. Routing: Button clicks and panel edits are forwarded to the driver.
"""
import logging

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import (
    QHBoxLayout, QLabel, QMainWindow, QMessageBox, QPushButton, QVBoxLayout, QWidget
)

from heatplate.config import FRAME_INTERVAL_MS
from heatplate.controller.simulation import Simulation
from heatplate.model.errors import ConfigurationError, StabilityWarning
from heatplate.model.parameters import SimulationParameters
from heatplate.view.renderer import render
from heatplate.view.widgets.heatmap_widget import HeatMapWidget
from heatplate.view.widgets.parameters_panel import ParametersPanel

logger = logging.getLogger(__name__)

VISIBLE_APP_NAME = "2D Heat Equation Solver"


class MainWindow(QMainWindow):
    def __init__(self, simulation: Simulation) -> None:
        super().__init__()
        self.simulation = simulation
        self.setWindowTitle(VISIBLE_APP_NAME)

        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        main_layout = QHBoxLayout(main_widget)

        # --- LEFT: Heat map + controls ---
        left = QWidget()
        left_layout = QVBoxLayout(left)

        self.time_label = QLabel()
        left_layout.addWidget(self.time_label)

        self.heatmap = HeatMapWidget()
        left_layout.addWidget(self.heatmap)

        buttons = QHBoxLayout()
        self.btn_run = QPushButton("Start")
        self.btn_run.setMinimumWidth(96)
        self.btn_run.clicked.connect(self.on_toggle_run)
        buttons.addWidget(self.btn_run)

        self.btn_reset = QPushButton("Reset")
        self.btn_reset.clicked.connect(self.on_reset)
        buttons.addWidget(self.btn_reset)

        self.status_label = QLabel("")
        buttons.addWidget(self.status_label)
        buttons.addStretch()
        left_layout.addLayout(buttons)

        main_layout.addWidget(left, stretch=3)

        # --- RIGHT: Parameters ---
        self.panel = ParametersPanel(self.simulation.params)
        self.panel.apply_requested.connect(self.on_apply_params)
        main_layout.addWidget(self.panel, stretch=1)

        # --- Simulation signals ---
        self.simulation.on_stability_warning(self._on_stability_warning)
        self.simulation.on_run_complete(self._on_run_complete)

        # --- Frame timer ---
        self.timer = QTimer(self)
        self.timer.setInterval(FRAME_INTERVAL_MS)
        self.timer.timeout.connect(self.on_frame)

        self.redraw()

    # --- Slots ---

    def on_frame(self) -> None:
        if self.simulation.tick():
            self.redraw()
        if not self.simulation.is_running:
            self.timer.stop()
            self.btn_run.setText("Start")

    def on_toggle_run(self) -> None:
        if self.simulation.toggle():
            self.status_label.setText("")
            self.btn_run.setText("Pause")
            self.timer.start()
        else:
            self.btn_run.setText("Start")
            self.timer.stop()

    def on_reset(self) -> None:
        self.timer.stop()
        self.simulation.reset()
        self.btn_run.setText("Start")
        self.status_label.setText("")
        self.redraw()

    def on_apply_params(self, params: SimulationParameters) -> None:
        try:
            params.validate()
        except ConfigurationError as e:
            logger.error(f"Rejected parameters: {e}")
            QMessageBox.warning(self, "Invalid parameters", str(e))
            self.panel.set_params(self.simulation.params)
            return

        self.simulation.set_params(params)
        self.on_reset()

    def redraw(self) -> None:
        p = self.simulation.params
        self.time_label.setText(f"Time: {self.simulation.time:.3f}s / {p.total_time:g}s")
        self.heatmap.show_frame(
            render(self.simulation.field, self.heatmap.canvas_width, self.heatmap.canvas_height)
        )

    # --- Simulation callbacks ---

    def _on_stability_warning(self, warning: StabilityWarning) -> None:
        self.status_label.setText(f"Unstable: rx + ry = {warning.number:.3g}")

    def _on_run_complete(self, steps: int) -> None:
        self.status_label.setText(f"Finished ({steps} steps)")
