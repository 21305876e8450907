"""
Parameters Panel
================
Form for plate dimensions, boundary gradients and numerical settings.
Emits the edited SimulationParameters when the user applies changes.
"""
from __future__ import annotations

from typing import Dict, Optional

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QDoubleSpinBox, QFormLayout, QGroupBox, QPushButton, QVBoxLayout, QWidget
)

from heatplate.config import PARAMETER_RANGES
from heatplate.model.parameters import SimulationParameters

# (group title, [(field, label), ...])
_GROUPS = [
    ("Plate Dimensions", [("Lx", "Length Lx"), ("Ly", "Width Ly")]),
    ("Boundary Gradients", [("fL", "Left (fL)"), ("fR", "Right (fR)"), ("fT", "Top (fT)")]),
    ("Simulation Settings", [
        ("alpha", "Thermal diffusivity (α)"),
        ("dt", "Time step (dt)"),
        ("total_time", "Total time"),
    ]),
    ("Grid Resolution", [("dx", "Grid spacing (dx)"), ("dy", "Grid spacing (dy)")]),
]


class ParametersPanel(QWidget):
    apply_requested = Signal(object)  # SimulationParameters (unvalidated)

    def __init__(self, params: SimulationParameters, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.inputs: Dict[str, QDoubleSpinBox] = {}

        layout = QVBoxLayout(self)

        for title, fields in _GROUPS:
            box = QGroupBox(title)
            form = QFormLayout(box)
            for name, label in fields:
                minimum, maximum, step, decimals = PARAMETER_RANGES[name]
                sp = QDoubleSpinBox()
                sp.setDecimals(decimals)
                sp.setRange(minimum, maximum)
                sp.setSingleStep(step)
                form.addRow(label, sp)
                self.inputs[name] = sp
            layout.addWidget(box)

        self.btn_apply = QPushButton("Apply Changes && Reset")
        self.btn_apply.clicked.connect(self._on_apply)
        layout.addWidget(self.btn_apply)
        layout.addStretch()

        self.set_params(params)

    def set_params(self, params: SimulationParameters) -> None:
        for name, sp in self.inputs.items():
            sp.blockSignals(True)
            sp.setValue(float(getattr(params, name)))
            sp.blockSignals(False)

    def current_params(self) -> SimulationParameters:
        return SimulationParameters(**{name: float(sp.value()) for name, sp in self.inputs.items()})

    def _on_apply(self) -> None:
        self.apply_requested.emit(self.current_params())
