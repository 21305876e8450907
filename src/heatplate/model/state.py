"""
Simulation State (Data Model)
=============================
Mutable state of one run. Owned and mutated only by the driver
(`heatplate.controller.simulation.Simulation`) between steps.

Classes:
    SimulationState: Current field, elapsed time and run flag.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass
class SimulationState:
    # Temperature field, shape (nx, ny); replaced (swapped) every step
    u: npt.NDArray[np.float64] = field(default_factory=lambda: np.zeros((0, 0), dtype=np.float64))

    # Elapsed simulated time, wraps to 0 at total_time
    time: float = 0.0

    is_running: bool = False

    # Steps taken since the last reset/wrap
    step_count: int = 0

    @property
    def shape(self) -> tuple[int, int]:
        return self.u.shape  # type: ignore[return-value]

    def rewind(self) -> None:
        """Reset the clock without touching the field."""
        self.time = 0.0
        self.step_count = 0
