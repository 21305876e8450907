"""
Initial Condition
=================
u(x, y, 0) = cos(pi*y / (2*Ly)) * sin(pi*x / Lx)

The field is cold along x = 0 and x = Lx and along y = Ly, and carries one
half sine wave in x that fades towards the top edge.
"""
from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

from heatplate.controller.fd.grid import coordinates

if TYPE_CHECKING:
    import numpy.typing as npt

    from heatplate.model.parameters import SimulationParameters


def initial_temperature(x: float, y: float, Lx: float, Ly: float) -> float:
    """Analytic initial temperature at a single point."""
    return math.cos(math.pi * y / (2 * Ly)) * math.sin(math.pi * x / Lx)


def initial_field(params: SimulationParameters) -> npt.NDArray[np.float64]:
    """
    Fill a fresh (nx, ny) field with the analytic initial condition.

    Args:
        params: Plate extents and spatial steps are used.

    Returns:
        New array; boundary rules are NOT applied yet.
    """
    x, y = coordinates(params)
    cos_y = np.cos(np.pi * y / (2 * params.Ly))
    sin_x = np.sin(np.pi * x / params.Lx)
    # (1, ny) * (nx, 1) -> (nx, ny)
    return cos_y[np.newaxis, :] * sin_x[:, np.newaxis]
