"""
Boundary Conditions
===================
Overwrites the edge values of a field after initialization and after every
stencil step.

Rules, applied in this fixed order:
    1. Bottom (j = 0), Dirichlet:   u[i, 0]    = sin(pi*x/Lx)
    2. Left   (i = 0), Neumann:     u[0, j]    = u[1, j] - fL*dx
    3. Right  (i = nx-1), Neumann:  u[nx-1, j] = u[nx-2, j] + fR*dx
    4. Top    (j = ny-1), Neumann:  u[i, ny-1] = u[i, ny-2] + fT*dy

Later rules overwrite corners written by earlier ones. The left/right rules
read the already patched bottom row, and the top rule runs last so both top
corners follow it. Do not reorder.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from heatplate.controller.fd.grid import coordinates

if TYPE_CHECKING:
    import numpy.typing as npt

    from heatplate.model.parameters import SimulationParameters


def bottom_dirichlet_values(params: SimulationParameters) -> npt.NDArray[np.float64]:
    """sin(pi*x/Lx) for every node of the bottom edge."""
    x, _ = coordinates(params)
    return np.sin(np.pi * x / params.Lx)


def apply_boundary_conditions(
    u: npt.NDArray[np.float64],
    params: SimulationParameters,
) -> npt.NDArray[np.float64]:
    """
    Enforce the four edge rules on `u` in place.

    Args:
        u: Field of shape (nx, ny) with nx, ny >= 2.
        params: Provides Lx, dx, dy and the gradients fL, fR, fT.

    Returns:
        The same array, for chaining.
    """
    nx, ny = u.shape

    # 1. Bottom
    u[:, 0] = bottom_dirichlet_values(params)

    # 2. Left
    u[0, :] = u[1, :] - params.fL * params.dx

    # 3. Right
    u[nx - 1, :] = u[nx - 2, :] + params.fR * params.dx

    # 4. Top
    u[:, ny - 1] = u[:, ny - 2] + params.fT * params.dy

    return u
