"""
Stencil Solver
==============
One explicit Euler (FTCS) step of the 5-point Laplacian:

    u'[i,j] = u[i,j] + rx*(u[i+1,j] - 2u[i,j] + u[i-1,j])
                     + ry*(u[i,j+1] - 2u[i,j] + u[i,j-1])

with rx = alpha*dt/dx**2 and ry = alpha*dt/dy**2. Only interior cells are
updated; boundary cells are copied and left to the boundary rules.

The scheme is stable for rx + ry <= 0.5. A step above the bound still runs
and reports a StabilityWarning on its result.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

import numba as nb
import numpy as np

from heatplate.config import STABILITY_LIMIT
from heatplate.model.errors import StabilityWarning

if TYPE_CHECKING:
    import numpy.typing as npt

    from heatplate.model.parameters import SimulationParameters

logger = logging.getLogger(__name__)


# No fastmath: the update must keep IEEE evaluation order
@nb.njit(cache=True)
def _ftcs_step(
    u: npt.NDArray[np.float64],
    out: npt.NDArray[np.float64],
    rx: float,
    ry: float,
) -> None:
    """
    One explicit Euler step of the 5-point Laplacian stencil.

    Boundary cells are copied from `u`, interior cells are updated.
    `out` must not alias `u`.
    """
    nx, ny = u.shape

    for j in range(ny):
        out[0, j] = u[0, j]
        out[nx - 1, j] = u[nx - 1, j]
    for i in range(nx):
        out[i, 0] = u[i, 0]
        out[i, ny - 1] = u[i, ny - 1]

    for i in range(1, nx - 1):
        for j in range(1, ny - 1):
            out[i, j] = (
                u[i, j]
                + rx * (u[i + 1, j] - 2 * u[i, j] + u[i - 1, j])
                + ry * (u[i, j + 1] - 2 * u[i, j] + u[i, j - 1])
            )


@dataclass(frozen=True)
class StepResult:
    """Output of one stencil step."""
    u: npt.NDArray[np.float64]
    warning: Optional[StabilityWarning] = None

    @property
    def stable(self) -> bool:
        return self.warning is None


def stability_number(params: SimulationParameters) -> float:
    """rx + ry = alpha*dt*(1/dx^2 + 1/dy^2)"""
    return params.rx + params.ry


def is_stable(params: SimulationParameters) -> bool:
    return stability_number(params) <= STABILITY_LIMIT


def check_stability(params: SimulationParameters) -> Optional[StabilityWarning]:
    """
    Build a StabilityWarning if the explicit scheme is outside its bound.

    Returns:
        None when rx + ry <= 0.5.
    """
    rx, ry = params.rx, params.ry
    if rx + ry > STABILITY_LIMIT:
        return StabilityWarning(rx=rx, ry=ry, limit=STABILITY_LIMIT)
    return None


def step(
    u: npt.NDArray[np.float64],
    params: SimulationParameters,
    out: Optional[npt.NDArray[np.float64]] = None,
) -> StepResult:
    """
    Advance the field by one time step dt.

    The step always executes. When rx + ry > 0.5 the result carries a
    StabilityWarning, which is also logged once for this step.

    Args:
        u: Current field, shape (nx, ny). Never modified.
        params: Provides alpha, dt, dx, dy.
        out: Optional scratch buffer of the same shape to write into
            (double buffering). Allocated when omitted.

    Returns:
        StepResult with the new field and the optional warning.

    Raises:
        ValueError: If `out` has a different shape or shares memory with `u`.
    """
    if u.ndim != 2 or u.shape[0] < 2 or u.shape[1] < 2:
        raise ValueError(f"Field must be 2D with at least 2 points per axis, got shape {u.shape}.")

    if out is None:
        out = np.empty_like(u, dtype=np.float64)
    else:
        if out.shape != u.shape:
            raise ValueError(f"Scratch buffer shape {out.shape} does not match field shape {u.shape}.")
        if np.shares_memory(out, u):
            raise ValueError("Scratch buffer must not alias the input field.")

    warning = check_stability(params)
    if warning is not None:
        logger.warning(str(warning))

    _ftcs_step(
        np.ascontiguousarray(u, dtype=np.float64),
        out,
        params.rx,
        params.ry,
    )
    return StepResult(u=out, warning=warning)
