"""
Structured Grid
===============
Allocation and bounds queries for the (nx, ny) temperature field.
Index i runs along x (x = i*dx), index j along y (y = j*dy).
"""
from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

    from heatplate.model.parameters import SimulationParameters


def grid_shape(params: SimulationParameters) -> tuple[int, int]:
    """(floor(Lx/dx) + 1, floor(Ly/dy) + 1)"""
    return params.nx, params.ny


def allocate(params: SimulationParameters) -> npt.NDArray[np.float64]:
    """Zero-filled field with the grid shape of `params`."""
    return np.zeros(grid_shape(params), dtype=np.float64)


def coordinates(params: SimulationParameters) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """
    Physical node coordinates along each axis.

    Returns:
        (x, y) with x[i] = i*dx and y[j] = j*dy.
    """
    nx, ny = grid_shape(params)
    x = np.arange(nx, dtype=np.float64) * params.dx
    y = np.arange(ny, dtype=np.float64) * params.dy
    return x, y


def is_boundary(i: int, j: int, shape: tuple[int, int]) -> bool:
    nx, ny = shape
    return i == 0 or j == 0 or i == nx - 1 or j == ny - 1


def in_bounds(i: int, j: int, shape: tuple[int, int]) -> bool:
    nx, ny = shape
    return 0 <= i < nx and 0 <= j < ny


def interior(shape: tuple[int, int]) -> tuple[slice, slice]:
    """Index expression selecting 1 <= i <= nx-2, 1 <= j <= ny-2."""
    return slice(1, shape[0] - 1), slice(1, shape[1] - 1)
