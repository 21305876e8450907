"""
Heat-Map Renderer
=================
Rasterizes a temperature field into an RGB pixel buffer that any host
(Qt widget, image writer, test) can display.

The raster is partitioned into nx x ny cells of size (W/nx) x (H/ny). Cell
(i, j) is drawn at column block i and row block ny-1-j so that increasing y
points up. Faint grid lines are blended over the cell boundaries.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

import numpy as np

from heatplate.config import CANVAS_HEIGHT, CANVAS_WIDTH, GRID_LINE_ALPHA, GRID_LINE_COLOR
from heatplate.model.errors import DegenerateRangeWarning
from heatplate.view.colormap import map_field, temperature_range

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedFrame:
    pixels: npt.NDArray[np.uint8]  # (height, width, 3)
    min_temp: float
    max_temp: float
    degenerate_range: Optional[DegenerateRangeWarning] = None
    # NaN or +-inf cells of a diverged field
    non_finite_cells: int = 0

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])


def cell_index_maps(
    shape: Tuple[int, int],
    width: int,
    height: int,
) -> tuple[npt.NDArray[np.intp], npt.NDArray[np.intp]]:
    """
    Grid indices covered by every pixel column and every raster row.

    Returns:
        (i_of_column, j_of_row), with j flipped so raster row 0 is the top
        edge of the plate (j = ny-1).
    """
    nx, ny = shape
    i_of_column = (np.arange(width) * nx) // width
    j_of_row = ny - 1 - (np.arange(height) * ny) // height
    return i_of_column.astype(np.intp), j_of_row.astype(np.intp)


def grid_line_positions(cells: int, pixels: int) -> npt.NDArray[np.intp]:
    """Pixel positions of the cells + 1 boundaries along one axis."""
    edges = np.floor(np.arange(cells + 1) * (pixels / cells)).astype(np.intp)
    return np.unique(np.clip(edges, 0, pixels - 1))


def _overlay_grid_lines(
    pixels: npt.NDArray[np.uint8],
    shape: Tuple[int, int],
) -> None:
    height, width, _ = pixels.shape
    nx, ny = shape

    mask = np.zeros((height, width), dtype=bool)
    mask[:, grid_line_positions(nx, width)] = True
    mask[grid_line_positions(ny, height), :] = True

    color = np.asarray(GRID_LINE_COLOR, dtype=np.float64)
    blended = pixels[mask].astype(np.float64) * (1.0 - GRID_LINE_ALPHA) + color * GRID_LINE_ALPHA
    pixels[mask] = np.floor(blended).astype(np.uint8)


def render(
    u: npt.NDArray[np.float64],
    width: int = CANVAS_WIDTH,
    height: int = CANVAS_HEIGHT,
    value_range: Optional[Tuple[float, float]] = None,
    grid_lines: bool = True,
) -> RenderedFrame:
    """
    Draw the field as a false-colour heat map.

    Args:
        u: Field of shape (nx, ny). Only read.
        width: Raster width in pixels.
        height: Raster height in pixels.
        value_range: (min, max) for the colour scale. Scanned from `u`
            when omitted.
        grid_lines: Blend faint cell boundaries over the heat map.

    Returns:
        RenderedFrame with a (height, width, 3) uint8 buffer.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Raster size must be positive, got {width}x{height}.")

    min_temp, max_temp = value_range if value_range is not None else temperature_range(u)

    non_finite = int(u.size - np.count_nonzero(np.isfinite(u)))
    if non_finite:
        logger.debug(f"Field holds {non_finite} non-finite cells.")

    degenerate = None
    if max_temp == min_temp:
        degenerate = DegenerateRangeWarning(min_temp)
        logger.debug(str(degenerate))

    colors = map_field(u, min_temp, max_temp)  # (nx, ny, 3)
    i_of_column, j_of_row = cell_index_maps(u.shape, width, height)

    # pixels[row, col] = colors[i(col), j(row)]
    pixels = colors[i_of_column[np.newaxis, :], j_of_row[:, np.newaxis]]
    pixels = np.ascontiguousarray(pixels, dtype=np.uint8)

    if grid_lines:
        _overlay_grid_lines(pixels, u.shape)

    return RenderedFrame(
        pixels=pixels,
        min_temp=min_temp,
        max_temp=max_temp,
        degenerate_range=degenerate,
        non_finite_cells=non_finite,
    )
