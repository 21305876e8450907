"""
Heat-Map Colour Scale
=====================
Maps a temperature to RGB using a 4-segment piecewise-linear gradient:

    [0.00, 0.25)  blue   (0, 0, 255)   -> cyan   (0, 255, 255)
    [0.25, 0.50)  cyan   (0, 255, 255) -> green  (0, 255, 0)
    [0.50, 0.75)  green  (0, 255, 0)   -> yellow (255, 255, 0)
    [0.75, 1.00]  yellow (255, 255, 0) -> red    (255, 0, 0)

Within a segment each channel is a*(1-t) + b*t with the local fraction t,
truncated to an integer. The scalar and the vectorized paths evaluate the
same expression and give identical results.

A diverged field may hold NaN or +-inf. The range is scanned over finite
cells only; +inf clamps to 1, -inf to 0 and NaN is painted as 1 (hot) on
both paths.

Pure NumPy; no Qt imports.
"""
from __future__ import annotations

import math
from typing import TYPE_CHECKING, Tuple

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

RGB = Tuple[int, int, int]

# Segment start colours, one per quarter, plus the final stop
COLOR_STOPS: Tuple[RGB, ...] = (
    (0, 0, 255),
    (0, 255, 255),
    (0, 255, 0),
    (255, 255, 0),
    (255, 0, 0),
)
SEGMENT_WIDTH = 0.25

_STOPS = np.asarray(COLOR_STOPS, dtype=np.float64)


NAN_POSITION = 1.0


def temperature_range(u: npt.NDArray[np.float64]) -> tuple[float, float]:
    """
    (min, max) over the finite cells of the field. Recomputed every frame.

    A field without any finite cell gives the degenerate range (0.0, 0.0).
    """
    finite = u[np.isfinite(u)]
    if finite.size == 0:
        return 0.0, 0.0
    return float(np.min(finite)), float(np.max(finite))


def clamp_unit(value: float) -> float:
    """Clamp to [0, 1]; NaN maps to NAN_POSITION."""
    if math.isnan(value):
        return NAN_POSITION
    return max(0.0, min(1.0, value))


def normalize(temp: float, min_temp: float, max_temp: float) -> float:
    """
    Position of `temp` inside [min_temp, max_temp], clamped to [0, 1].

    A degenerate range (max == min) maps to 0.
    """
    if max_temp == min_temp:
        return 0.0
    return clamp_unit((temp - min_temp) / (max_temp - min_temp))


def normalized_to_color(normalized: float) -> RGB:
    """Gradient colour for a value in [0, 1]; anything else is clamped first."""
    normalized = clamp_unit(normalized)
    if normalized < 0.25:
        segment, t = 0, normalized * 4
    elif normalized < 0.5:
        segment, t = 1, (normalized - 0.25) * 4
    elif normalized < 0.75:
        segment, t = 2, (normalized - 0.5) * 4
    else:
        segment, t = 3, (normalized - 0.75) * 4

    start, end = COLOR_STOPS[segment], COLOR_STOPS[segment + 1]
    r, g, b = (math.floor(a * (1 - t) + c * t) for a, c in zip(start, end))
    return r, g, b


def temperature_to_color(temp: float, min_temp: float, max_temp: float) -> RGB:
    return normalized_to_color(normalize(temp, min_temp, max_temp))


def normalize_field(
    u: npt.NDArray[np.float64],
    min_temp: float,
    max_temp: float,
) -> npt.NDArray[np.float64]:
    """Vectorized `normalize`."""
    if max_temp == min_temp:
        return np.zeros_like(u, dtype=np.float64)
    with np.errstate(invalid="ignore", over="ignore"):
        normalized = (u - min_temp) / (max_temp - min_temp)
    return clamp_unit_field(normalized)


def clamp_unit_field(values: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    """Vectorized `clamp_unit`."""
    values = np.nan_to_num(values, nan=NAN_POSITION, posinf=1.0, neginf=0.0)
    return np.clip(values, 0.0, 1.0)


def map_normalized(normalized: npt.NDArray[np.float64]) -> npt.NDArray[np.uint8]:
    """
    Vectorized `normalized_to_color`.

    Args:
        normalized: Values in [0, 1], any shape S.

    Returns:
        uint8 array of shape S + (3,).
    """
    normalized = clamp_unit_field(np.asarray(normalized, dtype=np.float64))

    # 0..3, the last segment is closed at 1.0
    segment = np.select(
        [normalized < 0.25, normalized < 0.5, normalized < 0.75],
        [0, 1, 2],
        default=3,
    )
    offset = segment * SEGMENT_WIDTH
    t = (normalized - offset) * 4
    t = t[..., np.newaxis]

    start = _STOPS[segment]
    end = _STOPS[segment + 1]
    channels = np.floor(start * (1 - t) + end * t)
    return channels.astype(np.uint8)


def map_field(
    u: npt.NDArray[np.float64],
    min_temp: float,
    max_temp: float,
) -> npt.NDArray[np.uint8]:
    """Colour of every cell, shape (nx, ny, 3)."""
    return map_normalized(normalize_field(u, min_temp, max_temp))


def legend(width: int, height: int = 1) -> npt.NDArray[np.uint8]:
    """Horizontal cold-to-hot colour bar, shape (height, width, 3)."""
    row = map_normalized(np.linspace(0.0, 1.0, width))
    return np.repeat(row[np.newaxis, :, :], height, axis=0)
