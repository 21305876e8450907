"""
Configuration & Global Constants
================================
This module serves as the central registry for default parameters and the
constants shared by the solver, the renderer and the GUI shell.

Exports:
    DEFAULT_PARAMETERS (dict): Default plate, boundary and numerical settings.
    STABILITY_LIMIT (float): Upper bound of rx + ry for the explicit scheme.
    CANVAS_WIDTH, CANVAS_HEIGHT (int): Default raster size in pixels.
    FRAME_INTERVAL_MS (int): Timer period of the animation loop.
"""
from typing import Dict, Tuple

# Plate [length units], boundary gradients, diffusivity, steps, duration
DEFAULT_PARAMETERS: Dict[str, float] = {
    "Lx": 2.0,
    "Ly": 1.5,
    "fL": 0.0,
    "fR": 0.0,
    "fT": 0.0,
    "alpha": 0.1,
    "dt": 0.001,
    "dx": 0.05,
    "dy": 0.05,
    "total_time": 5.0,
}

# Explicit FTCS in 2D is stable for rx + ry <= 1/2
STABILITY_LIMIT: float = 0.5

# Accumulated `time += dt` is compared to total_time with this fraction of dt
TIME_TOLERANCE: float = 1e-6

# Rendering
CANVAS_WIDTH: int = 600
CANVAS_HEIGHT: int = 400
GRID_LINE_COLOR: Tuple[int, int, int] = (255, 255, 255)
GRID_LINE_ALPHA: float = 0.1

# ~60 Hz, one simulation step per frame
FRAME_INTERVAL_MS: int = 16

# GUI input ranges: (minimum, maximum, step, decimals)
PARAMETER_RANGES: Dict[str, Tuple[float, float, float, int]] = {
    "Lx": (0.1, 100.0, 0.1, 3),
    "Ly": (0.1, 100.0, 0.1, 3),
    "fL": (-100.0, 100.0, 0.1, 3),
    "fR": (-100.0, 100.0, 0.1, 3),
    "fT": (-100.0, 100.0, 0.1, 3),
    "alpha": (0.01, 0.5, 0.01, 3),
    "dt": (0.0001, 0.01, 0.0001, 4),
    "dx": (0.01, 0.1, 0.005, 3),
    "dy": (0.01, 0.1, 0.005, 3),
    "total_time": (0.5, 1000.0, 0.5, 2),
}
