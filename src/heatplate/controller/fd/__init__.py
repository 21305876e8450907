"""
Explicit finite-difference scheme on a structured (nx, ny) grid:
initial condition, boundary rules and the 5-point stencil step.
"""
from heatplate.controller.fd.boundary import apply_boundary_conditions
from heatplate.controller.fd.grid import allocate, grid_shape
from heatplate.controller.fd.initial_conditions import initial_field
from heatplate.controller.fd.solver import StepResult, check_stability, is_stable, stability_number, step

__all__ = [
    "apply_boundary_conditions",
    "allocate",
    "grid_shape",
    "initial_field",
    "StepResult",
    "check_stability",
    "is_stable",
    "stability_number",
    "step",
]
