"""
Transient 2D heat diffusion on a rectangular plate (explicit finite
differences) with a false-colour heat-map renderer.
"""
from heatplate.controller.simulation import Reconfiguration, Simulation
from heatplate.model.errors import ConfigurationError, DegenerateRangeWarning, StabilityWarning
from heatplate.model.parameters import SimulationParameters
from heatplate.model.state import SimulationState

__version__ = "0.1.0"

__all__ = [
    "Reconfiguration",
    "Simulation",
    "ConfigurationError",
    "DegenerateRangeWarning",
    "StabilityWarning",
    "SimulationParameters",
    "SimulationState",
]
