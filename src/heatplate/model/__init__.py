"""
The MODEL layer contains pure data structures: parameters, run state and
the error taxonomy. It has NO knowledge of the GUI (Qt) or of the numerics.
"""
from heatplate.model.errors import ConfigurationError, DegenerateRangeWarning, StabilityWarning
from heatplate.model.parameters import GEOMETRY_FIELDS, HOT_SWAP_FIELDS, SimulationParameters
from heatplate.model.state import SimulationState

__all__ = [
    "ConfigurationError",
    "DegenerateRangeWarning",
    "StabilityWarning",
    "GEOMETRY_FIELDS",
    "HOT_SWAP_FIELDS",
    "SimulationParameters",
    "SimulationState",
]
