"""
Simulation Parameters
=====================
Immutable-per-run bundle of plate geometry, boundary gradients and
numerical settings.

Classes:
    SimulationParameters: Frozen dataclass with validation and derived sizes.
"""
from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass, asdict
from typing import Any, Dict, FrozenSet

from heatplate.config import DEFAULT_PARAMETERS
from heatplate.model.errors import ConfigurationError


# Changing any of these changes the grid shape -> reallocate and reset
GEOMETRY_FIELDS: FrozenSet[str] = frozenset({"Lx", "Ly", "dx", "dy"})

# Take effect on the next step without touching the field
HOT_SWAP_FIELDS: FrozenSet[str] = frozenset({"alpha", "dt", "total_time", "fL", "fR", "fT"})

_POSITIVE_FIELDS = ("Lx", "Ly", "dx", "dy", "alpha", "dt", "total_time")


@dataclass(frozen=True)
class SimulationParameters:
    Lx: float = DEFAULT_PARAMETERS["Lx"]
    Ly: float = DEFAULT_PARAMETERS["Ly"]
    fL: float = DEFAULT_PARAMETERS["fL"]
    fR: float = DEFAULT_PARAMETERS["fR"]
    fT: float = DEFAULT_PARAMETERS["fT"]
    alpha: float = DEFAULT_PARAMETERS["alpha"]
    dt: float = DEFAULT_PARAMETERS["dt"]
    dx: float = DEFAULT_PARAMETERS["dx"]
    dy: float = DEFAULT_PARAMETERS["dy"]
    total_time: float = DEFAULT_PARAMETERS["total_time"]

    # --- Derived quantities ---

    @property
    def nx(self) -> int:
        """Number of grid points along x (floor(Lx/dx) + 1)."""
        return math.floor(self.Lx / self.dx) + 1

    @property
    def ny(self) -> int:
        """Number of grid points along y (floor(Ly/dy) + 1)."""
        return math.floor(self.Ly / self.dy) + 1

    @property
    def shape(self) -> tuple[int, int]:
        return self.nx, self.ny

    @property
    def rx(self) -> float:
        return self.alpha * self.dt / (self.dx * self.dx)

    @property
    def ry(self) -> float:
        return self.alpha * self.dt / (self.dy * self.dy)

    # --- Validation ---

    def validate(self) -> SimulationParameters:
        """
        Reject parameters that cannot describe a grid with an interior.

        Returns:
            self, to allow chaining.

        Raises:
            ConfigurationError: On non-finite values, non-positive sizes or
                steps, or a spatial step larger than its plate extent.
        """
        for name, value in asdict(self).items():
            if not isinstance(value, (int, float)) or isinstance(value, bool):
                raise ConfigurationError(f"Parameter '{name}' must be a real number, got {value!r}.")
            if not math.isfinite(value):
                raise ConfigurationError(f"Parameter '{name}' must be finite, got {value!r}.")

        for name in _POSITIVE_FIELDS:
            value = getattr(self, name)
            if value <= 0.0:
                raise ConfigurationError(f"Parameter '{name}' must be positive, got {value!r}.")

        if self.dx > self.Lx:
            raise ConfigurationError(
                f"dx ({self.dx}) exceeds Lx ({self.Lx}); the grid needs at least 2 points along x."
            )
        if self.dy > self.Ly:
            raise ConfigurationError(
                f"dy ({self.dy}) exceeds Ly ({self.Ly}); the grid needs at least 2 points along y."
            )
        return self

    # --- Copy / (de)serialization ---

    def replace(self, **changes: float) -> SimulationParameters:
        """Return a validated copy with the given fields changed."""
        unknown = set(changes) - set(self.field_names())
        if unknown:
            raise ConfigurationError(f"Unknown parameter(s): {', '.join(sorted(unknown))}.")
        return dataclasses.replace(self, **changes).validate()

    def changed_fields(self, other: SimulationParameters) -> FrozenSet[str]:
        """Names of the fields whose values differ between self and other."""
        return frozenset(
            name for name in self.field_names() if getattr(self, name) != getattr(other, name)
        )

    def needs_reallocation(self, other: SimulationParameters) -> bool:
        return bool(self.changed_fields(other) & GEOMETRY_FIELDS)

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> SimulationParameters:
        unknown = set(data) - set(SimulationParameters.field_names())
        if unknown:
            raise ConfigurationError(f"Unknown parameter(s): {', '.join(sorted(unknown))}.")
        return SimulationParameters(**{k: float(v) for k, v in data.items()}).validate()

    @staticmethod
    def field_names() -> tuple[str, ...]:
        return tuple(f.name for f in dataclasses.fields(SimulationParameters))
