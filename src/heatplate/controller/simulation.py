"""
Simulation Driver
=================
Owns the parameters and the run state and sequences the numerical
components:

    reset:  initial_field -> apply_boundary_conditions
    tick:   step -> apply_boundary_conditions -> time += dt

Why is this file needed?
------------------------
1. Scheduling: The host (Qt timer, script, test) calls `tick()` on its own
   cadence. One call advances at most one step; a step is never split.
2. Buffers: Two field buffers are swapped every step, so the stencil never
   reads a partially updated neighbour.
3. Reconfiguration: Parameter changes are classified as "needs a new grid"
   (Lx, Ly, dx, dy) or "hot-swappable" (alpha, dt, total_time, fL, fR, fT).

Note: This module is pure Python/NumPy and does NOT import PySide6.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, FrozenSet, List, Optional

import numpy as np

from heatplate.config import TIME_TOLERANCE
from heatplate.controller.fd.boundary import apply_boundary_conditions
from heatplate.controller.fd.initial_conditions import initial_field
from heatplate.controller.fd.solver import check_stability, step
from heatplate.model.errors import StabilityWarning
from heatplate.model.parameters import GEOMETRY_FIELDS, SimulationParameters
from heatplate.model.state import SimulationState

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

StabilityCallback = Callable[[StabilityWarning], None]
RunCompleteCallback = Callable[[int], None]


@dataclass(frozen=True)
class Reconfiguration:
    """What a call to `Simulation.reconfigure` changed."""
    changed: FrozenSet[str]
    reallocated: bool

    @property
    def hot_swapped(self) -> FrozenSet[str]:
        return self.changed - GEOMETRY_FIELDS


class Simulation:
    """
    Explicit 2D heat diffusion on a rectangular plate.
    """

    def __init__(
        self,
        params: Optional[SimulationParameters] = None,
    ) -> None:
        """
        Validate the parameters and build the starting field.

        Args:
            params: Defaults to `SimulationParameters()`.

        Raises:
            ConfigurationError: If the parameters are invalid.
        """
        self._params = (params or SimulationParameters()).validate()
        self.state = SimulationState()
        self._spare: npt.NDArray[np.float64] = np.empty((0, 0), dtype=np.float64)

        self._stability_listeners: List[StabilityCallback] = []
        self._complete_listeners: List[RunCompleteCallback] = []

        self.reset()

    # --- Properties ---

    @property
    def params(self) -> SimulationParameters:
        return self._params

    @property
    def field(self) -> npt.NDArray[np.float64]:
        """Read-only view of the current field, shape (nx, ny)."""
        view = self.state.u.view()
        view.flags.writeable = False
        return view

    @property
    def time(self) -> float:
        return self.state.time

    @property
    def is_running(self) -> bool:
        return self.state.is_running

    @property
    def progress(self) -> float:
        """Elapsed fraction of total_time in [0, 1]."""
        return min(1.0, self.state.time / self._params.total_time)

    # --- Listeners ---

    def on_stability_warning(self, callback: StabilityCallback) -> None:
        """Register a callback invoked once for every violating step."""
        self._stability_listeners.append(callback)

    def on_run_complete(self, callback: RunCompleteCallback) -> None:
        """Register a callback invoked with the step count when a run ends."""
        self._complete_listeners.append(callback)

    # --- Control ---

    def reset(self) -> None:
        """Reallocate the buffers and rebuild the starting field. Halts the run."""
        p = self._params
        u = initial_field(p)
        apply_boundary_conditions(u, p)

        self.state.u = u
        self._spare = np.empty_like(u)
        self.state.rewind()
        self.state.is_running = False

        logger.info(
            f"Simulation reset: grid {p.nx}x{p.ny}, rx + ry = {p.rx + p.ry:.4g}, "
            f"{p.total_time / p.dt:.0f} steps to t = {p.total_time:g}"
        )
        if check_stability(p) is not None:
            logger.warning("Current parameters violate the explicit stability bound.")

    def start(self) -> None:
        self.state.is_running = True

    def pause(self) -> None:
        """Stop scheduling further steps. A step in progress is not affected."""
        self.state.is_running = False

    def toggle(self) -> bool:
        if self.state.is_running:
            self.pause()
        else:
            self.start()
        return self.state.is_running

    def tick(self) -> bool:
        """
        Host callback for one frame.

        Returns:
            True if a step was taken.
        """
        if not self.state.is_running:
            return False
        self.advance()
        return True

    def advance(self) -> Optional[StabilityWarning]:
        """
        Take exactly one step regardless of the run flag.

        When the run reaches total_time, time wraps to 0, the run halts and
        run-complete listeners are notified. The field is kept.

        Returns:
            The StabilityWarning of this step, if any.
        """
        p = self._params

        result = step(self.state.u, p, out=self._spare)
        apply_boundary_conditions(result.u, p)

        # Swap buffer ownership
        self._spare, self.state.u = self.state.u, result.u

        self.state.time += p.dt
        self.state.step_count += 1

        if result.warning is not None:
            for callback in self._stability_listeners:
                callback(result.warning)

        if self.state.time + TIME_TOLERANCE * p.dt >= p.total_time:
            self._complete_run()

        return result.warning

    def run(self, max_steps: Optional[int] = None) -> int:
        """
        Headless loop: start and tick until the run completes.

        Args:
            max_steps: Optional safety cap.

        Returns:
            Number of steps taken.
        """
        self.start()
        taken = 0
        while self.state.is_running:
            if max_steps is not None and taken >= max_steps:
                self.pause()
                break
            self.tick()
            taken += 1
        return taken

    def _complete_run(self) -> None:
        steps = self.state.step_count
        logger.info(f"Run complete after {steps} steps (t = {self.state.time:.6g}).")
        self.state.rewind()
        self.state.is_running = False
        for callback in self._complete_listeners:
            callback(steps)

    # --- Configuration ---

    def reconfigure(self, **changes: float) -> Reconfiguration:
        """
        Apply parameter changes.

        Geometry changes (Lx, Ly, dx, dy) trigger a full reset. All other
        changes are hot-swapped and used by the next step.

        Raises:
            ConfigurationError: On unknown names or invalid values. The
                simulation is left untouched.
        """
        new_params = self._params.replace(**changes)
        return self.set_params(new_params)

    def set_params(self, params: SimulationParameters) -> Reconfiguration:
        params.validate()
        changed = params.changed_fields(self._params)
        reallocate = bool(changed & GEOMETRY_FIELDS)

        self._params = params
        if reallocate:
            logger.info(f"Geometry changed ({', '.join(sorted(changed & GEOMETRY_FIELDS))}), resetting grid.")
            self.reset()
        elif changed:
            logger.info(f"Hot-swapped parameters: {', '.join(sorted(changed))}.")

        return Reconfiguration(changed=changed, reallocated=reallocate)

