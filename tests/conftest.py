import numpy as np
import pytest

from heatplate.controller.simulation import Simulation
from heatplate.model.parameters import SimulationParameters


@pytest.fixture
def default_params() -> SimulationParameters:
    return SimulationParameters()


@pytest.fixture
def small_params() -> SimulationParameters:
    """5 x 4 grid with non-zero boundary gradients."""
    return SimulationParameters(
        Lx=1.0, Ly=0.75, dx=0.25, dy=0.25,
        fL=0.4, fR=-0.3, fT=0.2,
        alpha=0.1, dt=0.01, total_time=0.1,
    )


@pytest.fixture
def random_field(small_params):
    rng = np.random.default_rng(1234)
    return rng.normal(size=small_params.shape)


@pytest.fixture
def simulation() -> Simulation:
    return Simulation()
