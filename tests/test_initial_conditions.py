import math

import numpy as np
import pytest

from heatplate.controller.fd.grid import allocate, coordinates, in_bounds, interior, is_boundary
from heatplate.controller.fd.initial_conditions import initial_field, initial_temperature
from heatplate.model.parameters import SimulationParameters


def test_allocate_shape(default_params):
    u = allocate(default_params)
    assert u.shape == (default_params.nx, default_params.ny)
    assert u.dtype == np.float64


def test_coordinates(small_params):
    x, y = coordinates(small_params)
    np.testing.assert_allclose(x, [0.0, 0.25, 0.5, 0.75, 1.0])
    np.testing.assert_allclose(y, [0.0, 0.25, 0.5, 0.75])


def test_bounds_queries():
    shape = (5, 4)
    assert is_boundary(0, 2, shape)
    assert is_boundary(4, 2, shape)
    assert is_boundary(2, 0, shape)
    assert is_boundary(2, 3, shape)
    assert not is_boundary(2, 2, shape)
    assert in_bounds(4, 3, shape)
    assert not in_bounds(5, 0, shape)
    assert not in_bounds(0, -1, shape)
    assert interior(shape) == (slice(1, 4), slice(1, 3))


def test_shape_and_origin(default_params):
    u = initial_field(default_params)
    assert u.shape == default_params.shape
    assert u[0, 0] == 0.0


def test_matches_analytic_formula(small_params):
    u = initial_field(small_params)
    for i in range(small_params.nx):
        for j in range(small_params.ny):
            expected = initial_temperature(
                i * small_params.dx, j * small_params.dy, small_params.Lx, small_params.Ly
            )
            assert u[i, j] == pytest.approx(expected, abs=1e-15)


def test_bottom_row_before_boundaries_is_sine(default_params):
    u = initial_field(default_params)
    x = np.arange(default_params.nx) * default_params.dx
    # cos(0) = 1 on the bottom row
    np.testing.assert_allclose(u[:, 0], np.sin(np.pi * x / default_params.Lx), atol=1e-15)


def test_peak_is_at_bottom_centre():
    p = SimulationParameters(Lx=2.0, Ly=1.0, dx=0.5, dy=0.5)
    u = initial_field(p)
    assert np.unravel_index(np.argmax(u), u.shape) == (2, 0)
    assert u[2, 0] == pytest.approx(1.0)
    # top edge y = Ly: cos(pi/2) ~ 0
    np.testing.assert_allclose(u[:, -1], 0.0, atol=1e-15)


def test_scalar_formula():
    assert initial_temperature(0.5, 0.0, 1.0, 1.0) == pytest.approx(1.0)
    assert initial_temperature(0.5, 1.0, 1.0, 0.5) == pytest.approx(math.cos(math.pi))
