import logging

import numpy as np
import pytest

from heatplate.controller.fd.solver import check_stability, is_stable, stability_number, step
from heatplate.model.errors import StabilityWarning
from heatplate.model.parameters import SimulationParameters


def reference_step(u, p):
    """Plain-loop version of the stencil."""
    rx, ry = p.rx, p.ry
    nx, ny = u.shape
    out = u.copy()
    for i in range(1, nx - 1):
        for j in range(1, ny - 1):
            out[i, j] = (
                u[i, j]
                + rx * (u[i + 1, j] - 2 * u[i, j] + u[i - 1, j])
                + ry * (u[i, j + 1] - 2 * u[i, j] + u[i, j - 1])
            )
    return out


def test_shape_is_conserved(small_params, random_field):
    result = step(random_field, small_params)
    assert result.u.shape == random_field.shape
    assert result.u.dtype == np.float64


def test_input_is_not_mutated(small_params, random_field):
    before = random_field.copy()
    result = step(random_field, small_params)
    assert result.u is not random_field
    np.testing.assert_array_equal(random_field, before)


def test_matches_reference_stencil(small_params, random_field):
    result = step(random_field, small_params)
    np.testing.assert_allclose(result.u, reference_step(random_field, small_params), rtol=1e-14, atol=1e-14)


def test_boundary_cells_are_copied(small_params, random_field):
    result = step(random_field, small_params)
    np.testing.assert_array_equal(result.u[0, :], random_field[0, :])
    np.testing.assert_array_equal(result.u[-1, :], random_field[-1, :])
    np.testing.assert_array_equal(result.u[:, 0], random_field[:, 0])
    np.testing.assert_array_equal(result.u[:, -1], random_field[:, -1])


def test_uniform_field_is_steady(small_params):
    u = np.full(small_params.shape, 3.5)
    np.testing.assert_array_equal(step(u, small_params).u, u)


def test_hot_spot_spreads():
    p = SimulationParameters(Lx=1.0, Ly=1.0, dx=0.25, dy=0.25, alpha=1.0, dt=0.01)
    u = np.zeros(p.shape)
    u[2, 2] = 1.0
    new = step(u, p).u
    assert new[2, 2] == pytest.approx(1.0 - 4 * p.rx)
    for i, j in [(1, 2), (3, 2), (2, 1), (2, 3)]:
        assert new[i, j] == pytest.approx(p.rx)
    assert new.sum() == pytest.approx(1.0)


def test_writes_into_scratch_buffer(small_params, random_field):
    out = np.empty_like(random_field)
    result = step(random_field, small_params, out=out)
    assert result.u is out


def test_rejects_aliased_or_mismatched_buffer(small_params, random_field):
    with pytest.raises(ValueError, match="alias"):
        step(random_field, small_params, out=random_field)
    with pytest.raises(ValueError, match="shape"):
        step(random_field, small_params, out=np.empty((2, 2)))


def test_rejects_degenerate_field(small_params):
    with pytest.raises(ValueError):
        step(np.zeros((1, 4)), small_params)


def test_stable_example_has_no_warning(caplog):
    p = SimulationParameters(alpha=0.1, dt=0.001, dx=0.05, dy=0.05)
    assert stability_number(p) == pytest.approx(0.08)
    assert is_stable(p)

    with caplog.at_level(logging.WARNING, logger="heatplate"):
        result = step(np.zeros(p.shape), p)
    assert result.stable
    assert result.warning is None
    assert not caplog.records


def test_unstable_example_warns_once_per_step(caplog):
    p = SimulationParameters(alpha=0.1, dt=0.02, dx=0.05, dy=0.05)
    assert stability_number(p) == pytest.approx(1.6)
    assert not is_stable(p)

    u = np.zeros(p.shape)
    with caplog.at_level(logging.WARNING, logger="heatplate"):
        result = step(u, p)
    assert isinstance(result.warning, StabilityWarning)
    assert result.warning.number == pytest.approx(1.6)
    assert len([r for r in caplog.records if "Stability" in r.getMessage()]) == 1

    # the step still executes
    assert result.u.shape == u.shape

    caplog.clear()
    with caplog.at_level(logging.WARNING, logger="heatplate"):
        step(result.u, p, out=u)
    assert len(caplog.records) == 1


def test_threshold_is_exclusive():
    # rx + ry == 0.5 exactly: dt = 0.5 * dx^2 / (2 * alpha) with dx = 0.5, alpha = 1
    p = SimulationParameters(Lx=1.0, Ly=1.0, dx=0.5, dy=0.5, alpha=1.0, dt=0.0625)
    assert stability_number(p) == 0.5
    assert check_stability(p) is None
    assert check_stability(p.replace(dt=0.07)) is not None


def test_module_documents_the_scheme():
    from heatplate.controller.fd import solver

    assert solver.__doc__.lstrip().startswith("Stencil Solver")
    assert "rx + ry <= 0.5" in solver.__doc__
