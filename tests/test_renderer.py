import warnings

import numpy as np
import pytest

from heatplate.controller.simulation import Simulation
from heatplate.model.parameters import SimulationParameters
from heatplate.view.colormap import temperature_to_color
from heatplate.view.renderer import cell_index_maps, grid_line_positions, render


def test_frame_size_and_range(small_params, random_field):
    frame = render(random_field, width=60, height=40)
    assert frame.pixels.shape == (40, 60, 3)
    assert frame.pixels.dtype == np.uint8
    assert (frame.width, frame.height) == (60, 40)
    assert frame.min_temp == random_field.min()
    assert frame.max_temp == random_field.max()
    assert frame.degenerate_range is None


def test_cell_partition():
    i_of_column, j_of_row = cell_index_maps((4, 2), width=8, height=4)
    np.testing.assert_array_equal(i_of_column, [0, 0, 1, 1, 2, 2, 3, 3])
    # y axis flipped: top raster rows show j = ny-1
    np.testing.assert_array_equal(j_of_row, [1, 1, 0, 0])


def test_y_axis_points_up():
    u = np.array([[0.0, 1.0], [0.0, 1.0]])  # j = 0 cold, j = 1 hot
    frame = render(u, width=4, height=4, grid_lines=False)
    assert tuple(frame.pixels[0, 0]) == (255, 0, 0)
    assert tuple(frame.pixels[-1, -1]) == (0, 0, 255)


def test_x_axis_left_to_right():
    u = np.array([[0.0, 0.0], [1.0, 1.0]])  # i = 0 cold, i = 1 hot
    frame = render(u, width=4, height=4, grid_lines=False)
    assert tuple(frame.pixels[2, 0]) == (0, 0, 255)
    assert tuple(frame.pixels[2, 3]) == (255, 0, 0)


def test_explicit_value_range():
    u = np.zeros((2, 2))
    frame = render(u, width=2, height=2, value_range=(-1.0, 1.0), grid_lines=False)
    assert tuple(frame.pixels[0, 0]) == (0, 255, 0)


def test_degenerate_field():
    frame = render(np.full((3, 3), 2.0), width=9, height=9, grid_lines=False)
    assert frame.degenerate_range is not None
    assert frame.degenerate_range.value == 2.0
    assert np.all(frame.pixels == np.array([0, 0, 255], dtype=np.uint8))


def test_grid_lines_are_faint_overlay():
    u = np.full((3, 3), 2.0)  # uniformly blue
    frame = render(u, width=30, height=30, grid_lines=True)
    # boundary pixel blended 10% towards white, cell centre untouched
    assert frame.pixels[0, 0, 0] == 25
    assert tuple(frame.pixels[5, 5]) == (0, 0, 255)
    assert frame.pixels[5, 10, 0] == 25


def test_grid_line_positions():
    np.testing.assert_array_equal(grid_line_positions(3, 30), [0, 10, 20, 29])


def test_render_does_not_touch_field(random_field):
    before = random_field.copy()
    render(random_field, width=50, height=50)
    np.testing.assert_array_equal(random_field, before)


def test_rejects_empty_raster(random_field):
    with pytest.raises(ValueError):
        render(random_field, width=0, height=10)


def test_render_simulation_field(simulation):
    frame = render(simulation.field, width=120, height=90)
    assert frame.pixels.shape == (90, 120, 3)
    assert frame.min_temp == pytest.approx(simulation.field.min())
    assert frame.max_temp == pytest.approx(simulation.field.max())
    assert frame.non_finite_cells == 0


def cell_colors(u, frame):
    """Pixel colour per cell for a frame rendered at one pixel per cell."""
    nx, ny = u.shape
    return {(i, j): tuple(int(c) for c in frame.pixels[ny - 1 - j, i]) for i in range(nx) for j in range(ny)}


def test_non_finite_cells_render_without_warnings():
    u = np.array([
        [0.0, 1.0, np.nan],
        [2.0, np.inf, -np.inf],
    ])
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        frame = render(u, width=2, height=3, grid_lines=False)

    assert (frame.min_temp, frame.max_temp) == (0.0, 2.0)
    assert frame.non_finite_cells == 3
    assert frame.degenerate_range is None

    colors = cell_colors(u, frame)
    assert colors[(0, 2)] == (255, 0, 0)  # NaN
    assert colors[(1, 1)] == (255, 0, 0)  # +inf
    assert colors[(1, 2)] == (0, 0, 255)  # -inf
    for (i, j), rgb in colors.items():
        assert rgb == temperature_to_color(u[i, j], frame.min_temp, frame.max_temp)


def test_all_nan_field_is_degenerate():
    u = np.full((3, 2), np.nan)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        frame = render(u, width=6, height=4, grid_lines=False)
    assert frame.degenerate_range is not None
    assert (frame.min_temp, frame.max_temp) == (0.0, 0.0)
    assert frame.non_finite_cells == 6
    assert np.all(frame.pixels == np.array([0, 0, 255], dtype=np.uint8))


def test_diverged_run_renders_consistently():
    params = SimulationParameters(alpha=0.5, dt=0.01, dx=0.01, dy=0.01, Lx=0.2, Ly=0.2)
    sim = Simulation(params)
    sim.run(max_steps=400)
    u = np.array(sim.field)
    assert not np.all(np.isfinite(u))

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        frame = render(u, width=u.shape[0], height=u.shape[1], grid_lines=False)

    assert frame.non_finite_cells > 0
    assert np.isfinite(frame.min_temp) and np.isfinite(frame.max_temp)
    for (i, j), rgb in cell_colors(u, frame).items():
        assert rgb == temperature_to_color(u[i, j], frame.min_temp, frame.max_temp)
