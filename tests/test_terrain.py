import numpy as np
import pytest

from world.brush import paint
from world.terrain import HeightField, round_half_up


def test_round_half_up_ties_go_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(-2.5) == -2
    assert round_half_up(2.49) == 2


def test_grid_shape_and_cell_size():
    field = HeightField(100.0, 50.0, 10)
    assert field.heights.shape == (11, 11)
    assert field.cell_size_x == pytest.approx(10.0)
    assert field.cell_size_z == pytest.approx(5.0)


def test_world_grid_mapping(small_field):
    assert small_field.world_to_grid(0.0, 0.0) == (2, 2)
    assert small_field.world_to_grid(-2.0, 2.0) == (0, 4)
    assert small_field.grid_to_world(4, 0) == (2.0, -2.0)


def test_query_reads_nearest_cell(small_field):
    small_field.heights[3, 1] = 1.5
    assert small_field.query(1.2, -0.9) == pytest.approx(1.5)


def test_query_off_terrain_is_zero(small_field):
    small_field.heights.fill(3.0)
    assert small_field.query(2.0, 0.0) == pytest.approx(3.0)
    assert small_field.query(2.4, 0.0) == 0.0
    assert small_field.query(0.0, -2.01) == 0.0
    assert small_field.query(50.0, 50.0) == 0.0


def test_heights_view_is_read_only(small_field):
    view = small_field.heights_view()
    with pytest.raises(ValueError):
        view[0, 0] = 1.0
    small_field.heights[0, 0] = 2.0
    assert view[0, 0] == 2.0


def test_paint_falloff_pattern(small_field):
    paint(small_field, 0.0, 0.0, 10.0)
    h = small_field.heights

    assert h[2, 2] == pytest.approx(10.0)
    for gx, gz in ((1, 2), (3, 2), (2, 1), (2, 3)):
        assert h[gx, gz] == pytest.approx(5.0)
    for gx, gz in ((1, 1), (1, 3), (3, 1), (3, 3)):
        assert h[gx, gz] == pytest.approx(10.0 * (1 - np.sqrt(2) / 2))
    for gx, gz in ((0, 2), (4, 2), (2, 0), (2, 4)):
        assert h[gx, gz] == 0.0


def test_paint_only_touches_brush_footprint(small_field):
    paint(small_field, -2.0, -2.0, 1.0)
    touched = {tuple(idx) for idx in np.argwhere(small_field.heights != 0.0)}
    assert touched == {(0, 0), (0, 1), (1, 0), (1, 1)}


def test_paint_off_grid_is_noop(small_field):
    paint(small_field, 10.0, 0.0, 5.0)
    assert not small_field.heights.any()


def test_paint_negative_delta_erodes(small_field):
    paint(small_field, 0.0, 0.0, -0.5)
    assert small_field.heights[2, 2] == pytest.approx(-0.5)


def test_smooth_flat_field_is_unchanged(small_field):
    small_field.heights.fill(2.0)
    small_field.smooth()
    assert np.allclose(small_field.heights, 2.0)


def test_smooth_counts_only_in_bounds_neighbors(small_field):
    small_field.heights[0, 0] = 4.0
    small_field.smooth(factor=1.0)
    h = small_field.heights

    assert h[0, 0] == pytest.approx(4.0 / 4)   # corner: 4 samples
    assert h[0, 1] == pytest.approx(4.0 / 6)   # edge: 6 samples
    assert h[1, 1] == pytest.approx(4.0 / 9)   # interior: 9 samples
    assert h[2, 2] == 0.0


def test_smooth_blends_with_original(small_field):
    small_field.heights[2, 2] = 9.0
    small_field.smooth(factor=0.5)
    assert small_field.heights[2, 2] == pytest.approx(0.5 * 1.0 + 0.5 * 9.0)


def test_reset_flattens(small_field):
    paint(small_field, 0.0, 0.0, 1.0)
    small_field.reset()
    assert small_field.total_mass() == 0.0
