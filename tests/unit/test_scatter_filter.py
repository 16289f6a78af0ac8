import numpy as np
import pytest

from pairplots.scatter_filter import filter_outside, points_on_ring, trace_contours


def test_trace_contours_rings_are_closed(peaked_grid):
    axis_x, axis_y, grid = peaked_grid

    rings = trace_contours(axis_x, axis_y, grid, 0.5)

    assert len(rings) == 1
    for ring in rings:
        np.testing.assert_array_equal(ring[0], ring[-1])


def test_trace_contours_level_above_grid(peaked_grid):
    axis_x, axis_y, grid = peaked_grid

    assert trace_contours(axis_x, axis_y, grid, 100) == []


def test_trace_contours_shape_mismatch():
    with pytest.raises(ValueError):
        trace_contours(np.arange(3), np.arange(4), np.zeros((3, 4)), 0.5)


def test_filter_outside_drops_highest_density_point(peaked_grid):
    axis_x, axis_y, grid = peaked_grid
    xs = np.array([2.0, 0.0, 4.0, 2.0, 2.0])
    ys = np.array([2.0, 0.0, 4.0, 3.0, 3.9])

    kept_x, kept_y = filter_outside(xs, ys, axis_x, axis_y, grid, 0.5)

    np.testing.assert_array_equal(kept_x, [0.0, 4.0, 2.0])
    np.testing.assert_array_equal(kept_y, [0.0, 4.0, 3.9])


def test_filter_outside_respects_axis_convention():
    axis_x = np.arange(5.0)
    axis_y = np.arange(3.0)
    grid = np.zeros((3, 5))
    grid[1, 3] = 1.0
    xs = np.array([3.0, 1.0])
    ys = np.array([1.0, 1.0])

    kept_x, kept_y = filter_outside(xs, ys, axis_x, axis_y, grid, 0.5)

    np.testing.assert_array_equal(kept_x, [1.0])
    np.testing.assert_array_equal(kept_y, [1.0])


def test_filter_outside_boundary_points_are_dropped(peaked_grid):
    axis_x, axis_y, grid = peaked_grid
    ring = trace_contours(axis_x, axis_y, grid, 0.5)[0]
    xs = np.array([ring[0, 0], 0.0])
    ys = np.array([ring[0, 1], 0.0])

    kept_x, kept_y = filter_outside(xs, ys, axis_x, axis_y, grid, 0.5)

    np.testing.assert_array_equal(kept_x, [0.0])
    np.testing.assert_array_equal(kept_y, [0.0])


def test_filter_outside_is_subset(rng, peaked_grid):
    axis_x, axis_y, grid = peaked_grid
    xs, ys = rng.uniform(-1, 5, size=(2, 300))

    kept_x, kept_y = filter_outside(xs, ys, axis_x, axis_y, grid, 0.5)

    assert 0 < kept_x.size < xs.size
    assert kept_x.size == kept_y.size
    kept = set(zip(kept_x, kept_y))
    assert kept <= set(zip(xs, ys))


def test_filter_outside_without_rings_keeps_everything(peaked_grid):
    axis_x, axis_y, grid = peaked_grid
    xs = np.array([2.0, 0.0])
    ys = np.array([2.0, 0.0])

    kept_x, kept_y = filter_outside(xs, ys, axis_x, axis_y, grid, 100)

    np.testing.assert_array_equal(kept_x, xs)
    np.testing.assert_array_equal(kept_y, ys)


def test_filter_outside_does_not_modify_inputs(peaked_grid):
    axis_x, axis_y, grid = peaked_grid
    xs = np.array([2.0, 0.0])
    ys = np.array([2.0, 0.0])

    filter_outside(xs, ys, axis_x, axis_y, grid, 0.5)

    np.testing.assert_array_equal(xs, [2.0, 0.0])
    np.testing.assert_array_equal(ys, [2.0, 0.0])


def test_filter_outside_mismatched_points(peaked_grid):
    axis_x, axis_y, grid = peaked_grid
    with pytest.raises(ValueError):
        filter_outside([1.0, 2.0], [1.0], axis_x, axis_y, grid, 0.5)


@pytest.mark.parametrize(
    "point, expected",
    [((0.5, 0.0), True), ((1.0, 1.0), True), ((0.5, 0.5), False), ((2, 2), False)],
)
def test_points_on_ring(point, expected):
    ring = np.array([[0, 0], [1, 0], [1, 1], [0, 1], [0, 0]], dtype=float)

    assert points_on_ring(np.array([point]), ring)[0] == expected
