import numpy as np
import pytest

from pairplots.histograms import histogram_2d
from pairplots.levels import (
    contour_levels,
    credible_levels,
    default_mass_fractions,
    mask_weights,
)


@pytest.fixture
def small_grid():
    return np.array([[1.0, 2.0], [3.0, 4.0]])


def test_default_mass_fractions():
    fractions = default_mass_fractions()

    assert len(fractions) == 4
    assert np.all(np.diff(fractions) > 0)
    assert fractions[0] == pytest.approx(1 - np.exp(-0.125))
    assert fractions[-1] == pytest.approx(1 - np.exp(-2))


def test_credible_levels_highest_density(small_grid):
    levels = credible_levels(small_grid, [0.3, 0.5, 0.95])

    np.testing.assert_array_equal(levels, [1.0, 3.0, 4.0])


def test_credible_levels_returned_ascending(small_grid):
    levels = credible_levels(small_grid, [0.95, 0.3])

    np.testing.assert_array_equal(levels, [1.0, 4.0])


@pytest.mark.parametrize(
    "fraction, expected", [(1e-9, 4.0), (1 - 1e-9, 1.0)]
)
def test_credible_levels_limits(small_grid, fraction, expected):
    assert credible_levels(small_grid, [fraction])[0] == expected


def test_credible_levels_enclose_requested_mass(rng):
    x, y = rng.normal(size=(2, 5000))
    _, _, grid = histogram_2d(x, y, 32)
    fractions = default_mass_fractions()

    levels = credible_levels(grid, fractions)

    for threshold, fraction in zip(levels, fractions[::-1]):
        assert grid[grid >= threshold].sum() / grid.sum() >= fraction


def test_credible_levels_strictly_increasing(rng):
    grid = rng.integers(1, 1000, size=(20, 20)).astype(float)

    levels = credible_levels(grid)

    assert np.all(np.diff(levels) > 0)


def test_credible_levels_too_few_values_warns():
    grid = np.ones((4, 4))

    with pytest.warns(UserWarning, match="Too few points"):
        levels = credible_levels(grid)

    assert len(levels) == 4
    assert np.all(np.diff(levels) > 0)
    assert levels[-1] == 1.0


def test_credible_levels_no_mass():
    with pytest.raises(ValueError):
        credible_levels(np.zeros((3, 3)))


@pytest.mark.parametrize("fractions", [[0.0], [1.0], [0.5, 1.2], [-0.1]])
def test_credible_levels_bad_fractions(small_grid, fractions):
    with pytest.raises(ValueError):
        credible_levels(small_grid, fractions)


def test_credible_levels_negative_weights():
    with pytest.raises(ValueError):
        credible_levels(np.array([[1.0, -1.0], [2.0, 3.0]]))


def test_contour_levels(small_grid):
    boundaries = contour_levels(small_grid, np.array([1.0, 3.0]))

    np.testing.assert_array_almost_equal(boundaries, [0, 1, 3, 4 * (1 + 1e-4)])
    assert boundaries[-1] > small_grid.max()


def test_mask_weights(small_grid):
    masked = mask_weights(small_grid, 2.0)

    np.testing.assert_array_equal(masked, [[np.nan, np.nan], [3.0, 4.0]])
    np.testing.assert_array_equal(small_grid, [[1.0, 2.0], [3.0, 4.0]])


def test_mask_weights_disabled(small_grid):
    masked = mask_weights(small_grid, 2.0, enabled=False)

    np.testing.assert_array_equal(masked, small_grid)
    assert masked is not small_grid
