import numpy as np
import pytest

from pairplots.layout import GridLayout


@pytest.mark.parametrize("n", [1, 2, 3, 4, 7])
def test_triangular_cell_count(n):
    layout = GridLayout(n)

    cells = list(layout.cells())

    assert len(cells) == n * (n + 1) // 2 == layout.num_cells
    assert all(row >= col for row, col in cells)


def test_three_variable_grid():
    cells = list(GridLayout(3).cells())

    diagonal = [cell for cell in cells if cell[0] == cell[1]]
    upper = [cell for cell in cells if cell[0] < cell[1]]
    assert len(cells) == 6
    assert len(diagonal) == 3
    assert upper == []


@pytest.mark.parametrize(
    "row, col, expected",
    [
        (1, 1, (20, 20, 40, 40)),
        (2, 1, (20, 61, 40, 40)),
        (3, 2, (61, 102, 40, 40)),
        (3, 3, (102, 102, 40, 40)),
    ],
)
def test_cell_geometry(row, col, expected):
    assert GridLayout(3).cell_geometry(row, col) == expected


def test_cell_geometry_scaled():
    assert GridLayout(3, scale=2).cell_geometry(2, 1) == (40, 122, 80, 80)


@pytest.mark.parametrize("row, col", [(1, 2), (2, 3), (0, 0), (4, 1), (1, 4)])
def test_cell_geometry_rejects_unallocated_cells(row, col):
    with pytest.raises(ValueError):
        GridLayout(3).cell_geometry(row, col)


@pytest.mark.parametrize("n", [1, 3, 5])
def test_subplot_index_is_sequential(n):
    layout = GridLayout(n)

    indices = [layout.subplot_index(row, col) for row, col in layout.cells()]

    assert indices == list(range(1, layout.num_cells + 1))


@pytest.mark.parametrize("n, expected", [(1, (61, 71)), (3, (143, 153))])
def test_canvas_size(n, expected):
    assert GridLayout(n).canvas_size() == expected


def test_figure_size():
    width, height = GridLayout(3).figure_size(display=4)

    assert width == pytest.approx(143 * 4 / 25.4)
    assert height == pytest.approx(153 * 4 / 25.4)


@pytest.mark.parametrize("n, expected", [(2, 20), (3, 5), (4, 20), (5, 5)])
def test_pad_bonus_parity(n, expected):
    assert GridLayout(n).pad_bonus == expected


@pytest.mark.parametrize(
    "n, kind, expected",
    [
        (3, "lens", (107, 20, 36, 36)),
        (3, "bonus", (107, 20, 31, 36)),
        (4, "lens", (122, 20, 62, 62)),
        (4, "bonus", (122, 20, 42, 62)),
    ],
)
def test_auxiliary_geometry(n, kind, expected):
    assert GridLayout(n).auxiliary_geometry(kind) == expected


def test_auxiliary_geometry_absent():
    assert GridLayout(3).auxiliary_geometry(None) is None


def test_auxiliary_geometry_bad_kind():
    with pytest.raises(ValueError):
        GridLayout(3).auxiliary_geometry("inset")


@pytest.mark.parametrize(
    "row, col, expected",
    [
        (1, 1, (False, False, True)),
        (2, 1, (False, True, False)),
        (2, 2, (False, False, True)),
        (3, 1, (True, True, False)),
        (3, 2, (True, False, False)),
        (3, 3, (True, False, True)),
    ],
)
def test_axis_visibility(row, col, expected):
    visibility = GridLayout(3).axis_visibility(row, col)

    show_x, show_y, title = expected
    assert visibility["xlabel"] == visibility["xticklabels"] == show_x
    assert visibility["ylabel"] == visibility["yticklabels"] == show_y
    assert visibility["title"] == title


def test_axis_visibility_three_d():
    visibility = GridLayout(3).axis_visibility(2, 2, three_d=True)

    assert visibility["xlabel"] and visibility["ylabel"]
    assert visibility["xticklabels"] and visibility["yticklabels"]


def test_figure_rect():
    layout = GridLayout(1)

    rect = layout.figure_rect(layout.cell_geometry(1, 1))

    np.testing.assert_array_almost_equal(
        rect, (20 / 61, 1 - 60 / 71, 40 / 61, 40 / 71)
    )


@pytest.mark.parametrize("n, error", [(0, ValueError), (2.0, TypeError)])
def test_bad_grid_size(n, error):
    with pytest.raises(error):
        GridLayout(n)


def test_bad_scale():
    with pytest.raises(ValueError):
        GridLayout(2, scale=0)
