import numpy as np
import pytest

from terahex import Cell, Cube, Hex, Point
from terahex.batch import cells_to_points, points_to_cells, round_cubes


def test_round_cubes_matches_scalar_ties():
    cubes = [Cube(0.5, -1.0, 0.5), Cube(-2.5, 1.25, 1.25), Cube(0, 0, 0), Cube(1.5, -0.75, -0.75)]
    rx, ry, rz = round_cubes(
        [c.x for c in cubes], [c.y for c in cubes], [c.z for c in cubes]
    )
    got = [Cube(int(a), int(b), int(c)) for a, b, c in zip(rx, ry, rz)]
    assert got == [c.round() for c in cubes]


@pytest.mark.parametrize("size", [1.0, 0.37, 12.5])
def test_points_to_cells_matches_scalar(size: float):
    rng = np.random.default_rng(7)
    xs = rng.uniform(-50.0, 50.0, 500)
    ys = rng.uniform(-50.0, 50.0, 500)
    cols, rows = points_to_cells(xs, ys, size)
    expected = [Point(float(x), float(y)).to_hex().to_cell(size) for x, y in zip(xs, ys)]
    assert [Cell(int(c), int(r)) for c, r in zip(cols, rows)] == expected
    assert cols.dtype == np.int64


def test_cells_to_points_matches_scalar():
    cells = [Cell(0, 0), Cell(3, -2), Cell(-7, 11)]
    xs, ys = cells_to_points([c.col for c in cells], [c.row for c in cells], 2.0)
    for cell, x, y in zip(cells, xs, ys):
        assert Point(float(x), float(y)) == cell.to_hex(2.0).to_point()


def test_cells_roundtrip_through_points():
    cols = np.arange(-10, 10)
    rows = np.arange(15, -5, -1)
    xs, ys = cells_to_points(cols, rows, 0.3)
    back_cols, back_rows = points_to_cells(xs, ys, 0.3)
    np.testing.assert_array_equal(back_cols, cols)
    np.testing.assert_array_equal(back_rows, rows)


def test_preserves_shape():
    xs = np.zeros((2, 3))
    cols, rows = points_to_cells(xs, xs)
    assert cols.shape == (2, 3)
    assert Hex().to_cell() == Cell(int(cols[0, 0]), int(rows[0, 0]))


def test_shape_mismatch():
    with pytest.raises(ValueError):
        points_to_cells([0.0, 1.0], [0.0])
    with pytest.raises(ValueError):
        round_cubes([0.0], [0.0], [0.0, 0.0])


def test_zero_size_lookup_is_rejected():
    with pytest.raises(ValueError):
        points_to_cells([0.0], [0.0], 0.0)


def test_negative_size_matches_scalar():
    cells = [Cell(0, 0), Cell(3, -2), Cell(-7, 11)]
    xs, ys = cells_to_points([c.col for c in cells], [c.row for c in cells], -1.5)
    for cell, x, y in zip(cells, xs, ys):
        assert Point(float(x), float(y)) == cell.to_hex(-1.5).to_point()
    cols, rows = points_to_cells(xs, ys, -1.5)
    assert [Cell(int(c), int(r)) for c, r in zip(cols, rows)] == cells
