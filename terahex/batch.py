"""Vectorised conversions between plane points and cells.

Every function here agrees element-wise with the scalar methods in
:mod:`terahex.coords`, including the half-up rounding and the order in which
rounding ties are settled.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .coords import SQRT3


def _as_pair(a: ArrayLike, b: ArrayLike) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    first = np.asarray(a, dtype=np.float64)
    second = np.asarray(b, dtype=np.float64)
    if first.shape != second.shape:
        raise ValueError(f"shape mismatch: {first.shape} vs {second.shape}")
    return first, second


def _check_size(size: float) -> None:
    if size == 0:
        raise ValueError("size must be non-zero")


def round_cubes(
    x: ArrayLike, y: ArrayLike, z: ArrayLike
) -> tuple[NDArray[np.int64], NDArray[np.int64], NDArray[np.int64]]:
    """Array version of :meth:`terahex.coords.Cube.round`."""

    x, y = _as_pair(x, y)
    _, z = _as_pair(x, z)

    rx = np.floor(x + 0.5)
    ry = np.floor(y + 0.5)
    rz = np.floor(z + 0.5)
    dx, dy, dz = np.abs(rx - x), np.abs(ry - y), np.abs(rz - z)

    fix_x = (dx > dy) & (dx > dz)
    fix_y = ~fix_x & (dy > dz)
    fix_z = ~fix_x & ~fix_y

    out_x = np.where(fix_x, -ry - rz, rx)
    out_y = np.where(fix_y, -rx - rz, ry)
    out_z = np.where(fix_z, -rx - ry, rz)
    return out_x.astype(np.int64), out_y.astype(np.int64), out_z.astype(np.int64)


def points_to_cells(
    xs: ArrayLike, ys: ArrayLike, size: float = 1.0
) -> tuple[NDArray[np.int64], NDArray[np.int64]]:
    """Return ``(cols, rows)`` of the cells containing the given points."""

    _check_size(size)
    xs, ys = _as_pair(xs, ys)
    col = 2 * xs / 3
    row = (-xs + SQRT3 * ys) / 3
    col = col * (1.0 / size)
    row = row * (1.0 / size)
    cx, _, cz = round_cubes(col, -col - row, row)
    return cx, cz


def cells_to_points(
    cols: ArrayLike, rows: ArrayLike, size: float = 1.0
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Return ``(xs, ys)`` of the centers of the given cells."""

    cols, rows = _as_pair(cols, rows)
    col = size * cols
    row = size * rows
    return 1.5 * col, SQRT3 * (row + col / 2)
