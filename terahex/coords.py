"""Flat-top hexagonal grid coordinates.

Four value types form a conversion chain:

* :class:`Point` - Cartesian ``(x, y)``, x pointing right and y pointing down.
* :class:`Cube` - redundant ``(x, y, z)`` with ``x + y + z == 0``, used for
  rounding and interpolation.
* :class:`Hex` - fractional axial ``(col, row)``.
* :class:`Cell` - integer axial ``(col, row)``, one tile of the grid.

The layout follows Amit Patel's guide at
https://www.redblobgames.com/grids/hexagons/.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import accumulate, repeat
from math import cos, floor, sin, sqrt
from typing import ClassVar, Iterator

SQRT3 = sqrt(3.0)

# (dcol, drow) in move order: N, NE, SE, S, SW, NW
DIRECTIONS: tuple[tuple[int, int], ...] = (
    (0, -1),
    (+1, -1),
    (+1, 0),
    (0, +1),
    (-1, +1),
    (-1, 0),
)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties towards positive infinity.

    The builtin :func:`round` rounds ties to even, which picks a different
    cell for points lying exactly on a tile edge.
    """

    return floor(value + 0.5)


def _require_nonzero(size: float) -> None:
    if size == 0:
        raise ValueError("size must be non-zero")


@dataclass(frozen=True, slots=True)
class Point:
    x: float
    y: float

    def rotate(self, angle: float) -> Point:
        """Rotate around the origin by ``angle`` radians."""

        c, s = cos(angle), sin(angle)
        return Point(self.x * c - self.y * s, self.x * s + self.y * c)

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def to_hex(self) -> Hex:
        return Hex(col=2 * self.x / 3, row=(-self.x + SQRT3 * self.y) / 3)


@dataclass(frozen=True, slots=True)
class Cube:
    """Cube coordinates, only used by :class:`Hex` for rounding and lines."""

    x: float
    y: float
    z: float

    def __add__(self, other: Cube) -> Cube:
        return Cube(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Cube) -> Cube:
        return Cube(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, k: float) -> Cube:
        return Cube(k * self.x, k * self.y, k * self.z)

    def length(self) -> float:
        return max(abs(self.x), abs(self.y), abs(self.z))

    def distance_to(self, other: Cube) -> float:
        return (other - self).length()

    def round(self) -> Cube:
        """Snap to the nearest lattice point.

        Each axis is rounded on its own, then the axis with the largest
        rounding error is recomputed from the other two so the result sums
        to zero. Ties are settled in a fixed order: x first, then y against z.
        """

        rx, ry, rz = round_half_up(self.x), round_half_up(self.y), round_half_up(self.z)
        dx, dy, dz = abs(rx - self.x), abs(ry - self.y), abs(rz - self.z)

        if dx > dy and dx > dz:
            rx = -ry - rz
        elif dy > dz:
            ry = -rx - rz
        else:
            rz = -rx - ry
        return Cube(rx, ry, rz)

    def path_to(self, other: Cube, steps: int) -> list[Cube]:
        """Return ``steps + 1`` evenly spaced cubes from ``self`` to ``other``.

        The points are not rounded. With ``steps < 1`` only ``self`` is returned.
        """

        if steps < 1:
            return [self]
        step = (other - self).scale(1.0 / steps)
        return list(accumulate(repeat(step, steps), initial=self))

    def to_hex(self) -> Hex:
        return Hex(col=self.x, row=self.z)


@dataclass(frozen=True, slots=True)
class Hex:
    """Fractional axial coordinates with columns and rows."""

    col: float = 0.0
    row: float = 0.0

    def scale(self, k: float) -> Hex:
        return Hex(col=k * self.col, row=k * self.row)

    def __add__(self, other: Hex) -> Hex:
        return Hex(col=self.col + other.col, row=self.row + other.row)

    def __sub__(self, other: Hex) -> Hex:
        return Hex(col=self.col - other.col, row=self.row - other.row)

    def to_cube(self) -> Cube:
        return Cube(x=self.col, y=-self.col - self.row, z=self.row)

    def round(self) -> Cell:
        snapped = self.to_cube().round().to_hex()
        return Cell(col=int(snapped.col), row=int(snapped.row))

    def distance_to(self, other: Hex) -> float:
        return self.to_cube().distance_to(other.to_cube())

    def path_to(self, other: Hex, steps: int) -> list[Hex]:
        return [cube.to_hex() for cube in self.to_cube().path_to(other.to_cube(), steps)]

    def to_point(self) -> Point:
        return Point(x=1.5 * self.col, y=SQRT3 * (self.row + self.col / 2))

    def to_cell(self, size: float = 1.0) -> Cell:
        """Return the cell containing this position on a grid of ``size``.

        A negative ``size`` mirrors the grid through the origin.
        """

        _require_nonzero(size)
        return self.scale(1.0 / size).round()


@dataclass(frozen=True, slots=True)
class Cell:
    """Discrete cell of the hexagonal grid."""

    col: int = 0
    row: int = 0

    SUB_CENTER: ClassVar[Cell]
    SUB_N: ClassVar[Cell]
    SUB_S: ClassVar[Cell]
    SUB_E: ClassVar[Cell]
    SUB_W: ClassVar[Cell]
    SUB_NE: ClassVar[Cell]
    SUB_NW: ClassVar[Cell]
    SUB_SE: ClassVar[Cell]
    SUB_SW: ClassVar[Cell]
    OUTLIER_NE: ClassVar[Cell]
    OUTLIER_NW: ClassVar[Cell]
    OUTLIER_SE: ClassVar[Cell]
    OUTLIER_SW: ClassVar[Cell]
    ROSETTE: ClassVar[tuple[Cell, ...]]

    def to_hex(self, size: float = 1.0) -> Hex:
        return Hex(col=self.col, row=self.row).scale(size)

    def translate(self, dcol: int, drow: int) -> Cell:
        return Cell(self.col + dcol, self.row + drow)

    def __add__(self, other: Cell) -> Cell:
        return self.translate(other.col, other.row)

    def __sub__(self, other: Cell) -> Cell:
        return self.translate(-other.col, -other.row)

    def move_n(self) -> Cell:
        return Cell(self.col, self.row - 1)

    def move_s(self) -> Cell:
        return Cell(self.col, self.row + 1)

    def move_ne(self) -> Cell:
        return Cell(self.col + 1, self.row - 1)

    def move_se(self) -> Cell:
        return Cell(self.col + 1, self.row)

    def move_nw(self) -> Cell:
        return Cell(self.col - 1, self.row)

    def move_sw(self) -> Cell:
        return Cell(self.col - 1, self.row + 1)

    def neighbors(self) -> Iterator[Cell]:
        """Yield the six adjacent cells, clockwise starting north."""

        for dcol, drow in DIRECTIONS:
            yield self.translate(dcol, drow)

    def distance_to(self, other: Cell) -> int:
        return round_half_up(self.to_hex().distance_to(other.to_hex()))

    def path_to(self, other: Cell) -> list[Cell]:
        """Return the straight line of cells from ``self`` to ``other`` inclusive."""

        steps = self.distance_to(other)
        size = 1.0
        return [
            h.to_cell(size)
            for h in self.to_hex(size).path_to(other.to_hex(size), steps)
        ]


# Sub-cell lattice used by subdivision schemes: a rosette of the center and its
# six neighbors, plus two-hop offsets outside the ring.
Cell.SUB_CENTER = Cell()
Cell.SUB_N = Cell.SUB_CENTER.move_n()
Cell.SUB_S = Cell.SUB_CENTER.move_s()
Cell.SUB_E = Cell.SUB_CENTER.move_ne().move_se()
Cell.SUB_W = Cell.SUB_CENTER.move_nw().move_sw()
Cell.SUB_NE = Cell.SUB_CENTER.move_ne()
Cell.SUB_NW = Cell.SUB_CENTER.move_nw()
Cell.SUB_SE = Cell.SUB_CENTER.move_se()
Cell.SUB_SW = Cell.SUB_CENTER.move_sw()

Cell.OUTLIER_NE = Cell.SUB_CENTER.move_n().move_ne()
Cell.OUTLIER_NW = Cell.SUB_CENTER.move_n().move_nw()
Cell.OUTLIER_SE = Cell.SUB_CENTER.move_s().move_se()
Cell.OUTLIER_SW = Cell.SUB_CENTER.move_s().move_sw()

Cell.ROSETTE = (Cell.SUB_CENTER, *Cell.SUB_CENTER.neighbors())
