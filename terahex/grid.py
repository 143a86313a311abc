"""A hex grid placed on the plane according to :class:`GridSettings`."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .config import GridSettings
from .coords import Cell, Point
from .geo import LatLon

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HexGrid:
    """Maps plane and geographic positions to cells and back.

    Positions are shifted by the configured origin and rotated by
    ``-settings.rotation`` before entering hex space; cell centers undergo
    the inverse transform on the way out.
    """

    settings: GridSettings = field(default_factory=GridSettings)

    def cell_at(self, point: Point) -> Cell:
        s = self.settings
        local = (point - Point(s.origin_x, s.origin_y)).rotate(-s.rotation)
        cell = local.to_hex().to_cell(s.cell_size)
        logger.debug("point %s falls in %s", point, cell)
        return cell

    def center_of(self, cell: Cell) -> Point:
        s = self.settings
        local = cell.to_hex(s.cell_size).to_point()
        return local.rotate(s.rotation) + Point(s.origin_x, s.origin_y)

    def cell_at_latlon(self, loc: LatLon) -> Cell:
        return self.cell_at(loc.normalized().to_point())

    def center_latlon(self, cell: Cell) -> LatLon:
        return LatLon.from_point(self.center_of(cell))

    def distance(self, a: Cell, b: Cell) -> int:
        return a.distance_to(b)

    def line(self, a: Cell, b: Cell) -> list[Cell]:
        path = a.path_to(b)
        logger.debug("line %s -> %s spans %d cells", a, b, len(path))
        return path
