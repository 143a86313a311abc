"""Flat-top hexagonal grid geometry."""

from .config import GridSettings
from .coords import DIRECTIONS, Cell, Cube, Hex, Point, round_half_up
from .geo import LatLon
from .grid import HexGrid
from .routing import astar, route

__version__ = "0.1.0"

__all__ = [
    "Cell",
    "Cube",
    "DIRECTIONS",
    "GridSettings",
    "Hex",
    "HexGrid",
    "LatLon",
    "Point",
    "astar",
    "round_half_up",
    "route",
    "__version__",
]
