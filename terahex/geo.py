"""Placement of geographic positions on the hex plane.

Longitude maps to ``x`` and latitude to ``-y`` so that north points up on a
plane whose y axis grows downwards. No datum or projection handling is done.
"""

from __future__ import annotations

from dataclasses import dataclass

from .coords import Point


@dataclass(frozen=True, slots=True)
class LatLon:
    """Geographic location in degrees."""

    lat: float
    lon: float

    def normalized(self) -> LatLon:
        """Wrap longitude into ``[-180, 180)`` and clamp latitude to ``[-90, 90]``."""

        lon = (self.lon + 180.0) % 360.0 - 180.0
        lat = min(max(self.lat, -90.0), 90.0)
        return LatLon(lat=lat, lon=lon)

    def to_point(self) -> Point:
        return Point(x=self.lon, y=-self.lat)

    @classmethod
    def from_point(cls, point: Point) -> LatLon:
        return cls(lat=-point.y, lon=point.x).normalized()
