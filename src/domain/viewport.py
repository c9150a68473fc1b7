"""
Viewport derivation
===================

After a successful search the map is re-centred on the two points of
interest (the geocoded query and its nearest site):

1. **Bounds**   -- the minimal lat/lng box containing both points.
2. **Padding**  -- every side is pushed out by ``ratio x span``
   (10 % by default).
3. **Center**   -- the arithmetic midpoint of the padded box.
4. **Zoom**     -- the largest discrete zoom level at which the padded
   box, projected to Web-Mercator pixels (256 px tiles), still fits the
   configured map size.

The zoom search walks down from ``max_zoom`` and stops at the first level
that fits, so a larger region never yields a higher zoom.  Zero-span
bounds (both points identical) fit at every level and get ``max_zoom``.

Complexity: O(max_zoom - min_zoom) per call.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from .entities import Coordinate, Location, Viewport
from .errors import EmptyCatalogError

TILE_SIZE = 256
MAX_MERCATOR_LAT = 85.0511287798


@dataclass(frozen=True)
class Bounds:
    south: float
    west: float
    north: float
    east: float

    @classmethod
    def from_points(cls, *points: Coordinate) -> Bounds:
        lats = [p.latitude for p in points]
        lngs = [p.longitude for p in points]
        return cls(min(lats), min(lngs), max(lats), max(lngs))

    def pad(self, ratio: float) -> Bounds:
        """Extend each side by *ratio* of the span, clamped to valid degrees."""
        lat_buffer = abs(self.north - self.south) * ratio
        lng_buffer = abs(self.east - self.west) * ratio
        return Bounds(
            south=max(-90.0, self.south - lat_buffer),
            west=max(-180.0, self.west - lng_buffer),
            north=min(90.0, self.north + lat_buffer),
            east=min(180.0, self.east + lng_buffer),
        )

    @property
    def center(self) -> Coordinate:
        return Coordinate(
            (self.south + self.north) / 2, (self.west + self.east) / 2
        )


def _project(lat: float, lng: float) -> tuple[float, float]:
    """Spherical Web-Mercator projection to pixels at zoom 0."""
    lat = max(-MAX_MERCATOR_LAT, min(MAX_MERCATOR_LAT, lat))
    x = TILE_SIZE * (lng + 180.0) / 360.0
    sin_lat = math.sin(math.radians(lat))
    y = TILE_SIZE * (
        0.5 - math.log((1 + sin_lat) / (1 - sin_lat)) / (4 * math.pi)
    )
    return x, y


def fit_zoom(
    bounds: Bounds,
    width_px: int,
    height_px: int,
    min_zoom: int = 0,
    max_zoom: int = 18,
) -> int:
    """Largest zoom in ``[min_zoom, max_zoom]`` at which *bounds* fits."""
    west_x, north_y = _project(bounds.north, bounds.west)
    east_x, south_y = _project(bounds.south, bounds.east)
    span_x = abs(east_x - west_x)
    span_y = abs(south_y - north_y)

    for zoom in range(max_zoom, min_zoom - 1, -1):
        scale = 2 ** zoom
        if span_x * scale <= width_px and span_y * scale <= height_px:
            return zoom
    return min_zoom


def fit_viewport(
    a: Coordinate,
    b: Coordinate,
    *,
    padding: float = 0.1,
    width_px: int = 800,
    height_px: int = 600,
    min_zoom: int = 0,
    max_zoom: int = 18,
) -> Viewport:
    """Viewport showing both *a* and *b* with *padding* around them."""
    padded = Bounds.from_points(a, b).pad(padding)
    return Viewport(
        center=padded.center,
        zoom=fit_zoom(padded, width_px, height_px, min_zoom, max_zoom),
    )


def initial_viewport(catalog: Sequence[Location], zoom: int = 13) -> Viewport:
    """Bounding-box center of the whole catalog at a fixed zoom."""
    if not catalog:
        raise EmptyCatalogError()
    bounds = Bounds.from_points(*(loc.coordinates for loc in catalog))
    return Viewport(center=bounds.center, zoom=zoom)
