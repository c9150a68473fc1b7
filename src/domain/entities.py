"""
Domain value objects.

All entities are frozen: the catalog is loaded once and shared read-only,
search results are replaced wholesale by the next search.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .errors import InvalidCoordinateError


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        lat, lng = self.latitude, self.longitude
        if not (math.isfinite(lat) and math.isfinite(lng)):
            raise InvalidCoordinateError(lat, lng)
        if not (-90.0 <= lat <= 90.0 and -180.0 <= lng <= 180.0):
            raise InvalidCoordinateError(lat, lng)

    def as_pair(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)


@dataclass(frozen=True)
class Location:
    name: str
    address: str
    coordinates: Coordinate


@dataclass(frozen=True)
class SearchResult:
    """
    Outcome of one successful search.

    ``eta_minutes`` is a synthetic straight-line estimate (see
    ``nearest.estimate_eta_minutes``), not a routed travel time.
    """

    location: Location
    distance_km: float
    eta_minutes: int

    @property
    def distance_label(self) -> str:
        return f"{self.distance_km:.2f} km"

    @property
    def eta_label(self) -> str:
        return f"{self.eta_minutes} minutes"


@dataclass(frozen=True)
class Viewport:
    center: Coordinate
    zoom: int
