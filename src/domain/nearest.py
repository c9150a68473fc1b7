"""
Nearest-site selection
======================

Linear scan over the catalog keeping the minimum Haversine distance.

* Seeded with the first entry; replaced only on a strictly smaller
  distance, so the earliest entry in catalog order wins ties.
* Complexity: O(n) in catalog size.  The catalog holds a handful of
  sites, so no spatial index is warranted.

ETA heuristic
-------------
``eta_minutes = round(distance_km x minutes_per_km)`` with a default of
3 min/km (an effective 20 km/h over the straight line).  It is a
placeholder for display only and is *not* a routing-service duration.
"""

from __future__ import annotations

import math
from typing import Sequence

from .distance import haversine_km
from .entities import Coordinate, Location, SearchResult
from .errors import EmptyCatalogError

DEFAULT_MINUTES_PER_KM = 3.0


def find_nearest(
    query: Coordinate, catalog: Sequence[Location]
) -> tuple[Location, float]:
    """Return ``(location, distance_km)`` of the entry closest to *query*."""
    if not catalog:
        raise EmptyCatalogError()

    nearest = catalog[0]
    shortest = haversine_km(query, nearest.coordinates)
    for location in catalog[1:]:
        d = haversine_km(query, location.coordinates)
        if d < shortest:
            shortest = d
            nearest = location
    return nearest, shortest


def estimate_eta_minutes(
    distance_km: float, minutes_per_km: float = DEFAULT_MINUTES_PER_KM
) -> int:
    """Synthetic travel-time estimate in whole minutes."""
    # Halves round up, not to even
    return math.floor(distance_km * minutes_per_km + 0.5)


def nearest_result(
    query: Coordinate,
    catalog: Sequence[Location],
    minutes_per_km: float = DEFAULT_MINUTES_PER_KM,
) -> SearchResult:
    location, distance = find_nearest(query, catalog)
    return SearchResult(
        location=location,
        distance_km=distance,
        eta_minutes=estimate_eta_minutes(distance, minutes_per_km),
    )
