"""
Location catalog loading.

The catalog is static configuration: either the bundled reference sites
or a JSON file named by ``CATALOG_PATH``.  It is loaded once at start-up
and handed out as an immutable tuple.

File format::

    [
      {"name": "...", "address": "...",
       "coordinates": {"lat": 21.0, "lng": 105.8}},
      ...
    ]

``latitude`` / ``longitude`` are accepted as aliases of ``lat`` / ``lng``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from pydantic import AliasChoices, BaseModel, Field, TypeAdapter, ValidationError

from src.data.locations import LOCATIONS
from src.domain.entities import Coordinate, Location
from src.domain.errors import CatalogError

logger = logging.getLogger(__name__)


class _CoordinatesRecord(BaseModel):
    lat: float = Field(
        ..., ge=-90, le=90, validation_alias=AliasChoices("lat", "latitude")
    )
    lng: float = Field(
        ..., ge=-180, le=180, validation_alias=AliasChoices("lng", "longitude")
    )


class _LocationRecord(BaseModel):
    name: str = Field(..., min_length=1)
    address: str
    coordinates: _CoordinatesRecord

    def to_entity(self) -> Location:
        return Location(
            name=self.name,
            address=self.address,
            coordinates=Coordinate(self.coordinates.lat, self.coordinates.lng),
        )


_records = TypeAdapter(list[_LocationRecord])


def load_catalog(path: Optional[str | Path] = None) -> tuple[Location, ...]:
    """
    Return the catalog as an immutable tuple of ``Location``.

    Raises CatalogError if *path* is given but missing or malformed.
    """
    if path is None:
        records = _records.validate_python(LOCATIONS)
        return tuple(r.to_entity() for r in records)

    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise CatalogError(str(path), exc.strerror or str(exc)) from exc

    try:
        records = _records.validate_json(raw)
    except ValidationError as exc:
        raise CatalogError(str(path), f"{exc.error_count()} validation error(s)") from exc

    catalog = tuple(r.to_entity() for r in records)
    logger.info("Loaded %d locations from %s", len(catalog), path)
    return catalog
