"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from src.domain.entities import Coordinate, Location, SearchResult, Viewport
from src.domain.state import ViewState


# ── Requests ──────────────────────────────────────────────────────────


class SearchRequest(BaseModel):
    address: str = Field(
        "",
        max_length=500,
        description="Free-text address; blank input is reported as a search error.",
    )


# ── Responses ─────────────────────────────────────────────────────────


class CoordinateResponse(BaseModel):
    lat: float
    lng: float

    @classmethod
    def from_entity(cls, c: Coordinate) -> CoordinateResponse:
        return cls(lat=c.latitude, lng=c.longitude)


class LocationResponse(BaseModel):
    name: str
    address: str
    coordinates: CoordinateResponse

    @classmethod
    def from_entity(cls, loc: Location) -> LocationResponse:
        return cls(
            name=loc.name,
            address=loc.address,
            coordinates=CoordinateResponse.from_entity(loc.coordinates),
        )


class ViewportResponse(BaseModel):
    center: CoordinateResponse
    zoom: int

    @classmethod
    def from_entity(cls, v: Viewport) -> ViewportResponse:
        return cls(center=CoordinateResponse.from_entity(v.center), zoom=v.zoom)


class SearchResultResponse(BaseModel):
    location: LocationResponse
    distance_km: float
    eta_minutes: int = Field(
        ...,
        description=(
            "Straight-line heuristic (distance x minutes-per-km), "
            "not a routed travel time."
        ),
    )
    distance: str
    duration: str

    @classmethod
    def from_entity(cls, r: SearchResult) -> SearchResultResponse:
        return cls(
            location=LocationResponse.from_entity(r.location),
            distance_km=r.distance_km,
            eta_minutes=r.eta_minutes,
            distance=r.distance_label,
            duration=r.eta_label,
        )


class ViewStateResponse(BaseModel):
    status: str
    query: str
    loading: bool
    error: Optional[str] = None
    result: Optional[SearchResultResponse] = None
    viewport: ViewportResponse
    user_location: Optional[CoordinateResponse] = None
    request_id: int

    @classmethod
    def from_state(cls, s: ViewState) -> ViewStateResponse:
        return cls(
            status=s.status.value,
            query=s.query,
            loading=s.loading,
            error=s.error,
            result=SearchResultResponse.from_entity(s.result) if s.result else None,
            viewport=ViewportResponse.from_entity(s.viewport),
            user_location=(
                CoordinateResponse.from_entity(s.user_location)
                if s.user_location
                else None
            ),
            request_id=s.request_id,
        )


class MarkerResponse(BaseModel):
    position: CoordinateResponse
    color: str
    title: str
    subtitle: Optional[str] = None


class RouteResponse(BaseModel):
    """Endpoints handed to the browser-side routing collaborator."""

    from_: CoordinateResponse = Field(..., alias="from")
    to: CoordinateResponse
    service_url: str
    timeout_ms: int

    model_config = {"populate_by_name": True}


class TileLayerResponse(BaseModel):
    url: str
    attribution: str


class MapViewResponse(BaseModel):
    viewport: ViewportResponse
    tile_layer: TileLayerResponse
    markers: list[MarkerResponse]
    route: Optional[RouteResponse] = None


class HealthResponse(BaseModel):
    status: str = "ok"
