"""
Map view endpoints
==================

GET /api/v1/locations -- the catalog, for the location list
GET /api/v1/map       -- everything the mapping library needs to draw

The backend only describes the view.  Tiles, the route line and its real
travel time come from the browser-side mapping / routing collaborator.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from src.api.dependencies import get_controller
from src.api.schemas import (
    CoordinateResponse,
    LocationResponse,
    MapViewResponse,
    MarkerResponse,
    RouteResponse,
    TileLayerResponse,
    ViewportResponse,
)
from src.config import settings
from src.services.search import SearchController

router = APIRouter(tags=["map"])

SITE_MARKER_COLOR = "#0066CC"
USER_MARKER_COLOR = "#00CC66"


@router.get(
    "/locations",
    response_model=list[LocationResponse],
    summary="List all known locations",
)
async def list_locations(controller: SearchController = Depends(get_controller)):
    return [LocationResponse.from_entity(loc) for loc in controller.catalog]


@router.get(
    "/map",
    response_model=MapViewResponse,
    summary="Describe the current map view",
)
async def get_map_view(controller: SearchController = Depends(get_controller)):
    state = controller.state

    markers = [
        MarkerResponse(
            position=CoordinateResponse.from_entity(loc.coordinates),
            color=SITE_MARKER_COLOR,
            title=loc.name,
            subtitle=loc.address,
        )
        for loc in controller.catalog
    ]

    route = None
    # Query marker and route appear once a search has succeeded
    if state.user_location and state.result:
        user = CoordinateResponse.from_entity(state.user_location)
        markers.append(
            MarkerResponse(position=user, color=USER_MARKER_COLOR, title="Your Location")
        )
        route = RouteResponse(
            from_=user,
            to=CoordinateResponse.from_entity(state.result.location.coordinates),
            service_url=settings.routing_service_url,
            timeout_ms=settings.routing_timeout_ms,
        )

    return MapViewResponse(
        viewport=ViewportResponse.from_entity(state.viewport),
        tile_layer=TileLayerResponse(
            url=settings.tile_url, attribution=settings.tile_attribution
        ),
        markers=markers,
        route=route,
    )
