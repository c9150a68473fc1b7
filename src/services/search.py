"""
Search orchestration
====================

``SearchController`` owns the single ``ViewState`` and drives it through
``apply_event``:

1. Issue the next request id.  Every submission, blank or not,
   supersedes whatever search is still in flight.
2. Blank input -> ``SearchRejected`` (no network call).
3. ``SearchStarted`` -> LOADING.
4. Geocode (the only suspension point), then pick the nearest site and
   fit the viewport around both points.
5. ``SearchSucceeded`` / ``SearchFailed``; ``apply_event`` drops the
   outcome if a newer request id has been issued meanwhile.

Runs on a single event loop, so sequencing by request id is enough and
no locking is needed.
"""

from __future__ import annotations

import itertools
import logging
from typing import Protocol, Sequence

from src.domain.entities import Coordinate, Location, Viewport
from src.domain.errors import (
    EmptyCatalogError,
    EmptyInputError,
    FinderError,
    GeocodingServiceError,
)
from src.domain.nearest import DEFAULT_MINUTES_PER_KM, nearest_result
from src.domain.state import (
    SearchEvent,
    SearchFailed,
    SearchRejected,
    SearchStarted,
    SearchSucceeded,
    ViewState,
    apply_event,
)
from src.domain.viewport import fit_viewport, initial_viewport

logger = logging.getLogger(__name__)


class Geocoder(Protocol):
    async def geocode(self, address: str) -> Coordinate: ...


class SearchController:
    """Holds the map view state and runs nearest-location searches."""

    def __init__(
        self,
        geocoder: Geocoder,
        catalog: Sequence[Location],
        *,
        minutes_per_km: float = DEFAULT_MINUTES_PER_KM,
        padding: float = 0.1,
        map_width_px: int = 800,
        map_height_px: int = 600,
        min_zoom: int = 0,
        max_zoom: int = 18,
        initial_zoom: int = 13,
    ) -> None:
        self.geocoder = geocoder
        self.catalog = tuple(catalog)
        self.minutes_per_km = minutes_per_km
        self.padding = padding
        self.map_width_px = map_width_px
        self.map_height_px = map_height_px
        self.min_zoom = min_zoom
        self.max_zoom = max_zoom
        self.initial_zoom = initial_zoom

        self._ids = itertools.count(1)
        self._state = ViewState(viewport=self._initial_viewport())

    @property
    def state(self) -> ViewState:
        return self._state

    # ── Public API ────────────────────────────────────────────────────

    async def search(self, address: str) -> ViewState:
        """Run one search and return the state once it has settled."""
        request_id = next(self._ids)

        if not address or not address.strip():
            self._dispatch(
                SearchRejected(request_id, address, str(EmptyInputError()))
            )
            return self._state

        self._dispatch(SearchStarted(request_id, address))
        self._dispatch(await self._run(request_id, address))
        return self._state

    def reset(self) -> ViewState:
        """Back to IDLE on the catalog viewport; in-flight searches are dropped."""
        self._state = ViewState(
            viewport=self._initial_viewport(),
            request_id=next(self._ids),
        )
        return self._state

    # ── Internals ─────────────────────────────────────────────────────

    def _initial_viewport(self) -> Viewport:
        try:
            return initial_viewport(self.catalog, self.initial_zoom)
        except EmptyCatalogError:
            logger.warning("Location catalog is empty; searches will fail")
            return Viewport(center=Coordinate(0.0, 0.0), zoom=self.min_zoom)

    async def _run(self, request_id: int, address: str) -> SearchEvent:
        try:
            query = await self.geocoder.geocode(address)
            result = nearest_result(query, self.catalog, self.minutes_per_km)
        except FinderError as exc:
            logger.info("Search #%d for %r failed: %s", request_id, address, exc)
            return SearchFailed(request_id, str(exc))
        except Exception:
            logger.exception("Unexpected error in search #%d", request_id)
            return SearchFailed(
                request_id, str(GeocodingServiceError("unexpected error"))
            )

        viewport = fit_viewport(
            query,
            result.location.coordinates,
            padding=self.padding,
            width_px=self.map_width_px,
            height_px=self.map_height_px,
            min_zoom=self.min_zoom,
            max_zoom=self.max_zoom,
        )
        logger.info(
            "Search #%d: nearest to %r is %s (%.2f km)",
            request_id,
            address,
            result.location.name,
            result.distance_km,
        )
        return SearchSucceeded(request_id, result, viewport, query)

    def _dispatch(self, event: SearchEvent) -> None:
        new_state = apply_event(self._state, event)
        if new_state is self._state:
            logger.debug("Discarding stale outcome of search #%d", event.request_id)
            return
        self._state = new_state
