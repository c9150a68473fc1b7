"""
FastAPI application factory.

* Registers routes for search, map view and admin.
* Loads the location catalog and opens the shared geocoding HTTP client
  via lifespan events; the client is closed on shutdown.
* Applies rate-limiting middleware.
* Swagger / OpenAPI UI available at ``/docs``.
"""

from contextlib import asynccontextmanager
import logging

import httpx
from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from src.api.middleware import limiter
from src.api.routes import admin, map_view, search
from src.config import settings
from src.infrastructure.catalog import load_catalog
from src.infrastructure.geocoding import NominatimGeocoder
from src.services.search import SearchController

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the search controller on startup; close HTTP client on shutdown."""
    catalog = load_catalog(settings.catalog_path)
    async with httpx.AsyncClient() as client:
        geocoder = NominatimGeocoder(
            client,
            settings.geocoding_url,
            timeout_seconds=settings.geocoding_timeout_seconds,
            user_agent=settings.geocoding_user_agent,
        )
        app.state.controller = SearchController(
            geocoder,
            catalog,
            minutes_per_km=settings.eta_minutes_per_km,
            padding=settings.viewport_padding,
            map_width_px=settings.map_width_px,
            map_height_px=settings.map_height_px,
            min_zoom=settings.min_zoom,
            max_zoom=settings.max_zoom,
            initial_zoom=settings.initial_zoom,
        )
        logger.info("Search controller ready (%d locations)", len(catalog))
        yield
    logger.info("Geocoding client closed")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Nearest Campus Finder API",
        description=(
            "Geocodes an address, finds the nearest of a fixed set of "
            "sites and describes the map view (viewport, markers, route "
            "endpoints) for a browser-side mapping library."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Routers
    app.include_router(search.router, prefix="/api/v1")
    app.include_router(map_view.router, prefix="/api/v1")
    app.include_router(admin.router, prefix="/api/v1")

    return app
