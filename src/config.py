"""Centralised application settings loaded from environment / .env file."""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Geocoding
    geocoding_url: str = "https://nominatim.openstreetmap.org/search"
    geocoding_timeout_seconds: float = 10.0
    geocoding_user_agent: str = "nearest-campus-finder/1.0"

    # Catalog (None -> bundled reference sites)
    catalog_path: Optional[str] = None

    # Search heuristics
    eta_minutes_per_km: float = 3.0  # ~20 km/h straight-line proxy
    viewport_padding: float = 0.1  # 10 % of the bounds span on every side

    # Map view
    map_width_px: int = 800
    map_height_px: int = 600
    min_zoom: int = 0
    max_zoom: int = 18
    initial_zoom: int = 13
    tile_url: str = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
    tile_attribution: str = (
        '&copy; <a href="https://www.openstreetmap.org/copyright">'
        "OpenStreetMap</a> contributors"
    )

    # Routing collaborator (browser side)
    routing_service_url: str = "https://router.project-osrm.org/route/v1"
    routing_timeout_ms: int = 10_000

    # API
    rate_limit: str = "100/minute"
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
