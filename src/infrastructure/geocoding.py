"""
Nominatim geocoding client.

One ``GET <url>?format=json&q=<address>`` per search, no retry.  The
first hit's ``lat`` / ``lon`` (decimal strings) become the query
coordinate.  Every failure is mapped onto the search error hierarchy:

* empty result list          -> ``AddressNotFoundError``
* transport error / timeout  -> ``GeocodingServiceError``
* non-2xx / malformed body   -> ``GeocodingServiceError``
"""

from __future__ import annotations

import logging

import httpx

from src.domain.entities import Coordinate
from src.domain.errors import (
    AddressNotFoundError,
    GeocodingServiceError,
    InvalidCoordinateError,
)

logger = logging.getLogger(__name__)


class NominatimGeocoder:
    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: str,
        timeout_seconds: float = 10.0,
        user_agent: str | None = None,
    ) -> None:
        self._client = client
        self._base_url = base_url
        self._timeout = timeout_seconds
        self._headers = {"Accept": "application/json"}
        if user_agent:
            self._headers["User-Agent"] = user_agent

    async def geocode(self, address: str) -> Coordinate:
        """Resolve free-text *address* to a coordinate."""
        try:
            response = await self._client.get(
                self._base_url,
                params={"format": "json", "q": address},
                headers=self._headers,
                timeout=self._timeout,
            )
            response.raise_for_status()
        except httpx.TimeoutException as e:
            logger.warning("Geocoding timed out for %r", address)
            raise GeocodingServiceError(f"timeout: {e}") from e
        except httpx.HTTPStatusError as e:
            logger.warning("Geocoding API error: %s", e.response.status_code)
            raise GeocodingServiceError(
                f"HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.warning("Geocoding request failed: %s", e)
            raise GeocodingServiceError(str(e)) from e

        try:
            data = response.json()
        except ValueError as e:
            raise GeocodingServiceError("response is not valid JSON") from e

        if not isinstance(data, list):
            raise GeocodingServiceError("expected a JSON array of results")
        if not data:
            logger.info("No geocoding results for %r", address)
            raise AddressNotFoundError(address)

        return _parse_hit(data[0])


def _parse_hit(hit: object) -> Coordinate:
    """Extract the coordinate from one Nominatim result object."""
    if not isinstance(hit, dict):
        raise GeocodingServiceError("result is not a JSON object")
    try:
        return Coordinate(float(hit["lat"]), float(hit["lon"]))
    except KeyError as e:
        raise GeocodingServiceError(f"result has no {e.args[0]!r} field") from e
    except InvalidCoordinateError as e:
        raise GeocodingServiceError(str(e)) from e
    except (TypeError, ValueError) as e:
        raise GeocodingServiceError(f"non-numeric coordinate: {e}") from e
