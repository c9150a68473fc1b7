"""Tests for the Nominatim client against an in-process mock transport."""

from __future__ import annotations

import httpx
import pytest

from src.domain.entities import Coordinate
from src.domain.errors import AddressNotFoundError, GeocodingServiceError
from src.infrastructure.geocoding import NominatimGeocoder
from tests.conftest import GEOCODING_URL, mock_client


def _geocoder(handler) -> NominatimGeocoder:
    return NominatimGeocoder(
        mock_client(handler), GEOCODING_URL, timeout_seconds=10.0, user_agent="test-agent"
    )


@pytest.mark.asyncio
async def test_first_result_is_parsed_as_float():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json=[
                {"lat": "21.0373", "lon": "105.7827", "display_name": "first"},
                {"lat": "10.0", "lon": "100.0", "display_name": "second"},
            ],
        )

    coord = await _geocoder(handler).geocode("Xuân Thủy")
    assert coord == Coordinate(21.0373, 105.7827)


@pytest.mark.asyncio
async def test_request_shape():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[{"lat": "1", "lon": "2"}])

    await _geocoder(handler).geocode("42C Lý Thường Kiệt, Hà Nội")

    (request,) = seen
    assert request.method == "GET"
    assert str(request.url).startswith(GEOCODING_URL)
    assert request.url.params["format"] == "json"
    assert request.url.params["q"] == "42C Lý Thường Kiệt, Hà Nội"
    # The address is URL-encoded on the wire
    assert " " not in request.url.query.decode()
    assert request.headers["User-Agent"] == "test-agent"


@pytest.mark.asyncio
async def test_empty_result_is_not_found():
    geocoder = _geocoder(lambda request: httpx.Response(200, json=[]))
    with pytest.raises(AddressNotFoundError) as exc_info:
        await geocoder.geocode("nowhere")
    assert exc_info.value.address == "nowhere"
    assert "Address not found" in str(exc_info.value)


@pytest.mark.asyncio
async def test_timeout_maps_to_service_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(GeocodingServiceError) as exc_info:
        await _geocoder(handler).geocode("slow")
    assert "timeout" in exc_info.value.detail


@pytest.mark.asyncio
async def test_transport_error_maps_to_service_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(GeocodingServiceError):
        await _geocoder(handler).geocode("offline")


@pytest.mark.asyncio
async def test_http_error_status_maps_to_service_error():
    geocoder = _geocoder(lambda request: httpx.Response(503, text="busy"))
    with pytest.raises(GeocodingServiceError) as exc_info:
        await geocoder.geocode("busy")
    assert exc_info.value.detail == "HTTP 503"


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, text="<html>not json</html>"),
        httpx.Response(200, json={"lat": "1", "lon": "2"}),
        httpx.Response(200, json=["just a string"]),
        httpx.Response(200, json=[{"lat": "1"}]),
        httpx.Response(200, json=[{"lat": "north", "lon": "2"}]),
        httpx.Response(200, json=[{"lat": None, "lon": "2"}]),
        httpx.Response(200, json=[{"lat": "95.0", "lon": "2"}]),
    ],
    ids=[
        "not-json",
        "object-not-array",
        "hit-not-object",
        "missing-lon",
        "non-numeric",
        "null-lat",
        "out-of-range",
    ],
)
@pytest.mark.asyncio
async def test_malformed_response_maps_to_service_error(response):
    geocoder = _geocoder(lambda request: response)
    with pytest.raises(GeocodingServiceError):
        await geocoder.geocode("anything")
