"""
Search orchestration tests.

Demonstrates:
1. Blank input fails locally without touching the geocoder.
2. Geocoding failures become ERROR while the last result is preserved.
3. A slow, superseded search cannot overwrite a newer outcome.
"""

from __future__ import annotations

import asyncio

import pytest

from src.domain.entities import Coordinate
from src.domain.enums import SearchStatus
from src.domain.errors import GeocodingServiceError
from src.domain.nearest import estimate_eta_minutes
from src.services.search import SearchController
from tests.conftest import CO_SO_3, FakeGeocoder


class TestSearch:
    def test_starts_idle_on_catalog_view(self, controller):
        state = controller.state
        assert state.status == SearchStatus.IDLE
        assert state.viewport.zoom == 13
        assert state.result is None

    @pytest.mark.asyncio
    async def test_end_to_end_exact_site(self, controller):
        state = await controller.search("Xuân Thủy, Cầu Giấy")

        assert state.status == SearchStatus.SUCCESS
        assert state.result.location.name == "Cơ sở 3"
        assert state.result.distance_label == "0.00 km"
        assert state.result.eta_minutes == 0
        assert state.user_location == CO_SO_3
        assert state.viewport.center == CO_SO_3
        assert state.viewport.zoom == controller.max_zoom
        assert state.error is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("blank", ["", "   ", "\t\n"])
    async def test_blank_input_skips_geocoding(self, controller, geocoder, blank):
        state = await controller.search(blank)
        assert state.status == SearchStatus.ERROR
        assert state.error == "Please enter an address"
        assert geocoder.calls == []

    @pytest.mark.asyncio
    async def test_not_found_preserves_previous_result(self, controller):
        ok = await controller.search("Xuân Thủy, Cầu Giấy")
        failed = await controller.search("Atlantis")

        assert failed.status == SearchStatus.ERROR
        assert failed.error.startswith("Address not found")
        assert failed.result == ok.result
        assert failed.viewport == ok.viewport
        assert failed.user_location == ok.user_location
        assert not failed.loading

    @pytest.mark.asyncio
    async def test_service_error_message(self, controller, geocoder):
        geocoder.answers["down"] = GeocodingServiceError("HTTP 502")
        state = await controller.search("down")
        assert state.status == SearchStatus.ERROR
        assert state.error == str(GeocodingServiceError("HTTP 502"))

    @pytest.mark.asyncio
    async def test_unexpected_error_does_not_stick_in_loading(self, controller, geocoder):
        geocoder.answers["boom"] = RuntimeError("bug")
        state = await controller.search("boom")
        assert state.status == SearchStatus.ERROR
        assert not state.loading

    @pytest.mark.asyncio
    async def test_empty_catalog_surfaces_error(self, geocoder):
        controller = SearchController(geocoder, [])
        state = await controller.search("Xuân Thủy, Cầu Giấy")
        assert state.status == SearchStatus.ERROR
        assert state.error == "The location catalog is empty"

    @pytest.mark.asyncio
    async def test_custom_eta_rate(self, catalog):
        near_co_so_1 = Coordinate(21.0112, 105.8471)  # ~1 km north of Cơ sở 1
        controller = SearchController(
            FakeGeocoder({"here": near_co_so_1}), catalog, minutes_per_km=10
        )
        state = await controller.search("here")
        assert state.result.location.name == "Cơ sở 1"
        assert state.result.eta_minutes == estimate_eta_minutes(state.result.distance_km, 10)

    @pytest.mark.asyncio
    async def test_reset_returns_to_idle(self, controller):
        await controller.search("Xuân Thủy, Cầu Giấy")
        state = controller.reset()
        assert state.status == SearchStatus.IDLE
        assert state.result is None
        assert state.user_location is None
        assert state.viewport.zoom == 13


class TestStaleResponses:
    @pytest.mark.asyncio
    async def test_slow_first_search_is_discarded(self, controller, geocoder, catalog):
        geocoder.answers["slow"] = catalog[0].coordinates
        geocoder.gates["slow"] = asyncio.Event()

        slow = asyncio.create_task(controller.search("slow"))
        await asyncio.sleep(0)
        assert controller.state.loading

        fast = await controller.search("Xuân Thủy, Cầu Giấy")
        assert fast.result.location.name == "Cơ sở 3"

        geocoder.gates["slow"].set()
        await slow

        assert controller.state.status == SearchStatus.SUCCESS
        assert controller.state.result.location.name == "Cơ sở 3"
        assert controller.state.query == "Xuân Thủy, Cầu Giấy"

    @pytest.mark.asyncio
    async def test_reset_drops_in_flight_search(self, controller, geocoder):
        geocoder.gates["Xuân Thủy, Cầu Giấy"] = asyncio.Event()

        pending = asyncio.create_task(controller.search("Xuân Thủy, Cầu Giấy"))
        await asyncio.sleep(0)
        controller.reset()

        geocoder.gates["Xuân Thủy, Cầu Giấy"].set()
        await pending

        assert controller.state.status == SearchStatus.IDLE
        assert controller.state.result is None

    @pytest.mark.asyncio
    async def test_request_ids_increase(self, controller):
        first = await controller.search("Xuân Thủy, Cầu Giấy")
        second = await controller.search("")
        third = await controller.search("Xuân Thủy, Cầu Giấy")
        assert first.request_id < second.request_id < third.request_id
