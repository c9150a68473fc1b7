"""
Shared test fixtures.

The geocoding service is never contacted: controller tests use an
in-process fake, client tests route httpx through ``MockTransport``.
"""

from __future__ import annotations

import asyncio
from typing import Callable, Optional

import httpx
import pytest

from src.domain.entities import Coordinate, Location
from src.domain.errors import AddressNotFoundError
from src.infrastructure.catalog import load_catalog
from src.services.search import SearchController

GEOCODING_URL = "https://geocoder.test/search"

# "Cơ sở 3" in the reference catalog
CO_SO_3 = Coordinate(21.0373, 105.7827)


class FakeGeocoder:
    """Returns canned coordinates per address; records every call."""

    def __init__(self, answers: Optional[dict] = None):
        self.answers = answers or {}
        self.calls: list[str] = []
        # address -> Event the call waits on before answering
        self.gates: dict[str, asyncio.Event] = {}

    async def geocode(self, address: str) -> Coordinate:
        self.calls.append(address)
        gate = self.gates.get(address)
        if gate is not None:
            await gate.wait()
        answer = self.answers.get(address)
        if answer is None:
            raise AddressNotFoundError(address)
        if isinstance(answer, Exception):
            raise answer
        return answer


def mock_client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.fixture
def catalog() -> tuple[Location, ...]:
    return load_catalog()


@pytest.fixture
def geocoder() -> FakeGeocoder:
    return FakeGeocoder({"Xuân Thủy, Cầu Giấy": CO_SO_3})


@pytest.fixture
def controller(geocoder, catalog) -> SearchController:
    return SearchController(geocoder, catalog)
