"""
Search endpoints
================

POST   /api/v1/search        -- run a nearest-location search
GET    /api/v1/search/state  -- current view state
DELETE /api/v1/search/state  -- reset to the initial catalog view

Search failures are part of the view state (``status == "ERROR"``), so
these routes always answer 200.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from src.api.dependencies import get_controller
from src.api.middleware import limiter
from src.api.schemas import SearchRequest, ViewStateResponse
from src.config import settings
from src.services.search import SearchController

router = APIRouter(prefix="/search", tags=["search"])


@router.post(
    "",
    response_model=ViewStateResponse,
    summary="Find the nearest location to an address",
)
@limiter.limit(settings.rate_limit)
async def search(
    request: Request,
    body: SearchRequest,
    controller: SearchController = Depends(get_controller),
):
    state = await controller.search(body.address)
    return ViewStateResponse.from_state(state)


@router.get(
    "/state",
    response_model=ViewStateResponse,
    summary="Get the current search view state",
)
@limiter.limit(settings.rate_limit)
async def get_state(
    request: Request,
    controller: SearchController = Depends(get_controller),
):
    return ViewStateResponse.from_state(controller.state)


@router.delete(
    "/state",
    response_model=ViewStateResponse,
    summary="Reset the search view state",
)
@limiter.limit(settings.rate_limit)
async def reset_state(
    request: Request,
    controller: SearchController = Depends(get_controller),
):
    return ViewStateResponse.from_state(controller.reset())
