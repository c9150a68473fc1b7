"""FastAPI dependency injection helpers."""

from fastapi import Request

from src.services.search import SearchController


def get_controller(request: Request) -> SearchController:
    """Return the application-wide search controller built at start-up."""
    return request.app.state.controller
