"""
Search view state (State Pattern)
=================================

``ViewState`` is an immutable value; the only way to move it forward is
``apply_event(state, event)``.  Events carry the request id of the search
that produced them and are dropped when a newer search has been issued
since, so a slow geocoding call can never overwrite a fresher outcome.

Lifecycle::

    IDLE -> LOADING -> SUCCESS | ERROR -> LOADING -> ...

A failure keeps the previous ``result``, ``viewport`` and
``user_location``; only ``status`` and ``error`` change.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Union

from .entities import Coordinate, SearchResult, Viewport
from .enums import SEARCH_TRANSITIONS, SearchStatus
from .errors import InvalidStateTransition


@dataclass(frozen=True)
class ViewState:
    viewport: Viewport
    status: SearchStatus = SearchStatus.IDLE
    query: str = ""
    result: Optional[SearchResult] = None
    error: Optional[str] = None
    user_location: Optional[Coordinate] = None
    request_id: int = 0

    @property
    def loading(self) -> bool:
        return self.status is SearchStatus.LOADING

    def transition_to(self, new_status: SearchStatus, **changes) -> ViewState:
        """Return a copy in *new_status* if the transition is legal, else raise."""
        allowed = SEARCH_TRANSITIONS.get(self.status, set())
        if new_status not in allowed:
            raise InvalidStateTransition(
                f"Cannot transition from {self.status} to {new_status}"
            )
        return replace(self, status=new_status, **changes)


# ── Events ────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class SearchRejected:
    """Input failed local validation; no network call was made."""

    request_id: int
    query: str
    message: str


@dataclass(frozen=True)
class SearchStarted:
    request_id: int
    query: str


@dataclass(frozen=True)
class SearchSucceeded:
    request_id: int
    result: SearchResult
    viewport: Viewport
    user_location: Coordinate


@dataclass(frozen=True)
class SearchFailed:
    request_id: int
    message: str


SearchEvent = Union[SearchRejected, SearchStarted, SearchSucceeded, SearchFailed]


def is_stale(state: ViewState, event: SearchEvent) -> bool:
    """True if *event* belongs to a search older than the latest issued."""
    return event.request_id < state.request_id


def apply_event(state: ViewState, event: SearchEvent) -> ViewState:
    """Single update function for the search view state."""
    if is_stale(state, event):
        return state

    if isinstance(event, SearchRejected):
        return state.transition_to(
            SearchStatus.ERROR,
            query=event.query,
            error=event.message,
            request_id=event.request_id,
        )

    if isinstance(event, SearchStarted):
        return state.transition_to(
            SearchStatus.LOADING,
            query=event.query,
            error=None,
            request_id=event.request_id,
        )

    # Completion events only settle the search that is currently loading
    if event.request_id != state.request_id:
        return state

    if isinstance(event, SearchSucceeded):
        return state.transition_to(
            SearchStatus.SUCCESS,
            result=event.result,
            viewport=event.viewport,
            user_location=event.user_location,
            error=None,
        )

    if isinstance(event, SearchFailed):
        return state.transition_to(SearchStatus.ERROR, error=event.message)

    raise TypeError(f"Unknown search event: {event!r}")
