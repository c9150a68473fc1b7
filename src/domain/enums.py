"""Domain enumerations and state-transition rules."""

import enum


class SearchStatus(str, enum.Enum):
    IDLE = "IDLE"
    LOADING = "LOADING"
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


# State machine: maps current status -> set of valid next statuses.
# SUCCESS and ERROR are not terminal; any new search re-enters LOADING.
SEARCH_TRANSITIONS: dict[SearchStatus, set[SearchStatus]] = {
    SearchStatus.IDLE: {SearchStatus.LOADING, SearchStatus.ERROR},
    SearchStatus.LOADING: {
        SearchStatus.LOADING,
        SearchStatus.SUCCESS,
        SearchStatus.ERROR,
    },
    SearchStatus.SUCCESS: {SearchStatus.LOADING, SearchStatus.ERROR},
    SearchStatus.ERROR: {SearchStatus.LOADING, SearchStatus.ERROR},
}
