"""Error hierarchy for the nearest-location search.

Every error carries a human-readable message; the view-state controller
stores ``str(exc)`` verbatim as the search error.
"""


class FinderError(Exception):
    """Base exception for all search errors."""


class EmptyInputError(FinderError):
    """The user submitted a blank address."""

    def __init__(self) -> None:
        super().__init__("Please enter an address")


class AddressNotFoundError(FinderError):
    """The geocoding service returned no results for the address."""

    def __init__(self, address: str):
        self.address = address
        super().__init__(
            "Address not found. Please check the address and try again."
        )


class GeocodingServiceError(FinderError):
    """Transport failure, timeout or malformed geocoding response."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(
            "Failed to find location. Please check the address and try again."
        )


class EmptyCatalogError(FinderError):
    """The location catalog has no entries to search."""

    def __init__(self) -> None:
        super().__init__("The location catalog is empty")


class InvalidCoordinateError(FinderError, ValueError):
    """Latitude/longitude outside the valid WGS84 range."""

    def __init__(self, latitude: float, longitude: float):
        self.latitude = latitude
        self.longitude = longitude
        super().__init__(f"Invalid coordinate: ({latitude}, {longitude})")


class CatalogError(FinderError):
    """A catalog file is missing or malformed."""

    def __init__(self, path: str, detail: str):
        self.path = path
        super().__init__(f"Invalid catalog at {path}: {detail}")


class InvalidStateTransition(Exception):
    """Raised when a search status change violates the state machine."""
