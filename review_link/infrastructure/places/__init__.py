from .places_client import (
    InvalidQueryError,
    PlacesClient,
    PlacesConfigError,
    PlacesServiceError,
    PlacesUpstreamError,
)

__all__ = [
    "InvalidQueryError",
    "PlacesClient",
    "PlacesConfigError",
    "PlacesServiceError",
    "PlacesUpstreamError",
]
