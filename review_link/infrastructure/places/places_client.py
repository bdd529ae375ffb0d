"""
Places Client - Google Places Autocomplete Proxy
================================================

ARCHITECTURAL DECISION:
- The API key stays on the server; the browser only ever talks to our endpoint
- Returns ONLY description + place_id for each prediction
- One request per lookup: no retries, no partial results

ERROR POLICY:
- Missing key        -> PlacesConfigError   (500, "API key configuration error")
- Upstream status    -> PlacesUpstreamError (500, "Failed to fetch autocomplete suggestions")
- Network/HTTP/JSON  -> PlacesUpstreamError (500, "Internal server error")
Google's status and error_message are logged, never sent to the client.
"""

import logging
from typing import List, Optional

import requests

from review_link.domain import PlaceSuggestion, ReviewLinkAppError, should_search
from ..config import Settings, get_settings

logger = logging.getLogger(__name__)

# Upstream statuses that mean "the lookup worked"
OK_STATUSES = ("OK", "ZERO_RESULTS")


class PlacesServiceError(ReviewLinkAppError):
    """Base exception for places proxy errors."""
    pass


class PlacesConfigError(PlacesServiceError):
    """The server is missing its Google Maps credential."""

    def __init__(self, message: str = "API key configuration error"):
        super().__init__(message, status_code=500)


class InvalidQueryError(PlacesServiceError):
    """The client sent no usable ``input``."""

    def __init__(self, message: str = "Input query parameter is required"):
        super().__init__(message, status_code=400)


class PlacesUpstreamError(PlacesServiceError):
    """Google answered with an error, or could not be reached."""

    def __init__(self, message: str = "Failed to fetch autocomplete suggestions"):
        super().__init__(message, status_code=500)


class PlacesClient:
    """
    Thin client over the Places Autocomplete endpoint.

    USAGE:
        client = PlacesClient()
        for s in client.autocomplete("blue bottle coffee"):
            print(s.description, s.place_id)
    """

    def __init__(self, settings: Optional[Settings] = None, session: Optional[requests.Session] = None):
        settings = settings or get_settings()
        self._api_key = settings.places.api_key
        self._api_url = settings.places.api_url
        self._place_types = settings.places.place_types
        self._timeout = settings.places.timeout_seconds
        self._min_query_length = settings.ui.min_query_length
        self._session = session or requests.Session()

    @property
    def configured(self) -> bool:
        return bool(self._api_key)

    def ensure_configured(self) -> None:
        """Raise PlacesConfigError if there is no API key to attach."""
        if not self._api_key:
            logger.error("Google Maps API key is missing on the server.")
            raise PlacesConfigError()

    def autocomplete(self, query: str) -> List[PlaceSuggestion]:
        """
        Look up business suggestions for a free-text query.

        Args:
            query: What the user typed.

        Returns:
            Suggestions in upstream order. Empty for short queries (no call
            is made) and for ZERO_RESULTS.

        Raises:
            PlacesConfigError: no API key configured.
            InvalidQueryError: query missing or blank.
            PlacesUpstreamError: Google failed or was unreachable.
        """
        self.ensure_configured()

        if not query or not query.strip():
            raise InvalidQueryError()

        if not should_search(query, self._min_query_length):
            logger.debug(f"Query {query!r} shorter than {self._min_query_length} chars, skipping lookup")
            return []

        params = {
            "input": query,
            "key": self._api_key,
            "types": self._place_types,
        }

        try:
            response = self._session.get(self._api_url, params=params, timeout=self._timeout)
            response.raise_for_status()
            data = response.json()

        except requests.Timeout:
            logger.error("Places API timeout")
            raise PlacesUpstreamError("Internal server error")

        except (requests.RequestException, ValueError) as e:
            # JSON decode failures are ValueErrors
            logger.exception(f"Error fetching autocomplete suggestions: {e}")
            raise PlacesUpstreamError("Internal server error")

        if not isinstance(data, dict):
            data = {}

        status = data.get("status")
        if status not in OK_STATUSES:
            logger.error(f"Google Places API Error: {status} {data.get('error_message', '')}")
            raise PlacesUpstreamError()

        suggestions = self._parse_predictions(data)
        logger.info(f"Autocomplete {query!r}: {len(suggestions)} suggestions")
        return suggestions

    def _parse_predictions(self, data: dict) -> List[PlaceSuggestion]:
        """Project predictions to suggestions; missing list means no results."""
        predictions = data.get("predictions")
        if not isinstance(predictions, list):
            return []

        suggestions = []
        for p in predictions:
            suggestion = PlaceSuggestion.from_prediction(p) if isinstance(p, dict) else None
            if suggestion is None:
                logger.warning(f"Skipping malformed prediction: {p!r}")
                continue
            suggestions.append(suggestion)
        return suggestions

    def close(self) -> None:
        """Clean up the HTTP session."""
        self._session.close()
