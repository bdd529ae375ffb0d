"""
Settings Module - Centralized Configuration Management
=======================================================

ARCHITECTURAL DECISION:
- All configuration is loaded from environment variables (no hardcoded secrets)
- Settings are immutable dataclasses for safety and clarity
- Single source of truth for the places proxy, review links and the search UI

The Google Maps key is only ever read here, on the server. It is never
rendered into the page.
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache

from dotenv import load_dotenv

# Load .env file if present (development convenience)
load_dotenv()


DEFAULT_AUTOCOMPLETE_URL = "https://maps.googleapis.com/maps/api/place/autocomplete/json"
DEFAULT_REVIEW_URL_TEMPLATE = "https://search.google.com/local/writereview?placeid={place_id}"


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return int(value)


@dataclass(frozen=True)
class PlacesSettings:
    """Google Places Autocomplete settings."""

    api_key: str = field(default_factory=lambda: os.getenv("GOOGLE_MAPS_API_KEY", ""))
    api_url: str = field(
        default_factory=lambda: os.getenv("PLACES_AUTOCOMPLETE_URL", DEFAULT_AUTOCOMPLETE_URL)
    )

    # Only businesses, not addresses or regions
    place_types: str = "establishment"
    timeout_seconds: int = field(default_factory=lambda: _env_int("PLACES_TIMEOUT_SECONDS", 10))


@dataclass(frozen=True)
class ReviewSettings:
    """Review link settings."""

    review_url_template: str = field(
        default_factory=lambda: os.getenv("REVIEW_URL_TEMPLATE", DEFAULT_REVIEW_URL_TEMPLATE)
    )


@dataclass(frozen=True)
class UISettings:
    """Search box behaviour, shared by the page script and the proxy."""

    min_query_length: int = 3
    debounce_ms: int = 300


@dataclass(frozen=True)
class Settings:
    """
    Root settings container - Single source of truth for all configuration.

    Usage:
        from review_link.infrastructure.config import get_settings
        settings = get_settings()
        print(settings.places.api_url)
    """

    places: PlacesSettings = field(default_factory=PlacesSettings)
    review: ReviewSettings = field(default_factory=ReviewSettings)
    ui: UISettings = field(default_factory=UISettings)

    def validate(self) -> list[str]:
        """
        Validate settings and return list of warnings.
        Returns empty list if all settings are valid.
        """
        issues = []

        if not self.places.api_key:
            issues.append(
                "WARNING: GOOGLE_MAPS_API_KEY not set. "
                "Autocomplete requests will fail with a configuration error."
            )

        if "{place_id}" not in self.review.review_url_template:
            issues.append(
                "WARNING: REVIEW_URL_TEMPLATE has no {place_id} placeholder. "
                "Every generated link will be identical."
            )

        return issues


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get singleton Settings instance.
    Cached to ensure consistent settings throughout application lifecycle.
    """
    return Settings()
