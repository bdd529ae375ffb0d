import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Ensure the project root is on sys.path for direct pytest runs
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from review_link.infrastructure.config import PlacesSettings, Settings, get_settings  # noqa: E402

TEST_API_URL = "https://places.example.test/autocomplete/json"


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    return Settings(places=PlacesSettings(api_key="test-key", api_url=TEST_API_URL))


@pytest.fixture
def unconfigured_settings():
    return Settings(places=PlacesSettings(api_key="", api_url=TEST_API_URL))


def make_response(payload=None, json_error=None, http_error=None):
    """Fake requests.Response for a mocked session.get."""
    resp = MagicMock()
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = payload
    if http_error is not None:
        resp.raise_for_status.side_effect = http_error
    else:
        resp.raise_for_status.return_value = None
    return resp


@pytest.fixture
def session():
    return MagicMock()
