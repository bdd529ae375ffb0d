from review_link.infrastructure.config import (
    PlacesSettings,
    ReviewSettings,
    Settings,
    get_settings,
)
from review_link.infrastructure.config.settings import (
    DEFAULT_AUTOCOMPLETE_URL,
    DEFAULT_REVIEW_URL_TEMPLATE,
)


def test_defaults_without_environment(monkeypatch):
    for name in ("GOOGLE_MAPS_API_KEY", "PLACES_AUTOCOMPLETE_URL", "PLACES_TIMEOUT_SECONDS", "REVIEW_URL_TEMPLATE"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()
    assert settings.places.api_key == ""
    assert settings.places.api_url == DEFAULT_AUTOCOMPLETE_URL
    assert settings.places.place_types == "establishment"
    assert settings.places.timeout_seconds == 10
    assert settings.review.review_url_template == DEFAULT_REVIEW_URL_TEMPLATE
    assert settings.ui.min_query_length == 3
    assert settings.ui.debounce_ms == 300


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("GOOGLE_MAPS_API_KEY", "abc123")
    monkeypatch.setenv("PLACES_TIMEOUT_SECONDS", "4")

    settings = get_settings()
    assert settings.places.api_key == "abc123"
    assert settings.places.timeout_seconds == 4


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_validate_warns_on_missing_key():
    issues = Settings(places=PlacesSettings(api_key="")).validate()
    assert len(issues) == 1
    assert "GOOGLE_MAPS_API_KEY" in issues[0]


def test_validate_warns_on_template_without_placeholder():
    settings = Settings(
        places=PlacesSettings(api_key="k"),
        review=ReviewSettings(review_url_template="https://example.test/review"),
    )
    issues = settings.validate()
    assert len(issues) == 1
    assert "{place_id}" in issues[0]


def test_validate_clean_settings(settings):
    assert settings.validate() == []
