from __future__ import annotations

import pytest

from matchfeed.config.settings import Settings, normalize_provider_name
from matchfeed.providers.api_football import APIFootballProvider
from matchfeed.providers.registry import get_default_provider, get_provider
from matchfeed.providers.soccersapi import SoccersApiProvider


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "ACTIVE_PROVIDER",
        "API_FOOTBALL_KEY",
        "APIFOOTBALL_API_KEY",
        "SOCCERSAPI_USER",
        "SOCCERSAPI_TOKEN",
    ):
        monkeypatch.delenv(name, raising=False)


def test_provider_registry_defaults_to_api_football(monkeypatch):
    monkeypatch.setenv("API_FOOTBALL_KEY", "test-key")

    provider = get_provider()

    assert get_default_provider() == "api_football"
    assert isinstance(provider, APIFootballProvider)
    assert provider._client.default_headers == {"x-apisports-key": "test-key"}


def test_provider_registry_accepts_legacy_key_name(monkeypatch):
    monkeypatch.setenv("ACTIVE_PROVIDER", "apifootball")
    monkeypatch.setenv("APIFOOTBALL_API_KEY", "legacy-key")

    assert isinstance(get_provider(), APIFootballProvider)


def test_provider_registry_returns_soccersapi(monkeypatch):
    monkeypatch.setenv("ACTIVE_PROVIDER", "soccers-api")
    monkeypatch.setenv("SOCCERSAPI_USER", "user")
    monkeypatch.setenv("SOCCERSAPI_TOKEN", "token")

    provider = get_provider()

    assert isinstance(provider, SoccersApiProvider)
    assert provider._client.default_params == {"user": "user", "token": "token"}


def test_provider_registry_explicit_name_overrides_env(monkeypatch):
    monkeypatch.setenv("ACTIVE_PROVIDER", "api_football")
    monkeypatch.setenv("SOCCERSAPI_USER", "user")
    monkeypatch.setenv("SOCCERSAPI_TOKEN", "token")

    assert isinstance(get_provider("soccersapi", settings=Settings()), SoccersApiProvider)


def test_provider_registry_rejects_invalid_provider(monkeypatch):
    monkeypatch.setenv("ACTIVE_PROVIDER", "invalid-provider")

    with pytest.raises(RuntimeError, match="Unsupported provider"):
        get_provider()


def test_provider_registry_requires_credentials(monkeypatch):
    monkeypatch.setenv("ACTIVE_PROVIDER", "soccersapi")
    monkeypatch.setenv("SOCCERSAPI_USER", "user")

    with pytest.raises(RuntimeError, match="SOCCERSAPI_TOKEN"):
        get_provider()


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("API-Football", "api_football"), (" apifootball ", "api_football"), ("SoccersAPI", "soccersapi")],
)
def test_normalize_provider_name(raw, expected):
    assert normalize_provider_name(raw) == expected


def test_settings_read_numeric_overrides(monkeypatch):
    monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "4.5")
    monkeypatch.setenv("SQUAD_BATCH_SIZE", "3")

    config = Settings()

    assert config.HTTP_TIMEOUT_SECONDS == 4.5
    assert config.SQUAD_BATCH_SIZE == 3
