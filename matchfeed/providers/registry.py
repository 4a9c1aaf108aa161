from __future__ import annotations

from matchfeed.config.settings import Settings, normalize_provider_name, settings as default_settings

from .api_football import APIFootballProvider
from .base import ProviderAdapter
from .soccersapi import SoccersApiProvider

PROVIDER_LABELS = {
    "api_football": "API-Football",
    "soccersapi": "SoccersAPI",
}


def get_default_provider(settings: Settings | None = None) -> str:
    return (settings or default_settings).active_provider()


def get_provider(provider_name: str | None = None, *, settings: Settings | None = None) -> ProviderAdapter:
    config = settings or default_settings
    canonical = config.validate_provider(provider_name)
    if canonical == "api_football":
        return APIFootballProvider(
            api_key=config.API_FOOTBALL_KEY or "",
            base_url=config.APIFOOTBALL_BASE_URL,
            timeout_seconds=config.HTTP_TIMEOUT_SECONDS,
        )
    if canonical == "soccersapi":
        return SoccersApiProvider(
            user=config.SOCCERSAPI_USER or "",
            token=config.SOCCERSAPI_TOKEN or "",
            base_url=config.SOCCERSAPI_BASE_URL,
            timeout_seconds=config.HTTP_TIMEOUT_SECONDS,
        )
    raise RuntimeError(f"Provider without implementation: {canonical}")


__all__ = ["PROVIDER_LABELS", "get_default_provider", "get_provider", "normalize_provider_name"]
