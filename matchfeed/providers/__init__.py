from .api_football import APIFootballProvider
from .base import ProviderAdapter
from .registry import get_default_provider, get_provider, normalize_provider_name
from .soccersapi import SoccersApiProvider

__all__ = [
    "APIFootballProvider",
    "ProviderAdapter",
    "SoccersApiProvider",
    "get_default_provider",
    "get_provider",
    "normalize_provider_name",
]
