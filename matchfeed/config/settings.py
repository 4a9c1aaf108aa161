from __future__ import annotations

import os


_PROVIDER_ALIASES = {
    "apifootball": "api_football",
    "api_football": "api_football",
    "api-football": "api_football",
    "soccersapi": "soccersapi",
    "soccers_api": "soccersapi",
    "soccers-api": "soccersapi",
}


def _optional_env(*names: str) -> str | None:
    for name in names:
        value = os.getenv(name)
        if value is not None:
            cleaned = value.strip()
            if cleaned:
                return cleaned
    return None


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return float(raw)


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return int(raw)


def normalize_provider_name(provider: str) -> str:
    normalized = provider.strip().lower()
    canonical = _PROVIDER_ALIASES.get(normalized)
    if canonical is None:
        supported = ", ".join(sorted(_PROVIDER_ALIASES.keys()))
        raise RuntimeError(f"Unsupported provider '{provider}'. Supported values: {supported}")
    return canonical


class Settings:
    @property
    def ACTIVE_PROVIDER(self) -> str:
        return (os.getenv("ACTIVE_PROVIDER") or "api_football").strip().lower()

    @property
    def API_FOOTBALL_KEY(self) -> str | None:
        return _optional_env("API_FOOTBALL_KEY", "APIFOOTBALL_API_KEY")

    @property
    def APIFOOTBALL_BASE_URL(self) -> str:
        return _optional_env("APIFOOTBALL_BASE_URL") or "https://v3.football.api-sports.io"

    @property
    def SOCCERSAPI_USER(self) -> str | None:
        return _optional_env("SOCCERSAPI_USER")

    @property
    def SOCCERSAPI_TOKEN(self) -> str | None:
        return _optional_env("SOCCERSAPI_TOKEN")

    @property
    def SOCCERSAPI_BASE_URL(self) -> str:
        return _optional_env("SOCCERSAPI_BASE_URL") or "https://api.soccersapi.com/v2.2"

    @property
    def HTTP_TIMEOUT_SECONDS(self) -> float:
        return _float_env("HTTP_TIMEOUT_SECONDS", 15.0)

    @property
    def SQUAD_BATCH_SIZE(self) -> int:
        return _int_env("SQUAD_BATCH_SIZE", 5)

    @property
    def LOG_LEVEL(self) -> str:
        return (os.getenv("LOG_LEVEL") or "INFO").strip().upper()

    @property
    def PROXY_APP_NAME(self) -> str:
        return _optional_env("PROXY_APP_NAME") or "matchfeed-proxy"

    @property
    def PROXY_HOST(self) -> str:
        return _optional_env("PROXY_HOST") or "0.0.0.0"

    @property
    def PROXY_PORT(self) -> int:
        return _int_env("PROXY_PORT", 8000)

    def active_provider(self) -> str:
        return normalize_provider_name(self.ACTIVE_PROVIDER)

    def validate_provider(self, provider: str | None = None) -> str:
        canonical = self.active_provider() if provider is None else normalize_provider_name(provider)
        if canonical == "api_football" and not self.API_FOOTBALL_KEY:
            raise RuntimeError("Provider api_football requires API_FOOTBALL_KEY (or APIFOOTBALL_API_KEY).")
        if canonical == "soccersapi" and not (self.SOCCERSAPI_USER and self.SOCCERSAPI_TOKEN):
            raise RuntimeError("Provider soccersapi requires SOCCERSAPI_USER and SOCCERSAPI_TOKEN.")
        return canonical


settings = Settings()
