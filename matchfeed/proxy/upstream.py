from __future__ import annotations

import logging
import time
from typing import Any

import httpx

from matchfeed.config.settings import Settings, settings as default_settings
from matchfeed.providers.registry import PROVIDER_LABELS

from .errors import ProxyError

logger = logging.getLogger("matchfeed.proxy.upstream")

CREDENTIAL_PARAMS = {"user", "token"}


class UpstreamForwarder:
    """Forwards a GET to the provider's REST API with the server-side credentials attached."""

    def __init__(self, *, settings: Settings | None = None, client: httpx.AsyncClient | None = None) -> None:
        self.settings = settings or default_settings
        self._client = client or httpx.AsyncClient(timeout=self.settings.HTTP_TIMEOUT_SECONDS)

    def _target(self, provider: str) -> tuple[str, dict[str, str], list[tuple[str, str]]]:
        canonical = self.settings.validate_provider(provider)
        if canonical == "api_football":
            return (
                self.settings.APIFOOTBALL_BASE_URL,
                {"x-apisports-key": self.settings.API_FOOTBALL_KEY or ""},
                [],
            )
        return (
            self.settings.SOCCERSAPI_BASE_URL,
            {},
            [("user", self.settings.SOCCERSAPI_USER or ""), ("token", self.settings.SOCCERSAPI_TOKEN or "")],
        )

    async def forward(self, provider: str, path: str, query: list[tuple[str, str]]) -> Any:
        label = PROVIDER_LABELS.get(provider, provider)
        failure = f"Failed to fetch from {label}"
        started = time.perf_counter()
        try:
            base_url, headers, credentials = self._target(provider)
            params = [(key, value) for key, value in query if key not in CREDENTIAL_PARAMS] + credentials
            response = await self._client.get(
                f"{base_url.rstrip('/')}/{path.lstrip('/')}",
                params=params,
                headers=headers,
            )
        except (httpx.HTTPError, RuntimeError) as exc:
            logger.error(
                "upstream_failed provider=%s path=%s error=%s duration_ms=%d",
                provider,
                path,
                type(exc).__name__,
                int((time.perf_counter() - started) * 1000),
            )
            raise ProxyError(failure) from exc

        duration_ms = int((time.perf_counter() - started) * 1000)
        if not response.is_success:
            logger.error(
                "upstream_status provider=%s path=%s status=%s duration_ms=%d",
                provider,
                path,
                response.status_code,
                duration_ms,
            )
            raise ProxyError(failure, details={"upstream_status": response.status_code})
        try:
            body = response.json()
        except ValueError as exc:
            logger.error("upstream_invalid_json provider=%s path=%s", provider, path)
            raise ProxyError(failure) from exc

        logger.info(
            "upstream provider=%s path=%s status=%s duration_ms=%d",
            provider,
            path,
            response.status_code,
            duration_ms,
        )
        return body

    async def aclose(self) -> None:
        await self._client.aclose()
