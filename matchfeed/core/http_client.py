from __future__ import annotations

from datetime import datetime, timezone
import json
import logging
import time
from typing import Any

import httpx


class ProviderRequestError(RuntimeError):
    def __init__(self, message: str, *, provider: str, endpoint: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.provider = provider
        self.endpoint = endpoint
        self.status_code = status_code


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _safe_params(params: dict[str, Any] | None) -> dict[str, Any]:
    if not params:
        return {}
    safe: dict[str, Any] = {}
    for key, value in params.items():
        lowered = key.lower()
        if "token" in lowered or "key" in lowered or "secret" in lowered or lowered == "user":
            safe[key] = "***"
        else:
            safe[key] = value
    return safe


def _http_logger() -> logging.Logger:
    return logging.getLogger("matchfeed.http_client")


class ProviderHttpClient:
    """Async JSON client bound to one upstream provider.

    Makes exactly one attempt per call: failures surface as ``ProviderRequestError``
    and the caller decides what a failed fetch means.
    """

    def __init__(
        self,
        *,
        provider: str,
        base_url: str,
        default_headers: dict[str, str] | None = None,
        default_params: dict[str, Any] | None = None,
        timeout_seconds: float = 15.0,
        client: httpx.AsyncClient | None = None,
    ):
        self.provider = provider
        self.base_url = base_url.rstrip("/")
        self.default_headers = default_headers or {}
        self.default_params = default_params or {}
        self.timeout_seconds = timeout_seconds
        self._client = client or httpx.AsyncClient(timeout=timeout_seconds)

    def _log_event(
        self,
        *,
        endpoint: str,
        params: dict[str, Any] | None,
        status_code: int | None,
        duration_ms: int,
        error: str | None = None,
    ) -> None:
        payload = {
            "ts": _utc_now(),
            "component": "http_client",
            "provider": self.provider,
            "endpoint": endpoint,
            "params": _safe_params(params),
            "status_code": status_code,
            "duration_ms": duration_ms,
            "error": error,
        }
        _http_logger().info(json.dumps(payload, ensure_ascii=False, separators=(",", ":"), default=str))

    async def request_json(
        self,
        *,
        endpoint: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> tuple[Any, dict[str, str]]:
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        merged_params = {**self.default_params, **(params or {})}
        merged_headers = {**self.default_headers, **(headers or {})}
        started = time.perf_counter()

        try:
            response = await self._client.get(url, params=merged_params, headers=merged_headers)
        except httpx.HTTPError as exc:
            duration_ms = int((time.perf_counter() - started) * 1000)
            self._log_event(
                endpoint=endpoint,
                params=merged_params,
                status_code=None,
                duration_ms=duration_ms,
                error=type(exc).__name__,
            )
            raise ProviderRequestError(
                f"provider={self.provider} endpoint={endpoint} network_error={type(exc).__name__}: {exc}",
                provider=self.provider,
                endpoint=endpoint,
            ) from exc

        duration_ms = int((time.perf_counter() - started) * 1000)
        status_code = response.status_code
        if status_code >= 400:
            self._log_event(
                endpoint=endpoint,
                params=merged_params,
                status_code=status_code,
                duration_ms=duration_ms,
                error=f"http_error status={status_code}",
            )
            body = (response.text or "")[:600]
            raise ProviderRequestError(
                f"provider={self.provider} endpoint={endpoint} status={status_code} body={body}",
                provider=self.provider,
                endpoint=endpoint,
                status_code=status_code,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            self._log_event(
                endpoint=endpoint,
                params=merged_params,
                status_code=status_code,
                duration_ms=duration_ms,
                error="invalid_json",
            )
            raise ProviderRequestError(
                f"provider={self.provider} endpoint={endpoint} invalid JSON body",
                provider=self.provider,
                endpoint=endpoint,
                status_code=status_code,
            ) from exc

        self._log_event(
            endpoint=endpoint,
            params=merged_params,
            status_code=status_code,
            duration_ms=duration_ms,
        )
        return payload, dict(response.headers)

    async def aclose(self) -> None:
        await self._client.aclose()
