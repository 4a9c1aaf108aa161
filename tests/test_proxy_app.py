from __future__ import annotations

import httpx
import pytest
from fastapi.testclient import TestClient

from matchfeed.config.settings import Settings
from matchfeed.proxy.main import create_app
from matchfeed.proxy.upstream import UpstreamForwarder


@pytest.fixture()
def credentials(monkeypatch):
    monkeypatch.setenv("API_FOOTBALL_KEY", "af-key")
    monkeypatch.setenv("SOCCERSAPI_USER", "sa-user")
    monkeypatch.setenv("SOCCERSAPI_TOKEN", "sa-token")
    monkeypatch.delenv("APIFOOTBALL_BASE_URL", raising=False)
    monkeypatch.delenv("SOCCERSAPI_BASE_URL", raising=False)


def _client(handler) -> tuple[TestClient, list[httpx.Request]]:
    seen: list[httpx.Request] = []

    def recording_handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    forwarder = UpstreamForwarder(
        settings=Settings(),
        client=httpx.AsyncClient(transport=httpx.MockTransport(recording_handler)),
    )
    return TestClient(create_app(forwarder)), seen


def test_health_endpoint():
    client, _seen = _client(lambda request: httpx.Response(200, json={}))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "providers": ["api_football", "soccersapi"]}


def test_proxy_forwards_api_football_request_with_key(credentials):
    body = {"errors": [], "response": [{"fixture": {"id": 1, "status": {"short": "FT"}}}]}
    client, seen = _client(lambda request: httpx.Response(200, json=body))

    response = client.get("/proxy/api-football/fixtures", params={"id": "1"})

    assert response.status_code == 200
    assert response.json() == body
    assert response.headers["cache-control"] == "public, s-maxage=86400, stale-while-revalidate=172800"
    assert seen[0].url.host == "v3.football.api-sports.io"
    assert seen[0].url.path == "/fixtures"
    assert seen[0].url.params["id"] == "1"
    assert seen[0].headers["x-apisports-key"] == "af-key"


def test_proxy_applies_path_based_lifetime(credentials):
    client, _seen = _client(lambda request: httpx.Response(200, json={"response": []}))

    response = client.get("/proxy/api_football/fixtures/lineups", params={"fixture": "1"})

    assert response.headers["cache-control"] == "public, s-maxage=300, stale-while-revalidate=600"


def test_proxy_adds_soccersapi_credentials(credentials):
    client, seen = _client(lambda request: httpx.Response(200, json={"data": {"id": 7, "status": 1}}))

    response = client.get("/proxy/soccersapi/fixtures", params={"id": "7", "t": "info", "token": "client-token"})

    assert response.status_code == 200
    assert response.headers["cache-control"] == "public, s-maxage=60, stale-while-revalidate=120"
    assert seen[0].url.path == "/v2.2/fixtures"
    assert seen[0].url.params["user"] == "sa-user"
    assert seen[0].url.params.get_list("token") == ["sa-token"]
    assert seen[0].url.params["t"] == "info"


def test_proxy_reports_upstream_failure(credentials):
    client, _seen = _client(lambda request: httpx.Response(503, text="unavailable"))

    response = client.get("/proxy/api-football/standings", params={"league": "39", "season": "2024"})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch from API-Football"}


def test_proxy_reports_network_failure(credentials):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    client, _seen = _client(handler)

    response = client.get("/proxy/soccersapi/leagues", params={"t": "list"})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch from SoccersAPI"}


def test_proxy_reports_missing_credentials(monkeypatch):
    monkeypatch.delenv("API_FOOTBALL_KEY", raising=False)
    monkeypatch.delenv("APIFOOTBALL_API_KEY", raising=False)
    client, seen = _client(lambda request: httpx.Response(200, json={}))

    response = client.get("/proxy/api-football/teams", params={"id": "33"})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch from API-Football"}
    assert seen == []


def test_proxy_rejects_unknown_provider(credentials):
    client, seen = _client(lambda request: httpx.Response(200, json={}))

    response = client.get("/proxy/sportmonks/fixtures")

    assert response.status_code == 404
    assert response.json() == {"error": "Unknown provider 'sportmonks'"}
    assert seen == []


def test_proxy_allows_cross_origin_reads(credentials):
    client, _seen = _client(lambda request: httpx.Response(200, json={"response": []}))

    response = client.get("/proxy/api-football/leagues", headers={"Origin": "https://app.example"})

    assert response.headers["access-control-allow-origin"] == "*"
    assert "x-request-id" in response.headers
