from __future__ import annotations

import pytest

from matchfeed.cache.policy import (
    CacheKind,
    build_cache_control,
    classify_request,
    resolve_cache_seconds,
)


@pytest.mark.parametrize(
    ("path", "query", "expected"),
    [
        ("fixtures", "live=all", 60),
        ("fixtures/live", None, 60),
        ("livescores", "t=live", 60),
        ("fixtures/lineups", "fixture=1", 300),
        ("fixtures/events", "fixture=1", 300),
        ("fixtures/statistics", "fixture=1", 300),
        ("stats", "match_id=1", 300),
        ("standings", "league=39&season=2024", 86400),
        ("players/topscorers", "league=39&season=2024", 86400),
        ("leaders", "season_id=1&t=topscorers", 86400),
        ("fixtures", "league=39&season=2024", 21600),
        ("fixtures", "season_id=9001&t=season", 21600),
        ("teams", "id=33", 604800),
        ("venues", "id=556", 604800),
        ("players/squads", "team=33", 604800),
        ("fixtures/headtohead", "h2h=33-34", 86400),
        ("h2h", "team1=1&team2=2", 86400),
        ("leagues", "country=England", 604800),
        ("countries", None, 3600),
    ],
)
def test_resolve_cache_seconds_by_path(path, query, expected):
    assert resolve_cache_seconds(path, query) == expected


def test_single_fixture_needs_body():
    decision = classify_request("/fixtures", "?id=215662")

    assert decision.kind is CacheKind.single_fixture
    assert decision.needs_body is True
    assert decision.seconds == 3600


def test_season_id_does_not_trigger_single_fixture_rule():
    assert classify_request("fixtures", {"season_id": "9001"}).kind is CacheKind.fixtures


@pytest.mark.parametrize(
    ("status", "expected"),
    [("1H", 60), ("HT", 60), ("FT", 86400), ("NS", 3600), ("PST", 3600)],
)
def test_single_fixture_refined_by_api_football_status(status, expected):
    body = {"response": [{"fixture": {"id": 1, "status": {"short": status}}}]}

    assert resolve_cache_seconds("fixtures", "id=1", body, provider="api_football") == expected


@pytest.mark.parametrize(("status", "expected"), [(1, 60), (3, 86400), (0, 3600)])
def test_single_fixture_refined_by_soccersapi_status(status, expected):
    body = {"data": {"id": 1, "status": status}}

    assert resolve_cache_seconds("fixtures", "id=1&t=info", body, provider="soccersapi") == expected


def test_single_fixture_without_body_uses_upcoming_lifetime():
    assert resolve_cache_seconds("fixtures", "id=1") == 3600
    assert resolve_cache_seconds("fixtures", "id=1", {"response": []}) == 3600


def test_build_cache_control():
    assert build_cache_control(60) == "public, s-maxage=60, stale-while-revalidate=120"
    assert build_cache_control(86400) == "public, s-maxage=86400, stale-while-revalidate=172800"
