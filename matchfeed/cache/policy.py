"""Cache lifetimes for proxied provider requests.

Lifetimes follow how volatile the data is: live scores change every minute,
finished fixtures never do, and team or league metadata barely moves. The
resolver works in two phases. ``classify_request`` looks only at the path and
query. ``resolve_cache_seconds`` then reads the response body, but only for
the one rule that needs it (a single fixture, whose lifetime depends on its
status). Rules are checked in order and the first match wins, since path
fragments overlap ("fixtures/events" also contains "fixtures").
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any
from urllib.parse import parse_qs

from matchfeed.core.payload import as_dict, dig
from matchfeed.mappers.status_mapper import map_status
from matchfeed.models.normalized import MatchStatus

LIVE_SECONDS = 60
MATCH_DETAIL_SECONDS = 300
UPCOMING_SECONDS = 3600
FIXTURES_SECONDS = 21600
DAY_SECONDS = 86400
WEEK_SECONDS = 604800
DEFAULT_SECONDS = 3600


class CacheKind(str, Enum):
    live_scores = "live_scores"
    single_fixture = "single_fixture"
    match_details = "match_details"
    rankings = "rankings"
    fixtures = "fixtures"
    reference = "reference"
    head_to_head = "head_to_head"
    leagues = "leagues"
    default = "default"


@dataclass(frozen=True)
class CacheDecision:
    kind: CacheKind
    seconds: int
    needs_body: bool = False


LIVE_MARKERS = ("fixtures/live", "livescores")
DETAIL_MARKERS = ("lineups", "events", "statistics", "stats")
RANKING_MARKERS = ("standings", "topscorers", "leaders")
REFERENCE_MARKERS = ("teams", "venues", "coaches", "coachs", "squads")
HEAD_TO_HEAD_MARKERS = ("headtohead", "h2h")
LEAGUE_MARKERS = ("leagues",)
MATCH_ID_KEYS = ("id", "match_id")


def _status_api_football(body: Any) -> Any:
    return dig(body, "response", 0, "fixture", "status", "short")


def _status_soccersapi(body: Any) -> Any:
    data = as_dict(body).get("data")
    if isinstance(data, list):
        data = data[0] if data else None
    return dig(data, "status")


STATUS_EXTRACTORS: dict[str, Callable[[Any], Any]] = {
    "api_football": _status_api_football,
    "soccersapi": _status_soccersapi,
}


def _normalize_path(path: str) -> str:
    return (path or "").split("?", 1)[0].strip().strip("/").lower()


def _parse_query(query: str | Mapping[str, Any] | None) -> dict[str, list[str]]:
    if query is None:
        return {}
    if isinstance(query, Mapping):
        parsed: dict[str, list[str]] = {}
        for key, value in query.items():
            values = value if isinstance(value, (list, tuple)) else [value]
            parsed[str(key)] = [str(item) for item in values if item is not None and str(item) != ""]
        return {key: values for key, values in parsed.items() if values}
    return parse_qs(query.lstrip("?"), keep_blank_values=False)


def _contains(path: str, markers: tuple[str, ...]) -> bool:
    return any(marker in path for marker in markers)


def classify_request(path: str, query: str | Mapping[str, Any] | None = None) -> CacheDecision:
    normalized = _normalize_path(path)
    params = _parse_query(query)
    segments = normalized.split("/") if normalized else []

    if _contains(normalized, LIVE_MARKERS) or (
        "fixtures" in segments and "all" in (value.lower() for value in params.get("live", []))
    ):
        return CacheDecision(CacheKind.live_scores, LIVE_SECONDS)
    if segments and segments[-1] == "fixtures" and any(params.get(key) for key in MATCH_ID_KEYS):
        return CacheDecision(CacheKind.single_fixture, UPCOMING_SECONDS, needs_body=True)
    if _contains(normalized, DETAIL_MARKERS):
        return CacheDecision(CacheKind.match_details, MATCH_DETAIL_SECONDS)
    if _contains(normalized, RANKING_MARKERS):
        return CacheDecision(CacheKind.rankings, DAY_SECONDS)
    if "fixtures" in normalized and not _contains(normalized, HEAD_TO_HEAD_MARKERS):
        return CacheDecision(CacheKind.fixtures, FIXTURES_SECONDS)
    if _contains(normalized, REFERENCE_MARKERS):
        return CacheDecision(CacheKind.reference, WEEK_SECONDS)
    if _contains(normalized, HEAD_TO_HEAD_MARKERS):
        return CacheDecision(CacheKind.head_to_head, DAY_SECONDS)
    if _contains(normalized, LEAGUE_MARKERS):
        return CacheDecision(CacheKind.leagues, WEEK_SECONDS)
    return CacheDecision(CacheKind.default, DEFAULT_SECONDS)


def seconds_for_status(status: MatchStatus) -> int:
    if status in (MatchStatus.live, MatchStatus.halftime):
        return LIVE_SECONDS
    if status is MatchStatus.finished:
        return DAY_SECONDS
    return UPCOMING_SECONDS


def refine_with_body(decision: CacheDecision, body: Any, *, provider: str) -> int:
    if not decision.needs_body or body is None:
        return decision.seconds
    extractor = STATUS_EXTRACTORS.get(provider)
    if extractor is None:
        return decision.seconds
    return seconds_for_status(map_status(provider, extractor(body)))


def resolve_cache_seconds(
    path: str,
    query: str | Mapping[str, Any] | None = None,
    body: Any = None,
    *,
    provider: str = "api_football",
) -> int:
    decision = classify_request(path, query)
    return refine_with_body(decision, body, provider=provider)


def build_cache_control(seconds: int) -> str:
    return f"public, s-maxage={seconds}, stale-while-revalidate={seconds * 2}"
