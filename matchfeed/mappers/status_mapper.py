from __future__ import annotations

from typing import Any

from matchfeed.core.payload import as_int
from matchfeed.models.normalized import EventType, MatchStatus


API_FOOTBALL_STATUS = {
    "TBD": MatchStatus.scheduled,
    "NS": MatchStatus.scheduled,
    "1H": MatchStatus.live,
    "2H": MatchStatus.live,
    "ET": MatchStatus.live,
    "BT": MatchStatus.live,
    "P": MatchStatus.live,
    "SUSP": MatchStatus.live,
    "INT": MatchStatus.live,
    "LIVE": MatchStatus.live,
    "HT": MatchStatus.halftime,
    "FT": MatchStatus.finished,
    "AET": MatchStatus.finished,
    "PEN": MatchStatus.finished,
    "PST": MatchStatus.postponed,
    "CANC": MatchStatus.cancelled,
    "ABD": MatchStatus.cancelled,
    "AWD": MatchStatus.cancelled,
    "WO": MatchStatus.cancelled,
}

SOCCERSAPI_STATUS = {
    0: MatchStatus.scheduled,
    1: MatchStatus.live,
    2: MatchStatus.halftime,
    3: MatchStatus.finished,
    4: MatchStatus.postponed,
    5: MatchStatus.cancelled,
}


def map_api_football_status(code: Any) -> MatchStatus:
    if not isinstance(code, str):
        return MatchStatus.scheduled
    return API_FOOTBALL_STATUS.get(code.strip().upper(), MatchStatus.scheduled)


def map_soccersapi_status(code: Any) -> MatchStatus:
    parsed = as_int(code)
    if parsed is None:
        return MatchStatus.scheduled
    return SOCCERSAPI_STATUS.get(parsed, MatchStatus.scheduled)


_STATUS_MAPPERS = {
    "api_football": map_api_football_status,
    "soccersapi": map_soccersapi_status,
}


def map_status(provider: str, code: Any) -> MatchStatus:
    mapper = _STATUS_MAPPERS.get(provider)
    if mapper is None:
        return MatchStatus.scheduled
    return mapper(code)


def map_event_type(type_text: Any, detail_text: Any = None) -> EventType:
    """Derive the canonical event type from free-text type/detail values.

    Providers disagree on capitalization and qualifiers ("Goal - Header",
    "Own Goal", "yellowcard"), so every check is a substring match.
    """
    kind = str(type_text or "").strip().lower()
    detail = str(detail_text or "").strip().lower()
    text = f"{kind} {detail}"

    if kind.startswith("var"):
        return EventType.var
    if "subst" in kind or kind.startswith("sub") or "substitution" in detail:
        return EventType.substitution
    if "card" in text or "yellow" in text or "booking" in text:
        if "red" in text:
            return EventType.red_card
        return EventType.yellow_card
    if "goal" in text or "penalty" in text or kind.startswith("pen"):
        if "own" in text:
            return EventType.own_goal
        if "penalty" in text or kind.startswith("pen"):
            return EventType.penalty
        return EventType.goal
    if "red" in kind:
        return EventType.red_card
    if "var" in text:
        return EventType.var
    return EventType.other
