from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any

from matchfeed.core.payload import as_id, as_int, as_text, first
from matchfeed.models.normalized import H2H, Match, Player

UNKNOWN_NAME = "Unknown"
POSSESSION_DEFAULT = 50

_DATETIME_SEPARATOR = re.compile(r"[T ]")


def split_datetime(value: Any) -> tuple[str, str]:
    """Split ``YYYY-MM-DDTHH:MM:SS+00:00`` or ``YYYY-MM-DD HH:MM:SS`` into date and ``HH:MM``."""
    text = as_text(value)
    if text is None:
        return "", ""
    parts = _DATETIME_SEPARATOR.split(text, maxsplit=1)
    date_part = parts[0]
    time_part = parts[1][:5] if len(parts) > 1 else ""
    return date_part, time_part


def resolve_date_time(*, date: Any = None, time: Any = None, combined: Any = None) -> tuple[str, str]:
    split_date, split_time = split_datetime(combined)
    date_text = as_text(date)
    time_text = as_text(time)
    return (
        date_text or split_date,
        time_text[:5] if time_text else split_time,
    )


def parse_stat_value(value: Any, default: int = 0) -> int:
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, str):
        stripped = value.strip().rstrip("%").strip()
        parsed = as_int(stripped)
        return default if parsed is None else parsed
    parsed = as_int(value)
    return default if parsed is None else parsed


def player_name(raw: dict[str, Any]) -> str:
    full_name = " ".join(
        part for part in (as_text(raw.get("firstname")), as_text(raw.get("lastname"))) if part
    )
    name = first(as_text(raw.get("name")), as_text(raw.get("common_name")), full_name)
    return name or UNKNOWN_NAME


def has_usable_name(player: Player) -> bool:
    return player.name != UNKNOWN_NAME or bool(player.first_name or player.last_name)


def tally_h2h(matches: Iterable[Match], home_team_id: Any, away_team_id: Any) -> H2H:
    """Count results relative to ``home_team_id``, resolving its side match by match."""
    reference_id = as_id(home_team_id)
    opponent_id = as_id(away_team_id)
    ordered = tuple(matches)
    home_wins = away_wins = draws = 0

    for match in ordered:
        if not match.has_result:
            continue
        if match.home_team.id == reference_id:
            reference_is_home = True
        elif match.away_team.id == reference_id:
            reference_is_home = False
        else:
            reference_is_home = bool(opponent_id) and match.away_team.id == opponent_id

        home_goals = match.score.home or 0
        away_goals = match.score.away or 0
        if home_goals == away_goals:
            draws += 1
        elif (home_goals > away_goals) == reference_is_home:
            home_wins += 1
        else:
            away_wins += 1

    return H2H(matches=ordered, home_team_wins=home_wins, away_team_wins=away_wins, draws=draws)
