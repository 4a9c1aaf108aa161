from __future__ import annotations

import asyncio
from collections.abc import Iterable
from dataclasses import dataclass, field
import logging

from matchfeed import facade
from matchfeed.models.normalized import H2H, Match, MatchEvent, MatchLineups, MatchStats, MatchStatus
from matchfeed.providers.base import ProviderAdapter

logger = logging.getLogger("matchfeed.services.match_details")

RECENT_FORM_SIZE = 5


@dataclass(frozen=True)
class MatchDetails:
    match: Match
    h2h: H2H | None = None
    stats: MatchStats | None = None
    events: tuple[MatchEvent, ...] = field(default_factory=tuple)
    lineups: MatchLineups | None = None
    home_form: tuple[Match, ...] = field(default_factory=tuple)
    away_form: tuple[Match, ...] = field(default_factory=tuple)


def recent_form(fixtures: Iterable[Match], limit: int = RECENT_FORM_SIZE) -> tuple[Match, ...]:
    finished = [match for match in fixtures if match.status is MatchStatus.finished]
    finished.sort(key=lambda match: (match.date, match.time), reverse=True)
    return tuple(finished[:limit])


async def _team_form(provider: ProviderAdapter, team_id: str, season_id: str | None) -> tuple[Match, ...]:
    if not team_id or not season_id:
        return ()
    return recent_form(await provider.fetch_fixtures(season_id, team_id=team_id))


async def _no_h2h() -> None:
    return None


async def fetch_match_details(match_id: str, provider: ProviderAdapter | None = None) -> MatchDetails | None:
    """Load a match and everything the match page shows next to it.

    The related fetches run concurrently; each one that fails degrades to its
    empty value without affecting the others.
    """
    adapter = provider or facade.active_provider()
    match = await adapter.fetch_match(match_id)
    if match is None:
        return None

    home_id = match.home_team.id
    away_id = match.away_team.id
    h2h_call = adapter.fetch_h2h(home_id, away_id) if home_id and away_id else _no_h2h()

    h2h, stats, events, lineups, home_form, away_form = await asyncio.gather(
        h2h_call,
        adapter.fetch_match_stats(match_id),
        adapter.fetch_match_events(match_id),
        adapter.fetch_match_lineups(match_id),
        _team_form(adapter, home_id, match.season_id),
        _team_form(adapter, away_id, match.season_id),
    )
    logger.info(
        "match_details match_id=%s provider=%s h2h=%s stats=%s events=%d lineups=%s",
        match_id,
        adapter.name,
        h2h is not None,
        stats is not None,
        len(events),
        lineups is not None,
    )
    return MatchDetails(
        match=match,
        h2h=h2h,
        stats=stats,
        events=tuple(events),
        lineups=lineups,
        home_form=home_form,
        away_form=away_form,
    )
