"""Single import surface for consumers.

The active adapter is chosen once and every function below forwards to it, so switching
providers never touches a caller. Call ``configure()`` at startup to surface configuration
errors there; otherwise the first ``fetch_*`` call configures from ``ACTIVE_PROVIDER`` and
raises ``RuntimeError`` on a bad provider name or missing credentials.
"""

from __future__ import annotations

from matchfeed.models.normalized import (
    H2H,
    League,
    Leader,
    Match,
    MatchEvent,
    MatchLineups,
    MatchStats,
    Player,
    Standing,
    Team,
    Venue,
)
from matchfeed.providers.base import ProviderAdapter
from matchfeed.providers.registry import get_provider

_active_provider: ProviderAdapter | None = None


def configure(provider: ProviderAdapter | str | None = None) -> ProviderAdapter:
    global _active_provider
    if provider is None or isinstance(provider, str):
        _active_provider = get_provider(provider)
    else:
        _active_provider = provider
    return _active_provider


def active_provider() -> ProviderAdapter:
    if _active_provider is None:
        return configure()
    return _active_provider


def reset() -> None:
    global _active_provider
    _active_provider = None


async def fetch_match(match_id: str) -> Match | None:
    return await active_provider().fetch_match(match_id)


async def fetch_team(team_id: str) -> Team | None:
    return await active_provider().fetch_team(team_id)


async def fetch_standings(season_id: str, league_id: str | None = None) -> list[Standing]:
    return await active_provider().fetch_standings(season_id, league_id)


async def fetch_fixtures(
    season_id: str,
    *,
    team_id: str | None = None,
    league_id: str | None = None,
) -> list[Match]:
    return await active_provider().fetch_fixtures(season_id, team_id=team_id, league_id=league_id)


async def fetch_leaders(season_id: str, league_id: str | None = None) -> list[Leader]:
    return await active_provider().fetch_leaders(season_id, league_id)


async def fetch_venue(venue_id: str) -> Venue | None:
    return await active_provider().fetch_venue(venue_id)


async def fetch_h2h(team1_id: str, team2_id: str) -> H2H | None:
    return await active_provider().fetch_h2h(team1_id, team2_id)


async def fetch_match_events(match_id: str) -> list[MatchEvent]:
    return await active_provider().fetch_match_events(match_id)


async def fetch_match_stats(match_id: str) -> MatchStats | None:
    return await active_provider().fetch_match_stats(match_id)


async def fetch_match_lineups(match_id: str) -> MatchLineups | None:
    return await active_provider().fetch_match_lineups(match_id)


async def fetch_leagues(country_id: str) -> list[League]:
    return await active_provider().fetch_leagues(country_id)


async def fetch_league(league_id: str) -> League | None:
    return await active_provider().fetch_league(league_id)


async def fetch_country_id(country_name: str) -> str | None:
    return await active_provider().fetch_country_id(country_name)


async def fetch_country_leagues(country_name: str) -> list[League]:
    return await active_provider().fetch_country_leagues(country_name)


async def fetch_squad(team_id: str, season_id: str | None = None) -> list[Player]:
    return await active_provider().fetch_squad(team_id, season_id)


async def fetch_player(player_id: str) -> Player | None:
    return await active_provider().fetch_player(player_id)


async def fetch_live_matches() -> list[Match]:
    return await active_provider().fetch_live_matches()
