from .facade import (
    active_provider,
    configure,
    fetch_country_id,
    fetch_country_leagues,
    fetch_fixtures,
    fetch_h2h,
    fetch_league,
    fetch_leagues,
    fetch_leaders,
    fetch_live_matches,
    fetch_match,
    fetch_match_events,
    fetch_match_lineups,
    fetch_match_stats,
    fetch_player,
    fetch_squad,
    fetch_standings,
    fetch_team,
    fetch_venue,
)
from .models.normalized import (
    H2H,
    League,
    Leader,
    Match,
    MatchEvent,
    MatchLineups,
    MatchStats,
    MatchStatus,
    Player,
    Standing,
    Team,
    TeamBasic,
    Venue,
)

__all__ = [
    "H2H",
    "League",
    "Leader",
    "Match",
    "MatchEvent",
    "MatchLineups",
    "MatchStats",
    "MatchStatus",
    "Player",
    "Standing",
    "Team",
    "TeamBasic",
    "Venue",
    "active_provider",
    "configure",
    "fetch_country_id",
    "fetch_country_leagues",
    "fetch_fixtures",
    "fetch_h2h",
    "fetch_league",
    "fetch_leagues",
    "fetch_leaders",
    "fetch_live_matches",
    "fetch_match",
    "fetch_match_events",
    "fetch_match_lineups",
    "fetch_match_stats",
    "fetch_player",
    "fetch_squad",
    "fetch_standings",
    "fetch_team",
    "fetch_venue",
]
