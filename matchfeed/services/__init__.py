from .match_details import MatchDetails, fetch_match_details, recent_form
from .squads import SquadEntry, fetch_league_squads, fetch_season_squads

__all__ = [
    "MatchDetails",
    "SquadEntry",
    "fetch_league_squads",
    "fetch_match_details",
    "fetch_season_squads",
    "recent_form",
]
