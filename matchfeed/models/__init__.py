from .normalized import (
    H2H,
    Coach,
    Coordinates,
    EventType,
    League,
    LeagueRef,
    Leader,
    Lineup,
    LineupPlayer,
    Match,
    MatchEvent,
    MatchLineups,
    MatchStats,
    MatchStatus,
    Player,
    Score,
    Standing,
    StatPair,
    Team,
    TeamBasic,
    TeamVenue,
    Venue,
    VenueRef,
)

__all__ = [
    "Coach",
    "Coordinates",
    "EventType",
    "H2H",
    "League",
    "LeagueRef",
    "Leader",
    "Lineup",
    "LineupPlayer",
    "Match",
    "MatchEvent",
    "MatchLineups",
    "MatchStats",
    "MatchStatus",
    "Player",
    "Score",
    "Standing",
    "StatPair",
    "Team",
    "TeamBasic",
    "TeamVenue",
    "Venue",
    "VenueRef",
]
