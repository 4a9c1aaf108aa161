"""Provider-agnostic football entities.

These types are stable: switching the upstream provider never changes them.
Every instance is a frozen snapshot built fresh by a converter; nested sequences
are tuples so two conversions of the same payload compare equal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class MatchStatus(str, Enum):
    scheduled = "scheduled"
    live = "live"
    halftime = "halftime"
    finished = "finished"
    postponed = "postponed"
    cancelled = "cancelled"


class EventType(str, Enum):
    goal = "goal"
    own_goal = "own_goal"
    penalty = "penalty"
    yellow_card = "yellow_card"
    red_card = "red_card"
    substitution = "substitution"
    var = "var"
    other = "other"


@dataclass(frozen=True)
class TeamBasic:
    id: str
    name: str
    logo: str


@dataclass(frozen=True)
class Score:
    home: int | None
    away: int | None
    halftime_home: int | None = None
    halftime_away: int | None = None


@dataclass(frozen=True)
class LeagueRef:
    id: str
    name: str
    logo: str | None = None


@dataclass(frozen=True)
class VenueRef:
    id: str
    name: str


@dataclass(frozen=True)
class Match:
    id: str
    status: MatchStatus
    date: str
    time: str
    home_team: TeamBasic
    away_team: TeamBasic
    score: Score
    league: LeagueRef
    venue: VenueRef | None = None
    round: str | None = None
    season_id: str | None = None

    @property
    def has_result(self) -> bool:
        if self.score.home is None or self.score.away is None:
            return False
        return self.status is MatchStatus.finished


@dataclass(frozen=True)
class Coordinates:
    lat: str
    lng: str


@dataclass(frozen=True)
class TeamVenue:
    id: str
    name: str
    city: str | None = None
    capacity: int | None = None
    address: str | None = None
    coordinates: Coordinates | None = None


@dataclass(frozen=True)
class Coach:
    id: str
    name: str
    nationality: str | None = None


@dataclass(frozen=True)
class Team:
    id: str
    name: str
    logo: str
    short_name: str | None = None
    country: str | None = None
    founded: int | None = None
    venue: TeamVenue | None = None
    coach: Coach | None = None


@dataclass(frozen=True)
class Standing:
    position: int
    team: TeamBasic
    played: int
    won: int
    drawn: int
    lost: int
    goals_for: int
    goals_against: int
    goal_difference: int
    points: int
    form: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class Player:
    id: str
    name: str
    first_name: str | None = None
    last_name: str | None = None
    nationality: str | None = None
    position: str | None = None
    number: int | None = None
    age: int | None = None
    height: str | None = None
    weight: str | None = None
    photo: str | None = None


@dataclass(frozen=True)
class Leader:
    position: int
    player: Player
    team: TeamBasic
    goals: int
    assists: int | None = None
    matches: int | None = None


@dataclass(frozen=True)
class Venue:
    id: str
    name: str
    city: str | None = None
    country: str | None = None
    capacity: int | None = None
    address: str | None = None
    coordinates: Coordinates | None = None
    image: str | None = None


@dataclass(frozen=True)
class League:
    id: str
    name: str
    country: str | None = None
    logo: str | None = None
    is_cup: bool = False
    current_season_id: str | None = None


@dataclass(frozen=True)
class H2H:
    """Head-to-head record between two teams.

    ``home_team_wins`` counts wins of the reference team passed to the converter and
    ``away_team_wins`` wins of its opponent, whatever side each played on in a given
    match. Only matches with a result are tallied, so the three counters add up to
    the number of ``decided_matches``.
    """

    matches: tuple[Match, ...]
    home_team_wins: int
    away_team_wins: int
    draws: int

    @property
    def decided_matches(self) -> tuple[Match, ...]:
        return tuple(match for match in self.matches if match.has_result)


@dataclass(frozen=True)
class MatchEvent:
    """A timeline entry.

    For substitutions ``player`` is the player leaving the pitch and
    ``incoming_player`` the one coming on; ``assist_player`` only ever holds a
    real assist.
    """

    minute: int
    type: EventType
    team: TeamBasic
    id: str | None = None
    player: Player | None = None
    assist_player: Player | None = None
    incoming_player: Player | None = None
    detail: str | None = None

    @property
    def player_out(self) -> Player | None:
        return self.player if self.type is EventType.substitution else None

    @property
    def player_in(self) -> Player | None:
        return self.incoming_player if self.type is EventType.substitution else None


@dataclass(frozen=True)
class StatPair:
    home: int
    away: int


@dataclass(frozen=True)
class MatchStats:
    possession: StatPair
    shots_total: StatPair | None = None
    shots_on_target: StatPair | None = None
    corners: StatPair | None = None
    fouls: StatPair | None = None
    yellow_cards: StatPair | None = None
    red_cards: StatPair | None = None
    offsides: StatPair | None = None


@dataclass(frozen=True)
class LineupPlayer:
    player: Player
    position: str
    number: int
    is_captain: bool = False


@dataclass(frozen=True)
class Lineup:
    formation: str | None = None
    players: tuple[LineupPlayer, ...] = field(default_factory=tuple)
    substitutes: tuple[LineupPlayer, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class MatchLineups:
    home: Lineup
    away: Lineup
