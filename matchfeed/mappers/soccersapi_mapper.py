"""Converters for SoccersAPI v2.2 payloads.

Shape contract (documented, not enforced): responses are ``{"data": ..., "meta": ...}``
where ``data`` is an object for ``t=info`` calls and a list for collections. Field
names drift between endpoints (``team`` vs ``team_id``/``team_name``, ``overall.*``
vs flat counters), so every converter accepts both spellings.
"""

from __future__ import annotations

from typing import Any

from matchfeed.core.payload import as_dict, as_id, as_int, as_list, as_text, dig, first
from matchfeed.mappers.common import (
    POSSESSION_DEFAULT,
    UNKNOWN_NAME,
    parse_stat_value,
    player_name,
    resolve_date_time,
    tally_h2h,
)
from matchfeed.mappers.status_mapper import map_event_type, map_soccersapi_status
from matchfeed.models.normalized import (
    Coach,
    Coordinates,
    EventType,
    H2H,
    League,
    LeagueRef,
    Leader,
    Lineup,
    LineupPlayer,
    Match,
    MatchEvent,
    MatchLineups,
    MatchStats,
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

TEAM_LOGO_URL = "https://cdn.soccersapi.com/images/soccer/teams/100/{team_id}.png"

OPTIONAL_STATS = {
    "shots_total": "shots_total",
    "shots_on_target": "shots_on_target",
    "corners": "corners",
    "fouls": "fouls",
    "yellow_cards": "yellow_cards",
    "red_cards": "red_cards",
    "offsides": "offsides",
}


def _team_ref(raw: dict[str, Any], key: str) -> dict[str, Any]:
    nested = as_dict(raw.get(key))
    if nested:
        return nested
    return {"id": raw.get(f"{key}_id"), "name": raw.get(f"{key}_name")}


def _coordinates(raw: Any) -> Coordinates | None:
    coordinates = as_dict(raw)
    if not coordinates:
        return None
    return Coordinates(
        lat=as_id(coordinates.get("lat")),
        lng=as_id(first(coordinates.get("long"), coordinates.get("lng"))),
    )


def _ht_score(value: Any) -> tuple[int | None, int | None]:
    text = as_text(value)
    if not text or "-" not in text:
        return None, None
    home, _, away = text.partition("-")
    return as_int(home), as_int(away)


def convert_team_basic(raw: Any) -> TeamBasic:
    team = as_dict(raw)
    team_id = as_id(team.get("id"))
    return TeamBasic(
        id=team_id,
        name=as_text(team.get("name")) or UNKNOWN_NAME,
        logo=as_text(team.get("img")) or TEAM_LOGO_URL.format(team_id=team_id),
    )


def convert_player(raw: Any) -> Player:
    player = as_dict(raw)
    return Player(
        id=as_id(player.get("id")),
        name=player_name(player),
        first_name=as_text(player.get("firstname")),
        last_name=as_text(player.get("lastname")),
        nationality=as_text(dig(player, "country", "name")) or as_text(player.get("nationality")),
        position=as_text(player.get("position")),
        number=as_int(player.get("number")),
        age=as_int(player.get("age")),
        height=as_text(player.get("height")),
        weight=as_text(player.get("weight")),
        photo=as_text(player.get("img")),
    )


def convert_match(raw: Any) -> Match:
    row = as_dict(raw)
    teams = as_dict(row.get("teams"))
    scores = as_dict(row.get("scores"))
    league = as_dict(row.get("league"))
    date, time = resolve_date_time(
        date=dig(row, "time", "date"),
        time=dig(row, "time", "time"),
        combined=row.get("startdate"),
    )
    halftime_home, halftime_away = _ht_score(scores.get("ht_score"))

    home_score = scores.get("home_score")
    away_score = scores.get("away_score")
    season_id = as_id(row.get("season_id"))
    return Match(
        id=as_id(row.get("id")),
        status=map_soccersapi_status(row.get("status")),
        date=date,
        time=time,
        home_team=convert_team_basic(as_dict(teams.get("home")) or _team_ref(row, "home_team")),
        away_team=convert_team_basic(as_dict(teams.get("away")) or _team_ref(row, "away_team")),
        score=Score(
            home=as_int(row.get("home_score") if home_score is None else home_score),
            away=as_int(row.get("away_score") if away_score is None else away_score),
            halftime_home=halftime_home,
            halftime_away=halftime_away,
        ),
        league=LeagueRef(
            id=as_id(first(league.get("id"), row.get("league_id"))),
            name=as_text(first(league.get("name"), row.get("league_name"))) or "",
            logo=as_text(league.get("img")),
        ),
        venue=VenueRef(id=as_id(row.get("venue_id")), name=as_text(row.get("venue_name")) or "")
        if row.get("venue_id")
        else None,
        round=as_text(row.get("round_name")) or as_text(dig(row, "round", "name")),
        season_id=season_id or None,
    )


def convert_team(raw: Any) -> Team:
    row = as_dict(raw)
    team_id = as_id(row.get("id"))
    venue = as_dict(row.get("venue"))
    coach = as_dict(row.get("coach"))
    return Team(
        id=team_id,
        name=as_text(row.get("name")) or UNKNOWN_NAME,
        logo=as_text(row.get("img")) or TEAM_LOGO_URL.format(team_id=team_id),
        short_name=as_text(row.get("short_name")),
        country=as_text(dig(row, "country", "name")),
        founded=as_int(row.get("founded")),
        venue=TeamVenue(
            id=as_id(venue.get("id")),
            name=as_text(venue.get("name")) or "",
            city=as_text(venue.get("city")),
            capacity=as_int(venue.get("capacity")),
            address=as_text(venue.get("address")),
            coordinates=_coordinates(venue.get("coordinates")),
        )
        if venue
        else None,
        coach=Coach(
            id=as_id(coach.get("id")),
            name=as_text(coach.get("name")) or UNKNOWN_NAME,
            nationality=as_text(dig(coach, "country", "name")),
        )
        if coach
        else None,
    )


def _counter(row: dict[str, Any], key: str, overall_key: str) -> int:
    return as_int(first(row.get(key), dig(row, "overall", overall_key))) or 0


def convert_standing(raw: Any) -> Standing:
    row = as_dict(raw)
    goals_for = _counter(row, "goals_for", "goals_for")
    goals_against = _counter(row, "goals_against", "goals_against")
    explicit_diff = as_int(first(row.get("goal_diff"), dig(row, "overall", "goal_diff")))
    return Standing(
        position=as_int(first(row.get("position"), row.get("rank"))) or 0,
        team=convert_team_basic(as_dict(row.get("team")) or _team_ref(row, "team")),
        played=_counter(row, "played", "games_played"),
        won=_counter(row, "won", "won"),
        drawn=_counter(row, "draw", "draw"),
        lost=_counter(row, "lost", "lost"),
        goals_for=goals_for,
        goals_against=goals_against,
        goal_difference=goals_for - goals_against if explicit_diff is None else explicit_diff,
        points=_counter(row, "points", "points"),
        form=as_text(row.get("recent_form")),
        description=as_text(row.get("description")),
    )


def convert_standings(data: Any) -> list[Standing]:
    rows = data if isinstance(data, list) else as_list(as_dict(data).get("standings"))
    return [convert_standing(row) for row in rows]


def convert_leader(raw: Any, position: int | None = None) -> Leader:
    row = as_dict(raw)
    goals = row.get("goals")
    goal_count = as_dict(goals).get("overall") if isinstance(goals, dict) else goals
    return Leader(
        position=as_int(first(row.get("position"), row.get("rank"))) or position or 0,
        player=convert_player(as_dict(row.get("player")) or row),
        team=convert_team_basic(as_dict(row.get("team")) or _team_ref(row, "team")),
        goals=as_int(goal_count) or 0,
        assists=as_int(row.get("assists")),
        matches=as_int(first(row.get("matches"), row.get("games_played"))),
    )


def convert_venue(raw: Any) -> Venue:
    row = as_dict(raw)
    return Venue(
        id=as_id(row.get("id")),
        name=as_text(row.get("name")) or UNKNOWN_NAME,
        city=as_text(row.get("city")),
        country=as_text(dig(row, "country", "name")),
        capacity=as_int(row.get("capacity")),
        address=as_text(row.get("address")),
        coordinates=_coordinates(row.get("coordinates")),
        image=as_text(row.get("img")),
    )


def convert_league(raw: Any) -> League:
    row = as_dict(raw)
    current_season = as_id(row.get("current_season_id"))
    return League(
        id=as_id(row.get("id")),
        name=as_text(row.get("name")) or UNKNOWN_NAME,
        country=as_text(dig(row, "country", "name")),
        logo=as_text(row.get("img")),
        is_cup=row.get("is_cup") is True or as_int(row.get("is_cup")) == 1,
        current_season_id=current_season or None,
    )


def convert_h2h(raw: Any, home_team_id: Any, away_team_id: Any) -> H2H:
    matches = [convert_match(row) for row in as_list(as_dict(raw).get("h2h"))]
    return tally_h2h(matches, home_team_id, away_team_id)


def convert_match_event(raw: Any) -> MatchEvent:
    row = as_dict(raw)
    event_type = map_event_type(first(row.get("type"), row.get("event_type")), row.get("detail"))
    related_raw = as_dict(first(row.get("assist"), row.get("related_player")))
    related = convert_player(related_raw) if related_raw.get("id") else None
    is_substitution = event_type is EventType.substitution
    event_id = as_id(row.get("id"))
    return MatchEvent(
        id=event_id or None,
        minute=max(as_int(row.get("minute")) or 0, 0),
        type=event_type,
        team=convert_team_basic(as_dict(row.get("team")) or _team_ref(row, "team")),
        player=convert_player(row.get("player")) if row.get("player") else None,
        assist_player=None if is_substitution else related,
        incoming_player=related if is_substitution else None,
        detail=as_text(first(row.get("detail"), row.get("comment"))),
    )


def convert_match_events(raw: Any) -> list[MatchEvent]:
    return [convert_match_event(row) for row in as_list(raw)]


def _pair(raw: Any, default: int = 0) -> StatPair:
    values = as_dict(raw)
    return StatPair(
        home=parse_stat_value(values.get("home"), default),
        away=parse_stat_value(values.get("away"), default),
    )


def convert_match_stats(raw: Any) -> MatchStats:
    row = as_dict(raw)
    optional = {
        field_name: _pair(row[key]) if as_dict(row.get(key)) else None
        for field_name, key in OPTIONAL_STATS.items()
    }
    return MatchStats(possession=_pair(row.get("possession"), POSSESSION_DEFAULT), **optional)


def _lineup_player(entry: Any, index: int) -> LineupPlayer:
    row = as_dict(entry)
    captain = row.get("captain")
    return LineupPlayer(
        player=convert_player(as_dict(row.get("player")) or row),
        position=as_text(row.get("position")) or "",
        number=as_int(row.get("number")) or index + 1,
        is_captain=captain is True or str(captain) == "1",
    )


def convert_lineup(raw: Any) -> Lineup:
    team = as_dict(raw)
    return Lineup(
        formation=as_text(team.get("formation")),
        players=tuple(_lineup_player(entry, index) for index, entry in enumerate(as_list(team.get("squad")))),
        substitutes=tuple(
            _lineup_player(entry, index) for index, entry in enumerate(as_list(team.get("substitutes")))
        ),
    )


def convert_match_lineups(raw: Any) -> MatchLineups:
    row = as_dict(raw)
    return MatchLineups(home=convert_lineup(row.get("home")), away=convert_lineup(row.get("away")))


def convert_squad(data: Any) -> list[Player]:
    entries = data if isinstance(data, list) else as_list(as_dict(data).get("squad"))
    players: list[Player] = []
    for entry in entries:
        row = as_dict(entry)
        nested = as_dict(row.get("player"))
        # Squad rows keep shirt number and role next to the nested player object.
        players.append(convert_player({**row, **nested} if nested else row))
    return players
