"""Converters for API-Football v3 payloads.

Shape contract (documented, not enforced): every endpoint wraps rows in
``{"errors": ..., "results": n, "response": [...]}``; fixtures carry
``fixture``/``league``/``teams``/``goals``/``score`` blocks; statistics and
lineups arrive as one row per team, home first.
"""

from __future__ import annotations

from typing import Any

from matchfeed.core.payload import as_dict, as_id, as_int, as_list, as_text, dig
from matchfeed.mappers.common import (
    POSSESSION_DEFAULT,
    UNKNOWN_NAME,
    parse_stat_value,
    player_name,
    resolve_date_time,
    tally_h2h,
)
from matchfeed.mappers.status_mapper import map_api_football_status, map_event_type
from matchfeed.models.normalized import (
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

STAT_TYPES = {
    "possession": "Ball Possession",
    "shots_total": "Total Shots",
    "shots_on_target": "Shots on Goal",
    "corners": "Corner Kicks",
    "fouls": "Fouls",
    "yellow_cards": "Yellow Cards",
    "red_cards": "Red Cards",
    "offsides": "Offsides",
}


def convert_team_basic(raw: Any) -> TeamBasic:
    team = as_dict(raw)
    return TeamBasic(
        id=as_id(team.get("id")),
        name=as_text(team.get("name")) or UNKNOWN_NAME,
        logo=as_text(team.get("logo")) or "",
    )


def convert_player(raw: Any) -> Player:
    player = as_dict(raw)
    return Player(
        id=as_id(player.get("id")),
        name=player_name(player),
        first_name=as_text(player.get("firstname")),
        last_name=as_text(player.get("lastname")),
        nationality=as_text(player.get("nationality")),
        position=as_text(player.get("pos")) or as_text(player.get("position")),
        number=as_int(player.get("number")),
        age=as_int(player.get("age")),
        height=as_text(player.get("height")),
        weight=as_text(player.get("weight")),
        photo=as_text(player.get("photo")),
    )


def convert_match(raw: Any) -> Match:
    row = as_dict(raw)
    fixture = as_dict(row.get("fixture")) or row
    teams = as_dict(row.get("teams"))
    goals = as_dict(row.get("goals"))
    league = as_dict(row.get("league"))
    venue = as_dict(fixture.get("venue"))
    date, time = resolve_date_time(combined=fixture.get("date"))

    season = as_id(league.get("season"))
    return Match(
        id=as_id(fixture.get("id")),
        status=map_api_football_status(dig(fixture, "status", "short")),
        date=date,
        time=time,
        home_team=convert_team_basic(teams.get("home")),
        away_team=convert_team_basic(teams.get("away")),
        score=Score(
            home=as_int(goals.get("home")),
            away=as_int(goals.get("away")),
            halftime_home=as_int(dig(row, "score", "halftime", "home")),
            halftime_away=as_int(dig(row, "score", "halftime", "away")),
        ),
        league=LeagueRef(
            id=as_id(league.get("id")),
            name=as_text(league.get("name")) or "",
            logo=as_text(league.get("logo")),
        ),
        venue=VenueRef(id=as_id(venue.get("id")), name=as_text(venue.get("name")) or "")
        if venue.get("id")
        else None,
        round=as_text(league.get("round")),
        season_id=season or None,
    )


def convert_team(raw: Any) -> Team:
    row = as_dict(raw)
    team = as_dict(row.get("team")) or row
    venue = as_dict(row.get("venue"))
    return Team(
        id=as_id(team.get("id")),
        name=as_text(team.get("name")) or UNKNOWN_NAME,
        logo=as_text(team.get("logo")) or "",
        short_name=as_text(team.get("code")),
        country=as_text(team.get("country")),
        founded=as_int(team.get("founded")),
        # The teams endpoint carries no coordinates.
        venue=TeamVenue(
            id=as_id(venue.get("id")),
            name=as_text(venue.get("name")) or "",
            city=as_text(venue.get("city")),
            capacity=as_int(venue.get("capacity")),
            address=as_text(venue.get("address")),
        )
        if venue
        else None,
    )


def convert_standing(raw: Any) -> Standing:
    row = as_dict(raw)
    overall = as_dict(row.get("all"))
    goals_for = as_int(dig(overall, "goals", "for")) or 0
    goals_against = as_int(dig(overall, "goals", "against")) or 0
    explicit_diff = as_int(row.get("goalsDiff"))
    return Standing(
        position=as_int(row.get("rank")) or 0,
        team=convert_team_basic(row.get("team")),
        played=as_int(overall.get("played")) or 0,
        won=as_int(overall.get("win")) or 0,
        drawn=as_int(overall.get("draw")) or 0,
        lost=as_int(overall.get("lose")) or 0,
        goals_for=goals_for,
        goals_against=goals_against,
        goal_difference=goals_for - goals_against if explicit_diff is None else explicit_diff,
        points=as_int(row.get("points")) or 0,
        form=as_text(row.get("form")),
        description=as_text(row.get("description")),
    )


def convert_standings(payload_rows: Any) -> list[Standing]:
    # response[0].league.standings is a list of groups; the first group is the main table.
    table = dig(as_list(payload_rows), 0, "league", "standings", 0, default=[])
    return [convert_standing(row) for row in as_list(table)]


def convert_leader(raw: Any, position: int | None = None) -> Leader:
    row = as_dict(raw)
    stats = as_dict(dig(row, "statistics", 0))
    return Leader(
        position=position or as_int(row.get("position")) or 0,
        player=convert_player(row.get("player")),
        team=convert_team_basic(stats.get("team")),
        goals=as_int(dig(stats, "goals", "total")) or 0,
        assists=as_int(dig(stats, "goals", "assists")),
        matches=as_int(dig(stats, "games", "appearences")),
    )


def convert_venue(raw: Any) -> Venue:
    row = as_dict(raw)
    return Venue(
        id=as_id(row.get("id")),
        name=as_text(row.get("name")) or UNKNOWN_NAME,
        city=as_text(row.get("city")),
        country=as_text(row.get("country")),
        capacity=as_int(row.get("capacity")),
        address=as_text(row.get("address")),
        image=as_text(row.get("image")),
    )


def convert_league(raw: Any) -> League:
    row = as_dict(raw)
    league = as_dict(row.get("league")) or row
    current = next(
        (season for season in as_list(row.get("seasons")) if as_dict(season).get("current") is True),
        {},
    )
    season_year = as_id(current.get("year"))
    return League(
        id=as_id(league.get("id")),
        name=as_text(league.get("name")) or UNKNOWN_NAME,
        country=as_text(dig(row, "country", "name")) or as_text(league.get("country")),
        logo=as_text(league.get("logo")),
        is_cup=str(league.get("type") or "").lower() == "cup",
        current_season_id=season_year or None,
    )


def convert_h2h(raw: Any, home_team_id: Any, away_team_id: Any) -> H2H:
    matches = [convert_match(row) for row in as_list(raw)]
    return tally_h2h(matches, home_team_id, away_team_id)


def convert_match_event(raw: Any) -> MatchEvent:
    row = as_dict(raw)
    event_type = map_event_type(row.get("type"), row.get("detail"))
    assist = as_dict(row.get("assist"))
    related = convert_player(assist) if assist.get("id") else None
    is_substitution = event_type is EventType.substitution
    return MatchEvent(
        minute=max(as_int(dig(row, "time", "elapsed")) or 0, 0),
        type=event_type,
        team=convert_team_basic(row.get("team")),
        player=convert_player(row.get("player")) if row.get("player") else None,
        assist_player=None if is_substitution else related,
        incoming_player=related if is_substitution else None,
        detail=as_text(row.get("detail")),
    )


def convert_match_events(raw: Any) -> list[MatchEvent]:
    return [convert_match_event(row) for row in as_list(raw)]


def _stat_value(stats: list[Any], stat_type: str, default: int) -> int:
    for stat in stats:
        if as_dict(stat).get("type") == stat_type:
            return parse_stat_value(stat.get("value"), default)
    return default


def convert_match_stats(raw: Any) -> MatchStats:
    rows = as_list(raw)
    home_stats = as_list(dig(rows, 0, "statistics"))
    away_stats = as_list(dig(rows, 1, "statistics"))

    def pair(field_name: str, default: int = 0) -> StatPair:
        stat_type = STAT_TYPES[field_name]
        return StatPair(
            home=_stat_value(home_stats, stat_type, default),
            away=_stat_value(away_stats, stat_type, default),
        )

    return MatchStats(
        possession=pair("possession", POSSESSION_DEFAULT),
        shots_total=pair("shots_total"),
        shots_on_target=pair("shots_on_target"),
        corners=pair("corners"),
        fouls=pair("fouls"),
        yellow_cards=pair("yellow_cards"),
        red_cards=pair("red_cards"),
        offsides=pair("offsides"),
    )


def _lineup_player(entry: Any) -> LineupPlayer:
    player = as_dict(as_dict(entry).get("player"))
    return LineupPlayer(
        player=convert_player(player),
        position=as_text(player.get("pos")) or "",
        number=as_int(player.get("number")) or 0,
        # Captaincy is not part of the lineups endpoint.
        is_captain=False,
    )


def convert_lineup(raw: Any) -> Lineup:
    team = as_dict(raw)
    return Lineup(
        formation=as_text(team.get("formation")),
        players=tuple(_lineup_player(entry) for entry in as_list(team.get("startXI"))),
        substitutes=tuple(_lineup_player(entry) for entry in as_list(team.get("substitutes"))),
    )


def convert_match_lineups(raw: Any) -> MatchLineups:
    rows = as_list(raw)
    return MatchLineups(
        home=convert_lineup(dig(rows, 0)),
        away=convert_lineup(dig(rows, 1)),
    )


def convert_squad(raw: Any) -> list[Player]:
    players = as_list(dig(as_list(raw), 0, "players"))
    return [convert_player(player) for player in players]
