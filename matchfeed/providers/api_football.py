from __future__ import annotations

from typing import Any

from matchfeed.core.http_client import ProviderHttpClient, ProviderRequestError
from matchfeed.core.payload import as_list, as_text
from matchfeed.mappers import api_football_mapper as mapper
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

from .base import ProviderAdapter


class APIFootballProvider(ProviderAdapter):
    name = "api_football"

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str = "https://v3.football.api-sports.io",
        timeout_seconds: float = 15.0,
        client: ProviderHttpClient | None = None,
    ):
        self._client = client or ProviderHttpClient(
            provider=self.name,
            base_url=base_url,
            default_headers={"x-apisports-key": api_key},
            timeout_seconds=timeout_seconds,
        )

    async def _request(self, *, endpoint: str, params: dict[str, Any]) -> list[Any]:
        payload, _headers = await self._client.request_json(endpoint=endpoint, params=params)
        errors = payload.get("errors") if isinstance(payload, dict) else None
        if errors:
            raise ProviderRequestError(
                f"provider={self.name} endpoint={endpoint} errors={errors}",
                provider=self.name,
                endpoint=endpoint,
            )
        return as_list(payload.get("response")) if isinstance(payload, dict) else []

    async def get_match(self, match_id: str) -> Match | None:
        rows = await self._request(endpoint="/fixtures", params={"id": match_id})
        return mapper.convert_match(rows[0]) if rows else None

    async def get_team(self, team_id: str) -> Team | None:
        rows = await self._request(endpoint="/teams", params={"id": team_id})
        return mapper.convert_team(rows[0]) if rows else None

    async def get_standings(self, season_id: str, league_id: str | None = None) -> list[Standing]:
        params = {"season": season_id}
        if league_id:
            params["league"] = league_id
        rows = await self._request(endpoint="/standings", params=params)
        return mapper.convert_standings(rows)

    async def get_fixtures(
        self,
        season_id: str,
        *,
        team_id: str | None = None,
        league_id: str | None = None,
    ) -> list[Match]:
        params = {"season": season_id}
        if team_id:
            params["team"] = team_id
        if league_id:
            params["league"] = league_id
        rows = await self._request(endpoint="/fixtures", params=params)
        return [mapper.convert_match(row) for row in rows]

    async def get_leaders(self, season_id: str, league_id: str | None = None) -> list[Leader]:
        params = {"season": season_id}
        if league_id:
            params["league"] = league_id
        rows = await self._request(endpoint="/players/topscorers", params=params)
        return [mapper.convert_leader(row, position=index) for index, row in enumerate(rows, start=1)]

    async def get_venue(self, venue_id: str) -> Venue | None:
        rows = await self._request(endpoint="/venues", params={"id": venue_id})
        return mapper.convert_venue(rows[0]) if rows else None

    async def get_h2h(self, team1_id: str, team2_id: str) -> H2H | None:
        rows = await self._request(endpoint="/fixtures/headtohead", params={"h2h": f"{team1_id}-{team2_id}"})
        return mapper.convert_h2h(rows, team1_id, team2_id)

    async def get_match_events(self, match_id: str) -> list[MatchEvent]:
        rows = await self._request(endpoint="/fixtures/events", params={"fixture": match_id})
        return mapper.convert_match_events(rows)

    async def get_match_stats(self, match_id: str) -> MatchStats | None:
        rows = await self._request(endpoint="/fixtures/statistics", params={"fixture": match_id})
        return mapper.convert_match_stats(rows) if rows else None

    async def get_match_lineups(self, match_id: str) -> MatchLineups | None:
        rows = await self._request(endpoint="/fixtures/lineups", params={"fixture": match_id})
        return mapper.convert_match_lineups(rows) if rows else None

    async def get_leagues(self, country_id: str) -> list[League]:
        # Leagues are filtered by country name; get_country_id returns that name.
        rows = await self._request(endpoint="/leagues", params={"country": country_id})
        return [mapper.convert_league(row) for row in rows]

    async def get_league(self, league_id: str) -> League | None:
        rows = await self._request(endpoint="/leagues", params={"id": league_id})
        return mapper.convert_league(rows[0]) if rows else None

    async def get_country_id(self, country_name: str) -> str | None:
        name = as_text(country_name)
        if name is None:
            return None
        return name.capitalize() if name.islower() else name

    async def get_squad(self, team_id: str, season_id: str | None = None) -> list[Player]:
        # The squads endpoint always returns the current squad.
        rows = await self._request(endpoint="/players/squads", params={"team": team_id})
        return mapper.convert_squad(rows)

    async def get_player(self, player_id: str) -> Player | None:
        rows = await self._request(endpoint="/players/profiles", params={"player": player_id})
        if not rows:
            return None
        return mapper.convert_player(rows[0].get("player") if isinstance(rows[0], dict) else None)

    async def get_live_matches(self) -> list[Match]:
        rows = await self._request(endpoint="/fixtures", params={"live": "all"})
        return [mapper.convert_match(row) for row in rows]

    async def aclose(self) -> None:
        await self._client.aclose()
