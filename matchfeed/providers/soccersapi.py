from __future__ import annotations

from typing import Any

from matchfeed.core.http_client import ProviderHttpClient
from matchfeed.core.payload import as_dict, as_id, as_list, as_text
from matchfeed.mappers import soccersapi_mapper as mapper
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


class SoccersApiProvider(ProviderAdapter):
    name = "soccersapi"

    def __init__(
        self,
        *,
        user: str,
        token: str,
        base_url: str = "https://api.soccersapi.com/v2.2",
        timeout_seconds: float = 15.0,
        client: ProviderHttpClient | None = None,
    ):
        self._client = client or ProviderHttpClient(
            provider=self.name,
            base_url=base_url,
            default_params={"user": user, "token": token},
            timeout_seconds=timeout_seconds,
        )

    async def _request(self, *, endpoint: str, params: dict[str, Any]) -> Any:
        payload, _headers = await self._client.request_json(endpoint=endpoint, params=params)
        return as_dict(payload).get("data")

    async def get_match(self, match_id: str) -> Match | None:
        data = await self._request(endpoint="/fixtures", params={"id": match_id, "t": "info"})
        return mapper.convert_match(data) if data else None

    async def get_team(self, team_id: str) -> Team | None:
        data = await self._request(endpoint="/teams", params={"id": team_id, "t": "info"})
        return mapper.convert_team(data) if data else None

    async def get_standings(self, season_id: str, league_id: str | None = None) -> list[Standing]:
        # Seasons are globally unique here, the league id is not needed.
        data = await self._request(endpoint="/standings", params={"season_id": season_id, "t": "total"})
        return mapper.convert_standings(data)

    async def get_fixtures(
        self,
        season_id: str,
        *,
        team_id: str | None = None,
        league_id: str | None = None,
    ) -> list[Match]:
        params = {"season_id": season_id, "t": "season"}
        if team_id:
            params["team_id"] = team_id
        data = await self._request(endpoint="/fixtures", params=params)
        return [mapper.convert_match(row) for row in as_list(data)]

    async def get_leaders(self, season_id: str, league_id: str | None = None) -> list[Leader]:
        data = await self._request(endpoint="/leaders", params={"season_id": season_id, "t": "topscorers"})
        return [mapper.convert_leader(row, position=index) for index, row in enumerate(as_list(data), start=1)]

    async def get_venue(self, venue_id: str) -> Venue | None:
        data = await self._request(endpoint="/venues", params={"id": venue_id, "t": "info"})
        return mapper.convert_venue(data) if data else None

    async def get_h2h(self, team1_id: str, team2_id: str) -> H2H | None:
        data = await self._request(endpoint="/h2h", params={"team1": team1_id, "team2": team2_id, "t": "teams"})
        return mapper.convert_h2h(data, team1_id, team2_id) if data else None

    async def get_match_events(self, match_id: str) -> list[MatchEvent]:
        data = await self._request(endpoint="/fixtures/events", params={"match_id": match_id, "t": "info"})
        return mapper.convert_match_events(data)

    async def get_match_stats(self, match_id: str) -> MatchStats | None:
        data = await self._request(endpoint="/stats", params={"match_id": match_id, "t": "info"})
        return mapper.convert_match_stats(data) if data else None

    async def get_match_lineups(self, match_id: str) -> MatchLineups | None:
        data = await self._request(endpoint="/fixtures/lineups", params={"match_id": match_id, "t": "info"})
        return mapper.convert_match_lineups(data) if data else None

    async def get_leagues(self, country_id: str) -> list[League]:
        data = await self._request(endpoint="/leagues", params={"country_id": country_id, "t": "list"})
        return [mapper.convert_league(row) for row in as_list(data)]

    async def get_league(self, league_id: str) -> League | None:
        data = await self._request(endpoint="/leagues", params={"id": league_id, "t": "info"})
        return mapper.convert_league(data) if data else None

    async def get_country_id(self, country_name: str) -> str | None:
        wanted = (as_text(country_name) or "").lower()
        if not wanted:
            return None
        data = await self._request(endpoint="/countries", params={"t": "list"})
        for country in as_list(data):
            if (as_text(as_dict(country).get("name")) or "").lower() == wanted:
                return as_id(country.get("id")) or None
        return None

    async def get_squad(self, team_id: str, season_id: str | None = None) -> list[Player]:
        params = {"id": team_id, "t": "squad"}
        if season_id:
            params["season_id"] = season_id
        data = await self._request(endpoint="/teams", params=params)
        return mapper.convert_squad(data)

    async def get_player(self, player_id: str) -> Player | None:
        data = await self._request(endpoint="/players", params={"id": player_id, "t": "info"})
        return mapper.convert_player(data) if data else None

    async def get_live_matches(self) -> list[Match]:
        data = await self._request(endpoint="/livescores", params={"t": "live"})
        return [mapper.convert_match(row) for row in as_list(data)]

    async def aclose(self) -> None:
        await self._client.aclose()
