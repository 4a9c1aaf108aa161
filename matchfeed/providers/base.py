from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Awaitable
import logging
from typing import Any, TypeVar

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

T = TypeVar("T")

logger = logging.getLogger("matchfeed.providers")


class ProviderAdapter(ABC):
    """Uniform async access to one upstream provider.

    Subclasses implement the ``get_*`` methods, which may raise on transport or
    payload errors. Callers use the ``fetch_*`` methods defined here: they share one
    signature across every provider and never raise, resolving to ``None`` (single
    entity) or ``[]`` (collections) when the upstream call fails.
    """

    name: str

    @abstractmethod
    async def get_match(self, match_id: str) -> Match | None:
        """Fetch one fixture by id."""

    @abstractmethod
    async def get_team(self, team_id: str) -> Team | None:
        """Fetch team details."""

    @abstractmethod
    async def get_standings(self, season_id: str, league_id: str | None = None) -> list[Standing]:
        """Fetch the main league table of a season."""

    @abstractmethod
    async def get_fixtures(
        self,
        season_id: str,
        *,
        team_id: str | None = None,
        league_id: str | None = None,
    ) -> list[Match]:
        """Fetch the fixtures of a season, optionally narrowed to one team."""

    @abstractmethod
    async def get_leaders(self, season_id: str, league_id: str | None = None) -> list[Leader]:
        """Fetch the top scorers of a season."""

    @abstractmethod
    async def get_venue(self, venue_id: str) -> Venue | None:
        """Fetch venue details."""

    @abstractmethod
    async def get_h2h(self, team1_id: str, team2_id: str) -> H2H | None:
        """Fetch the head-to-head record, tallied relative to ``team1_id``."""

    @abstractmethod
    async def get_match_events(self, match_id: str) -> list[MatchEvent]:
        """Fetch the event timeline of a fixture."""

    @abstractmethod
    async def get_match_stats(self, match_id: str) -> MatchStats | None:
        """Fetch paired home/away statistics of a fixture."""

    @abstractmethod
    async def get_match_lineups(self, match_id: str) -> MatchLineups | None:
        """Fetch both lineups of a fixture."""

    @abstractmethod
    async def get_leagues(self, country_id: str) -> list[League]:
        """Fetch the leagues of a country, as identified by ``get_country_id``."""

    @abstractmethod
    async def get_league(self, league_id: str) -> League | None:
        """Fetch one league."""

    @abstractmethod
    async def get_country_id(self, country_name: str) -> str | None:
        """Resolve a country name to the identifier ``get_leagues`` expects."""

    @abstractmethod
    async def get_squad(self, team_id: str, season_id: str | None = None) -> list[Player]:
        """Fetch the squad of a team."""

    @abstractmethod
    async def get_player(self, player_id: str) -> Player | None:
        """Fetch player details."""

    @abstractmethod
    async def get_live_matches(self) -> list[Match]:
        """Fetch fixtures currently in play."""

    async def _guard(self, operation: str, call: Awaitable[T], default: T, **context: Any) -> T:
        try:
            return await call
        except Exception as exc:
            logger.warning(
                "fetch_failed provider=%s operation=%s context=%s error=%s: %s",
                self.name,
                operation,
                context,
                type(exc).__name__,
                exc,
            )
            return default

    async def fetch_match(self, match_id: str) -> Match | None:
        return await self._guard("match", self.get_match(match_id), None, match_id=match_id)

    async def fetch_team(self, team_id: str) -> Team | None:
        return await self._guard("team", self.get_team(team_id), None, team_id=team_id)

    async def fetch_standings(self, season_id: str, league_id: str | None = None) -> list[Standing]:
        return await self._guard(
            "standings",
            self.get_standings(season_id, league_id),
            [],
            season_id=season_id,
            league_id=league_id,
        )

    async def fetch_fixtures(
        self,
        season_id: str,
        *,
        team_id: str | None = None,
        league_id: str | None = None,
    ) -> list[Match]:
        return await self._guard(
            "fixtures",
            self.get_fixtures(season_id, team_id=team_id, league_id=league_id),
            [],
            season_id=season_id,
            team_id=team_id,
            league_id=league_id,
        )

    async def fetch_leaders(self, season_id: str, league_id: str | None = None) -> list[Leader]:
        return await self._guard(
            "leaders",
            self.get_leaders(season_id, league_id),
            [],
            season_id=season_id,
            league_id=league_id,
        )

    async def fetch_venue(self, venue_id: str) -> Venue | None:
        return await self._guard("venue", self.get_venue(venue_id), None, venue_id=venue_id)

    async def fetch_h2h(self, team1_id: str, team2_id: str) -> H2H | None:
        return await self._guard(
            "h2h",
            self.get_h2h(team1_id, team2_id),
            None,
            team1_id=team1_id,
            team2_id=team2_id,
        )

    async def fetch_match_events(self, match_id: str) -> list[MatchEvent]:
        return await self._guard("match_events", self.get_match_events(match_id), [], match_id=match_id)

    async def fetch_match_stats(self, match_id: str) -> MatchStats | None:
        return await self._guard("match_stats", self.get_match_stats(match_id), None, match_id=match_id)

    async def fetch_match_lineups(self, match_id: str) -> MatchLineups | None:
        return await self._guard("match_lineups", self.get_match_lineups(match_id), None, match_id=match_id)

    async def fetch_leagues(self, country_id: str) -> list[League]:
        return await self._guard("leagues", self.get_leagues(country_id), [], country_id=country_id)

    async def fetch_league(self, league_id: str) -> League | None:
        return await self._guard("league", self.get_league(league_id), None, league_id=league_id)

    async def fetch_country_id(self, country_name: str) -> str | None:
        return await self._guard(
            "country_id",
            self.get_country_id(country_name),
            None,
            country_name=country_name,
        )

    async def fetch_squad(self, team_id: str, season_id: str | None = None) -> list[Player]:
        return await self._guard(
            "squad",
            self.get_squad(team_id, season_id),
            [],
            team_id=team_id,
            season_id=season_id,
        )

    async def fetch_player(self, player_id: str) -> Player | None:
        return await self._guard("player", self.get_player(player_id), None, player_id=player_id)

    async def fetch_live_matches(self) -> list[Match]:
        return await self._guard("live_matches", self.get_live_matches(), [])

    async def fetch_country_leagues(self, country_name: str) -> list[League]:
        country_id = await self.fetch_country_id(country_name)
        if not country_id:
            return []
        return await self.fetch_leagues(country_id)

    async def aclose(self) -> None:
        """Release the underlying HTTP resources."""
