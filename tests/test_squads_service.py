from __future__ import annotations

import asyncio

import pytest

from matchfeed.core.http_client import ProviderRequestError
from matchfeed.models.normalized import Player, Standing
from matchfeed.services.squads import fetch_league_squads, fetch_season_squads

from tests.fakes import StaticProvider, make_player, make_team


class _TrackingProvider(StaticProvider):
    def __init__(self, squads: dict) -> None:
        super().__init__()
        self.squads = squads
        self.in_flight = 0
        self.max_in_flight = 0

    async def get_squad(self, team_id: str, season_id: str | None = None):
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(0)
            value = self.squads.get(team_id, [])
            if isinstance(value, Exception):
                raise value
            return value
        finally:
            self.in_flight -= 1


@pytest.mark.asyncio
async def test_fetch_league_squads_batches_and_filters():
    teams = [make_team(str(index)) for index in range(1, 13)]
    squads = {team.id: [make_player(f"{team.id}-1"), make_player(f"{team.id}-2")] for team in teams}
    squads["1"] = [make_player("1-1"), make_player("1-1"), Player(id="x", name="Unknown")]
    squads["7"] = ProviderRequestError("status=500", provider="static", endpoint="/squads", status_code=500)
    provider = _TrackingProvider(squads)

    entries = await fetch_league_squads(teams, provider=provider, batch_size=5)

    assert len(entries) == 1 + 10 * 2
    assert [entry.player.id for entry in entries if entry.team.id == "1"] == ["1-1"]
    assert not any(entry.team.id == "7" for entry in entries)
    assert provider.max_in_flight == 5


@pytest.mark.asyncio
async def test_fetch_league_squads_keeps_same_player_in_different_teams():
    provider = _TrackingProvider({"1": [make_player("p")], "2": [make_player("p")]})

    entries = await fetch_league_squads([make_team("1"), make_team("2")], provider=provider)

    assert [(entry.player.id, entry.team.id) for entry in entries] == [("p", "1"), ("p", "2")]


@pytest.mark.asyncio
async def test_fetch_season_squads_uses_standings_teams():
    standings = [
        Standing(
            position=index,
            team=make_team(str(index)),
            played=1,
            won=1,
            drawn=0,
            lost=0,
            goals_for=1,
            goals_against=0,
            goal_difference=1,
            points=3,
        )
        for index in (1, 2)
    ]
    provider = StaticProvider(standings=standings, squad=lambda team_id: [make_player(f"{team_id}-9")])

    entries = await fetch_season_squads("2024", "39", provider=provider)

    assert [entry.player.id for entry in entries] == ["1-9", "2-9"]
    assert ("standings", "2024", "39") in provider.calls


@pytest.mark.asyncio
async def test_fetch_season_squads_without_standings():
    provider = StaticProvider(standings=[])

    assert await fetch_season_squads("2024", provider=provider) == []
    assert not any(call[0] == "squad" for call in provider.calls)
