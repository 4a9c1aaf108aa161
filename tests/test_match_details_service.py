from __future__ import annotations

import pytest

from matchfeed import facade
from matchfeed.core.http_client import ProviderRequestError
from matchfeed.models.normalized import H2H, MatchStats, MatchStatus, StatPair
from matchfeed.services.match_details import fetch_match_details, recent_form

from tests.fakes import StaticProvider, make_match


def _season(team_id: str):
    return [
        make_match("a", team_id, "9", date="2024-01-06"),
        make_match("b", "9", team_id, date="2024-03-02"),
        make_match("c", team_id, "9", date="2024-02-10"),
        make_match("d", team_id, "9", date="2024-05-01", status=MatchStatus.scheduled, home_goals=None, away_goals=None),
        make_match("e", team_id, "9", date="2024-02-24"),
        make_match("f", team_id, "9", date="2024-01-20"),
        make_match("g", team_id, "9", date="2024-01-13"),
    ]


def test_recent_form_takes_latest_finished_matches():
    form = recent_form(_season("1"))

    assert [match.id for match in form] == ["b", "e", "c", "f", "g"]


@pytest.mark.asyncio
async def test_fetch_match_details_gathers_related_data():
    stats = MatchStats(possession=StatPair(home=55, away=45))
    h2h = H2H(matches=(), home_team_wins=0, away_team_wins=0, draws=0)
    provider = StaticProvider(
        match=make_match("100", "1", "2"),
        h2h=h2h,
        stats=stats,
        events=[],
        fixtures=lambda season_id, team_id: _season(team_id),
    )
    facade.configure(provider)

    details = await fetch_match_details("100")

    assert details is not None
    assert details.match.id == "100"
    assert details.h2h is h2h
    assert details.stats is stats
    assert details.lineups is None
    assert details.events == ()
    assert len(details.home_form) == 5
    assert len(details.away_form) == 5
    assert ("h2h", "1", "2") in provider.calls
    assert ("fixtures", "2024", "1") in provider.calls
    assert ("fixtures", "2024", "2") in provider.calls


@pytest.mark.asyncio
async def test_fetch_match_details_tolerates_partial_failures():
    failure = ProviderRequestError("timeout", provider="static", endpoint="/x")
    provider = StaticProvider(match=make_match("100"), h2h=failure, stats=failure, events=failure, fixtures=failure)

    details = await fetch_match_details("100", provider=provider)

    assert details is not None
    assert details.h2h is None
    assert details.stats is None
    assert details.events == ()
    assert details.home_form == ()


@pytest.mark.asyncio
async def test_fetch_match_details_returns_none_for_missing_match():
    provider = StaticProvider(match=None)

    assert await fetch_match_details("404", provider=provider) is None
    assert provider.calls == [("match", "404")]


@pytest.mark.asyncio
async def test_fetch_match_details_skips_form_without_season():
    provider = StaticProvider(match=make_match("100", season_id=None))

    details = await fetch_match_details("100", provider=provider)

    assert details is not None
    assert details.home_form == ()
    assert not any(call[0] == "fixtures" for call in provider.calls)
