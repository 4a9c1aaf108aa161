from __future__ import annotations

import asyncio
from collections.abc import Iterable
from dataclasses import dataclass
import logging

from matchfeed import facade
from matchfeed.config.settings import settings
from matchfeed.core.batching import chunked
from matchfeed.mappers.common import has_usable_name
from matchfeed.models.normalized import Player, TeamBasic
from matchfeed.providers.base import ProviderAdapter

logger = logging.getLogger("matchfeed.services.squads")


@dataclass(frozen=True)
class SquadEntry:
    player: Player
    team: TeamBasic


async def fetch_league_squads(
    teams: Iterable[TeamBasic],
    *,
    provider: ProviderAdapter | None = None,
    season_id: str | None = None,
    batch_size: int | None = None,
) -> list[SquadEntry]:
    """Fetch every team's squad in fixed-size batches.

    Batches run one after another and the teams inside a batch concurrently,
    which keeps the request rate within the upstream quota. Players without a
    usable name and duplicates of the same player in the same team are dropped.
    """
    adapter = provider or facade.active_provider()
    size = batch_size or settings.SQUAD_BATCH_SIZE
    team_list = [team for team in teams if team.id]
    entries: list[SquadEntry] = []
    seen: set[tuple[str, str]] = set()

    for batch_number, batch in enumerate(chunked(team_list, size), start=1):
        squads = await asyncio.gather(*(adapter.fetch_squad(team.id, season_id) for team in batch))
        for team, squad in zip(batch, squads):
            for player in squad:
                key = (player.id, team.id)
                if key in seen or not has_usable_name(player):
                    continue
                seen.add(key)
                entries.append(SquadEntry(player=player, team=team))
        logger.info(
            "squads_batch batch=%d teams=%d players_total=%d",
            batch_number,
            len(batch),
            len(entries),
        )
    return entries


async def fetch_season_squads(
    season_id: str,
    league_id: str | None = None,
    *,
    provider: ProviderAdapter | None = None,
    batch_size: int | None = None,
) -> list[SquadEntry]:
    adapter = provider or facade.active_provider()
    standings = await adapter.fetch_standings(season_id, league_id)
    teams = [row.team for row in standings]
    if not teams:
        logger.info("squads_skipped season_id=%s reason=no_standings", season_id)
        return []
    # Current squads: the season id only selects the team list.
    return await fetch_league_squads(teams, provider=adapter, batch_size=batch_size)
