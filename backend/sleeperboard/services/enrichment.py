"""Turn raw Sleeper matchups into display-ready records."""
import logging
from typing import Any, Dict, Iterable, List, Optional

from sleeperboard.config import settings
from sleeperboard.schemas.league import OwnerInfo
from sleeperboard.schemas.matchup import EnrichedMatchup, ResolvedPlayer
from sleeperboard.schemas.sleeper import PlayerDirectory, SleeperMatchup

logger = logging.getLogger(__name__)


def index_projections(projections: Any) -> Dict[str, Any]:
    """
    Normalize a projections payload to ``{player_id: record}``.

    Sleeper serves either an id-keyed object or a list of records that
    each carry their own ``player_id``.
    """
    if not projections:
        return {}
    if isinstance(projections, dict):
        return projections
    indexed = {}
    for record in projections:
        if isinstance(record, dict) and record.get("player_id") is not None:
            indexed[str(record["player_id"])] = record
    return indexed


def projected_points(
    projections: Dict[str, Any],
    player_id: str,
    stat_key: Optional[str] = None,
) -> Optional[float]:
    """Projected points for one player, or None when no projection exists."""
    record = projections.get(player_id)
    if not isinstance(record, dict):
        return None
    stats = record.get("stats")
    if not isinstance(stats, dict):
        return None
    value = stats.get(stat_key or settings.projection_stat_key)
    return float(value) if value is not None else None


def resolve_player(
    directory: PlayerDirectory,
    player_id: str,
    matchup: SleeperMatchup,
    projections: Dict[str, Any],
) -> ResolvedPlayer:
    """Resolve one id. Unknown ids become a placeholder named after the id."""
    proj = projected_points(projections, player_id)
    actual = matchup.points_for(player_id)

    player = directory.get(player_id)
    if player is None:
        logger.debug(f"Player {player_id} not in directory, using placeholder")
        return ResolvedPlayer(id=player_id, name=player_id, pos="", team="", proj=proj, actual=actual)

    return ResolvedPlayer(
        id=player_id,
        name=player.display_name(player_id),
        pos=player.resolved_position,
        team=player.team or "",
        proj=proj,
        actual=actual,
    )


def enrich_matchups(
    raw_matchups: Iterable[Dict[str, Any]],
    directory: PlayerDirectory,
    owners: Dict[int, OwnerInfo],
    projections: Any = None,
) -> List[EnrichedMatchup]:
    """
    Resolve the starters and the full player list of every matchup.

    Both lists are resolved independently, so starters appear twice; the
    client derives the bench as players minus starters by id.
    """
    projection_index = index_projections(projections)

    enriched = []
    for raw in raw_matchups or []:
        matchup = SleeperMatchup.model_validate(raw)
        owner = owners.get(matchup.roster_id, OwnerInfo())
        enriched.append(EnrichedMatchup(
            matchup_id=matchup.matchup_id,
            roster_id=matchup.roster_id,
            team_name=owner.team_name,
            display_name=owner.display_name,
            points=matchup.points,
            starters=[
                resolve_player(directory, pid, matchup, projection_index)
                for pid in matchup.starters or [] if pid is not None
            ],
            players=[
                resolve_player(directory, pid, matchup, projection_index)
                for pid in matchup.players or [] if pid is not None
            ],
        ))
    return enriched
