"""Roster/owner resolution and standings."""
import logging
from typing import Any, Dict, Iterable, List

from sleeperboard.schemas.league import OwnerInfo, StandingResponse
from sleeperboard.schemas.sleeper import SleeperRoster, SleeperUser

logger = logging.getLogger(__name__)


def resolve_owners(
    users: Iterable[Dict[str, Any]],
    rosters: Iterable[Dict[str, Any]],
) -> Dict[int, OwnerInfo]:
    """
    Map every roster_id to its owner's team and display names.

    A roster whose owner_id matches no user gets the placeholder names
    instead of an error (orphaned or unclaimed teams).
    """
    users_by_id = {}
    for raw in users or []:
        user = SleeperUser.model_validate(raw)
        users_by_id[user.user_id] = user

    owners: Dict[int, OwnerInfo] = {}
    for raw in rosters or []:
        roster = SleeperRoster.model_validate(raw)
        user = users_by_id.get(roster.owner_id) if roster.owner_id else None
        if user is None:
            logger.debug(f"Roster {roster.roster_id} has no matching owner ({roster.owner_id})")
            owners[roster.roster_id] = OwnerInfo()
            continue
        owners[roster.roster_id] = OwnerInfo(
            team_name=user.resolved_team_name,
            display_name=user.resolved_display_name,
            owner_id=user.user_id,
        )
    return owners


def build_standings(
    users: Iterable[Dict[str, Any]],
    rosters: Iterable[Dict[str, Any]],
) -> List[StandingResponse]:
    """Wins descending, then points-for descending. Records come straight from Sleeper."""
    owners = resolve_owners(users, rosters)

    rows = []
    for raw in rosters or []:
        roster = SleeperRoster.model_validate(raw)
        record = roster.record
        owner = owners.get(roster.roster_id, OwnerInfo())
        rows.append({
            "roster_id": roster.roster_id,
            "wins": record.wins,
            "losses": record.losses,
            "ties": record.ties,
            "fpts": record.fpts,
            "fpa": record.fpts_against,
            "team_name": owner.team_name,
            "display_name": owner.display_name,
        })

    rows.sort(key=lambda r: (-r["wins"], -r["fpts"]))
    return [StandingResponse(**row, rank=i + 1) for i, row in enumerate(rows)]
