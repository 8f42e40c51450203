from fastapi import APIRouter, Depends

from sleeperboard.dependencies import get_sleeper_client
from sleeperboard.services.sleeper_client import SleeperClient

router = APIRouter()


@router.get("/{sport}")
async def get_state(sport: str, client: SleeperClient = Depends(get_sleeper_client)):
    """Live season state (season, week) straight from Sleeper."""
    return await client.get_state(sport)
