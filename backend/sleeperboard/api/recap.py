from typing import Optional

from fastapi import APIRouter, Body, Depends

from sleeperboard.dependencies import get_league_service
from sleeperboard.schemas.recap import RecapRequest, RecapResponse
from sleeperboard.services.league_service import LeagueService

router = APIRouter()


@router.get("/{league_id}/recap/{week}")
async def get_recap(
    league_id: str,
    week: int,
    service: LeagueService = Depends(get_league_service),
):
    """Stored recap, or ``{"recap": null}`` if none has been generated yet."""
    recap = await service.get_recap(league_id, week)
    if recap is None:
        return {"recap": None}
    return {"recap": recap.text, "style": recap.style}


@router.post("/{league_id}/recap/{week}", response_model=RecapResponse)
async def generate_recap(
    league_id: str,
    week: int,
    request: Optional[RecapRequest] = Body(None),
    service: LeagueService = Depends(get_league_service),
):
    """Return the stored recap, or generate one. ``force`` always regenerates."""
    if request is None:
        request = RecapRequest()
    recap = await service.generate_recap(league_id, week, style=request.style, force=request.force)
    return {"recap": recap.text, "style": recap.style}
