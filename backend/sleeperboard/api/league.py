from typing import List, Optional

from fastapi import APIRouter, Body, Depends

from sleeperboard.dependencies import get_league_service
from sleeperboard.schemas.analysis import (
    PositionTotalsResponse,
    TradeRecommendationRequest,
    TradeRecommendationResponse,
)
from sleeperboard.schemas.league import StandingResponse
from sleeperboard.schemas.matchup import ChallengeResponse, EnrichedMatchup
from sleeperboard.services.exceptions import InvalidRequestError
from sleeperboard.services.league_service import LeagueService

router = APIRouter()


@router.get("/{league_id}")
async def get_league(
    league_id: str,
    service: LeagueService = Depends(get_league_service),
):
    """League object, passed through from Sleeper (null for an unknown league)."""
    return await service.get_league(league_id)


@router.get("/{league_id}/standings", response_model=List[StandingResponse])
async def get_standings(
    league_id: str,
    service: LeagueService = Depends(get_league_service),
):
    """Standings by wins, then points for. Records are Sleeper's own."""
    return await service.get_standings(league_id)


@router.get("/{league_id}/matchups/{week}", response_model=List[EnrichedMatchup])
async def get_matchups(
    league_id: str,
    week: int,
    service: LeagueService = Depends(get_league_service),
):
    return await service.get_enriched_matchups(league_id, week)


@router.get("/{league_id}/challenges/{week}", response_model=ChallengeResponse)
async def get_challenge(
    league_id: str,
    week: int,
    service: LeagueService = Depends(get_league_service),
):
    """Evaluate the week's side challenge."""
    return await service.get_challenge(league_id, week)


@router.get("/{league_id}/position-totals/{position}", response_model=PositionTotalsResponse)
async def get_position_totals(
    league_id: str,
    position: str,
    service: LeagueService = Depends(get_league_service),
):
    """Season-to-date points at one position for every roster, highest first."""
    return await service.get_position_totals(league_id, position)


@router.post(
    "/{league_id}/trade-recommendations",
    response_model=TradeRecommendationResponse,
    response_model_exclude_none=True,
)
async def get_trade_recommendations(
    league_id: str,
    request: Optional[TradeRecommendationRequest] = Body(None),
    service: LeagueService = Depends(get_league_service),
):
    """Position weaknesses vs. league medians, other teams' surpluses, and LLM trade advice."""
    if request is None or not request.roster_id:
        raise InvalidRequestError("Missing rosterId")
    return await service.get_trade_recommendations(league_id, request.roster_id)
