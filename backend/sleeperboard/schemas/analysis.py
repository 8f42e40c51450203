from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field

from sleeperboard.schemas.league import OwnerInfo


class PositionTotal(BaseModel):
    roster_id: int
    team_name: str
    display_name: str
    points: float = 0.0


class PositionTotalsResponse(BaseModel):
    position: str
    totals: List[PositionTotal] = []


class Weakness(BaseModel):
    position: str
    team_value: float = Field(..., alias="teamValue")
    median_value: float = Field(..., alias="medianValue")

    class Config:
        populate_by_name = True


class SurplusEntry(BaseModel):
    team_id: int = Field(..., alias="teamId")
    owner: OwnerInfo
    total: float

    class Config:
        populate_by_name = True


class TradeRecommendationRequest(BaseModel):
    """Body for POST /trade-recommendations. rosterId is checked by the handler so a
    missing value answers 400 rather than a schema error."""
    roster_id: Optional[int] = Field(None, alias="rosterId")

    class Config:
        populate_by_name = True


class TradeRecommendationResponse(BaseModel):
    recommendations: str
    weaknesses: Optional[List[Weakness]] = None
    surpluses: Optional[Dict[str, List[SurplusEntry]]] = None
    free_agents: Optional[List[Dict[str, Any]]] = Field(None, alias="freeAgents")

    class Config:
        populate_by_name = True
