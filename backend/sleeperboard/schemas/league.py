from typing import Optional
from pydantic import BaseModel

from sleeperboard.schemas.sleeper import TEAM_NAME_PLACEHOLDER, DISPLAY_NAME_PLACEHOLDER


class OwnerInfo(BaseModel):
    team_name: str = TEAM_NAME_PLACEHOLDER
    display_name: str = DISPLAY_NAME_PLACEHOLDER
    owner_id: Optional[str] = None


class StandingResponse(BaseModel):
    roster_id: int
    wins: int
    losses: int
    ties: int
    fpts: float
    fpa: float
    team_name: str
    display_name: str
    rank: int
