from typing import List, Optional
from pydantic import BaseModel


class ResolvedPlayer(BaseModel):
    id: str
    name: str
    pos: str = ""
    team: str = ""
    proj: Optional[float] = None  # None = no projection available, distinct from 0
    actual: float = 0.0


class EnrichedMatchup(BaseModel):
    matchup_id: Optional[int] = None
    roster_id: int
    team_name: str
    display_name: str
    points: Optional[float] = None
    starters: List[ResolvedPlayer] = []
    players: List[ResolvedPlayer] = []


class ChallengeWinner(BaseModel):
    name: str
    team: str
    manager: str
    roster_id: int
    points: Optional[float] = None
    detail: Optional[str] = None


class ChallengeResponse(BaseModel):
    week: int
    challenge: str
    description: str
    winner: Optional[ChallengeWinner] = None
