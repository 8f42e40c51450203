from sleeperboard.schemas.sleeper import (
    SleeperUser,
    SleeperRoster,
    SleeperPlayer,
    SleeperMatchup,
    PlayerDirectory,
)
from sleeperboard.schemas.league import OwnerInfo, StandingResponse
from sleeperboard.schemas.matchup import (
    ResolvedPlayer,
    EnrichedMatchup,
    ChallengeWinner,
    ChallengeResponse,
)
from sleeperboard.schemas.analysis import (
    PositionTotal,
    PositionTotalsResponse,
    Weakness,
    SurplusEntry,
    TradeRecommendationRequest,
    TradeRecommendationResponse,
)
from sleeperboard.schemas.recap import RecapRequest, RecapResponse

__all__ = [
    "SleeperUser",
    "SleeperRoster",
    "SleeperPlayer",
    "SleeperMatchup",
    "PlayerDirectory",
    "OwnerInfo",
    "StandingResponse",
    "ResolvedPlayer",
    "EnrichedMatchup",
    "ChallengeWinner",
    "ChallengeResponse",
    "PositionTotal",
    "PositionTotalsResponse",
    "Weakness",
    "SurplusEntry",
    "TradeRecommendationRequest",
    "TradeRecommendationResponse",
    "RecapRequest",
    "RecapResponse",
]
