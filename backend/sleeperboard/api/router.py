from fastapi import APIRouter

from sleeperboard.api import league, recap, state

api_router = APIRouter()

api_router.include_router(league.router, prefix="/league", tags=["league"])
api_router.include_router(recap.router, prefix="/league", tags=["recap"])
api_router.include_router(state.router, prefix="/state", tags=["state"])
