# Services module
from sleeperboard.services.sleeper_client import SleeperClient
from sleeperboard.services.text_generator import TextGenerator
from sleeperboard.services.player_cache import PlayerCacheService
from sleeperboard.services.recap_service import RecapStore
from sleeperboard.services.league_service import LeagueService

__all__ = [
    "SleeperClient",
    "TextGenerator",
    "PlayerCacheService",
    "RecapStore",
    "LeagueService",
]
