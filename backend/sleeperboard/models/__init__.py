from sleeperboard.models.cache import PlayerCacheEntry
from sleeperboard.models.recap import Recap

__all__ = [
    "PlayerCacheEntry",
    "Recap",
]
