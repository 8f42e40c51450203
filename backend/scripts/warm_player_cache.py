#!/usr/bin/env python3
"""
Refresh the cached Sleeper player directory.

Without --force the cache is only refreshed when it is older than the
configured TTL, exactly as a request would.
"""
import argparse
import asyncio
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from sleeperboard.config import settings
from sleeperboard.database import async_session, init_db
from sleeperboard.services.player_cache import PlayerCacheService
from sleeperboard.services.sleeper_client import SleeperClient


async def warm(sport: str, force: bool) -> int:
    await init_db()
    client = SleeperClient()
    try:
        async with async_session() as db:
            cache = PlayerCacheService(client)
            directory = await cache.get_players(db, sport, force=force)
    finally:
        await client.close()
    return len(directory)


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--sport", default=settings.sport)
    parser.add_argument("--force", action="store_true", help="Refresh even if the cache is fresh")
    args = parser.parse_args()

    count = asyncio.run(warm(args.sport, args.force))
    print(f"{args.sport} player directory: {count} players cached")


if __name__ == "__main__":
    main()
