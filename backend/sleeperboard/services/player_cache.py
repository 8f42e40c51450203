import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from sleeperboard.config import settings
from sleeperboard.models import PlayerCacheEntry
from sleeperboard.schemas.sleeper import PlayerDirectory
from sleeperboard.services.sleeper_client import SleeperClient

logger = logging.getLogger(__name__)


class PlayerCacheService:
    """
    Time-to-live cache for the Sleeper player directory, one row per sport.

    A stored blob is returned as-is until it is older than the TTL; then a
    fresh directory is fetched and upserted before being returned. A failed
    refresh propagates: a stale blob is never served in its place.
    """

    def __init__(self, client: SleeperClient, ttl: Optional[timedelta] = None):
        self.client = client
        self.ttl = ttl or timedelta(hours=settings.player_cache_ttl_hours)

    def is_stale(self, entry: Optional[PlayerCacheEntry], now: datetime) -> bool:
        return entry is None or entry.age(now) > self.ttl

    async def get_entry(self, db: AsyncSession, sport: str) -> Optional[PlayerCacheEntry]:
        result = await db.execute(select(PlayerCacheEntry).where(PlayerCacheEntry.sport == sport))
        return result.scalar_one_or_none()

    async def get_players(
        self,
        db: AsyncSession,
        sport: str = "nfl",
        now: Optional[datetime] = None,
        force: bool = False,
    ) -> PlayerDirectory:
        now = now or datetime.now(timezone.utc)
        entry = await self.get_entry(db, sport)

        if not force and not self.is_stale(entry, now):
            return PlayerDirectory(entry.blob)

        blob = await self.client.get_players(sport)
        await self._upsert(db, entry, sport, blob, now)
        return PlayerDirectory(blob)

    async def _upsert(
        self,
        db: AsyncSession,
        entry: Optional[PlayerCacheEntry],
        sport: str,
        blob: dict,
        now: datetime,
    ) -> None:
        if entry is None:
            db.add(PlayerCacheEntry(sport=sport, blob=blob, updated_at=now))
            try:
                await db.commit()
            except IntegrityError:
                # A concurrent refresh inserted the row first; last writer wins
                await db.rollback()
                entry = await self.get_entry(db, sport)
        if entry is not None:
            entry.blob = blob
            entry.updated_at = now
            await db.commit()
        logger.info(f"Refreshed {sport} player directory cache ({len(blob or {})} players)")
