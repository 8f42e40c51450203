"""Persistence for generated weekly recaps, keyed by (league, week)."""
import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from sleeperboard.models import Recap

logger = logging.getLogger(__name__)


class RecapStore:
    """At most one recap per (league_id, week); saving again overwrites in place."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, league_id: str, week: int) -> Optional[Recap]:
        query = select(Recap).where(Recap.league_id == league_id, Recap.week == week)
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def save(self, league_id: str, week: int, style: str, text: str) -> Recap:
        """Upsert the recap for (league_id, week)."""
        recap = await self.get(league_id, week)
        if recap is None:
            recap = Recap(league_id=league_id, week=week, style=style, text=text)
            self.db.add(recap)
            try:
                await self.db.commit()
            except IntegrityError:
                # Lost an insert race for the same key; overwrite the winner's row
                await self.db.rollback()
                recap = await self.get(league_id, week)
                recap.style = style
                recap.text = text
                await self.db.commit()
        else:
            recap.style = style
            recap.text = text
            recap.updated_at = datetime.now(timezone.utc)
            await self.db.commit()

        await self.db.refresh(recap)
        logger.info(f"Saved week {week} recap for league {league_id} ({style})")
        return recap
