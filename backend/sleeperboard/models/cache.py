from datetime import datetime, timezone
from typing import Any, Dict

from sqlalchemy import String, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from sleeperboard.database import Base


class PlayerCacheEntry(Base):
    """The full Sleeper player directory for one sport, stored as a single JSON blob."""
    __tablename__ = "player_cache"

    id: Mapped[int] = mapped_column(primary_key=True)
    sport: Mapped[str] = mapped_column(String(20), unique=True, index=True)
    blob: Mapped[Dict[str, Any]] = mapped_column(JSON)  # player_id -> player record
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=lambda: datetime.now(timezone.utc))

    def age(self, now: datetime):
        """Time elapsed since the blob was last refreshed."""
        updated = self.updated_at
        # SQLite hands datetimes back without tzinfo
        if updated.tzinfo is None:
            updated = updated.replace(tzinfo=timezone.utc)
        return now - updated
