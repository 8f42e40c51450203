from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from sleeperboard.database import Base


class Recap(Base):
    """Generated weekly recap text, one row per (league, week)."""
    __tablename__ = "recaps"
    __table_args__ = (
        UniqueConstraint("league_id", "week", name="uq_recap_league_week"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    league_id: Mapped[str] = mapped_column(String(64), index=True)
    week: Mapped[int] = mapped_column(Integer)

    style: Mapped[str] = mapped_column(Text)  # Free-text tone tag, e.g. "fun", "roast"
    text: Mapped[str] = mapped_column(Text)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc)
    )
