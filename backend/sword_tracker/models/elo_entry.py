"""
Sword Tracker Backend: ELO Entry Model
======================================

What:  ORM model for the `elo_entries` table, the user's rating history.
How:   Rows are appended by POST /api/elo and never updated by the API.

Query Patterns:
    - History:  WHERE user_id = :uid ORDER BY recorded_at
    - Stats:    WHERE user_id = :uid AND recorded_at >= :since ORDER BY recorded_at
    Both are served by the composite (user_id, recorded_at) index.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from sword_tracker.clock import utcnow
from sword_tracker.database import Base


class EloEntry(Base):
    """A single rating observation for a user."""

    __tablename__ = "elo_entries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    rating: Mapped[int] = mapped_column(Integer, nullable=False)

    # Free-form time control label: "rapid", "blitz", "bullet", "classical"...
    game_type: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    recorded_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        comment="When the rating was observed (UTC); defaults to insert time",
    )

    __table_args__ = (
        Index("idx_elo_entries_user_recorded", "user_id", "recorded_at"),
    )

    def __repr__(self) -> str:
        return f"<EloEntry(id={self.id}, user_id={self.user_id}, rating={self.rating})>"
