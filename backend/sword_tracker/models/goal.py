"""
Sword Tracker Backend: Goal Model
=================================

What:  ORM model for the `goals` table: longer-horizon targets tagged with a
       free-form `type` ("weekly", "monthly", "yearly", or anything else the
       front-end invents).

Query Patterns:
    - All goals of a user:     WHERE user_id = :uid
    - Goals of one type:       WHERE user_id = :uid AND type = :type
    Both use the composite (user_id, type) index.
"""

from datetime import date, datetime
from typing import Optional

from sqlalchemy import Boolean, Date, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from sword_tracker.clock import utcnow
from sword_tracker.database import Base


class Goal(Base):
    """A measurable goal, optionally with a numeric target and deadline."""

    __tablename__ = "goals"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Not an enum: the tag is stored and filtered verbatim
    type: Mapped[str] = mapped_column(String(50), nullable=False)

    target_value: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    current_value: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    deadline: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    __table_args__ = (
        Index("idx_goals_user_type", "user_id", "type"),
    )

    def __repr__(self) -> str:
        return f"<Goal(id={self.id}, type='{self.type}', title='{self.title}')>"
