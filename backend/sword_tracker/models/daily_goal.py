"""ORM model for the `daily_goals` table: small, checkable tasks for one day."""

from datetime import date, datetime
from typing import Optional

from sqlalchemy import Boolean, Date, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from sword_tracker.clock import utcnow, utctoday
from sword_tracker.database import Base


class DailyGoal(Base):
    """A to-do for a given day ("solve 20 puzzles", "review one opening")."""

    __tablename__ = "daily_goals"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # e.g. "tactics", "openings", "endgames"
    category: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    goal_date: Mapped[date] = mapped_column(Date, nullable=False, default=utctoday)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    def __repr__(self) -> str:
        return f"<DailyGoal(id={self.id}, title='{self.title}', completed={self.completed})>"
