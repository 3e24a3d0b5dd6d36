"""
Sword Tracker Backend: Course Model
===================================

What:  ORM model for the `courses` table: structured study material the user
       is working through (a Chessable course, a book, a video series).
How:   Progress is tracked as completed_lessons / total_lessons; `status` is
       a free-form label ("in_progress", "completed", "paused").
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from sword_tracker.clock import utcnow
from sword_tracker.database import Base


class Course(Base):
    """A course with lesson-level progress."""

    __tablename__ = "courses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    platform: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    total_lessons: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    completed_lessons: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    status: Mapped[str] = mapped_column(String(50), nullable=False, default="in_progress")

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    def __repr__(self) -> str:
        return (
            f"<Course(id={self.id}, title='{self.title}', "
            f"progress={self.completed_lessons}/{self.total_lessons})>"
        )
