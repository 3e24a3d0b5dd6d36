"""
Sword Tracker Backend: User SQLAlchemy Model
============================================

What:  ORM model for the `users` table.
How:   Inherits from the shared DeclarativeBase; Alembic reads it for
       migrations and DatabaseStorage uses it for CRUD.

Table Design:
    - Integer primary key: ids travel in URLs (/api/user/42) and are parsed
      as integers by the routes
    - username: unique, the only required profile field
    - current_elo / target_elo: headline numbers for the dashboard; the
      rating history itself lives in `elo_entries`
    - created_at: UTC with timezone (never naive datetimes)
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from sword_tracker.clock import utcnow
from sword_tracker.database import Base


class User(Base):
    """
    A learner tracking their chess progress.

    Every other entity references a user through `user_id`; deleting a user
    cascades to all of their records at the database level.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    username: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        unique=True,
        comment="Public handle, unique across users",
    )

    display_name: Mapped[Optional[str]] = mapped_column(
        String(100),
        nullable=True,
        comment="Optional friendly name shown on the dashboard",
    )

    # Default 1200: the conventional starting rating on most chess sites
    current_elo: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=1200,
        comment="Most recent rating as set by the user",
    )

    target_elo: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
        comment="Rating the user is working towards",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        comment="When the account was created (UTC)",
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}')>"
