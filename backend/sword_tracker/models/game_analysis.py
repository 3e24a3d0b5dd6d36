"""
Sword Tracker Backend: Game Analysis Model
==========================================

What:  ORM model for the `game_analyses` table: a played game (PGN) with the
       user's or an engine's annotations.
How:   `analysis` is a JSON column holding whatever structure the front-end's
       analysis board produces (evaluations per move, mistakes, comments).
       The API never updates these rows after creation.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy import JSON, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from sword_tracker.clock import utcnow
from sword_tracker.database import Base


class GameAnalysis(Base):
    """An analysed game."""

    __tablename__ = "game_analyses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    pgn: Mapped[str] = mapped_column(Text, nullable=False)

    opponent: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    # "win", "loss", "draw" or a PGN result tag ("1-0"); stored verbatim
    result: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)

    opening: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    time_control: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    # Percentage 0-100 as reported by the analysing engine
    accuracy: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    # Generic JSON so the same model works on PostgreSQL and SQLite
    analysis: Mapped[Optional[Dict[str, Any]]] = mapped_column(JSON, nullable=True)

    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    played_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    def __repr__(self) -> str:
        return f"<GameAnalysis(id={self.id}, user_id={self.user_id}, result='{self.result}')>"
