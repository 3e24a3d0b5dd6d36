"""
Sword Tracker Backend: Game Analysis Schemas
============================================

What:  API contract for /api/game-analyses. Analyses are read-only once
       created, so there is no update schema.
"""

from typing import Any, Dict, Optional

from pydantic import Field

from sword_tracker.schemas.base import CamelModel, ResponseModel, UtcDatetime


class GameAnalysisCreate(CamelModel):
    user_id: int
    pgn: str = Field(min_length=1, description="Game in PGN notation")
    opponent: Optional[str] = Field(default=None, max_length=100)
    result: Optional[str] = Field(default=None, max_length=20, description="win, loss, draw or 1-0 style")
    opening: Optional[str] = Field(default=None, max_length=200)
    time_control: Optional[str] = Field(default=None, max_length=50)
    accuracy: Optional[float] = Field(default=None, ge=0, le=100)
    analysis: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Free-form analysis payload produced by the analysis board",
    )
    notes: Optional[str] = None
    played_at: Optional[UtcDatetime] = None


class GameAnalysisResponse(ResponseModel):
    id: int
    user_id: int
    pgn: str
    opponent: Optional[str] = None
    result: Optional[str] = None
    opening: Optional[str] = None
    time_control: Optional[str] = None
    accuracy: Optional[float] = None
    analysis: Optional[Dict[str, Any]] = None
    notes: Optional[str] = None
    played_at: Optional[UtcDatetime] = None
    created_at: UtcDatetime
