"""
Sword Tracker Backend: ELO Schemas
==================================

What:  API contract for /api/elo and /api/elo-stats.
    - EloEntryCreate:   POST /api/elo body
    - EloEntryResponse: one rating observation
    - EloStatsResponse: summary of a user's ratings over a period

Periods:
    week  → last 7 days
    month → last 30 days
    year  → last 365 days
"""

from datetime import timedelta
from typing import Dict, List, Optional

from pydantic import Field

from sword_tracker.clock import utcnow
from sword_tracker.schemas.base import CamelModel, ResponseModel, UtcDatetime
from sword_tracker.schemas.user import MAX_RATING, MIN_RATING

ELO_PERIODS: Dict[str, timedelta] = {
    "week": timedelta(days=7),
    "month": timedelta(days=30),
    "year": timedelta(days=365),
}


class EloEntryCreate(CamelModel):
    user_id: int = Field(description="Owner of the rating entry")
    rating: int = Field(ge=MIN_RATING, le=MAX_RATING)
    game_type: Optional[str] = Field(
        default=None,
        max_length=50,
        description="Time control label, e.g. rapid, blitz, bullet",
    )
    notes: Optional[str] = None
    recorded_at: UtcDatetime = Field(
        default_factory=utcnow,
        description="When the rating was observed; defaults to now (UTC)",
    )


class EloEntryResponse(ResponseModel):
    id: int
    user_id: int
    rating: int
    game_type: Optional[str] = None
    notes: Optional[str] = None
    recorded_at: UtcDatetime


class EloStatsResponse(CamelModel):
    """
    Rating summary over one period.

    With no entries in the window every rating field is null, `change` is 0
    and `history` is empty.
    """

    period: str
    current_rating: Optional[int] = Field(default=None, description="Last rating in the period")
    starting_rating: Optional[int] = Field(default=None, description="First rating in the period")
    change: int = Field(default=0, description="current_rating - starting_rating")
    highest_rating: Optional[int] = None
    lowest_rating: Optional[int] = None
    entry_count: int = 0
    history: List[EloEntryResponse] = Field(default_factory=list)
