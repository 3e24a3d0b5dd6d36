"""
Sword Tracker Backend: User Schemas
===================================

What:  API contract for /api/user.
    - UserCreate:   POST body (validated in full before storage sees it)
    - UserUpdate:   PATCH body (allow-listed, every field optional)
    - UserResponse: what the API returns
"""

from typing import Optional

from pydantic import Field

from sword_tracker.schemas.base import CamelModel, PartialUpdate, ResponseModel, UtcDatetime

MIN_RATING = 0
MAX_RATING = 4000


class UserCreate(CamelModel):
    username: str = Field(min_length=1, max_length=50, description="Unique public handle")
    display_name: Optional[str] = Field(default=None, max_length=100)
    current_elo: int = Field(
        default=1200,
        ge=MIN_RATING,
        le=MAX_RATING,
        description="Current rating; 1200 when not provided",
    )
    target_elo: Optional[int] = Field(default=None, ge=MIN_RATING, le=MAX_RATING)


class UserUpdate(PartialUpdate):
    NON_NULLABLE = frozenset({"username", "current_elo"})

    username: Optional[str] = Field(default=None, min_length=1, max_length=50)
    display_name: Optional[str] = Field(default=None, max_length=100)
    current_elo: Optional[int] = Field(default=None, ge=MIN_RATING, le=MAX_RATING)
    target_elo: Optional[int] = Field(default=None, ge=MIN_RATING, le=MAX_RATING)


class UserResponse(ResponseModel):
    id: int
    username: str
    display_name: Optional[str] = None
    current_elo: int
    target_elo: Optional[int] = None
    created_at: UtcDatetime
