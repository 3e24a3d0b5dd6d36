"""API contract for /api/daily-goals."""

from datetime import date
from typing import Optional

from pydantic import Field

from sword_tracker.clock import utctoday
from sword_tracker.schemas.base import CamelModel, PartialUpdate, ResponseModel, UtcDatetime


class DailyGoalCreate(CamelModel):
    user_id: int
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    category: Optional[str] = Field(default=None, max_length=50)
    completed: bool = False
    goal_date: date = Field(default_factory=utctoday, description="Day the goal belongs to (UTC)")


class DailyGoalUpdate(PartialUpdate):
    NON_NULLABLE = frozenset({"title", "completed", "goal_date"})

    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = None
    category: Optional[str] = Field(default=None, max_length=50)
    completed: Optional[bool] = None
    goal_date: Optional[date] = None


class DailyGoalResponse(ResponseModel):
    id: int
    user_id: int
    title: str
    description: Optional[str] = None
    category: Optional[str] = None
    completed: bool
    goal_date: date
    created_at: UtcDatetime
