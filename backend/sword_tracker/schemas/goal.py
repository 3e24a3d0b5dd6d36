"""API contract for /api/goals. `type` is a free-form tag stored and filtered verbatim."""

from datetime import date
from typing import Optional

from pydantic import Field

from sword_tracker.schemas.base import CamelModel, PartialUpdate, ResponseModel, UtcDatetime


class GoalCreate(CamelModel):
    user_id: int
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    type: str = Field(min_length=1, max_length=50, description="Goal horizon tag, e.g. weekly")
    target_value: Optional[int] = None
    current_value: int = 0
    completed: bool = False
    deadline: Optional[date] = None


class GoalUpdate(PartialUpdate):
    NON_NULLABLE = frozenset({"title", "type", "current_value", "completed"})

    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = None
    type: Optional[str] = Field(default=None, min_length=1, max_length=50)
    target_value: Optional[int] = None
    current_value: Optional[int] = None
    completed: Optional[bool] = None
    deadline: Optional[date] = None


class GoalResponse(ResponseModel):
    id: int
    user_id: int
    title: str
    description: Optional[str] = None
    type: str
    target_value: Optional[int] = None
    current_value: int
    completed: bool
    deadline: Optional[date] = None
    created_at: UtcDatetime
