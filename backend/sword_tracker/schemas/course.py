"""
Sword Tracker Backend: Course Schemas
=====================================

What:  API contract for /api/courses.

Progress rule (create only):
    completedLessons may not exceed totalLessons when totalLessons > 0.
    A totalLessons of 0 means "unknown length" and accepts any progress.
    PATCH payloads are not cross-checked because the stored counterpart
    of a partially-sent pair is not known at validation time.
"""

from typing import Optional

from pydantic import Field, model_validator

from sword_tracker.schemas.base import CamelModel, PartialUpdate, ResponseModel, UtcDatetime


class CourseCreate(CamelModel):
    user_id: int
    title: str = Field(min_length=1, max_length=200)
    platform: Optional[str] = Field(default=None, max_length=100, description="e.g. Chessable, Lichess Study")
    url: Optional[str] = Field(default=None, max_length=500)
    total_lessons: int = Field(default=0, ge=0)
    completed_lessons: int = Field(default=0, ge=0)
    status: str = Field(default="in_progress", min_length=1, max_length=50)

    @model_validator(mode="after")
    def check_progress(self) -> "CourseCreate":
        if self.total_lessons and self.completed_lessons > self.total_lessons:
            raise ValueError("completedLessons cannot exceed totalLessons")
        return self


class CourseUpdate(PartialUpdate):
    NON_NULLABLE = frozenset({"title", "total_lessons", "completed_lessons", "status"})

    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    platform: Optional[str] = Field(default=None, max_length=100)
    url: Optional[str] = Field(default=None, max_length=500)
    total_lessons: Optional[int] = Field(default=None, ge=0)
    completed_lessons: Optional[int] = Field(default=None, ge=0)
    status: Optional[str] = Field(default=None, min_length=1, max_length=50)


class CourseResponse(ResponseModel):
    id: int
    user_id: int
    title: str
    platform: Optional[str] = None
    url: Optional[str] = None
    total_lessons: int
    completed_lessons: int
    status: str
    created_at: UtcDatetime
