"""
Sword Tracker Backend: In-Memory Storage
========================================

What:  Storage implementation backed by process-local dictionaries.
Who:   Selected with STORAGE_BACKEND=memory; used by the API test-suite and
       for running the backend without PostgreSQL.
How:   Records are kept as response schema objects keyed by id. Ids come from
       one counter per table and start at 1, like a SERIAL column.

Concurrency:
    No method awaits while reading or mutating the tables, so every
    operation runs to completion without interleaving on the event loop.

Differences from DatabaseStorage:
    - Data is lost on restart.
    - `userId` references are not checked (the database enforces them with
      foreign keys).
"""

import itertools
import logging
from typing import Dict, Generic, Iterator, List, Optional, TypeVar

from sword_tracker.clock import utcnow
from sword_tracker.exceptions import DatabaseError
from sword_tracker.schemas.course import CourseCreate, CourseResponse, CourseUpdate
from sword_tracker.schemas.daily_goal import DailyGoalCreate, DailyGoalResponse, DailyGoalUpdate
from sword_tracker.schemas.elo import EloEntryCreate, EloEntryResponse, EloStatsResponse
from sword_tracker.schemas.game_analysis import GameAnalysisCreate, GameAnalysisResponse
from sword_tracker.schemas.goal import GoalCreate, GoalResponse, GoalUpdate
from sword_tracker.schemas.user import UserCreate, UserResponse, UserUpdate
from sword_tracker.services.elo_stats import period_start, summarize_elo_history
from sword_tracker.storage.base import Storage

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")


class _Table(Generic[RecordT]):
    """An id-keyed dict with its own id sequence."""

    def __init__(self) -> None:
        self.rows: Dict[int, RecordT] = {}
        self._ids = itertools.count(1)

    def next_id(self) -> int:
        return next(self._ids)

    def __iter__(self) -> Iterator[RecordT]:
        return iter(self.rows.values())


class MemoryStorage(Storage):
    """Dictionary-backed Storage. Each instance is an independent, empty store."""

    def __init__(self) -> None:
        self.users: _Table[UserResponse] = _Table()
        self.elo_entries: _Table[EloEntryResponse] = _Table()
        self.daily_goals: _Table[DailyGoalResponse] = _Table()
        self.courses: _Table[CourseResponse] = _Table()
        self.goals: _Table[GoalResponse] = _Table()
        self.game_analyses: _Table[GameAnalysisResponse] = _Table()

    # ── Users ─────────────────────────────────────────────────────────────

    async def get_user(self, user_id: int) -> Optional[UserResponse]:
        return self.users.rows.get(user_id)

    async def create_user(self, payload: UserCreate) -> UserResponse:
        self._check_username_free(payload.username)
        user = UserResponse(id=self.users.next_id(), created_at=utcnow(), **payload.model_dump())
        self.users.rows[user.id] = user
        return user

    async def update_user(self, user_id: int, updates: UserUpdate) -> Optional[UserResponse]:
        user = self.users.rows.get(user_id)
        if user is None:
            return None
        changes = updates.changes()
        if "username" in changes and changes["username"] != user.username:
            self._check_username_free(changes["username"])
        user = user.model_copy(update=changes)
        self.users.rows[user_id] = user
        return user

    def _check_username_free(self, username: str) -> None:
        # Mirrors the UNIQUE constraint on users.username
        if any(user.username == username for user in self.users):
            raise DatabaseError(context={"constraint": "users.username", "username": username})

    # ── ELO ───────────────────────────────────────────────────────────────

    async def get_elo_entries(self, user_id: int) -> List[EloEntryResponse]:
        return sorted(
            (entry for entry in self.elo_entries if entry.user_id == user_id),
            key=lambda entry: (entry.recorded_at, entry.id),
        )

    async def create_elo_entry(self, payload: EloEntryCreate) -> EloEntryResponse:
        entry = EloEntryResponse(id=self.elo_entries.next_id(), **payload.model_dump())
        self.elo_entries.rows[entry.id] = entry
        return entry

    async def get_elo_stats(self, user_id: int, period: str) -> EloStatsResponse:
        since = period_start(period)
        window = [
            entry for entry in self.elo_entries
            if entry.user_id == user_id and entry.recorded_at >= since
        ]
        return summarize_elo_history(period, window)

    # ── Daily Goals ───────────────────────────────────────────────────────

    async def get_daily_goals(self, user_id: int) -> List[DailyGoalResponse]:
        return sorted(
            (goal for goal in self.daily_goals if goal.user_id == user_id),
            key=lambda goal: (goal.goal_date, goal.id),
            reverse=True,
        )

    async def create_daily_goal(self, payload: DailyGoalCreate) -> DailyGoalResponse:
        goal = DailyGoalResponse(
            id=self.daily_goals.next_id(), created_at=utcnow(), **payload.model_dump()
        )
        self.daily_goals.rows[goal.id] = goal
        return goal

    async def update_daily_goal(
        self, goal_id: int, updates: DailyGoalUpdate
    ) -> Optional[DailyGoalResponse]:
        return self._apply_update(self.daily_goals, goal_id, updates.changes())

    async def delete_daily_goal(self, goal_id: int) -> bool:
        return self.daily_goals.rows.pop(goal_id, None) is not None

    # ── Courses ───────────────────────────────────────────────────────────

    async def get_courses(self, user_id: int) -> List[CourseResponse]:
        return self._owned_newest_first(self.courses, user_id)

    async def create_course(self, payload: CourseCreate) -> CourseResponse:
        course = CourseResponse(id=self.courses.next_id(), created_at=utcnow(), **payload.model_dump())
        self.courses.rows[course.id] = course
        return course

    async def update_course(self, course_id: int, updates: CourseUpdate) -> Optional[CourseResponse]:
        return self._apply_update(self.courses, course_id, updates.changes())

    async def delete_course(self, course_id: int) -> bool:
        return self.courses.rows.pop(course_id, None) is not None

    # ── Goals ─────────────────────────────────────────────────────────────

    async def get_goals(self, user_id: int, goal_type: Optional[str] = None) -> List[GoalResponse]:
        goals = self._owned_newest_first(self.goals, user_id)
        if goal_type is not None:
            goals = [goal for goal in goals if goal.type == goal_type]
        return goals

    async def create_goal(self, payload: GoalCreate) -> GoalResponse:
        goal = GoalResponse(id=self.goals.next_id(), created_at=utcnow(), **payload.model_dump())
        self.goals.rows[goal.id] = goal
        return goal

    async def update_goal(self, goal_id: int, updates: GoalUpdate) -> Optional[GoalResponse]:
        return self._apply_update(self.goals, goal_id, updates.changes())

    async def delete_goal(self, goal_id: int) -> bool:
        return self.goals.rows.pop(goal_id, None) is not None

    # ── Game Analyses ─────────────────────────────────────────────────────

    async def get_game_analyses(self, user_id: int) -> List[GameAnalysisResponse]:
        return self._owned_newest_first(self.game_analyses, user_id)

    async def create_game_analysis(self, payload: GameAnalysisCreate) -> GameAnalysisResponse:
        analysis = GameAnalysisResponse(
            id=self.game_analyses.next_id(), created_at=utcnow(), **payload.model_dump()
        )
        self.game_analyses.rows[analysis.id] = analysis
        return analysis

    async def get_game_analysis(self, analysis_id: int) -> Optional[GameAnalysisResponse]:
        return self.game_analyses.rows.get(analysis_id)

    # ── Helpers ───────────────────────────────────────────────────────────

    @staticmethod
    def _owned_newest_first(table: _Table, user_id: int) -> list:
        return sorted(
            (row for row in table if row.user_id == user_id),
            key=lambda row: row.id,
            reverse=True,
        )

    @staticmethod
    def _apply_update(table: _Table, record_id: int, changes: dict):
        record = table.rows.get(record_id)
        if record is None:
            return None
        record = record.model_copy(update=changes)
        table.rows[record_id] = record
        return record
