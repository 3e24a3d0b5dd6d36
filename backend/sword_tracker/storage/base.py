"""
Sword Tracker Backend: Abstract Storage Interface
=================================================

What:  The persistence contract every route talks to.
How:   Concrete implementations (DatabaseStorage, MemoryStorage) inherit from
       Storage and implement every method. Routes receive the configured
       instance through the `get_storage` FastAPI dependency.

Contract:
    - Inputs are already validated schema objects; storage never sees raw
      request bodies.
    - Single-item getters and updates return None when the record is absent.
    - Deletes return True when a row was removed, False otherwise.
    - Collections are returned as lists; an unknown user yields [].
    - Each method is one logical operation. Nothing is transactional across
      calls.
    - Infrastructure failures are raised as DatabaseError or
      StorageUnavailableError, never as driver-specific exceptions.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from sword_tracker.schemas.course import CourseCreate, CourseResponse, CourseUpdate
from sword_tracker.schemas.daily_goal import DailyGoalCreate, DailyGoalResponse, DailyGoalUpdate
from sword_tracker.schemas.elo import EloEntryCreate, EloEntryResponse, EloStatsResponse
from sword_tracker.schemas.game_analysis import GameAnalysisCreate, GameAnalysisResponse
from sword_tracker.schemas.goal import GoalCreate, GoalResponse, GoalUpdate
from sword_tracker.schemas.user import UserCreate, UserResponse, UserUpdate


class Storage(ABC):
    """Persistence operations for every Sword Tracker entity."""

    # ── Users ─────────────────────────────────────────────────────────────

    @abstractmethod
    async def get_user(self, user_id: int) -> Optional[UserResponse]:
        ...

    @abstractmethod
    async def create_user(self, payload: UserCreate) -> UserResponse:
        ...

    @abstractmethod
    async def update_user(self, user_id: int, updates: UserUpdate) -> Optional[UserResponse]:
        """Apply only the fields present in `updates`; None if the user is absent."""
        ...

    # ── ELO ───────────────────────────────────────────────────────────────

    @abstractmethod
    async def get_elo_entries(self, user_id: int) -> List[EloEntryResponse]:
        """All entries of a user, oldest first."""
        ...

    @abstractmethod
    async def create_elo_entry(self, payload: EloEntryCreate) -> EloEntryResponse:
        ...

    @abstractmethod
    async def get_elo_stats(self, user_id: int, period: str) -> EloStatsResponse:
        """
        Summary of the user's entries within the period window.

        `period` is one of week, month, year; callers validate it first.
        """
        ...

    # ── Daily Goals ───────────────────────────────────────────────────────

    @abstractmethod
    async def get_daily_goals(self, user_id: int) -> List[DailyGoalResponse]:
        ...

    @abstractmethod
    async def create_daily_goal(self, payload: DailyGoalCreate) -> DailyGoalResponse:
        ...

    @abstractmethod
    async def update_daily_goal(
        self, goal_id: int, updates: DailyGoalUpdate
    ) -> Optional[DailyGoalResponse]:
        ...

    @abstractmethod
    async def delete_daily_goal(self, goal_id: int) -> bool:
        ...

    # ── Courses ───────────────────────────────────────────────────────────

    @abstractmethod
    async def get_courses(self, user_id: int) -> List[CourseResponse]:
        ...

    @abstractmethod
    async def create_course(self, payload: CourseCreate) -> CourseResponse:
        ...

    @abstractmethod
    async def update_course(self, course_id: int, updates: CourseUpdate) -> Optional[CourseResponse]:
        ...

    @abstractmethod
    async def delete_course(self, course_id: int) -> bool:
        ...

    # ── Goals ─────────────────────────────────────────────────────────────

    @abstractmethod
    async def get_goals(self, user_id: int, goal_type: Optional[str] = None) -> List[GoalResponse]:
        """
        Goals of a user; when `goal_type` is not None only goals whose type
        equals it exactly.
        """
        ...

    @abstractmethod
    async def create_goal(self, payload: GoalCreate) -> GoalResponse:
        ...

    @abstractmethod
    async def update_goal(self, goal_id: int, updates: GoalUpdate) -> Optional[GoalResponse]:
        ...

    @abstractmethod
    async def delete_goal(self, goal_id: int) -> bool:
        ...

    # ── Game Analyses ─────────────────────────────────────────────────────

    @abstractmethod
    async def get_game_analyses(self, user_id: int) -> List[GameAnalysisResponse]:
        ...

    @abstractmethod
    async def create_game_analysis(self, payload: GameAnalysisCreate) -> GameAnalysisResponse:
        ...

    @abstractmethod
    async def get_game_analysis(self, analysis_id: int) -> Optional[GameAnalysisResponse]:
        ...
