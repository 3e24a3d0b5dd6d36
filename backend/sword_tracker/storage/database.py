"""
Sword Tracker Backend: Database Storage
=======================================

What:  Storage implementation over async SQLAlchemy (PostgreSQL in
       production, SQLite in tests).
How:   Every public method opens its own AsyncSession, does one logical
       operation, commits and converts ORM rows into response schemas
       before the session closes.
Who:   Selected with STORAGE_BACKEND=database (the default).

Error Translation:
    OperationalError / InterfaceError / OSError → StorageUnavailableError (503)
    any other SQLAlchemyError                   → DatabaseError (500)
    The original exception is logged with the operation name; the client only
    sees the generic message.

Query Plans:
    get_elo_entries / get_elo_stats → idx_elo_entries_user_recorded
    get_goals (with or without type) → idx_goals_user_type
    other per-user lists            → ix_<table>_user_id
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, List, Optional, Type, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.exc import InterfaceError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from sword_tracker.exceptions import DatabaseError, StorageUnavailableError
from sword_tracker.models import Course, DailyGoal, EloEntry, GameAnalysis, Goal, User
from sword_tracker.schemas.base import PartialUpdate
from sword_tracker.schemas.course import CourseCreate, CourseResponse, CourseUpdate
from sword_tracker.schemas.daily_goal import DailyGoalCreate, DailyGoalResponse, DailyGoalUpdate
from sword_tracker.schemas.elo import EloEntryCreate, EloEntryResponse, EloStatsResponse
from sword_tracker.schemas.game_analysis import GameAnalysisCreate, GameAnalysisResponse
from sword_tracker.schemas.goal import GoalCreate, GoalResponse, GoalUpdate
from sword_tracker.schemas.user import UserCreate, UserResponse, UserUpdate
from sword_tracker.services.elo_stats import period_start, summarize_elo_history
from sword_tracker.storage.base import Storage

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT")


class DatabaseStorage(Storage):
    """
    SQLAlchemy-backed Storage.

    Args:
        session_factory: async_sessionmaker bound to the target engine.
                         The application passes the global factory from
                         sword_tracker.database; tests pass one bound to an
                         in-memory SQLite engine.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    @asynccontextmanager
    async def _session(self, operation: str) -> AsyncGenerator[AsyncSession, None]:
        """
        One session per storage operation, committed on success.

        Leaving the `async with` on error closes the session, which rolls the
        transaction back.
        """
        async with self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except (OperationalError, InterfaceError, OSError) as e:
                logger.error("Storage unavailable during %s: %s", operation, str(e))
                raise StorageUnavailableError(
                    context={"operation": operation, "error_type": type(e).__name__},
                ) from e
            except SQLAlchemyError as e:
                logger.error("Database error during %s: %s", operation, str(e), exc_info=True)
                raise DatabaseError(
                    context={"operation": operation, "error_type": type(e).__name__},
                ) from e

    # ── Generic helpers ───────────────────────────────────────────────────

    async def _get(self, operation: str, model, record_id: int, schema: Type[ResponseT]) -> Optional[ResponseT]:
        async with self._session(operation) as session:
            row = await session.get(model, record_id)
            return schema.model_validate(row) if row is not None else None

    async def _create(self, operation: str, model, payload, schema: Type[ResponseT]) -> ResponseT:
        async with self._session(operation) as session:
            row = model(**payload.model_dump())
            session.add(row)
            await session.flush()
            return schema.model_validate(row)

    async def _update(
        self,
        operation: str,
        model,
        record_id: int,
        updates: PartialUpdate,
        schema: Type[ResponseT],
    ) -> Optional[ResponseT]:
        async with self._session(operation) as session:
            row = await session.get(model, record_id)
            if row is None:
                return None
            for field, value in updates.changes().items():
                setattr(row, field, value)
            await session.flush()
            return schema.model_validate(row)

    async def _delete(self, operation: str, model, record_id: int) -> bool:
        async with self._session(operation) as session:
            result = await session.execute(delete(model).where(model.id == record_id))
            return result.rowcount > 0

    async def _list(self, operation: str, query, schema: Type[ResponseT]) -> List[ResponseT]:
        async with self._session(operation) as session:
            result = await session.execute(query)
            return [schema.model_validate(row) for row in result.scalars().all()]

    # ── Users ─────────────────────────────────────────────────────────────

    async def get_user(self, user_id: int) -> Optional[UserResponse]:
        return await self._get("get_user", User, user_id, UserResponse)

    async def create_user(self, payload: UserCreate) -> UserResponse:
        return await self._create("create_user", User, payload, UserResponse)

    async def update_user(self, user_id: int, updates: UserUpdate) -> Optional[UserResponse]:
        return await self._update("update_user", User, user_id, updates, UserResponse)

    # ── ELO ───────────────────────────────────────────────────────────────

    async def get_elo_entries(self, user_id: int) -> List[EloEntryResponse]:
        query = (
            select(EloEntry)
            .where(EloEntry.user_id == user_id)
            .order_by(EloEntry.recorded_at.asc(), EloEntry.id.asc())
        )
        return await self._list("get_elo_entries", query, EloEntryResponse)

    async def create_elo_entry(self, payload: EloEntryCreate) -> EloEntryResponse:
        return await self._create("create_elo_entry", EloEntry, payload, EloEntryResponse)

    async def get_elo_stats(self, user_id: int, period: str) -> EloStatsResponse:
        query = (
            select(EloEntry)
            .where(EloEntry.user_id == user_id, EloEntry.recorded_at >= period_start(period))
            .order_by(EloEntry.recorded_at.asc(), EloEntry.id.asc())
        )
        entries = await self._list("get_elo_stats", query, EloEntryResponse)
        return summarize_elo_history(period, entries)

    # ── Daily Goals ───────────────────────────────────────────────────────

    async def get_daily_goals(self, user_id: int) -> List[DailyGoalResponse]:
        query = (
            select(DailyGoal)
            .where(DailyGoal.user_id == user_id)
            .order_by(DailyGoal.goal_date.desc(), DailyGoal.id.desc())
        )
        return await self._list("get_daily_goals", query, DailyGoalResponse)

    async def create_daily_goal(self, payload: DailyGoalCreate) -> DailyGoalResponse:
        return await self._create("create_daily_goal", DailyGoal, payload, DailyGoalResponse)

    async def update_daily_goal(
        self, goal_id: int, updates: DailyGoalUpdate
    ) -> Optional[DailyGoalResponse]:
        return await self._update("update_daily_goal", DailyGoal, goal_id, updates, DailyGoalResponse)

    async def delete_daily_goal(self, goal_id: int) -> bool:
        return await self._delete("delete_daily_goal", DailyGoal, goal_id)

    # ── Courses ───────────────────────────────────────────────────────────

    async def get_courses(self, user_id: int) -> List[CourseResponse]:
        query = select(Course).where(Course.user_id == user_id).order_by(Course.id.desc())
        return await self._list("get_courses", query, CourseResponse)

    async def create_course(self, payload: CourseCreate) -> CourseResponse:
        return await self._create("create_course", Course, payload, CourseResponse)

    async def update_course(self, course_id: int, updates: CourseUpdate) -> Optional[CourseResponse]:
        return await self._update("update_course", Course, course_id, updates, CourseResponse)

    async def delete_course(self, course_id: int) -> bool:
        return await self._delete("delete_course", Course, course_id)

    # ── Goals ─────────────────────────────────────────────────────────────

    async def get_goals(self, user_id: int, goal_type: Optional[str] = None) -> List[GoalResponse]:
        query = select(Goal).where(Goal.user_id == user_id)
        if goal_type is not None:
            query = query.where(Goal.type == goal_type)
        query = query.order_by(Goal.id.desc())
        return await self._list("get_goals", query, GoalResponse)

    async def create_goal(self, payload: GoalCreate) -> GoalResponse:
        return await self._create("create_goal", Goal, payload, GoalResponse)

    async def update_goal(self, goal_id: int, updates: GoalUpdate) -> Optional[GoalResponse]:
        return await self._update("update_goal", Goal, goal_id, updates, GoalResponse)

    async def delete_goal(self, goal_id: int) -> bool:
        return await self._delete("delete_goal", Goal, goal_id)

    # ── Game Analyses ─────────────────────────────────────────────────────

    async def get_game_analyses(self, user_id: int) -> List[GameAnalysisResponse]:
        query = (
            select(GameAnalysis)
            .where(GameAnalysis.user_id == user_id)
            .order_by(GameAnalysis.id.desc())
        )
        return await self._list("get_game_analyses", query, GameAnalysisResponse)

    async def create_game_analysis(self, payload: GameAnalysisCreate) -> GameAnalysisResponse:
        return await self._create("create_game_analysis", GameAnalysis, payload, GameAnalysisResponse)

    async def get_game_analysis(self, analysis_id: int) -> Optional[GameAnalysisResponse]:
        return await self._get("get_game_analysis", GameAnalysis, analysis_id, GameAnalysisResponse)
