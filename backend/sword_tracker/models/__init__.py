"""
ORM models, one module per table.

Importing this package registers every table on `Base.metadata`, which is
what Alembic autogenerate and `create_tables()` rely on.
"""

from sword_tracker.models.course import Course
from sword_tracker.models.daily_goal import DailyGoal
from sword_tracker.models.elo_entry import EloEntry
from sword_tracker.models.game_analysis import GameAnalysis
from sword_tracker.models.goal import Goal
from sword_tracker.models.user import User

__all__ = ["Course", "DailyGoal", "EloEntry", "GameAnalysis", "Goal", "User"]
