"""Create tracker tables

Revision ID: 001
Revises: None
Create Date: 2024-06-01 00:00:00.000000+00:00

What:  Creates `users` and the five per-user tables (`elo_entries`,
       `daily_goals`, `courses`, `goals`, `game_analyses`) with the indexes
       the list queries use.
How:   Every child table references users.id with ON DELETE CASCADE.
       Timestamps are TIMESTAMP WITH TIME ZONE and default to
       CURRENT_TIMESTAMP for rows inserted outside the application.

Rollback: downgrade() drops all six tables (destructive, all data lost).
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id() -> sa.Column:
    return sa.Column("id", sa.Integer(), autoincrement=True, nullable=False)


def _user_fk() -> sa.Column:
    return sa.Column(
        "user_id",
        sa.Integer(),
        sa.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.TIMESTAMP(timezone=True),
        server_default=sa.text("CURRENT_TIMESTAMP"),
        nullable=False,
    )


def upgrade() -> None:
    op.create_table(
        "users",
        _id(),
        sa.Column("username", sa.String(50), nullable=False, comment="Public handle, unique across users"),
        sa.Column("display_name", sa.String(100), nullable=True),
        sa.Column("current_elo", sa.Integer(), nullable=False, server_default=sa.text("1200")),
        sa.Column("target_elo", sa.Integer(), nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
        sa.UniqueConstraint("username", name="uq_users_username"),
    )

    op.create_table(
        "elo_entries",
        _id(),
        _user_fk(),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column("game_type", sa.String(50), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column(
            "recorded_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id", name="pk_elo_entries"),
    )
    # History and period statistics: WHERE user_id = ? ORDER BY recorded_at
    op.create_index("idx_elo_entries_user_recorded", "elo_entries", ["user_id", "recorded_at"])

    op.create_table(
        "daily_goals",
        _id(),
        _user_fk(),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category", sa.String(50), nullable=True),
        sa.Column("completed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("goal_date", sa.Date(), nullable=False, server_default=sa.text("CURRENT_DATE")),
        _created_at(),
        sa.PrimaryKeyConstraint("id", name="pk_daily_goals"),
    )
    op.create_index("ix_daily_goals_user_id", "daily_goals", ["user_id"])

    op.create_table(
        "courses",
        _id(),
        _user_fk(),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("platform", sa.String(100), nullable=True),
        sa.Column("url", sa.String(500), nullable=True),
        sa.Column("total_lessons", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("completed_lessons", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("status", sa.String(50), nullable=False, server_default=sa.text("'in_progress'")),
        _created_at(),
        sa.PrimaryKeyConstraint("id", name="pk_courses"),
    )
    op.create_index("ix_courses_user_id", "courses", ["user_id"])

    op.create_table(
        "goals",
        _id(),
        _user_fk(),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("type", sa.String(50), nullable=False, comment="Free-form horizon tag, filtered verbatim"),
        sa.Column("target_value", sa.Integer(), nullable=True),
        sa.Column("current_value", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("completed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("deadline", sa.Date(), nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint("id", name="pk_goals"),
    )
    # Covers both "all goals of a user" and "goals of one type"
    op.create_index("idx_goals_user_type", "goals", ["user_id", "type"])

    op.create_table(
        "game_analyses",
        _id(),
        _user_fk(),
        sa.Column("pgn", sa.Text(), nullable=False),
        sa.Column("opponent", sa.String(100), nullable=True),
        sa.Column("result", sa.String(20), nullable=True),
        sa.Column("opening", sa.String(200), nullable=True),
        sa.Column("time_control", sa.String(50), nullable=True),
        sa.Column("accuracy", sa.Float(), nullable=True),
        sa.Column("analysis", sa.JSON(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("played_at", sa.TIMESTAMP(timezone=True), nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint("id", name="pk_game_analyses"),
    )
    op.create_index("ix_game_analyses_user_id", "game_analyses", ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_game_analyses_user_id", table_name="game_analyses")
    op.drop_table("game_analyses")
    op.drop_index("idx_goals_user_type", table_name="goals")
    op.drop_table("goals")
    op.drop_index("ix_courses_user_id", table_name="courses")
    op.drop_table("courses")
    op.drop_index("ix_daily_goals_user_id", table_name="daily_goals")
    op.drop_table("daily_goals")
    op.drop_index("idx_elo_entries_user_recorded", table_name="elo_entries")
    op.drop_table("elo_entries")
    op.drop_table("users")
