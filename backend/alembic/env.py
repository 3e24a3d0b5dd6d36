"""
Alembic Migration Environment
=============================

What:  Migrates the six tracker tables (users, elo_entries, daily_goals,
       courses, goals, game_analyses) on the DATABASE_URL the API uses.
How:   Importing sword_tracker.models registers every table on
       Base.metadata for --autogenerate. The URL comes from Settings, never
       alembic.ini. Online runs go through an async engine with
       connection.run_sync(); compare_type=True makes autogenerate pick up
       column type changes (e.g. widening a String length).
Who:   The `alembic` CLI (upgrade, downgrade, revision --autogenerate).
       Only needed with STORAGE_BACKEND=database; AUTO_CREATE_TABLES is the
       development shortcut.
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.ext.asyncio import async_engine_from_config
from alembic import context

from sword_tracker.config import settings
from sword_tracker.database import Base

# Registers every table on Base.metadata for --autogenerate
import sword_tracker.models  # noqa: F401

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

# DATABASE_URL from the environment is the single source of truth
config.set_main_option("sqlalchemy.url", settings.database_url)


def run_migrations_offline() -> None:
    """Emit SQL to stdout without connecting (`alembic upgrade head --sql`)."""
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection):
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    connectable = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


def run_migrations_online() -> None:
    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
