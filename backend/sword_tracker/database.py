"""
Sword Tracker Backend: Database Engine & Session Factory
========================================================

What:  Async SQLAlchemy engine, session factory and declarative Base.
How:   Creates an async engine with connection pooling at import time. The
       engine does not connect until first use, so importing this module is
       safe even when STORAGE_BACKEND=memory.
Who:   DatabaseStorage (sessions), the health route (SELECT 1), Alembic
       (metadata) and the application lifespan (dispose / create tables).

Connection Pooling:
    pool_size=10, max_overflow=5 by default (15 connections at most)
    pool_pre_ping: validates connections before use
    pool_recycle=3600: recycles connections every hour
    SQLite URLs (tests, local experiments) skip the pool options.
"""

from typing import Any, Dict

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from sword_tracker.config import settings


def _engine_options() -> Dict[str, Any]:
    """Pool options for the configured URL; SQLite pools take none of them."""
    options: Dict[str, Any] = {"echo": settings.log_level == "DEBUG"}
    if not settings.uses_sqlite:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return options


# ── Engine Configuration ──────────────────────────────────────────────────
engine: AsyncEngine = create_async_engine(settings.database_url, **_engine_options())

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: returned rows stay readable after commit, which is
# when storage methods convert them into response schemas.
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Every model registers with this metadata, which Alembic reads for
    autogenerate and `create_tables()` uses for development bootstrapping.
    """
    pass


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def create_tables() -> None:
    """
    What:  Creates any missing tables from the ORM metadata.
    When:  Startup, only when AUTO_CREATE_TABLES is enabled.
    """
    # Registers every model on Base.metadata
    import sword_tracker.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    """
    What:  Gracefully closes all connections in the pool.
    When:  Called during application shutdown (lifespan handler).
    """
    await engine.dispose()
