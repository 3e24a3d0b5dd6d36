"""
Sword Tracker Backend: Test Configuration (conftest.py)
=======================================================

What:  Shared pytest fixtures for the whole test-suite.
How:   pytest auto-discovers this file; environment overrides are applied
       before any sword_tracker module is imported so Settings, the engine
       and the storage singleton are built for testing.

Fixture Hierarchy (all function-scoped):
    ├── mock_storage:      AsyncMock with the Storage interface
    ├── memory_storage:    fresh, empty MemoryStorage
    ├── database_storage:  DatabaseStorage on an in-memory SQLite database
    ├── storage:           parametrized over both implementations above
    ├── api_client:        AsyncClient whose routes talk to mock_storage
    ├── memory_client:     AsyncClient whose routes talk to memory_storage
    └── archive_file:      temporary gzip archive wired into the download routes
"""

import gzip
import os
from contextlib import asynccontextmanager
from typing import AsyncIterator
from unittest.mock import AsyncMock

# Override settings for testing BEFORE any sword_tracker import
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["AUTO_CREATE_TABLES"] = "false"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from sword_tracker.database import Base
from sword_tracker.main import app
from sword_tracker.services import archive_service
from sword_tracker.storage import DatabaseStorage, MemoryStorage, Storage, get_storage

import sword_tracker.models  # noqa: F401  (registers tables on Base.metadata)


# ══════════════════════════════════════════════════════════════════════════
# Storage Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_storage():
    """
    Storage double for route tests.

    `spec=Storage` makes every abstract coroutine an AsyncMock, and calling a
    method that does not exist on Storage fails the test.

    Usage:
        mock_storage.get_user.return_value = None
        response = await api_client.get("/api/user/1")
        mock_storage.get_user.assert_awaited_once_with(1)
    """
    return AsyncMock(spec=Storage)


@pytest.fixture
def memory_storage():
    return MemoryStorage()


@asynccontextmanager
async def sqlite_database_storage() -> AsyncIterator[DatabaseStorage]:
    """
    DatabaseStorage backed by a private in-memory SQLite database.

    StaticPool keeps a single connection so every session sees the same
    in-memory database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    try:
        yield DatabaseStorage(factory)
    finally:
        await engine.dispose()


@pytest_asyncio.fixture
async def database_storage():
    async with sqlite_database_storage() as storage:
        yield storage


@pytest_asyncio.fixture(params=["memory", "database"])
async def storage(request):
    """Each storage implementation in turn, for behaviour both must share."""
    if request.param == "memory":
        yield MemoryStorage()
    else:
        async with sqlite_database_storage() as db_storage:
            yield db_storage


# ══════════════════════════════════════════════════════════════════════════
# HTTP Client Fixtures
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def _client_for(storage: Storage) -> AsyncIterator[AsyncClient]:
    app.dependency_overrides[get_storage] = lambda: storage
    # raise_app_exceptions=False: let the catch-all handler's 500 response
    # reach the test instead of re-raising the original exception
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def api_client(mock_storage):
    """AsyncClient for the app with get_storage replaced by mock_storage."""
    async with _client_for(mock_storage) as client:
        yield client


@pytest_asyncio.fixture
async def memory_client(memory_storage):
    """AsyncClient for the app backed by an empty MemoryStorage."""
    async with _client_for(memory_storage) as client:
        yield client


@pytest_asyncio.fixture
async def storage_client(storage):
    """AsyncClient over each real storage implementation in turn."""
    async with _client_for(storage) as client:
        yield client


# ══════════════════════════════════════════════════════════════════════════
# Archive Fixture
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def archive_file(tmp_path, monkeypatch):
    """
    Writes a small gzip archive and points the download routes at it.

    Returns the archive's bytes so tests can compare the response body.
    """
    path = tmp_path / "sword-tracker.tar.gz"
    content = gzip.compress(b"sword-tracker source tree " * 64)
    path.write_bytes(content)
    monkeypatch.setattr(
        archive_service, "archive_service", archive_service.ArchiveService(str(path))
    )
    return content


@pytest.fixture
def missing_archive(tmp_path, monkeypatch):
    """Points the download routes at a path where no archive exists."""
    monkeypatch.setattr(
        archive_service,
        "archive_service",
        archive_service.ArchiveService(str(tmp_path / "absent.tar.gz")),
    )
