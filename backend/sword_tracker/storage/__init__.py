"""
Sword Tracker Backend: Storage Package
======================================

What:  Persistence layer behind every API route.
How:   `get_storage()` lazily builds the implementation chosen by
       STORAGE_BACKEND the first time a request needs it and reuses it for
       the life of the process. Routes declare `Depends(get_storage)`, which
       tests replace through `app.dependency_overrides`.

Implementations:
    - DatabaseStorage: PostgreSQL via async SQLAlchemy (default)
    - MemoryStorage:   process-local dictionaries
"""

import logging
from typing import Optional

from sword_tracker.config import settings
from sword_tracker.storage.base import Storage
from sword_tracker.storage.database import DatabaseStorage
from sword_tracker.storage.memory import MemoryStorage

logger = logging.getLogger(__name__)

__all__ = ["Storage", "DatabaseStorage", "MemoryStorage", "get_storage", "reset_storage"]

_storage: Optional[Storage] = None


def _build_storage() -> Storage:
    if settings.storage_backend == "memory":
        logger.info("Using in-memory storage")
        return MemoryStorage()

    from sword_tracker.database import async_session_factory

    logger.info("Using database storage")
    return DatabaseStorage(async_session_factory)


def get_storage() -> Storage:
    """FastAPI dependency returning the process-wide Storage instance."""
    global _storage
    if _storage is None:
        _storage = _build_storage()
    return _storage


def reset_storage() -> None:
    """Forget the cached instance; the next get_storage() builds a new one."""
    global _storage
    _storage = None
