"""
Sword Tracker Backend: Application Package
==========================================

What: HTTP backend for a chess-learning progress tracker (users, ELO history,
      daily goals, courses, goals and game analyses).
Who:  Imported by uvicorn (`sword_tracker.main:app`), Alembic and pytest.

Layering:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← decode, validate, respond
    ├─────────────────────────────────────┤
    │      Storage (Storage interface)    │  ← DatabaseStorage | MemoryStorage
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy engine
    └─────────────────────────────────────┘

Routes never talk to SQLAlchemy directly; everything goes through the
`Storage` interface so the persistence engine can be swapped by configuration.
"""

__version__ = "1.0.0"
