# Routes package init
"""
Sword Tracker Backend: API Routes Package
=========================================

What:  HTTP route handlers that accept requests and return responses.
How:   One module per resource, each exposing an APIRouter.

Route Inventory:
    - users.py:          GET/PATCH /api/user/{id}, POST /api/user
    - elo.py:            GET /api/elo/{userId}, POST /api/elo,
                         GET /api/elo-stats/{userId}/{period}
    - daily_goals.py:    GET /api/daily-goals/{userId}, POST /api/daily-goals,
                         PATCH/DELETE /api/daily-goals/{id}
    - courses.py:        GET /api/courses/{userId}, POST /api/courses,
                         PATCH/DELETE /api/courses/{id}
    - goals.py:          GET /api/goals/{userId}?type=, POST /api/goals,
                         PATCH/DELETE /api/goals/{id}
    - game_analyses.py:  GET /api/game-analyses/{userId}, POST /api/game-analyses,
                         GET /api/game-analyses/single/{id}
    - analysis.py:       POST /api/analyze-position
    - download.py:       GET /api/download, GET /download
    - health.py:         GET /health

Routes stay thin: path and body validation is declarative (FastAPI +
pydantic, with every id parameter typed as IdPath), persistence goes through the Storage dependency, and failures are
raised as SwordTrackerError subclasses for the global handlers in main.py.
"""

from typing import Annotated, Any, Dict

from fastapi import Path

# Route-level OpenAPI extension read by the RequestValidationError handler
INVALID_PAYLOAD_MESSAGE_KEY = "x-invalid-payload-message"

# Ids are 32-bit INTEGER columns; out-of-range values fail path validation
MAX_ID = 2**31 - 1
IdPath = Annotated[int, Path(ge=-MAX_ID - 1, le=MAX_ID)]


def invalid_payload(message: str) -> Dict[str, Any]:
    """`openapi_extra` for a route whose validation failures use `message`."""
    return {INVALID_PAYLOAD_MESSAGE_KEY: message}
