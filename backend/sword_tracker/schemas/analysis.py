"""
Sword Tracker Backend: Position Analysis Schemas
================================================

What:  Request/response for POST /api/analyze-position.

`fen` is optional at the schema level so that a missing or empty position
produces the route's own "FEN position required" message rather than a
generic field error.
"""

from typing import List, Optional

from pydantic import Field

from sword_tracker.schemas.base import CamelModel

DEFAULT_DEPTH = 15


class AnalyzePositionRequest(CamelModel):
    fen: Optional[str] = Field(default=None, description="Board position in FEN")
    depth: int = Field(default=DEFAULT_DEPTH, ge=1, description="Requested search depth (plies)")


class PositionAnalysis(CamelModel):
    evaluation: float = Field(description="Score in pawns from White's point of view")
    best_move: str = Field(description="Best move in SAN")
    principal_variation: List[str] = Field(description="Expected continuation in SAN")
    depth: int = Field(description="Depth the evaluation was computed at")
