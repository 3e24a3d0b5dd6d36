"""
Sword Tracker Backend: Position Analysis Route
==============================================

What:  POST /api/analyze-position, used by the analysis board.
How:   Rejects a missing or blank FEN, then delegates to the configured
       PositionAnalyzer (currently the mock, which returns a fixed line).
"""

import logging

from fastapi import APIRouter

from sword_tracker.exceptions import AnalysisError, SwordTrackerError, ValidationError
from sword_tracker.routes import invalid_payload
from sword_tracker.schemas.analysis import AnalyzePositionRequest, PositionAnalysis
from sword_tracker.schemas.common import ErrorResponse
from sword_tracker.services import position_analysis

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Analysis"])


@router.post(
    "/analyze-position",
    response_model=PositionAnalysis,
    responses={
        400: {"description": "FEN position required", "model": ErrorResponse},
        500: {"description": "Analysis error", "model": ErrorResponse},
    },
    summary="Evaluate a chess position",
    openapi_extra=invalid_payload("Invalid analysis request"),
)
async def analyze_position(request: AnalyzePositionRequest) -> PositionAnalysis:
    fen = (request.fen or "").strip()
    if not fen:
        raise ValidationError(message="FEN position required", field="fen")
    try:
        return await position_analysis.position_analyzer.analyze(fen, request.depth)
    except SwordTrackerError:
        raise
    except Exception as e:
        logger.exception("Position analysis failed for %r", fen)
        raise AnalysisError(context={"fen": fen, "error_type": type(e).__name__}) from e
