"""
Sword Tracker Backend: Game Analysis Route Handlers
===================================================

What:  Saved game reviews.
    GET  /api/game-analyses/{userId}      → newest first
    POST /api/game-analyses
    GET  /api/game-analyses/single/{id}   → one analysis
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from sword_tracker.exceptions import NotFoundError
from sword_tracker.routes import IdPath, invalid_payload
from sword_tracker.schemas.common import ErrorResponse
from sword_tracker.schemas.game_analysis import GameAnalysisCreate, GameAnalysisResponse
from sword_tracker.storage import Storage, get_storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Game Analyses"])


@router.get(
    "/game-analyses/single/{analysis_id}",
    response_model=GameAnalysisResponse,
    responses={404: {"description": "Analysis not found", "model": ErrorResponse}},
    summary="Get one game analysis",
)
async def get_game_analysis(
    analysis_id: IdPath, storage: Storage = Depends(get_storage)
) -> GameAnalysisResponse:
    analysis = await storage.get_game_analysis(analysis_id)
    if analysis is None:
        raise NotFoundError(resource="Analysis", resource_id=analysis_id)
    return analysis


@router.get(
    "/game-analyses/{user_id}",
    response_model=List[GameAnalysisResponse],
    summary="List a user's game analyses",
)
async def list_game_analyses(
    user_id: IdPath, storage: Storage = Depends(get_storage)
) -> List[GameAnalysisResponse]:
    return await storage.get_game_analyses(user_id)


@router.post(
    "/game-analyses",
    response_model=GameAnalysisResponse,
    responses={400: {"description": "Invalid analysis data", "model": ErrorResponse}},
    summary="Save a game analysis",
    openapi_extra=invalid_payload("Invalid analysis data"),
)
async def create_game_analysis(
    payload: GameAnalysisCreate, storage: Storage = Depends(get_storage)
) -> GameAnalysisResponse:
    analysis = await storage.create_game_analysis(payload)
    logger.info("Saved game analysis %d for user %d", analysis.id, analysis.user_id)
    return analysis
