"""
Sword Tracker Backend: ELO Route Handlers
=========================================

What:  Rating history and period statistics.
    GET  /api/elo/{userId}                 → all entries, oldest first
    POST /api/elo                          → record a rating
    GET  /api/elo-stats/{userId}/{period}  → summary over week, month or year

`period` is a plain string path segment checked against ELO_PERIODS here, so
an unknown period is answered with 400 without touching storage.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from sword_tracker.exceptions import ValidationError
from sword_tracker.routes import IdPath, invalid_payload
from sword_tracker.schemas.common import ErrorResponse
from sword_tracker.schemas.elo import EloEntryCreate, EloEntryResponse, EloStatsResponse
from sword_tracker.services.elo_stats import is_valid_period
from sword_tracker.storage import Storage, get_storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["ELO"])


@router.get(
    "/elo/{user_id}",
    response_model=List[EloEntryResponse],
    summary="List a user's rating history",
)
async def list_elo_entries(
    user_id: IdPath, storage: Storage = Depends(get_storage)
) -> List[EloEntryResponse]:
    return await storage.get_elo_entries(user_id)


@router.post(
    "/elo",
    response_model=EloEntryResponse,
    responses={400: {"description": "Invalid ELO entry data", "model": ErrorResponse}},
    summary="Record a rating",
    openapi_extra=invalid_payload("Invalid ELO entry data"),
)
async def create_elo_entry(
    payload: EloEntryCreate, storage: Storage = Depends(get_storage)
) -> EloEntryResponse:
    entry = await storage.create_elo_entry(payload)
    logger.info("Recorded rating %d for user %d", entry.rating, entry.user_id)
    return entry


@router.get(
    "/elo-stats/{user_id}/{period}",
    response_model=EloStatsResponse,
    responses={400: {"description": "Invalid period", "model": ErrorResponse}},
    summary="Rating statistics for a period",
    description="`period` is one of week (7 days), month (30 days) or year (365 days).",
)
async def get_elo_stats(
    user_id: IdPath,
    period: str,
    storage: Storage = Depends(get_storage),
) -> EloStatsResponse:
    if not is_valid_period(period):
        raise ValidationError(message="Invalid period", field="period", context={"period": period})
    return await storage.get_elo_stats(user_id, period)
