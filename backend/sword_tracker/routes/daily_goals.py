"""
Sword Tracker Backend: Daily Goal Route Handlers
================================================

What:  CRUD for the per-day checklist shown on the dashboard.
    GET    /api/daily-goals/{userId}  → newest goal date first
    POST   /api/daily-goals
    PATCH  /api/daily-goals/{id}
    DELETE /api/daily-goals/{id}
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from sword_tracker.exceptions import NotFoundError
from sword_tracker.routes import IdPath, invalid_payload
from sword_tracker.schemas.common import ErrorResponse, SuccessResponse
from sword_tracker.schemas.daily_goal import DailyGoalCreate, DailyGoalResponse, DailyGoalUpdate
from sword_tracker.storage import Storage, get_storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Daily Goals"])


@router.get(
    "/daily-goals/{user_id}",
    response_model=List[DailyGoalResponse],
    summary="List a user's daily goals",
)
async def list_daily_goals(
    user_id: IdPath, storage: Storage = Depends(get_storage)
) -> List[DailyGoalResponse]:
    return await storage.get_daily_goals(user_id)


@router.post(
    "/daily-goals",
    response_model=DailyGoalResponse,
    responses={400: {"description": "Invalid goal data", "model": ErrorResponse}},
    summary="Create a daily goal",
    openapi_extra=invalid_payload("Invalid goal data"),
)
async def create_daily_goal(
    payload: DailyGoalCreate, storage: Storage = Depends(get_storage)
) -> DailyGoalResponse:
    return await storage.create_daily_goal(payload)


@router.patch(
    "/daily-goals/{goal_id}",
    response_model=DailyGoalResponse,
    responses={
        400: {"description": "Invalid goal update", "model": ErrorResponse},
        404: {"description": "Goal not found", "model": ErrorResponse},
    },
    summary="Update a daily goal",
    openapi_extra=invalid_payload("Invalid goal update"),
)
async def update_daily_goal(
    goal_id: IdPath,
    updates: DailyGoalUpdate,
    storage: Storage = Depends(get_storage),
) -> DailyGoalResponse:
    goal = await storage.update_daily_goal(goal_id, updates)
    if goal is None:
        raise NotFoundError(resource="Goal", resource_id=goal_id)
    return goal


@router.delete(
    "/daily-goals/{goal_id}",
    response_model=SuccessResponse,
    responses={404: {"description": "Goal not found", "model": ErrorResponse}},
    summary="Delete a daily goal",
)
async def delete_daily_goal(goal_id: IdPath, storage: Storage = Depends(get_storage)) -> SuccessResponse:
    if not await storage.delete_daily_goal(goal_id):
        raise NotFoundError(resource="Goal", resource_id=goal_id)
    return SuccessResponse()
