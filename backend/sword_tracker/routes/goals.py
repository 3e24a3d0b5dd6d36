"""
Sword Tracker Backend: Goal Route Handlers
==========================================

What:  Longer-horizon goals (weekly, monthly, yearly, or any other tag).
    GET    /api/goals/{userId}?type=weekly
    POST   /api/goals
    PATCH  /api/goals/{id}
    DELETE /api/goals/{id}

Filtering:
    `type` is passed to storage exactly as received. Omitting it returns
    every goal of the user; an unknown tag simply matches nothing.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from sword_tracker.exceptions import NotFoundError
from sword_tracker.routes import IdPath, invalid_payload
from sword_tracker.schemas.common import ErrorResponse, SuccessResponse
from sword_tracker.schemas.goal import GoalCreate, GoalResponse, GoalUpdate
from sword_tracker.storage import Storage, get_storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Goals"])


@router.get(
    "/goals/{user_id}",
    response_model=List[GoalResponse],
    summary="List a user's goals, optionally by type",
)
async def list_goals(
    user_id: IdPath,
    goal_type: Optional[str] = Query(
        default=None,
        alias="type",
        description="Only goals with exactly this type tag",
    ),
    storage: Storage = Depends(get_storage),
) -> List[GoalResponse]:
    return await storage.get_goals(user_id, goal_type)


@router.post(
    "/goals",
    response_model=GoalResponse,
    responses={400: {"description": "Invalid goal data", "model": ErrorResponse}},
    summary="Create a goal",
    openapi_extra=invalid_payload("Invalid goal data"),
)
async def create_goal(payload: GoalCreate, storage: Storage = Depends(get_storage)) -> GoalResponse:
    return await storage.create_goal(payload)


@router.patch(
    "/goals/{goal_id}",
    response_model=GoalResponse,
    responses={
        400: {"description": "Invalid goal update", "model": ErrorResponse},
        404: {"description": "Goal not found", "model": ErrorResponse},
    },
    summary="Update a goal",
    openapi_extra=invalid_payload("Invalid goal update"),
)
async def update_goal(
    goal_id: IdPath,
    updates: GoalUpdate,
    storage: Storage = Depends(get_storage),
) -> GoalResponse:
    goal = await storage.update_goal(goal_id, updates)
    if goal is None:
        raise NotFoundError(resource="Goal", resource_id=goal_id)
    return goal


@router.delete(
    "/goals/{goal_id}",
    response_model=SuccessResponse,
    responses={404: {"description": "Goal not found", "model": ErrorResponse}},
    summary="Delete a goal",
)
async def delete_goal(goal_id: IdPath, storage: Storage = Depends(get_storage)) -> SuccessResponse:
    if not await storage.delete_goal(goal_id):
        raise NotFoundError(resource="Goal", resource_id=goal_id)
    return SuccessResponse()
