"""
Sword Tracker Backend: User Route Handlers
==========================================

What:  Handles GET/PATCH /api/user/{id} and POST /api/user.
Who:   Called by the frontend profile and dashboard pages.
"""

import logging

from fastapi import APIRouter, Depends

from sword_tracker.exceptions import NotFoundError
from sword_tracker.routes import IdPath, invalid_payload
from sword_tracker.schemas.common import ErrorResponse
from sword_tracker.schemas.user import UserCreate, UserResponse, UserUpdate
from sword_tracker.storage import Storage, get_storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Users"])


@router.get(
    "/user/{user_id}",
    response_model=UserResponse,
    responses={
        400: {"description": "Non-numeric id", "model": ErrorResponse},
        404: {"description": "User not found", "model": ErrorResponse},
    },
    summary="Get a user by id",
)
async def get_user(user_id: IdPath, storage: Storage = Depends(get_storage)) -> UserResponse:
    user = await storage.get_user(user_id)
    if user is None:
        raise NotFoundError(resource="User", resource_id=user_id)
    return user


@router.post(
    "/user",
    response_model=UserResponse,
    responses={400: {"description": "Invalid user data", "model": ErrorResponse}},
    summary="Create a user",
    openapi_extra=invalid_payload("Invalid user data"),
)
async def create_user(payload: UserCreate, storage: Storage = Depends(get_storage)) -> UserResponse:
    user = await storage.create_user(payload)
    logger.info("Created user %d (%s)", user.id, user.username)
    return user


@router.patch(
    "/user/{user_id}",
    response_model=UserResponse,
    responses={
        400: {"description": "Invalid user update", "model": ErrorResponse},
        404: {"description": "User not found", "model": ErrorResponse},
    },
    summary="Update selected fields of a user",
    openapi_extra=invalid_payload("Invalid user update"),
)
async def update_user(
    user_id: IdPath,
    updates: UserUpdate,
    storage: Storage = Depends(get_storage),
) -> UserResponse:
    """
    Partial update. Only the keys present in the body are written; unknown
    keys and nulls for required columns are rejected with 400 before storage
    is called.
    """
    user = await storage.update_user(user_id, updates)
    if user is None:
        raise NotFoundError(resource="User", resource_id=user_id)
    return user
