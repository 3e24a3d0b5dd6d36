"""Course progress tracking: /api/courses."""

import logging
from typing import List

from fastapi import APIRouter, Depends

from sword_tracker.exceptions import NotFoundError
from sword_tracker.routes import IdPath, invalid_payload
from sword_tracker.schemas.common import ErrorResponse, SuccessResponse
from sword_tracker.schemas.course import CourseCreate, CourseResponse, CourseUpdate
from sword_tracker.storage import Storage, get_storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Courses"])


@router.get(
    "/courses/{user_id}",
    response_model=List[CourseResponse],
    summary="List a user's courses, newest first",
)
async def list_courses(user_id: IdPath, storage: Storage = Depends(get_storage)) -> List[CourseResponse]:
    return await storage.get_courses(user_id)


@router.post(
    "/courses",
    response_model=CourseResponse,
    responses={400: {"description": "Invalid course data", "model": ErrorResponse}},
    summary="Add a course",
    openapi_extra=invalid_payload("Invalid course data"),
)
async def create_course(payload: CourseCreate, storage: Storage = Depends(get_storage)) -> CourseResponse:
    return await storage.create_course(payload)


@router.patch(
    "/courses/{course_id}",
    response_model=CourseResponse,
    responses={
        400: {"description": "Invalid course update", "model": ErrorResponse},
        404: {"description": "Course not found", "model": ErrorResponse},
    },
    summary="Update course progress or details",
    openapi_extra=invalid_payload("Invalid course update"),
)
async def update_course(
    course_id: IdPath,
    updates: CourseUpdate,
    storage: Storage = Depends(get_storage),
) -> CourseResponse:
    course = await storage.update_course(course_id, updates)
    if course is None:
        raise NotFoundError(resource="Course", resource_id=course_id)
    return course


@router.delete(
    "/courses/{course_id}",
    response_model=SuccessResponse,
    responses={404: {"description": "Course not found", "model": ErrorResponse}},
    summary="Delete a course",
)
async def delete_course(course_id: IdPath, storage: Storage = Depends(get_storage)) -> SuccessResponse:
    if not await storage.delete_course(course_id):
        raise NotFoundError(resource="Course", resource_id=course_id)
    return SuccessResponse()
