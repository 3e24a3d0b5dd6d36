"""
Sword Tracker Backend: Health Check Route
=========================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Probes the database with SELECT 1 when it is the active storage
       backend and returns the aggregate status.
Who:   Called by Docker health checks, load balancers and monitoring systems.

Status levels:
    - healthy:   storage reachable (HTTP 200)
    - unhealthy: database backend selected but unreachable (HTTP 503)

The memory backend has no external dependency and always reports healthy
with database="not_used".
"""

import logging
import time

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text

from sword_tracker import __version__
from sword_tracker import database
from sword_tracker.config import settings
from sword_tracker.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Module load time, used for uptime reporting
_start_time = time.time()


async def check_database() -> str:
    """"connected" if SELECT 1 succeeds, "disconnected" otherwise."""
    try:
        async with database.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        logger.warning("Health check: database unreachable: %s", str(e))
        return "disconnected"
    return "connected"


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Storage unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check():
    if settings.storage_backend == "database":
        db_status = await check_database()
    else:
        db_status = "not_used"

    overall = "unhealthy" if db_status == "disconnected" else "healthy"
    body = HealthResponse(
        status=overall,
        version=__version__,
        storage=settings.storage_backend,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
    return JSONResponse(
        status_code=503 if overall == "unhealthy" else 200,
        content=body.model_dump(by_alias=True),
    )
