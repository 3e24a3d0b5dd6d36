"""
Sword Tracker Backend: Request Logging Middleware
=================================================

What:  One access-log line per HTTP request on the `sword_tracker.access`
       logger.
How:   Times the downstream call and logs method, path, status, duration,
       request id and client IP. The level follows the status class:
       5xx → ERROR, 4xx → WARNING, everything else → INFO.
When:  Inside RequestIDMiddleware, so the request id is already set.

Request and response bodies are never logged. GET /health is skipped because
probes call it every few seconds.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from sword_tracker.middleware.request_id import request_id_var

logger = logging.getLogger("sword_tracker.access")

UNLOGGED_PATHS = frozenset({"/health"})


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Structured access logging with request-id correlation."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in UNLOGGED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"
        method = request.method
        rid = request_id_var.get("")

        try:
            response = await call_next(request)
        except Exception:
            # The 500 is rendered outside this middleware; log it here
            self._log(method, path, 500, start_time, rid, client_ip)
            raise

        self._log(method, path, response.status_code, start_time, rid, client_ip)
        return response

    @staticmethod
    def _log(
        method: str, path: str, status: int, start_time: float, rid: str, client_ip: str
    ) -> None:
        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.log(
            level_for_status(status),
            "%s %s %d %.1fms [%s] from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
