"""
Sword Tracker Backend: Request ID Middleware
============================================

What:  Gives every request a short correlation id and returns it in the
       X-Request-ID response header.
How:   Uses the client's X-Request-ID when it is printable (cut to
       MAX_REQUEST_ID_LENGTH), otherwise the first eight characters of a
       UUID4. The id is stored in a ContextVar for loggers and exception
       handlers, and in request.state for route handlers.
Who:   Applied to every request; runs before the logging middleware.
"""

import uuid
from contextvars import ContextVar
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"
MAX_REQUEST_ID_LENGTH = 64

# Coroutine-local: concurrent requests on one event loop each see their own id
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def client_request_id(value: Optional[str]) -> Optional[str]:
    """The client-supplied id, or None when it is absent or has control characters."""
    if not value or not value.isprintable():
        return None
    return value[:MAX_REQUEST_ID_LENGTH]


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assigns, propagates and echoes the request correlation id."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = client_request_id(request.headers.get(REQUEST_ID_HEADER)) or str(uuid.uuid4())[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        return response
