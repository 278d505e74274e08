"""
MangoNote Backend - Request ID Middleware
===========================================

What:  Assigns a correlation id to each request and echoes it in the response.
How:   Reads X-Request-ID from the client or generates a short UUID, stores it
       in a ContextVar for loggers and in request.state for handlers.
Who:   Applied to every request via Starlette middleware.

Every log line written while handling a request (access log, ErrorHandler
records) carries the same id, so a failing envelope can be traced back to
its log entries.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own id
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that assigns a unique ID to each request for tracing.

    Behavior:
        1. Use the client's X-Request-ID header if present
        2. Otherwise generate an 8-character id
        3. Store in ContextVar and request.state
        4. Add to response headers
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]

        token = request_id_var.set(rid)
        request.state.request_id = rid
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers["X-Request-ID"] = rid
        return response
