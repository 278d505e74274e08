"""
MangoNote Backend - Request Logging Middleware
================================================

What:  One access log record per HTTP request.
How:   Times the request, then logs method, path, status, duration, request id
       and client IP on the `mangonote.access` logger.
Who:   Applied to every request via Starlette middleware.
When:  Inside RequestIDMiddleware (uses the request id for correlation).

Level by status class:
    5xx -> ERROR, 4xx -> WARNING, everything else -> INFO

Not logged: request bodies (mind map updates may carry user content) and headers.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.middleware.request_id import request_id_var

logger = logging.getLogger("mangonote.access")

# Probed every few seconds by orchestrators; logging them buries real traffic
QUIET_PATHS = {"/health"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs structured information about each HTTP request and response.

    Typical durations:
        - GET /health: 1-5ms
        - GET /api/notes/{id}: 5-30ms (single primary-key lookup)
        - GET /api/mindmaps/note/{note_id}: 5-50ms (JSON columns dominate)
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in QUIET_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"
        method = request.method
        rid = request_id_var.get("")

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
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

        return response
