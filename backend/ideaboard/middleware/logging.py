"""
IdeaBoard Backend: Request Logging Middleware
===============================================

What:  One access log line per request on the `ideaboard.access` logger.

Log line:
    GET /ideas 200 12.3ms [a1b2c3d4] from 192.168.1.100

The same values are attached as `extra` fields (request_id, method, path,
status, duration_ms, client_ip) for handlers that emit structured records.
Request bodies are never logged.

Levels: 5xx → ERROR, 4xx → WARNING, everything else → INFO.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from ideaboard.middleware.request_id import request_id_var

logger = logging.getLogger("ideaboard.access")

# Probed every few seconds by orchestrators; not worth a log line each time
SKIPPED_PATHS = frozenset({"/health"})


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and duration of each request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in SKIPPED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        client_ip = request.client.host if request.client else "unknown"
        rid = request_id_var.get("")
        status = response.status_code

        logger.log(
            level_for_status(status),
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
        return response
