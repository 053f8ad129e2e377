"""
Todo API — Request Logging Middleware
=======================================

What:  One access-log line per HTTP request.
How:   Times the rest of the stack and logs method, path, status, duration,
       request ID and client address. A request whose handler raised an
       unhandled exception is logged as 500 before the exception continues
       to the catch-all handler.

Log line:
    GET /todos/1 404 3.2ms [1a2b3c4d] from 127.0.0.1

Level by status: 5xx → ERROR, 4xx → WARNING, otherwise INFO.
Request bodies are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from todo_api.middleware.request_id import request_id_var

logger = logging.getLogger("todo_api.access")

# Polled every few seconds by orchestrators
_SILENT_PATHS = frozenset({"/health"})


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


def log_request(request: Request, status: int, started: float) -> None:
    rid = request_id_var.get("")
    client_ip = request.client.host if request.client else "unknown"
    duration_ms = (time.perf_counter() - started) * 1000
    logger.log(
        level_for_status(status),
        "%s %s %d %.1fms [%s] from %s",
        request.method,
        request.url.path,
        status,
        duration_ms,
        rid,
        client_ip,
        extra={
            "request_id": rid,
            "method": request.method,
            "path": request.url.path,
            "status": status,
            "duration_ms": round(duration_ms, 2),
            "client_ip": client_ip,
        },
    )


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Runs inside RequestIDMiddleware, so request_id_var is already set."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in _SILENT_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            log_request(request, 500, started)
            raise
        log_request(request, response.status_code, started)
        return response
