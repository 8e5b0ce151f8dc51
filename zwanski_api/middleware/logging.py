"""
Zwanski API: Request Logging Middleware
========================================

What:  One access-log line per request: method, path, status, duration,
       request id and client IP.
How:   Times the downstream call with time.perf_counter and picks the log
       level from the status class (5xx ERROR, 4xx WARNING, else INFO).
When:  Inside RequestIDMiddleware, so the request id is already set.

Privacy:
    Logged: method, path, status, duration, edge client IP, request id.
    Not logged: query strings (they carry user text for /api/hash) or headers.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from zwanski_api.middleware.request_id import request_id_var
from zwanski_api.services.client_info import CLIENT_IP_HEADER

logger = logging.getLogger("zwanski.access")


def _client_ip(request: Request) -> str:
    # Behind Cloudflare the socket peer is the edge, not the visitor
    edge_ip = request.headers.get(CLIENT_IP_HEADER)
    if edge_ip:
        return edge_ip
    return getattr(request.client, "host", "unknown") if request.client else "unknown"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs structured information about each HTTP request and response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()

        client_ip = _client_ip(request)
        method = request.method
        path = request.url.path
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
