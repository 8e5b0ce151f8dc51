"""
Zwanski API: Request ID Middleware
===================================

What:  Assigns an id to each request and returns it in `X-Request-ID`.
How:   Reuses a client-provided `X-Request-ID` or generates a short UUID,
       stores it in a ContextVar for log correlation and on request.state.
When:  Outermost middleware, so every other layer sees the id.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# Coroutine-local: concurrent requests in one event loop each see their own id
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Behavior:
        1. Use the inbound X-Request-ID header when present
        2. Otherwise generate the first 8 characters of a UUID4
        3. Store in request_id_var and request.state.request_id
        4. Echo in the response X-Request-ID header
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
