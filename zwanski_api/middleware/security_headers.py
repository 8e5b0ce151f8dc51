"""
Zwanski API: CORS and Security Headers Middleware
==================================================

What:  Stamps the same five headers on every response the app produces.
How:   Overwrites the headers after the downstream handler (or exception
       handler) has built its response, whatever its status.

Header Set:
    Access-Control-Allow-Origin:   *
    Access-Control-Allow-Methods:  GET, POST, OPTIONS
    Access-Control-Allow-Headers:  Content-Type
    X-Content-Type-Options:        nosniff
    X-Frame-Options:               DENY

Starlette's CORSMiddleware is not used: it only answers requests that carry an
Origin header and never adds the allow-methods/allow-headers pair outside a
preflight, while this API sends the full set unconditionally.
"""

from types import MappingProxyType
from typing import Mapping

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

SECURITY_HEADERS: Mapping[str, str] = MappingProxyType({
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
})


def apply_security_headers(response: Response) -> Response:
    """Set (or overwrite) the CORS/security header set on `response`."""
    for name, value in SECURITY_HEADERS.items():
        response.headers[name] = value
    return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        return apply_security_headers(response)
