"""
Zwanski API: Custom Exception Hierarchy
========================================

What:  Application-specific exceptions for the two recoverable error kinds.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the correct status code.
Who:   Raised by route handlers and services; caught by global handlers.

Exception Hierarchy:
    ZwanskiError (base)
    ├── MissingParameterError   → 400 Bad Request (client can fix)
    └── UpstreamServiceError    → 503 Service Unavailable (third-party call failed)

Unmatched routes are not modelled here: the framework raises its own 404/405
and main.py turns both into the fixed "Not found" body.
"""

from typing import Any, Dict, Optional


class ZwanskiError(Exception):
    """
    Base exception for all Zwanski API errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, not returned to the client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class MissingParameterError(ZwanskiError):
    """
    Raised when a required query parameter is absent or empty.

    HTTP:    400 Bad Request

    Example response:
        {
            "error": "url parameter required",
            "message": "Add ?url=<host> to the request, e.g. ?url=example.com"
        }
    """

    def __init__(
        self,
        parameter: str,
        example: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.parameter = parameter
        self.error = f"{parameter} parameter required"
        message = f"Add ?{parameter}=<value> to the request"
        if example:
            message = f"Add ?{parameter}=<value> to the request, e.g. ?{parameter}={example}"
        ctx = context or {}
        ctx["parameter"] = parameter
        super().__init__(message=message, context=ctx)


class UpstreamServiceError(ZwanskiError):
    """
    Raised when the single outbound call of a handler fails.

    What:    DNS failure, refused connection, timeout, malformed target or an
             unparseable upstream body.
    HTTP:    503 Service Unavailable

    The response echoes the caller's target under `target_field` so the
    client can tell which lookup failed:
        {"url": "example.invalid", "error": "Could not reach URL", "message": "..."}

    Attributes:
        target_field: Response key for the target ("url", "symbol")
        target:       The value the client asked for
        label:        Fixed, human-readable error label
        detail:       The underlying failure message (never empty)
    """

    def __init__(
        self,
        target_field: str,
        target: str,
        label: str,
        detail: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.target_field = target_field
        self.target = target
        self.label = label
        self.detail = detail
        ctx = context or {}
        ctx[target_field] = target
        super().__init__(message=f"{label}: {detail}", context=ctx)

    @classmethod
    def from_exception(
        cls, target_field: str, target: str, label: str, exc: BaseException
    ) -> "UpstreamServiceError":
        """Wrap a client/parse exception, falling back to its class name for empty text."""
        detail = str(exc) or exc.__class__.__name__
        return cls(
            target_field=target_field,
            target=target,
            label=label,
            detail=detail,
            context={"exception": exc.__class__.__name__},
        )

    def to_body(self) -> Dict[str, Any]:
        return {self.target_field: self.target, "error": self.label, "message": self.detail}
