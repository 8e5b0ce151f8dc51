"""
Zwanski API: Application Package Initializer
=============================================

What: Marks `zwanski_api` as a Python package and carries the service version.
Who:  Imported by uvicorn (`zwanski_api.main:app`), pytest, and the app factory.

Architecture Note:
    ┌─────────────────────────────────────┐
    │  Middleware (request id, access     │  ← cross-cutting, every request
    │  log, CORS + security headers)      │
    ├─────────────────────────────────────┤
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Domain Logic)     │  ← generators, digest, upstream calls
    ├─────────────────────────────────────┤
    │         Schemas (API Contract)      │  ← Pydantic response models
    └─────────────────────────────────────┘

    There is no persistence layer: every handler is stateless and every
    response is computed (or fetched) per request.
"""

__version__ = "1.0.0"
