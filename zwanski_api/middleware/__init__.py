# Middleware package init
"""
Zwanski API: Middleware Package
================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [Security Headers] → [GZip] → Route Handler

    1. Request ID first: every later layer can read request_id_var
    2. Logging: measures the full downstream duration, final status included
    3. Security headers: stamps CORS/security headers on every response,
       including the 400/404/503 bodies built by exception handlers

    The order is reversed for responses, so headers are already set when the
    access log line is written.
"""
