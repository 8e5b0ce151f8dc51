# Routes package init
"""
Zwanski API: Routes Package
============================

What:  HTTP route handlers. Each module groups related endpoints.

Route Inventory:
    - tools.py:     GET /api/quote, /api/passgen, /api/hash, /api/lorem
    - client.py:    GET /api/ip, /api/geo, /api/timezone, /api/fingerprint
    - analysis.py:  GET /api/score, /api/device
    - lookups.py:   GET /api/ping, /api/crypto   (outbound HTTP)
    - site.py:      GET /                        (HTML landing page)
    - params.py:    first-value query parameter dependency

    Anything else is answered by the 404 handler registered in main.py.

Design Principle:
    Routes stay THIN: read query/header values, call a service, return the
    schema. Required-parameter checks raise MissingParameterError; all error
    bodies are produced by the global exception handlers.
"""
