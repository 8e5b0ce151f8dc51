# Services package init
"""
Zwanski API: Services Layer
============================

What:  Domain logic sitting behind the routes.
How:   Plain functions returning response schemas; the one stateful-looking
       piece (UpstreamService) only holds configuration.

Service Inventory:
    - generators:     quote picker, password generator, lorem sizes
    - digest:         SHA-256 of text
    - clock:          ISO-8601 timestamps and the server clock snapshot
    - client_info:    edge header reflection (IP, geo, fingerprint, CF-Ray)
    - site_score:     simulated website score
    - device_catalog: static device spec lookup
    - upstream:       outbound ping and crypto price lookup (httpx)
    - landing_page:   HTML rendered at `/`
"""
