"""
Zwanski API: Client Reflection Routes
======================================

What:  GET /api/ip, /api/geo, /api/timezone, /api/fingerprint.
How:   Pass the inbound headers to the client_info service; the timezone
       route reads the server clock instead.
"""

from fastapi import APIRouter, Request

from zwanski_api.schemas.responses import (
    FingerprintResponse,
    GeoResponse,
    IPResponse,
    TimezoneResponse,
)
from zwanski_api.services.client_info import browser_fingerprint, client_ip, geolocation
from zwanski_api.services.clock import clock_snapshot

router = APIRouter(prefix="/api", tags=["Client"])


@router.get("/ip", response_model=IPResponse, summary="Your public IP address")
async def get_ip(request: Request) -> IPResponse:
    return client_ip(request.headers)


@router.get("/geo", response_model=GeoResponse, summary="Your approximate location")
async def get_geo(request: Request) -> GeoResponse:
    return geolocation(request.headers)


@router.get("/timezone", response_model=TimezoneResponse, summary="Server time and UTC offset")
async def get_timezone() -> TimezoneResponse:
    return clock_snapshot()


@router.get(
    "/fingerprint",
    response_model=FingerprintResponse,
    summary="What your browser reveals",
)
async def get_fingerprint(request: Request) -> FingerprintResponse:
    return browser_fingerprint(request.headers)
