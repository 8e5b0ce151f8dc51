"""
Zwanski API: Upstream Lookup Routes
====================================

What:  GET /api/ping (uptime check) and GET /api/crypto (price lookup).
How:   Delegate to UpstreamService, injected with Depends so tests can swap it.

Error responses (handled by global exception handlers):
    HTTP 400: /api/ping without `url` (MissingParameterError)
    HTTP 503: the outbound call failed (UpstreamServiceError)
"""

from typing import Optional

from fastapi import APIRouter, Depends, Request

from zwanski_api.exceptions import MissingParameterError
from zwanski_api.routes.params import first_query_value
from zwanski_api.schemas.responses import (
    CryptoPriceResponse,
    ErrorResponse,
    PingResponse,
    UpstreamErrorResponse,
)
from zwanski_api.services.client_info import RAY_HEADER
from zwanski_api.services.upstream import UpstreamService, get_upstream_service

router = APIRouter(prefix="/api", tags=["Lookups"])


@router.get(
    "/ping",
    response_model=PingResponse,
    responses={
        400: {"description": "url parameter missing", "model": ErrorResponse},
        503: {"description": "Target unreachable", "model": UpstreamErrorResponse},
    },
    summary="Check uptime and response time of a host",
)
async def get_ping(
    request: Request,
    url: Optional[str] = Depends(first_query_value("url")),
    upstream: UpstreamService = Depends(get_upstream_service),
) -> PingResponse:
    if not url:
        raise MissingParameterError("url", example="example.com")
    return await upstream.ping(url, ray_id=request.headers.get(RAY_HEADER))


@router.get(
    "/crypto",
    response_model=CryptoPriceResponse,
    responses={503: {"description": "Price API unreachable", "model": UpstreamErrorResponse}},
    summary="Cryptocurrency price in USD",
)
async def get_crypto(
    symbol: Optional[str] = Depends(first_query_value("symbol")),
    upstream: UpstreamService = Depends(get_upstream_service),
) -> CryptoPriceResponse:
    return await upstream.crypto_price(symbol)
