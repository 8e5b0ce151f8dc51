"""
Zwanski API: Analysis Routes
=============================

What:  GET /api/score (simulated site score) and GET /api/device (spec lookup).

/api/score requires `url`; a missing or empty value raises
MissingParameterError, rendered as 400 by the global handler.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from zwanski_api.exceptions import MissingParameterError
from zwanski_api.routes.params import first_query_value
from zwanski_api.schemas.responses import DeviceResponse, ErrorResponse, ScoreResponse
from zwanski_api.services.device_catalog import lookup_device
from zwanski_api.services.site_score import score_site

router = APIRouter(prefix="/api", tags=["Analysis"])


@router.get(
    "/score",
    response_model=ScoreResponse,
    responses={400: {"description": "url parameter missing", "model": ErrorResponse}},
    summary="Zwanski Score (simulated website quality report)",
)
async def get_score(
    url: Optional[str] = Depends(first_query_value("url")),
) -> ScoreResponse:
    if not url:
        raise MissingParameterError("url", example="example.com")
    return score_site(url)


@router.get("/device", response_model=DeviceResponse, summary="Device specs and support")
async def get_device(
    model: Optional[str] = Depends(first_query_value("model")),
) -> DeviceResponse:
    return lookup_device(model)
