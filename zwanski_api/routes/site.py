"""
Zwanski API: Landing Page Route
================================

What:  GET / serves the HTML overview with the interactive playground.
"""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from zwanski_api.services.landing_page import index_page

router = APIRouter(tags=["Site"])


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def get_index() -> HTMLResponse:
    return HTMLResponse(content=index_page(), status_code=200)
