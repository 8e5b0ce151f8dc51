"""
Zwanski API: Generator Routes
==============================

What:  GET /api/quote, /api/passgen, /api/hash, /api/lorem.
How:   Hand the first value of each optional query parameter to the service
       as a raw string; parsing is permissive, so none of these routes returns 4xx.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from zwanski_api.routes.params import first_query_value
from zwanski_api.schemas.responses import (
    HashResponse,
    LoremResponse,
    PasswordResponse,
    QuoteResponse,
)
from zwanski_api.services.digest import hash_text
from zwanski_api.services.generators import (
    generate_password,
    lorem_text,
    parse_password_length,
    random_quote,
)

router = APIRouter(prefix="/api", tags=["Tools"])


@router.get("/quote", response_model=QuoteResponse, summary="Random motivational quote")
async def get_quote() -> QuoteResponse:
    return random_quote()


@router.get(
    "/passgen",
    response_model=PasswordResponse,
    summary="Generate a random password",
    description="Length is clamped into 8-128; absent or non-numeric values give 16.",
)
async def get_password(
    length: Optional[str] = Depends(first_query_value("length")),
) -> PasswordResponse:
    return generate_password(parse_password_length(length))


@router.get("/hash", response_model=HashResponse, summary="SHA-256 of a text")
async def get_hash(
    text: Optional[str] = Depends(first_query_value("text")),
) -> HashResponse:
    return hash_text(text)


@router.get("/lorem", response_model=LoremResponse, summary="Lorem ipsum placeholder text")
async def get_lorem(
    size: Optional[str] = Depends(first_query_value("size")),
) -> LoremResponse:
    return lorem_text(size)
