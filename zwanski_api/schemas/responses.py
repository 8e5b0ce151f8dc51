"""
Zwanski API: Pydantic Response Schemas
=======================================

What:  Pydantic models defining the JSON contract of every endpoint.
How:   Route handlers declare these as `response_model`; FastAPI serializes
       the returned model and (when docs are enabled) documents it.
Who:   Built by the services layer, returned by the routes layer.

Timestamps are plain strings: the services format them as ISO-8601 UTC with
millisecond precision and a trailing `Z`, and the contract is that exact text.
"""

from typing import List, Union

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Generators
# ══════════════════════════════════════════════════════════════════════════


class QuoteResponse(BaseModel):
    text: str = Field(description="Quote text")
    author: str = Field(description="Who said it")


class PasswordResponse(BaseModel):
    password: str = Field(description="Randomly generated password")
    length: int = Field(description="Length of the password (8-128)")


class HashResponse(BaseModel):
    input: str = Field(description="The text that was hashed")
    hash: str = Field(description="Lowercase hexadecimal digest")
    algorithm: str = Field(default="SHA-256", description="Digest algorithm name")


class LoremResponse(BaseModel):
    text: str = Field(description="Placeholder text")
    size: str = Field(description="Requested size (small, medium, large)")


# ══════════════════════════════════════════════════════════════════════════
# Request Reflection
# ══════════════════════════════════════════════════════════════════════════


class IPResponse(BaseModel):
    ip: str = Field(description="Client IP as reported by the edge, or 'unknown'")
    timestamp: str = Field(description="Response time (ISO 8601 UTC)")


class Coordinates(BaseModel):
    latitude: str
    longitude: str


class GeoResponse(BaseModel):
    """
    What:  Coarse client location taken from edge headers.
    Note:  Values are echoed verbatim (strings), never geocoded.
    """
    country: str
    city: str
    coordinates: Coordinates
    timestamp: str


class TimezoneResponse(BaseModel):
    utc_timestamp: str = Field(description="Current time (ISO 8601 UTC)")
    unix_timestamp: int = Field(description="Seconds since the Unix epoch")
    readable: str = Field(description="Server local wall-clock time")
    timezone_offset: int = Field(description="Server offset from UTC in minutes (east positive)")


class FingerprintResponse(BaseModel):
    user_agent: str
    country: str
    https: bool = True
    privacy_rating: str
    security_recommendations: List[str]
    timestamp: str


# ══════════════════════════════════════════════════════════════════════════
# Simulated Analysis
# ══════════════════════════════════════════════════════════════════════════


class ScoreResponse(BaseModel):
    """
    What:  Simulated website quality report for /api/score.
    Note:  Scores are random within fixed ranges; the target is never fetched.
    """
    domain: str = Field(description="Target exactly as supplied by the client")
    overall_score: int = Field(ge=70, le=99)
    seo_score: int = Field(ge=60, le=99)
    performance_score: int = Field(ge=65, le=99)
    security_score: int = Field(ge=70, le=99)
    mobile_friendly: bool
    https_enabled: bool = True
    cdn_detected: bool
    recommendations: List[str]
    analyzed_at: str


class DeviceResponse(BaseModel):
    model: str
    specs: str
    os: str
    maintenance: str
    carrier_support: str
    repair_difficulty: str
    lifecycle: str


# ══════════════════════════════════════════════════════════════════════════
# Upstream Lookups
# ══════════════════════════════════════════════════════════════════════════


class PingResponse(BaseModel):
    url: str = Field(description="Target host as supplied by the client")
    status: int = Field(description="HTTP status returned by the target")
    response_time_ms: int = Field(description="Round-trip time of the HEAD request")
    edge_location: str = Field(description="Edge data center code from CF-Ray, or 'unknown'")
    timestamp: str


class CryptoPriceResponse(BaseModel):
    symbol: str = Field(description="Requested symbol, uppercased")
    price: Union[int, float, str] = Field(description="USD price, or 'N/A' when unknown")
    currency: str = "USD"
    source: str = "CoinGecko (free API)"
    timestamp: str


# ══════════════════════════════════════════════════════════════════════════
# Error Response Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Shape of the 400 and 404 bodies.

    Examples:
        {"error": "url parameter required", "message": "Add ?url=<value> to the request, ..."}
        {"error": "Not found", "message": "Endpoint does not exist"}
    """
    error: str = Field(description="Short error label")
    message: str = Field(description="Human-readable description")


class UpstreamErrorResponse(BaseModel):
    """
    What:  Shape of the 503 body from /api/ping and /api/crypto.
    Note:  The target key is `url` for ping and `symbol` for crypto.
    """
    error: str = Field(description="Fixed failure label")
    message: str = Field(description="Underlying network or parse failure")
