"""
Zwanski API: Client Reflection
===============================

What:  Echo request metadata supplied by the edge network back to the caller.
How:   Reads a fixed set of Cloudflare headers from the inbound request.
       Absent or empty headers become the literal string "unknown".
Who:   Called by /api/ip, /api/geo and /api/fingerprint.

Header Inventory:
    CF-Connecting-IP   → client IP
    CF-IPCountry       → ISO country code
    CF-Metro-Code      → metro / city code
    CF-IPLatitude      → latitude
    CF-IPLongitude     → longitude
    User-Agent         → browser user agent
    CF-Ray             → request trace id, `<hex>-<EDGE>` (used by /api/ping)

Nothing is looked up or geocoded: when the service runs outside Cloudflare
every value simply reads "unknown".
"""

from typing import Mapping, Optional, Tuple

from zwanski_api.schemas.responses import (
    Coordinates,
    FingerprintResponse,
    GeoResponse,
    IPResponse,
)
from zwanski_api.services.clock import utc_timestamp

UNKNOWN = "unknown"

CLIENT_IP_HEADER = "CF-Connecting-IP"
COUNTRY_HEADER = "CF-IPCountry"
CITY_HEADER = "CF-Metro-Code"
LATITUDE_HEADER = "CF-IPLatitude"
LONGITUDE_HEADER = "CF-IPLongitude"
USER_AGENT_HEADER = "User-Agent"
RAY_HEADER = "CF-Ray"

SECURITY_RECOMMENDATIONS: Tuple[str, ...] = (
    "Use HTTPS everywhere",
    "Enable browser security features",
    "Update your browser regularly",
    "Use a VPN for additional privacy",
)


def header_or_unknown(headers: Mapping[str, str], name: str) -> str:
    """
    Read a header, returning "unknown" when it is absent or empty.

    `headers` is normally Starlette's case-insensitive `Headers`; plain dicts
    work too as long as the key casing matches.
    """
    return headers.get(name) or UNKNOWN


def edge_location(ray_id: Optional[str]) -> str:
    """
    Extract the edge data center from a CF-Ray value.

    "8f1a2b3c4d5e6f70-LHR" → "LHR". Anything without a non-empty second
    segment → "unknown".
    """
    if not ray_id:
        return UNKNOWN
    parts = ray_id.split("-")
    if len(parts) < 2 or not parts[1]:
        return UNKNOWN
    return parts[1]


def client_ip(headers: Mapping[str, str]) -> IPResponse:
    return IPResponse(ip=header_or_unknown(headers, CLIENT_IP_HEADER), timestamp=utc_timestamp())


def geolocation(headers: Mapping[str, str]) -> GeoResponse:
    return GeoResponse(
        country=header_or_unknown(headers, COUNTRY_HEADER),
        city=header_or_unknown(headers, CITY_HEADER),
        coordinates=Coordinates(
            latitude=header_or_unknown(headers, LATITUDE_HEADER),
            longitude=header_or_unknown(headers, LONGITUDE_HEADER),
        ),
        timestamp=utc_timestamp(),
    )


def browser_fingerprint(headers: Mapping[str, str]) -> FingerprintResponse:
    """
    Summarize what the request reveals about the browser.

    The privacy rating and recommendations are fixed; no real fingerprinting
    takes place.
    """
    return FingerprintResponse(
        user_agent=header_or_unknown(headers, USER_AGENT_HEADER),
        country=header_or_unknown(headers, COUNTRY_HEADER),
        https=True,
        privacy_rating="good",
        security_recommendations=list(SECURITY_RECOMMENDATIONS),
        timestamp=utc_timestamp(),
    )
