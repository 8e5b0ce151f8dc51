"""
Zwanski API: Upstream Service (Outbound HTTP)
==============================================

What:  The only two handlers that leave the process: the uptime ping and the
       crypto price lookup.
How:   One httpx.AsyncClient per call, one request per call, no retries.
       Any client or decoding failure is wrapped in UpstreamServiceError,
       which the global handler renders as a 503.
Who:   Injected into the /api/ping and /api/crypto routes via
       `Depends(get_upstream_service)`; tests override the dependency.
When:  Once per request to those two endpoints.

Failure Handling:
    httpx.HTTPError      → DNS failure, refused connection, timeout, TLS, protocol
    httpx.InvalidURL     → the client supplied something that is not a host
    ValueError           → host fails IDNA encoding (ping), body is not JSON (crypto)

    Each becomes a single terminal 503 for the current request; nothing is
    retried and the next request starts fresh.
"""

import logging
import time
from typing import Any, Optional

import httpx

from zwanski_api.config import settings
from zwanski_api.exceptions import UpstreamServiceError
from zwanski_api.schemas.responses import CryptoPriceResponse, PingResponse
from zwanski_api.services.client_info import edge_location
from zwanski_api.services.clock import utc_timestamp

logger = logging.getLogger(__name__)

DEFAULT_SYMBOL = "BTC"
PRICE_CURRENCY = "USD"
PRICE_SOURCE = "CoinGecko (free API)"
PRICE_UNAVAILABLE = "N/A"

PING_ERROR_LABEL = "Could not reach URL"
CRYPTO_ERROR_LABEL = "Could not fetch price"


class UpstreamService:
    """
    Thin wrapper around httpx for the two outbound lookups.

    Attributes:
        timeout:          Client timeout in seconds (settings.upstream_timeout)
        ping_scheme:      Scheme prepended to ping targets ("https")
        crypto_price_url: CoinGecko simple-price endpoint
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        ping_scheme: Optional[str] = None,
        crypto_price_url: Optional[str] = None,
    ):
        self.timeout = settings.upstream_timeout if timeout is None else timeout
        self.ping_scheme = ping_scheme or settings.ping_scheme
        self.crypto_price_url = crypto_price_url or settings.crypto_price_url

    def _client(self) -> httpx.AsyncClient:
        # follow_redirects: the reported status is the one the final page answers with
        return httpx.AsyncClient(timeout=self.timeout, follow_redirects=True)

    async def ping(self, target: str, ray_id: Optional[str] = None) -> PingResponse:
        """
        Send one HEAD request to `<scheme>://<target>` and time it.

        Args:
            target: Host (optionally with path) exactly as the client sent it
            ray_id: Inbound CF-Ray header, used only for `edge_location`

        Raises:
            UpstreamServiceError: The target could not be reached.
        """
        url = f"{self.ping_scheme}://{target}"
        try:
            async with self._client() as client:
                start_time = time.perf_counter()
                response = await client.head(url)
                elapsed_ms = int((time.perf_counter() - start_time) * 1000)
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
            logger.warning("Ping to %s failed: %s: %s", url, exc.__class__.__name__, exc)
            raise UpstreamServiceError.from_exception(
                target_field="url", target=target, label=PING_ERROR_LABEL, exc=exc
            ) from exc

        logger.debug("Ping %s → %d in %dms", url, response.status_code, elapsed_ms)
        return PingResponse(
            url=target,
            status=response.status_code,
            response_time_ms=elapsed_ms,
            edge_location=edge_location(ray_id),
            timestamp=utc_timestamp(),
        )

    async def crypto_price(self, symbol: Optional[str] = None) -> CryptoPriceResponse:
        """
        Look up the USD price of `symbol` (default BTC).

        The symbol is reported uppercased and sent upstream lowercased as the
        CoinGecko `ids` parameter. A response without a price for that id is
        not an error: the price reads "N/A".

        Raises:
            UpstreamServiceError: Network failure or a non-JSON response body.
        """
        display_symbol = (symbol or DEFAULT_SYMBOL).upper()
        coin_id = display_symbol.lower()
        params = {"ids": coin_id, "vs_currencies": "usd"}

        try:
            async with self._client() as client:
                response = await client.get(self.crypto_price_url, params=params)
                data = response.json()
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
            logger.warning(
                "Price lookup for %s failed: %s: %s", coin_id, exc.__class__.__name__, exc
            )
            raise UpstreamServiceError.from_exception(
                target_field="symbol", target=display_symbol, label=CRYPTO_ERROR_LABEL, exc=exc
            ) from exc

        price = extract_usd_price(data, coin_id)
        logger.debug("Price lookup %s → %s (upstream %d)", coin_id, price, response.status_code)
        return CryptoPriceResponse(
            symbol=display_symbol,
            price=price,
            currency=PRICE_CURRENCY,
            source=PRICE_SOURCE,
            timestamp=utc_timestamp(),
        )


def extract_usd_price(data: Any, coin_id: str) -> Any:
    """
    Pull `data[coin_id]["usd"]` out of a simple-price payload.

    Missing keys, unexpected shapes and falsy prices all read "N/A".
    """
    if not isinstance(data, dict):
        return PRICE_UNAVAILABLE
    entry = data.get(coin_id)
    if not isinstance(entry, dict):
        return PRICE_UNAVAILABLE
    price = entry.get("usd")
    if isinstance(price, bool) or not isinstance(price, (int, float, str)):
        return PRICE_UNAVAILABLE
    return price or PRICE_UNAVAILABLE


# Singleton instance used by the routes
upstream_service = UpstreamService()


def get_upstream_service() -> UpstreamService:
    """FastAPI dependency returning the shared UpstreamService."""
    return upstream_service
