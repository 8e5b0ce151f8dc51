"""
Zwanski API: Upstream Service Unit Tests (Mocked)
==================================================

What:  Tests for UpstreamService.ping and UpstreamService.crypto_price.
How:   respx intercepts every httpx request; no real network traffic.

What we test:
    ✅ Ping reports upstream status, elapsed time and CF-Ray edge code
    ✅ Ping failures (DNS, refused, timeout, bad URL) become UpstreamServiceError
    ✅ Price lookups send the lowercased id and report the uppercased symbol
    ✅ Missing prices read "N/A"; non-JSON bodies are failures
    ❌ Real third-party calls
"""

import httpx
import pytest

from zwanski_api.exceptions import UpstreamServiceError
from zwanski_api.services.upstream import (
    CRYPTO_ERROR_LABEL,
    PING_ERROR_LABEL,
    UpstreamService,
    extract_usd_price,
)

PRICE_URL = "https://prices.test/api/v3/simple/price"


class TestPing:

    @pytest.mark.asyncio
    async def test_ping_success(self, upstream, respx_mock):
        route = respx_mock.head(host="example.com").mock(return_value=httpx.Response(204))

        result = await upstream.ping("example.com", ray_id="8f1a2b3c4d5e6f70-LHR")

        assert route.called
        assert route.calls.last.request.url.scheme == "https"
        assert result.url == "example.com"
        assert result.status == 204
        assert result.response_time_ms >= 0
        assert result.edge_location == "LHR"
        assert result.timestamp.endswith("Z")

    @pytest.mark.asyncio
    async def test_ping_reports_upstream_error_status(self, upstream, respx_mock):
        respx_mock.head(host="broken.example").mock(return_value=httpx.Response(500))

        result = await upstream.ping("broken.example")

        assert result.status == 500
        assert result.edge_location == "unknown"

    @pytest.mark.asyncio
    async def test_ping_follows_redirects(self, upstream, respx_mock):
        respx_mock.head(host="old.example").mock(
            return_value=httpx.Response(301, headers={"Location": "https://new.example/"})
        )
        respx_mock.head(host="new.example").mock(return_value=httpx.Response(200))

        result = await upstream.ping("old.example")

        assert result.status == 200
        assert result.url == "old.example"

    @pytest.mark.asyncio
    async def test_ping_keeps_path(self, upstream, respx_mock):
        route = respx_mock.head(host="example.com", path="/status").mock(
            return_value=httpx.Response(200)
        )

        await upstream.ping("example.com/status")

        assert route.called

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [
            httpx.ConnectError("[Errno -2] Name or service not known"),
            httpx.ConnectError("[Errno 111] Connection refused"),
            httpx.ConnectTimeout("timed out"),
        ],
    )
    async def test_ping_network_failure(self, upstream, respx_mock, error):
        respx_mock.head(host="down.example").mock(side_effect=error)

        with pytest.raises(UpstreamServiceError) as exc_info:
            await upstream.ping("down.example")

        exc = exc_info.value
        assert exc.target == "down.example"
        assert exc.label == PING_ERROR_LABEL
        assert exc.detail == str(error)
        assert exc.to_body() == {
            "url": "down.example",
            "error": "Could not reach URL",
            "message": str(error),
        }

    @pytest.mark.asyncio
    async def test_ping_empty_error_text_falls_back_to_class_name(self, upstream, respx_mock):
        respx_mock.head(host="quiet.example").mock(side_effect=httpx.ReadTimeout(""))

        with pytest.raises(UpstreamServiceError) as exc_info:
            await upstream.ping("quiet.example")

        assert exc_info.value.detail == "ReadTimeout"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("target", ["example.com:notaport", "xn--zz.com"])
    async def test_ping_invalid_target(self, upstream, respx_mock, target):
        with pytest.raises(UpstreamServiceError) as exc_info:
            await upstream.ping(target)

        exc = exc_info.value
        assert exc.to_body()["url"] == target
        assert exc.label == PING_ERROR_LABEL
        assert exc.detail
        assert not respx_mock.calls


class TestCryptoPrice:

    @pytest.fixture
    def price_service(self):
        return UpstreamService(timeout=1.0, crypto_price_url=PRICE_URL)

    @pytest.mark.asyncio
    async def test_price_found(self, price_service, respx_mock):
        route = respx_mock.get(url__startswith=PRICE_URL).mock(
            return_value=httpx.Response(200, json={"bitcoin": {"usd": 67012.5}})
        )

        result = await price_service.crypto_price("Bitcoin")

        params = route.calls.last.request.url.params
        assert params["ids"] == "bitcoin"
        assert params["vs_currencies"] == "usd"
        assert result.symbol == "BITCOIN"
        assert result.price == 67012.5
        assert result.currency == "USD"
        assert result.source == "CoinGecko (free API)"

    @pytest.mark.asyncio
    async def test_default_symbol_without_price(self, price_service, respx_mock):
        route = respx_mock.get(url__startswith=PRICE_URL).mock(
            return_value=httpx.Response(200, json={})
        )

        result = await price_service.crypto_price(None)

        assert route.calls.last.request.url.params["ids"] == "btc"
        assert result.symbol == "BTC"
        assert result.price == "N/A"

    @pytest.mark.asyncio
    async def test_non_json_body_is_failure(self, price_service, respx_mock):
        respx_mock.get(url__startswith=PRICE_URL).mock(
            return_value=httpx.Response(502, text="<html>Bad gateway</html>")
        )

        with pytest.raises(UpstreamServiceError) as exc_info:
            await price_service.crypto_price("eth")

        exc = exc_info.value
        assert exc.label == CRYPTO_ERROR_LABEL
        assert exc.to_body()["symbol"] == "ETH"
        assert exc.to_body()["error"] == "Could not fetch price"
        assert exc.detail

    @pytest.mark.asyncio
    async def test_network_failure(self, price_service, respx_mock):
        respx_mock.get(url__startswith=PRICE_URL).mock(
            side_effect=httpx.ConnectError("Connection refused")
        )

        with pytest.raises(UpstreamServiceError) as exc_info:
            await price_service.crypto_price("btc")

        assert exc_info.value.to_body() == {
            "symbol": "BTC",
            "error": "Could not fetch price",
            "message": "Connection refused",
        }


class TestExtractUsdPrice:

    @pytest.mark.parametrize(
        "data, expected",
        [
            ({"btc": {"usd": 1}}, 1),
            ({"btc": {"usd": 0.25}}, 0.25),
            ({"btc": {"usd": 0}}, "N/A"),
            ({"btc": {"eur": 10}}, "N/A"),
            ({"btc": None}, "N/A"),
            ({"eth": {"usd": 3000}}, "N/A"),
            ({"btc": {"usd": True}}, "N/A"),
            ([], "N/A"),
            ("oops", "N/A"),
        ],
    )
    def test_extract(self, data, expected):
        assert extract_usd_price(data, "btc") == expected
