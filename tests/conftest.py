"""
Shared fixtures for the Binance market-data test suite.

Outbound HTTP is never real: every BinanceClient under test gets an
AsyncMock(spec=httpx.AsyncClient) whose .get() returns genuine
httpx.Response objects, so status handling and .json() behave exactly as
they would against the exchange.
"""

from unittest.mock import AsyncMock

import httpx
import pytest

from core.binance import BinanceClient
from core.gateway import ToolGateway

BASE_URL = "https://api.binance.com/api/v3"

# 2024-01-01T00:00:00Z in epoch milliseconds
JAN_1_2024_MS = 1_704_067_200_000
HOUR_MS = 3_600_000


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: Unit tests for individual components")


# =============================================================================
# HTTP
# =============================================================================


@pytest.fixture
def make_response():
    """Factory for real httpx.Response objects tied to a GET request."""

    def _make(payload=None, status_code: int = 200, path: str = "/ticker/price", text: str | None = None):
        request = httpx.Request("GET", f"{BASE_URL}{path}")
        if text is not None:
            return httpx.Response(status_code, text=text, request=request)
        return httpx.Response(status_code, json=payload, request=request)

    return _make


@pytest.fixture
def mock_http_client():
    """
    Create a mock HTTP client.

    Returns:
        AsyncMock: A mock httpx.AsyncClient
    """
    return AsyncMock(spec=httpx.AsyncClient)


@pytest.fixture
def binance_client(mock_http_client):
    """BinanceClient that sends every request through the mock."""
    return BinanceClient(BASE_URL, http_client=mock_http_client)


@pytest.fixture
def gateway(binance_client):
    return ToolGateway(binance_client)


# =============================================================================
# Sample payloads
# =============================================================================


@pytest.fixture
def price_payload():
    return {"symbol": "BTCUSDT", "price": "65000.5"}


@pytest.fixture
def ticker_payload():
    """Trimmed /ticker/24hr response (Binance sends more fields)."""
    return {
        "symbol": "SOLUSDT",
        "priceChange": "-1234.5",
        "priceChangePercent": "-1.87",
        "weightedAvgPrice": "65100.1",
        "lastPrice": "64765.5",
        "highPrice": "66500",
        "lowPrice": "64000.25",
        "volume": "12345.678",
        "quoteVolume": "800000000.5",
        "openTime": JAN_1_2024_MS,
        "closeTime": JAN_1_2024_MS + 24 * HOUR_MS,
        "count": 1000,
    }


def kline_row(i: int) -> list:
    """Full 12-field kline for hour i after 2024-01-01 00:00 UTC."""
    open_time = JAN_1_2024_MS + i * HOUR_MS
    return [
        open_time,
        f"{100 + i}.00000000",
        f"{110 + i}.00000000",
        f"{90 + i}.00000000",
        f"{105 + i}.00000000",
        "10.50000000",
        open_time + HOUR_MS - 1,
        "1000.0",
        50,
        "5.0",
        "500.0",
        "0",
    ]


@pytest.fixture
def kline_rows():
    """Seven hourly candles, oldest first."""
    return [kline_row(i) for i in range(7)]


@pytest.fixture
def two_candle_rows():
    return [
        [0, "100", "110", "90", "105", "10"],
        [60000, "105", "115", "95", "110", "12"],
    ]
