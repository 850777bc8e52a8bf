# =============================================================================
# core/binance.py  —  Binance REST client
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Performs the ONE outbound GET each tool needs and returns the decoded
#   JSON body.  It does not parse prices or format anything; that is the
#   job of core/models.py and core/formatting.py.
#
# ENDPOINTS USED (all public, no API key):
#   /ticker/price  ?symbol=             → {"symbol", "price"}
#   /ticker/24hr   ?symbol=             → 24h statistics object
#   /klines        ?symbol=&interval=&limit=  → array of positional arrays
#
# CONNECTION HANDLING:
#   If an httpx.AsyncClient is injected (tests, or a host that wants to pool
#   connections) it is reused.  Otherwise a short-lived client is opened for
#   each request, so no connection state outlives a tool call.  httpx's own
#   default timeout applies; there is no retry and no backoff.
# =============================================================================

import logging
from typing import Any

import httpx

from core.config import DEFAULT_BASE_URL
from core.errors import BinanceAPIError

logger = logging.getLogger(__name__)


class BinanceClient:
    """Thin async wrapper over the Binance spot market-data endpoints."""

    def __init__(self, base_url: str = DEFAULT_BASE_URL, http_client: httpx.AsyncClient | None = None):
        self.base_url = base_url.rstrip("/")
        self._http_client = http_client

    async def get_ticker_price(self, symbol: str) -> Any:
        return await self._get("/ticker/price", {"symbol": symbol})

    async def get_ticker_24hr(self, symbol: str) -> Any:
        return await self._get("/ticker/24hr", {"symbol": symbol})

    async def get_klines(self, symbol: str, interval: str, limit: int) -> Any:
        return await self._get(
            "/klines", {"symbol": symbol, "interval": interval, "limit": limit}
        )

    async def _get(self, path: str, params: dict[str, Any]) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug("GET %s params=%s", url, params)

        if self._http_client is not None:
            response = await self._http_client.get(url, params=params)
        else:
            async with httpx.AsyncClient() as client:
                response = await client.get(url, params=params)

        if response.is_error:
            raise BinanceAPIError(response.status_code, _error_message(response))
        return response.json()


def _error_message(response: httpx.Response) -> str:
    """Pull Binance's {"code": ..., "msg": ...} text out of an error body."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("msg"):
        return str(body["msg"])
    return response.reason_phrase or "Request failed"
