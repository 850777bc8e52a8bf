# =============================================================================
# core/market.py  —  The four market-data handlers
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   One async function per tool.  Each one:
#     1. Validates and normalizes its arguments
#     2. Makes exactly ONE call through BinanceClient
#     3. Decodes the payload into core/models.py types
#     4. Hands the typed values to core/formatting.py
#
# FAILURE CONTRACT:
#   Every handler runs inside a failure boundary (@_fails_with).  Whatever
#   goes wrong (bad argument, HTTP error, empty series, malformed payload)
#   is re-raised as a MarketDataError prefixed with what the handler was
#   trying to do:
#       "Failed to fetch kline data: No kline data received"
#   The gateway turns that into an "Error: ..." text reply.
# =============================================================================

import functools
import logging
from typing import Any

from core.binance import BinanceClient
from core.errors import (
    EmptyDataError,
    InvalidArgumentError,
    MalformedDataError,
    MarketDataError,
)
from core.formatting import (
    format_current_price,
    format_klines,
    format_price_history,
    format_ticker,
)
from core.models import Candle, HistoryPoint, MarketSnapshot, TickerStats, decode_candles

logger = logging.getLogger(__name__)

INTERVALS: tuple[str, ...] = (
    "1m", "3m", "5m", "15m", "30m",
    "1h", "2h", "4h", "6h", "8h", "12h",
    "1d", "3d", "1w", "1M",
)

MIN_LIMIT = 1
MAX_LIMIT = 1000
DEFAULT_KLINE_LIMIT = 100
DEFAULT_HISTORY_LIMIT = 24

KLINE_DISPLAY_COUNT = 5
HISTORY_DISPLAY_COUNT = 10


# =============================================================================
# Argument normalization
# =============================================================================
def normalize_symbol(symbol: Any) -> str:
    if not isinstance(symbol, str) or not symbol.strip():
        raise InvalidArgumentError("symbol is required")
    return symbol.strip().upper()


def validate_interval(interval: Any) -> str:
    if interval not in INTERVALS:
        raise InvalidArgumentError(
            f"Invalid interval {interval!r}. Expected one of: {', '.join(INTERVALS)}"
        )
    return interval


def clamp_limit(limit: Any) -> int:
    """Coerce limit to an int and clamp it into [MIN_LIMIT, MAX_LIMIT]."""
    if isinstance(limit, bool):
        raise InvalidArgumentError("limit must be an integer")
    try:
        value = int(limit)
    except (TypeError, ValueError, OverflowError):
        raise InvalidArgumentError("limit must be an integer") from None
    return max(MIN_LIMIT, min(MAX_LIMIT, value))


def _require_rows(rows: Any, empty_message: str) -> list:
    """A candle series must be a non-empty array."""
    if not rows:
        raise EmptyDataError(empty_message)
    if not isinstance(rows, list):
        raise MalformedDataError(f"Expected kline array, got {type(rows).__name__}")
    return rows


# =============================================================================
# Failure boundary
# =============================================================================
def _fails_with(prefix: str):
    """Re-raise any exception from the wrapped handler as a prefixed MarketDataError."""

    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except Exception as exc:
                reason = str(exc) or type(exc).__name__
                logger.warning("%s: %s", prefix, reason)
                raise MarketDataError(f"{prefix}: {reason}") from exc

        return wrapper

    return decorator


# =============================================================================
# Trend analysis
# =============================================================================
def percent_change(current: float, base: float) -> float:
    """Percentage move from base to current.  A zero base reports no change."""
    if base == 0:
        return 0.0
    return (current - base) / base * 100


def build_history(candles: list[Candle]) -> list[HistoryPoint]:
    """Annotate each candle with its 1-based period and close-to-close % change.

    The first period has no predecessor, so its change is fixed at 0.
    """
    history = []
    for index, candle in enumerate(candles):
        if index == 0:
            change = 0.0
        else:
            change = percent_change(candle.close, candles[index - 1].close)
        history.append(HistoryPoint(period=index + 1, candle=candle, change=change))
    return history


def total_change(history: list[HistoryPoint]) -> float:
    """Percentage move from the first open to the last close."""
    return percent_change(history[-1].candle.close, history[0].candle.open)


# =============================================================================
# Handlers
# =============================================================================
@_fails_with("Failed to fetch current price")
async def get_current_price(client: BinanceClient, symbol: Any) -> str:
    payload = await client.get_ticker_price(normalize_symbol(symbol))
    return format_current_price(MarketSnapshot.from_payload(payload))


@_fails_with("Failed to fetch 24hr ticker")
async def get_24hr_ticker(client: BinanceClient, symbol: Any) -> str:
    payload = await client.get_ticker_24hr(normalize_symbol(symbol))
    return format_ticker(TickerStats.from_payload(payload))


@_fails_with("Failed to fetch kline data")
async def get_kline_data(client: BinanceClient, symbol: Any, interval: Any, limit: Any) -> str:
    symbol = normalize_symbol(symbol)
    interval = validate_interval(interval)
    limit = clamp_limit(limit)

    rows = _require_rows(
        await client.get_klines(symbol, interval, limit), "No kline data received"
    )

    # Only the trailing window is displayed, so only it is decoded.
    offset = max(len(rows) - KLINE_DISPLAY_COUNT, 0)
    recent = [Candle.from_row(row, offset + i) for i, row in enumerate(rows[offset:])]
    return format_klines(symbol, interval, limit, recent, total_received=len(rows))


@_fails_with("Failed to fetch price history")
async def get_price_history(client: BinanceClient, symbol: Any, interval: Any, limit: Any) -> str:
    symbol = normalize_symbol(symbol)
    interval = validate_interval(interval)
    limit = clamp_limit(limit)

    rows = _require_rows(
        await client.get_klines(symbol, interval, limit), "No historical data received"
    )

    history = build_history(decode_candles(rows))
    return format_price_history(
        symbol,
        interval,
        limit,
        history,
        total_change(history),
        recent_count=HISTORY_DISPLAY_COUNT,
    )
