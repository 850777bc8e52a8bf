# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# Every shape here is TRANSIENT: it lives for one tool invocation and is
# then thrown away.  Nothing is persisted and nothing is shared between
# requests.
#
# The exchange sends numbers as strings ("65000.50000000") and candles as
# positional arrays.  Each model owns an explicit decode step
# (from_payload / from_row) that validates the wire shape up front, so a
# bad payload surfaces as a MalformedDataError naming what was wrong instead
# of a confusing TypeError three functions later.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any

from core.errors import MalformedDataError


def _parse_number(value: Any, field_name: str) -> float:
    """Parse a numeric string (or number) the exchange sent into a float."""
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise MalformedDataError(f"{field_name} is not numeric: {value!r}")
    try:
        return float(value)
    except ValueError:
        raise MalformedDataError(f"{field_name} is not numeric: {value!r}") from None


def _require_mapping(payload: Any, what: str) -> dict:
    if not isinstance(payload, dict):
        raise MalformedDataError(f"Expected {what} object, got {type(payload).__name__}")
    return payload


def _require_symbol(payload: dict) -> str:
    symbol = payload.get("symbol")
    if not isinstance(symbol, str):
        raise MalformedDataError(f"symbol is missing from response: {payload!r}")
    return symbol


# -----------------------------------------------------------------------------
# MarketSnapshot — latest traded price (/ticker/price)
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class MarketSnapshot:
    """Current price for one trading pair."""

    symbol: str                        # "BTCUSDT"
    price: float                       # Last traded price, quote currency

    @classmethod
    def from_payload(cls, payload: Any) -> "MarketSnapshot":
        data = _require_mapping(payload, "ticker price")
        return cls(
            symbol=_require_symbol(data),
            price=_parse_number(data.get("price"), "price"),
        )


# -----------------------------------------------------------------------------
# TickerStats — rolling 24h window (/ticker/24hr)
# -----------------------------------------------------------------------------
# Binance returns ~20 fields here.  We keep only what the formatter shows.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class TickerStats:
    """24-hour price change statistics for one trading pair."""

    symbol: str
    price_change: float                # Absolute change over 24h
    price_change_percent: float        # Percentage change over 24h
    last_price: float
    high_price: float
    low_price: float
    volume: float                      # Base-asset volume
    quote_volume: float                # Quote-asset volume

    @classmethod
    def from_payload(cls, payload: Any) -> "TickerStats":
        data = _require_mapping(payload, "24hr ticker")
        return cls(
            symbol=_require_symbol(data),
            price_change=_parse_number(data.get("priceChange"), "priceChange"),
            price_change_percent=_parse_number(
                data.get("priceChangePercent"), "priceChangePercent"
            ),
            last_price=_parse_number(data.get("lastPrice"), "lastPrice"),
            high_price=_parse_number(data.get("highPrice"), "highPrice"),
            low_price=_parse_number(data.get("lowPrice"), "lowPrice"),
            volume=_parse_number(data.get("volume"), "volume"),
            quote_volume=_parse_number(data.get("quoteVolume"), "quoteVolume"),
        )


# -----------------------------------------------------------------------------
# Candle — one OHLCV bucket (/klines)
# -----------------------------------------------------------------------------
# Wire shape (positional, 12 elements today; only the first six are used):
#   [openTime(ms), open, high, low, close, volume, closeTime, ...]
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Candle:
    """One open-high-low-close-volume interval."""

    open_time: int                     # Milliseconds since the Unix epoch
    open: float
    high: float
    low: float
    close: float
    volume: float

    @classmethod
    def from_row(cls, row: Any, index: int = 0) -> "Candle":
        """Decode one positional kline array.

        Raises:
            MalformedDataError: if the row is too short, the open time is not
                an integer, or any price/volume field is not numeric.
        """
        if not isinstance(row, (list, tuple)) or len(row) < 6:
            raise MalformedDataError(
                f"Malformed kline at index {index}: expected an array of at "
                f"least 6 fields, got {row!r}"
            )

        open_time = row[0]
        if isinstance(open_time, bool) or not isinstance(open_time, int):
            raise MalformedDataError(
                f"Malformed kline at index {index}: open time is not an integer: {open_time!r}"
            )

        try:
            open_, high, low, close, volume = (
                _parse_number(value, name)
                for value, name in zip(row[1:6], ("open", "high", "low", "close", "volume"))
            )
        except MalformedDataError as exc:
            raise MalformedDataError(f"Malformed kline at index {index}: {exc}") from None

        return cls(open_time=open_time, open=open_, high=high, low=low, close=close, volume=volume)


def decode_candles(rows: Any) -> list[Candle]:
    """Decode a /klines payload into an ordered candle series."""
    if not isinstance(rows, list):
        raise MalformedDataError(f"Expected kline array, got {type(rows).__name__}")
    return [Candle.from_row(row, index) for index, row in enumerate(rows)]


# -----------------------------------------------------------------------------
# HistoryPoint — a Candle annotated for trend reporting
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class HistoryPoint:
    """A candle plus its 1-based period index and close-to-close % change."""

    period: int
    candle: Candle
    change: float                      # 0.0 for the first period


# -----------------------------------------------------------------------------
# ToolResult — the uniform reply envelope
# -----------------------------------------------------------------------------
# Success and failure share this shape.  A failure is simply a result whose
# text starts with "Error:"; there is no separate status field.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolResult:
    """MCP-style tool reply: an ordered list of text content blocks."""

    content: list[dict[str, str]] = field(default_factory=list)

    @classmethod
    def from_text(cls, text: str) -> "ToolResult":
        return cls(content=[{"type": "text", "text": text}])

    @classmethod
    def from_error(cls, message: str) -> "ToolResult":
        return cls.from_text(f"Error: {message}")

    @property
    def text(self) -> str:
        """All text blocks joined together."""
        return "".join(block["text"] for block in self.content if block.get("type") == "text")

    def to_dict(self) -> dict:
        return {"content": [dict(block) for block in self.content]}
