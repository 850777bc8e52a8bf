# =============================================================================
# core/formatting.py  —  Human-readable text for every tool reply
# =============================================================================
#
# Every function here is PURE: same inputs, same string, byte for byte.
# No clock reads, no locale lookups (times are always rendered in UTC), so
# repeated identical tool calls against an unchanged market produce
# identical output.
#
# NUMBER STYLE:
#   Prices and volumes are grouped like en-US "1,234.567": thousands
#   separators, at most three fraction digits, trailing zeros dropped.
#   Fixed-precision fields (OHLC summaries, percentages) use an explicit
#   number of decimals instead.
# =============================================================================

from datetime import datetime, timedelta, timezone

from core.models import Candle, HistoryPoint, MarketSnapshot, TickerStats

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Stripped in this order, first occurrence only.  Lossy for other quote
# assets (EUR, TRY, ...), which are left untouched.
_QUOTE_SUFFIXES = ("USDT", "BUSD", "BTC", "ETH")


# =============================================================================
# Primitives
# =============================================================================
def format_number(value: float) -> str:
    """Group thousands and keep at most three fraction digits.

    >>> format_number(65000.5)
    '65,000.5'
    >>> format_number(1234.56789)
    '1,234.568'
    """
    return f"{value:,.3f}".rstrip("0").rstrip(".")


def signed(value: float, decimals: int) -> str:
    """Fixed-precision number with a leading "+" when non-negative."""
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:.{decimals}f}"


def to_datetime(open_time_ms: int) -> datetime:
    return _EPOCH + timedelta(milliseconds=open_time_ms)


def iso_timestamp(open_time_ms: int) -> str:
    """Epoch milliseconds → "2024-01-01T00:00:00.000Z"."""
    return to_datetime(open_time_ms).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def display_timestamp(open_time_ms: int) -> str:
    """Epoch milliseconds → "2024-01-01 00:00:00" (UTC)."""
    return to_datetime(open_time_ms).strftime("%Y-%m-%d %H:%M:%S")


def base_asset_label(symbol: str) -> str:
    """Guess the base asset by removing a known quote asset from the pair."""
    for suffix in _QUOTE_SUFFIXES:
        symbol = symbol.replace(suffix, "", 1)
    return symbol


# =============================================================================
# Tool renderers
# =============================================================================
def format_current_price(snapshot: MarketSnapshot) -> str:
    return f"Current price for {snapshot.symbol}: ${format_number(snapshot.price)}"


def format_ticker(stats: TickerStats) -> str:
    change_sign = "+" if stats.price_change >= 0 else ""
    return "\n".join([
        f"📊 {stats.symbol} - 24hr Statistics:",
        "",
        f"💰 Current Price: ${format_number(stats.last_price)}",
        f"📈 24h Change: {change_sign}${stats.price_change:.4f} "
        f"({signed(stats.price_change_percent, 2)}%)",
        f"🔼 24h High: ${format_number(stats.high_price)}",
        f"🔽 24h Low: ${format_number(stats.low_price)}",
        f"📊 24h Volume: {format_number(stats.volume)} {base_asset_label(stats.symbol)}",
        f"💵 Quote Volume: ${format_number(stats.quote_volume)}",
    ])


def format_klines(
    symbol: str,
    interval: str,
    limit: int,
    recent: list[Candle],
    total_received: int,
) -> str:
    """Render the latest candle, the trailing window, and the series size.

    Args:
        symbol: Upper-cased trading pair.
        interval: Candle width, e.g. "1h".
        limit: The number of candles that was REQUESTED.
        recent: Trailing window to list, oldest first; last item is latest.
        total_received: Number of candles the exchange actually returned.
    """
    latest = recent[-1]
    lines = [
        f"📈 {symbol} Kline Data ({interval} interval, last {limit} periods):",
        "",
        "Latest Candle:",
        f"🕐 Time: {iso_timestamp(latest.open_time)}",
        f"🟢 Open: ${format_number(latest.open)}",
        f"🔴 Close: ${format_number(latest.close)}",
        f"🔼 High: ${format_number(latest.high)}",
        f"🔽 Low: ${format_number(latest.low)}",
        f"📊 Volume: {format_number(latest.volume)}",
        "",
        f"Recent {len(recent)} candles:",
    ]
    lines.extend(
        f"{display_timestamp(c.open_time)}: "
        f"O:{c.open:.2f} H:{c.high:.2f} L:{c.low:.2f} C:{c.close:.2f}"
        for c in recent
    )
    lines.extend(["", f"Total data points received: {total_received}"])
    return "\n".join(lines)


def format_price_history(
    symbol: str,
    interval: str,
    limit: int,
    history: list[HistoryPoint],
    total_change: float,
    recent_count: int = 10,
) -> str:
    """Render the trend summary plus the last `recent_count` periods."""
    first, last = history[0].candle, history[-1].candle
    highest = max(point.candle.high for point in history)
    lowest = min(point.candle.low for point in history)
    recent = history[-recent_count:]

    lines = [
        f"📊 {symbol} Price History ({interval} intervals, {limit} periods):",
        "",
        "📈 Summary:",
        f"• Period: {to_datetime(first.open_time):%Y-%m-%d} to {to_datetime(last.open_time):%Y-%m-%d}",
        f"• Starting Price: ${format_number(first.open)}",
        f"• Current Price: ${format_number(last.close)}",
        f"• Total Change: {signed(total_change, 2)}%",
        f"• Highest: {format_number(highest)}",
        f"• Lowest: {format_number(lowest)}",
        "",
        f"📋 Recent {len(recent)} periods:",
    ]
    lines.extend(
        f"{display_timestamp(point.candle.open_time)}: "
        f"{point.candle.close:.2f} ({signed(point.change, 2)}%)"
        for point in recent
    )
    return "\n".join(lines)
