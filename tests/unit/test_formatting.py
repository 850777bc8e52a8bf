"""Tests for the pure text renderers in core.formatting."""

import pytest

from core.formatting import (
    base_asset_label,
    display_timestamp,
    format_current_price,
    format_number,
    format_price_history,
    format_ticker,
    iso_timestamp,
    signed,
)
from core.market import build_history, total_change
from core.models import Candle, MarketSnapshot, TickerStats


class TestFormatNumber:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (65000.5, "65,000.5"),
            (1234.56789, "1,234.568"),
            (100.0, "100"),
            (1_000_000, "1,000,000"),
            (0.25, "0.25"),
            (0.00001, "0"),
            (-1234.5, "-1,234.5"),
        ],
    )
    def test_groups_thousands_and_trims_fraction(self, value, expected) -> None:
        assert format_number(value) == expected


class TestSigned:
    def test_zero_gets_plus_sign(self) -> None:
        assert signed(0.0, 2) == "+0.00"

    def test_positive_gets_plus_sign(self) -> None:
        assert signed(4.7619, 2) == "+4.76"

    def test_negative_keeps_minus_only(self) -> None:
        assert signed(-1.234, 2) == "-1.23"


class TestTimestamps:
    def test_iso_timestamp_has_milliseconds_and_z(self) -> None:
        assert iso_timestamp(0) == "1970-01-01T00:00:00.000Z"
        assert iso_timestamp(1_704_067_200_123) == "2024-01-01T00:00:00.123Z"

    def test_display_timestamp_is_utc(self) -> None:
        assert display_timestamp(60_000) == "1970-01-01 00:01:00"


class TestBaseAssetLabel:
    @pytest.mark.parametrize(
        ("symbol", "expected"),
        [
            ("SOLUSDT", "SOL"),
            ("BNBBUSD", "BNB"),
            ("BNBBTC", "BNB"),
            ("XRPETH", "XRP"),
            # Unknown quote assets are left alone.
            ("BNBEUR", "BNBEUR"),
            ("USDTTRY", "TRY"),
            # Lossy: the base asset itself is also a listed quote asset.
            ("BTCUSDT", ""),
            ("ETHUSDT", ""),
        ],
    )
    def test_strips_first_occurrence_of_each_quote(self, symbol, expected) -> None:
        assert base_asset_label(symbol) == expected


class TestFormatCurrentPrice:
    def test_price_line(self) -> None:
        text = format_current_price(MarketSnapshot(symbol="BTCUSDT", price=65000.5))

        assert text == "Current price for BTCUSDT: $65,000.5"


class TestFormatTicker:
    def test_negative_change(self, ticker_payload) -> None:
        text = format_ticker(TickerStats.from_payload(ticker_payload))

        assert text == "\n".join([
            "📊 SOLUSDT - 24hr Statistics:",
            "",
            "💰 Current Price: $64,765.5",
            "📈 24h Change: $-1234.5000 (-1.87%)",
            "🔼 24h High: $66,500",
            "🔽 24h Low: $64,000.25",
            "📊 24h Volume: 12,345.678 SOL",
            "💵 Quote Volume: $800,000,000.5",
        ])

    def test_non_negative_change_is_sign_prefixed(self, ticker_payload) -> None:
        ticker_payload.update(priceChange="250.5", priceChangePercent="0.39")

        text = format_ticker(TickerStats.from_payload(ticker_payload))

        assert "📈 24h Change: +$250.5000 (+0.39%)" in text


class TestFormatPriceHistory:
    def test_lists_only_the_trailing_periods(self) -> None:
        candles = [
            Candle(open_time=i * 86_400_000, open=100 + i, high=101 + i, low=99 + i, close=100.5 + i, volume=1)
            for i in range(15)
        ]
        history = build_history(candles)

        text = format_price_history("ETHUSDT", "1d", 15, history, total_change(history), recent_count=10)
        lines = text.splitlines()

        assert lines[0] == "📊 ETHUSDT Price History (1d intervals, 15 periods):"
        assert "• Period: 1970-01-01 to 1970-01-15" in lines
        assert "📋 Recent 10 periods:" in lines
        period_lines = lines[lines.index("📋 Recent 10 periods:") + 1:]
        assert len(period_lines) == 10
        assert period_lines[0].startswith("1970-01-06 00:00:00: 105.50 (+")
        assert period_lines[-1].startswith("1970-01-15 00:00:00: 114.50 (+")
