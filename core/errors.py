# =============================================================================
# core/errors.py  —  Error hierarchy
# =============================================================================
#
# Two layers raise these:
#   1. core/market.py handlers wrap ANY failure in a MarketDataError whose
#      message carries a handler-specific prefix
#      ("Failed to fetch kline data: ...").
#   2. core/gateway.py raises ToolInvocationError for requests it cannot
#      route, then converts every error into an "Error: ..." text result.
#
# Nothing here is ever allowed to escape to the MCP transport.
# =============================================================================


class MarketDataError(Exception):
    """Base error for the Binance market-data server."""


class BinanceAPIError(MarketDataError):
    """The exchange answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class MalformedDataError(MarketDataError):
    """The exchange payload did not have the expected shape."""


class EmptyDataError(MarketDataError):
    """The exchange returned an empty candle series."""


class InvalidArgumentError(MarketDataError):
    """A tool argument is missing or has the wrong shape."""


class ToolInvocationError(MarketDataError):
    """The invocation itself could not be routed to a handler."""
