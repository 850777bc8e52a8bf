# =============================================================================
# core/gateway.py  —  Tool Gateway (capability list + invocation dispatch)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Owns the fixed set of four ToolDescriptors and routes an invocation
#   {name, arguments} to the matching handler in core/market.py.
#
# THE REPLY CONTRACT:
#   call_tool() NEVER raises.  Success and failure both come back as a
#   ToolResult with a single text block; failures are the ones whose text
#   starts with "Error:".  User errors (bad symbol), transient errors
#   (network) and routing errors (unknown tool) all look the same to the
#   caller, and the MCP exchange itself always completes.
#
# WHY IS THIS IN core/ AND NOT tools/?
#   The dispatch contract is plain Python.  tools/mcp_server.py only
#   adapts it to FastMCP, and the tests drive it with no MCP runtime.
# =============================================================================

import copy
import logging
from collections.abc import Mapping
from typing import Any

from core.binance import BinanceClient
from core.errors import ToolInvocationError
from core.market import (
    DEFAULT_HISTORY_LIMIT,
    DEFAULT_KLINE_LIMIT,
    INTERVALS,
    MAX_LIMIT,
    MIN_LIMIT,
    get_24hr_ticker,
    get_current_price,
    get_kline_data,
    get_price_history,
)
from core.models import ToolResult

logger = logging.getLogger(__name__)

_SYMBOL_PROPERTY = {
    "type": "string",
    "description": "Trading pair symbol (e.g., BTCUSDT, ETHUSDT)",
}

# -----------------------------------------------------------------------------
# The four tools, in the order they are advertised.
# -----------------------------------------------------------------------------
TOOL_DESCRIPTORS: list[dict[str, Any]] = [
    {
        "name": "get_current_price",
        "description": "Get current price for a cryptocurrency symbol",
        "inputSchema": {
            "type": "object",
            "properties": {"symbol": _SYMBOL_PROPERTY},
            "required": ["symbol"],
        },
    },
    {
        "name": "get_24hr_ticker",
        "description": "Get 24hr ticker price change statistics",
        "inputSchema": {
            "type": "object",
            "properties": {"symbol": _SYMBOL_PROPERTY},
            "required": ["symbol"],
        },
    },
    {
        "name": "get_kline_data",
        "description": "Get candlestick/kline data for a symbol with specified timeframe",
        "inputSchema": {
            "type": "object",
            "properties": {
                "symbol": _SYMBOL_PROPERTY,
                "interval": {
                    "type": "string",
                    "description": f"Timeframe interval ({', '.join(INTERVALS)})",
                    "enum": list(INTERVALS),
                },
                "limit": {
                    "type": "number",
                    "description": f"Number of klines to return (default: {DEFAULT_KLINE_LIMIT}, max: {MAX_LIMIT})",
                    "minimum": MIN_LIMIT,
                    "maximum": MAX_LIMIT,
                },
            },
            "required": ["symbol", "interval"],
        },
    },
    {
        "name": "get_price_history",
        "description": "Get historical price data with OHLCV information",
        "inputSchema": {
            "type": "object",
            "properties": {
                "symbol": _SYMBOL_PROPERTY,
                "interval": {
                    "type": "string",
                    "description": "Timeframe interval (15m, 1h, 4h, 1d, etc.)",
                    "enum": list(INTERVALS),
                },
                "limit": {
                    "type": "number",
                    "description": f"Number of data points to return (default: {DEFAULT_HISTORY_LIMIT})",
                    "minimum": MIN_LIMIT,
                    "maximum": MAX_LIMIT,
                },
            },
            "required": ["symbol", "interval"],
        },
    },
]


def list_tools() -> list[dict[str, Any]]:
    """Return a copy of the four ToolDescriptors."""
    return copy.deepcopy(TOOL_DESCRIPTORS)


def describe(name: str) -> str:
    """Look up a tool's one-line description by name."""
    for descriptor in TOOL_DESCRIPTORS:
        if descriptor["name"] == name:
            return descriptor["description"]
    raise KeyError(name)


class ToolGateway:
    """Routes tool invocations to the market-data handlers."""

    def __init__(self, client: BinanceClient):
        self.client = client
        self._handlers = {
            "get_current_price": self._current_price,
            "get_24hr_ticker": self._ticker_24hr,
            "get_kline_data": self._kline_data,
            "get_price_history": self._price_history,
        }

    @property
    def tool_names(self) -> list[str]:
        return list(self._handlers)

    def list_tools(self) -> list[dict[str, Any]]:
        return list_tools()

    async def call_tool(self, name: str, arguments: Mapping[str, Any] | None) -> ToolResult:
        """Invoke a tool by name and always return a ToolResult.

        Args:
            name: One of the four registered tool names.
            arguments: The invocation's argument mapping.  None means the
                request carried no arguments at all.

        Returns:
            The handler's text on success, or "Error: <message>" on any
            failure (missing arguments, unknown tool, handler error).
        """
        try:
            if arguments is None:
                raise ToolInvocationError("Missing arguments")
            if not isinstance(arguments, Mapping):
                raise ToolInvocationError("Arguments must be an object")

            handler = self._handlers.get(name)
            if handler is None:
                raise ToolInvocationError(f"Unknown tool: {name}")

            text = await handler(arguments)
        except Exception as exc:
            message = str(exc) or type(exc).__name__
            logger.warning("Tool %s failed: %s", name, message)
            return ToolResult.from_error(message)

        return ToolResult.from_text(text)

    # -------------------------------------------------------------------------
    # Argument extraction.  A falsy limit (absent, None, 0) means "default".
    # -------------------------------------------------------------------------
    async def _current_price(self, arguments: Mapping[str, Any]) -> str:
        return await get_current_price(self.client, arguments.get("symbol"))

    async def _ticker_24hr(self, arguments: Mapping[str, Any]) -> str:
        return await get_24hr_ticker(self.client, arguments.get("symbol"))

    async def _kline_data(self, arguments: Mapping[str, Any]) -> str:
        return await get_kline_data(
            self.client,
            arguments.get("symbol"),
            arguments.get("interval"),
            arguments.get("limit") or DEFAULT_KLINE_LIMIT,
        )

    async def _price_history(self, arguments: Mapping[str, Any]) -> str:
        return await get_price_history(
            self.client,
            arguments.get("symbol"),
            arguments.get("interval"),
            arguments.get("limit") or DEFAULT_HISTORY_LIMIT,
        )
