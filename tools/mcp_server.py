# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (all four market-data tools)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes core.gateway over MCP.  The gateway owns everything a host can
#   see: the advertised schemas come straight from TOOL_DESCRIPTORS and every
#   call, including one for a name that does not exist, is answered by
#   ToolGateway.call_tool().  No parsing, validation or formatting happens here.
#
# HOW IT WORKS (the flow):
#   1. The host agent lists tools and gets the four descriptors verbatim
#   2. It calls one, e.g. "get_kline_data", with raw JSON arguments
#   3. GatewayTool.run() hands {name, arguments} to the ToolGateway, which
#      makes ONE request to the Binance REST API and formats the answer
#      (names FastMCP has never heard of are caught by UnknownToolReply
#      and sent to the same gateway)
#   4. The text comes back as {"content": [{"type": "text", "text": ...}]}
#
# ERRORS ARE REPLIES, NOT FAULTS:
#   The gateway never raises.  A bad symbol, a wrong argument or a network
#   failure comes back as a normal text result starting with "Error:", so the
#   host always gets a well-formed reply it can show to the user.
#
# RUNNING THIS SERVER:
#   a) Standalone:        python -m tools.mcp_server   (or: binance-mcp-server)
#   b) From the agent:    agent/market_agent.py spawns it over stdio
# =============================================================================

import json
import logging
import sys
from contextlib import asynccontextmanager
from typing import Any

from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.server.middleware import CallNext, Middleware, MiddlewareContext
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult as MCPToolResult
from mcp.types import CallToolRequestParams, TextContent

# .env must be loaded before settings are read.
load_dotenv()

from core.binance import BinanceClient
from core.config import load_settings
from core.gateway import ToolGateway, list_tools
from core.models import ToolResult

settings = load_settings()

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because stdout IS the MCP transport.  Anything printed
# to stdout would corrupt the JSON-RPC stream.
#
#   CYAN   → incoming tool calls (name + arguments)
#   GREEN  → successful replies
#   YELLOW → "Error:" replies and status messages
# =============================================================================
_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, arguments: Any) -> None:
    """Log an incoming tool call in CYAN."""
    logging.info(f"{_CYAN}{tool_name} called with: {json.dumps(arguments, default=str)}{_RESET}")


def _log_response(tool_name: str, result: ToolResult) -> None:
    """Log the reply (first line only)."""
    text = result.text
    colour = _YELLOW if text.startswith("Error:") else _GREEN
    first_line = text.splitlines()[0] if text else ""
    logging.info(f"{colour}  ← {tool_name}: {json.dumps(first_line, ensure_ascii=False)}{_RESET}")


# =============================================================================
# Server instance
# =============================================================================
# One gateway per process.  It holds only the read-only base URL; every
# tool call opens and closes its own HTTP connection.
gateway = ToolGateway(BinanceClient(settings.base_url))


async def dispatch(name: str, arguments: dict[str, Any] | None) -> MCPToolResult:
    """Send one MCP tool call to the gateway and wrap its reply for FastMCP."""
    # The MCP transport delivers an absent "arguments" field as {}.
    arguments = arguments or None
    _log_request(name, arguments)
    result = await gateway.call_tool(name, arguments)
    _log_response(name, result)
    return MCPToolResult(
        content=[TextContent(**block) for block in result.to_dict()["content"]]
    )


class GatewayTool(Tool):
    """A tool whose schema is a gateway descriptor and whose calls go to the gateway.

    FastMCP does not validate the arguments against ``parameters``; the
    gateway handlers do that and answer with "Error:" text instead.
    """

    async def run(self, arguments: dict[str, Any]) -> MCPToolResult:
        return await dispatch(self.name, arguments)


class UnknownToolReply(Middleware):
    """Answer calls to unregistered names through the gateway, not FastMCP."""

    async def on_call_tool(
        self,
        context: MiddlewareContext[CallToolRequestParams],
        call_next: CallNext[CallToolRequestParams, MCPToolResult],
    ) -> MCPToolResult:
        if context.message.name not in gateway.tool_names:
            return await dispatch(context.message.name, context.message.arguments)
        return await call_next(context)


@asynccontextmanager
async def _lifespan(server: FastMCP):
    logging.info(f"{_YELLOW}Binance MCP server running on stdio{_RESET}")
    yield {}


mcp = FastMCP(
    "binance-price-server",
    lifespan=_lifespan,
    strict_input_validation=False,
)
mcp.add_middleware(UnknownToolReply())

# Tools are registered in descriptor order: get_current_price,
# get_24hr_ticker, get_kline_data (last 5 candles rendered), and
# get_price_history (whole-series summary, last 10 periods listed).
for descriptor in list_tools():
    mcp.add_tool(
        GatewayTool(
            name=descriptor["name"],
            description=descriptor["description"],
            parameters=descriptor["inputSchema"],
        )
    )


# =============================================================================
# Server entry point
# =============================================================================
def main() -> None:
    """Serve the tools over stdio until the host closes the pipe."""
    mcp.run()


if __name__ == "__main__":
    main()
