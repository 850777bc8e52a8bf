# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP server that publishes the market-data
# tools.
#
# ARCHITECTURAL ROLE:
#   tools/ is the "translation layer" between the MCP protocol and
#   core.gateway.  It:
#     1. Declares each tool's typed parameters (FastMCP turns them into
#        the advertised input schema)
#     2. Forwards the call to ToolGateway.call_tool()
#     3. Logs requests and replies to stderr
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT call Binance directly (core/binance.py does)
#   - They do NOT parse or format market data (core/ does)
#   - They do NOT know about Google ADK (agent/ does)
# =============================================================================
