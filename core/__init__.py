# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL market-data logic for the Binance price server.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP, Google ADK, or any orchestration
#   framework.  The only third-party import is httpx (for the one outbound
#   REST call each tool makes).  You can drive every handler from a bare
#   Python REPL with a mocked HTTP client and no MCP runtime at all.
#
# The tools/ layer exposes core.gateway over MCP; the agent/ layer consumes
# those tools.  Neither one contains formatting or parsing logic.
# =============================================================================
