# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains the demo host: a Google ADK agent that talks to the
# market-data tools over MCP.
#
# ARCHITECTURAL ROLE:
#   The agent decides WHICH tool to call for a user's question ("how has
#   ETH done this week?") and explains the answer.  It never calls Binance
#   itself and never re-computes prices; the numbers come from the tools.
#
#   agent/ → orchestration only
#   tools/ → MCP wrappers only
#   core/  → actual logic
# =============================================================================
