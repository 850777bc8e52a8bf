# =============================================================================
# agent/market_agent.py  —  Google ADK agent wired to the MCP tool server
# =============================================================================
#
# HOW IT FITS TOGETHER:
#
#   ┌──────────────────────────┐   stdio (MCP)   ┌────────────────────────┐
#   │  ADK Agent               │ ──────────────▶ │  tools/mcp_server.py   │
#   │  LiteLlm model + prompt  │ ◀────────────── │  (FastMCP subprocess)  │
#   └──────────────────────────┘                 └────────────────────────┘
#                                                            │ HTTPS
#                                                            ▼
#                                                 api.binance.com/api/v3
#
# ADK starts the server as a subprocess, discovers its four tools, and
# hands them to the model.  The model only ever sees tool text replies.
# =============================================================================

import os
import sys

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_market_analyst_prompt
from core.config import load_settings

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def create_mcp_toolset() -> MCPToolset:
    """Describe how ADK should launch the market-data server.

    The server runs as `python -m tools.mcp_server` with the SAME
    interpreter as this process and the project root as its working
    directory, so `core` and `tools` import without any path tweaks.
    """
    return MCPToolset(
        connection_params=StdioServerParameters(
            command=sys.executable,
            args=["-m", "tools.mcp_server"],
            cwd=PROJECT_ROOT,
        ),
    )


def create_agent() -> Agent:
    """Create the market analyst agent.

    The model id comes from MARKET_AGENT_MODEL (default
    "openrouter/openai/gpt-4o").  LiteLlm reads the provider's API key
    (e.g. OPENROUTER_API_KEY) from the environment.
    """
    settings = load_settings()

    return Agent(
        name="binance_market_analyst",
        model=LiteLlm(model=settings.agent_model),
        instruction=get_market_analyst_prompt(),
        tools=[create_mcp_toolset()],
    )
