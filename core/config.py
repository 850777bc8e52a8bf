# =============================================================================
# core/config.py  —  Runtime Settings
# =============================================================================
#
# All configuration comes from environment variables.  Entry points
# (tools/mcp_server.py, main.py) call load_dotenv() first, so a local .env
# file works too.
#
#   BINANCE_BASE_URL    REST base path   (default: https://api.binance.com/api/v3)
#   LOG_LEVEL           stderr log level (default: INFO)
#   MARKET_AGENT_MODEL  LiteLlm model id for the demo agent
#                       (default: openrouter/openai/gpt-4o)
#
# Settings are read ONCE at process start and never mutated afterwards.
# =============================================================================

from dataclasses import dataclass
import os

DEFAULT_BASE_URL = "https://api.binance.com/api/v3"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_AGENT_MODEL = "openrouter/openai/gpt-4o"


@dataclass(frozen=True)
class Settings:
    """Process-wide, read-only configuration."""

    base_url: str = DEFAULT_BASE_URL
    log_level: str = DEFAULT_LOG_LEVEL
    agent_model: str = DEFAULT_AGENT_MODEL


def load_settings() -> Settings:
    """Build Settings from the current environment.

    Empty values fall back to the defaults.  The base URL has any trailing
    slash removed so request paths can be appended directly.
    """
    base_url = os.environ.get("BINANCE_BASE_URL") or DEFAULT_BASE_URL
    log_level = os.environ.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL
    agent_model = os.environ.get("MARKET_AGENT_MODEL") or DEFAULT_AGENT_MODEL

    return Settings(
        base_url=base_url.rstrip("/"),
        log_level=log_level.upper(),
        agent_model=agent_model,
    )
