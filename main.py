# =============================================================================
# main.py  —  Interactive demo: chat with the Binance market analyst
# =============================================================================
#
# HOW TO RUN:
#   python main.py
#
# WHAT HAPPENS:
#   1. Creates the ADK agent (agent/market_agent.py), which spawns the MCP
#      tool server (tools/mcp_server.py) as a stdio subprocess
#   2. Opens an in-memory session
#   3. Sends each line you type to the agent and prints its final answer,
#      plus the name of every tool it calls on the way
#
# The MCP server itself does not need this file; any MCP host can launch
# `python -m tools.mcp_server` directly.
# =============================================================================

import asyncio

from dotenv import load_dotenv

# LiteLlm reads provider API keys from the environment when the agent is
# built, so .env has to be loaded first.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.market_agent import create_agent

APP_NAME = "binance_market_analyst"
USER_ID = "demo_user"


async def run_agent():
    """Run the market analyst agent in a read-eval-print loop."""
    print("=" * 70)
    print("  BINANCE MARKET ANALYST")
    print("  Powered by Google ADK + LiteLlm + FastMCP")
    print("=" * 70)
    print("\n🔧 Initializing agent...")
    agent = create_agent()

    session_service = InMemorySessionService()
    runner = Runner(
        agent=agent,
        app_name=APP_NAME,
        session_service=session_service,
    )
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)

    print("✅ Agent initialized and ready!\n")
    print("💬 Ask about a trading pair, e.g. \"How has ETHUSDT moved this week?\"")
    print("   (Type 'quit' to exit)\n")
    print("-" * 70)

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\n👋 Goodbye!")
            break

        if not user_input:
            continue

        user_message = types.Content(role="user", parts=[types.Part(text=user_input)])

        print("\n🤖 Agent is thinking...\n")
        print("-" * 70)

        final_response = ""
        async for event in runner.run_async(
            user_id=USER_ID,
            session_id=session.id,
            new_message=user_message,
        ):
            if event.content and event.content.parts:
                for part in event.content.parts:
                    if getattr(part, "text", None):
                        final_response = part.text
                    if getattr(part, "function_call", None):
                        print(f"  🔧 Calling tool: {part.function_call.name}")

        print("-" * 70)
        if final_response:
            print(f"\n🤖 Agent:\n\n{final_response}")
        else:
            print("\n⚠️  No response generated. The agent may have encountered an error.")

        print("\n" + "=" * 70)


if __name__ == "__main__":
    asyncio.run(run_agent())
