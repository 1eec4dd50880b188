# =============================================================================
# main.py  —  Entry Point for the Student Registry Assistant (console)
# =============================================================================
#
# HOW TO RUN:
#   python main.py
#
# WHAT HAPPENS:
#   1. Loads .env and builds the settings (core/config.py)
#   2. Creates the Google ADK agent (agent/student_agent.py), which spawns
#      the FastMCP tool server (tools/mcp_server.py) over stdio
#   3. Reads questions from the console and sends them to the agent
#   4. Cleans each answer (core/sanitizer.py) and prints it
#
# The HTTP endpoint (api/server.py) runs the same agent behind
# POST /api/chat instead of a console loop.
# =============================================================================

import asyncio
import logging

from dotenv import load_dotenv

# Load environment variables from .env before the agent is built: LiteLlm
# reads provider settings (OLLAMA_API_BASE, API keys, ...) from the
# environment when it initializes.
load_dotenv()

from agent.session import StudentAssistant
from agent.student_agent import create_agent
from core.config import get_settings
from core.sanitizer import sanitize


async def run_agent():
    """Run the student registry assistant interactively."""
    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    # =========================================================================
    # Step 1: Create the agent and its conversation
    # =========================================================================
    print("=" * 70)
    print("  STUDENT REGISTRY ASSISTANT")
    print(f"  Model: {settings.model_name}")
    print(f"  Data:  {settings.data_file}")
    print("=" * 70)
    print("\n🔧 Initializing agent...")
    assistant = StudentAssistant(agent=create_agent(settings))
    print("✅ Agent initialized and ready!\n")

    # =========================================================================
    # Step 2: Interactive loop
    # =========================================================================
    print("💬 Ask about students: search by name or surname, add, or list.")
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

        print("\n🤖 Agent is thinking...\n")
        print("-" * 70)

        try:
            raw_response = await assistant.ask(user_input)
        except Exception as e:
            logging.getLogger(__name__).exception("Agent call failed")
            print(f"\n⚠️  The agent failed: {e}")
            continue

        final_response = sanitize(raw_response)
        if final_response:
            print(f"\n🤖 Agent:\n\n{final_response}")
        else:
            print("\n⚠️  No response generated. The agent may have encountered an error.")

        print("\n" + "=" * 70)


if __name__ == "__main__":
    asyncio.run(run_agent())
