# =============================================================================
# agent/student_agent.py  —  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates the Google ADK agent that receives user questions, calls the
#   student tools over MCP, and writes the answer.
#
#   ┌──────────────────────────────────────────────────────────────┐
#   │                     Google ADK Agent                         │
#   │   System prompt ──▶ LLM (via LiteLlm) ──▶ MCP tool connection│
#   └──────────────────────────────────────────────────────────────┘
#                                                  │ stdio
#                                                  ▼
#                                   ┌──────────────────────────────┐
#                                   │ FastMCP server               │
#                                   │ (tools/mcp_server.py)        │
#                                   │  • search_students_by_*      │
#                                   │  • add_student               │
#                                   │  • list_students             │
#                                   └──────────────────────────────┘
#                                                  │
#                                                  ▼
#                                   ┌──────────────────────────────┐
#                                   │ core/ StudentStore + JSON    │
#                                   └──────────────────────────────┘
#
# MODEL:
#   Any LiteLlm model string works.  The default runs a local Ollama model
#   ("ollama_chat/qwen3:1.7b"); qwen3 emits <think> reasoning blocks, which
#   core/sanitizer.py removes before the answer is shown.
#
# MCP CONNECTION:
#   ADK starts the tool server as a subprocess with the current interpreter
#   and talks to it over stdin/stdout.  The subprocess gets this process's
#   environment so STUDENTS_DATA_FILE and friends apply there too.
# =============================================================================

import os
import sys
from typing import Optional

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from google.adk.tools.mcp_tool.mcp_session_manager import StdioConnectionParams
from mcp import StdioServerParameters

from agent.prompt import STUDENT_ASSISTANT_PROMPT
from core.config import Settings, get_settings

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def create_tool_connection() -> MCPToolset:
    """MCP toolset that spawns tools/mcp_server.py over stdio."""
    return MCPToolset(
        connection_params=StdioConnectionParams(
            server_params=StdioServerParameters(
                command=sys.executable,
                args=["-m", "tools.mcp_server"],
                cwd=PROJECT_ROOT,
                env=dict(os.environ),
            ),
        ),
    )


def create_agent(settings: Optional[Settings] = None) -> Agent:
    """Create and configure the student-records agent.

    The agent itself has no business logic: a system prompt, a model, and
    the MCP tool connection.

    Args:
        settings: Runtime settings; read from the environment if omitted.

    Returns:
        A configured Google ADK Agent instance.
    """
    settings = settings or get_settings()

    model = LiteLlm(
        model=settings.model_name,
        temperature=settings.temperature,
        timeout=settings.llm_timeout,
    )

    return Agent(
        name="student_registry_assistant",
        model=model,
        instruction=STUDENT_ASSISTANT_PROMPT,
        tools=[create_tool_connection()],
    )
