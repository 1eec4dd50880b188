# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains the Google ADK agent configuration.
#
#   - prompt.py         the system prompt
#   - student_agent.py  create_agent(): LLM via LiteLlm + MCP tool connection
#   - session.py        StudentAssistant: one conversation, ask() → final text
#
# The agent decides WHICH tool to call and WHEN, and phrases the answer.  It
# holds no record logic (core/) and no tool implementations (tools/).
# =============================================================================
