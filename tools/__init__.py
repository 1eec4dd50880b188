# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool wrappers.
#
# ROLE:
#   tools/ is the translation layer between the agent and core/.  Each tool:
#     1. Calls a StudentStore method
#     2. Turns the result into a short text message for the model
#     3. Logs request and response to stderr
#
# Tools hold no business logic and know nothing about Google ADK.
# =============================================================================
