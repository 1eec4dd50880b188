# =============================================================================
# api/__init__.py
# =============================================================================
# HTTP surface of the assistant (FastAPI).  Like tools/, it holds no record
# logic: it forwards prompts to agent/ and cleans answers with core/.
# =============================================================================
