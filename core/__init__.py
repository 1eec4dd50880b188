# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL business logic of the student registry:
#   - models.py         records, load/add results, PersistenceError
#   - student_store.py  the JSON-backed store, normalization and search
#   - sanitizer.py      cleanup of raw agent responses for display
#   - config.py         environment-driven settings
#
# Nothing in this package imports Google ADK, FastMCP or FastAPI.  Every
# module here imports in a bare Python REPL with no network access.
# =============================================================================
