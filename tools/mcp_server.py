# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines the MCP tools the agent can call.  Each tool is a thin wrapper
#   around a StudentStore method: it logs the call, runs the core operation
#   and turns the result into a short message the model can relay.
#
# THE FLOW:
#   1. The agent decides it needs student data
#   2. It calls a tool by name via MCP (e.g. "search_students_by_given_name")
#   3. FastMCP routes the call to the decorated function below
#   4. The function calls core/, formats the result, and returns a string
#
# TOOL NAMING CONVENTIONS:
#   - search_* / list_*  read-only, safe to retry
#   - add_*              write; appends a record and saves the file
#
# STATE:
#   One StudentStore per server process, built from the environment at
#   import time.  The store serializes its own writes.
#
# RUNNING THIS SERVER:
#   a) Standalone:  python -m tools.mcp_server
#   b) Spawned by the agent over stdio (see agent/student_agent.py)
# =============================================================================

import logging
import sys

from fastmcp import FastMCP

# The tools layer depends on core/ and nothing else.
from core.config import get_settings
from core.models import AddStatus
from core.student_store import StudentStore

# =============================================================================
# Logging Setup
# =============================================================================
# Logs go to STDERR: STDOUT carries the MCP protocol when running over stdio,
# and any stray line there corrupts the message stream.
#
# Color codes:
#   CYAN    incoming tool calls with parameters
#   YELLOW  intermediate status
#   GREEN   responses
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: str) -> str:
    """Log the tool response in GREEN, then return it."""
    logging.info(f"{_GREEN}  ← {tool_name} response: {result!r}{_RESET}")
    return result


# =============================================================================
# Server and store
# =============================================================================
mcp = FastMCP("student-registry")

store = StudentStore(settings.data_file, enforce_unique=settings.enforce_unique)


# =============================================================================
# TOOL 1: search_students_by_given_name
# =============================================================================
@mcp.tool()
def search_students_by_given_name(given_name: str) -> str:
    """Find students by their given (first) name.

    Matching ignores upper/lower case and accents ("jose" finds "José"),
    but the whole name must match: "Mar" does not find "María".

    Args:
        given_name: The student's given name, e.g. "José".

    Returns:
        One line per matching student ("📌 <given> <family> - Course: <course>"),
        or a message saying nobody was found.
    """
    _log_request("search_students_by_given_name", given_name=given_name)

    matches = store.search_by_given_name(given_name)
    _log_status(f"{len(matches)} match(es)")
    if not matches:
        return _log_response(
            "search_students_by_given_name",
            f'No students found with given name "{given_name}".',
        )
    return _log_response("search_students_by_given_name", store.render_listing(matches))


# =============================================================================
# TOOL 2: search_students_by_family_name
# =============================================================================
@mcp.tool()
def search_students_by_family_name(family_name: str) -> str:
    """Find students by their family name (surname).

    Matching ignores upper/lower case and accents; the whole surname must
    match.

    Args:
        family_name: The student's family name, e.g. "Pérez".

    Returns:
        One line per matching student, or a message saying nobody was found.
    """
    _log_request("search_students_by_family_name", family_name=family_name)

    matches = store.search_by_family_name(family_name)
    _log_status(f"{len(matches)} match(es)")
    if not matches:
        return _log_response(
            "search_students_by_family_name",
            f'No students found with family name "{family_name}".',
        )
    return _log_response("search_students_by_family_name", store.render_listing(matches))


# =============================================================================
# TOOL 3: add_student
# =============================================================================
# The only write tool.  The store reports whether the record was durably
# saved; a failure is turned into a message instead of an exception so the
# agent can tell the user what happened.
# =============================================================================
@mcp.tool()
def add_student(given_name: str, family_name: str, course: str) -> str:
    """Register a new student and save the student list.

    WHEN TO CALL THIS: only after searching by name to check the student
    is not already registered, and after the user has confirmed.

    Args:
        given_name: The student's given name (a single word), e.g. "Luis".
        family_name: The student's family name, e.g. "Pérez".
        course: The student's course, e.g. "4A", "4B", "5A".

    Returns:
        A confirmation message, or an explanation of why it was not saved.
    """
    _log_request("add_student", given_name=given_name, family_name=family_name, course=course)

    result = store.add(given_name, family_name, course)
    _log_status(f"status={result.status.value}, total={len(store)}")

    if result.status is AddStatus.DUPLICATE:
        message = f"Student {given_name} {family_name} already exists; not added."
    elif result.status is AddStatus.FAILED:
        message = f"Error adding student: {result.error}"
    else:
        message = f"Student {given_name} {family_name} added to course {course}."
    return _log_response("add_student", message)


# =============================================================================
# TOOL 4: list_students
# =============================================================================
@mcp.tool()
def list_students() -> str:
    """List every registered student, one per line, in registration order."""
    _log_request("list_students")

    listing = store.render_listing()
    if not listing:
        return _log_response("list_students", "No students registered.")
    _log_status(f"{len(store)} student(s)")
    return _log_response("list_students", listing)


# =============================================================================
# Server entry point
# =============================================================================
if __name__ == "__main__":
    mcp.run()
