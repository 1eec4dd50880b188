# =============================================================================
# core/sanitizer.py  —  Agent Response Cleanup
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns whatever the agent returned into the text a user should see.
#   The raw value can be:
#     - plain text
#     - an object/dict carrying the answer in a "response" field
#     - a JSON string with the answer nested under data.result
#   and the answer itself may contain <think>...</think> reasoning traces
#   from the model, which must never reach the user.
#
# THE PIPELINE (each stage is total and returns a value for any input):
#
#   extract_answer_text → parse_json → locate_result_text
#                                    → strip_reasoning → collapse_blank_lines
#
#   If the text is not JSON it is already plain text and skips the
#   locate stage.  If it is JSON without a data.result string, the whole
#   structure is pretty-printed so nothing is silently dropped.
# =============================================================================

import json
import re
from collections.abc import Mapping
from typing import Any

ANSWER_FIELD = "response"

THINK_OPEN = "<think>"
THINK_CLOSE = "</think>"

_REASONING_RE = re.compile(re.escape(THINK_OPEN) + r".*?" + re.escape(THINK_CLOSE), re.DOTALL)
_BLANK_RUN_RE = re.compile(r"\n{3,}")


def extract_answer_text(raw: Any) -> str:
    """Pull the working string out of a raw agent response."""
    if isinstance(raw, Mapping):
        answer = raw.get(ANSWER_FIELD)
    else:
        answer = getattr(raw, ANSWER_FIELD, None)
    if answer:
        raw = answer

    if raw is None:
        return ""
    if isinstance(raw, str):
        return raw
    if isinstance(raw, (Mapping, list, tuple)):
        try:
            return json.dumps(raw, ensure_ascii=False)
        except (TypeError, ValueError):
            return str(raw)
    return str(raw)


def parse_json(text: str) -> tuple[bool, Any]:
    """Return (True, value) if text is JSON, else (False, None)."""
    try:
        return True, json.loads(text)
    except (TypeError, ValueError):
        return False, None


def locate_result_text(value: Any) -> str:
    """data.result when it is a string, otherwise a pretty dump of the whole value."""
    if isinstance(value, dict):
        data = value.get("data")
        if isinstance(data, dict) and isinstance(data.get("result"), str):
            return data["result"].strip()
    return json.dumps(value, indent=2, ensure_ascii=False)


def strip_reasoning(text: str) -> str:
    return _REASONING_RE.sub("", text).strip()


def collapse_blank_lines(text: str) -> str:
    return _BLANK_RUN_RE.sub("\n\n", text)


def sanitize(raw: Any) -> str:
    """Produce clean display text from a raw agent response.

    Never raises.  Trimmed plain text with no reasoning markup and no runs
    of blank lines comes back unchanged.
    """
    text = extract_answer_text(raw)
    is_json, value = parse_json(text)
    if is_json:
        text = locate_result_text(value)
    text = strip_reasoning(text)
    return collapse_blank_lines(text)
