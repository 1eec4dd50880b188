# =============================================================================
# api/server.py  —  HTTP Chat Endpoint
# =============================================================================
#
#   POST /api/chat   {"prompt": "..."}  →  {"response": "..."}
#
# The endpoint forwards the prompt to the agent and runs the raw answer
# through core.sanitizer before returning it, so reasoning traces and
# nested JSON never reach the client.
#
# Errors:
#   400  body is not a JSON object with a non-blank string "prompt"
#   500  the agent call failed
#
# RUNNING:
#   python -m api.server          (binds HOST:PORT, default 0.0.0.0:3000)
# =============================================================================

import logging
from typing import Optional

import uvicorn
from dotenv import load_dotenv
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from core.config import get_settings
from core.sanitizer import sanitize

logger = logging.getLogger("api.chat")

app = FastAPI(title="Student Registry Assistant")

_assistant = None


class ChatRequest(BaseModel):
    prompt: str


def get_assistant():
    """Shared StudentAssistant, created on first use."""
    global _assistant
    if _assistant is None:
        # ADK is only imported once a chat actually needs the agent
        from agent.session import StudentAssistant

        _assistant = StudentAssistant()
    return _assistant


async def _read_prompt(request: Request) -> Optional[str]:
    """The prompt from a JSON body, or None if the body does not carry one."""
    try:
        payload = await request.json()
    except ValueError:
        return None
    try:
        prompt = ChatRequest.model_validate(payload).prompt
    except ValidationError:
        return None
    return prompt if prompt.strip() else None


@app.post("/api/chat")
async def chat(request: Request, assistant=Depends(get_assistant)):
    prompt = await _read_prompt(request)
    if prompt is None:
        logger.warning("Rejected chat request without a usable prompt")
        return JSONResponse(
            status_code=400,
            content={"error": "Missing 'prompt' (string) in request body."},
        )

    logger.info("💬 Chat request: %r", prompt)
    try:
        raw = await assistant.ask(prompt)
    except Exception as e:
        logger.exception("Agent call failed")
        return JSONResponse(
            status_code=500,
            content={"error": str(e) or "Internal server error"},
        )

    answer = sanitize(raw)
    logger.debug("Raw agent answer: %r", raw)
    return {"response": answer}


def main() -> None:
    load_dotenv()
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    logger.info("Listening on http://%s:%d/api/chat", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
