# =============================================================================
# agent/session.py  —  Conversation Runner
# =============================================================================
#
# Wraps the ADK Runner + InMemorySessionService pair so callers (the console
# loop in main.py and the HTTP endpoint in api/server.py) only deal with
# "send a prompt, get the final text back".
#
# One StudentAssistant holds one conversation: the session is created on the
# first ask() and reused afterwards, so follow-up questions keep context.
# =============================================================================

import asyncio
import logging
from typing import Optional

from google.adk.agents import Agent
from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.student_agent import create_agent

logger = logging.getLogger(__name__)

APP_NAME = "student_registry"


class StudentAssistant:
    """A single conversation with the student-records agent."""

    def __init__(self, agent: Optional[Agent] = None, user_id: str = "default_user"):
        self.agent = agent or create_agent()
        self.user_id = user_id
        self.session_service = InMemorySessionService()
        self.runner = Runner(
            agent=self.agent,
            app_name=APP_NAME,
            session_service=self.session_service,
        )
        self._session_id: Optional[str] = None
        self._lock = asyncio.Lock()

    async def _ensure_session(self) -> str:
        if self._session_id is None:
            session = await self.session_service.create_session(
                app_name=APP_NAME,
                user_id=self.user_id,
            )
            self._session_id = session.id
        return self._session_id

    async def ask(self, prompt: str) -> str:
        """Send one user message and return the agent's final text.

        Returns an empty string if the agent produced no text.  Calls are
        serialized: one turn at a time per conversation.
        """
        async with self._lock:
            session_id = await self._ensure_session()
            message = types.Content(role="user", parts=[types.Part(text=prompt)])

            final_response = ""
            async for event in self.runner.run_async(
                user_id=self.user_id,
                session_id=session_id,
                new_message=message,
            ):
                if not (event.content and event.content.parts):
                    continue
                for part in event.content.parts:
                    if getattr(part, "function_call", None):
                        logger.info("Calling tool: %s", part.function_call.name)
                    if getattr(part, "text", None):
                        final_response = part.text

            return final_response
