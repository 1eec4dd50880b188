from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from api.server import app, get_assistant


class FakeAssistant:
    def __init__(self, answer=None, error=None):
        self.answer = answer
        self.error = error
        self.prompts = []

    async def ask(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.answer


@pytest.fixture
def client_with():
    def _make(assistant):
        app.dependency_overrides[get_assistant] = lambda: assistant
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


def test_chat_returns_sanitized_answer(client_with):
    answer = "<think>look up Ana</think>\nFound:\n\n\n\n📌 Ana Gómez - Course: 5A\n"
    assistant = FakeAssistant(answer=answer)
    client = client_with(assistant)

    resp = client.post("/api/chat", json={"prompt": "Who is Ana?"})

    assert resp.status_code == 200
    assert resp.json() == {"response": "Found:\n\n📌 Ana Gómez - Course: 5A"}
    assert assistant.prompts == ["Who is Ana?"]


@pytest.mark.parametrize("body", [{}, {"prompt": 5}, {"prompt": "   "}, ["a"], None])
def test_chat_rejects_missing_prompt(client_with, body):
    assistant = FakeAssistant(answer="unused")
    client = client_with(assistant)

    resp = client.post("/api/chat", json=body)

    assert resp.status_code == 400
    assert "prompt" in resp.json()["error"]
    assert assistant.prompts == []


@pytest.mark.parametrize("content", [b"", b"{not json", b"\xff\xfe"])
def test_chat_rejects_unparsable_body(client_with, content):
    assistant = FakeAssistant(answer="unused")
    client = client_with(assistant)

    resp = client.post(
        "/api/chat", content=content, headers={"Content-Type": "application/json"},
    )

    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing 'prompt' (string) in request body."}
    assert assistant.prompts == []


def test_chat_reports_agent_failure(client_with):
    client = client_with(FakeAssistant(error=RuntimeError("model timed out")))

    resp = client.post("/api/chat", json={"prompt": "List students"})

    assert resp.status_code == 500
    assert resp.json() == {"error": "model timed out"}
