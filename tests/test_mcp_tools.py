from __future__ import annotations

import asyncio

import pytest
from fastmcp import Client

from core.student_store import StudentStore
from tools import mcp_server


@pytest.fixture
def tool_store(monkeypatch, seeded_store):
    monkeypatch.setattr(mcp_server, "store", seeded_store)
    return seeded_store


def call_tool(name: str, arguments: dict) -> str:
    async def _call():
        async with Client(mcp_server.mcp) as client:
            result = await client.call_tool(name, arguments)
            return result.content[0].text

    return asyncio.run(_call())


def test_tools_are_registered():
    async def _names():
        async with Client(mcp_server.mcp) as client:
            return {tool.name for tool in await client.list_tools()}

    assert asyncio.run(_names()) == {
        "search_students_by_given_name",
        "search_students_by_family_name",
        "add_student",
        "list_students",
    }


def test_search_by_given_name_tool(tool_store):
    text = call_tool("search_students_by_given_name", {"given_name": "jose"})

    assert "José Pérez - Course: 4B" in text


def test_search_by_family_name_tool_not_found(tool_store):
    text = call_tool("search_students_by_family_name", {"family_name": "Smith"})

    assert text == 'No students found with family name "Smith".'


def test_add_student_tool(tool_store, data_file):
    text = call_tool("add_student", {"given_name": "Luis", "family_name": "Pérez", "course": "4B"})

    assert text == "Student Luis Pérez added to course 4B."
    assert StudentStore(data_file).records[-1].given_name == "Luis"


def test_add_student_tool_reports_write_errors(monkeypatch, tmp_path):
    monkeypatch.setattr(mcp_server, "store", StudentStore(tmp_path))

    text = call_tool("add_student", {"given_name": "Luis", "family_name": "Pérez", "course": "4B"})

    assert text.startswith("Error adding student:")


def test_add_student_tool_reports_duplicates(monkeypatch, data_file):
    store = StudentStore(data_file, enforce_unique=True)
    store.add("Ana", "Gómez", "5A")
    monkeypatch.setattr(mcp_server, "store", store)

    text = call_tool("add_student", {"given_name": "ana", "family_name": "gomez", "course": "5A"})

    assert text == "Student ana gomez already exists; not added."


def test_list_students_tool(tool_store):
    text = call_tool("list_students", {})

    assert text.count("📌") == 3


def test_list_students_tool_when_empty(monkeypatch, store):
    monkeypatch.setattr(mcp_server, "store", store)

    assert call_tool("list_students", {}) == "No students registered."
