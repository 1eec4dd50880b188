from __future__ import annotations

import json

import pytest

from core.student_store import StudentStore


def write_students(path, students) -> None:
    """Write a students file in the on-disk format."""
    path.write_text(json.dumps({"alumnos": students}, ensure_ascii=False), encoding="utf-8")


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "data" / "alumnos.json"


@pytest.fixture
def store(data_file):
    return StudentStore(data_file)


@pytest.fixture
def seeded_store(data_file):
    data_file.parent.mkdir(parents=True)
    write_students(data_file, [
        {"nombre": "José", "apellido": "Pérez", "curso": "4B"},
        {"nombre": "María", "apellido": "Gómez", "curso": "5A"},
        {"nombre": "Ana", "apellido": "Gómez", "curso": "5A"},
    ])
    return StudentStore(data_file)
