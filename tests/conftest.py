from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Optional

import pytest

from src.tuition_tracker.tuition_tracker.container import build_services
from src.tuition_tracker.tuition_tracker.main import create_app
from src.tuition_tracker.tuition_tracker.students.model import Student


class InMemoryStudents:
    def __init__(self, students=()):
        self._by_id: dict[str, Student] = {}
        self._next_id = 0
        self.saves = 0
        for s in students:
            self._by_id[s.id] = s

    def list_all(self):
        return list(self._by_id.values())

    def count(self) -> int:
        return len(self._by_id)

    def get_by_id(self, student_id: str) -> Optional[Student]:
        return self._by_id.get(student_id)

    def insert(self, student: Student) -> Student:
        self._next_id += 1
        created = replace(student, id=f"s{self._next_id}")
        self._by_id[created.id] = created
        return created

    def save(self, student: Student) -> bool:
        if student.id not in self._by_id:
            return False
        self.saves += 1
        self._by_id[student.id] = student
        return True

    def delete_by_id(self, student_id: str) -> bool:
        return self._by_id.pop(student_id, None) is not None


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 10, 6, 9, 30)


@pytest.fixture
def students_repo() -> InMemoryStudents:
    return InMemoryStudents()


@pytest.fixture
def container(students_repo):
    return build_services(students_repo)


@pytest.fixture
def app(container):
    app = create_app(container=container, settings_module="config.testing")
    app.testing = True
    return app


@pytest.fixture
def client(app):
    with app.test_client() as c:
        yield c
