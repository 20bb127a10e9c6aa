from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    """Repository interface for Student.

    Note (DIP): the service layer depends on this interface, not on a concrete
    database. Lookups return None/False for a missing id; storage failures raise
    StorageError (or NetworkError for the HTTP client).
    """

    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError

    def get_by_id(self, student_id: str) -> Optional[Student]:
        raise NotImplementedError

    def insert(self, student: Student) -> Student:
        """Persist a new student and return it with its assigned id."""

        raise NotImplementedError

    def save(self, student: Student) -> bool:
        """Replace the whole stored document for student.id."""

        raise NotImplementedError

    def delete_by_id(self, student_id: str) -> bool:
        raise NotImplementedError
