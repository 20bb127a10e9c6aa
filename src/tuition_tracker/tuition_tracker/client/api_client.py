from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

import requests
from requests.exceptions import RequestException

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    NetworkError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from ..students.model import Student
from ..students.repository import StudentRepository
from ..students.serializers import STUDENT_FIELDS, payment_to_dict, student_from_dict


def _student_body(student: Student) -> Dict[str, Any]:
    body = {key: getattr(student, attr) for key, attr in STUDENT_FIELDS.items()}
    body["birthDate"] = student.birth_date.isoformat() if student.birth_date else None
    body["payments"] = [payment_to_dict(p) for p in student.payments]
    return body


class StudentApiClient(StudentRepository):
    """StudentRepository over the REST API, for code running outside the server.

    Transport failures raise NetworkError; server-side failures raise
    StorageError. Lookups of an unknown id return None/False like the MySQL
    repository does.
    """

    def __init__(self, base_url: str, *, timeout: float = 15, session: Optional[requests.Session] = None):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._http = session or requests.Session()

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        url = f"{self._base_url}{path}"
        try:
            r = self._http.request(method, url, timeout=self._timeout, **kwargs)
        except RequestException as e:
            raise NetworkError(f"Network error contacting {url}: {type(e).__name__}: {e}") from e

        if r.status_code == 400:
            raise ValidationError(self._message(r))
        if r.status_code == 401:
            raise AuthenticationError(self._message(r))
        if r.status_code == 403:
            raise AuthorizationError(self._message(r))
        if r.status_code >= 500:
            raise StorageError(self._message(r))
        return r

    @staticmethod
    def _message(r: requests.Response) -> str:
        try:
            data = r.json()
        except ValueError:
            return f"HTTP {r.status_code}: {r.text}"
        return str(data.get("message") or data.get("error") or f"HTTP {r.status_code}")

    @staticmethod
    def _json(r: requests.Response):
        try:
            return r.json()
        except ValueError as e:
            raise NetworkError(f"Non-JSON response (HTTP {r.status_code})") from e

    def login(self, email: str, password: str) -> dict:
        """Open a session; the cookie is kept on the underlying requests.Session."""
        r = self._request("POST", "/auth/login", json={"email": email, "password": password})
        return self._json(r)

    def list_all(self) -> Sequence[Student]:
        r = self._request("GET", "/students")
        return [student_from_dict(item) for item in self._json(r)]

    def count(self) -> int:
        r = self._request("GET", "/students/count")
        return int(self._json(r).get("total") or 0)

    def get_by_id(self, student_id: str) -> Optional[Student]:
        r = self._request("GET", f"/students/{student_id}")
        if r.status_code == 404:
            return None
        return student_from_dict(self._json(r))

    def insert(self, student: Student) -> Student:
        r = self._request("POST", "/students", json=_student_body(student))
        return student_from_dict(self._json(r))

    def save(self, student: Student) -> bool:
        r = self._request("PUT", f"/students/{student.id}", json=_student_body(student))
        return r.status_code != 404

    def delete_by_id(self, student_id: str) -> bool:
        r = self._request("DELETE", f"/students/{student_id}")
        return r.status_code != 404

    def append_payment(
        self,
        student_id: str,
        *,
        month: str,
        amount,
        method: Optional[str] = None,
        receipt_number: Optional[str] = None,
    ) -> Student:
        body = {"month": month, "amount": amount, "method": method, "receiptNumber": receipt_number}
        r = self._request("POST", f"/students/{student_id}/payments", json=body)
        if r.status_code == 404:
            raise NotFoundError(self._message(r))
        return student_from_dict(self._json(r))
