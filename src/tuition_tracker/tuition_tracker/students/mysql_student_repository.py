from __future__ import annotations

import json
import uuid
from dataclasses import replace
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Student
from .repository import StudentRepository
from .serializers import payment_to_dict, payments_from_list

_COLUMNS = """
    id, first_name, last_name, email, phone, parent_phone, birth_date, birth_place,
    cin, cne, photo, academic_year, level, guardian_name, guardian_phone,
    total_amount_due, payments, enrollment_date
"""


def _row_to_student(row: dict) -> Student:
    raw_payments = row.get("payments")
    if isinstance(raw_payments, (bytes, bytearray)):
        raw_payments = raw_payments.decode("utf-8")
    items = json.loads(raw_payments) if raw_payments else []

    return Student(
        id=row["id"],
        first_name=row["first_name"],
        last_name=row["last_name"],
        email=row["email"],
        phone=row.get("phone"),
        parent_phone=row.get("parent_phone"),
        birth_date=row.get("birth_date"),
        birth_place=row.get("birth_place"),
        cin=row.get("cin"),
        cne=row.get("cne"),
        photo=row.get("photo"),
        academic_year=row.get("academic_year"),
        level=row.get("level"),
        guardian_name=row.get("guardian_name"),
        guardian_phone=row.get("guardian_phone"),
        total_amount_due=float(row.get("total_amount_due") or 0),
        payments=payments_from_list(items),
        enrollment_date=row.get("enrollment_date"),
    )


def _params(student: Student) -> tuple:
    return (
        student.first_name,
        student.last_name,
        student.email,
        student.phone,
        student.parent_phone,
        student.birth_date,
        student.birth_place,
        student.cin,
        student.cne,
        student.photo,
        student.academic_year,
        student.level,
        student.guardian_name,
        student.guardian_phone,
        student.total_amount_due,
        json.dumps([payment_to_dict(p) for p in student.payments], ensure_ascii=False),
        student.enrollment_date,
    )


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM students ORDER BY created_seq")
            return [_row_to_student(r) for r in fetchall(cur)]

    def count(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS total FROM students")
            row = fetchone(cur)
            return int(row["total"]) if row else 0

    def get_by_id(self, student_id: str) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM students WHERE id=%s", (student_id,))
            row = fetchone(cur)
            if not row:
                return None
            return _row_to_student(row)

    def insert(self, student: Student) -> Student:
        student_id = uuid.uuid4().hex
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO students(
                    first_name, last_name, email, phone, parent_phone, birth_date, birth_place,
                    cin, cne, photo, academic_year, level, guardian_name, guardian_phone,
                    total_amount_due, payments, enrollment_date, id
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                _params(student) + (student_id,),
            )
        return replace(student, id=student_id)

    def save(self, student: Student) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE students
                SET first_name=%s, last_name=%s, email=%s, phone=%s, parent_phone=%s,
                    birth_date=%s, birth_place=%s, cin=%s, cne=%s, photo=%s,
                    academic_year=%s, level=%s, guardian_name=%s, guardian_phone=%s,
                    total_amount_due=%s, payments=%s, enrollment_date=%s
                WHERE id=%s
                """,
                _params(student) + (student.id,),
            )
            # MySQL reports 0 affected rows when nothing changed; fall back to an existence check.
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 AS found FROM students WHERE id=%s", (student.id,))
            return fetchone(cur) is not None

    def delete_by_id(self, student_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM students WHERE id=%s", (student_id,))
            return cur.rowcount > 0
