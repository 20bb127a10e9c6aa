from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Dict, List, Optional

from ..common.datetime_utils import default_academic_year, now_local
from ..common.validators import (
    optional_text,
    require_amount,
    require_non_empty,
    require_non_negative,
    require_one_of,
    require_photo_size,
)
from ..core.constants import DEFAULT_TOTAL_AMOUNT_DUE, LEVELS, MAX_PHOTO_BYTES
from ..core.enums import PaymentMethod
from ..core.exceptions import NotFoundError, ValidationError
from ..payments.ledger import unknown_months
from ..payments.model import PaymentRecord
from .model import Student
from .repository import StudentRepository
from .serializers import payload_to_fields

logger = logging.getLogger(__name__)

_OPTIONAL_TEXT_FIELDS = (
    "phone",
    "parent_phone",
    "birth_place",
    "cin",
    "cne",
    "photo",
    "academic_year",
    "level",
    "guardian_name",
    "guardian_phone",
)

_SEARCH_FIELDS = ("first_name", "last_name", "email", "phone", "cne", "cin")


class StudentService:
    """Use case: manage students and their monthly payments (admin)."""

    def __init__(
        self,
        students: StudentRepository,
        *,
        default_total_amount_due: float = DEFAULT_TOTAL_AMOUNT_DUE,
        max_photo_bytes: int = MAX_PHOTO_BYTES,
    ):
        self._students = students
        self._default_total_amount_due = float(default_total_amount_due)
        self._max_photo_bytes = int(max_photo_bytes)

    def list_students(self, *, search: Optional[str] = None, level: Optional[str] = None) -> List[Student]:
        students = list(self._students.list_all())

        if level and level != "all":
            students = [s for s in students if s.level == level]

        term = (search or "").strip().lower()
        if term:
            students = [
                s for s in students if any(term in (getattr(s, f) or "").lower() for f in _SEARCH_FIELDS)
            ]
        return students

    def count_students(self) -> int:
        return self._students.count()

    def get_student(self, student_id: str) -> Student:
        student = self._students.get_by_id(student_id)
        if not student:
            raise NotFoundError("Étudiant non trouvé")
        return student

    def create_student(self, payload: Dict[str, Any], *, now=None) -> Student:
        fields = self._clean_fields(payload_to_fields(payload), partial=False)
        now = now or now_local()
        fields.setdefault("total_amount_due", self._default_total_amount_due)
        if not fields.get("academic_year"):
            fields["academic_year"] = default_academic_year(now.date())

        student = Student(
            id=None,
            first_name=fields.pop("first_name"),
            last_name=fields.pop("last_name"),
            email=fields.pop("email"),
            enrollment_date=now,
            **fields,
        )
        created = self._students.insert(student)
        self._warn_unknown_months(created)
        return created

    def update_student(self, student_id: str, payload: Dict[str, Any]) -> Student:
        current = self.get_student(student_id)
        fields = self._clean_fields(payload_to_fields(payload), partial=True)

        updated = replace(current, **fields)
        if not self._students.save(updated):
            raise NotFoundError("Étudiant non trouvé")
        self._warn_unknown_months(updated)
        return updated

    def delete_student(self, student_id: str) -> None:
        if not self._students.delete_by_id(student_id):
            raise NotFoundError("Étudiant non trouvé")

    def append_payment(
        self,
        student_id: str,
        *,
        month: str,
        amount,
        method: Optional[str] = None,
        receipt_number: Optional[str] = None,
        now=None,
    ) -> Student:
        """Record a payment for a month.

        Appends to the stored list even if the month already has a payment;
        the ledger view shows the most recent one.
        """
        month = require_non_empty(month, "Le mois")
        amount_paid = require_non_negative(require_amount(amount, "Le montant"), "Le montant")
        try:
            payment_method = PaymentMethod.parse(method) or PaymentMethod.CASH
        except ValueError as e:
            raise ValidationError(f"Mode de paiement invalide: {method}") from e

        student = self.get_student(student_id)
        record = PaymentRecord(
            month=month,
            amount_paid=amount_paid,
            paid_on=(now or now_local()).date(),
            method=payment_method,
            receipt_number=optional_text(receipt_number),
        )
        updated = replace(student, payments=student.payments + (record,))
        if not self._students.save(updated):
            raise NotFoundError("Étudiant non trouvé")
        self._warn_unknown_months(updated)
        return updated

    def _clean_fields(self, fields: Dict[str, Any], *, partial: bool) -> Dict[str, Any]:
        for name, label in (("first_name", "Le prénom"), ("last_name", "Le nom"), ("email", "L'email")):
            if name in fields or not partial:
                fields[name] = require_non_empty(fields.get(name), label)

        for name in _OPTIONAL_TEXT_FIELDS:
            if name in fields:
                fields[name] = optional_text(fields[name])

        if "level" in fields:
            require_one_of(fields["level"], "Niveau", LEVELS)
        if "photo" in fields:
            require_photo_size(fields["photo"], self._max_photo_bytes)
        if "total_amount_due" in fields:
            require_non_negative(fields["total_amount_due"], "Le montant total")
        if "payments" in fields:
            for p in fields["payments"]:
                require_non_negative(p.amount_paid, "Le montant")
        return fields

    def _warn_unknown_months(self, student: Student) -> None:
        dropped = unknown_months(student.payments)
        if dropped:
            logger.warning("Student %s has payments for unknown months %s; they are left out of the ledger", student.id, dropped)
