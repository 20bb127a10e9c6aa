"""Mapping between Student entities and the camelCase JSON used on the wire."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

from ..common.datetime_utils import parse_iso_date, parse_iso_datetime
from ..common.validators import require_amount
from ..core.enums import PaymentMethod
from ..core.exceptions import ValidationError
from ..payments.calculator.base import RecoveryCalculator
from ..payments.calculator.standard_calculator import StandardRecoveryCalculator
from ..payments.model import PaymentRecord
from .model import Student

# JSON key -> Student attribute, for the plain fields.
STUDENT_FIELDS = {
    "firstName": "first_name",
    "lastName": "last_name",
    "email": "email",
    "phone": "phone",
    "parentPhone": "parent_phone",
    "birthDate": "birth_date",
    "birthPlace": "birth_place",
    "cin": "cin",
    "cne": "cne",
    "photo": "photo",
    "academicYear": "academic_year",
    "level": "level",
    "guardianName": "guardian_name",
    "guardianPhone": "guardian_phone",
    "totalAmountDue": "total_amount_due",
}

# Older clients send these names.
LEGACY_FIELDS = {
    "totalAmount": "total_amount_due",
}


def payment_to_dict(record: PaymentRecord) -> Dict[str, Any]:
    return {
        "month": record.month,
        "amountPaid": record.amount_paid,
        "paidOn": record.paid_on.isoformat() if record.paid_on else None,
        "method": record.method.value if record.method else None,
        "receiptNumber": record.receipt_number,
    }


def payment_from_dict(data: Dict[str, Any]) -> PaymentRecord:
    if not isinstance(data, dict):
        raise ValidationError("Paiement invalide")
    amount = data.get("amountPaid", data.get("amount"))
    try:
        return PaymentRecord(
            month=str(data.get("month") or "").strip(),
            amount_paid=0.0 if amount is None else require_amount(amount, "Le montant"),
            paid_on=parse_iso_date(data.get("paidOn", data.get("date"))),
            method=PaymentMethod.parse(data.get("method")),
            receipt_number=(str(data["receiptNumber"]).strip() or None) if data.get("receiptNumber") else None,
        )
    except ValueError as e:
        raise ValidationError(f"Paiement invalide: {e}") from e


def payments_from_list(items: Optional[Iterable[Dict[str, Any]]]) -> tuple:
    if items is None:
        return ()
    if not isinstance(items, (list, tuple)):
        raise ValidationError("Les paiements doivent être une liste")
    return tuple(payment_from_dict(item) for item in items)


def payload_to_fields(data: Dict[str, Any]) -> Dict[str, Any]:
    """Pick the Student attributes present in a JSON body.

    Only keys actually sent are returned, so a partial body leaves the other
    fields untouched on update. Computed keys (id, ledger, recoveryRate, ...)
    are ignored.
    """
    if not isinstance(data, dict):
        raise ValidationError("Corps de requête JSON invalide")

    fields: Dict[str, Any] = {}
    for key, attr in {**LEGACY_FIELDS, **STUDENT_FIELDS}.items():
        if key in data:
            fields[attr] = data[key]

    try:
        if "birth_date" in fields:
            fields["birth_date"] = parse_iso_date(fields["birth_date"])
    except ValueError as e:
        raise ValidationError(f"Date de naissance invalide: {e}") from e

    if "total_amount_due" in fields:
        fields["total_amount_due"] = require_amount(fields["total_amount_due"], "Le montant total")

    if "payments" in data:
        fields["payments"] = payments_from_list(data["payments"])

    return fields


def student_to_dict(student: Student, calculator: Optional[RecoveryCalculator] = None) -> Dict[str, Any]:
    calculator = calculator or StandardRecoveryCalculator()
    ledger = student.ledger
    recovery = calculator.compute(ledger, student.total_amount_due)

    out: Dict[str, Any] = {"id": student.id}
    for key, attr in STUDENT_FIELDS.items():
        out[key] = getattr(student, attr)
    out["birthDate"] = student.birth_date.isoformat() if student.birth_date else None
    out["payments"] = [payment_to_dict(p) for p in student.payments]
    out["ledger"] = [payment_to_dict(p) for p in ledger]
    out["enrollmentDate"] = student.enrollment_date.isoformat() if student.enrollment_date else None
    out["totalPaid"] = recovery.total_paid
    out["recoveryRate"] = recovery.rate
    return out


def student_from_dict(data: Dict[str, Any]) -> Student:
    """Rebuild a Student from an API response (inverse of student_to_dict)."""
    fields = payload_to_fields(data)
    try:
        enrollment_date = parse_iso_datetime(data.get("enrollmentDate"))
    except ValueError as e:
        raise ValidationError(f"Date d'inscription invalide: {e}") from e
    return Student(
        id=data.get("id"),
        first_name=fields.pop("first_name", "") or "",
        last_name=fields.pop("last_name", "") or "",
        email=fields.pop("email", "") or "",
        enrollment_date=enrollment_date,
        **fields,
    )
