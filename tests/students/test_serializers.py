from __future__ import annotations

from datetime import date, datetime

import pytest

from src.tuition_tracker.tuition_tracker.core.enums import PaymentMethod
from src.tuition_tracker.tuition_tracker.core.exceptions import ValidationError
from src.tuition_tracker.tuition_tracker.payments.model import PaymentRecord
from src.tuition_tracker.tuition_tracker.students.model import Student
from src.tuition_tracker.tuition_tracker.students.serializers import (
    payload_to_fields,
    student_from_dict,
    student_to_dict,
)


def _student():
    return Student(
        id="abc",
        first_name="Salma",
        last_name="Bennani",
        email="salma@example.ma",
        birth_date=date(2003, 5, 17),
        level="Master 1",
        total_amount_due=15000,
        payments=(
            PaymentRecord(month="Septembre", amount_paid=3750, paid_on=date(2025, 9, 3), method=PaymentMethod.CASH),
            PaymentRecord(month="Unknown", amount_paid=100),
        ),
        enrollment_date=datetime(2025, 9, 1, 8, 0),
    )


def test_student_to_dict_exposes_computed_fields():
    data = student_to_dict(_student())

    assert data["id"] == "abc"
    assert data["firstName"] == "Salma"
    assert data["birthDate"] == "2003-05-17"
    assert data["enrollmentDate"] == "2025-09-01T08:00:00"
    assert data["totalPaid"] == 3750
    assert data["recoveryRate"] == 25
    assert len(data["ledger"]) == 12
    assert data["ledger"][0] == {
        "month": "Septembre",
        "amountPaid": 3750,
        "paidOn": "2025-09-03",
        "method": "cash",
        "receiptNumber": None,
    }
    # Stored list is returned as is, unknown month included.
    assert [p["month"] for p in data["payments"]] == ["Septembre", "Unknown"]


def test_payload_to_fields_only_returns_sent_keys():
    fields = payload_to_fields({"lastName": "X", "totalAmount": "12 000", "ledger": [], "recoveryRate": 3})

    assert fields == {"last_name": "X", "total_amount_due": 12000.0}


def test_payload_to_fields_rejects_bad_input():
    with pytest.raises(ValidationError):
        payload_to_fields(None)
    with pytest.raises(ValidationError):
        payload_to_fields({"birthDate": "17/05/2003"})
    with pytest.raises(ValidationError):
        payload_to_fields({"payments": "Septembre"})
    with pytest.raises(ValidationError):
        payload_to_fields({"payments": [{"month": "Mai", "amount": 1, "method": "bitcoin"}]})


def test_student_from_dict_reads_api_output():
    original = _student()

    rebuilt = student_from_dict(student_to_dict(original))

    assert rebuilt == original


@pytest.mark.parametrize("value", ["abc", ".", "", None, True, "1" * 400, float("inf"), float("nan")])
def test_payload_to_fields_rejects_unreadable_total(value):
    with pytest.raises(ValidationError):
        payload_to_fields({"totalAmountDue": value})


def test_payload_to_fields_rejects_unreadable_payment_amount():
    with pytest.raises(ValidationError):
        payload_to_fields({"payments": [{"month": "Mai", "amountPaid": "n/a"}]})
    with pytest.raises(ValidationError):
        payload_to_fields({"payments": [{"month": "Mai", "amount": "9" * 400}]})

    # A payment without an amount is still a zero payment.
    fields = payload_to_fields({"payments": [{"month": "Mai"}]})
    assert fields["payments"][0].amount_paid == 0.0
