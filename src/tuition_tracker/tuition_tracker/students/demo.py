from __future__ import annotations

from datetime import datetime

from .service import StudentService

DEMO_STUDENTS = [
    {
        "firstName": "Yassine",
        "lastName": "Haddad",
        "email": "yassine.haddad@example.ma",
        "phone": "0612345678",
        "level": "1ère Année",
        "cin": "AB123456",
        "cne": "R130000001",
        "payments": [
            {"month": "Septembre", "amountPaid": 1250, "method": "cash", "receiptNumber": "R-0001"},
            {"month": "Octobre", "amountPaid": 1250, "method": "transfer", "receiptNumber": "R-0002"},
        ],
    },
    {
        "firstName": "Salma",
        "lastName": "Bennani",
        "email": "salma.bennani@example.ma",
        "level": "Master 1",
        "totalAmountDue": 20000,
        "payments": [
            {"month": "Septembre", "amountPaid": 5000, "method": "card"},
        ],
    },
    {
        "firstName": "Omar",
        "lastName": "El Idrissi",
        "email": "omar.elidrissi@example.ma",
        "level": "Master 2",
    },
]


def seed_demo_students(service: StudentService, *, now: datetime | None = None) -> int:
    """Create the demo students when the table is empty. Returns how many were created."""
    if service.count_students() > 0:
        return 0
    for payload in DEMO_STUDENTS:
        service.create_student(payload, now=now)
    return len(DEMO_STUDENTS)
