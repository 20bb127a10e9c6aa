from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional, Tuple

from ..core.constants import DEFAULT_TOTAL_AMOUNT_DUE
from ..payments.ledger import build_ledger
from ..payments.model import Ledger, PaymentRecord


@dataclass(frozen=True)
class Student:
    """Domain entity: a student and the payments recorded for them.

    `payments` is the stored sparse list, in the order the payments were
    recorded. It may hold several records for one month; `ledger` is the
    12-month view derived from it.
    """

    id: Optional[str]
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    parent_phone: Optional[str] = None
    birth_date: Optional[date] = None
    birth_place: Optional[str] = None
    cin: Optional[str] = None
    cne: Optional[str] = None
    photo: Optional[str] = None
    academic_year: Optional[str] = None
    level: Optional[str] = None
    guardian_name: Optional[str] = None
    guardian_phone: Optional[str] = None
    total_amount_due: float = float(DEFAULT_TOTAL_AMOUNT_DUE)
    payments: Tuple[PaymentRecord, ...] = field(default_factory=tuple)
    enrollment_date: Optional[datetime] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def ledger(self) -> Ledger:
        return build_ledger(self.payments)
