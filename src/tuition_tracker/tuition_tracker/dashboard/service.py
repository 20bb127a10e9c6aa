from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from ..core.constants import DEFAULT_RECENT_STUDENTS
from ..payments.amounts import percentage, to_decimal
from ..payments.calculator.base import RecoveryCalculator
from ..payments.calculator.standard_calculator import StandardRecoveryCalculator
from ..students.model import Student
from ..students.repository import StudentRepository

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1)


@dataclass(frozen=True)
class DashboardStats:
    total_students: int = 0
    total_payments: float = 0.0
    recovery_rate: int = 0
    recent_students: List[Student] = field(default_factory=list)


class DashboardService:
    """Summary figures for the home page, optionally for one academic level.

    Never raises: if the students cannot be loaded, a zeroed DashboardStats is
    returned and the error is logged.
    """

    def __init__(
        self,
        students: StudentRepository,
        *,
        calculator: Optional[RecoveryCalculator] = None,
        recent_limit: int = DEFAULT_RECENT_STUDENTS,
    ):
        self._students = students
        self._calculator = calculator or StandardRecoveryCalculator()
        self._recent_limit = int(recent_limit)

    def get_stats(self, level: Optional[str] = None) -> DashboardStats:
        try:
            students = list(self._students.list_all())
        except Exception:
            logger.exception("Could not load students for dashboard (level=%r)", level)
            return DashboardStats()

        if level:
            students = [s for s in students if s.level == level]

        total_paid = Decimal(0)
        total_due = Decimal(0)
        for s in students:
            total_paid += self._calculator.total_paid(s.ledger)
            total_due += to_decimal(s.total_amount_due)

        # Set-level rate, not an average of per-student rates.
        return DashboardStats(
            total_students=len(students),
            total_payments=float(total_paid),
            recovery_rate=percentage(total_paid, total_due),
            recent_students=self.recent_students(students),
        )

    def recent_students(self, students: List[Student]) -> List[Student]:
        ordered = sorted(students, key=lambda s: s.enrollment_date or _EPOCH, reverse=True)
        return ordered[: self._recent_limit]
