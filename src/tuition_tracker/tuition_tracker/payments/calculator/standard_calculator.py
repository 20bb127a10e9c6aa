from __future__ import annotations

from decimal import Decimal

from ..amounts import percentage, to_decimal
from ..model import Ledger, Recovery
from .base import RecoveryCalculator


class StandardRecoveryCalculator(RecoveryCalculator):
    """Standard rule: round(100 * paid / due), half up, never capped."""

    def total_paid(self, ledger: Ledger) -> Decimal:
        return sum((to_decimal(r.amount_paid) for r in ledger), Decimal(0))

    def compute(self, ledger: Ledger, total_amount_due) -> Recovery:
        paid = self.total_paid(ledger)
        return Recovery(total_paid=float(paid), rate=percentage(paid, to_decimal(total_amount_due)))


def compute_recovery(ledger: Ledger, total_amount_due) -> Recovery:
    return StandardRecoveryCalculator().compute(ledger, total_amount_due)
