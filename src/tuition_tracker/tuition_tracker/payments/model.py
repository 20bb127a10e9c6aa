from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

from ..core.enums import PaymentMethod


@dataclass(frozen=True)
class PaymentRecord:
    """Domain entity: one month's payment.

    An amount of 0 means the month is unpaid.
    """

    month: str
    amount_paid: float = 0.0
    paid_on: Optional[date] = None
    method: Optional[PaymentMethod] = None
    receipt_number: Optional[str] = None

    @property
    def is_paid(self) -> bool:
        return self.amount_paid > 0


# Exactly 12 records, one per month, in academic order.
Ledger = Tuple[PaymentRecord, ...]


@dataclass(frozen=True)
class Recovery:
    total_paid: float
    rate: int
