from __future__ import annotations

from typing import Iterable

from ..core.constants import MONTHS
from .model import Ledger, PaymentRecord


def empty_ledger() -> Ledger:
    return tuple(PaymentRecord(month=m) for m in MONTHS)


def build_ledger(existing: Iterable[PaymentRecord]) -> Ledger:
    """Merge a sparse list of payments into the 12-month academic calendar.

    Later records for the same month replace earlier ones. Records whose month
    is not a known month name are dropped silently.
    """
    slots = {m: PaymentRecord(month=m) for m in MONTHS}
    for record in existing or ():
        if record.month in slots:
            slots[record.month] = record
    return tuple(slots[m] for m in MONTHS)


def unknown_months(existing: Iterable[PaymentRecord]) -> list[str]:
    """Month names that build_ledger would drop."""
    return [r.month for r in existing or () if r.month not in MONTHS]
