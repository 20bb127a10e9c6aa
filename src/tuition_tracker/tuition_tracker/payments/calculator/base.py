from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from ..model import Ledger, Recovery


class RecoveryCalculator(ABC):
    """Calculator interface (Strategy Pattern for recovery rate)."""

    @abstractmethod
    def total_paid(self, ledger: Ledger) -> Decimal:
        raise NotImplementedError

    @abstractmethod
    def compute(self, ledger: Ledger, total_amount_due: float) -> Recovery:
        raise NotImplementedError
