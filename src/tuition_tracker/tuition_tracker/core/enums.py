from __future__ import annotations

from enum import Enum
from typing import Optional


class Role(str, Enum):
    """User role used for access checks."""

    ADMIN = "admin"
    READONLY = "readonly"


class PaymentMethod(str, Enum):
    """How a monthly payment was settled."""

    CASH = "cash"
    TRANSFER = "transfer"
    CARD = "card"

    @property
    def label(self) -> str:
        return _METHOD_LABELS[self]

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["PaymentMethod"]:
        """Accept either the stored value ("cash") or the display label ("Espèces")."""
        if value is None:
            return None
        text = str(value).strip()
        if not text:
            return None
        for method in cls:
            if text.lower() in (method.value, method.label.lower()):
                return method
        raise ValueError(f"Unknown payment method: {value!r}")


_METHOD_LABELS = {
    PaymentMethod.CASH: "Espèces",
    PaymentMethod.TRANSFER: "Virement",
    PaymentMethod.CARD: "Carte",
}
