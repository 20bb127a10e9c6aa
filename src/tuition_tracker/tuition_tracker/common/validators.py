from __future__ import annotations

import base64
import binascii
import math
from decimal import Decimal
from typing import Optional

from ..core.exceptions import ValidationError
from ..payments.amounts import sanitize_amount


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} est obligatoire")
    return str(value).strip()


def optional_text(value) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def require_one_of(value: Optional[str], field_name: str, choices) -> Optional[str]:
    if value is None:
        return None
    if value not in choices:
        raise ValidationError(f"{field_name} invalide: {value}")
    return value


def require_non_negative(value: float, field_name: str) -> float:
    if value < 0:
        raise ValidationError(f"{field_name} ne peut pas être négatif")
    return value


def require_photo_size(photo: Optional[str], max_bytes: int) -> Optional[str]:
    """Check a base64 data URI ("data:image/png;base64,....") against a decoded size cap."""
    if not photo:
        return None
    _, sep, encoded = photo.partition(",")
    if not sep:
        encoded = photo
    try:
        size = len(base64.b64decode(encoded, validate=False))
    except (binascii.Error, ValueError):
        raise ValidationError("Photo invalide")
    if size > max_bytes:
        raise ValidationError(f"La photo dépasse {max_bytes // (1024 * 1024)} Mo")
    return photo


def require_amount(value, field_name: str) -> float:
    """Read a money amount that must be a finite number once sanitised.

    Unlike parse_amount, garbage is rejected instead of counting as 0.
    """
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field_name} est obligatoire")
    if isinstance(value, (int, float, Decimal)):
        number = float(value)
    else:
        clean = sanitize_amount(str(value))
        if not clean.strip("."):
            raise ValidationError(f"{field_name} est invalide: {value!r}")
        number = float(clean)
    if not math.isfinite(number):
        raise ValidationError(f"{field_name} est invalide: {value!r}")
    return number
