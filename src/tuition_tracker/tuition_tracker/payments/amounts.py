from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal

_NOT_AMOUNT_CHARS = re.compile(r"[^\d.]")


def sanitize_amount(value: str) -> str:
    """Keep digits and a single decimal point.

    Extra points are dropped and the digits after them concatenated,
    so "12.34.56" becomes "12.3456".
    """
    clean = _NOT_AMOUNT_CHARS.sub("", value or "")
    parts = clean.split(".")
    if len(parts) > 2:
        clean = f"{parts[0]}.{''.join(parts[1:])}"
    return clean


def parse_amount(value) -> float:
    """Convert user or stored input to a number; anything unparsable counts as 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float, Decimal)):
        number = float(value)
        return number if math.isfinite(number) else 0.0

    clean = sanitize_amount(str(value))
    try:
        number = float(clean)
    except ValueError:
        return 0.0
    return number if math.isfinite(number) else 0.0


def to_decimal(value) -> Decimal:
    """Exact decimal form of parse_amount(value), for summing without float drift."""
    return Decimal(str(parse_amount(value)))


def percentage(part, whole) -> int:
    """Rounded share of `part` in `whole`, not capped at 100. Returns 0 for an empty whole."""
    if whole <= 0:
        return 0
    ratio = Decimal(str(part)) * 100 / Decimal(str(whole))
    return int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
