from __future__ import annotations

from datetime import date, datetime
from typing import Optional


def parse_iso_date(value) -> Optional[date]:
    """Parse YYYY-MM-DD (or a full ISO timestamp, keeping its date part)."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(str(value).strip()[:10], "%Y-%m-%d").date()


def parse_iso_datetime(value) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    # DATETIME columns are naive.
    return parsed.replace(tzinfo=None) if parsed.tzinfo else parsed


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def default_academic_year(today: Optional[date] = None) -> str:
    year = (today or date.today()).year
    return f"{year}-{year + 1}"
