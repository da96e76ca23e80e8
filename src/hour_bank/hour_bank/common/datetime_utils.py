from __future__ import annotations

from calendar import monthrange
from datetime import date, datetime


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: wrapped so tests can patch it.
    """
    return datetime.now()


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last date of a month given with a zero-based index."""
    days_in_month = monthrange(year, month + 1)[1]
    return date(year, month + 1, 1), date(year, month + 1, days_in_month)
