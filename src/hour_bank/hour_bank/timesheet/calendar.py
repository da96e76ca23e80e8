from __future__ import annotations

from calendar import monthrange
from datetime import date

from ..common.validators import require_month
from .model import CalendarDay

# Sunday first, like the printed timesheet.
WEEKDAY_NAMES = ("Domingo", "Segunda", "Terça", "Quarta", "Quinta", "Sexta", "Sábado")

MONTH_NAMES = (
    "JANEIRO",
    "FEVEREIRO",
    "MARÇO",
    "ABRIL",
    "MAIO",
    "JUNHO",
    "JULHO",
    "AGOSTO",
    "SETEMBRO",
    "OUTUBRO",
    "NOVEMBRO",
    "DEZEMBRO",
)


def generate_month_days(year: int, month: int) -> list[CalendarDay]:
    """Every day of a month, in order. `month` is zero-based."""

    month = require_month(month)
    days_in_month = monthrange(year, month + 1)[1]

    days: list[CalendarDay] = []
    for day in range(1, days_in_month + 1):
        current = date(year, month + 1, day)
        # date.weekday(): Monday=0 .. Sunday=6
        sunday_first = (current.weekday() + 1) % 7
        days.append(
            CalendarDay(
                day_number=day,
                weekday_name=WEEKDAY_NAMES[sunday_first],
                is_saturday=sunday_first == 6,
                is_sunday=sunday_first == 0,
                date=current,
                date_key=f"{year}-{month}-{day}",
            )
        )
    return days


def month_label(year: int, month: int) -> str:
    return f"{MONTH_NAMES[require_month(month)]}/{year}"
