from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Optional

from ..core.enums import DayType, PunchField


@dataclass(frozen=True)
class DailyPunchRecord:
    """Entidade de domínio: the four punches of one employee on one date.

    Punches are kept as the "HH:MM" text typed or clocked; None means unset.
    No ordering between them is validated.
    """

    employee_id: int
    work_date: date
    clock_in: Optional[str] = None
    lunch_out: Optional[str] = None
    lunch_in: Optional[str] = None
    clock_out: Optional[str] = None
    day_type: DayType = DayType.NORMAL
    # "Observações" column of the grid
    notes: Optional[str] = None

    def punch(self, field: PunchField) -> Optional[str]:
        return getattr(self, field.value)

    def with_punch(self, field: PunchField, value: Optional[str]) -> "DailyPunchRecord":
        return replace(self, **{field.value: value or None})

    def with_notes(self, notes: Optional[str]) -> "DailyPunchRecord":
        return replace(self, notes=(notes or "").strip() or None)

    def with_day_type(self, day_type: DayType) -> "DailyPunchRecord":
        return replace(self, day_type=day_type)

    @classmethod
    def empty(cls, employee_id: int, work_date: date) -> "DailyPunchRecord":
        return cls(employee_id=employee_id, work_date=work_date)


@dataclass(frozen=True)
class CalendarDay:
    """Derived, never persisted."""

    day_number: int
    weekday_name: str
    is_saturday: bool
    is_sunday: bool
    date: date
    # "{year}-{zero_based_month}-{day}"
    date_key: str


@dataclass(frozen=True)
class OvertimeSplit:
    tier1: int = 0
    tier2: int = 0

    @property
    def total(self) -> int:
        return self.tier1 + self.tier2


@dataclass(frozen=True)
class DailyComputation:
    worked_minutes: int
    expected_minutes: int
    delay_minutes: int
    overtime_tier1_minutes: int
    overtime_tier2_minutes: int
    has_short_lunch: bool = False

    @property
    def overtime_minutes(self) -> int:
        return self.overtime_tier1_minutes + self.overtime_tier2_minutes

    def without_overtime(self) -> "DailyComputation":
        return replace(self, overtime_tier1_minutes=0, overtime_tier2_minutes=0)


@dataclass(frozen=True)
class PunchReportRow:
    """Read-model para exportação: record joined with employee and category."""

    record: DailyPunchRecord
    employee_name: str
    category_name: Optional[str]
