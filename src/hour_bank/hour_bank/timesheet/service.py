from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..balance.aggregator import compute_month_days, sum_computations
from ..balance.model import MonthlyTotals
from ..balance.rule import compute_balance
from ..common.datetime_utils import now_local
from ..common.time_codec import format_minutes
from ..common.validators import require_clock_time, require_month
from ..core.enums import DayType, PunchField
from ..core.exceptions import ValidationError
from ..employees.repository import EmployeeRepository
from .calculator.base import HoursCalculator
from .calculator.standard_calculator import StandardHoursCalculator
from .calendar import generate_month_days
from .model import CalendarDay, DailyComputation, DailyPunchRecord
from .repository import PunchRepository

logger = logging.getLogger(__name__)

_PUNCH_LABELS = {
    PunchField.CLOCK_IN: "Entrada",
    PunchField.LUNCH_OUT: "Saída para almoço",
    PunchField.LUNCH_IN: "Retorno do almoço",
    PunchField.CLOCK_OUT: "Saída",
}

_DAY_TYPE_LABELS = {
    DayType.NORMAL: "Normal",
    DayType.HOLIDAY: "Fer.",
    DayType.DAY_OFF: "Folga",
    DayType.ABSENCE: "Falta",
}


@dataclass(frozen=True)
class TimesheetRow:
    day: CalendarDay
    record: DailyPunchRecord
    computation: DailyComputation

    def to_ui(self) -> dict:
        c = self.computation
        return {
            "date": self.day.date.isoformat(),
            "date_key": self.day.date_key,
            "day": self.day.day_number,
            "weekday": self.day.weekday_name,
            "is_saturday": self.day.is_saturday,
            "is_sunday": self.day.is_sunday,
            "clock_in": self.record.clock_in or "",
            "lunch_out": self.record.lunch_out or "",
            "lunch_in": self.record.lunch_in or "",
            "clock_out": self.record.clock_out or "",
            "day_type": self.record.day_type.value,
            "day_type_label": _DAY_TYPE_LABELS[self.record.day_type],
            "notes": self.record.notes or "",
            "worked": format_minutes(c.worked_minutes),
            "expected": format_minutes(c.expected_minutes),
            "delay": format_minutes(c.delay_minutes),
            "overtime": format_minutes(c.overtime_minutes),
            "short_lunch": c.has_short_lunch,
        }


@dataclass(frozen=True)
class MonthSheet:
    employee_id: int
    year: int
    month: int
    rows: list[TimesheetRow]
    totals: MonthlyTotals
    balance_minutes: int


class TimesheetService:
    """Use case: monthly timesheet (admin grid) and employee clock punches."""

    def __init__(
        self,
        punches: PunchRepository,
        employees: EmployeeRepository,
        *,
        calculator: Optional[HoursCalculator] = None,
    ):
        self._punches = punches
        self._employees = employees
        self._calculator = calculator or StandardHoursCalculator()

    def _require_employee(self, employee_id: int) -> None:
        if not self._employees.get_by_id(int(employee_id)):
            raise ValidationError("Funcionário não encontrado")

    def month_sheet(self, employee_id: int, year: int, month: int) -> MonthSheet:
        month = require_month(month)
        days = generate_month_days(int(year), month)
        records = self._punches.fetch_month_records(int(employee_id), int(year), month)

        computed = compute_month_days(days, records, employee_id=int(employee_id), calculator=self._calculator)
        totals = sum_computations((record, daily) for _, record, daily in computed)

        rows: list[TimesheetRow] = []
        for day, record, computation in computed:
            if record.day_type == DayType.HOLIDAY:
                # Holidays never show overtime.
                computation = computation.without_overtime()
            rows.append(TimesheetRow(day=day, record=record, computation=computation))

        return MonthSheet(
            employee_id=int(employee_id),
            year=int(year),
            month=month,
            rows=rows,
            totals=totals,
            balance_minutes=compute_balance(totals),
        )

    def _current_record(self, employee_id: int, work_date: date) -> DailyPunchRecord:
        return self._punches.get_for_employee_and_date(employee_id, work_date) or DailyPunchRecord.empty(
            employee_id, work_date
        )

    def update_field(self, *, employee_id: int, work_date: date, field: str, value: Optional[str]) -> DailyPunchRecord:
        """Admin edit of one cell of the grid; saved immediately (last write wins)."""

        employee_id = int(employee_id)
        self._require_employee(employee_id)
        record = self._current_record(employee_id, work_date)

        if field == "day_type":
            try:
                record = record.with_day_type(DayType.parse(value))
            except ValueError:
                raise ValidationError("Tipo de dia inválido") from None
        elif field == "notes":
            record = record.with_notes(value)
        else:
            try:
                punch = PunchField(field)
            except ValueError:
                raise ValidationError("Campo inválido") from None
            text = (value or "").strip()
            if text:
                text = require_clock_time(text, _PUNCH_LABELS[punch])
            record = record.with_punch(punch, text or None)

        return self._punches.upsert_record(record)

    def register_punch(self, *, employee_id: int, punch: PunchField, now: Optional[datetime] = None) -> DailyPunchRecord:
        """Employee clock: store the current time in the next punch slot of today."""

        now = now or now_local()
        today = now.date()
        employee_id = int(employee_id)
        self._require_employee(employee_id)

        record = self._current_record(employee_id, today)
        label = _PUNCH_LABELS[punch]
        # Saturday is a half day without lunch: only clock in and clock out.
        is_saturday = today.weekday() == 5

        if is_saturday and punch in (PunchField.LUNCH_OUT, PunchField.LUNCH_IN):
            raise ValidationError("Sábado não tem intervalo de almoço")

        if record.punch(punch):
            raise ValidationError(f"{label} já registrada hoje")

        if punch == PunchField.LUNCH_OUT and not record.clock_in:
            raise ValidationError("Registre a entrada primeiro")
        if punch == PunchField.LUNCH_IN and not record.lunch_out:
            raise ValidationError("Registre a saída para almoço primeiro")
        if punch == PunchField.CLOCK_OUT:
            required = PunchField.CLOCK_IN if is_saturday else PunchField.LUNCH_IN
            if not record.punch(required):
                raise ValidationError(f"Registre {_PUNCH_LABELS[required].lower()} primeiro")

        record = record.with_punch(punch, now.strftime("%H:%M"))
        saved = self._punches.upsert_record(record)
        logger.info(
            "punch registered",
            extra={"employee_id": employee_id, "punch": punch.value, "at": now.strftime("%H:%M")},
        )
        return saved

    def today_record(self, employee_id: int, today: date) -> DailyPunchRecord:
        return self._current_record(int(employee_id), today)
